"""User domain exceptions."""

from typing import Any
from uuid import UUID

from warden.domain.shared.exceptions import DomainException, ErrorCode


class UserNotFoundError(DomainException):
    """User not found."""

    def __init__(self, user_id: UUID | str | None = None) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)} if user_id else None,
        )


class UserCreationFailedError(DomainException):
    """Storage rejected the new profile row."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Could not create user", ErrorCode.USER_CREATION_FAILED, details)
