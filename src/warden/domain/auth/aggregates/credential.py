"""Credential aggregate: the email + password hash used to authenticate."""

from __future__ import annotations

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from warden.domain.auth.exceptions import WeakPasswordError
from warden.domain.auth.value_objects.email import Email
from warden.domain.shared.exceptions import ValidationError
from warden.domain.shared.time import utc_now

MIN_PASSWORD_LENGTH = 6


class Credential:
    """
    Credential aggregate root.

    Owns the login identity of an account. The plaintext password never
    reaches this object, only its hash.
    """

    def __init__(
        self,
        email: Union[str, Email],
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            raise ValidationError("Password hash cannot be empty")
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def validate_email(self) -> bool:
        return Email.is_valid(self._email.value)

    def change_password_hash(self, new_password: str, new_password_hash: str) -> None:
        """Replace the stored hash after checking the new plaintext's length.

        Parameters
        ----------
        new_password
            The new plaintext, used only for the minimum-length check
        new_password_hash
            Hash of ``new_password`` produced by the password service
        """
        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            msg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise WeakPasswordError(msg)
        if not new_password_hash:
            raise ValidationError("Password hash cannot be empty")
        self._password_hash = new_password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(cls, email: Union[str, Email], password_hash: str) -> Credential:
        return cls(email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Credential:
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Credential(id={self._id}, email={self._email.value})"
