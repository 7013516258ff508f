"""Authentication domain exceptions."""

from typing import Any

from warden.domain.shared.exceptions import DomainException, ErrorCode


class AuthNotFoundError(DomainException):
    """No credential exists for the given email or id."""

    def __init__(self, message: str = "Credential not found") -> None:
        super().__init__(message, ErrorCode.AUTH_NOT_FOUND)


class InvalidCredentialsError(DomainException):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class EmailAlreadyExistsError(DomainException):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already registered",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class WeakPasswordError(DomainException):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements") -> None:
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidTokenError(DomainException):
    """Raised when a bearer token is invalid, expired, or malformed."""

    def __init__(
        self,
        message: str = "Invalid or expired token",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_TOKEN, details)


class InvalidEmailError(DomainException):
    """Raised when email format is invalid."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Invalid email format",
            ErrorCode.VALIDATION_ERROR,
            details={"email": email},
        )
