"""Error kinds shared by every layer.

Domain and application code raise ``DomainException`` subclasses tagged
with an ``ErrorCode``. Only the presentation layer knows which HTTP
status a code becomes.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Machine-readable error kinds returned to clients in ``error.code``."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # 401 / 403
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # 404
    NOT_FOUND = "NOT_FOUND"
    AUTH_NOT_FOUND = "AUTH_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 409
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    USER_CREATION_FAILED = "USER_CREATION_FAILED"
    DUPLICATE_OPERATION = "DUPLICATE_OPERATION"
    IDEMPOTENCY_KEY_REQUIRED = "IDEMPOTENCY_KEY_REQUIRED"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """A failure with a stable code.

    Attributes
    ----------
    message
        Text that is safe to show to the caller
    code
        Error kind, mapped to an HTTP status at the API boundary
    details
        Diagnostic context for the logs; never sent to the client
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self.code.value}: {self.message!r}, details={self.details!r})"


class ValidationError(DomainException):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class UnauthorizedError(DomainException):
    """The request carries no usable identity."""

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.UNAUTHORIZED, details)


class ForbiddenError(DomainException):
    """The principal's role is not allowed for the operation."""

    def __init__(
        self,
        message: str = "Insufficient permissions",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.FORBIDDEN, details)


class DuplicateOperationError(DomainException):
    """An idempotent operation was replayed while its ledger entry is live.

    ``previous_result`` is whatever the first call recorded and is
    returned to the caller as ``error.previousResult``.
    """

    def __init__(
        self,
        previous_result: Any = None,
        message: str = "Operation already processed",
    ):
        super().__init__(message, ErrorCode.DUPLICATE_OPERATION)
        self.previous_result = previous_result


class IdempotencyKeyRequiredError(DomainException):
    def __init__(
        self,
        message: str = "Header X-Idempotency-Key is required for this operation",
    ):
        super().__init__(message, ErrorCode.IDEMPOTENCY_KEY_REQUIRED)


class InternalError(DomainException):
    """A broken invariant or a storage fault."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, ErrorCode.INTERNAL_ERROR, details)
