"""Shared domain components."""

from warden.domain.shared.exceptions import (
    DomainException,
    DuplicateOperationError,
    ErrorCode,
    ForbiddenError,
    IdempotencyKeyRequiredError,
    InternalError,
    UnauthorizedError,
    ValidationError,
)
from warden.domain.shared.time import ensure_tz_aware, utc_now
from warden.domain.shared.unit_of_work import UnitOfWork

__all__ = [
    "ErrorCode",
    "DomainException",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "IdempotencyKeyRequiredError",
    "DuplicateOperationError",
    "InternalError",
    "UnitOfWork",
    "ensure_tz_aware",
    "utc_now",
]
