"""User domain: profiles, roles and paging."""

from warden.domain.user.aggregates import User
from warden.domain.user.exceptions import UserCreationFailedError, UserNotFoundError
from warden.domain.user.repositories import UserRepository
from warden.domain.user.value_objects import PaginatedUsers, Pagination, UserRole

__all__ = [
    "User",
    "UserRepository",
    "UserRole",
    "Pagination",
    "PaginatedUsers",
    "UserCreationFailedError",
    "UserNotFoundError",
]
