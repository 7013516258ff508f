from warden.domain.user.value_objects.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    PaginatedUsers,
    Pagination,
)
from warden.domain.user.value_objects.user_role import UserRole

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "PaginatedUsers",
    "Pagination",
    "UserRole",
]
