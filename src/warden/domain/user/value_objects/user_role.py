from enum import Enum


class UserRole(str, Enum):
    """Roles a user profile can hold."""

    USER = "USER"
    ADMIN = "ADMIN"
