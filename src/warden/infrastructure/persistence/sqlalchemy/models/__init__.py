"""SQLAlchemy models. Importing this package registers every table."""

from warden.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from warden.infrastructure.persistence.sqlalchemy.models.credential_model import (
    CredentialModel,
)
from warden.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["Base", "CredentialModel", "TimestampMixin", "UserModel"]
