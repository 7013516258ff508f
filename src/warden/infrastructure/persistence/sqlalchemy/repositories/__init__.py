from warden.infrastructure.persistence.sqlalchemy.repositories.credential_repository import (  # noqa: E501
    CredentialRepositorySQLAlchemy,
)
from warden.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = ["CredentialRepositorySQLAlchemy", "UserRepositorySQLAlchemy"]
