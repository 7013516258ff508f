"""SQLAlchemy persistence: models, repositories and transactions."""

from warden.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
    ping,
)
from warden.infrastructure.persistence.sqlalchemy.repositories import (
    CredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from warden.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyTransactionManager,
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "CredentialRepositorySQLAlchemy",
    "SQLAlchemyTransactionManager",
    "SQLAlchemyUnitOfWork",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
    "ping",
]
