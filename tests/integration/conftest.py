"""Fixtures for integration tests.

Every test gets a fresh SQLite file under ``tmp_path`` with the schema
created, so tests never share rows.
"""

import pytest

from warden.infrastructure.persistence.sqlalchemy import (
    CredentialRepositorySQLAlchemy,
    SQLAlchemyTransactionManager,
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path}/warden-test.db"


@pytest.fixture
async def engine(database_url):
    engine = create_engine(database_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
def credential_repository(session_maker):
    return CredentialRepositorySQLAlchemy(session_maker)


@pytest.fixture
def user_repository(session_maker):
    return UserRepositorySQLAlchemy(session_maker)


@pytest.fixture
def transaction_manager(session_maker):
    return SQLAlchemyTransactionManager(session_maker)
