from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from warden.domain.shared.unit_of_work import UnitOfWork
from warden.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession],
    uow: Optional[UnitOfWork] = None,
) -> AsyncIterator[AsyncSession]:
    """Yield the caller's session, or a new one in its own transaction.

    With a unit of work the session is yielded untouched: no commit and no
    rollback happen here.
    """
    if uow is not None:
        if not isinstance(uow, SQLAlchemyUnitOfWork):
            msg = f"Unsupported unit of work: {type(uow).__name__}"
            raise TypeError(msg)
        yield uow.session
        return

    async with session_maker() as session, session.begin():
        yield session


def is_unique_violation(error: Exception) -> bool:
    message = str(error)
    return "UNIQUE constraint failed" in message or "unique" in message.lower()
