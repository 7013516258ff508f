"""SQLAlchemy unit of work and transaction manager."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from warden.application.ports.transaction_manager import TransactionManager
from warden.domain.shared.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Wraps one AsyncSession that is inside an open transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session


class SQLAlchemyTransactionManager(TransactionManager):
    """Runs a callable inside ``session.begin()``.

    ``session.begin()`` commits on normal exit and rolls back when the
    block raises, so the callable never needs to do either.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def run_in_transaction(
        self,
        work: Callable[[UnitOfWork], Awaitable[T]],
    ) -> T:
        async with self._session_maker() as session:
            try:
                async with session.begin():
                    return await work(SQLAlchemyUnitOfWork(session))
            except Exception:
                logger.debug("Transaction rolled back")
                raise
