"""Transaction boundary port."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from warden.domain.shared.unit_of_work import UnitOfWork

T = TypeVar("T")


class TransactionManager(ABC):
    """Opens a unit of work and decides its outcome."""

    @abstractmethod
    async def run_in_transaction(
        self,
        work: Callable[[UnitOfWork], Awaitable[T]],
    ) -> T:
        """Run ``work`` inside one transaction.

        Commits when ``work`` returns and rolls back when it raises; the
        exception is re-raised unchanged.
        """
