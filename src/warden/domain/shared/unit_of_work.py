"""Unit of work handle threaded through repository writes."""

from abc import ABC


class UnitOfWork(ABC):  # noqa: B024
    """Opaque handle to an open transaction.

    Repositories that receive one participate in the caller's transaction
    and never commit or roll back themselves. Only the code that opened
    the unit of work decides its outcome.
    """
