"""Pagination request and page result for user listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warden.domain.user.aggregates.user import User

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Pagination:
    """A clamped ``limit``/``offset`` pair.

    Use ``Pagination.clamped`` to build one from raw client input. The
    directory trusts that instances are already within bounds.
    """

    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @classmethod
    def clamped(cls, limit: int | None = None, offset: int | None = None) -> Pagination:
        limit = DEFAULT_LIMIT if limit is None else limit
        offset = 0 if offset is None else offset
        return cls(limit=min(max(limit, 1), MAX_LIMIT), offset=max(offset, 0))


@dataclass(frozen=True)
class PaginatedUsers:
    """One page of users plus the total row count."""

    data: list[User] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total
