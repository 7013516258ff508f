"""TTL key/value cache port."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class TTLCache(ABC):
    """A key/value store whose entries expire after a per-key TTL.

    Values must be JSON-serializable. Expiry is the only eviction policy.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when absent or expired."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``."""

    @abstractmethod
    async def set_if_absent(self, key: str, value: Any, ttl_seconds: int) -> bool:
        """Atomically store ``value`` unless ``key`` holds a live entry.

        Returns True when this call wrote the entry. Concurrent callers on
        the same key see exactly one True.
        """

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return True when ``key`` holds a live entry."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove ``key`` if present."""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the backing store is reachable."""

    async def close(self) -> None:  # noqa: B027
        """Release connections held by the cache."""
