"""In-process TTL cache used when no Redis URL is configured."""

from __future__ import annotations

import asyncio
import copy
import time
from typing import Any, Callable, Optional

from warden.application.ports.ttl_cache import TTLCache


class InMemoryTTLCache(TTLCache):
    """Dict-backed cache with per-entry monotonic expiry.

    Expired entries are dropped lazily on access. State is local to the
    process, so this is only suitable for a single worker.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def get(self, key: str) -> Optional[Any]:
        async with self._lock:
            entry = self._live_entry(key)
            return copy.deepcopy(entry[0]) if entry else None

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        async with self._lock:
            expires_at = self._clock() + max(ttl_seconds, 1)
            self._entries[key] = (copy.deepcopy(value), expires_at)

    async def set_if_absent(self, key: str, value: Any, ttl_seconds: int) -> bool:
        async with self._lock:
            if self._live_entry(key) is not None:
                return False
            expires_at = self._clock() + max(ttl_seconds, 1)
            self._entries[key] = (copy.deepcopy(value), expires_at)
            return True

    async def exists(self, key: str) -> bool:
        async with self._lock:
            return self._live_entry(key) is not None

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._entries.pop(key, None)

    async def ping(self) -> bool:
        return True

    def _live_entry(self, key: str) -> Optional[tuple[Any, float]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[1] <= self._clock():
            self._entries.pop(key, None)
            return None
        return entry
