"""Redis-backed TTL cache."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from warden.application.ports.ttl_cache import TTLCache

logger = logging.getLogger(__name__)


class RedisTTLCache(TTLCache):
    """Thin Redis wrapper storing JSON values with ``SET ... EX``."""

    def __init__(self, redis_url: str, *, socket_timeout: float = 5.0):
        self.redis_url = redis_url
        self.client = aioredis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )

    async def get(self, key: str) -> Optional[Any]:
        cached = await self.client.get(key)
        if cached is None:
            return None
        try:
            return json.loads(cached)
        except (json.JSONDecodeError, TypeError):
            # Corrupted record - treat as not found
            logger.warning("Discarding unreadable cache entry: %s", key)
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        await self.client.set(key, json.dumps(value), ex=max(int(ttl_seconds), 1))

    async def set_if_absent(self, key: str, value: Any, ttl_seconds: int) -> bool:
        # SET NX replies None when the key already exists
        written = await self.client.set(
            key,
            json.dumps(value),
            ex=max(int(ttl_seconds), 1),
            nx=True,
        )
        return bool(written)

    async def exists(self, key: str) -> bool:
        return bool(await self.client.exists(key))

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError) as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    async def close(self) -> None:
        await self.client.aclose()
