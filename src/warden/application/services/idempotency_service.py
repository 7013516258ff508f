"""Idempotency ledger for unsafe operations."""

from __future__ import annotations

import logging
from typing import Any, Optional

from warden.application.ports.ttl_cache import TTLCache
from warden.domain.shared.time import utc_now

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 24
DEFAULT_RESERVATION_TTL_SECONDS = 60 * 5
KEY_PREFIX = "idempotency"
RESERVATION_PREFIX = "reservation"
ANONYMOUS_PRINCIPAL = "anonymous"


class IdempotencyService:
    """Keyed, TTL-bound record of operations already performed.

    A ledger entry is written at most once and then left to expire; a
    second write to a live key is refused, so the first result wins.

    Callers that run the operation themselves first take a short-lived
    reservation, which keeps two in-flight first calls from both running.

    Examples
    --------
    >>> key = service.generate_key(user_id, "update_user", "abc-123")
    >>> if await service.reserve(key):
    ...     try:
    ...         if not await service.is_processed(key):
    ...             await service.mark_as_processed(key, {"message": "ok"})
    ...     finally:
    ...         await service.release(key)
    """

    def __init__(
        self,
        cache: TTLCache,
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        reservation_ttl_seconds: int = DEFAULT_RESERVATION_TTL_SECONDS,
    ):
        self._cache = cache
        self._default_ttl = default_ttl_seconds
        self._reservation_ttl = reservation_ttl_seconds

    @staticmethod
    def generate_key(
        principal_id: Optional[str],
        operation: str,
        client_token: str,
    ) -> str:
        """Compose the ledger key for one (principal, operation, token) triple.

        Parts are joined with ``:``; a principal or operation that contains
        the delimiter would make keys ambiguous, so both are rejected.
        """
        principal = principal_id or ANONYMOUS_PRINCIPAL
        for part in (principal, operation):
            if ":" in part:
                msg = f"Idempotency key part must not contain ':': {part!r}"
                raise ValueError(msg)
        return f"{KEY_PREFIX}:{principal}:{operation}:{client_token}"

    @staticmethod
    def _reservation_key(key: str) -> str:
        # ledger keys all start with KEY_PREFIX, so the two never collide
        return f"{RESERVATION_PREFIX}:{key}"

    async def is_processed(self, key: str) -> bool:
        return await self._cache.exists(key)

    async def mark_as_processed(
        self,
        key: str,
        result: Any = None,
        ttl_seconds: Optional[int] = None,
    ) -> bool:
        """Record ``key`` as done unless it already is.

        Parameters
        ----------
        key
            Ledger key from ``generate_key``
        result
            JSON-serializable payload replayed to duplicate callers;
            defaults to ``{"processed": True, "timestamp": ...}``
        ttl_seconds
            Entry lifetime, the service default (24h) when omitted

        Returns
        -------
        bool
            False when a live entry already existed; it is left untouched.
        """
        value = result
        if value is None:
            value = {"processed": True, "timestamp": utc_now().isoformat()}
        written = await self._cache.set_if_absent(
            key, value, ttl_seconds or self._default_ttl
        )
        if written:
            logger.debug("Idempotency key recorded: %s", key)
        else:
            logger.warning(
                "Idempotency key already recorded, keeping first result: %s", key
            )
        return written

    async def reserve(self, key: str, ttl_seconds: Optional[int] = None) -> bool:
        """Claim ``key`` for one in-flight call.

        Returns False while another caller holds the reservation. A holder
        that dies without releasing loses it after ``ttl_seconds``
        (five minutes by default).
        """
        marker = {"reservedAt": utc_now().isoformat()}
        return await self._cache.set_if_absent(
            self._reservation_key(key),
            marker,
            ttl_seconds or self._reservation_ttl,
        )

    async def release(self, key: str) -> None:
        await self._cache.delete(self._reservation_key(key))

    async def get_processed_result(self, key: str) -> Optional[Any]:
        return await self._cache.get(key)

    async def remove(self, key: str) -> None:
        """Forget ``key`` entirely so the operation can be retried."""
        await self._cache.delete(key)
        await self.release(key)
