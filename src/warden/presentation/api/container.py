"""Application container.

Everything built from ``Settings`` is constructed once here and stored
on ``app.state.container``. Components receive what they need through
this object; none of them read process globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from warden.application.ports import TransactionManager, TTLCache
from warden.application.services import IdempotencyService
from warden.domain.auth import CredentialRepository, PasswordService, TokenService
from warden.domain.user import UserRepository
from warden.infrastructure.cache import InMemoryTTLCache, RedisTTLCache
from warden.infrastructure.observability.metrics import RequestMetrics
from warden.infrastructure.persistence.sqlalchemy import (
    CredentialRepositorySQLAlchemy,
    SQLAlchemyTransactionManager,
    UserRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
)
from warden.infrastructure.security import BcryptPasswordService, JWTTokenService
from warden.presentation.api.pipeline.policies import (
    DEFAULT_ROUTE_POLICIES,
    RoutePolicy,
)
from warden_config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    settings: Settings
    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]
    cache: TTLCache
    metrics: RequestMetrics
    credential_repository: CredentialRepository
    user_repository: UserRepository
    transaction_manager: TransactionManager
    password_service: PasswordService
    token_service: TokenService
    idempotency_service: IdempotencyService
    route_policies: Mapping[str, RoutePolicy] = field(
        default_factory=lambda: dict(DEFAULT_ROUTE_POLICIES),
    )

    @classmethod
    def build(
        cls,
        settings: Settings,
        route_policies: Optional[Mapping[str, RoutePolicy]] = None,
        cache: Optional[TTLCache] = None,
    ) -> AppContainer:
        engine = create_engine(settings.database_url)
        session_maker = create_session_maker(engine)

        if cache is None:
            cache = _build_cache(settings)

        return cls(
            settings=settings,
            engine=engine,
            session_maker=session_maker,
            cache=cache,
            metrics=RequestMetrics(),
            credential_repository=CredentialRepositorySQLAlchemy(session_maker),
            user_repository=UserRepositorySQLAlchemy(session_maker),
            transaction_manager=SQLAlchemyTransactionManager(session_maker),
            password_service=BcryptPasswordService(rounds=settings.bcrypt_rounds),
            token_service=JWTTokenService(
                secret_key=settings.jwt_secret_key.get_secret_value(),
                expire_hours=settings.jwt_expire_hours,
            ),
            idempotency_service=IdempotencyService(
                cache,
                default_ttl_seconds=settings.idempotency_ttl_seconds,
                reservation_ttl_seconds=settings.idempotency_reservation_ttl_seconds,
            ),
            route_policies=dict(route_policies or DEFAULT_ROUTE_POLICIES),
        )

    async def close(self) -> None:
        await self.cache.close()
        await self.engine.dispose()


def _build_cache(settings: Settings) -> TTLCache:
    if settings.redis_url:
        logger.info("Idempotency ledger backed by Redis")
        return RedisTTLCache(
            settings.redis_url,
            socket_timeout=settings.redis_socket_timeout,
        )
    logger.warning(
        "No REDIS_URL configured; idempotency ledger is in-process only",
    )
    return InMemoryTTLCache()
