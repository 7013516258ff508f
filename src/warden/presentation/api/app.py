"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from warden import __version__
from warden.application.ports import TTLCache
from warden.infrastructure.observability.logging import configure_logging
from warden.infrastructure.persistence.sqlalchemy import create_tables, ping
from warden.presentation.api.container import AppContainer
from warden.presentation.api.exception_handlers import setup_exception_handlers
from warden.presentation.api.pipeline.middleware import (
    RequestPipelineMiddleware,
    default_stages,
)
from warden.presentation.api.pipeline.policies import RoutePolicy
from warden.presentation.api.routers import auth_router, users_router
from warden.presentation.api.schemas import HealthResponse
from warden_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Account registration and login.

- Passwords are hashed with bcrypt
- Login returns a signed JWT carrying `authId`, `userId` and `role`
""",
    },
    {
        "name": "Users",
        "description": "User directory. Listing is restricted to admins.",
    },
    {"name": "Health", "description": "Liveness, readiness and metrics."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    container: AppContainer = app.state.container
    logger.info("Starting %s API v%s", container.settings.app_name, API_VERSION)
    await create_tables(container.engine)
    yield
    logger.info("Shutting down %s API", container.settings.app_name)
    await container.close()


def create_app(
    settings: Settings | None = None,
    route_policies: Optional[Mapping[str, RoutePolicy]] = None,
    cache: Optional[TTLCache] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    route_policies
        Optional replacement for the per-route access policy table.
    cache
        Optional TTL cache for the idempotency ledger.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    configure_logging(settings.log_level)

    container = AppContainer.build(settings, route_policies=route_policies, cache=cache)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Authentication and authorization service.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.container = container

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Added last so it wraps everything else, CORS included
    app.add_middleware(
        RequestPipelineMiddleware,
        stages=default_stages(
            container.metrics,
            slow_threshold_ms=settings.slow_request_threshold_ms,
            production=settings.is_production,
        ),
    )

    setup_exception_handlers(app)

    prefix = settings.api_prefix
    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["Authentication"])
    app.include_router(users_router, prefix=f"{prefix}/user", tags=["Users"])

    @app.get(
        "/health",
        tags=["Health"],
        response_model=HealthResponse,
        responses={503: {"model": HealthResponse, "description": "A dependency is down"}},
    )
    async def health_check(request: Request, response: Response) -> HealthResponse:
        """Report database and cache reachability; 503 when either is down."""
        container: AppContainer = request.app.state.container
        database_ok = await ping(container.engine)
        cache_ok = await container.cache.ping()
        healthy = database_ok and cache_ok
        if not healthy:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="healthy" if healthy else "degraded",
            version=API_VERSION,
            checks={
                "database": "up" if database_ok else "down",
                "cache": "up" if cache_ok else "down",
            },
        )

    @app.get("/metrics", tags=["Health"], include_in_schema=False)
    async def metrics(request: Request) -> Response:
        body, content_type = request.app.state.container.metrics.render()
        return Response(content=body, media_type=content_type)

    return app
