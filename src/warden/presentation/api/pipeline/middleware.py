"""Request pipeline middleware.

The pipeline is an ordered list of stages. Each stage receives the
request and the next callable, so stages wrap one another like
decorators::

    correlation -> request logging -> metrics -> error boundary -> app
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from warden.domain.shared.exceptions import ErrorCode
from warden.infrastructure.observability.context import (
    RESPONSE_CORRELATION_HEADER,
    correlation_id_var,
    resolve_correlation_id,
)
from warden.infrastructure.observability.logging import sanitize
from warden.infrastructure.observability.metrics import RequestMetrics, endpoint_label
from warden.presentation.api.exception_handlers import build_error_response

logger = logging.getLogger(__name__)
http_logger = logging.getLogger("warden.http")

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]

UNLOGGED_PATH_PREFIXES = ("/health", "/metrics")


class CorrelationIdStage:
    """Assign the correlation id and echo it on the response."""

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        correlation_id = resolve_correlation_id(request.headers)
        token = correlation_id_var.set(correlation_id)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[RESPONSE_CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingStage:
    """Log incoming and completed requests.

    Outside production every request is logged. In production only slow
    requests and responses with status >= 400 are.
    """

    def __init__(self, slow_threshold_ms: int = 1000, production: bool = False):
        self._slow_threshold_ms = slow_threshold_ms
        self._production = production

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        path = request.url.path
        if path.startswith(UNLOGGED_PATH_PREFIXES):
            return await call_next(request)

        start = time.perf_counter()
        if not self._production:
            self._safely(self._log_incoming, request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        self._safely(self._log_completed, request, response.status_code, duration_ms)
        return response

    def _log_incoming(self, request: Request) -> None:
        http_logger.info(
            "Incoming request %s %s query=%s ip=%s agent=%s",
            request.method,
            request.url.path,
            sanitize(dict(request.query_params)),
            _client_ip(request),
            request.headers.get("user-agent", "-"),
        )

    def _log_completed(self, request: Request, status_code: int, duration_ms: float) -> None:
        slow = duration_ms >= self._slow_threshold_ms
        if self._production and not slow and status_code < 400:
            return

        principal = getattr(request.state, "principal", None)
        args = (
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            principal.id if principal else "-",
        )
        if status_code >= 500:
            http_logger.error("Request failed %s %s -> %s in %.1fms user=%s", *args)
        elif slow:
            http_logger.warning("Slow request %s %s -> %s in %.1fms user=%s", *args)
        else:
            http_logger.info("Request completed %s %s -> %s in %.1fms user=%s", *args)

    @staticmethod
    def _safely(fn, *args) -> None:
        try:
            fn(*args)
        except Exception:
            logger.warning("Request logging failed", exc_info=True)


class MetricsStage:
    """Record request count, latency and errors.

    The endpoint label is read after the app ran, once the router has put
    the matched route into the scope.
    """

    def __init__(self, metrics: RequestMetrics):
        self._metrics = metrics

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if request.url.path.startswith("/metrics"):
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        latency = time.perf_counter() - start

        try:
            endpoint = endpoint_label(request.scope)
            status_code = response.status_code
            self._metrics.record_request(endpoint, request.method, status_code, latency)
            if status_code >= 400:
                error_type = getattr(request.state, "error_code", None) or (
                    f"HTTP_{status_code}"
                )
                self._metrics.record_error(endpoint, request.method, error_type)
        except Exception:
            logger.warning("Recording request metrics failed", exc_info=True)
        return response


class ErrorBoundaryStage:
    """Turn any exception that escaped the app into a 500 envelope."""

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled exception on %s %s: %s",
                request.method,
                request.url.path,
                exc,
            )
            request.state.error_code = ErrorCode.INTERNAL_ERROR.value
            return build_error_response(
                request,
                status_code=500,
                code=ErrorCode.INTERNAL_ERROR.value,
                message="An internal error occurred",
            )


class RequestPipelineMiddleware(BaseHTTPMiddleware):
    """Run ``stages`` in order around the rest of the application."""

    def __init__(self, app: ASGIApp, stages: Sequence[Stage]):
        super().__init__(app)
        self._stages = tuple(stages)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        handler: CallNext = call_next
        for stage in reversed(self._stages):
            handler = _bind(stage, handler)
        return await handler(request)


def _bind(stage: Stage, next_handler: CallNext) -> CallNext:
    async def run(request: Request) -> Response:
        return await stage(request, next_handler)

    return run


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return request.client.host if request.client else "unknown"


def default_stages(
    metrics: RequestMetrics,
    slow_threshold_ms: int = 1000,
    production: bool = False,
) -> list[Stage]:
    return [
        CorrelationIdStage(),
        RequestLoggingStage(slow_threshold_ms, production),
        MetricsStage(metrics),
        ErrorBoundaryStage(),
    ]


__all__ = [
    "CorrelationIdStage",
    "ErrorBoundaryStage",
    "MetricsStage",
    "RequestLoggingStage",
    "RequestPipelineMiddleware",
    "default_stages",
]
