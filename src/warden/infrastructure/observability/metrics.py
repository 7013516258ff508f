"""Prometheus request metrics.

Each application owns its registry so several apps (tests) can live in
one process without duplicate-collector errors. Labels are bounded: the
endpoint is the matched route template, never the raw path, and unknown
HTTP methods share one label.
"""

from __future__ import annotations

from typing import Any, Mapping

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

UNMATCHED_ENDPOINT = "unmatched"
OTHER_METHOD = "OTHER"
KNOWN_METHODS = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"},
)

# 10ms .. 10s
LATENCY_BUCKETS = (0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


def endpoint_label(scope: Mapping[str, Any]) -> str:
    """Route template the router matched, e.g. ``/user/{user_id}``.

    Requests no route matched (404s, scanners) all share
    ``UNMATCHED_ENDPOINT``.
    """
    route = scope.get("route")
    return getattr(route, "path_format", None) or UNMATCHED_ENDPOINT


def method_label(method: str) -> str:
    method = method.upper()
    return method if method in KNOWN_METHODS else OTHER_METHOD


class RequestMetrics:
    """Request count, latency and error counters on a private registry."""

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry or CollectorRegistry()
        self._requests_total = Counter(
            "warden_http_requests_total",
            "Total HTTP requests",
            ["endpoint", "method", "status"],
            registry=self.registry,
        )
        self._request_duration = Histogram(
            "warden_http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["endpoint", "method"],
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )
        self._errors_total = Counter(
            "warden_http_errors_total",
            "HTTP requests that ended in an error",
            ["endpoint", "method", "error_type"],
            registry=self.registry,
        )

    def record_request(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        latency_seconds: float,
    ) -> None:
        """Count one request.

        Parameters
        ----------
        endpoint
            Already-bounded label, see ``endpoint_label``
        method
            HTTP method; anything outside ``KNOWN_METHODS`` is ``OTHER``
        """
        method = method_label(method)
        self._requests_total.labels(
            endpoint=endpoint,
            method=method,
            status=str(status_code),
        ).inc()
        self._request_duration.labels(endpoint=endpoint, method=method).observe(
            latency_seconds,
        )

    def record_error(self, endpoint: str, method: str, error_type: str) -> None:
        self._errors_total.labels(
            endpoint=endpoint,
            method=method_label(method),
            error_type=error_type,
        ).inc()

    def render(self) -> tuple[bytes, str]:
        """Return the exposition body and its content type."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
