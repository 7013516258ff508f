"""Success envelope and the route class that applies it.

Every route built with ``EnvelopedRoute`` runs the policy gates before
FastAPI resolves dependencies, then wraps a JSON result as::

    {"success": true, "data": <payload>,
     "meta": {"timestamp", "path", "method", "correlationId", "version"?}}
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Coroutine, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from warden.domain.shared.time import utc_now
from warden.infrastructure.observability.context import get_correlation_id
from warden.presentation.api.pipeline.gates import run_gates
from warden.presentation.api.pipeline.policies import policy_for

logger = logging.getLogger(__name__)

EXEMPT_PATH_PREFIXES = ("/health", "/metrics", "/docs", "/redoc", "/openapi.json")
_VERSION_PATTERN = re.compile(r"/(v\d+)/")


def is_exempt(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in EXEMPT_PATH_PREFIXES)


def extract_version(path: str) -> Optional[str]:
    """Return ``v1`` for ``/api/v1/user``; None when the path is unversioned."""
    match = _VERSION_PATTERN.search(path)
    return match.group(1) if match else None


def is_enveloped(payload: Any) -> bool:
    return (
        isinstance(payload, dict)
        and "success" in payload
        and "data" in payload
        and "meta" in payload
    )


def build_envelope(payload: Any, path: str, method: str) -> dict[str, Any]:
    meta: dict[str, Any] = {
        "timestamp": utc_now().isoformat(),
        "path": path,
        "method": method,
        "correlationId": get_correlation_id(),
    }
    version = extract_version(path)
    if version:
        meta["version"] = version
    return {"success": True, "data": payload, "meta": meta}


def _json_payload(response: Response) -> tuple[bool, Any]:
    """Decode a buffered JSON response body.

    Returns ``(False, None)`` for anything that is not a plain JSON body:
    streams, files, empty bodies and other media types.
    """
    content_type = response.headers.get("content-type", "")
    body = getattr(response, "body", None)
    if not body or not content_type.startswith("application/json"):
        return False, None
    try:
        return True, json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return False, None


def _rebuild(response: Response, content: Any) -> JSONResponse:
    headers = {
        k: v
        for k, v in response.headers.items()
        if k.lower() not in ("content-length", "content-type")
    }
    return JSONResponse(
        content=content,
        status_code=response.status_code,
        headers=headers,
        background=response.background,
    )


async def _record_idempotent_result(request: Request, payload: Any) -> None:
    key = getattr(request.state, "idempotency_key", None)
    if key is None:
        return
    service = request.app.state.container.idempotency_service
    try:
        await service.mark_as_processed(key, payload)
        await service.release(key)
    except Exception:
        # The operation already succeeded; failing it now would invite a retry
        logger.exception("Could not record idempotency key %s", key)


async def _forget_idempotency_key(request: Request) -> None:
    """Drop the reservation of a call that failed so the client can retry."""
    key = getattr(request.state, "idempotency_key", None)
    if key is None:
        return
    try:
        await request.app.state.container.idempotency_service.remove(key)
    except Exception:
        # Left to expire with the reservation TTL
        logger.exception("Could not release idempotency key %s", key)


class EnvelopedRoute(APIRoute):
    """APIRoute that gates access by route policy and envelopes results."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_handler = super().get_route_handler()
        route_name = self.name

        async def handler(request: Request) -> Response:
            container = request.app.state.container
            policy = policy_for(container.route_policies, route_name)
            await run_gates(request, policy, container)

            try:
                response = await original_handler(request)
            except Exception:
                await _forget_idempotency_key(request)
                raise

            has_payload, payload = _json_payload(response)
            if response.status_code < 400:
                await _record_idempotent_result(
                    request,
                    payload if has_payload else None,
                )
            else:
                await _forget_idempotency_key(request)

            path = request.url.path
            if (
                response.status_code >= 400
                or is_exempt(path)
                or not has_payload
                or is_enveloped(payload)
            ):
                return response

            return _rebuild(response, build_envelope(payload, path, request.method))

        return handler
