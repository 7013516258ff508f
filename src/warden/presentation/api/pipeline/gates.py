"""Authentication, role and idempotency gates.

Gates run in list order before the route's own dependencies and body
parsing. Each one either returns (possibly after attaching state to the
request) or raises a DomainException that the exception handlers turn
into the error envelope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from fastapi import Request

from warden.application.queries import GetCredentialByIdQuery, ResolvePrincipalQuery
from warden.domain.auth import AuthNotFoundError, InvalidTokenError
from warden.domain.shared.exceptions import (
    DuplicateOperationError,
    ForbiddenError,
    IdempotencyKeyRequiredError,
    UnauthorizedError,
)
from warden.presentation.api.pipeline.policies import RoutePolicy

if TYPE_CHECKING:
    from warden.presentation.api.container import AppContainer

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"
IDEMPOTENCY_HEADER = "X-Idempotency-Key"

Gate = Callable[[Request, RoutePolicy, "AppContainer"], Awaitable[None]]


async def authenticate(
    request: Request,
    policy: RoutePolicy,
    container: AppContainer,
) -> None:
    """Resolve ``Authorization: Bearer <token>`` into ``request.state.principal``."""
    if not policy.requires_auth:
        return

    header = request.headers.get("Authorization")
    if not header:
        raise UnauthorizedError("Missing bearer token")

    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme != BEARER_SCHEME or not token:
        raise UnauthorizedError("Invalid authorization scheme")

    query = ResolvePrincipalQuery(
        token_service=container.token_service,
        get_credential_by_id=GetCredentialByIdQuery(container.credential_repository),
    )
    try:
        principal = await query.execute(token)
    except (InvalidTokenError, AuthNotFoundError) as e:
        raise UnauthorizedError(
            "Invalid or expired token",
            details={"reason": e.message},
        ) from e

    request.state.principal = principal


async def authorize_roles(
    request: Request,
    policy: RoutePolicy,
    container: AppContainer,
) -> None:
    if not policy.required_roles:
        return

    principal = getattr(request.state, "principal", None)
    if principal is None or principal.role not in policy.required_roles:
        raise ForbiddenError(
            details={
                "required": sorted(r.value for r in policy.required_roles),
                "actual": principal.role.value if principal else None,
            },
        )


async def check_idempotency(
    request: Request,
    policy: RoutePolicy,
    container: AppContainer,
) -> None:
    """Stop replays of an idempotent operation.

    The key is reserved before the ledger is read, so of two overlapping
    first calls only one gets through. The winner's key is left on
    ``request.state``; the route records the result or releases the
    key once the handler is done.
    """
    operation = policy.idempotency_operation
    if not operation:
        return

    client_token = request.headers.get(IDEMPOTENCY_HEADER)
    if not client_token:
        raise IdempotencyKeyRequiredError

    principal = getattr(request.state, "principal", None)
    service = container.idempotency_service
    key = service.generate_key(
        str(principal.id) if principal else None,
        operation,
        client_token,
    )

    if not await service.reserve(key):
        logger.info("Concurrent %s operation rejected", operation)
        raise DuplicateOperationError(
            previous_result=await service.get_processed_result(key),
        )

    if await service.is_processed(key):
        previous = await service.get_processed_result(key)
        await service.release(key)
        logger.info("Duplicate %s operation rejected", operation)
        raise DuplicateOperationError(previous_result=previous)

    request.state.idempotency_key = key


DEFAULT_GATES: tuple[Gate, ...] = (authenticate, authorize_roles, check_idempotency)


async def run_gates(
    request: Request,
    policy: RoutePolicy,
    container: AppContainer,
    gates: tuple[Gate, ...] = DEFAULT_GATES,
) -> None:
    for gate in gates:
        await gate(request, policy, container)
