"""User directory router."""

import logging

from fastapi import APIRouter, Query

from warden.presentation.api.dependencies import (
    CurrentPrincipal,
    ListUsersDep,
    UpdateUserDep,
)
from warden.presentation.api.pipeline.response import EnvelopedRoute
from warden.presentation.api.schemas.common import ErrorResponse, MessageResponse
from warden.presentation.api.schemas.users import UpdateUserRequest, UserListResponse

logger = logging.getLogger(__name__)

router = APIRouter(route_class=EnvelopedRoute)


@router.get(
    "",
    name="list_users",
    summary="List users (admin only)",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        403: {"model": ErrorResponse, "description": "Caller is not an admin"},
    },
)
async def list_users(
    query: ListUsersDep,
    limit: int = Query(default=10, description="Clamped to 1..100"),
    offset: int = Query(default=0, description="Clamped to >= 0"),
) -> UserListResponse:
    page = await query.execute(limit=limit, offset=offset)
    return UserListResponse.from_page(page)


@router.patch(
    "",
    name="update_user",
    summary="Update the caller's own profile",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        409: {
            "model": ErrorResponse,
            "description": "Replayed or unkeyed call when the route is idempotent",
        },
    },
)
async def update_user(
    request: UpdateUserRequest,
    principal: CurrentPrincipal,
    command: UpdateUserDep,
) -> MessageResponse:
    await command.execute(principal.id, name=request.name, role=request.role)
    logger.info("User %s updated their profile", principal.id)
    return MessageResponse(message="User updated successfully")
