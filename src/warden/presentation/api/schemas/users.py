"""User directory schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from warden.domain.user import PaginatedUsers, User, UserRole
from warden.presentation.api.schemas.common import CamelModel


class UserResponse(CamelModel):
    id: UUID
    name: str
    role: UserRole
    auth_id: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            role=user.role,
            auth_id=user.auth_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PaginationMeta(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class UserListResponse(CamelModel):
    """One page of users."""

    users: list[UserResponse]
    pagination: PaginationMeta

    @classmethod
    def from_page(cls, page: PaginatedUsers) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_domain(u) for u in page.data],
            pagination=PaginationMeta(
                total=page.total,
                limit=page.limit,
                offset=page.offset,
                has_more=page.has_more,
            ),
        )


class UpdateUserRequest(CamelModel):
    """Partial update of the caller's own profile."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    role: UserRole | None = None
