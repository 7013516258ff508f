"""User directory interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from warden.domain.user.aggregates.user import User
from warden.domain.user.value_objects.pagination import PaginatedUsers, Pagination

if TYPE_CHECKING:
    from warden.domain.shared.unit_of_work import UnitOfWork


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def create(self, user: User, uow: Optional[UnitOfWork] = None) -> User:
        """Insert a new user; storage failures raise UserCreationFailedError."""

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist a changed name or role."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_auth_id(self, auth_id: UUID) -> Optional[User]:
        """Find the user linked to a credential."""

    @abstractmethod
    async def find_all(self, pagination: Pagination) -> PaginatedUsers:
        """Return one page of users, most recently created first."""
