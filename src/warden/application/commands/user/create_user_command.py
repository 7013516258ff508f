from __future__ import annotations

from typing import Optional
from uuid import UUID

from warden.domain.shared.unit_of_work import UnitOfWork
from warden.domain.user import User, UserRepository, UserRole


class CreateUserCommand:
    """Create the profile row for a freshly stored credential."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(
        self,
        name: str,
        auth_id: UUID,
        role: Optional[UserRole] = None,
        uow: Optional[UnitOfWork] = None,
    ) -> User:
        user = User.create(name=name, auth_id=auth_id, role=role)
        return await self._user_repo.create(user, uow)
