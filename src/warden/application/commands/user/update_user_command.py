from typing import Optional
from uuid import UUID

from warden.application.queries.user.get_user_by_id_query import GetUserByIdQuery
from warden.domain.user import User, UserRepository, UserRole


class UpdateUserCommand:
    """Change the name and/or role of an existing profile."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository
        self._get_user = GetUserByIdQuery(user_repository)

    async def execute(
        self,
        user_id: UUID,
        name: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> User:
        user = await self._get_user.execute(user_id)

        if name is not None:
            user.change_name(name)
        if role is not None:
            user.change_role(role)

        await self._user_repo.update(user)
        return user
