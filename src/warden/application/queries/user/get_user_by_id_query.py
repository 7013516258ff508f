from uuid import UUID

from warden.domain.user import User, UserNotFoundError, UserRepository


class GetUserByIdQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
