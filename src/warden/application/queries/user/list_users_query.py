from typing import Optional

from warden.domain.user import PaginatedUsers, Pagination, UserRepository


class ListUsersQuery:
    """Page through user profiles, newest first."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> PaginatedUsers:
        return await self._user_repo.find_all(Pagination.clamped(limit, offset))
