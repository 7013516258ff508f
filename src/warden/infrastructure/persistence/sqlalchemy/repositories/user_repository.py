"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from warden.domain.shared.time import ensure_tz_aware
from warden.domain.shared.unit_of_work import UnitOfWork
from warden.domain.user import (
    PaginatedUsers,
    Pagination,
    User,
    UserCreationFailedError,
    UserNotFoundError,
    UserRepository,
)
from warden.infrastructure.persistence.sqlalchemy.models import UserModel
from warden.infrastructure.persistence.sqlalchemy.repositories._session_scope import (
    session_scope,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create(self, user: User, uow: Optional[UnitOfWork] = None) -> User:
        model = self._map_to_model(user)
        try:
            async with session_scope(self._session_maker, uow) as session:
                session.add(model)
                await session.flush()
        except SQLAlchemyError as e:
            logger.warning("User creation failed for credential %s", user.auth_id)
            raise UserCreationFailedError(details={"reason": str(e)}) from e

        logger.info("Created user: %s", user.id)
        return user

    async def update(self, user: User) -> None:
        async with session_scope(self._session_maker) as session:
            model = await session.get(UserModel, user.id)
            if model is None:
                raise UserNotFoundError(user.id)
            self._update_model(model, user)

        logger.debug("Updated user: %s", user.id)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._find_one(stmt)

    async def find_by_auth_id(self, auth_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.auth_id == auth_id)
        return await self._find_one(stmt)

    async def find_all(self, pagination: Pagination) -> PaginatedUsers:
        count_stmt = select(func.count()).select_from(UserModel)
        page_stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .limit(pagination.limit)
            .offset(pagination.offset)
        )
        async with self._session_maker() as session:
            total = (await session.execute(count_stmt)).scalar_one()
            models = (await session.execute(page_stmt)).scalars().all()

        return PaginatedUsers(
            data=[self._map_to_domain(model) for model in models],
            total=total,
            limit=pagination.limit,
            offset=pagination.offset,
        )

    async def _find_one(self, stmt) -> Optional[User]:
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            auth_id=model.auth_id,
            role=model.role,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            auth_id=user.auth_id,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.role = user.role.value
        model.updated_at = user.updated_at
