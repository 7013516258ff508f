"""SQLAlchemy implementation of CredentialRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from warden.domain.auth import (
    Credential,
    CredentialRepository,
    Email,
    EmailAlreadyExistsError,
)
from warden.domain.shared.exceptions import InternalError
from warden.domain.shared.time import ensure_tz_aware
from warden.domain.shared.unit_of_work import UnitOfWork
from warden.infrastructure.persistence.sqlalchemy.models import CredentialModel
from warden.infrastructure.persistence.sqlalchemy.repositories._session_scope import (
    is_unique_violation,
    session_scope,
)

logger = logging.getLogger(__name__)


class CredentialRepositorySQLAlchemy(CredentialRepository):
    """SQLAlchemy implementation of the CredentialRepository interface."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create(
        self,
        credential: Credential,
        uow: Optional[UnitOfWork] = None,
    ) -> Credential:
        model = self._map_to_model(credential)
        try:
            async with session_scope(self._session_maker, uow) as session:
                session.add(model)
                await session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(credential.email) from e
            raise InternalError(details={"reason": str(e.orig)}) from e
        except SQLAlchemyError as e:
            raise InternalError(details={"reason": str(e)}) from e

        logger.debug("Created credential: %s", credential.id)
        return credential

    async def find_by_id(self, credential_id: UUID) -> Optional[Credential]:
        stmt = select(CredentialModel).where(CredentialModel.id == credential_id)
        return await self._find_one(stmt)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[Credential]:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = select(CredentialModel).where(CredentialModel.email == email_value)
        return await self._find_one(stmt)

    async def find_all(self) -> list[Credential]:
        stmt = select(CredentialModel).order_by(CredentialModel.created_at.desc())
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_one(self, stmt) -> Optional[Credential]:
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_domain(self, model: CredentialModel) -> Credential:
        return Credential.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, credential: Credential) -> CredentialModel:
        return CredentialModel(
            id=credential.id,
            email=credential.email,
            password_hash=credential.password_hash,
            created_at=credential.created_at,
            updated_at=credential.updated_at,
        )
