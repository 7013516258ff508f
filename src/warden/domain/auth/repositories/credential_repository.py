"""Credential repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from warden.domain.auth.aggregates.credential import Credential
from warden.domain.auth.value_objects.email import Email

if TYPE_CHECKING:
    from warden.domain.shared.unit_of_work import UnitOfWork


class CredentialRepository(ABC):
    """Repository interface for Credential aggregates."""

    @abstractmethod
    async def create(
        self,
        credential: Credential,
        uow: Optional[UnitOfWork] = None,
    ) -> Credential:
        """Insert a new credential.

        Raises EmailAlreadyExistsError when the email is already taken.
        With a unit of work the insert joins the caller's transaction.
        """

    @abstractmethod
    async def find_by_id(self, credential_id: UUID) -> Optional[Credential]:
        """Find a credential by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Credential]:
        """Find a credential by its email address."""

    @abstractmethod
    async def find_all(self) -> list[Credential]:
        """List all credentials."""
