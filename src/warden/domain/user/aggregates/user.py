"""User profile aggregate: the business identity linked to a credential."""

from __future__ import annotations

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from warden.domain.shared.exceptions import ValidationError
from warden.domain.shared.time import utc_now
from warden.domain.user.value_objects.user_role import UserRole


class User:
    """
    User aggregate root.

    Holds name and role. Each user belongs to exactly one credential via
    ``auth_id``; the credential itself is never touched from here.
    """

    def __init__(
        self,
        name: str,
        auth_id: UUID,
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = self._validated_name(name)
        if not auth_id:
            raise ValidationError("User must reference a credential")
        self._auth_id = auth_id
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @staticmethod
    def _validated_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("Name cannot be empty")
        return name.strip()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def auth_id(self) -> UUID:
        return self._auth_id

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_name(self, name: str) -> None:
        self._name = self._validated_name(name)
        self._updated_at = utc_now()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        auth_id: UUID,
        role: UserRole | None = None,
    ) -> User:
        return cls(name=name, auth_id=auth_id, role=role or UserRole.USER)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        auth_id: UUID,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            name=name,
            auth_id=auth_id,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, role={self._role.value})"
