"""Principal attached to a request after the authentication gate."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from warden.domain.auth.value_objects.token_claims import TokenClaims
from warden.domain.user.value_objects.user_role import UserRole


@dataclass(frozen=True)
class Principal:
    """Immutable identity of the authenticated caller.

    ``id`` is the user profile id; ``auth_id`` the credential id. Both
    come from the verified token, not from a fresh directory lookup.
    """

    id: UUID
    auth_id: UUID
    role: UserRole

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> Principal:
        return cls(id=claims.user_id, auth_id=claims.auth_id, role=claims.role)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __str__(self) -> str:
        return f"Principal({self.id}, {self.role.value})"
