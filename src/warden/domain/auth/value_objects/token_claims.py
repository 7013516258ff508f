"""Claims carried inside a bearer token."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from warden.domain.user.value_objects.user_role import UserRole


@dataclass(frozen=True)
class TokenClaims:
    """Identity and role embedded in a signed token.

    The payload is signed but not encrypted, so it must only ever carry
    identifiers and the role.
    """

    auth_id: UUID
    user_id: UUID
    role: UserRole
