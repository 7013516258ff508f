"""Per-route access policies.

Routes are looked up by their FastAPI route name. A route missing from
the table is public: no authentication, no role check, no idempotency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from warden.domain.user import UserRole


@dataclass(frozen=True)
class RoutePolicy:
    requires_auth: bool = False
    required_roles: frozenset[UserRole] = field(default_factory=frozenset)
    idempotency_operation: str | None = None


PUBLIC = RoutePolicy()

DEFAULT_ROUTE_POLICIES: Mapping[str, RoutePolicy] = {
    "signup": PUBLIC,
    "login": PUBLIC,
    "list_users": RoutePolicy(
        requires_auth=True,
        required_roles=frozenset({UserRole.ADMIN}),
    ),
    "update_user": RoutePolicy(requires_auth=True),
}


def policy_for(policies: Mapping[str, RoutePolicy], route_name: str) -> RoutePolicy:
    return policies.get(route_name, PUBLIC)
