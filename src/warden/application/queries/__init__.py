"""Queries: read-only operations."""

from warden.application.queries.auth import (
    GetCredentialByIdQuery,
    ResolvePrincipalQuery,
    ValidateCredentialsQuery,
)
from warden.application.queries.user import GetUserByIdQuery, ListUsersQuery

__all__ = [
    "GetCredentialByIdQuery",
    "GetUserByIdQuery",
    "ListUsersQuery",
    "ResolvePrincipalQuery",
    "ValidateCredentialsQuery",
]
