"""Authentication domain: credentials, tokens and password policy."""

from warden.domain.auth.aggregates import MIN_PASSWORD_LENGTH, Credential
from warden.domain.auth.exceptions import (
    AuthNotFoundError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidTokenError,
    WeakPasswordError,
)
from warden.domain.auth.repositories import CredentialRepository
from warden.domain.auth.services import PasswordService, TokenService
from warden.domain.auth.value_objects import Email, TokenClaims

__all__ = [
    "Credential",
    "MIN_PASSWORD_LENGTH",
    "CredentialRepository",
    "PasswordService",
    "TokenService",
    "Email",
    "TokenClaims",
    "AuthNotFoundError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidTokenError",
    "WeakPasswordError",
]
