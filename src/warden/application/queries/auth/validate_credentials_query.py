"""Check an email/password pair and return the linked user."""

import logging

from warden.domain.auth import (
    AuthNotFoundError,
    CredentialRepository,
    InvalidCredentialsError,
    PasswordService,
)
from warden.domain.shared.exceptions import InternalError
from warden.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class ValidateCredentialsQuery:
    """Validate login input.

    Decision table: unknown email fails with AuthNotFoundError, a wrong
    password with InvalidCredentialsError. A credential without a user
    profile is a broken invariant and surfaces as an internal error.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        user_repository: UserRepository,
        password_service: PasswordService,
    ):
        self._credential_repo = credential_repository
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(self, email: str, password: str) -> User:
        credential = await self._credential_repo.find_by_email(email)
        if credential is None:
            raise AuthNotFoundError

        if not self._password_service.compare(password, credential.password_hash):
            raise InvalidCredentialsError

        user = await self._user_repo.find_by_auth_id(credential.id)
        if user is None:
            logger.error("Credential %s has no user profile", credential.id)
            raise InternalError(details={"auth_id": str(credential.id)})

        return user
