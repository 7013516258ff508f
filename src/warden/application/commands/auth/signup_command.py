"""Signup: store a credential and its user profile in one transaction."""

from __future__ import annotations

import logging
from typing import Optional

from warden.application.commands.user.create_user_command import CreateUserCommand
from warden.domain.auth import (
    Credential,
    CredentialRepository,
    PasswordService,
    WeakPasswordError,
)
from warden.domain.auth.aggregates.credential import MIN_PASSWORD_LENGTH
from warden.domain.shared.unit_of_work import UnitOfWork
from warden.domain.user import User, UserRole

logger = logging.getLogger(__name__)


class SignupCommand:
    """Register a new account.

    The command only participates in the unit of work it is handed. The
    caller opens the transaction so that a failure while creating the
    profile also discards the credential.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        password_service: PasswordService,
        create_user_command: CreateUserCommand,
    ):
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._create_user = create_user_command

    async def execute(
        self,
        email: str,
        password: str,
        name: str,
        role: Optional[UserRole] = None,
        uow: Optional[UnitOfWork] = None,
    ) -> User:
        """Create the credential and the linked user.

        Parameters
        ----------
        email
            Login email, unique across all credentials
        password
            Plaintext password, checked against the policy then hashed
        name
            Display name of the new user
        role
            Role of the new user, USER when omitted
        uow
            Unit of work shared by both inserts

        Returns
        -------
        The created user

        Raises
        ------
        WeakPasswordError
            If the password fails the policy gate
        EmailAlreadyExistsError
            If the email is already registered
        UserCreationFailedError
            If the profile row could not be stored
        """
        if not self._password_service.validate_policy(password):
            msg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise WeakPasswordError(msg)

        password_hash = self._password_service.hash(password)
        credential = Credential.create(email, password_hash)
        credential = await self._credential_repo.create(credential, uow)

        user = await self._create_user.execute(
            name=name,
            auth_id=credential.id,
            role=role,
            uow=uow,
        )

        logger.info("Account registered: %s (role: %s)", user.id, user.role.value)
        return user
