"""Integration tests for UserRepositorySQLAlchemy and the signup transaction."""

from datetime import timedelta
from uuid import uuid4

import pytest

from warden.application.commands import CreateUserCommand, SignupCommand
from warden.domain.auth import Credential
from warden.domain.shared.time import utc_now
from warden.domain.user import (
    Pagination,
    User,
    UserCreationFailedError,
    UserNotFoundError,
    UserRole,
)
from warden.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from warden.infrastructure.security import BcryptPasswordService

pytestmark = pytest.mark.integration


async def _credential(repo, email="a@b.com") -> Credential:
    return await repo.create(Credential.create(email, "hash"))


class TestUserRepository:
    async def test_create_and_find(self, credential_repository, user_repository):
        credential = await _credential(credential_repository)
        user = User.create(name="A", auth_id=credential.id)

        await user_repository.create(user)

        assert await user_repository.find_by_id(user.id) == user
        found = await user_repository.find_by_auth_id(credential.id)
        assert found.name == "A"
        assert found.role == UserRole.USER

    async def test_one_profile_per_credential(
        self, credential_repository, user_repository
    ):
        credential = await _credential(credential_repository)
        await user_repository.create(User.create(name="A", auth_id=credential.id))

        with pytest.raises(UserCreationFailedError):
            await user_repository.create(User.create(name="B", auth_id=credential.id))

    async def test_update(self, credential_repository, user_repository):
        credential = await _credential(credential_repository)
        user = await user_repository.create(
            User.create(name="A", auth_id=credential.id)
        )

        user.change_name("B")
        user.change_role(UserRole.ADMIN)
        await user_repository.update(user)

        stored = await user_repository.find_by_id(user.id)
        assert stored.name == "B"
        assert stored.is_admin

    async def test_update_missing(self, user_repository):
        with pytest.raises(UserNotFoundError):
            await user_repository.update(User.create(name="A", auth_id=uuid4()))


class TestUserListing:
    async def _seed(self, credential_repository, user_repository, count):
        base = utc_now()
        users = []
        for i in range(count):
            credential = await _credential(credential_repository, f"u{i}@b.com")
            user = User.reconstitute(
                id=uuid4(),
                name=f"user-{i}",
                auth_id=credential.id,
                role=UserRole.USER,
                created_at=base + timedelta(seconds=i),
                updated_at=base + timedelta(seconds=i),
            )
            users.append(await user_repository.create(user))
        return users

    async def test_newest_first_with_has_more(
        self, credential_repository, user_repository
    ):
        await self._seed(credential_repository, user_repository, 3)

        page = await user_repository.find_all(Pagination(limit=2, offset=0))

        assert page.total == 3
        assert [u.name for u in page.data] == ["user-2", "user-1"]
        assert page.has_more is True

    async def test_last_page(self, credential_repository, user_repository):
        await self._seed(credential_repository, user_repository, 3)

        page = await user_repository.find_all(Pagination(limit=2, offset=2))

        assert [u.name for u in page.data] == ["user-0"]
        assert page.has_more is False

    async def test_offset_past_end(self, credential_repository, user_repository):
        await self._seed(credential_repository, user_repository, 2)

        page = await user_repository.find_all(Pagination(limit=10, offset=50))

        assert page.data == []
        assert page.total == 2
        assert page.has_more is False

    async def test_empty(self, user_repository):
        page = await user_repository.find_all(Pagination())

        assert page.total == 0
        assert page.data == []


class _FailingUserRepository(UserRepositorySQLAlchemy):
    """Stores the profile, then fails as if a later step broke."""

    async def create(self, user, uow=None):
        await super().create(user, uow)
        raise UserCreationFailedError(details={"reason": "simulated"})


class TestSignupTransaction:
    """Credential and profile are committed together or not at all."""

    def _signup(self, credential_repository, user_repository):
        return SignupCommand(
            credential_repository=credential_repository,
            password_service=BcryptPasswordService(rounds=4),
            create_user_command=CreateUserCommand(user_repository),
        )

    async def test_commits_both(
        self, credential_repository, user_repository, transaction_manager
    ):
        command = self._signup(credential_repository, user_repository)

        user = await transaction_manager.run_in_transaction(
            lambda uow: command.execute(
                email="a@b.com", password="secret", name="A", uow=uow
            )
        )

        credential = await credential_repository.find_by_email("a@b.com")
        assert credential is not None
        assert (await user_repository.find_by_auth_id(credential.id)) == user

    async def test_profile_failure_discards_credential(
        self, session_maker, credential_repository, transaction_manager
    ):
        failing_users = _FailingUserRepository(session_maker)
        command = self._signup(credential_repository, failing_users)

        with pytest.raises(UserCreationFailedError):
            await transaction_manager.run_in_transaction(
                lambda uow: command.execute(
                    email="a@b.com", password="secret", name="A", uow=uow
                )
            )

        assert await credential_repository.find_by_email("a@b.com") is None
        assert (await failing_users.find_all(Pagination())).total == 0

    async def test_email_free_again_after_rollback(
        self, session_maker, credential_repository, user_repository, transaction_manager
    ):
        failing = self._signup(
            credential_repository, _FailingUserRepository(session_maker)
        )
        with pytest.raises(UserCreationFailedError):
            await transaction_manager.run_in_transaction(
                lambda uow: failing.execute(
                    email="a@b.com", password="secret", name="A", uow=uow
                )
            )

        command = self._signup(credential_repository, user_repository)
        user = await transaction_manager.run_in_transaction(
            lambda uow: command.execute(
                email="a@b.com", password="secret", name="A", uow=uow
            )
        )

        assert user.name == "A"
