"""Unit tests for the User aggregate."""

from uuid import uuid4

import pytest

from warden.domain.shared.exceptions import ValidationError
from warden.domain.user import User, UserRole


class TestUserCreation:
    def test_role_defaults_to_user(self):
        user = User.create(name="Ada", auth_id=uuid4())

        assert user.role == UserRole.USER
        assert not user.is_admin

    def test_explicit_admin_role(self):
        user = User.create(name="Ada", auth_id=uuid4(), role=UserRole.ADMIN)

        assert user.is_admin

    def test_role_from_string(self):
        user = User(name="Ada", auth_id=uuid4(), role="ADMIN")
        assert user.role == UserRole.ADMIN

    @pytest.mark.parametrize("name", ["", "   "])
    def test_name_required(self, name):
        with pytest.raises(ValidationError):
            User.create(name=name, auth_id=uuid4())

    def test_auth_id_required(self):
        with pytest.raises(ValidationError):
            User(name="Ada", auth_id=None)  # type: ignore[arg-type]

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            User(name="Ada", auth_id=uuid4(), role="SUPERUSER")


class TestUserMutation:
    def setup_method(self):
        self.user = User.create(name="Ada", auth_id=uuid4())

    def test_change_name(self):
        before = self.user.updated_at

        self.user.change_name("  Grace ")

        assert self.user.name == "Grace"
        assert self.user.updated_at >= before

    def test_change_name_rejects_empty(self):
        with pytest.raises(ValidationError):
            self.user.change_name("")
        assert self.user.name == "Ada"

    def test_change_role(self):
        self.user.change_role(UserRole.ADMIN)
        assert self.user.is_admin

        self.user.change_role("USER")
        assert self.user.role == UserRole.USER

    def test_equality_by_id(self):
        same = User.reconstitute(
            id=self.user.id,
            name="Other",
            auth_id=self.user.auth_id,
            role=UserRole.ADMIN,
            created_at=self.user.created_at,
            updated_at=self.user.updated_at,
        )
        assert same == self.user
