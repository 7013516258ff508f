"""Unit tests for BcryptPasswordService."""

import pytest

from warden.infrastructure.security import BcryptPasswordService


class TestBcryptPasswordService:
    """Tests for hashing, comparison and the password policy."""

    def setup_method(self):
        # Minimum work factor keeps the suite fast
        self.service = BcryptPasswordService(rounds=4)

    def test_hash_is_not_plaintext(self):
        hashed = self.service.hash("secret12")

        assert hashed != "secret12"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert self.service.hash("secret12") != self.service.hash("secret12")

    def test_compare_accepts_correct_password(self):
        hashed = self.service.hash("secret12")
        assert self.service.compare("secret12", hashed) is True

    def test_compare_rejects_wrong_password(self):
        hashed = self.service.hash("secret12")
        assert self.service.compare("secret13", hashed) is False

    def test_compare_with_malformed_hash_is_false(self):
        assert self.service.compare("secret12", "not-a-bcrypt-hash") is False

    def test_compare_with_none_hash_is_false(self):
        assert self.service.compare("secret12", None) is False  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("password", "expected"),
        [
            ("secret", True),
            ("12345", False),
            ("", False),
            (None, False),
            ("x" * 72, True),
            ("x" * 73, False),
            ("ü" * 36, True),
            ("ü" * 37, False),
        ],
    )
    def test_validate_policy(self, password, expected):
        assert self.service.validate_policy(password) is expected
