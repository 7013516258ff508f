"""Unit tests for JWTTokenService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from warden.domain.auth import InvalidTokenError, TokenClaims
from warden.domain.user import UserRole
from warden.infrastructure.security import JWTTokenService

SECRET = "test-secret-key-for-unit-tests-only"


class TestJWTTokenService:
    """Tests for token issue/verify."""

    def setup_method(self):
        self.service = JWTTokenService(secret_key=SECRET)
        self.claims = TokenClaims(
            auth_id=uuid4(),
            user_id=uuid4(),
            role=UserRole.ADMIN,
        )

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTTokenService(secret_key="")

    def test_round_trip(self):
        token = self.service.issue(self.claims)

        assert self.service.verify(token) == self.claims

    def test_payload_shape(self):
        token = self.service.issue(self.claims)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert payload["authId"] == str(self.claims.auth_id)
        assert payload["userId"] == str(self.claims.user_id)
        assert payload["sub"] == str(self.claims.user_id)
        assert payload["role"] == "ADMIN"
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_custom_expiry(self):
        token = self.service.issue(self.claims, expires_delta=timedelta(minutes=5))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert payload["exp"] - payload["iat"] == 300

    def test_expired_token(self):
        token = self.service.issue(self.claims, expires_delta=timedelta(seconds=-10))

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify(token)

    def test_wrong_secret(self):
        other = JWTTokenService(secret_key="another-secret-key-entirely")
        token = other.issue(self.claims)

        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.verify(token)

    def test_tampered_signature(self):
        token = self.service.issue(self.claims)
        head, body, signature = token.split(".")
        flipped = signature[:-2] + ("AA" if signature[-2:] != "AA" else "BB")

        with pytest.raises(InvalidTokenError):
            self.service.verify(f"{head}.{body}.{flipped}")

    def test_garbage(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify("not.a.jwt")

    def test_missing_claims(self):
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {"role": "USER", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify(token)

    def test_unknown_role(self):
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "authId": str(uuid4()),
                "userId": str(uuid4()),
                "role": "ROOT",
                "iat": now,
                "exp": now + timedelta(hours=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify(token)

    def test_missing_exp_rejected(self):
        token = jwt.encode(
            {
                "authId": str(uuid4()),
                "userId": str(uuid4()),
                "role": "USER",
                "iat": datetime.now(tz=timezone.utc),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)
