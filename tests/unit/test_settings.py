"""Unit tests for Settings."""

import pytest
from pydantic import SecretStr, ValidationError

from warden_config.settings import Settings


def _settings(**overrides) -> Settings:
    values = {"jwt_secret_key": SecretStr("unit-test-secret")}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings:
    def test_secret_is_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_secret_not_in_repr(self):
        assert "unit-test-secret" not in repr(_settings())

    def test_database_url_composed_from_postgres_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = _settings(
            postgres_user="svc",
            postgres_password=SecretStr("pw"),
            postgres_host="db",
            postgres_port=5433,
            postgres_db="auth",
        )

        assert settings.database_url == "postgresql+asyncpg://svc:pw@db:5433/auth"

    def test_database_url_override(self):
        settings = _settings(database_url="sqlite+aiosqlite:///./x.db")

        assert settings.database_url == "sqlite+aiosqlite:///./x.db"

    def test_database_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./env.db")

        assert _settings().database_url == "sqlite+aiosqlite:///./env.db"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", ""), ("api", "/api"), ("/api/v1/", "/api/v1"), (" /x ", "/x")],
    )
    def test_api_prefix_normalized(self, raw, expected):
        assert _settings(api_prefix=raw).api_prefix == expected

    def test_cors_origins(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_list(self):
        settings = _settings(api_cors_origins=["http://a.test"])

        assert settings.cors_origins == ["http://a.test"]

    def test_defaults(self, monkeypatch):
        for name in ("JWT_EXPIRE_HOURS", "BCRYPT_ROUNDS", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
        settings = _settings()

        assert settings.jwt_expire_hours == 24
        assert settings.bcrypt_rounds == 12
        assert settings.idempotency_ttl_seconds == 86400
        assert settings.slow_request_threshold_ms == 1000
        assert settings.is_production is False

    def test_production_flag(self):
        assert _settings(environment="production").is_production is True

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            _settings(environment="staging")
