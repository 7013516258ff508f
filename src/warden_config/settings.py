"""Warden configuration.

Every value comes from ``Settings``, built once per process by
``get_settings``. Sources, strongest first:

- process environment
- the env file named by ``WARDEN_ENV_FILE``, else ``config/.env.dev``,
  else ``config/.env``
- field defaults

Only ``JWT_SECRET_KEY`` has no default.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator, Literal

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "WARDEN_ENV_FILE"
_ROOT_MARKERS = ("pyproject.toml", "config")


def _project_root() -> Path:
    """Nearest ancestor of this file holding ``pyproject.toml`` or ``config/``."""
    here = Path(__file__).resolve()
    for directory in here.parents:
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return Path.cwd()


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file_candidates() -> Iterator[Path]:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        yield path if path.is_absolute() else _project_root() / path
    yield get_config_dir() / ".env.dev"
    yield get_config_dir() / ".env"


def _pick_env_file() -> Path | None:
    return next((p for p in _env_file_candidates() if p.is_file()), None)


class Settings(BaseSettings):
    """Runtime configuration for the Warden service.

    Attributes
    ----------
    jwt_secret_key
        HS256 signing key. Required, never logged.
    database_url
        ``DATABASE_URL`` when set, otherwise a PostgreSQL URL composed from
        the ``POSTGRES_*`` fields. Tests point it at a SQLite file.
    redis_url
        Backing store of the idempotency ledger. Without it the ledger
        lives in process memory and is not shared between workers.
    """

    model_config = SettingsConfigDict(
        env_file=_pick_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret_key: SecretStr
    jwt_expire_hours: int = Field(default=24, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    app_name: str = "Warden"
    environment: Literal["development", "production", "test"] = "development"

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "warden"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "warden"
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("database_url", "database_url_override"),
    )

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_prefix: str = ""
    # Comma separated; empty disables CORS
    api_cors_origins: str = ""

    redis_url: str | None = None
    redis_socket_timeout: float = 5.0
    idempotency_ttl_seconds: int = Field(default=24 * 60 * 60, ge=1)
    # Lifetime of an in-flight claim on a key; bounds the lockout after a crash
    idempotency_reservation_ttl_seconds: int = Field(default=5 * 60, ge=1)

    log_level: str = "INFO"
    slow_request_threshold_ms: int = 1000

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return value or ""

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (o.strip() for o in self.api_cors_origins.split(","))
        return [o for o in origins if o]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings; fails fast when JWT_SECRET_KEY is missing."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
