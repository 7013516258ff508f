"""Logging configuration and request-log helpers."""

from __future__ import annotations

import logging
import sys
from typing import Mapping

from warden.infrastructure.observability.context import get_correlation_id

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SENSITIVE_FIELDS = frozenset(
    {
        "password",
        "token",
        "secret",
        "apikey",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
    },
)
REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the current request's correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(log_level: str = "INFO") -> None:
    """Configure application logging.

    Sets up console output with timestamps, correlation ids and module
    names, and quiets noisy third-party loggers.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(CorrelationIdFilter())

    logging.getLogger("warden").setLevel(level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def is_sensitive(key: str) -> bool:
    return key.lower() in SENSITIVE_FIELDS


def sanitize(values: Mapping[str, str]) -> dict[str, str]:
    """Copy ``values`` with sensitive keys redacted."""
    return {k: (REDACTED if is_sensitive(k) else v) for k, v in values.items()}
