"""Request-scoped context held in ContextVars.

The request pipeline sets these at the start of every request; log
records and error envelopes read them without parameter passing.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Optional

# Correlation id (UUID string), set by the request pipeline
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

CORRELATION_HEADERS = ("X-Correlation-ID", "X-Request-ID", "X-Trace-ID")
RESPONSE_CORRELATION_HEADER = "X-Correlation-ID"


def is_valid_correlation_id(value: Optional[str]) -> bool:
    """Return True for a syntactically valid UUID string."""
    if not value:
        return False
    try:
        uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return False
    return True


def resolve_correlation_id(headers) -> str:
    """Pick the correlation id for a request.

    The first header present among ``CORRELATION_HEADERS`` is the only
    candidate. It is echoed unchanged when it parses as a UUID; otherwise
    a fresh UUID4 is generated.
    """
    candidate = next(
        (headers.get(name) for name in CORRELATION_HEADERS if headers.get(name)),
        None,
    )
    if candidate is not None:
        candidate = candidate.strip()
        if is_valid_correlation_id(candidate):
            return candidate
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    return correlation_id_var.get()
