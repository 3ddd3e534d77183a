"""Per-request correlation ids.

The id is stored in structlog's context variables, so every log line
emitted while one request is handled carries it, across awaits, without
explicit binding. Callers may supply their own id in the
X-Correlation-ID header; anything that does not look like an id is
replaced by a fresh one.
"""

import re
from uuid import uuid4

import structlog

CORRELATION_KEY = "correlation_id"
MAX_CORRELATION_ID_LENGTH = 64

_ACCEPTED_ID = re.compile(r"^[A-Za-z0-9._:-]+$")


def generate_correlation_id() -> str:
    """Mint a new correlation id (32 hex characters)."""
    return uuid4().hex


def resolve_correlation_id(candidate: str | None) -> str:
    """Return ``candidate`` when it is a usable id, else a new one.

    Args:
        candidate: Raw header value, possibly missing.
    """
    if (
        candidate
        and len(candidate) <= MAX_CORRELATION_ID_LENGTH
        and _ACCEPTED_ID.match(candidate)
    ):
        return candidate
    return generate_correlation_id()


def bind_correlation_id(correlation_id: str) -> None:
    """Start a fresh log context carrying ``correlation_id``."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**{CORRELATION_KEY: correlation_id})


def get_correlation_id() -> str:
    """Current correlation id, or "" outside a request."""
    return structlog.contextvars.get_contextvars().get(CORRELATION_KEY, "")


def clear_correlation_id() -> None:
    """Drop the correlation id from the log context."""
    structlog.contextvars.unbind_contextvars(CORRELATION_KEY)
