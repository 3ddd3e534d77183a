"""Observability infrastructure: structlog setup and correlation ids."""

from mun_admin.infrastructure.observability.correlation import (
    CORRELATION_KEY,
    bind_correlation_id,
    clear_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    resolve_correlation_id,
)
from mun_admin.infrastructure.observability.logging import (
    configure_structlog,
    get_component_logger,
)

__all__: list[str] = [
    "CORRELATION_KEY",
    "bind_correlation_id",
    "clear_correlation_id",
    "configure_structlog",
    "generate_correlation_id",
    "get_component_logger",
    "get_correlation_id",
    "resolve_correlation_id",
]
