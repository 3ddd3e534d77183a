"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from mun_admin.config import AppConfig
from mun_admin.infrastructure.observability import (
    configure_structlog,
    get_component_logger,
)


def configure_logging(config: AppConfig) -> None:
    """Configure structlog from the application config."""
    configure_structlog(
        environment=config.environment,
        log_level=config.log_level,
        service_name=config.service_name,
    )
    get_component_logger("startup").info(
        "structured_logging_configured",
        environment=config.environment,
        log_level=config.log_level,
    )


__all__ = ["configure_logging"]
