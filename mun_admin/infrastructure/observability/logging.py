"""structlog setup for the API process.

Production renders one JSON object per line; every other environment uses
the console renderer (colours only in development). All entries carry the
level, an ISO timestamp, the service name and, inside a request, the
correlation id.

Example production entry:
    {"event": "awards_auto_assigned", "level": "info",
     "timestamp": "2025-03-01T09:00:00.000000Z", "service": "mun-admin-api",
     "correlation_id": "9f0c...", "committee_id": "...", "awards_created": 2}
"""

import logging

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

DEFAULT_LOG_LEVEL = "INFO"


class _StampService:
    """Processor adding the service name unless the entry already has one."""

    def __init__(self, service_name: str) -> None:
        self._service_name = service_name

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", self._service_name)
        return event_dict


def configure_structlog(
    environment: str = "production",
    log_level: str = DEFAULT_LOG_LEVEL,
    service_name: str = "mun-admin-api",
) -> None:
    """Configure structlog once at startup.

    Args:
        environment: "production", "development" or "test".
        log_level: Minimum level name; unknown names mean INFO.
        service_name: Stamped on every entry as ``service``.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _StampService(service_name),
        structlog.processors.StackInfoRenderer(),
    ]
    if environment == "production":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=environment == "development")
        )

    level = logging.getLevelName(log_level.upper())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            level if isinstance(level, int) else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # tests reconfigure between cases
        cache_logger_on_first_use=environment != "test",
    )


def get_component_logger(component: str, **context: object) -> structlog.BoundLogger:
    """Logger with ``component`` and any extra context pre-bound."""
    return structlog.get_logger().bind(component=component, **context)
