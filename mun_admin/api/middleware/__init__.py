"""API middleware components."""

from mun_admin.api.middleware.logging_middleware import LoggingMiddleware
from mun_admin.api.middleware.metrics_middleware import MetricsMiddleware

__all__: list[str] = [
    "LoggingMiddleware",
    "MetricsMiddleware",
]
