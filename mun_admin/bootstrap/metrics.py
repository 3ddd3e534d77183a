"""Bootstrap wiring for the Prometheus metrics collector."""

from __future__ import annotations

from mun_admin.config import AppConfig
from mun_admin.infrastructure.monitoring import (
    MetricsCollector,
    get_metrics_collector,
    set_metrics_collector,
)


def initialize_metrics(config: AppConfig) -> MetricsCollector:
    """Install a collector labelled from ``config`` and mark the start.

    Returns:
        The installed collector.
    """
    collector = MetricsCollector(
        service_name=config.service_name,
        environment=config.environment,
    )
    set_metrics_collector(collector)
    collector.record_startup()
    return collector


def get_award_metrics() -> MetricsCollector:
    """Collector handed to services as their AwardMetricsProtocol."""
    return get_metrics_collector()


__all__ = ["get_award_metrics", "initialize_metrics"]
