"""Prometheus metrics for the MUN Admin API.

Every metric is registered in the collector's own registry (never the
process-global default), is prefixed ``mun_admin_`` and carries the
``service`` and ``environment`` labels.

HTTP:
    mun_admin_http_request_duration_seconds{method, endpoint}
    mun_admin_http_requests_total{method, endpoint, status}
    mun_admin_http_requests_failed_total{method, endpoint, status, error_type}

Process:
    mun_admin_uptime_seconds          computed at scrape time
    mun_admin_service_starts_total

Scoring and awards:
    mun_admin_evaluations_recorded_total
    mun_admin_auto_assign_runs_total{outcome}   outcome: assigned | conflict
    mun_admin_awards_auto_assigned_total
"""

from __future__ import annotations

import os
import threading
import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)
from prometheus_client.exposition import CONTENT_TYPE_LATEST

METRICS_CONTENT_TYPE = CONTENT_TYPE_LATEST
NAMESPACE = "mun_admin"

# Admin API calls are in-memory; anything past a second is an outlier
REQUEST_DURATION_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)

OUTCOME_ASSIGNED = "assigned"
OUTCOME_CONFLICT = "conflict"

_BASE_LABELS = ("service", "environment")


class MetricsCollector:
    """Owns a registry and the service's metric families.

    Satisfies the application's AwardMetricsProtocol structurally.

    Attributes:
        service_name: Value of the ``service`` label.
        environment: Value of the ``environment`` label.
    """

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        service_name: str | None = None,
        environment: str | None = None,
    ) -> None:
        """Create the metric families.

        Args:
            registry: Registry to use; a private one by default.
            service_name: Defaults to MUN_SERVICE_NAME, then "mun-admin-api".
            environment: Defaults to MUN_ENVIRONMENT, then "development".
        """
        self._registry = registry if registry is not None else CollectorRegistry()
        self.service_name = service_name or os.environ.get(
            "MUN_SERVICE_NAME", "mun-admin-api"
        )
        self.environment = environment or os.environ.get(
            "MUN_ENVIRONMENT", "development"
        )
        self._base = {"service": self.service_name, "environment": self.environment}
        self._started_at: float | None = None

        def family(kind, name, documentation, extra=(), **kwargs):
            return kind(
                name,
                documentation,
                labelnames=_BASE_LABELS + tuple(extra),
                namespace=NAMESPACE,
                registry=self._registry,
                **kwargs,
            )

        self._uptime = family(Gauge, "uptime_seconds", "Seconds since service start")
        self._uptime.labels(**self._base).set_function(self.uptime_seconds)
        self._starts = family(Counter, "service_starts_total", "Service starts")

        self._request_duration = family(
            Histogram,
            "http_request_duration_seconds",
            "HTTP request latency",
            extra=("method", "endpoint"),
            buckets=REQUEST_DURATION_BUCKETS,
        )
        self._requests = family(
            Counter,
            "http_requests_total",
            "HTTP requests",
            extra=("method", "endpoint", "status"),
        )
        self._failed_requests = family(
            Counter,
            "http_requests_failed_total",
            "HTTP requests answered with 4xx or 5xx",
            extra=("method", "endpoint", "status", "error_type"),
        )

        self._evaluations = family(
            Counter, "evaluations_recorded_total", "Evaluations stored"
        )
        self._auto_assign_runs = family(
            Counter,
            "auto_assign_runs_total",
            "Auto-assignment runs by outcome",
            extra=("outcome",),
        )
        self._awards_auto_assigned = family(
            Counter,
            "awards_auto_assigned_total",
            "Awards created by auto-assignment",
        )

    def get_registry(self) -> CollectorRegistry:
        return self._registry

    def record_startup(self) -> None:
        """Mark the service as started; uptime counts from now."""
        self._started_at = time.monotonic()
        self._starts.labels(**self._base).inc()

    def uptime_seconds(self) -> float:
        """Seconds since record_startup, 0.0 before it."""
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    def observe_request_duration(
        self, method: str, endpoint: str, duration: float
    ) -> None:
        self._request_duration.labels(
            **self._base, method=method, endpoint=endpoint
        ).observe(duration)

    def increment_requests(self, method: str, endpoint: str, status: str) -> None:
        self._requests.labels(
            **self._base, method=method, endpoint=endpoint, status=status
        ).inc()

    def increment_failed_requests(
        self, method: str, endpoint: str, status: str, error_type: str
    ) -> None:
        self._failed_requests.labels(
            **self._base,
            method=method,
            endpoint=endpoint,
            status=status,
            error_type=error_type,
        ).inc()

    def increment_evaluations_recorded(self) -> None:
        self._evaluations.labels(**self._base).inc()

    def increment_awards_auto_assigned(self, count: int) -> None:
        """Count a completed run and the awards it created (may be zero)."""
        self._auto_assign_runs.labels(**self._base, outcome=OUTCOME_ASSIGNED).inc()
        self._awards_auto_assigned.labels(**self._base).inc(count)

    def increment_award_assignment_conflicts(self) -> None:
        """Count a run rejected because the committee already had awards."""
        self._auto_assign_runs.labels(**self._base, outcome=OUTCOME_CONFLICT).inc()


_collector: MetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector() -> MetricsCollector:
    """Process-wide collector, created on first use."""
    global _collector
    if _collector is None:
        with _collector_lock:
            if _collector is None:
                _collector = MetricsCollector()
    return _collector


def set_metrics_collector(collector: MetricsCollector) -> None:
    """Install ``collector`` as the process-wide collector."""
    global _collector
    with _collector_lock:
        _collector = collector


def reset_metrics_collector() -> None:
    """Forget the process-wide collector (testing cleanup)."""
    global _collector
    with _collector_lock:
        _collector = None


def generate_metrics() -> bytes:
    """Exposition-format snapshot of the process-wide collector."""
    return generate_latest(get_metrics_collector().get_registry())
