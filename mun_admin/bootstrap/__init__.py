"""Bootstrap wiring: process-wide configuration, store, logging and metrics."""

from mun_admin.bootstrap.conference import (
    get_app_config,
    get_conference_store,
    initialize_conference_store,
    reset_conference,
    set_app_config,
    set_conference_store,
)
from mun_admin.bootstrap.logging import configure_logging
from mun_admin.bootstrap.metrics import get_award_metrics, initialize_metrics

__all__ = [
    "configure_logging",
    "get_app_config",
    "get_award_metrics",
    "get_conference_store",
    "initialize_conference_store",
    "initialize_metrics",
    "reset_conference",
    "set_app_config",
    "set_conference_store",
]
