"""Bootstrap wiring for the application config and the record store.

One ConferenceStore backs every request in the process. Tests swap it with
``set_conference_store`` or drop it with ``reset_conference``.
"""

from __future__ import annotations

from mun_admin.config import AppConfig
from mun_admin.infrastructure.observability import get_component_logger
from mun_admin.infrastructure.persistence import ConferenceStore, seed_default_records

_app_config: AppConfig | None = None
_conference_store: ConferenceStore | None = None


def get_app_config() -> AppConfig:
    """Get the application config, read from the environment on first use."""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.from_environment()
    return _app_config


def set_app_config(config: AppConfig) -> None:
    """Set custom application config (testing/override)."""
    global _app_config
    _app_config = config


def get_conference_store() -> ConferenceStore:
    """Get the process-wide record store."""
    global _conference_store
    if _conference_store is None:
        _conference_store = ConferenceStore()
    return _conference_store


def set_conference_store(store: ConferenceStore) -> None:
    """Set custom record store (testing/override)."""
    global _conference_store
    _conference_store = store


async def initialize_conference_store(config: AppConfig) -> bool:
    """Seed the store with default records when enabled and still empty.

    Safe to call on every startup: a store that already holds award types
    or portfolios is left alone.

    Returns:
        True if the store was seeded.
    """
    log = get_component_logger("startup_store")
    if not config.seed_defaults:
        log.info("store_seeding_disabled")
        return False

    store = get_conference_store()
    if await store.award_types.count() or await store.portfolios.count():
        log.info("store_already_populated")
        return False

    await seed_default_records(store, config)
    return True


def reset_conference() -> None:
    """Reset config and store singletons (testing cleanup)."""
    global _app_config
    global _conference_store
    _app_config = None
    _conference_store = None
