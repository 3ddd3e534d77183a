"""
Pytest configuration and shared fixtures for MUN Admin tests.

Testing Standards:
- Async tests run in pytest-asyncio auto mode (see pyproject.toml)
- Route tests stub services with AsyncMock via app.dependency_overrides
- Unit tests go in tests/unit/, HTTP flows in tests/integration/
- Process-wide singletons (config, store, metrics, log context) start empty
"""

from collections.abc import Iterator

import pytest
import structlog

from mun_admin.bootstrap import reset_conference
from mun_admin.infrastructure.monitoring import reset_metrics_collector
from mun_admin.infrastructure.persistence import ConferenceStore


@pytest.fixture(autouse=True)
def isolated_process_state() -> Iterator[None]:
    """Drop bootstrap singletons and bound log context around every test."""
    reset_conference()
    reset_metrics_collector()
    structlog.contextvars.clear_contextvars()
    yield
    reset_conference()
    reset_metrics_collector()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def conference_store() -> ConferenceStore:
    """A fresh, empty in-memory store."""
    return ConferenceStore()
