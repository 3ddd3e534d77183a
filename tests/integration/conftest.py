"""
Integration test configuration.

Each test gets a full application built by ``create_app`` with its
lifespan running. The root conftest resets the store and metrics
collector around every test.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from mun_admin.api.main import create_app
from mun_admin.config import TEST_APP_CONFIG, AppConfig


def _client(config: AppConfig) -> Iterator[TestClient]:
    with TestClient(create_app(config)) as client:
        yield client


@pytest.fixture
def api_client() -> Iterator[TestClient]:
    """Client for an empty conference."""
    yield from _client(TEST_APP_CONFIG)


@pytest.fixture
def seeded_api_client() -> Iterator[TestClient]:
    """Client for a conference seeded with the default records."""
    yield from _client(AppConfig(environment="test", log_level="WARNING"))
