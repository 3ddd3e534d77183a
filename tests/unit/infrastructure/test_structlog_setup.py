"""Unit tests for structured logging configuration and correlation ids."""

from collections.abc import Iterator

import pytest
import structlog

from mun_admin.infrastructure.observability import (
    CORRELATION_KEY,
    bind_correlation_id,
    clear_correlation_id,
    configure_structlog,
    generate_correlation_id,
    get_component_logger,
    get_correlation_id,
    resolve_correlation_id,
)
from mun_admin.infrastructure.observability.logging import _StampService


@pytest.fixture(autouse=True)
def clean_context() -> Iterator[None]:
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


def _processor_types() -> list[type]:
    return [type(p) for p in structlog.get_config()["processors"]]


class TestConfigureStructlog:
    def test_production_renders_json(self) -> None:
        configure_structlog(environment="production")

        assert structlog.processors.JSONRenderer in _processor_types()

    def test_development_renders_console(self) -> None:
        configure_structlog(environment="development")

        assert structlog.dev.ConsoleRenderer in _processor_types()

    def test_context_merged_first(self) -> None:
        configure_structlog(environment="test", log_level="WARNING")

        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert _StampService in _processor_types()

    def test_caching_disabled_in_tests(self) -> None:
        configure_structlog(environment="test")

        assert structlog.get_config()["cache_logger_on_first_use"] is False

    def test_component_logger_binds_context(self) -> None:
        configure_structlog(environment="test", log_level="WARNING")

        log = get_component_logger("awards", committee="UNSC")

        assert structlog.get_context(log) == {
            "component": "awards",
            "committee": "UNSC",
        }


class TestStampService:
    def test_adds_service_name(self) -> None:
        event = _StampService("mun-admin-api")(None, "info", {"event": "x"})

        assert event["service"] == "mun-admin-api"

    def test_keeps_explicit_service(self) -> None:
        event = _StampService("mun-admin-api")(
            None, "info", {"event": "x", "service": "importer"}
        )

        assert event["service"] == "importer"


class TestCorrelationId:
    def test_generated_ids_are_unique_hex(self) -> None:
        first, second = generate_correlation_id(), generate_correlation_id()

        assert first != second
        assert len(first) == 32
        int(first, 16)

    @pytest.mark.parametrize("candidate", ["req-1234", "abc.DEF:9_z"])
    def test_resolve_keeps_usable_id(self, candidate: str) -> None:
        assert resolve_correlation_id(candidate) == candidate

    @pytest.mark.parametrize(
        "candidate", [None, "", "has space", "semi;colon", "x" * 65]
    )
    def test_resolve_replaces_unusable_id(self, candidate: str | None) -> None:
        resolved = resolve_correlation_id(candidate)

        assert resolved != candidate
        assert len(resolved) == 32

    def test_bound_id_merged_into_log_entries(self) -> None:
        bind_correlation_id("abc-123")

        event = structlog.contextvars.merge_contextvars(None, "info", {"event": "x"})

        assert get_correlation_id() == "abc-123"
        assert event[CORRELATION_KEY] == "abc-123"

    def test_bind_starts_fresh_context(self) -> None:
        structlog.contextvars.bind_contextvars(stale="left over")

        bind_correlation_id("abc-123")

        assert structlog.contextvars.get_contextvars() == {CORRELATION_KEY: "abc-123"}

    def test_clear_removes_id(self) -> None:
        bind_correlation_id("abc-123")

        clear_correlation_id()

        assert get_correlation_id() == ""
