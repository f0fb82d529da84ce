"""Tests for logging setup and the tracing decorator."""

import logging

import pytest

from folio.shared.telemetry import TelemetryConfig, get_logger, setup_logging, traced


def test_disabled_telemetry_sets_no_provider() -> None:
    config = TelemetryConfig("folio", "1.0.0", enabled=False)
    assert config.setup_telemetry() is None
    assert config.tracer_provider is None
    config.shutdown()


def test_setup_logging_keeps_httpx_quiet(settings_env) -> None:
    setup_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
    assert get_logger("folio.test").name == "folio.test"


async def test_traced_async_returns_result_and_reraises() -> None:
    @traced("test.async")
    async def ok(collection: str) -> str:
        return collection.upper()

    @traced()
    async def boom() -> None:
        raise RuntimeError("x")

    assert await ok(collection="projects") == "PROJECTS"
    with pytest.raises(RuntimeError):
        await boom()


def test_traced_sync_keeps_metadata() -> None:
    @traced()
    def add(a: int, b: int) -> int:
        """Add."""
        return a + b

    assert add(1, b=2) == 3
    assert add.__name__ == "add"
    assert add.__doc__ == "Add."
