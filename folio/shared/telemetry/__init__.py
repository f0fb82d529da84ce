"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from folio.shared.telemetry.logging import get_logger, setup_logging
from folio.shared.telemetry.telemetry import TelemetryConfig
from folio.shared.telemetry.tracing import (
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
]
