"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from portfolio.shared.telemetry.logging import get_logger, setup_logging
from portfolio.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    instrument_app,
    set_telemetry,
)
from portfolio.shared.telemetry.tracing import (
    add_span_attributes,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "instrument_app",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "set_span_error",
]
