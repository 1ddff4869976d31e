"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from hradmin.shared.telemetry.logging import setup_logging
from hradmin.shared.telemetry.tracing import add_span_event, traced

__all__ = [
    "setup_logging",
    "traced",
    "add_span_event",
]
