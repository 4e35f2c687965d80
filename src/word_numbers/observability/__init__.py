"""
observability/__init__.py

PURPOSE: OpenTelemetry observability module for tracing.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
Tracing is opt-in:
- Spans are no-ops until init_telemetry() runs with tracing enabled
- Console output by default when enabled
- OTLP export when endpoint is configured
"""

from word_numbers.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
