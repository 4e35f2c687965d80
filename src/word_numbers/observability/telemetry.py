"""
telemetry.py

PURPOSE: OpenTelemetry initialization and tracer management.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (optional)

ARCHITECTURE NOTES:
Modules call get_tracer(__name__) at import time. The API tracer is a proxy
that records nothing until init_telemetry() installs a real provider, so
tracing stays off unless settings enable it.
Uses a module-level tracer provider that can be initialized once at startup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

if TYPE_CHECKING:
    from word_numbers.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

# Global state for the tracer provider
_initialized = False
_tracer_provider: TracerProvider | None = None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Initialize OpenTelemetry tracing.

    Should be called once at application startup.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _initialized, _tracer_provider

    if _initialized:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        _initialized = True
        return

    # Create resource with service name
    resource = Resource.create({"service.name": settings.service_name})

    # Create tracer provider
    provider = TracerProvider(resource=resource)

    # Always add console exporter for visibility
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    # Add OTLP exporter if endpoint configured
    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

            otlp_exporter = OTLPSpanExporter(endpoint=settings.endpoint)
            provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
            logger.info(f"OTLP exporter configured: {settings.endpoint}")
        except ImportError:
            logger.warning(
                "OTLP exporter not available, using console only. "
                "Install with: pip install word-numbers[otlp]"
            )

    # Set as global tracer provider
    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    _initialized = True

    logger.info(f"Telemetry initialized: service={settings.service_name}")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for the given module name.

    Safe to call at import time, before init_telemetry().

    Args:
        name: Module name (typically __name__).
    """
    return trace.get_tracer(name)


def shutdown_telemetry() -> None:
    """
    Shutdown the tracer provider, flushing any pending spans.

    Safe to call even if telemetry was never initialized.
    """
    global _initialized, _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.debug("Telemetry shutdown complete")

    _tracer_provider = None
    _initialized = False
