"""
OpenTelemetry provider setup.

init_tracing() builds an SDK TracerProvider for the concierge and keeps it
in this module rather than installing it as the process-wide global, so
an embedding application's own provider is left alone.

Exporters:
- console: finished spans printed as JSON to stderr (default)
- otlp:    OTLP/HTTP to CONCIERGE_OTLP_ENDPOINT (needs the otlp exporter package)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from portfolio_concierge.observability.config import TracingConfig, get_config
from portfolio_concierge.observability.tracer import reset_tracer

logger = logging.getLogger(__name__)

_provider: Any = None


def init_tracing(config: TracingConfig | None = None, exporter: Any = None) -> bool:
    """
    Set up the tracer provider.

    Call once at startup. Safe to call again; later calls are no-ops.

    Args:
        config: Tracing config (uses env vars if not provided)
        exporter: SpanExporter to use instead of the configured one,
            exported synchronously (tests pass an InMemorySpanExporter)

    Returns:
        True if a provider is installed, False if disabled or unavailable
    """
    global _provider
    if _provider is not None:
        return True

    config = config or get_config()
    if not config.enabled:
        logger.debug("Tracing disabled")
        return False

    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as e:
        logger.warning(f"opentelemetry-sdk not installed, tracing disabled: {e}")
        return False

    if exporter is not None:
        processor = SimpleSpanProcessor(exporter)
    elif config.exporter == "otlp":
        try:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        except ImportError as e:
            logger.warning(f"OTLP exporter not installed, tracing disabled: {e}")
            return False
        if config.otlp_endpoint:
            processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=config.otlp_endpoint))
        else:
            processor = BatchSpanProcessor(OTLPSpanExporter())
        logger.info(f"Exporting spans over OTLP to {config.otlp_endpoint or 'default endpoint'}")
    else:
        processor = SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr))

    provider = TracerProvider(resource=Resource.create({"service.name": config.service_name}))
    provider.add_span_processor(processor)
    _provider = provider
    reset_tracer()
    return True


def get_provider() -> Any:
    """The installed provider, or None."""
    return _provider


def shutdown_tracing() -> None:
    """Flush pending spans and remove the provider."""
    global _provider
    if _provider is None:
        return

    try:
        _provider.shutdown()
    except Exception as e:
        logger.warning(f"Error shutting down tracer provider: {e}")

    _provider = None
    reset_tracer()
