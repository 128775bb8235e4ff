"""
Observability Module - OpenTelemetry tracing for the concierge.

USAGE:
------
from portfolio_concierge.observability import get_tracer, init_tracing

init_tracing()  # once at startup

tracer = get_tracer()
with tracer.start_span("concierge.answer") as span:
    # ... do work ...
    span.set_attribute("concierge.answer.rule", "vector")

Tracing is off unless CONCIERGE_TRACING_ENABLED=true and the `tracing`
extra (opentelemetry-api/sdk) is installed. Otherwise every span is a no-op.
"""

from portfolio_concierge.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from portfolio_concierge.observability.provider import (
    get_provider,
    init_tracing,
    shutdown_tracing,
)
from portfolio_concierge.observability.tracer import (
    ConciergeTracer,
    SpanHandle,
    get_tracer,
    reset_tracer,
)

__all__ = [
    # Config
    "TracingConfig",
    "get_config",
    "reset_config",
    # Provider
    "init_tracing",
    "get_provider",
    "shutdown_tracing",
    # Tracer
    "ConciergeTracer",
    "SpanHandle",
    "get_tracer",
    "reset_tracer",
]
