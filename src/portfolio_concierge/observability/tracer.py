"""
Concierge tracer - one span type, backed by OpenTelemetry or by nothing.

The concierge only ever opens a span, sets attributes on it and records
exceptions. ConciergeTracer exposes exactly that. Without a backing
OpenTelemetry tracer every span is a SpanHandle over None, so tracing
costs nothing when it is off.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator


class SpanHandle:
    """Attribute sink for one span; does nothing when no span backs it."""

    __slots__ = ("_span",)

    def __init__(self, span: Any = None):
        self._span = span

    @property
    def is_recording(self) -> bool:
        return self._span is not None and self._span.is_recording()

    def set_attribute(self, key: str, value: Any) -> None:
        if self._span is not None:
            self._span.set_attribute(key, value)

    def set_attributes(self, attributes: dict[str, Any]) -> None:
        if self._span is not None:
            self._span.set_attributes(attributes)

    def record_exception(self, exception: Exception) -> None:
        if self._span is not None:
            self._span.record_exception(exception)


class ConciergeTracer:
    """
    Opens concierge spans.

    Args:
        otel_tracer: tracer from an SDK TracerProvider; None disables spans
    """

    def __init__(self, otel_tracer: Any = None):
        self._tracer = otel_tracer

    @property
    def enabled(self) -> bool:
        return self._tracer is not None

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[SpanHandle]:
        if self._tracer is None:
            yield SpanHandle()
            return
        with self._tracer.start_as_current_span(name, attributes=attributes) as span:
            yield SpanHandle(span)


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------

TRACER_NAME = "portfolio_concierge"

_tracer: ConciergeTracer | None = None


def get_tracer() -> ConciergeTracer:
    """
    Get the global tracer.

    Spans are recorded only once init_tracing() has installed a provider.
    If tracing is enabled but nobody called init_tracing(), it is called
    here. Otherwise a disabled tracer is returned.
    """
    global _tracer
    if _tracer is not None:
        return _tracer

    from portfolio_concierge.observability.config import get_config
    from portfolio_concierge.observability.provider import get_provider, init_tracing

    provider = get_provider()
    if provider is None:
        config = get_config()
        if config.enabled and init_tracing(config):
            provider = get_provider()

    if provider is None:
        _tracer = ConciergeTracer()
    else:
        _tracer = ConciergeTracer(provider.get_tracer(TRACER_NAME))
    return _tracer


def reset_tracer() -> None:
    """Drop the cached tracer (after provider changes, and in tests)."""
    global _tracer
    _tracer = None
