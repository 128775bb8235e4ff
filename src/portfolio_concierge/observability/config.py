"""
Tracing Configuration

Loads tracing settings from environment variables.
Supports graceful degradation when OpenTelemetry is not installed.
"""

import os
from dataclasses import dataclass

from portfolio_concierge.core.errors import ConfigError

_TRUTHY = ("true", "1", "yes")

EXPORTERS = ("console", "otlp")


@dataclass
class TracingConfig:
    """Configuration for OpenTelemetry tracing.

    Environment Variables:
        CONCIERGE_TRACING_ENABLED: Enable tracing (default: false)
        CONCIERGE_SERVICE_NAME: Tracer/service name (default: portfolio-concierge)
        CONCIERGE_TRACE_CONTENT: Put raw visitor messages on spans (default: false)
        CONCIERGE_TRACE_EXPORTER: console or otlp (default: console)
        CONCIERGE_OTLP_ENDPOINT: OTLP/HTTP traces URL (default: exporter's own default)

    PRIVACY WARNING:
        Visitor messages can contain phone numbers and email addresses.
        Leave CONCIERGE_TRACE_CONTENT off unless the collector is trusted.
    """

    enabled: bool = False
    service_name: str = "portfolio-concierge"
    capture_content: bool = False
    exporter: str = "console"
    otlp_endpoint: str | None = None

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Load config from environment variables."""
        exporter = os.environ.get("CONCIERGE_TRACE_EXPORTER", "console").lower()
        if exporter not in EXPORTERS:
            raise ConfigError(
                f"CONCIERGE_TRACE_EXPORTER must be one of {', '.join(EXPORTERS)}, got {exporter!r}"
            )
        return cls(
            enabled=os.environ.get("CONCIERGE_TRACING_ENABLED", "false").lower() in _TRUTHY,
            service_name=os.environ.get("CONCIERGE_SERVICE_NAME", "portfolio-concierge"),
            capture_content=os.environ.get("CONCIERGE_TRACE_CONTENT", "false").lower() in _TRUTHY,
            exporter=exporter,
            otlp_endpoint=os.environ.get("CONCIERGE_OTLP_ENDPOINT") or None,
        )


# Global config singleton
_config: TracingConfig | None = None


def get_config() -> TracingConfig:
    """Get the global tracing config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = TracingConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
