"""
Notification Configuration

Loads dispatcher settings from environment variables.
"""

import os
from dataclasses import dataclass

from portfolio_concierge.core.errors import ConfigError

_TRUTHY = ("true", "1", "yes")


def _env_number(name: str, default: str, kind: type) -> float | int:
    """Parse a positive number from the environment or raise ConfigError."""
    raw = os.environ.get(name, default)
    try:
        value = kind(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass
class NotifyConfig:
    """Configuration for lead notifications.

    Environment Variables:
        CONCIERGE_NOTIFY_ENABLED: POST leads to the endpoint (default: true)
        CONCIERGE_NOTIFY_URL: Notify endpoint (default: http://localhost:3000/api/notify)
        CONCIERGE_NOTIFY_TIMEOUT: Per-request timeout in seconds (default: 5.0)
        CONCIERGE_NOTIFY_MAX_WORKERS: Background sender threads (default: 2)
    """

    enabled: bool = True
    endpoint_url: str = "http://localhost:3000/api/notify"
    timeout_seconds: float = 5.0
    max_workers: int = 2

    @classmethod
    def from_env(cls) -> "NotifyConfig":
        """Load config from environment variables.

        Raises:
            ConfigError: if the timeout or worker count is not a positive number
        """
        return cls(
            enabled=os.environ.get("CONCIERGE_NOTIFY_ENABLED", "true").lower() in _TRUTHY,
            endpoint_url=os.environ.get("CONCIERGE_NOTIFY_URL", "http://localhost:3000/api/notify"),
            timeout_seconds=_env_number("CONCIERGE_NOTIFY_TIMEOUT", "5.0", float),
            max_workers=_env_number("CONCIERGE_NOTIFY_MAX_WORKERS", "2", int),
        )


# Global config singleton
_config: NotifyConfig | None = None


def get_config() -> NotifyConfig:
    """Get the global notify config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = NotifyConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
