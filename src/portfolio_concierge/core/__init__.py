"""
Core module - shared contracts and error types.

Exports:
- ScoredMatch: ranking result
- NotificationDispatcher, Answerer: protocols
- ConciergeError, ConfigError, ContentError, SessionBusyError: exceptions
"""

from portfolio_concierge.core.protocols import (
    Answerer,
    NotificationDispatcher,
    ScoredMatch,
)
from portfolio_concierge.core.errors import (
    ConciergeError,
    ConfigError,
    ContentError,
    SessionBusyError,
)

__all__ = [
    # Protocols
    "Answerer",
    "NotificationDispatcher",
    # Results
    "ScoredMatch",
    # Errors
    "ConciergeError",
    "ConfigError",
    "ContentError",
    "SessionBusyError",
]
