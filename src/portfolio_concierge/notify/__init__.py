"""
Notify module - getting lead alerts to the portfolio owner.

This module provides:
- NotifyConfig: settings loaded from the environment
- HttpNotificationDispatcher: background POST to the notify endpoint
- LoggingNotificationDispatcher: log-only stand-in
- get_notification_dispatcher(): Factory function
- handle_notify(): the endpoint's receiving handler
"""

from portfolio_concierge.notify.config import NotifyConfig, get_config, reset_config
from portfolio_concierge.notify.dispatcher import (
    HttpNotificationDispatcher,
    LoggingNotificationDispatcher,
    get_notification_dispatcher,
)
from portfolio_concierge.notify.endpoint import NotifyRequest, handle_notify

__all__ = [
    # Config
    "NotifyConfig",
    "get_config",
    "reset_config",
    # Dispatchers
    "HttpNotificationDispatcher",
    "LoggingNotificationDispatcher",
    "get_notification_dispatcher",
    # Endpoint
    "NotifyRequest",
    "handle_notify",
]
