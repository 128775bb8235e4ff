"""
Exception types raised by the concierge.

The retrieval path never raises to the chat UI. These errors only surface at
startup (bad content or settings) or on misuse of a session.
"""


class ConciergeError(Exception):
    """Base class for all concierge errors."""


class ContentError(ConciergeError):
    """Portfolio content could not be read or failed validation."""


class SessionBusyError(ConciergeError):
    """A chat session received a submission while one was still in flight."""


class ConfigError(ConciergeError):
    """An environment setting could not be parsed."""
