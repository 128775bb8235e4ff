"""
Core protocols defining contracts for the entire system.

All infrastructure components implement these protocols,
enabling dependency injection and easy testing.

PATTERN:
- Protocol defines the contract
- Multiple implementations possible
- Factory functions for instantiation
- Test doubles for fast unit tests

INTERVIEW TALKING POINT:
------------------------
"The retrieval engine itself is pure functions over an immutable index.
The only thing that talks to the outside world is the notification
dispatcher, and that sits behind a Protocol. Tests swap in a MagicMock,
production gets the HTTP dispatcher, and the chat flow never knows which."
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# RANKING RESULT
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoredMatch:
    """A document id with its cosine similarity to the query."""

    id: str
    score: float


# ---------------------------------------------------------------------------
# NOTIFICATION DISPATCHER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class NotificationDispatcher(Protocol):
    """
    Contract for fire-and-forget notification delivery.

    Implementations:
    - HttpNotificationDispatcher (production, POSTs to a notify endpoint)
    - LoggingNotificationDispatcher (development, logs only)

    dispatch() must return immediately and must never raise.
    """

    def dispatch(self, message: str) -> None:
        """Send a notification message without waiting for the outcome."""
        ...


# ---------------------------------------------------------------------------
# ANSWERER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class Answerer(Protocol):
    """Contract for anything that turns a chat query into a reply."""

    def answer(self, query: str) -> str:
        """Return a reply for the query. Must never raise."""
        ...
