"""
Chat session - the append-only conversation between a visitor and the bot.

One submission is handled synchronously and atomically:

    append user message -> answer once -> append bot reply
    -> check lead intent once -> dispatch at most once

The dispatcher is fire-and-forget. Whatever happens to the notification,
the transcript and the reply are already settled before dispatch is called,
and nothing it raises reaches the caller.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from portfolio_concierge.chat.intent import format_lead_message, is_lead_intent
from portfolio_concierge.core.errors import SessionBusyError
from portfolio_concierge.core.protocols import Answerer, NotificationDispatcher

logger = logging.getLogger(__name__)


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


class SessionState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class ChatMessage:
    """One line of the transcript."""

    sender: Sender
    text: str


class ChatSession:
    """
    Conversation state for a single visitor.

    Args:
        answerer: produces bot replies (usually a QueryAnswerer)
        dispatcher: receives lead notifications; None disables them
        owner_name: used in the greeting; defaults to the answerer's content
    """

    def __init__(
        self,
        answerer: Answerer,
        dispatcher: NotificationDispatcher | None = None,
        owner_name: str | None = None,
    ):
        self._answerer = answerer
        self._dispatcher = dispatcher
        self._state = SessionState.CLOSED
        self._log: list[ChatMessage] = []
        self._busy = threading.Lock()

        if owner_name is None:
            content = getattr(answerer, "content", None)
            owner_name = getattr(content, "name", None)
        if owner_name:
            self._log.append(ChatMessage(
                Sender.BOT,
                f"Hi! I can answer questions about {owner_name} and this portfolio.",
            ))

    # -----------------------------------------------------------------------
    # Widget state
    # -----------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.OPEN

    def open(self) -> None:
        self._state = SessionState.OPEN

    def close(self) -> None:
        self._state = SessionState.CLOSED

    def toggle(self) -> SessionState:
        self._state = SessionState.CLOSED if self.is_open else SessionState.OPEN
        return self._state

    # -----------------------------------------------------------------------
    # Transcript
    # -----------------------------------------------------------------------

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the transcript in chronological order."""
        return tuple(self._log)

    def submit(self, draft: str | None) -> ChatMessage | None:
        """
        Process one visitor message.

        Returns the bot reply, or None when the draft is blank.

        Raises:
            SessionBusyError: another submission is still being processed
        """
        if not draft or not draft.strip():
            return None

        if not self._busy.acquire(blocking=False):
            raise SessionBusyError("A submission is already in progress")
        try:
            text = draft.strip()
            self._log.append(ChatMessage(Sender.USER, text))
            bot_msg = ChatMessage(Sender.BOT, self._answerer.answer(text))
            self._log.append(bot_msg)

            if is_lead_intent(text):
                self._notify(format_lead_message(text))
            return bot_msg
        finally:
            self._busy.release()

    def _notify(self, message: str) -> None:
        if self._dispatcher is None:
            logger.debug("Lead intent detected, no dispatcher configured")
            return
        try:
            self._dispatcher.dispatch(message)
        except Exception:
            logger.exception("Notification dispatcher raised, ignoring")
