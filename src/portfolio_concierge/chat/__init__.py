"""
Chat module - answering questions and spotting leads.

Exports:
- QueryAnswerer / answer(): rule-first, vector-fallback replies
- is_lead_intent() / format_lead_message(): lead heuristic
- ChatSession, ChatMessage, Sender, SessionState: conversation state
"""

from portfolio_concierge.chat.answerer import (
    MIN_SCORE,
    TOP_K,
    Answer,
    QueryAnswerer,
    answer,
)
from portfolio_concierge.chat.intent import (
    LEAD_INTENT_PATTERN,
    format_lead_message,
    is_lead_intent,
)
from portfolio_concierge.chat.session import (
    ChatMessage,
    ChatSession,
    Sender,
    SessionState,
)

__all__ = [
    # Answerer
    "MIN_SCORE",
    "TOP_K",
    "Answer",
    "QueryAnswerer",
    "answer",
    # Intent
    "LEAD_INTENT_PATTERN",
    "format_lead_message",
    "is_lead_intent",
    # Session
    "ChatMessage",
    "ChatSession",
    "Sender",
    "SessionState",
]
