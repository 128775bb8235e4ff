"""
Lead intent detection - a keyword heuristic for "this visitor wants to talk".

Operates on the raw message text (case-insensitive), not on tokens, so
phrases like "work together" and short words like "cv" are not lost to
tokenization. Performs no I/O: callers decide what to do with a lead.
"""

from __future__ import annotations

import re

LEAD_INTENT_PATTERN = re.compile(
    r"connect|hire|work together|freelance|availability|call|phone|whatsapp|email",
    re.IGNORECASE,
)


def is_lead_intent(text: str | None) -> bool:
    """True if the message looks like a contact or hiring request."""
    if not text:
        return False
    return LEAD_INTENT_PATTERN.search(text) is not None


def format_lead_message(text: str) -> str:
    """Notification body for a detected lead."""
    return f'Lead intent from site: "{text}"'
