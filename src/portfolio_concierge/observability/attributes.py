"""
Span names and attribute keys used across the concierge.
"""

from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# SPAN NAMES
# ---------------------------------------------------------------------------

SPAN_INDEX_BUILD = "concierge.index.build"
SPAN_ANSWER = "concierge.answer"
SPAN_NOTIFY_DISPATCH = "concierge.notify.dispatch"


# ---------------------------------------------------------------------------
# INDEX NAMESPACE
# ---------------------------------------------------------------------------

INDEX_DOCUMENT_COUNT = "concierge.index.document_count"
INDEX_VOCABULARY_SIZE = "concierge.index.vocabulary_size"


# ---------------------------------------------------------------------------
# ANSWER NAMESPACE
# ---------------------------------------------------------------------------

ANSWER_RULE = "concierge.answer.rule"  # "contact", "resume", "role", "vector", ...
ANSWER_MATCH_COUNT = "concierge.answer.match_count"
ANSWER_TOP_SCORE = "concierge.answer.top_score"
ANSWER_QUERY = "concierge.answer.query"  # only with CONCIERGE_TRACE_CONTENT


# ---------------------------------------------------------------------------
# NOTIFY NAMESPACE
# ---------------------------------------------------------------------------

NOTIFY_ENDPOINT = "concierge.notify.endpoint"
NOTIFY_OUTCOME = "concierge.notify.outcome"  # "delivered", "rejected", "failed"
NOTIFY_STATUS_CODE = "concierge.notify.status_code"


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------


def index_attributes(document_count: int, vocabulary_size: int) -> dict[str, Any]:
    """Attributes for the index build span."""
    return {
        INDEX_DOCUMENT_COUNT: document_count,
        INDEX_VOCABULARY_SIZE: vocabulary_size,
    }


def answer_attributes(
    rule: str,
    match_count: int = 0,
    top_score: float | None = None,
) -> dict[str, Any]:
    """Attributes describing how a query was answered."""
    attrs: dict[str, Any] = {
        ANSWER_RULE: rule,
        ANSWER_MATCH_COUNT: match_count,
    }
    if top_score is not None:
        attrs[ANSWER_TOP_SCORE] = top_score
    return attrs
