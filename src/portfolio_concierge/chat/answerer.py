"""
Query answerer - rule-first, vector-fallback replies to visitor questions.

Rules are checked in a fixed order and the first match wins:

1. contact  - email / contact / reach / connect
2. resume   - resume / cv
3. role     - role / what do you do / experience / years
4. vector   - cosine search over the corpus index

Rule patterns are plain substring searches on the lowercased query, so
"cv" also fires inside longer words. That matches the site's behaviour and
is kept as is.

answer() is total: every path ends in a string, and an unexpected
exception is logged and turned into the generic fallback.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from portfolio_concierge.content.schemas import PortfolioContent
from portfolio_concierge.core.protocols import ScoredMatch
from portfolio_concierge.observability.attributes import (
    ANSWER_QUERY,
    SPAN_ANSWER,
    answer_attributes,
)
from portfolio_concierge.observability.config import get_config
from portfolio_concierge.observability.tracer import get_tracer
from portfolio_concierge.retrieval.index import CorpusIndex
from portfolio_concierge.retrieval.ranker import rank
from portfolio_concierge.retrieval.tokenizer import tokenize
from portfolio_concierge.retrieval.vectorizer import vectorize

logger = logging.getLogger(__name__)

TOP_K = 3
MIN_SCORE = 0.05

CONTACT_PATTERN = re.compile(r"email|contact|reach|connect")
RESUME_PATTERN = re.compile(r"resume|cv")
ROLE_PATTERN = re.compile(r"role|what do you do|experience|years")

HELP_MESSAGE = "Ask about projects, roles, resume, or how to contact."
RESUME_PENDING_MESSAGE = "The resume link will be added soon."


# ---------------------------------------------------------------------------
# RESULT
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Answer:
    """A rendered reply plus how it was produced."""

    text: str
    rule: str  # "contact", "resume", "role", "help", "vector", "fallback"
    matches: tuple[ScoredMatch, ...] = ()


# ---------------------------------------------------------------------------
# ANSWERER
# ---------------------------------------------------------------------------


class QueryAnswerer:
    """
    Answers chat queries from one portfolio and its corpus index.

    Both dependencies are injected and immutable, so one answerer can be
    shared by every session built over the same content.
    """

    def __init__(self, index: CorpusIndex, content: PortfolioContent):
        self._index = index
        self._content = content

    @classmethod
    def from_content(cls, content: PortfolioContent) -> QueryAnswerer:
        """Build the index for the content and wrap both."""
        return cls(CorpusIndex.from_content(content), content)

    @property
    def index(self) -> CorpusIndex:
        return self._index

    @property
    def content(self) -> PortfolioContent:
        return self._content

    @property
    def fallback_message(self) -> str:
        return (
            f"I can answer questions about {self._content.name}, "
            "the work on this site, and how to connect."
        )

    def answer(self, query: str) -> str:
        """Reply text for a query. Never raises."""
        return self.explain(query).text

    def explain(self, query: str) -> Answer:
        """Like answer(), but also reports the rule and the ranked matches."""
        tracer = get_tracer()
        with tracer.start_span(SPAN_ANSWER) as span:
            if get_config().capture_content:
                span.set_attribute(ANSWER_QUERY, query or "")
            try:
                result = self._answer(query or "")
            except Exception as e:
                logger.exception("Answer path failed, returning fallback")
                span.record_exception(e)
                result = Answer(text=self.fallback_message, rule="fallback")

            top = result.matches[0].score if result.matches else None
            span.set_attributes(answer_attributes(result.rule, len(result.matches), top))

        logger.debug(f"Answered with rule={result.rule} matches={len(result.matches)}")
        return result

    # -----------------------------------------------------------------------
    # Rules
    # -----------------------------------------------------------------------

    def _answer(self, query: str) -> Answer:
        content = self._content
        lowered = query.lower()

        if CONTACT_PATTERN.search(lowered):
            return Answer(
                text=f"You can reach {content.name} at {content.email} or WhatsApp {content.whatsapp}.",
                rule="contact",
            )

        if RESUME_PATTERN.search(lowered):
            if content.has_resume:
                return Answer(text=f"Here is the resume: {content.resume_url}", rule="resume")
            return Answer(text=RESUME_PENDING_MESSAGE, rule="resume")

        if ROLE_PATTERN.search(lowered):
            return Answer(text=f"{content.name} works as {', '.join(content.roles)}.", rule="role")

        return self._vector_answer(lowered)

    def _vector_answer(self, lowered: str) -> Answer:
        tokens = tokenize(lowered)
        if not tokens:
            return Answer(text=HELP_MESSAGE, rule="help")

        query_vector = vectorize(tokens, self._index.vocabulary)
        ranked = rank(query_vector, self._index.entries())
        top = tuple(m for m in ranked[:TOP_K] if m.score > MIN_SCORE)
        if not top:
            return Answer(text=self.fallback_message, rule="fallback")

        names = ", ".join(self.label_for(m.id) for m in top)
        return Answer(text=f"You might be looking for: {names}.", rule="vector", matches=top)

    def label_for(self, doc_id: str) -> str:
        """Human label for a document id."""
        graphics = self._content.find_graphics(doc_id)
        if graphics is not None:
            return f"{graphics.title} (graphics)"
        video = self._content.find_video(doc_id)
        if video is not None:
            return f"{video.title} (video)"
        return "About"


# ---------------------------------------------------------------------------
# CONVENIENCE FUNCTION
# ---------------------------------------------------------------------------


def answer(query: str, index: CorpusIndex, content: PortfolioContent) -> str:
    """Answer one query without keeping an answerer around."""
    return QueryAnswerer(index, content).answer(query)
