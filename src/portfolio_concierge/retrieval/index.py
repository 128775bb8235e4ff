"""
Corpus index - vocabulary plus one term vector per document, built once.

Pattern: Build once at startup → share read-only → query many times.

The index owns no mutable state after construction: the vocabulary is a
frozen Vocabulary, the document vectors are numpy arrays with their
writeable flag cleared. Any number of chat sessions can search the same
index concurrently without locks, because a search only allocates its own
query vector.

INTERVIEW TALKING POINT:
------------------------
"The index is a value, not a service. You build it from a content snapshot,
and from then on every query is a pure function of that value. No cache
invalidation, no locking, no rebuild path to get wrong."
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

import numpy as np

from portfolio_concierge.core.protocols import ScoredMatch
from portfolio_concierge.observability.attributes import SPAN_INDEX_BUILD, index_attributes
from portfolio_concierge.observability.tracer import get_tracer
from portfolio_concierge.retrieval.document import Document
from portfolio_concierge.retrieval.ranker import rank
from portfolio_concierge.retrieval.tokenizer import tokenize
from portfolio_concierge.retrieval.vectorizer import vectorize
from portfolio_concierge.retrieval.vocabulary import Vocabulary, build_vocabulary

if TYPE_CHECKING:
    from portfolio_concierge.content.schemas import PortfolioContent

logger = logging.getLogger(__name__)


class CorpusIndex:
    """
    Immutable bag-of-words index over a fixed document set.

    Use CorpusIndex.build() or CorpusIndex.from_content(); both compute the
    vocabulary and every document vector exactly once.
    """

    __slots__ = ("_documents", "_vocabulary", "_vectors")

    def __init__(
        self,
        documents: Sequence[Document],
        vocabulary: Vocabulary,
        vectors: Sequence[np.ndarray],
    ):
        if len(documents) != len(vectors):
            raise ValueError("Need exactly one vector per document")
        frozen = []
        for doc, vec in zip(documents, vectors):
            if vec.shape != (len(vocabulary),):
                raise ValueError(
                    f"Vector for {doc.id!r} has shape {vec.shape}, "
                    f"expected ({len(vocabulary)},)"
                )
            vec = np.array(vec, dtype=np.float64)
            vec.flags.writeable = False
            frozen.append(vec)

        self._documents = tuple(documents)
        self._vocabulary = vocabulary
        self._vectors = tuple(frozen)

    @classmethod
    def build(cls, documents: Iterable[Document]) -> CorpusIndex:
        """Tokenize, build the vocabulary and vectorize every document."""
        documents = list(documents)
        with get_tracer().start_span(SPAN_INDEX_BUILD) as span:
            vocabulary = build_vocabulary(documents)
            vectors = [vectorize(tokenize(doc.text), vocabulary) for doc in documents]
            span.set_attributes(index_attributes(len(documents), len(vocabulary)))

        logger.info(
            f"Built corpus index: {len(documents)} documents, "
            f"{len(vocabulary)} vocabulary tokens"
        )
        return cls(documents, vocabulary, vectors)

    @classmethod
    def from_content(cls, content: PortfolioContent) -> CorpusIndex:
        """Build the index for a portfolio content snapshot."""
        from portfolio_concierge.content.portfolio import build_documents

        return cls.build(build_documents(content))

    # -----------------------------------------------------------------------
    # Read-only accessors
    # -----------------------------------------------------------------------

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def document_ids(self) -> tuple[str, ...]:
        return tuple(doc.id for doc in self._documents)

    def vector_for(self, doc_id: str) -> np.ndarray:
        """Read-only term vector of a document."""
        for doc, vec in zip(self._documents, self._vectors):
            if doc.id == doc_id:
                return vec
        raise KeyError(doc_id)

    def entries(self) -> Iterator[tuple[str, np.ndarray]]:
        """(id, vector) pairs in document order."""
        return ((doc.id, vec) for doc, vec in zip(self._documents, self._vectors))

    def __len__(self) -> int:
        return len(self._documents)

    # -----------------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------------

    def query_vector(self, query: str) -> np.ndarray:
        """Weighted term vector for a query; unknown tokens are dropped."""
        return vectorize(tokenize(query), self._vocabulary)

    def search(self, query: str) -> list[ScoredMatch]:
        """Rank every document against the query, best first."""
        return rank(self.query_vector(query), self.entries())
