"""
Vocabulary - the fixed, deduplicated token set of a corpus.

Tokens are ordered by first appearance across the documents, in document
order. The ordering is a pure function of the corpus, so the same content
always produces the same index assignment.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from portfolio_concierge.retrieval.document import Document
from portfolio_concierge.retrieval.tokenizer import tokenize


class Vocabulary:
    """
    Ordered, read-only sequence of unique tokens with O(1) index lookup.

    Build one with build_vocabulary(); the constructor is for callers that
    already have a deduplicated token sequence.
    """

    __slots__ = ("_tokens", "_index")

    def __init__(self, tokens: Iterable[str]):
        ordered = tuple(tokens)
        index = {token: i for i, token in enumerate(ordered)}
        if len(index) != len(ordered):
            raise ValueError("Vocabulary tokens must be unique")
        self._tokens = ordered
        self._index: Mapping[str, int] = MappingProxyType(index)

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def index(self) -> Mapping[str, int]:
        """Read-only token -> position mapping."""
        return self._index

    def index_of(self, token: str) -> int | None:
        """Position of token, or None if it is out of vocabulary."""
        return self._index.get(token)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self._tokens)})"


def build_vocabulary(documents: Iterable[Document]) -> Vocabulary:
    """Collect every distinct token in first-appearance order."""
    seen: dict[str, None] = {}
    for doc in documents:
        for token in tokenize(doc.text):
            seen.setdefault(token, None)
    return Vocabulary(seen)
