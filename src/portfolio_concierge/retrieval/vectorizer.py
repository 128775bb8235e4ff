"""
Vectorizer - token sequences to log-dampened term-frequency vectors.

weight(token) = ln(1 + count(token)), zero for absent tokens.

No IDF term is applied.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from portfolio_concierge.retrieval.vocabulary import Vocabulary


def count_tokens(tokens: Iterable[str], vocabulary: Vocabulary) -> np.ndarray:
    """
    Raw per-index counts. Out-of-vocabulary tokens contribute nothing.
    """
    counts = np.zeros(len(vocabulary), dtype=np.float64)
    for token in tokens:
        i = vocabulary.index_of(token)
        if i is not None:
            counts[i] += 1.0
    return counts


def weight_counts(counts: np.ndarray) -> np.ndarray:
    """Apply ln(1 + count) elementwise."""
    return np.log1p(counts)


def vectorize(tokens: Iterable[str], vocabulary: Vocabulary) -> np.ndarray:
    """Build the weighted term vector for a token sequence."""
    return weight_counts(count_tokens(tokens, vocabulary))
