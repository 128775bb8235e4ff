"""
Similarity ranker - cosine similarity over term vectors.

Zero vectors are handled by substituting 1 for a zero norm, which makes the
similarity 0 instead of a division error. Ranking uses Python's stable sort,
so documents with equal scores keep their enumeration order.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from portfolio_concierge.core.protocols import ScoredMatch


def _norm(vector: np.ndarray) -> float:
    norm = float(np.linalg.norm(vector))
    return norm or 1.0


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Calculate cosine similarity between two vectors."""
    if a.shape != b.shape:
        raise ValueError(f"Vector shapes differ: {a.shape} vs {b.shape}")
    score = float(np.dot(a, b)) / (_norm(a) * _norm(b))
    # Non-negative weights keep this in [0, 1]; clip float rounding above 1.
    return min(max(score, 0.0), 1.0)


def rank(
    query_vector: np.ndarray,
    entries: Iterable[tuple[str, np.ndarray]],
) -> list[ScoredMatch]:
    """
    Score every (id, vector) entry against the query, best first.

    Returns the full list; callers apply their own cut-off.
    """
    scored = [
        ScoredMatch(id=doc_id, score=cosine_similarity(query_vector, vector))
        for doc_id, vector in entries
    ]
    scored.sort(key=lambda match: match.score, reverse=True)
    return scored
