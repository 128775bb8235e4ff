"""
Retrieval module - bag-of-words cosine search over the portfolio corpus.

This module provides:
- Document: The document model
- tokenize(): text -> tokens
- Vocabulary / build_vocabulary(): stable token index
- vectorize(): tokens -> ln(1 + tf) vector
- cosine_similarity() / rank(): scoring and ordering
- CorpusIndex: everything above, built once and frozen

ARCHITECTURE:
-------------
Leaf-first: tokenizer -> vocabulary -> vectorizer -> ranker -> index.
Each layer is a pure function of the one below, so each is tested alone.
"""

# Document model
from portfolio_concierge.retrieval.document import ABOUT_DOCUMENT_ID, Document

# Pipeline stages
from portfolio_concierge.retrieval.tokenizer import MIN_TOKEN_LENGTH, tokenize
from portfolio_concierge.retrieval.vocabulary import Vocabulary, build_vocabulary
from portfolio_concierge.retrieval.vectorizer import count_tokens, vectorize, weight_counts
from portfolio_concierge.retrieval.ranker import cosine_similarity, rank

# Index
from portfolio_concierge.retrieval.index import CorpusIndex

__all__ = [
    # Document
    "ABOUT_DOCUMENT_ID",
    "Document",
    # Tokenizer
    "MIN_TOKEN_LENGTH",
    "tokenize",
    # Vocabulary
    "Vocabulary",
    "build_vocabulary",
    # Vectorizer
    "count_tokens",
    "vectorize",
    "weight_counts",
    # Ranker
    "cosine_similarity",
    "rank",
    # Index
    "CorpusIndex",
]
