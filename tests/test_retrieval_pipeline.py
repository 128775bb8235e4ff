"""
Unit Tests for the Retrieval Pipeline

Tests each pure stage on its own: tokenizer, vocabulary, vectorizer, ranker.

STAFF ENGINEER PATTERNS:
------------------------
1. Tiny hand-built corpora so expected values can be computed by hand
2. Properties (no duplicates, bounded scores, stable ties) over snapshots
3. No fixtures with hidden state
"""

import math

import numpy as np
import pytest

from portfolio_concierge.retrieval import (
    Document,
    Vocabulary,
    build_vocabulary,
    cosine_similarity,
    count_tokens,
    rank,
    tokenize,
    vectorize,
    weight_counts,
)


# ---------------------------------------------------------------------------
# TOKENIZER
# ---------------------------------------------------------------------------


class TestTokenize:
    """Test tokenization rules."""

    def test_lowercases_and_keeps_order(self):
        assert tokenize("Abstract LIGHT and Form") == ["abstract", "light", "and", "form"]

    def test_drops_short_runs(self):
        """Runs shorter than three letters are separators."""
        assert tokenize("a an the of cv") == ["the"]

    def test_digits_and_punctuation_split_tokens(self):
        assert tokenize("motion2study, rhythm!form") == ["motion", "study", "rhythm", "form"]

    def test_non_ascii_letters_are_separators(self):
        assert tokenize("café") == ["caf"]

    @pytest.mark.parametrize("text", [None, "", "   ", "12 34 !!", "ab cd"])
    def test_empty_results_never_raise(self, text):
        assert tokenize(text) == []

    def test_repeated_tokens_are_kept(self):
        assert tokenize("light light light") == ["light"] * 3


# ---------------------------------------------------------------------------
# VOCABULARY
# ---------------------------------------------------------------------------


class TestVocabulary:
    """Test vocabulary construction."""

    @pytest.fixture
    def docs(self):
        return [
            Document(id="a", text="zebra apple zebra"),
            Document(id="b", text="apple mango 42 kiwi"),
            Document(id="c", text="kiwi zebra banana"),
        ]

    def test_first_appearance_order(self, docs):
        vocab = build_vocabulary(docs)
        assert vocab.tokens == ("zebra", "apple", "mango", "kiwi", "banana")

    def test_no_duplicates_and_size_matches_distinct_tokens(self, docs):
        vocab = build_vocabulary(docs)
        distinct = {t for d in docs for t in tokenize(d.text)}
        assert len(vocab) == len(distinct)
        assert len(set(vocab)) == len(vocab)

    def test_index_lookup(self, docs):
        vocab = build_vocabulary(docs)
        assert vocab.index_of("apple") == 1
        assert vocab.index_of("missing") is None
        assert "kiwi" in vocab
        assert "missing" not in vocab

    def test_is_deterministic(self, docs):
        assert build_vocabulary(docs).tokens == build_vocabulary(list(docs)).tokens

    def test_index_is_read_only(self, docs):
        vocab = build_vocabulary(docs)
        with pytest.raises(TypeError):
            vocab.index["new"] = 99

    def test_rejects_duplicate_tokens(self):
        with pytest.raises(ValueError):
            Vocabulary(["one", "two", "one"])

    def test_empty_corpus(self):
        assert len(build_vocabulary([])) == 0


# ---------------------------------------------------------------------------
# VECTORIZER
# ---------------------------------------------------------------------------


class TestVectorizer:
    """Test term weighting."""

    @pytest.fixture
    def vocab(self):
        return Vocabulary(["light", "form", "motion"])

    def test_counts_ignore_out_of_vocabulary(self, vocab):
        counts = count_tokens(["light", "light", "unknown", "motion"], vocab)
        assert counts.tolist() == [2.0, 0.0, 1.0]

    def test_log_dampened_weights(self, vocab):
        vec = vectorize(["light", "light", "motion"], vocab)
        assert vec[0] == pytest.approx(math.log(3))
        assert vec[1] == 0.0
        assert vec[2] == pytest.approx(math.log(2))

    def test_length_matches_vocabulary(self, vocab):
        assert vectorize([], vocab).shape == (len(vocab),)
        assert vectorize(["nothing", "here"], vocab).shape == (len(vocab),)

    def test_weight_counts_keeps_zeros(self):
        assert weight_counts(np.zeros(4)).tolist() == [0.0] * 4


# ---------------------------------------------------------------------------
# RANKER
# ---------------------------------------------------------------------------


class TestCosineSimilarity:
    """Test cosine similarity and its zero-norm guard."""

    def test_identical_vectors(self):
        v = np.array([1.0, 2.0, 3.0])
        assert cosine_similarity(v, v) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity(np.array([1.0, 0.0]), np.array([0.0, 1.0])) == 0.0

    def test_zero_vector_scores_zero(self):
        zero = np.zeros(3)
        assert cosine_similarity(zero, np.array([1.0, 1.0, 0.0])) == 0.0
        assert cosine_similarity(zero, zero) == 0.0

    def test_bounded_for_non_negative_weights(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            a = np.log1p(rng.integers(0, 4, size=12).astype(float))
            b = np.log1p(rng.integers(0, 4, size=12).astype(float))
            score = cosine_similarity(a, b)
            assert 0.0 <= score <= 1.0

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError):
            cosine_similarity(np.zeros(2), np.zeros(3))


class TestRank:
    """Test ranking order."""

    def test_sorted_descending(self):
        query = np.array([1.0, 0.0])
        results = rank(query, [
            ("low", np.array([0.1, 1.0])),
            ("high", np.array([1.0, 0.0])),
            ("mid", np.array([1.0, 1.0])),
        ])
        assert [r.id for r in results] == ["high", "mid", "low"]

    def test_ties_keep_enumeration_order(self):
        """Documents with identical token multisets keep their input order."""
        docs = [
            Document(id="first", text="light form light"),
            Document(id="second", text="form light light"),
            Document(id="other", text="motion rhythm"),
        ]
        vocab = build_vocabulary(docs)
        entries = [(d.id, vectorize(tokenize(d.text), vocab)) for d in docs]

        results = rank(vectorize(["light"], vocab), entries)

        assert [r.id for r in results[:2]] == ["first", "second"]
        assert results[0].score == results[1].score

    def test_returns_every_entry(self):
        results = rank(np.zeros(2), [("a", np.ones(2)), ("b", np.ones(2))])
        assert [(r.id, r.score) for r in results] == [("a", 0.0), ("b", 0.0)]
