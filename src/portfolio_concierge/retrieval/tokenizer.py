"""
Tokenizer - text to normalized bag-of-words tokens.

A token is a maximal run of ASCII letters, lowercased, at least
MIN_TOKEN_LENGTH characters long. Everything else (digits, punctuation,
whitespace, accented letters) separates tokens.
"""

from __future__ import annotations

import re

MIN_TOKEN_LENGTH = 3

_TOKEN_PATTERN = re.compile(rf"[a-z]{{{MIN_TOKEN_LENGTH},}}")


def tokenize(text: str | None) -> list[str]:
    """
    Split text into lowercase alphabetic tokens.

    Examples:
        >>> tokenize("Series One: abstract light, 2024!")
        ['series', 'one', 'abstract', 'light']
        >>> tokenize(None)
        []
    """
    if not text:
        return []
    return _TOKEN_PATTERN.findall(text.lower())
