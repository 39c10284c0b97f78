"""Fixed English stopword list used by the filter stage.

This is a literal list of filler words, not a linguistic model.
"""

from __future__ import annotations

STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for",
        "from", "has", "have", "he", "in", "is", "it", "its", "of", "on",
        "that", "the", "they", "this", "to", "was", "will", "with",
    }
)


def is_stopword(token: str) -> bool:
    """Case-insensitive membership test against :data:`STOPWORDS`."""
    return token.casefold() in STOPWORDS


__all__ = ["STOPWORDS", "is_stopword"]
