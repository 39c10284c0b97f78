"""Word tokenizer.

Text is segmented at Unicode default word boundaries (UAX #29), so
``Don't``, ``U.S.A`` and ``2.0`` are each one segment.  Each segment then
keeps only its word characters (letters, numbers and the combining marks
that belong to them), giving ``Dont``, ``USA`` and ``20``.  Segments with no
letter or number left are discarded.

Two characters always split words even where UAX #29 would join them:
the underscore, and the separator the slug is being built with.  Without
that, ``hello_world`` or a slug built with ``.`` would collapse into one
word when slugified a second time.
"""

from __future__ import annotations

import regex

from slugkit.options import is_word_char

_WORD_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)
_ALWAYS_SPLIT = "_"


def _has_base_char(word: str) -> bool:
    # A run made only of stray combining marks is not a word
    return any(char.isalnum() for char in word)


def _segments(text: str) -> list[str]:
    cuts = sorted({0, len(text), *(m.start() for m in _WORD_BOUNDARY.finditer(text))})
    return [text[start:end] for start, end in zip(cuts, cuts[1:])]


def tokenize(text: str, separator: str | None = None) -> list[str]:
    """Split *text* into word tokens, in input order.

    >>> tokenize("Don't stop: version 2.0")
    ['Dont', 'stop', 'version', '20']
    >>> tokenize("  ...  ")
    []
    """
    for char in _ALWAYS_SPLIT + (separator or ""):
        text = text.replace(char, " ")

    tokens: list[str] = []
    for segment in _segments(text):
        word = "".join(char for char in segment if is_word_char(char))
        if _has_base_char(word):
            tokens.append(word)
    return tokens
