"""ASCII transliteration, applied only when ``ascii_only`` is set.

Each non-ASCII character falls into one of three buckets:

1. **Word characters** (letters, numbers, marks) are romanised with
   ``unidecode``.  ASCII letters and digits of the result are kept and
   anything else in it becomes a space, so ``"é"`` becomes ``"e"``,
   ``"ß"`` becomes ``"ss"`` and ``"½"`` becomes ``" 1 2"`` rather than
   the number twelve.
2. **Ideographs** have no reasonable phonetic mapping outside their
   language and are dropped.
3. **Everything else** (punctuation, symbols, exotic spaces) keeps its
   ASCII punctuation form when ``unidecode`` gives one, so a typographic
   apostrophe still joins ``Don’t`` into one word.  Symbols that romanise
   to letters (``"€"`` → ``"EUR"``) and characters with no form at all
   become a plain space.

The result depends only on the input and the installed ``unidecode``
tables, so the same text always yields the same ASCII.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from unidecode import unidecode

from slugkit.options import is_word_char


def _is_ideograph(char: str) -> bool:
    return "IDEOGRAPH" in unicodedata.name(char, "")


@lru_cache(maxsize=4096)
def transliterate_char(char: str) -> str:
    """Map one character to its ASCII replacement (possibly empty).

    >>> transliterate_char("ü")
    'u'
    >>> transliterate_char("中")
    ''
    """
    if char.isascii():
        return char

    ascii_form = unidecode(char)
    if not is_word_char(char):
        if ascii_form and not any(c.isalnum() for c in ascii_form):
            return ascii_form
        return " "
    if _is_ideograph(char):
        return ""
    return "".join(c if c.isalnum() else " " for c in ascii_form)


def transliterate(text: str) -> str:
    """Replace every non-ASCII character of *text* per :func:`transliterate_char`."""
    if text.isascii():
        return text
    return "".join(transliterate_char(char) for char in text)
