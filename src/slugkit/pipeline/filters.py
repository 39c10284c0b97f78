"""Token filter: stopword removal followed by case folding.

Both steps are stable: surviving tokens keep their input order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from slugkit.stopwords import is_stopword

if TYPE_CHECKING:
    from collections.abc import Iterable

    from slugkit.options import SlugOptions


def filter_tokens(tokens: Iterable[str], options: SlugOptions) -> list[str]:
    """Apply ``remove_stopwords`` and ``lowercase`` from *options*.

    Stopword removal has no floor: a title made only of stopwords
    filters down to nothing, and the caller gets an empty slug.
    """
    kept = list(tokens)
    if options.remove_stopwords:
        kept = [token for token in kept if not is_stopword(token)]
    if options.lowercase:
        kept = [token.casefold() for token in kept]
    return kept
