"""Join tokens into the final slug and enforce ``max_length``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def assemble(
    tokens: Sequence[str],
    separator: str = "-",
    max_length: int | None = None,
) -> str:
    """Join *tokens* with *separator*, truncating at token boundaries.

    When the joined slug is longer than *max_length* characters, tokens
    are taken from the front for as long as the running length (separators
    included) still fits.  A token is never cut in half, so a first token
    longer than the limit yields ``""``.

    >>> assemble(["this", "is", "a", "very", "long", "title"], "-", 10)
    'this-is-a'
    """
    slug = separator.join(tokens)
    if max_length is None or len(slug) <= max_length:
        return slug

    kept: list[str] = []
    length = 0
    for token in tokens:
        needed = len(token) if not kept else length + len(separator) + len(token)
        if needed > max_length:
            break
        kept.append(token)
        length = needed

    return separator.join(kept).rstrip(separator)
