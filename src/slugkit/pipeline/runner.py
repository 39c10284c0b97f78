"""Slug pipeline orchestration.

Runs the five stages strictly in order, each consuming only the output of
the previous one:

1. **Normalize** — NFC composition.
2. **Transliterate** — ASCII folding, only when ``ascii_only`` is set.
3. **Tokenize** — split into word tokens, dropping punctuation and spaces.
4. **Filter** — stopword removal, then case folding.
5. **Assemble** — join with the separator and truncate to ``max_length``.

:func:`transform` is pure: it reads its options, allocates its own token
lists, and touches no module state, so it can be called from any number
of threads at once.
"""

from __future__ import annotations

import logging

from slugkit.options import DEFAULT_OPTIONS, SlugOptions
from slugkit.pipeline.assemble import assemble
from slugkit.pipeline.filters import filter_tokens
from slugkit.pipeline.normalize import normalize
from slugkit.pipeline.tokenize import tokenize
from slugkit.pipeline.transliterate import transliterate

logger = logging.getLogger(__name__)


def transform(text: str, options: SlugOptions = DEFAULT_OPTIONS) -> str:
    """Convert *text* into a URL- and filesystem-safe slug.

    >>> transform("Hello, World! 123")
    'hello-world-123'
    >>> transform("Café münü", SlugOptions(ascii_only=True))
    'cafe-munu'

    An input with no surviving words produces ``""``; that is a valid
    slug, not an error.
    """
    if not text or text.isspace():
        return ""

    normalized = normalize(text)
    if options.ascii_only:
        normalized = transliterate(normalized)

    tokens = tokenize(normalized, options.separator)
    kept = filter_tokens(tokens, options)
    slug = assemble(kept, options.separator, options.max_length)

    logger.debug(
        "Slugified %d chars: %d tokens, %d kept, %d in slug",
        len(text),
        len(tokens),
        len(kept),
        len(slug),
    )
    return slug


slugify = transform
