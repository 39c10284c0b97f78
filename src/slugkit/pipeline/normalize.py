"""Unicode canonical composition — the first pipeline stage."""

from __future__ import annotations

import unicodedata


def normalize(text: str) -> str:
    """Return *text* in NFC form.

    Composing first means ``"e" + U+0301`` and the precomposed ``"é"``
    share one representation, so later stages see a single character.
    """
    return unicodedata.normalize("NFC", text)
