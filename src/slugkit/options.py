"""Slug options — the immutable configuration value for :func:`transform`.

Every field is applied independently by one pipeline stage; there are no
cross-field rules.  Instances are frozen so a single value can be shared
by any number of concurrent calls.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, fields, replace

from slugkit.errors import ActionableError


def is_word_char(char: str) -> bool:
    """True for letters, numbers and combining marks — the stuff tokens are made of."""
    return unicodedata.category(char)[0] in "LNM"


@dataclass(frozen=True)
class SlugOptions:
    """Options controlling a single slug transformation.

    Attributes:
        separator: Single character placed between tokens.
        max_length: Upper bound on the slug length in characters, or
            ``None`` for no bound.
        lowercase: Case-fold every token.
        remove_stopwords: Drop tokens found in :data:`slugkit.stopwords.STOPWORDS`.
        ascii_only: Transliterate to ASCII, dropping what has no mapping.
    """

    separator: str = "-"
    max_length: int | None = None
    lowercase: bool = True
    remove_stopwords: bool = False
    ascii_only: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ActionableError.validation(
                field_name="separator",
                reason=f"{self.separator!r} is not a single character",
                suggestion="Use a single punctuation character such as '-', '_' or '.'",
            )
        if (
            is_word_char(self.separator)
            or self.separator.isspace()
            or unicodedata.category(self.separator).startswith("C")
        ):
            raise ActionableError.validation(
                field_name="separator",
                reason=f"{self.separator!r} is a word, whitespace or control character",
                suggestion="Use a punctuation character that cannot appear inside a token",
            )

        if self.max_length is not None:
            if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
                raise ActionableError.validation(
                    field_name="max_length",
                    reason=f"is {self.max_length!r} — must be an integer or None",
                )
            if self.max_length < 1:
                raise ActionableError.validation(
                    field_name="max_length",
                    reason=f"is {self.max_length} — must be >= 1",
                    suggestion="Leave max_length unset for unbounded slugs",
                )

        for flag in ("lowercase", "remove_stopwords", "ascii_only"):
            value = getattr(self, flag)
            if not isinstance(value, bool):
                raise ActionableError.validation(
                    field_name=flag,
                    reason=f"is {value!r} — must be true or false",
                )

    def with_overrides(self, **changes: object) -> SlugOptions:
        """Return a copy with the named fields replaced.

        >>> DEFAULT_OPTIONS.with_overrides(separator="_").separator
        '_'
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ActionableError.validation(
                field_name=unknown[0],
                reason=f"unknown option (expected one of: {', '.join(sorted(known))})",
            )
        return replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_OPTIONS = SlugOptions()
"""Defaults: ``-`` separator, unbounded, lowercased, stopwords kept, Unicode kept."""
