"""Options file loading and validation.

Slug options can live in a TOML file so that every tool producing slugs
for the same site or directory agrees on them::

    [slug]
    separator = "_"
    max_length = 60
    remove_stopwords = true

    [slug.profiles.filenames]
    ascii_only = true

The base ``[slug]`` table is read first; a named profile from
``[slug.profiles.<name>]`` then overrides individual keys.  Every value is
checked before a :class:`~slugkit.options.SlugOptions` is built, so a typo
fails at load time with the offending key in the message.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

from slugkit.errors import ActionableError
from slugkit.options import DEFAULT_OPTIONS, SlugOptions

DEFAULT_OPTIONS_PATH = Path("slugkit.toml")
DEFAULT_SECTION = "slug"

_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "separator": (str,),
    "max_length": (int,),
    "lowercase": (bool,),
    "remove_stopwords": (bool,),
    "ascii_only": (bool,),
}
_PROFILES_KEY = "profiles"


def load_options(
    path: str | Path = DEFAULT_OPTIONS_PATH,
    *,
    section: str = DEFAULT_SECTION,
    profile: str | None = None,
) -> SlugOptions:
    """Load and validate slug options from a TOML file.

    Raises :class:`~slugkit.errors.ActionableError`:
      - CONFIG if the file, the section, or the profile is missing, or a
        key is not a slug option
      - VALIDATION if a value has the wrong type or is out of range
      - PARSE if the TOML is malformed

    Returns a fully validated :class:`SlugOptions` instance.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="options_path",
            reason=f"Options file not found: {filepath}",
            suggestion=f"Create {filepath} with a [{section}] table",
        )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
        ) from None

    return options_from_mapping(data, section=section, profile=profile, source=filepath)


def options_from_mapping(
    data: dict[str, object],
    *,
    section: str = DEFAULT_SECTION,
    profile: str | None = None,
    source: str | Path = "<mapping>",
) -> SlugOptions:
    """Build :class:`SlugOptions` from already-parsed TOML data."""
    table = data.get(section)
    if not isinstance(table, dict):
        raise ActionableError.config(
            field_name=section,
            reason=f"Required table [{section}] is missing from {source}",
            suggestion=f"Add a [{section}] table to {source}",
        )

    values = _validate_table(table, section)

    if profile is not None:
        profiles = table.get(_PROFILES_KEY, {})
        profile_table = profiles.get(profile) if isinstance(profiles, dict) else None
        if not isinstance(profile_table, dict):
            available = sorted(profiles) if isinstance(profiles, dict) else []
            raise ActionableError.config(
                field_name=f"{section}.{_PROFILES_KEY}.{profile}",
                reason=f"Profile '{profile}' is not defined in {source}",
                suggestion=(
                    f"Use one of: {', '.join(available)}"
                    if available
                    else f"Add a [{section}.{_PROFILES_KEY}.{profile}] table"
                ),
            )
        values.update(_validate_table(profile_table, f"{section}.{_PROFILES_KEY}.{profile}"))

    return DEFAULT_OPTIONS.with_overrides(**values)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _validate_table(table: dict[str, object], table_name: str) -> dict[str, object]:
    """Check keys and value types of one options table."""
    known = {f.name for f in fields(SlugOptions)}
    values: dict[str, object] = {}

    for key, value in table.items():
        if key == _PROFILES_KEY and isinstance(value, dict):
            continue
        if key not in known:
            raise ActionableError.config(
                field_name=f"{table_name}.{key}",
                reason=f"'{key}' is not a slug option",
                suggestion=f"Valid keys are: {', '.join(sorted(known))}",
            )
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; max_length = true is still a mistake
        if not isinstance(value, expected) or (bool not in expected and isinstance(value, bool)):
            raise ActionableError.validation(
                field_name=f"{table_name}.{key}",
                reason=f"is {value!r} — expected {expected[0].__name__}",
            )
        values[key] = value

    return values
