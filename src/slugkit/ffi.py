"""Foreign boundary — C-style entry points with explicit buffer ownership.

Callers on the other side of this boundary speak in raw bytes and
pointers, not Python strings and exceptions.  Each entry point therefore:

- accepts the input as NUL-terminated UTF-8 ``bytes`` (``None`` is the
  null pointer),
- returns the address of a freshly allocated NUL-terminated buffer that the
  caller now owns, or ``None`` (null) when the input was null, not UTF-8,
  or carried an invalid option,
- never raises for bad *input*; the failure is logged and reported through
  the null sentinel.

Ownership goes back through :func:`free_string` exactly once per buffer.
Buffers are ``ctypes`` arrays kept alive in an allocation table until then,
so the address stays valid for ``ctypes.string_at`` or a C reader.  The
table is the only shared mutable state in slugkit and is guarded by a lock.
"""

from __future__ import annotations

import ctypes
import logging
import threading

from slugkit.errors import ActionableError
from slugkit.options import DEFAULT_OPTIONS, SlugOptions
from slugkit.pipeline.runner import transform

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_buffers: dict[int, ctypes.Array[ctypes.c_char]] = {}


# ---------------------------------------------------------------------------
# Allocation table
# ---------------------------------------------------------------------------


def _allocate(slug: str) -> int:
    """Copy *slug* into a new owned buffer and return its address."""
    buffer = ctypes.create_string_buffer(slug.encode("utf-8"))
    address = ctypes.addressof(buffer)
    with _lock:
        _buffers[address] = buffer
    return address


def free_string(ptr: int | None) -> None:
    """Release a buffer returned by :func:`slugify_simple` or :func:`slugify_with_options`.

    A null pointer is ignored.  Releasing an address that was never
    allocated here, or was already released, raises
    :class:`~slugkit.errors.ActionableError` (MEMORY).
    """
    if not ptr:
        return
    with _lock:
        buffer = _buffers.pop(ptr, None)
    if buffer is None:
        raise ActionableError.memory(ptr, "was not allocated by slugkit or was already released")


def read_string(ptr: int) -> bytes:
    """Copy the contents of a live buffer, without the trailing NUL."""
    with _lock:
        buffer = _buffers.get(ptr)
        if buffer is not None:
            return buffer.value
    raise ActionableError.memory(ptr, "is not a live slugkit buffer")


def live_buffers() -> int:
    """Number of buffers handed out and not yet released."""
    with _lock:
        return len(_buffers)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def _decode(raw: bytes) -> str | None:
    """Decode a C string, stopping at the first NUL like ``strlen`` would."""
    data = bytes(raw).split(b"\0", 1)[0]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        err = ActionableError.from_exception(exc, "ffi", "decode input")
        logger.warning("Rejected input at byte %d: %s", exc.start, err.error)
        return None


def _separator_char(separator: int | bytes) -> str:
    """Interpret a C ``char`` as a single Latin-1 character."""
    if isinstance(separator, bytes):
        if len(separator) != 1:
            raise ActionableError.validation(
                field_name="separator",
                reason=f"{separator!r} is not a single byte",
            )
        return chr(separator[0])
    return chr(separator & 0xFF)


def slugify_simple(raw: bytes | None) -> int | None:
    """Slugify *raw* with :data:`~slugkit.options.DEFAULT_OPTIONS`."""
    if raw is None:
        return None
    text = _decode(raw)
    if text is None:
        return None
    return _allocate(transform(text, DEFAULT_OPTIONS))


def slugify_with_options(
    raw: bytes | None,
    separator: int | bytes,
    max_length: int,
    lowercase: bool,
    remove_stopwords: bool,
    ascii_only: bool,
) -> int | None:
    """Slugify *raw* with options passed as primitive scalars.

    Args:
        raw: NUL-terminated UTF-8 input, or ``None`` for null.
        separator: The separator as a C ``char``: a byte value or a
            one-byte ``bytes`` object.
        max_length: Maximum slug length; zero or negative means unbounded.
        lowercase: Case-fold tokens.
        remove_stopwords: Drop stopwords.
        ascii_only: Transliterate to ASCII.
    """
    if raw is None:
        return None
    text = _decode(raw)
    if text is None:
        return None

    try:
        options = SlugOptions(
            separator=_separator_char(separator),
            max_length=max_length if max_length > 0 else None,
            lowercase=bool(lowercase),
            remove_stopwords=bool(remove_stopwords),
            ascii_only=bool(ascii_only),
        )
    except ActionableError as err:
        logger.warning("Rejected options: %s", err.error)
        return None

    return _allocate(transform(text, options))


__all__ = [
    "free_string",
    "live_buffers",
    "read_string",
    "slugify_simple",
    "slugify_with_options",
]
