"""Global test configuration — shared fixtures.

This conftest provides:

1. **Options files** — ``write_options`` writes a TOML options file under
   ``tmp_path`` and returns its path, so config and CLI tests never touch
   the working directory.

2. **Buffer leak guard** — ``ffi_leak_check`` records the number of live
   foreign-boundary buffers before a test and asserts the test released
   everything it allocated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from slugkit import ffi

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def write_options(tmp_path: Path) -> Callable[[str], Path]:
    """Factory: write *content* to ``tmp_path/slugkit.toml`` and return the path."""

    def _write(content: str, name: str = "slugkit.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ffi_leak_check() -> Iterator[None]:
    """Fail the test if it leaves foreign-boundary buffers unreleased."""
    before = ffi.live_buffers()
    yield
    after = ffi.live_buffers()
    assert after == before, f"Test leaked {after - before} ffi buffer(s)"
