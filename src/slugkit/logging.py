"""Logging setup for the ``slugkit`` logger tree.

Importing :mod:`slugkit` installs one stderr handler on the ``slugkit``
logger, so library callers see FFI rejections and option warnings without
configuring anything.  Every module logs through
``logging.getLogger(__name__)`` and so lands under that logger.

The pipeline reports each call at DEBUG.  Those records are dropped until
:func:`set_log_level` lowers the threshold; the CLI does this for
``--verbose``/``--log-level``.  :func:`configure_file_logging` adds a
timestamped file for post-run diagnosis of a batch.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LEVEL = logging.INFO
DEFAULT_LOG_DIR = "logs"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("slugkit")
logger.setLevel(DEFAULT_LEVEL)

stderr_handler = logging.StreamHandler(sys.stderr)
stderr_handler.setLevel(DEFAULT_LEVEL)
stderr_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
logger.addHandler(stderr_handler)


def set_log_level(level: int | str) -> int:
    """Set the threshold of the ``slugkit`` logger and its stderr handler.

    *level* is a :mod:`logging` constant or one of :data:`LEVELS`.  Returns
    the numeric level so callers can hand it on to
    :func:`configure_file_logging`.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level, expected one of {', '.join(LEVELS)}")
    logger.setLevel(level)
    stderr_handler.setLevel(level)
    return level


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int = DEFAULT_LEVEL,
) -> logging.FileHandler:
    """Also write ``slugkit`` records to ``<log_dir>/slugkit_<timestamp>.log``.

    The directory is created when missing.  The returned handler is what
    a caller removes and closes to stop file logging again.
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")

    file_handler = logging.FileHandler(directory / f"slugkit_{stamp}.log", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))

    # A handler never sees records the logger itself filters out
    if level < logger.level:
        logger.setLevel(level)

    logger.addHandler(file_handler)
    return file_handler


__all__ = [
    "DEFAULT_LOG_DIR",
    "LEVELS",
    "configure_file_logging",
    "logger",
    "set_log_level",
]
