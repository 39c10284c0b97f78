"""CLI command handlers for slugkit.

Each public function corresponds to a CLI subcommand and encapsulates
the wiring and output for that command.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from slugkit.config import load_options
from slugkit.errors import ActionableError
from slugkit.logging import LEVELS
from slugkit.options import DEFAULT_OPTIONS, SlugOptions
from slugkit.pipeline.runner import transform
from slugkit.stopwords import STOPWORDS

if TYPE_CHECKING:
    from collections.abc import Iterable


def resolve_options(args: argparse.Namespace) -> SlugOptions:
    """Build options from ``--config``/``--profile`` and explicit flags.

    Flags given on the command line win over values from the options file.
    """
    base = DEFAULT_OPTIONS
    if args.config is not None:
        base = load_options(args.config, profile=args.profile)

    overrides: dict[str, object] = {}
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.max_length is not None:
        overrides["max_length"] = args.max_length
    if args.keep_case:
        overrides["lowercase"] = False
    if args.remove_stopwords:
        overrides["remove_stopwords"] = True
    if args.ascii_only:
        overrides["ascii_only"] = True

    return base.with_overrides(**overrides) if overrides else base


def handle_slug(args: argparse.Namespace) -> None:
    """Print one slug per positional TEXT argument."""
    options = resolve_options(args)
    for text in args.text:
        print(transform(text, options))


def handle_batch(args: argparse.Namespace) -> None:
    """Slugify every line of a file (or stdin), one slug per output line."""
    options = resolve_options(args)
    if args.file is None or args.file == "-":
        _print_slugs(sys.stdin, options)
        return

    try:
        fh = Path(args.file).open(encoding="utf-8")
    except OSError as exc:
        raise ActionableError.input_file(args.file, exc.strerror or str(exc)) from None

    # Lines are decoded as they are read, so a bad byte can surface after
    # earlier slugs were already printed.
    with fh:
        try:
            _print_slugs(fh, options)
        except UnicodeDecodeError as exc:
            raise ActionableError.encoding(
                f"{args.file}: {exc.reason}",
                service="batch",
                command=f"iconv -f latin1 -t utf-8 {args.file}",
                suggestion=f"Convert {args.file} to UTF-8 and run the batch again",
            ) from None


def _print_slugs(lines: Iterable[str], options: SlugOptions) -> None:
    for line in lines:
        print(transform(line.rstrip("\r\n"), options))


def handle_stopwords() -> None:
    """List the stopwords removed by ``--remove-stopwords``."""
    for word in sorted(STOPWORDS):
        print(word)


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--separator",
        type=str,
        default=None,
        metavar="C",
        help="Separator character between words (default: '-')",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        metavar="N",
        help="Truncate the slug to at most N characters at a word boundary",
    )
    parser.add_argument(
        "--keep-case",
        action="store_true",
        help="Keep the original letter case instead of lowercasing",
    )
    parser.add_argument(
        "--remove-stopwords",
        action="store_true",
        help="Drop common English filler words (see 'stopwords')",
    )
    parser.add_argument(
        "--ascii-only",
        action="store_true",
        help="Transliterate to ASCII, dropping characters with no mapping",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="TOML options file with a [slug] table",
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        metavar="NAME",
        help="Profile from [slug.profiles.NAME] in the options file",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="slugkit",
        description="Turn human-readable text into URL- and filesystem-safe slugs",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Also write logs to a timestamped file under DIR",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="DEBUG",
        default="INFO",
        dest="log_level",
        help="Log per-slug pipeline detail (same as --log-level DEBUG)",
    )
    verbosity.add_argument(
        "--log-level",
        choices=LEVELS,
        type=str.upper,
        default="INFO",
        help="Threshold for stderr and --log-dir output (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", help="Slugify the given text arguments")
    slug_p.add_argument("text", nargs="+", help="Text to slugify")
    _add_option_flags(slug_p)

    # -- batch ---------------------------------------------------------------
    batch_p = sub.add_parser("batch", help="Slugify each line of a file or stdin")
    batch_p.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Input file, one text per line (default: stdin)",
    )
    _add_option_flags(batch_p)

    # -- stopwords -----------------------------------------------------------
    sub.add_parser("stopwords", help="List the stopwords used by --remove-stopwords")

    return parser
