"""CLI entry point for slugkit."""

from __future__ import annotations

import sys

from slugkit.cli import build_parser, handle_batch, handle_slug, handle_stopwords
from slugkit.errors import ActionableError
from slugkit.logging import configure_file_logging, logger, set_log_level


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = set_log_level(args.log_level)
    if args.log_dir:
        configure_file_logging(args.log_dir, level=level)

    try:
        if args.command == "slug":
            handle_slug(args)
        elif args.command == "batch":
            handle_batch(args)
        elif args.command == "stopwords":
            handle_stopwords()
    except ActionableError as err:
        logger.debug("Command %s failed: %s", args.command, err.to_dict())
        print(f"Error: {err.error}", file=sys.stderr)
        if err.suggestion:
            print(f"Suggestion: {err.suggestion}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
