"""
Command line front end for humandate.

Usage:
    humandate 15 +3 1001 --language en
    humandate -l es --format "%Y-%m-%d" -- hoy -1s 31/04
    humandate tmrw --today 2025-06-15 -l en

Each expression is printed with its rendered date, tab separated. The exit
status is 1 when any expression is not recognized and 2 on configuration
errors. Offsets with a unit letter ("-1s") look like options to argparse and
must follow a "--" separator.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from .clock import fixed_clock, system_clock
from .config import build_formatter, build_parser, load_settings
from .languages import available_languages

logger = logging.getLogger("humandate.cli")

UNRECOGNIZED = "unrecognized"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="humandate",
        description="Resolve human-typed date expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Day of the current month, three days ahead, 10 January
  humandate 15 +3 1001

  # Spanish keywords and unit letters
  humandate -l es -- hoy -2s

  # Pin "today" and use ISO output
  humandate tmrw --today 2025-06-15 -l en -f "%Y-%m-%d"
        """,
    )

    parser.add_argument(
        "expressions",
        nargs="+",
        help="Date expressions to resolve"
    )
    language = parser.add_mutually_exclusive_group()
    language.add_argument(
        "-l", "--language",
        choices=available_languages(),
        help="Built-in language for keywords and unit letters (default: $HUMANDATE_LANGUAGE)"
    )
    language.add_argument(
        "--language-file",
        type=Path,
        help="YAML vocabulary for a custom language (default: $HUMANDATE_LANGUAGE_FILE)"
    )
    parser.add_argument(
        "-f", "--format",
        dest="date_format",
        help="strftime output pattern (default: $HUMANDATE_DATE_FORMAT or %%d/%%m/%%Y)"
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="Resolve against this date (YYYY-MM-DD) instead of the system clock"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log which recognizer handled each expression"
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``humandate`` console script."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
        overrides: dict[str, object] = {}
        if args.language is not None:
            overrides.update(language=args.language, language_file=None)
        if args.language_file is not None:
            overrides.update(language_file=args.language_file)
        if args.date_format is not None:
            overrides.update(date_format=args.date_format)
        if overrides:
            settings = settings.model_validate({**settings.model_dump(), **overrides})

        clock = fixed_clock(args.today) if args.today is not None else system_clock
        parser = build_parser(settings, clock=clock)
        formatter = build_formatter(settings)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        logger.debug("Configuration failed", exc_info=True)
        print(f"humandate: {e}", file=sys.stderr)
        return 2

    status = 0
    for expression in args.expressions:
        resolved = parser.resolve(expression)
        if resolved is None:
            status = 1
        print(f"{expression}\t{formatter.format(resolved) or UNRECOGNIZED}")
    return status


if __name__ == "__main__":
    sys.exit(main())
