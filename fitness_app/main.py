"""Console entry point for the workout tracker."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from pydantic import ValidationError

from fitness_app.config import get_settings
from fitness_app.logging_config import configure_logging
from fitness_app.shell import EndOfInput, FitnessShell


logger = logging.getLogger("fitness_app")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Record workout routines and query them by name, type or calories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for everything
  fitness-app

  # Skip the identity prompts
  fitness-app --name Alex --age 31 --weight 72.5

  # Show debug logs on stderr
  fitness-app --verbose
        """,
    )
    parser.add_argument("--name", type=str, help="Your name (skips the name prompt)")
    parser.add_argument("--age", type=int, help="Your age in years (skips the age prompt)")
    parser.add_argument("--weight", type=float, help="Your weight (skips the weight prompt)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Override FITNESS_LOG_LEVEL for this run",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Shorthand for --log-level DEBUG",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else args.log_level)

    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    shell = FitnessShell(stdin or sys.stdin, stdout or sys.stdout, app_name=settings.app_name)

    try:
        session = shell.start_session(name=args.name, age=args.age, weight=args.weight)
        shell.run(session)
    except EndOfInput:
        logger.warning("Input closed before the session started")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
