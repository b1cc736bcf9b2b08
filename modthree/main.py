#!/usr/bin/env python3
"""
modthree command line

Prints the remainder of a binary number divided by 3.

Usage:
    modthree -in=<binary>
    modthree -in="   1101   "
"""

import argparse
import sys
from contextlib import redirect_stderr, redirect_stdout
from typing import List, Optional, TextIO

from pydantic import ValidationError

from modthree.core.config import Settings
from modthree.core.logging_config import get_logger, setup_logging
from modthree.core.modthree import ModThreeError, mod_three

log = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_ARGS = 2


def is_binary(s: str) -> bool:
    """True if s is non-empty and contains only '0'/'1'."""
    return bool(s) and all(c in "01" for c in s)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modthree",
        usage="modthree -in=<binary>",
        description="Remainder of a binary number (MSB first) divided by 3.",
        epilog=(
            "Accepts only -in=<binary> (no space between -in and value).\n"
            "If the value is quoted, leading/trailing spaces are trimmed.\n"
            'Example: modthree -in=1101  or  modthree -in="   1101   "'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-in", "--in", dest="input", default="", metavar="<binary>",
                        help="binary input string (MSB first), e.g. 1101")
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def run(argv: List[str], stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Parse arguments, compute, and return the process exit code."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        settings = Settings.from_env()
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=stderr)
        return EXIT_INVALID_ARGS
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level, console_output=settings.log_console)

    # Reject "-in <value>" (space-separated)
    for a in argv:
        if a in ("-in", "--in") or a.startswith(("-in ", "--in ")):
            print("invalid format: use -in=<binary> with no space", file=stderr)
            return EXIT_INVALID_ARGS

    parser = build_parser()
    try:
        with redirect_stdout(stdout), redirect_stderr(stderr):
            args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 for --help and 2 for usage errors
        return e.code if isinstance(e.code, int) else EXIT_INVALID_ARGS

    if args.extra:
        print(f"unexpected extra args: {args.extra}", file=stderr)
        return EXIT_INVALID_ARGS

    value = args.input.strip()
    if not value:
        print("provide -in=<binary>", file=stderr)
        return EXIT_INVALID_ARGS
    if not is_binary(value):
        print(f'invalid input "{value}": must contain only 0 and 1', file=stderr)
        return EXIT_INVALID_ARGS

    try:
        result = mod_three(value)
    except ModThreeError as e:
        log.error("mod_three_failed", error=str(e))
        print(f"error: {e}", file=stderr)
        return EXIT_RUNTIME_ERROR

    print(f'modThree("{value}") => {result}', file=stdout)
    return EXIT_OK


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
