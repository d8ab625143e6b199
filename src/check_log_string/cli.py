"""Command-line entrypoint (Nagios plugin conventions).

Prints exactly one status line on stdout and exits with the status code:
0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN. Diagnostics go to stderr through
logging.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import NoReturn

from check_log_string.core.check import run_check
from check_log_string.core.config import DEFAULT_MAX_LINES
from check_log_string.core.models import Status

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CHECK_LOG_STRING_LOG_LEVEL"


def _configure_logging() -> None:
    """Send logs to stderr; stdout is reserved for the status line."""
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class _PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as UNKNOWN instead of exit 2."""

    def error(self, message: str) -> NoReturn:
        print(f"{Status.UNKNOWN.name}: {message}")
        self.exit(int(Status.UNKNOWN))


def build_parser() -> argparse.ArgumentParser:
    p = _PluginArgumentParser(
        prog="check-log-string",
        description="Nagios monitoring check for string in specified file",
    )
    # Mandatory options default to None so a supplied 0 is distinguishable.
    p.add_argument("-w", "--warning", type=int, default=None, help="Set WARNING threshold (mandatory)")
    p.add_argument("-c", "--critical", type=int, default=None, help="Set CRITICAL threshold (mandatory)")
    p.add_argument("-f", "--file", dest="file_path", default=None, help="Path to the log file (mandatory)")
    p.add_argument("-s", "--string", dest="needle", default="", help="String to check")
    p.add_argument(
        "-l",
        "--lines",
        dest="max_lines",
        type=int,
        default=DEFAULT_MAX_LINES,
        help=f"How many lines to check from end of file (default: {DEFAULT_MAX_LINES})",
    )
    return p


def main(argv: Sequence[str] | None = None) -> NoReturn:
    _configure_logging()
    args = build_parser().parse_args(argv)
    LOGGER.debug("Options: %s", vars(args))

    outcome = run_check(
        warning=args.warning,
        critical=args.critical,
        file_path=args.file_path,
        needle=args.needle,
        max_lines=args.max_lines,
    )
    print(outcome.message)
    raise SystemExit(outcome.exit_code)


if __name__ == "__main__":
    main()
