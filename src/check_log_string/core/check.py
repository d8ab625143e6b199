"""Check orchestration.

Validates raw option values, extracts the tail of the log file, evaluates it
and renders the one-line plugin summary. Every failure collapses to UNKNOWN.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import CheckConfig, ConfigurationError, build_config
from .evaluate import evaluate
from .models import EvaluationResult, Status
from .tail import MAX_LINE_LENGTH, extract_tail

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Status plus the single line printed for the monitoring host."""

    status: Status
    message: str
    result: EvaluationResult | None = None

    @property
    def exit_code(self) -> int:
        return int(self.status)


def _unknown(reason: str) -> CheckOutcome:
    return CheckOutcome(status=Status.UNKNOWN, message=f"{Status.UNKNOWN.name}: {reason}")


def format_summary(config: CheckConfig, result: EvaluationResult) -> str:
    """Render the summary line for a completed evaluation."""
    return (
        f'{result.status.name}: Found {result.match_count} "{config.needle}" '
        f"in the last {config.max_lines} lines of {config.file_path}"
    )


def check_file(config: CheckConfig) -> CheckOutcome:
    """Run the tail scan for an already validated configuration."""
    try:
        f = open(config.file_path, "rb")
    except OSError as e:
        LOGGER.warning("Cannot open %s: %s", config.file_path, e)
        return _unknown(f"Unable to open log file: {config.file_path}")

    try:
        with f:
            buffer = extract_tail(f, config.max_lines, MAX_LINE_LENGTH)
    except OSError as e:
        LOGGER.warning("Cannot read %s: %s", config.file_path, e)
        return _unknown(f"Unable to read log file: {config.file_path}")

    result = evaluate(
        buffer.lines,
        config.needle,
        config.warning_threshold,
        config.critical_threshold,
    )
    LOGGER.debug(
        "Found %d matches in %d lines of %s -> %s",
        result.match_count,
        buffer.count,
        config.file_path,
        result.status.name,
    )
    return CheckOutcome(status=result.status, message=format_summary(config, result), result=result)


def run_check(
    *,
    warning: int | None,
    critical: int | None,
    file_path: str | None,
    needle: str | None = None,
    max_lines: int | None = None,
) -> CheckOutcome:
    """Validate options and run the check.

    ``None`` marks an option that was not supplied; a supplied ``0`` is a
    real threshold.
    """
    try:
        config = build_config(
            warning=warning,
            critical=critical,
            file_path=file_path,
            needle=needle,
            max_lines=max_lines,
        )
    except ConfigurationError as e:
        LOGGER.debug("Configuration rejected: %s", e)
        return _unknown(str(e))

    return check_file(config)
