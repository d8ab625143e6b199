"""Match counting and threshold classification."""

from __future__ import annotations

from collections.abc import Iterable

from .models import EvaluationResult, Status


def count_matches(lines: Iterable[str | None], needle: str) -> int:
    """Count present lines containing ``needle`` (case-sensitive).

    ``None`` entries are absent slots and never match. An empty needle matches
    every present line, including empty ones.
    """
    return sum(1 for line in lines if line is not None and needle in line)


def classify(match_count: int, warning_threshold: int, critical_threshold: int) -> Status:
    """Map a match count to a status; thresholds trigger at >=, critical first."""
    if match_count >= critical_threshold:
        return Status.CRITICAL
    if match_count >= warning_threshold:
        return Status.WARNING
    return Status.OK


def evaluate(
    lines: Iterable[str | None],
    needle: str,
    warning_threshold: int,
    critical_threshold: int,
) -> EvaluationResult:
    """Count matches among present lines and classify the count."""
    match_count = count_matches(lines, needle)
    return EvaluationResult(
        status=classify(match_count, warning_threshold, critical_threshold),
        match_count=match_count,
    )
