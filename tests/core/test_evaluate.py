from __future__ import annotations

import pytest

from check_log_string.core.evaluate import classify, count_matches, evaluate
from check_log_string.core.models import EvaluationResult, LineBuffer, Status


def test_count_matches_skips_absent_slots() -> None:
    lines = [None, None, "ERROR a", "ok", "ERROR b"]
    assert count_matches(lines, "ERROR") == 2


def test_count_matches_is_case_sensitive() -> None:
    assert count_matches(["error", "Error", "ERROR"], "ERROR") == 1


def test_empty_needle_matches_present_lines_only() -> None:
    lines = [None, "", "x"]
    assert count_matches(lines, "") == 2


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, Status.OK),
        (1, Status.WARNING),
        (2, Status.WARNING),
        (3, Status.CRITICAL),
        (10, Status.CRITICAL),
    ],
)
def test_classify_uses_at_least_semantics(count: int, expected: Status) -> None:
    assert classify(count, 1, 3) is expected


def test_classify_critical_wins_when_thresholds_equal() -> None:
    assert classify(1, 1, 1) is Status.CRITICAL


def test_classify_zero_thresholds_always_critical() -> None:
    assert classify(0, 0, 0) is Status.CRITICAL


def test_evaluate_returns_result() -> None:
    buf = LineBuffer(lines=[None, "boom ERROR", "fine", "ERROR again"], count=3)
    result = evaluate(buf.lines, "ERROR", 1, 3)
    assert result == EvaluationResult(status=Status.WARNING, match_count=2)


def test_evaluate_present_lines() -> None:
    buf = LineBuffer(lines=[None, "a", "b"], count=2)
    assert evaluate(buf.present(), "", 5, 10).match_count == 2
