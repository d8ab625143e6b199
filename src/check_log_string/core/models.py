"""Core data models for the log string check."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class Status(IntEnum):
    """Plugin status; the value doubles as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class LineBuffer(NamedTuple):
    """Tail lines in chronological order, left-padded with absent (None) slots."""

    lines: list[str | None]
    count: int

    def present(self) -> list[str]:
        """Return only the filled slots, oldest first."""
        start = len(self.lines) - self.count
        return [line for line in self.lines[start:] if line is not None]


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Outcome of comparing a match count against the thresholds."""

    status: Status
    match_count: int
