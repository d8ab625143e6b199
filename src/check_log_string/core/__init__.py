"""Core check logic: tail extraction, threshold evaluation and orchestration."""

from __future__ import annotations

from .check import CheckOutcome, check_file, format_summary, run_check
from .config import CheckConfig, ConfigurationError, build_config
from .evaluate import classify, count_matches, evaluate
from .models import EvaluationResult, LineBuffer, Status
from .tail import MAX_LINE_LENGTH, extract_tail

__all__ = [
    "MAX_LINE_LENGTH",
    "CheckConfig",
    "CheckOutcome",
    "ConfigurationError",
    "EvaluationResult",
    "LineBuffer",
    "Status",
    "build_config",
    "check_file",
    "classify",
    "count_matches",
    "evaluate",
    "extract_tail",
    "format_summary",
    "run_check",
]
