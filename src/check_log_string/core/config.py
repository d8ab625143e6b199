"""Check configuration model and resolution from raw CLI values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_core import PydanticCustomError

DEFAULT_MAX_LINES = 30

MISSING_OPTIONS_MESSAGE = (
    "--warning --critical and --file options must be specified. "
    "Use --help option to see more information"
)
THRESHOLD_ORDER_MESSAGE = (
    "CRITICAL threshold must be greater than or equal to WARNING threshold. "
    "Use --help option to see more information"
)

# Field name -> CLI flag, used when reporting validation failures.
_FLAGS = {
    "warning_threshold": "--warning",
    "critical_threshold": "--critical",
    "file_path": "--file",
    "needle": "--string",
    "max_lines": "--lines",
}


class ConfigurationError(ValueError):
    """Raised when the supplied options cannot form a valid check."""


class CheckConfig(BaseModel):
    """Immutable settings for a single check run."""

    model_config = ConfigDict(frozen=True)

    warning_threshold: int = Field(ge=0, description="Match count that triggers WARNING.")
    critical_threshold: int = Field(ge=0, description="Match count that triggers CRITICAL.")
    file_path: str = Field(description="Log file to scan.")
    needle: str = Field(default="", description="Substring searched for in each line.")
    max_lines: int = Field(
        default=DEFAULT_MAX_LINES, ge=1, description="Trailing lines to scan."
    )

    @model_validator(mode="after")
    def check_threshold_order(self) -> CheckConfig:
        if self.critical_threshold < self.warning_threshold:
            raise PydanticCustomError("threshold_order", THRESHOLD_ORDER_MESSAGE)
        return self


def _describe(exc: ValidationError) -> str:
    """Turn the first pydantic error into a one-line message."""
    err = exc.errors()[0]
    if err["type"] == "threshold_order":
        return THRESHOLD_ORDER_MESSAGE
    loc = err["loc"][0] if err["loc"] else ""
    flag = _FLAGS.get(str(loc), str(loc))
    return f"Invalid {flag} value: {err['msg']}"


def build_config(
    *,
    warning: int | None,
    critical: int | None,
    file_path: str | None,
    needle: str | None = None,
    max_lines: int | None = None,
) -> CheckConfig:
    """Validate raw option values and return a CheckConfig.

    ``None`` means "not supplied". Only warning, critical and file are
    mandatory; a missing needle searches for the empty string.
    """
    if warning is None or critical is None or file_path is None:
        raise ConfigurationError(MISSING_OPTIONS_MESSAGE)

    try:
        return CheckConfig(
            warning_threshold=warning,
            critical_threshold=critical,
            file_path=file_path,
            needle="" if needle is None else needle,
            max_lines=DEFAULT_MAX_LINES if max_lines is None else max_lines,
        )
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc
