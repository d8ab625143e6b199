from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_log() -> Callable[[Path], None]:
    """Five lines, two of them containing ERROR."""

    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "2025-12-30T08:12:01Z [INFO] service started",
                    "2025-12-30T08:12:03Z [ERROR] upstream timeout route=/api/v1/items",
                    "2025-12-30T08:12:04Z [WARNING] retrying request id=abc123",
                    "2025-12-30T08:12:05Z [ERROR] database unavailable",
                    "2025-12-30T08:12:06Z [INFO] recovered",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
