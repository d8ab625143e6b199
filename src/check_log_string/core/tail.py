"""Backward tail extraction.

Recovers the last N lines of a seekable binary stream without reading the
whole file: terminators are located by reading fixed-size blocks backward from
the end, then each line is read forward from its start, capped at a fixed
capacity.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import BinaryIO

from .models import LineBuffer

LOGGER = logging.getLogger(__name__)

# Slot capacity in bytes, including the line terminator and the end marker.
MAX_LINE_LENGTH = 300
DEFAULT_BLOCK_SIZE = 4096

TEXT_ENCODING = "utf-8"
# surrogateescape keeps undecodable bytes round-trippable, matching how the
# interpreter decodes command-line arguments.
TEXT_ERRORS = "surrogateescape"

_NEWLINE = b"\n"


def _iter_terminators_backward(
    source: BinaryIO, end: int, *, block_size: int
) -> Iterator[int]:
    """Yield offsets of newline bytes in [0, end), last one first."""
    pos = end
    while pos > 0:
        read_size = min(block_size, pos)
        pos -= read_size
        source.seek(pos, os.SEEK_SET)
        block = source.read(read_size)
        idx = block.rfind(_NEWLINE)
        while idx != -1:
            yield pos + idx
            idx = block.rfind(_NEWLINE, 0, idx)


def _read_slot(source: BinaryIO, start: int, end: int, capacity: int) -> str:
    """Read the line occupying [start, end), truncated to fit a slot."""
    source.seek(start, os.SEEK_SET)
    raw = source.read(min(end - start, capacity - 1))
    return raw.decode(TEXT_ENCODING, errors=TEXT_ERRORS)


def extract_tail(
    source: BinaryIO,
    requested_count: int,
    max_line_length: int = MAX_LINE_LENGTH,
    *,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> LineBuffer:
    """Return the last ``requested_count`` lines of ``source``.

    The result has exactly ``requested_count`` slots. Lines fill the slots from
    the end backward, so they read oldest first; when the stream holds fewer
    lines, the leading slots stay ``None``. Line terminators are not included
    and each line keeps at most ``max_line_length - 1`` bytes.

    A terminator as the very last byte closes the final line rather than
    opening an empty one. A final line with no terminator still counts.
    """
    if requested_count < 1:
        raise ValueError("requested_count must be >= 1")
    if max_line_length < 2:
        raise ValueError("max_line_length must be >= 2")
    if block_size < 1:
        raise ValueError("block_size must be >= 1")

    source.seek(0, os.SEEK_END)
    size = source.tell()

    lines: list[str | None] = [None] * requested_count
    count = 0
    if size == 0:
        LOGGER.debug("Empty source, no lines to extract")
        return LineBuffer(lines=lines, count=0)

    line_end = size
    source.seek(size - 1, os.SEEK_SET)
    if source.read(1) == _NEWLINE:
        line_end = size - 1

    for pos in _iter_terminators_backward(source, line_end, block_size=block_size):
        lines[requested_count - 1 - count] = _read_slot(
            source, pos + 1, line_end, max_line_length
        )
        count += 1
        line_end = pos
        if count == requested_count:
            break
    else:
        # Reached offset 0: the first line has no terminator in front of it.
        lines[requested_count - 1 - count] = _read_slot(source, 0, line_end, max_line_length)
        count += 1

    LOGGER.debug("Extracted %d of %d requested lines from %d bytes", count, requested_count, size)
    return LineBuffer(lines=lines, count=count)
