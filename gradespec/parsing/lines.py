"""
Line filtering.

Drops blank and comment lines and numbers the survivors.
"""

from typing import Iterable, Sequence

from gradespec.models import RawLine

COMMENT_PREFIX = "#"


def filter_lines(raw_lines: Iterable[str]) -> list[RawLine]:
    """
    Filter raw text lines into numbered RawLines.

    A line is dropped if it is empty after trimming or if it starts with
    ``#`` (untrimmed). Retained lines keep their original text and are
    numbered by their 1-based rank among retained lines.

    Args:
        raw_lines: Lines of text without line terminators.

    Returns:
        The retained lines, in original order.
    """
    retained = (line for line in raw_lines if line.strip() and not line.startswith(COMMENT_PREFIX))
    return [RawLine(number=number, content=content) for number, content in enumerate(retained, start=1)]


def find_header_end(lines: Sequence[RawLine]) -> int | None:
    """Return the number of the last marker line, or None if there is none."""
    markers = [line.number for line in lines if line.is_marker]
    return max(markers) if markers else None
