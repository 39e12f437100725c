"""
Header block parser.

The header is every line before the last ``---`` marker line. Each
non-marker header line is a ``key: value`` pair; ``name`` and ``break``
are recognized, anything else is reported and ignored.
"""

import logging
from typing import Any, Sequence

from gradespec.models import HeaderSettings, RawLine
from gradespec.parsing.lines import find_header_end

logger = logging.getLogger(__name__)


class ConfigParseError(Exception):
    """Raised when a grading config cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


def parse_header(lines: Sequence[RawLine], base: HeaderSettings | None = None) -> HeaderSettings:
    """
    Parse header settings from filtered lines.

    Args:
        lines: Filtered config lines.
        base: Settings the header overrides. Defaults to HeaderSettings().

    Returns:
        New settings with the header applied, or ``base`` when the
        config has no marker line.

    Raises:
        ConfigParseError: If a header line has no colon or a ``break``
            value is not a boolean literal.
    """
    settings = base or HeaderSettings()
    end = find_header_end(lines)
    if end is None:
        return settings

    updates: dict[str, Any] = {}
    for line in lines:
        if line.number >= end or line.is_marker:
            continue

        key, value = _split_key_value(line)
        if key == "name":
            updates["assignment_name"] = value
        elif key == "break":
            updates["break_build"] = _parse_break(value, line.number)
        else:
            logger.warning("Unknown header key '%s' on line %d", key, line.number)

    return settings.model_copy(update=updates)


def _split_key_value(line: RawLine) -> tuple[str, str]:
    """Split a header line into its key and value fields."""
    fields = line.content.split(":")
    if len(fields) < 2:
        raise ConfigParseError(f"Expected 'key: value' in header, got '{line.content.strip()}'", line.number)

    key, value = fields[0].strip(), fields[1].strip()
    if len(fields) > 2:
        # Only the text up to the second colon is used as the value.
        logger.warning(
            "Header line %d has more than one ':'; using '%s' as the value of '%s'",
            line.number,
            value,
            key,
        )
    return key, value


def _parse_break(value: str, line_number: int) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ConfigParseError(f"Failed to parse '{value}' to 'break' value", line_number)
