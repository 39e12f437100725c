"""
Pydantic models for gradespec.

These models define the strict schemas for:
- Filtered source lines
- Header settings (assignment name, break-build flag)
- Grading commands

All models are frozen; parsing produces new instances instead of mutating.
"""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)

DEFAULT_ASSIGNMENT_NAME = "Unnamed Assignment"

# Substring that marks a header delimiter line
HEADER_MARKER = "---"

# Prefix (matched case-insensitively) that selects a special command
SPECIAL_PREFIX = "gg: "


# ==============================================================================
# Source Models
# ==============================================================================


class RawLine(BaseModel):
    """
    A retained (non-blank, non-comment) line of a grading config.

    The number is the line's 1-based rank among retained lines,
    not its position in the original file.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    number: int = Field(
        ...,
        ge=1,
        description="1-based rank among retained lines",
    )

    content: str = Field(
        ...,
        description="Original, untrimmed line text",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_marker(self) -> bool:
        """Check if this line delimits the header block."""
        return HEADER_MARKER in self.content


# ==============================================================================
# Header Models
# ==============================================================================


class HeaderSettings(BaseModel):
    """Scalar settings read from the header block."""

    model_config = ConfigDict(frozen=True, strict=True)

    assignment_name: str = Field(
        default=DEFAULT_ASSIGNMENT_NAME,
        description="Free-text title of the assignment",
    )

    break_build: bool = Field(
        default=False,
        description="Whether a failing command should fail the whole build",
    )


# ==============================================================================
# Command Models
# ==============================================================================


class CommandKind(str, Enum):
    """Kind of grading command."""

    GENERIC = "generic"  # Any other line, run as-is
    SPECIAL = "special"  # Line prefixed with "gg: "


class Command(BaseModel):
    """
    A single grading command.

    Both kinds carry the same capabilities; the kind tag is the only
    difference and consumers branch on it explicitly.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    kind: CommandKind = Field(
        ...,
        description="Whether this is a generic or a special command",
    )

    args: tuple[str, ...] = Field(
        default=(),
        description="Ordered argument tokens",
    )

    output_to_sysout: bool = Field(
        default=False,
        description="Whether output is echoed to the console while running",
    )

    @field_validator("args", mode="before")
    @classmethod
    def convert_to_tuple(cls, v: Any) -> tuple[str, ...]:
        """Accept any sequence of arguments and store it as a tuple."""
        if isinstance(v, tuple):
            return v
        return tuple(v)

    @classmethod
    def generic(cls, *args: str) -> "Command":
        """Create a generic command from the given arguments."""
        return cls(kind=CommandKind.GENERIC, args=args, output_to_sysout=False)

    @classmethod
    def special(cls, *args: str) -> "Command":
        """Create a special command from the given arguments."""
        return cls(kind=CommandKind.SPECIAL, args=args, output_to_sysout=False)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def description(self) -> str:
        """Render the command the way it would be written in a config file."""
        rendered = " ".join(f'"{arg}"' if _needs_quotes(arg) else arg for arg in self.args)
        if self.kind is CommandKind.SPECIAL:
            return f"{SPECIAL_PREFIX}{rendered}"
        return rendered


def _needs_quotes(arg: str) -> bool:
    return not arg or any(c.isspace() for c in arg)
