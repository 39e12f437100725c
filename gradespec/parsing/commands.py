"""
Command line classification and parsing.

Lines starting with ``gg: `` (any case) are special commands wherever they
appear. Every other line after the header is a generic command.
"""

from typing import Sequence

from gradespec.models import SPECIAL_PREFIX, Command, CommandKind, RawLine
from gradespec.parsing.lines import find_header_end
from gradespec.parsing.tokenizer import tokenize


def line_to_command(text: str) -> Command:
    """
    Convert a line of text to a Command.

    Args:
        text: The line content.

    Returns:
        A special command built from the text after the prefix, or a
        generic command built from the whole line. Output to sysout is
        always disabled.
    """
    kind = CommandKind.GENERIC
    if text.lower().startswith(SPECIAL_PREFIX):
        text = text[len(SPECIAL_PREFIX) :]
        kind = CommandKind.SPECIAL

    return Command(kind=kind, args=tuple(tokenize(text)), output_to_sysout=False)


def is_command_line(line: RawLine, header_end: int | None) -> bool:
    """
    Check if a line is a command line.

    Special command lines count wherever they appear; other lines only
    after the header.
    """
    if line.is_marker:
        return False
    if line.content.lower().startswith(SPECIAL_PREFIX):
        return True
    return header_end is None or line.number > header_end


def parse_commands(lines: Sequence[RawLine]) -> list[Command]:
    """
    Parse every command line into a Command.

    Args:
        lines: Filtered config lines, in ascending line-number order.

    Returns:
        Commands in ascending line-number order.
    """
    header_end = find_header_end(lines)
    return [line_to_command(line.content) for line in lines if is_command_line(line, header_end)]
