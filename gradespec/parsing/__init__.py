"""
Config Parsing Module.

Turns raw config text into header settings and grading commands.
"""

from gradespec.parsing.commands import line_to_command, parse_commands
from gradespec.parsing.header import ConfigParseError, parse_header
from gradespec.parsing.lines import filter_lines, find_header_end
from gradespec.parsing.tokenizer import tokenize

__all__ = [
    "ConfigParseError",
    "filter_lines",
    "find_header_end",
    "line_to_command",
    "parse_commands",
    "parse_header",
    "tokenize",
]
