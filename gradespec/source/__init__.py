"""
Config Source Module.

Reads grading config files from disk.
"""

from gradespec.source.reader import ConfigReadError, read_config_lines

__all__ = [
    "ConfigReadError",
    "read_config_lines",
]
