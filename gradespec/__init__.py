"""
gradespec - assignment grading config parser.

This package reads a line-oriented grading config (an optional header
with the assignment name and break-build flag, followed by command lines)
and produces the ordered commands a grading pipeline runs.
"""

__version__ = "1.0.0"

from gradespec.grading_config import ConfigContext, ConfigNotCreatedError, GradingConfig
from gradespec.models import Command, CommandKind, HeaderSettings, RawLine
from gradespec.parsing import ConfigParseError
from gradespec.source import ConfigReadError

__all__ = [
    "Command",
    "CommandKind",
    "ConfigContext",
    "ConfigNotCreatedError",
    "ConfigParseError",
    "ConfigReadError",
    "GradingConfig",
    "HeaderSettings",
    "RawLine",
]
