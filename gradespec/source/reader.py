"""
Grading config file reader.

Reads the raw text lines of a config file, turning every I/O or decoding
failure into a single ConfigReadError that names the offending file.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ConfigReadError(Exception):
    """
    Raised when a grading config file cannot be read.

    Contains the path and the underlying cause, if any.
    """

    def __init__(self, message: str, file_path: str | Path, cause: Exception | None = None):
        self.file_path = str(file_path)
        self.cause = cause
        super().__init__(f"Failed to read config file '{file_path}': {message}")


def read_config_lines(file_path: Path | str, encoding: str = "utf-8") -> list[str]:
    """
    Read all lines of a config file.

    Line terminators are removed; nothing else about a line is changed.

    Args:
        file_path: Path to the config file.
        encoding: Text encoding of the file.

    Returns:
        The file's lines in order.

    Raises:
        ConfigReadError: If the file is missing, not a file, or unreadable.
    """
    path = Path(file_path) if isinstance(file_path, str) else file_path
    _validate_file(path)

    try:
        with path.open("r", encoding=encoding) as handle:
            lines = handle.read().splitlines()
    except UnicodeDecodeError as e:
        raise ConfigReadError(f"Could not decode file as {encoding}", path, cause=e) from e
    except LookupError as e:
        raise ConfigReadError(f"Unknown encoding '{encoding}'", path, cause=e) from e
    except OSError as e:
        raise ConfigReadError(e.strerror or str(e), path, cause=e) from e

    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def _validate_file(file_path: Path) -> None:
    """
    Validate that the file exists and is a regular file.

    Raises:
        ConfigReadError: If the path doesn't exist or isn't a file.
    """
    if not file_path.exists():
        raise ConfigReadError("File does not exist", file_path)

    if not file_path.is_file():
        raise ConfigReadError("Path is not a file", file_path)
