"""
Grading configuration - the parsed result handed to the executor.

GradingConfig composes the line filter, header parser and command parser,
and ConfigContext keeps track of the current configuration.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from gradespec.config import Settings, get_settings
from gradespec.models import DEFAULT_ASSIGNMENT_NAME, Command, HeaderSettings
from gradespec.parsing import filter_lines, parse_commands, parse_header
from gradespec.source import read_config_lines

logger = logging.getLogger(__name__)

SUMMARY_SEPARATOR = " -> "


class GradingConfig:
    """
    Configuration for one assignment.

    Holds the ordered grading commands plus the assignment name and the
    break-build flag. Built either directly from known values or from a
    config file with ``from_file(...).parse()``.
    """

    def __init__(
        self,
        break_build: bool = False,
        assignment_name: str = DEFAULT_ASSIGNMENT_NAME,
        commands: Iterable[Command] = (),
    ):
        """
        Create a config that will use the given values.

        Args:
            break_build: Should the build break on check failures.
            assignment_name: The assignment name.
            commands: The commands to run, in order.
        """
        self._header = HeaderSettings(assignment_name=assignment_name, break_build=break_build)
        self._commands: list[Command] = list(commands)
        self._source: Path | None = None
        self._encoding = "utf-8"

    @classmethod
    def from_file(cls, config_file: Path | str, encoding: str = "utf-8") -> "GradingConfig":
        """
        Create an unparsed config bound to a file.

        Call ``parse()`` to read the file.
        """
        config = cls()
        config._source = Path(config_file)
        config._encoding = encoding
        return config

    @classmethod
    def load(cls, config_file: Path | str, encoding: str = "utf-8") -> "GradingConfig":
        """Create a config from a file and parse it."""
        return cls.from_file(config_file, encoding).parse()

    def parse(self) -> "GradingConfig":
        """
        Parse the bound config file.

        Header settings and commands are applied only once the whole file
        parsed successfully. Parsing twice appends the commands twice.

        Returns:
            This config, for chaining.

        Raises:
            ValueError: If no config file is bound.
            ConfigReadError: If the file cannot be read.
            ConfigParseError: If the header is malformed.
        """
        if self._source is None:
            raise ValueError("GradingConfig has no config file to parse")

        lines = filter_lines(read_config_lines(self._source, self._encoding))
        header = parse_header(lines, self._header)
        commands = parse_commands(lines)

        self._header = header
        self._commands.extend(commands)
        logger.debug(
            "Parsed %s: '%s', %d commands, break=%s",
            self._source,
            header.assignment_name,
            len(commands),
            header.break_build,
        )
        return self

    def with_command(self, command: Command) -> "GradingConfig":
        """
        Add a command to this config.

        Args:
            command: The command to add.

        Returns:
            This config, after adding.
        """
        self._commands.append(command)
        return self

    @property
    def source(self) -> Path | None:
        return self._source

    @property
    def assignment_name(self) -> str:
        return self._header.assignment_name

    @property
    def break_build(self) -> bool:
        return self._header.break_build

    @property
    def commands(self) -> tuple[Command, ...]:
        """Snapshot of the commands in order."""
        return tuple(self._commands)

    def should_break_build(self) -> bool:
        """Check if a failing command should fail the build."""
        return self._header.break_build

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return SUMMARY_SEPARATOR.join(command.description for command in self._commands)

    def __repr__(self) -> str:
        return (
            f"GradingConfig(assignment_name={self.assignment_name!r}, "
            f"break_build={self.break_build!r}, commands={len(self)})"
        )


class ConfigNotCreatedError(RuntimeError):
    """Raised when the current config is requested before one was created."""


class ConfigContext:
    """
    Holds the current GradingConfig.

    Pass one context to every component that needs the configuration.
    Only the owner of the context should call ``create``, ``set`` or
    ``clear``; everyone else calls ``get``.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize an empty context.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
        """
        self._settings = settings or get_settings()
        self._current: GradingConfig | None = None

    def create(self, config_file: Path | str | None = None) -> GradingConfig:
        """
        Parse a config file and make it current.

        Replaces any current config. If parsing fails the previous config
        stays current.

        Args:
            config_file: Path to parse. Defaults to the configured file.

        Returns:
            The new current config.
        """
        path = config_file if config_file is not None else self._settings.config_file
        config = GradingConfig.load(path, encoding=self._settings.file_encoding)
        self._current = config
        return config

    def set(self, config: GradingConfig) -> GradingConfig:
        """Make an already built config current."""
        self._current = config
        return config

    def get(self) -> GradingConfig:
        """
        Get the current config.

        Raises:
            ConfigNotCreatedError: If no config has been created.
        """
        if self._current is None:
            raise ConfigNotCreatedError("GradingConfig not created")
        return self._current

    def clear(self) -> None:
        self._current = None

    @property
    def has_config(self) -> bool:
        return self._current is not None
