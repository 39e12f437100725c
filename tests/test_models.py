"""
Unit tests for gradespec models and settings.
"""

import pytest

from gradespec.config import Settings
from gradespec.models import Command, CommandKind, HeaderSettings, RawLine


class TestCommandModel:
    """Tests for Command."""

    def test_generic_description(self) -> None:
        """Test that a generic command renders as its arguments."""
        assert Command.generic("gradle", "build").description == "gradle build"

    def test_special_description(self) -> None:
        """Test that a special command renders with its prefix."""
        assert Command.special("--exists").description == "gg: --exists"

    def test_description_quotes_whitespace(self) -> None:
        """Test that arguments with spaces are quoted."""
        command = Command.special("--description", "Check for comments")

        assert command.description == 'gg: --description "Check for comments"'

    def test_list_args_become_tuple(self) -> None:
        """Test that args given as a list are stored as a tuple."""
        command = Command(kind=CommandKind.GENERIC, args=["a", "b"])

        assert command.args == ("a", "b")

    def test_output_suppressed_by_default(self) -> None:
        """Test that output to sysout is off unless requested."""
        assert Command.generic("ls").output_to_sysout is False

    def test_command_immutable(self) -> None:
        """Test that commands are immutable."""
        command = Command.generic("ls")

        with pytest.raises(Exception):  # Pydantic frozen model
            command.args = ("rm",)  # type: ignore

    def test_empty_command_is_valid(self) -> None:
        """Test that a command may have no arguments."""
        command = Command.generic()

        assert command.args == ()
        assert command.description == ""


class TestRawLineModel:
    """Tests for RawLine."""

    def test_marker_detection(self) -> None:
        """Test that any line containing --- is a marker."""
        assert RawLine(number=1, content="---").is_marker
        assert RawLine(number=1, content="  ----- header end").is_marker
        assert not RawLine(number=1, content="--exists").is_marker

    def test_number_must_be_positive(self) -> None:
        """Test that line numbers start at 1."""
        with pytest.raises(ValueError):
            RawLine(number=0, content="x")


class TestHeaderSettingsModel:
    """Tests for HeaderSettings."""

    def test_defaults(self) -> None:
        """Test the default header values."""
        settings = HeaderSettings()

        assert settings.assignment_name == "Unnamed Assignment"
        assert settings.break_build is False


class TestSettings:
    """Tests for application Settings."""

    def test_log_level_is_normalized(self) -> None:
        """Test that log levels are accepted in any case."""
        assert Settings(log_level="info").log_level == "INFO"

    def test_invalid_log_level(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError):
            Settings(log_level="loud")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that GRADESPEC_ variables override defaults."""
        monkeypatch.setenv("GRADESPEC_CONFIG_FILE", "grading.txt")

        assert str(Settings().config_file) == "grading.txt"
