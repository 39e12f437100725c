"""
Tests for the gradespec command-line interface.
"""

from pathlib import Path

from typer.testing import CliRunner

from gradespec.main import app

runner = CliRunner()


class TestCli:
    """Tests for the typer app."""

    def test_show(self, sample_config_file: Path) -> None:
        """Test that show lists the assignment and its commands."""
        result = runner.invoke(app, ["show", str(sample_config_file)])

        assert result.exit_code == 0
        assert "Lab 3" in result.output
        assert "gradle build" in result.output
        assert "special" in result.output

    def test_summary(self, sample_config_file: Path) -> None:
        """Test that summary prints the arrow-joined commands."""
        result = runner.invoke(app, ["summary", str(sample_config_file)])

        assert result.exit_code == 0
        assert result.output.strip().split(" -> ")[1] == "gradle build"

    def test_check_valid(self, sample_config_file: Path) -> None:
        """Test that check succeeds for a valid config."""
        result = runner.invoke(app, ["check", str(sample_config_file)])

        assert result.exit_code == 0
        assert "3 commands" in result.output

    def test_check_bad_break_value(self, bad_break_file: Path) -> None:
        """Test that check fails on a malformed header."""
        result = runner.invoke(app, ["check", str(bad_break_file)])

        assert result.exit_code == 1
        assert "Parse Error" in result.output

    def test_check_missing_file(self, temp_dir: Path) -> None:
        """Test that check fails when the file does not exist."""
        result = runner.invoke(app, ["check", str(temp_dir / "missing.yml")])

        assert result.exit_code == 1
        assert "Read Error" in result.output
