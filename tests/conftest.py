"""
Pytest configuration and fixtures.

Provides common test fixtures for all test modules.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from gradespec.config import Settings
from gradespec.models import Command


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# Sample Config Fixtures
# ==============================================================================


@pytest.fixture
def sample_config_text() -> str:
    """Sample grading config with a header and mixed commands."""
    return """# Grading config for the loops lab
name: Lab 3
break: true
---

gg: --directory src --file Main.java --exists
# commands below run after the checks
gradle build
gg: --description "Check for comments" --count 2
"""


@pytest.fixture
def sample_commands() -> list[Command]:
    """Commands matching sample_config_text."""
    return [
        Command.special("--directory", "src", "--file", "Main.java", "--exists"),
        Command.generic("gradle", "build"),
        Command.special("--description", "Check for comments", "--count", "2"),
    ]


# ==============================================================================
# File Fixtures
# ==============================================================================


@pytest.fixture
def sample_config_file(temp_dir: Path, sample_config_text: str) -> Path:
    """Create a sample config file."""
    file_path = temp_dir / "gatorgrader.yml"
    file_path.write_text(sample_config_text, encoding="utf-8")
    return file_path


@pytest.fixture
def bad_break_file(temp_dir: Path) -> Path:
    """Create a config whose break value is not a boolean."""
    file_path = temp_dir / "bad_break.yml"
    file_path.write_text("name: Broken\nbreak: maybe\n---\ngradle build\n", encoding="utf-8")
    return file_path


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def test_settings(sample_config_file: Path) -> Settings:
    """Create test settings pointing at the sample config."""
    return Settings(
        config_file=sample_config_file,
        file_encoding="utf-8",
        log_level="DEBUG",
    )
