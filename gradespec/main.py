"""
gradespec CLI Application.

Provides a command-line interface for inspecting and checking
assignment grading config files.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gradespec.config import get_settings
from gradespec.grading_config import GradingConfig
from gradespec.log import setup_logging
from gradespec.models import CommandKind
from gradespec.parsing import ConfigParseError
from gradespec.source import ConfigReadError

# Create Typer app
app = typer.Typer(
    name="gradespec",
    help="Parse and inspect assignment grading config files",
    add_completion=False,
)

console = Console()

ConfigFileArgument = Annotated[
    Optional[Path],
    typer.Argument(help="Path to the grading config file (defaults to GRADESPEC_CONFIG_FILE)"),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging"),
]


@app.command()
def show(config_file: ConfigFileArgument = None, verbose: VerboseOption = False) -> None:
    """
    Show the settings and commands of a grading config.
    """
    config = _load(config_file, verbose)

    break_color = "red" if config.break_build else "green"
    console.print(
        Panel(
            f"[bold]{escape(config.assignment_name)}[/bold]\n"
            f"Break build: [{break_color}]{config.break_build}[/{break_color}]\n"
            f"Commands: {len(config)}",
            title="Assignment",
        )
    )

    table = Table(title="Commands")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Arguments")

    for index, command in enumerate(config, start=1):
        kind_style = "magenta" if command.kind is CommandKind.SPECIAL else "cyan"
        table.add_row(
            str(index),
            f"[{kind_style}]{command.kind.value}[/{kind_style}]",
            escape(command.description),
        )

    console.print(table)


@app.command()
def summary(config_file: ConfigFileArgument = None, verbose: VerboseOption = False) -> None:
    """
    Print the commands of a grading config joined by arrows.
    """
    config = _load(config_file, verbose)
    typer.echo(str(config))


@app.command()
def check(config_file: ConfigFileArgument = None, verbose: VerboseOption = False) -> None:
    """
    Check that a grading config parses.

    Exits with status 1 if the file cannot be read or parsed.
    """
    config = _load(config_file, verbose)
    console.print(
        f"[green]✓ {escape(config.assignment_name)}[/green]: "
        f"{len(config)} commands, break build {config.break_build}"
    )


def _load(config_file: Optional[Path], verbose: bool) -> GradingConfig:
    """Load a config, reporting read and parse errors and exiting."""
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    path = config_file or settings.config_file
    try:
        return GradingConfig.load(path, encoding=settings.file_encoding)
    except ConfigReadError as e:
        console.print(f"[red]Read Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except ConfigParseError as e:
        console.print(f"[red]Parse Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
