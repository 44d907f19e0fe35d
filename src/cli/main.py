"""CLI entry point (Typer).

One command, no options: run the interactive conversion once and map the
outcome to a message and an exit code.
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from cli.ui_components import build_console_hooks, print_io_error
from core.config import ConverterSettings
from core.domain.models import AppExitStatus
from core.services.conversion_flow import run_app

app = typer.Typer(
    add_completion=False,
    help="Convert a temperature between Celsius and Fahrenheit, interactively.",
)

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def convert() -> None:
    """Ask for a unit and a value, then print the converted temperature."""

    outcome = run_app(hooks=build_console_hooks(_console), settings=ConverterSettings())

    if outcome.status is AppExitStatus.SUCCESS:
        _console.print("\nProgram finished normally.")
    elif outcome.status is AppExitStatus.IO_ERROR:
        print_io_error(_err_console, outcome.detail or "unknown error")

    if outcome.exit_code:
        raise typer.Exit(code=outcome.exit_code)


def run() -> None:
    # The report uses "°"; Windows consoles may default to cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
