"""Rich UI components for the CLI.

Keeps styling out of the command and out of the core: the core only calls
`FlowHooks`, and this module decides how each message looks.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.services.conversion_flow import FlowHooks


def print_header(console: Console, header: str) -> None:
    console.print()
    console.print(Text(header, style="bold cyan"))


def print_prompt(console: Console, quit_token: str, message: str) -> None:
    """Quit hint followed by the actual question."""

    hint = Text.assemble(
        "Type \"",
        (quit_token.upper(), "bold yellow"),
        "\" to end the program or",
    )
    console.print()
    console.print(hint)
    console.print(Text(message))


def print_invalid(console: Console, message: str) -> None:
    console.print(Text(message, style="bold red"))


def print_report(console: Console, report: str) -> None:
    console.print()
    console.print(Text(report, style="bold green"))


def print_io_error(console: Console, detail: str) -> None:
    console.print(Text(f"Program terminated due to I/O error: {detail}", style="bold red"))


def build_console_hooks(console: Console) -> FlowHooks:
    """Bind every flow callback to `console`."""

    return FlowHooks(
        show_prompt=lambda quit_token, message: print_prompt(console, quit_token, message),
        show_invalid=lambda message: print_invalid(console, message),
        show_header=lambda header: print_header(console, header),
        show_report=lambda report: print_report(console, report),
    )
