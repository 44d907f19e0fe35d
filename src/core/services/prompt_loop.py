"""Validated prompt loop.

Asks the same question until the answer parses, the user types the quit
token, or the input stream fails. Printing is delegated to `PromptHooks` so
the loop itself stays free of terminal details.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from adapters.stdin_reader import read_normalized_line
from core.errors import QuitRequested
from core.interfaces.line_source import LineSource

T = TypeVar("T")


def _noop(*_args: object) -> None:
    return None


@dataclass
class PromptHooks:
    """Callbacks for UI layers.

    - `show_prompt(quit_token, message)` runs before every read.
    - `show_invalid(error_message)` runs after every failed parse.
    """

    show_prompt: Callable[[str, str], None] = _noop
    show_invalid: Callable[[str], None] = _noop


def prompt_until_valid(
    message: str,
    parser: Callable[[str], T],
    *,
    error_message: str,
    hooks: PromptHooks | None = None,
    source: LineSource | None = None,
    quit_token: str = "quit",
) -> T:
    """Return the first answer `parser` accepts.

    `parser` receives the normalized line and signals rejection with
    `ValueError`. The quit token is checked before parsing and raises
    `QuitRequested`. `InputReadError` from the reader propagates untouched.
    """

    hooks = hooks or PromptHooks()
    while True:
        hooks.show_prompt(quit_token, message)
        text = read_normalized_line(source)

        if text == quit_token:
            raise QuitRequested(quit_token)

        try:
            return parser(text)
        except ValueError:
            hooks.show_invalid(error_message)
