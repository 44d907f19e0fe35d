"""Exceptions shared by the core and the CLI.

Invalid input is not represented here: parsers raise `ValueError` and the
prompt loop recovers from it locally. Only the two outcomes that must unwind
to the process driver get their own types.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for converter errors."""


class InputReadError(ConverterError):
    """Standard input failed or reached end of input while a prompt was waiting."""


class QuitRequested(ConverterError):
    """The user typed the quit token. Not a failure."""
