"""Input reader over standard input.

Each call consumes exactly one line and normalizes it (trim + lowercase).
Read failures and end of input become `InputReadError`; they are never
retried here.
"""

from __future__ import annotations

import sys

from core.errors import InputReadError
from core.interfaces.line_source import LineSource


def read_normalized_line(source: LineSource | None = None) -> str:
    """Read one line from `source` (default: the current `sys.stdin`)."""

    stream = source if source is not None else sys.stdin
    try:
        line = stream.readline()
    except (OSError, ValueError) as exc:
        # ValueError: "I/O operation on closed file"
        raise InputReadError(str(exc) or exc.__class__.__name__) from exc

    if line == "":
        raise InputReadError("unexpected end of input")
    return line.strip().lower()
