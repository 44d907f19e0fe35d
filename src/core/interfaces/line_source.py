"""Contract for the stream the input reader consumes.

Protocol instead of a concrete type: `sys.stdin`, `io.StringIO` and test
doubles all qualify without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Anything with a blocking `readline`.

    Rules:
    - Returns the line including its newline.
    - Returns `""` only at end of input.
    """

    def readline(self) -> str:
        ...
