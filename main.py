"""Development entry point (no install needed).

Runs the CLI with `python -m main`. The code lives under `src/`, so without
an editable install Python cannot find `cli` or `core` on its own.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
