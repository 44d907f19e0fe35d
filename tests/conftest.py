from __future__ import annotations

import io
from dataclasses import dataclass, field

import pytest
from rich.console import Console

from core.services.conversion_flow import FlowHooks


@dataclass
class Recorder:
    """Collects every hook call as `(kind, payload)` in order."""

    events: list[tuple[str, object]] = field(default_factory=list)

    def hooks(self) -> FlowHooks:
        return FlowHooks(
            show_prompt=lambda quit_token, message: self.events.append(("prompt", message)),
            show_invalid=lambda message: self.events.append(("invalid", message)),
            show_header=lambda header: self.events.append(("header", header)),
            show_report=lambda report: self.events.append(("report", report)),
        )

    def of(self, kind: str) -> list[object]:
        return [payload for k, payload in self.events if k == kind]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def lines():
    """Build an in-memory stdin from answers, one per line."""

    def _make(*answers: str) -> io.StringIO:
        return io.StringIO("".join(f"{a}\n" for a in answers))

    return _make


@pytest.fixture
def plain_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)
