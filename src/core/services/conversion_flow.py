"""Single-run conversion flow.

States: start -> select unit -> select value -> convert -> report -> end.
Quitting is possible at both prompts; an input failure at either prompt ends
the run as an I/O error. The outcome is returned as a `RunOutcome` instead of
exiting, so the CLI layer owns messages and exit codes.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Callable

from core.config import ConverterSettings
from core.domain.models import AppExitStatus, RunOutcome, Temperature, TemperatureUnit
from core.errors import InputReadError, QuitRequested
from core.interfaces.line_source import LineSource
from core.services.prompt_loop import PromptHooks, prompt_until_valid
from core.services.report_formatter import format_conversion

UNIT_PROMPT = "Enter C to convert to Fahrenheit or F to convert to Celsius"
UNIT_ERROR = "Invalid input. Please enter 'C' or 'F'."
VALUE_ERROR = "Invalid temperature. Please enter a number."


def _noop(*_args: object) -> None:
    return None


@dataclass
class FlowHooks(PromptHooks):
    """Prompt hooks plus the two outputs of a run (header and report)."""

    show_header: Callable[[str], None] = _noop
    show_report: Callable[[str], None] = _noop


def parse_unit(text: str) -> TemperatureUnit:
    return TemperatureUnit.parse(text)


def parse_temperature_value(text: str, unit: TemperatureUnit | None = None) -> float:
    """Parse a finite float.

    Rejected: `nan`, `inf`, digit separators (`1_000`), and, when `unit` is
    given, magnitudes whose conversion to the other scale overflows.
    """

    if "_" in text:
        raise ValueError(f"digit separators are not accepted: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    if unit is not None and not math.isfinite(convert_once(value, unit)[1].value):
        raise ValueError(f"conversion overflows: {text!r}")
    return value


def value_prompt(unit: TemperatureUnit) -> str:
    return f"Enter a number to convert {unit.label()} to {unit.opposite().label()}."


def convert_once(value: float, unit: TemperatureUnit) -> tuple[Temperature, Temperature]:
    """Build the original temperature and convert it to the other scale."""

    original = Temperature(value=value, unit=unit)
    return original, original.convert_to(unit.opposite())


def run_app(
    *,
    hooks: FlowHooks | None = None,
    source: LineSource | None = None,
    settings: ConverterSettings | None = None,
) -> RunOutcome:
    settings = settings or ConverterSettings()
    hooks = hooks or FlowHooks()

    hooks.show_header(settings.header_text)

    try:
        unit = prompt_until_valid(
            UNIT_PROMPT,
            parse_unit,
            error_message=UNIT_ERROR,
            hooks=hooks,
            source=source,
            quit_token=settings.quit_token,
        )
        value = prompt_until_valid(
            value_prompt(unit),
            functools.partial(parse_temperature_value, unit=unit),
            error_message=VALUE_ERROR,
            hooks=hooks,
            source=source,
            quit_token=settings.quit_token,
        )
    except QuitRequested:
        return RunOutcome(status=AppExitStatus.QUIT)
    except InputReadError as exc:
        return RunOutcome(status=AppExitStatus.IO_ERROR, detail=str(exc))

    original, converted = convert_once(value, unit)
    hooks.show_report(
        format_conversion(original, converted, decimal_places=settings.decimal_places)
    )
    return RunOutcome(status=AppExitStatus.SUCCESS, converted=converted)
