"""Domain models (Pydantic v2).

Rules:
- Values are immutable: a conversion always builds a new `Temperature`.
- The domain knows nothing about terminals or streams, only temperatures and
  the outcome of a run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * (5.0 / 9.0)


def celsius_to_fahrenheit(value: float) -> float:
    return (value * (9.0 / 5.0)) + 32.0


class TemperatureUnit(str, Enum):
    """The two supported temperature scales."""

    CELSIUS = "c"
    FAHRENHEIT = "f"

    @classmethod
    def parse(cls, text: str) -> "TemperatureUnit":
        """Parse a unit token (`c`, `f` or the full name), ignoring case and padding.

        Raises `ValueError` for anything else.
        """

        token = text.strip().lower()
        unit = _UNIT_ALIASES.get(token)
        if unit is None:
            raise ValueError(f"unknown temperature unit: {text!r}")
        return unit

    @property
    def symbol(self) -> str:
        return "C" if self is TemperatureUnit.CELSIUS else "F"

    def label(self) -> str:
        """Human readable name for prompts."""

        return "Celsius" if self is TemperatureUnit.CELSIUS else "Fahrenheit"

    def opposite(self) -> "TemperatureUnit":
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


_UNIT_ALIASES: dict[str, TemperatureUnit] = {
    "c": TemperatureUnit.CELSIUS,
    "celsius": TemperatureUnit.CELSIUS,
    # Spelling accepted by earlier releases.
    "celcius": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.FAHRENHEIT,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
}


class Temperature(BaseModel):
    """A magnitude on one of the two scales.

    Equality is structural (value + unit). Instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        ...,
        description="Magnitude as an IEEE 754 double.",
    )
    unit: TemperatureUnit = Field(
        ...,
        description="Scale the magnitude is expressed in.",
    )

    def convert_to(self, target_unit: TemperatureUnit) -> "Temperature":
        """Return this temperature expressed in `target_unit`.

        Converting to the current unit returns an equal copy. No rounding is
        applied here; that belongs to the report formatter.
        """

        if target_unit is self.unit:
            return self.model_copy()
        if target_unit is TemperatureUnit.CELSIUS:
            return Temperature(value=fahrenheit_to_celsius(self.value), unit=target_unit)
        return Temperature(value=celsius_to_fahrenheit(self.value), unit=target_unit)


class AppExitStatus(str, Enum):
    """How a single run of the converter ended."""

    SUCCESS = "success"
    QUIT = "quit"
    IO_ERROR = "io_error"


class RunOutcome(BaseModel):
    """Result of `run_app`, matched once by the process driver."""

    model_config = ConfigDict(frozen=True)

    status: AppExitStatus = Field(
        ...,
        description="Terminal state reached by the run.",
    )
    detail: str | None = Field(
        default=None,
        description="Description of the underlying I/O failure (IO_ERROR only).",
    )
    converted: Temperature | None = Field(
        default=None,
        description="Converted temperature when the run reached the report step.",
    )

    @property
    def exit_code(self) -> int:
        return 1 if self.status is AppExitStatus.IO_ERROR else 0
