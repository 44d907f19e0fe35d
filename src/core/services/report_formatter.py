"""Conversion report rendering.

Pure functions: they build strings and never print, so the CLI decides
styling and the tests can compare text directly.
"""

from __future__ import annotations

from core.domain.models import Temperature, TemperatureUnit

DEFAULT_DECIMAL_PLACES = 2

_FORMULAS: dict[TemperatureUnit, str] = {
    TemperatureUnit.FAHRENHEIT: "({value} - 32) * (5/9)",
    TemperatureUnit.CELSIUS: "({value} * 9/5) + 32",
}


def format_number(value: float, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Render a magnitude for display.

    Whole numbers get no decimal point. Anything else is rounded to
    `decimal_places`, trailing zeros dropped, keeping at least one fractional
    digit so a non-whole value never reads as whole.
    """

    if decimal_places < 1:
        raise ValueError("decimal_places must be >= 1")

    value = value + 0.0  # -0.0 -> 0.0
    if value.is_integer():
        return f"{value:.0f}"

    text = f"{value:.{decimal_places}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def format_temperature(temp: Temperature, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    return f"{format_number(temp.value, decimal_places)}°{temp.unit.symbol}"


def formula_for(source_unit: TemperatureUnit) -> str:
    """Human readable formula used when converting away from `source_unit`."""

    return _FORMULAS[source_unit].format(value=source_unit.symbol)


def format_conversion(
    original: Temperature,
    converted: Temperature,
    *,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> str:
    """Build the one-line report, e.g. `(212°F - 32) * (5/9) = 100°C`.

    When both temperatures share a unit there is no formula to show and the
    report is a plain equality.
    """

    left = format_temperature(original, decimal_places)
    right = format_temperature(converted, decimal_places)
    if original.unit is converted.unit:
        return f"{left} = {right}"
    return f"{_FORMULAS[original.unit].format(value=left)} = {right}"
