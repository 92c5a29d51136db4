"""Numeric coercion helpers shared by the domain and services."""

import math


def to_optional_float(value: object) -> float | None:
    """Return a finite float for numbers and numeric strings, else None.

    A comma is accepted as the decimal separator ("1,5" -> 1.5).
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ".", 1))
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_float(value: object, default: float = 0.0) -> float:
    """Coerce a value to float, falling back to ``default`` when malformed."""
    number = to_optional_float(value)
    return default if number is None else number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def round1(value: object) -> float:
    """Round to one decimal place; non-numeric input gives 0."""
    number = to_optional_float(value)
    if number is None:
        return 0.0
    return round_half_up(number * 10) / 10
