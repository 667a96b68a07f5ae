"""Inch to centimetre conversion with a fixed rounding rule."""
from __future__ import annotations

import math
from fractions import Fraction
from numbers import Rational
from typing import Union

__all__ = ["CM_PER_INCH", "format_cm", "inches_to_cm", "round_half_up"]

CM_PER_INCH = Fraction(254, 100)

Number = Union[int, Rational, float]


def _exact(value: Number) -> Fraction:
    # Floats are read as the decimal literal they print as.
    if isinstance(value, float):
        return Fraction(repr(value))
    return Fraction(value)


def round_half_up(value: Number, places: int = 2) -> Fraction:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    Works on the exact rational value so ``10.005`` always becomes ``10.01``
    regardless of binary floating point representation.
    """

    exact = _exact(value)
    scale = 10**places
    scaled = abs(exact) * scale
    rounded = Fraction(math.floor(scaled + Fraction(1, 2)), scale)
    return rounded if exact >= 0 else -rounded


def inches_to_cm(inches: Number) -> Fraction:
    """Convert ``inches`` to centimetres rounded to two decimal places."""

    return round_half_up(_exact(inches) * CM_PER_INCH, 2)


def format_cm(value: Number, places: int = 2) -> str:
    """Render ``value`` with exactly ``places`` decimals, keeping trailing zeros."""

    rounded = round_half_up(value, places)
    scale = 10**places
    units = abs(rounded) * scale
    whole, remainder = divmod(int(units), scale)
    sign = "-" if rounded < 0 else ""
    if places == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{remainder:0{places}d}"
