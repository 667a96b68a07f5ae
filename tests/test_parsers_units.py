from fractions import Fraction

import pytest

from metricize.extraction.parsers.units import CM_PER_INCH, format_cm, inches_to_cm, round_half_up


@pytest.mark.parametrize(
    "inches, expected",
    [
        (Fraction(249, 8), "79.06"),
        (5, "12.70"),
        (2, "5.08"),
        (31, "78.74"),
        (Fraction(3, 4), "1.91"),
        (Fraction(13, 4), "8.26"),
        (0, "0.00"),
        (10.5, "26.67"),
    ],
)
def test_inches_to_cm(inches, expected: str) -> None:
    assert format_cm(inches_to_cm(inches)) == expected


def test_cm_per_inch_is_exact() -> None:
    assert CM_PER_INCH == Fraction(127, 50)


@pytest.mark.parametrize(
    "value, expected",
    [
        (10.005, Fraction("10.01")),
        (Fraction("10.005"), Fraction("10.01")),
        (Fraction("14.605"), Fraction("14.61")),
        (Fraction("1.004"), Fraction("1.00")),
        (-1.005, Fraction("-1.01")),
    ],
)
def test_round_half_up_at_boundary(value, expected: Fraction) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (78.7, "78.70"),
        (10.005, "10.01"),
        (Fraction(1, 3), "0.33"),
        (Fraction(2, 3), "0.67"),
        (7, "7.00"),
        (Fraction("-0.5"), "-0.50"),
    ],
)
def test_format_cm_keeps_two_decimals(value, expected: str) -> None:
    assert format_cm(value) == expected


def test_format_cm_custom_places() -> None:
    assert format_cm(Fraction("2.5"), places=0) == "3"
    assert format_cm(Fraction("1.2345"), places=3) == "1.235"
