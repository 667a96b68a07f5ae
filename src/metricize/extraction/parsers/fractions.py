"""Parse inch components written with whole numbers, fractions and glyphs."""
from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Union

__all__ = [
    "FRACTION_GLYPHS",
    "GLYPH_CLASS",
    "DecimalToken",
    "GlyphToken",
    "IntegerToken",
    "MixedFraction",
    "MixedGlyph",
    "NumericToken",
    "glyph_value",
    "parse_numeric_token",
    "tokenize_numeric",
]

FRACTION_GLYPHS: Mapping[str, Fraction] = MappingProxyType(
    {
        "¼": Fraction(1, 4),
        "½": Fraction(1, 2),
        "¾": Fraction(3, 4),
        "⅐": Fraction(1, 7),
        "⅑": Fraction(1, 9),
        "⅒": Fraction(1, 10),
        "⅓": Fraction(1, 3),
        "⅔": Fraction(2, 3),
        "⅕": Fraction(1, 5),
        "⅖": Fraction(2, 5),
        "⅗": Fraction(3, 5),
        "⅘": Fraction(4, 5),
        "⅙": Fraction(1, 6),
        "⅚": Fraction(5, 6),
        "⅛": Fraction(1, 8),
        "⅜": Fraction(3, 8),
        "⅝": Fraction(5, 8),
        "⅞": Fraction(7, 8),
    }
)

# U+00BC-U+00BE and U+2150-U+215E, the vulgar fraction blocks.
GLYPH_CLASS = "[¼-¾⅐-⅞]"

_MIXED_FRACTION = re.compile(r"^([0-9]+)\s+([0-9]+)/([0-9]+)\Z")
_MIXED_GLYPH = re.compile(rf"^([0-9]+)({GLYPH_CLASS})\Z")
_BARE_GLYPH = re.compile(rf"^\s*({GLYPH_CLASS})\s*\Z")
_PLAIN_NUMBER = re.compile(r"^\s*([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*\Z")


def glyph_value(glyph: str) -> Fraction:
    """Return the exact value of ``glyph``; unknown glyphs count as zero."""

    return FRACTION_GLYPHS.get(glyph, Fraction(0))


@dataclass(frozen=True)
class IntegerToken:
    kind: ClassVar[str] = "integer"

    number: int

    @property
    def value(self) -> Fraction:
        return Fraction(self.number)


@dataclass(frozen=True)
class DecimalToken:
    kind: ClassVar[str] = "decimal"

    number: Fraction

    @property
    def value(self) -> Fraction:
        return self.number


@dataclass(frozen=True)
class GlyphToken:
    kind: ClassVar[str] = "glyph"

    glyph: str

    @property
    def value(self) -> Fraction:
        return glyph_value(self.glyph)


@dataclass(frozen=True)
class MixedFraction:
    """Whole number followed by a simple ``numerator/denominator`` fraction."""

    kind: ClassVar[str] = "mixed_fraction"

    whole: int
    numerator: int
    denominator: int

    @property
    def value(self) -> Fraction:
        # A zero denominator degrades to the whole part.
        if self.denominator == 0:
            return Fraction(self.whole)
        return self.whole + Fraction(self.numerator, self.denominator)


@dataclass(frozen=True)
class MixedGlyph:
    """Whole number immediately followed by a vulgar fraction glyph."""

    kind: ClassVar[str] = "mixed_glyph"

    whole: int
    glyph: str

    @property
    def value(self) -> Fraction:
        return self.whole + glyph_value(self.glyph)


NumericToken = Union[IntegerToken, DecimalToken, GlyphToken, MixedFraction, MixedGlyph]


def tokenize_numeric(
    token: str,
    *,
    strict: bool = False,
    allow_bare_glyph: bool = False,
) -> Optional[NumericToken]:
    """Classify ``token`` into one of the :data:`NumericToken` variants.

    The grammars are tried in a fixed order: ``"31 1/8"``, then ``"5½"``,
    then a plain integer or decimal. A glyph without a leading whole number
    does not match any of them and yields ``None`` unless
    ``allow_bare_glyph`` is set.

    With ``strict`` enabled a zero denominator or an unknown glyph makes the
    token unparseable instead of silently falling back to the whole part or
    to zero.
    """

    if not token:
        return None

    match = _MIXED_FRACTION.match(token)
    if match:
        whole, numerator, denominator = (int(part) for part in match.groups())
        if strict and denominator == 0:
            return None
        return MixedFraction(whole=whole, numerator=numerator, denominator=denominator)

    match = _MIXED_GLYPH.match(token)
    if match:
        glyph = match.group(2)
        if strict and glyph not in FRACTION_GLYPHS:
            return None
        return MixedGlyph(whole=int(match.group(1)), glyph=glyph)

    if allow_bare_glyph:
        match = _BARE_GLYPH.match(token)
        if match:
            glyph = match.group(1)
            if strict and glyph not in FRACTION_GLYPHS:
                return None
            return GlyphToken(glyph=glyph)

    match = _PLAIN_NUMBER.match(token)
    if match is None:
        return None
    raw = match.group(1)
    if raw.endswith("."):
        raw = raw[:-1]
    if "." in raw:
        return DecimalToken(number=Fraction(raw))
    return IntegerToken(number=int(raw))


def parse_numeric_token(
    token: str,
    *,
    strict: bool = False,
    allow_bare_glyph: bool = False,
) -> Optional[Fraction]:
    """Return the exact inch value of ``token`` or ``None`` if unparseable."""

    parsed = tokenize_numeric(token, strict=strict, allow_bare_glyph=allow_bare_glyph)
    if parsed is None:
        return None
    return parsed.value
