"""Parser primitives for inch dimension conversion."""

from .dimensions import (
    ConversionResult,
    DimensionGroup,
    convert_dimensions,
    convert_group,
    iter_dimension_groups,
    scan_dimensions,
)
from .fractions import (
    FRACTION_GLYPHS,
    DecimalToken,
    GlyphToken,
    IntegerToken,
    MixedFraction,
    MixedGlyph,
    NumericToken,
    glyph_value,
    parse_numeric_token,
    tokenize_numeric,
)
from .units import CM_PER_INCH, format_cm, inches_to_cm, round_half_up

__all__ = [
    "CM_PER_INCH",
    "FRACTION_GLYPHS",
    "ConversionResult",
    "DecimalToken",
    "DimensionGroup",
    "GlyphToken",
    "IntegerToken",
    "MixedFraction",
    "MixedGlyph",
    "NumericToken",
    "convert_dimensions",
    "convert_group",
    "format_cm",
    "glyph_value",
    "inches_to_cm",
    "iter_dimension_groups",
    "parse_numeric_token",
    "round_half_up",
    "scan_dimensions",
    "tokenize_numeric",
]
