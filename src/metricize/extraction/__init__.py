"""Dimension extraction and conversion."""

from .parsers import (
    ConversionResult,
    DimensionGroup,
    convert_dimensions,
    convert_group,
    iter_dimension_groups,
    parse_numeric_token,
    scan_dimensions,
    tokenize_numeric,
)
from .render import DEFAULT_CSS_CLASS, render_metric_span

__all__ = [
    "DEFAULT_CSS_CLASS",
    "ConversionResult",
    "DimensionGroup",
    "convert_dimensions",
    "convert_group",
    "iter_dimension_groups",
    "parse_numeric_token",
    "render_metric_span",
    "scan_dimensions",
    "tokenize_numeric",
]
