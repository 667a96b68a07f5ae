"""metricize – inch dimension to centimetre converter."""

from ._version import __version__
from .extraction import convert_dimensions, parse_numeric_token

__all__ = [
    "__version__",
    "cli",
    "config",
    "convert_dimensions",
    "extraction",
    "parse_numeric_token",
    "service",
    "utils",
]
