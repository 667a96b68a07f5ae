"""Deterministic scanner for inch dimension groups such as ``31 1/8 x 5½ x 2"``."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ...utils.logging import log_event
from ..render import render_metric_span
from .fractions import GLYPH_CLASS, parse_numeric_token
from .units import format_cm, inches_to_cm

__all__ = [
    "ConversionResult",
    "DimensionGroup",
    "convert_dimensions",
    "convert_group",
    "iter_dimension_groups",
    "scan_dimensions",
]

LOGGER = logging.getLogger(__name__)

# Alternation order matters: mixed fraction, glyph, decimal, integer.
# Groups start only at the beginning of a digit run.
_NUMBER = rf"[0-9]+\s+[0-9]+/[0-9]+|[0-9]+{GLYPH_CLASS}|[0-9]+\.[0-9]+|[0-9]+"

_DIMENSION_PATTERN = re.compile(
    rf"""
    (?<![0-9])
    (?P<first>{_NUMBER})
    \s*[xX]\s*
    (?P<second>{_NUMBER})
    (?:\s*[xX]\s*(?P<third>{_NUMBER}))?
    (?=\s*"|\Z)
    """,
    re.VERBOSE,
)

_UNIT_SUFFIX = "cm"

Renderer = Callable[["ConversionResult"], str]


@dataclass(frozen=True)
class DimensionGroup:
    """Two or three inch components matched together in the source text."""

    components: Tuple[str, ...]
    raw: str
    span: Tuple[int, int]

    def __post_init__(self) -> None:
        if len(self.components) not in (2, 3):
            raise ValueError(f"Dimension groups hold 2 or 3 components, got {len(self.components)}")

    @property
    def original(self) -> str:
        """Components joined with ``x``, as shown in the tooltip."""

        return "x".join(self.components)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting a :class:`DimensionGroup` to centimetres."""

    group: DimensionGroup
    values_cm: Tuple[Fraction, ...] = ()
    failed: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed and len(self.values_cm) == len(self.group.components)

    @property
    def formatted(self) -> Tuple[str, ...]:
        return tuple(format_cm(value) for value in self.values_cm)

    @property
    def metric(self) -> str:
        if not self.ok:
            raise ValueError(f"Dimension '{self.group.raw}' could not be converted")
        return f"{'x'.join(self.formatted)} {_UNIT_SUFFIX}"

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by the CLI and the HTTP service."""

        return {
            "raw": self.group.raw,
            "span": list(self.group.span),
            "components": list(self.group.components),
            "original": self.group.original,
            "ok": self.ok,
            "values_cm": list(self.formatted),
            "metric": self.metric if self.ok else None,
            "failed": list(self.failed),
        }


def _group_from_match(match: re.Match[str]) -> DimensionGroup:
    components: List[str] = [match.group("first"), match.group("second")]
    third = match.group("third")
    if third is not None:
        components.append(third)
    return DimensionGroup(components=tuple(components), raw=match.group(0), span=match.span())


def iter_dimension_groups(text: str) -> Iterator[DimensionGroup]:
    """Yield every dimension group in ``text`` from left to right."""

    for match in _DIMENSION_PATTERN.finditer(text):
        yield _group_from_match(match)


def convert_group(group: DimensionGroup, *, strict: bool = False) -> ConversionResult:
    """Convert each component of ``group`` from inches to centimetres."""

    values: List[Fraction] = []
    failed: List[str] = []
    for component in group.components:
        inches = parse_numeric_token(component, strict=strict)
        if inches is None:
            failed.append(component)
            continue
        values.append(inches_to_cm(inches))

    if failed:
        log_event(
            LOGGER,
            "dimensions.conversion_failed",
            level=logging.WARNING,
            message=f"Failed to convert dimensions: {group.raw}",
            raw=group.raw,
            failed=failed,
        )
        return ConversionResult(group=group, failed=tuple(failed))
    return ConversionResult(group=group, values_cm=tuple(values))


def scan_dimensions(text: str, *, strict: bool = False) -> Iterator[ConversionResult]:
    """Yield a :class:`ConversionResult` for every match, failures included."""

    for group in iter_dimension_groups(text):
        yield convert_group(group, strict=strict)


def convert_dimensions(
    text: str,
    *,
    css_class: Optional[str] = None,
    strict: bool = False,
    renderer: Optional[Renderer] = None,
) -> str:
    """Return ``text`` with every convertible inch dimension wrapped in metric markup.

    Matches whose components cannot all be parsed are left untouched.
    """

    if not text:
        return text

    def _render(result: ConversionResult) -> str:
        if renderer is not None:
            return renderer(result)
        return render_metric_span(result, css_class=css_class)

    def _replace(match: re.Match[str]) -> str:
        result = convert_group(_group_from_match(match), strict=strict)
        if not result.ok:
            return match.group(0)
        return _render(result)

    return _DIMENSION_PATTERN.sub(_replace, text)
