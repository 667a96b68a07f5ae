from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .parsers.dimensions import ConversionResult

__all__ = ["DEFAULT_CSS_CLASS", "render_metric_span"]

DEFAULT_CSS_CLASS = "metric-converted"


def render_metric_span(result: "ConversionResult", css_class: str | None = None) -> str:
    """Wrap a converted group in a span carrying the original text as title."""

    css = escape(css_class or DEFAULT_CSS_CLASS, quote=True)
    title = escape(result.group.original, quote=True)
    return f'<span class="{css}" title="{title}">{escape(result.metric, quote=False)}</span>'
