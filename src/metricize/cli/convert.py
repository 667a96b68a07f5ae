"""CLI commands converting inch dimensions found in text."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from ..config import get_settings
from ..extraction.parsers import convert_dimensions, scan_dimensions, tokenize_numeric
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = ["convert_command", "parse_command", "scan_command"]


def _read_source(text: Optional[str], input_path: Optional[Path]) -> str:
    if text is not None and input_path is not None:
        raise typer.BadParameter("Pass either TEXT or --input, not both")
    if text is not None:
        return text
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    return sys.stdin.read()


def convert_command(
    text: Optional[str] = typer.Argument(None, help="Text to convert; read from --input or stdin when omitted"),
    input_path: Optional[Path] = typer.Option(
        None, "--input", exists=True, dir_okay=False, readable=True, help="File with the text to convert"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", dir_okay=False, help="Destination file; stdout when omitted"
    ),
    css_class: Optional[str] = typer.Option(None, "--css-class", help="CSS class of the metric wrapper"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject zero denominators and unknown glyphs"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="JSONL file receiving structured log events"
    ),
) -> None:
    """Replace inch dimensions with their centimetre equivalent."""

    settings = get_settings()
    source = _read_source(text, input_path)
    effective_strict = settings.strict if strict is None else strict

    logger = configure_json_logger(log_file or settings.log_path, level=settings.log_level)
    trace_id = generate_trace_id()
    log_event(
        logger,
        "convert.start",
        trace_id=trace_id,
        input=str(input_path) if input_path else None,
        characters=len(source),
        strict=effective_strict,
    )

    converted = convert_dimensions(source, css_class=css_class or settings.css_class, strict=effective_strict)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(converted, encoding="utf-8")
    else:
        typer.echo(converted, nl=not converted.endswith("\n"))

    log_event(
        logger,
        "convert.completed",
        trace_id=trace_id,
        output=str(output_path) if output_path else None,
        changed=converted != source,
    )
    flush_handlers(logger)


def parse_command(
    token: str = typer.Argument(..., help="Single numeric component, e.g. '31 1/8' or '5½'"),
    strict: bool = typer.Option(False, "--strict", help="Reject zero denominators and unknown glyphs"),
    allow_bare_glyph: bool = typer.Option(False, "--allow-bare-glyph", help="Accept a glyph without whole part"),
) -> None:
    """Print the parsed value of a single numeric component as JSON."""

    parsed = tokenize_numeric(token, strict=strict, allow_bare_glyph=allow_bare_glyph)
    payload = {
        "token": token,
        "kind": parsed.kind if parsed is not None else None,
        "value": float(parsed.value) if parsed is not None else None,
        "fraction": str(parsed.value) if parsed is not None else None,
    }
    typer.echo(json.dumps(payload, ensure_ascii=False))
    if parsed is None:
        raise typer.Exit(code=1)


def scan_command(
    text: Optional[str] = typer.Argument(None, help="Text to scan; read from --input or stdin when omitted"),
    input_path: Optional[Path] = typer.Option(
        None, "--input", exists=True, dir_okay=False, readable=True, help="File with the text to scan"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject zero denominators and unknown glyphs"
    ),
) -> None:
    """List every dimension match as JSON Lines without modifying the text."""

    settings = get_settings()
    source = _read_source(text, input_path)
    effective_strict = settings.strict if strict is None else strict
    for result in scan_dimensions(source, strict=effective_strict):
        typer.echo(json.dumps(result.as_dict(), ensure_ascii=False))
