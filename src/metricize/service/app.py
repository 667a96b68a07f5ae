from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from .._version import __version__
from ..config import get_settings
from ..extraction.parsers import convert_dimensions, scan_dimensions, tokenize_numeric

APP_VERSION = __version__

# ---- FastAPI app ----
app = FastAPI(title="metricize API", version=APP_VERSION)


class ConvertIn(BaseModel):
    text: str = Field(..., description="Raw text possibly holding inch dimensions")
    # optional overrides
    css_class: Optional[str] = None
    strict: Optional[bool] = None


class ConvertOut(BaseModel):
    text: str
    converted: str


class ParseIn(BaseModel):
    token: str = Field(..., description="Single numeric component, e.g. '31 1/8'")
    strict: bool = False
    allow_bare_glyph: bool = False


class ParseOut(BaseModel):
    token: str
    kind: Optional[str] = None
    value: Optional[float] = None
    fraction: Optional[str] = None


class ScanIn(BaseModel):
    text: str
    strict: Optional[bool] = None


class MatchOut(BaseModel):
    raw: str
    span: List[int]
    components: List[str]
    original: str
    ok: bool
    values_cm: List[str]
    metric: Optional[str] = None
    failed: List[str]


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": APP_VERSION,
        "settings": get_settings().as_dict(),
    }


@app.post("/convert", response_model=ConvertOut)
def convert(payload: ConvertIn):
    settings = get_settings()
    strict = settings.strict if payload.strict is None else payload.strict
    converted = convert_dimensions(payload.text, css_class=payload.css_class or settings.css_class, strict=strict)
    return ConvertOut(text=payload.text, converted=converted)


@app.post("/parse", response_model=ParseOut)
def parse(payload: ParseIn):
    parsed = tokenize_numeric(payload.token, strict=payload.strict, allow_bare_glyph=payload.allow_bare_glyph)
    if parsed is None:
        return ParseOut(token=payload.token)
    return ParseOut(token=payload.token, kind=parsed.kind, value=float(parsed.value), fraction=str(parsed.value))


@app.post("/scan", response_model=List[MatchOut])
def scan(payload: ScanIn):
    settings = get_settings()
    strict = settings.strict if payload.strict is None else payload.strict
    return [MatchOut(**result.as_dict()) for result in scan_dimensions(payload.text, strict=strict)]
