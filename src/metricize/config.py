"""Centralized configuration for metricize.

:func:`get_settings` returns the options shared by the command line and the
HTTP service: the CSS class of the markup wrapper, strict fraction parsing and
the structured log destination. Values come from environment variables, from
the ``[metricize]`` table of a TOML/YAML document pointed to by
``METRICIZE_CONFIG_FILE``, or from the built-in defaults, in that order.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .extraction.render import DEFAULT_CSS_CLASS
from .utils.logging import resolve_level

__all__ = ["Settings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime options."""

    css_class: str = DEFAULT_CSS_CLASS
    strict: bool = False
    log_path: Optional[Path] = None
    log_level: str = "INFO"

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values (useful for logging)."""

        return {
            "css_class": self.css_class,
            "strict": self.strict,
            "log_path": str(self.log_path) if self.log_path else None,
            "log_level": self.log_level,
        }


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Any) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _parse_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for '{name}': {value!r}")


def _parse_level(value: Any) -> str:
    return logging.getLevelName(resolve_level(str(value)))


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _build_settings(config_file: Optional[Path]) -> Settings:
    section: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = config_file.expanduser().resolve()
        section = _coalesce_mapping(_load_config_file(config_file).get("metricize"))
        config_dir = config_file.parent

    env = os.environ

    css_class = env.get("METRICIZE_CSS_CLASS") or section.get("css_class") or DEFAULT_CSS_CLASS

    raw_strict = env.get("METRICIZE_STRICT")
    if raw_strict is None:
        raw_strict = section.get("strict", False)
    strict = _parse_bool(raw_strict, name="strict")

    env_log_path = env.get("METRICIZE_LOG_PATH")
    if env_log_path:
        log_path = _normalize_path(env_log_path, base=None)
    else:
        log_path = _normalize_path(section.get("log_path"), base=config_dir)

    log_level = _parse_level(env.get("METRICIZE_LOG_LEVEL") or section.get("log_level") or "INFO")

    return Settings(css_class=str(css_class), strict=strict, log_path=log_path, log_level=log_level)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file))

    env_path = os.getenv("METRICIZE_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
