from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError


CONFIG_ENV_VAR = "STATEMENT_PARSER_CONFIG"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class ParserSettings:
    row_tolerance: float = 0.0          # 0 => agrupar filas por y redondeado exacto
    fallback_year: Optional[int] = None  # año si el texto no trae ninguno (None => año actual)
    log_level: str = "WARNING"


DEFAULT_SETTINGS = ParserSettings()


def _coerce(y: Dict[str, Any]) -> ParserSettings:
    known = {f.name for f in fields(ParserSettings)}
    unknown = sorted(set(y) - known)
    if unknown:
        raise ConfigError(f"Unknown settings key(s): {', '.join(unknown)}")

    try:
        tolerance = float(y.get("row_tolerance", DEFAULT_SETTINGS.row_tolerance))
        raw_year = y.get("fallback_year", DEFAULT_SETTINGS.fallback_year)
        year = int(raw_year) if raw_year is not None else None
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid settings value: {e}") from e

    if tolerance < 0:
        raise ConfigError("row_tolerance must be >= 0")

    level = str(y.get("log_level", DEFAULT_SETTINGS.log_level)).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log_level {level!r} (expected one of: {', '.join(LOG_LEVELS)})")

    return ParserSettings(row_tolerance=tolerance, fallback_year=year, log_level=level)


def load_settings(path: Union[str, Path, None] = None) -> ParserSettings:
    """
    Lee la configuración YAML (path explícito o $STATEMENT_PARSER_CONFIG).
    Sin archivo => valores por defecto.
    """
    if path is None:
        env = os.environ.get(CONFIG_ENV_VAR)
        if not env:
            return DEFAULT_SETTINGS
        path = env

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise ConfigError(f"Missing config file: {cfg_path}")

    try:
        y = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {e}") from e

    if not isinstance(y, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping at the top level")

    return _coerce(y)
