from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DEFAULT_BASE_COLOR, ChartSettings, ClassifierSettings

"""Config loader for sheetchart.

Responsibilities:
- Load YAML config (config/sheetchart.yml by default)
- Validate it against the packaged JSON schema (config_schema.json)
- Apply defaults for missing keys
- Apply environment overrides (SHEETCHART_*), typically loaded from .env
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "apply_env_overrides",
    "default_config",
    "load_config",
    "settings_from_dict",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/sheetchart.yml")

# 環境変数 -> config キー
ENV_OVERRIDES = {
    "SHEETCHART_BASE_COLOR": "base_color",
    "SHEETCHART_NUMBER_FORMAT": "number_format",
    "SHEETCHART_SAMPLE_SIZE": "sample_size",
}


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Mapping[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or if the
            config data fails schema validation (unknown keys, wrong types,
            out of range thresholds).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(dict(data), schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def settings_from_dict(data: Mapping[str, Any]) -> ChartSettings:
    """Build ChartSettings from an already validated mapping."""
    defaults = ClassifierSettings()
    classifier = ClassifierSettings(
        sample_size=data.get("sample_size", defaults.sample_size),
        date_threshold=data.get("date_threshold", defaults.date_threshold),
        numeric_threshold=data.get("numeric_threshold", defaults.numeric_threshold),
        mixed_threshold=data.get("mixed_threshold", defaults.mixed_threshold),
        max_workers=data.get("max_workers", defaults.max_workers),
    )
    return ChartSettings(
        classifier=classifier,
        base_color=data.get("base_color", DEFAULT_BASE_COLOR),
        number_format=data.get("number_format", "decimal"),
    )


def apply_env_overrides(data: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Overlay SHEETCHART_* environment variables onto raw config data."""
    environ = os.environ if environ is None else environ
    merged = dict(data)
    for env_key, config_key in ENV_OVERRIDES.items():
        raw = environ.get(env_key)
        if raw is None or raw == "":
            continue
        if config_key == "sample_size":
            try:
                merged[config_key] = int(raw)
            except ValueError as e:
                raise ConfigError(f"{env_key} must be an integer: {raw!r}") from e
        else:
            merged[config_key] = raw
    return merged


def default_config(environ: Mapping[str, str] | None = None) -> ChartSettings:
    """Settings used when no config file exists (defaults + env overrides)."""
    data = apply_env_overrides({}, environ)
    _validate_config_schema(data)
    return settings_from_dict(data)


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> ChartSettings:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    data = apply_env_overrides(data, environ)
    _validate_config_schema(data)
    return settings_from_dict(data)
