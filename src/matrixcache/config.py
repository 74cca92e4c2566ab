"""Configuration loader for the matrixcache walkthrough."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import numpy as np
import yaml
from jsonschema import Draft7Validator

DEFAULT_CONFIG_PATH = "config/matrixcache.defaults.yml"

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "tolerance": {"type": "number", "minimum": 0},
        "cache_hit_notice": {"type": "boolean"},
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
        "print_precision": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def validate_config(data: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"config validation failed: {messages}")


@dataclass(frozen=True)
class MatrixCacheConfig:
    tolerance: float
    cache_hit_notice: bool
    log_level: str
    print_precision: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatrixCacheConfig":
        return cls(
            tolerance=float(data.get("tolerance", np.finfo(float).eps)),
            cache_hit_notice=bool(data.get("cache_hit_notice", True)),
            log_level=str(data.get("log_level", "INFO")).upper(),
            print_precision=int(data.get("print_precision", 4)),
        )


ENV_MAP = {
    "tolerance": "MATRIXCACHE_TOLERANCE",
    "cache_hit_notice": "MATRIXCACHE_CACHE_HIT_NOTICE",
    "log_level": "MATRIXCACHE_LOG_LEVEL",
    "print_precision": "MATRIXCACHE_PRINT_PRECISION",
}


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: str) -> Any:
    """Map known flag spellings to bool; anything else is left for the schema to reject."""
    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return raw


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "tolerance":
            value = float(value)
        elif key == "print_precision":
            value = int(value)
        elif key == "cache_hit_notice":
            value = _parse_bool(value)
        elif key == "log_level":
            value = value.upper()
        merged[key] = value

    return merged


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> MatrixCacheConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    validate_config(data)
    return MatrixCacheConfig.from_dict(data)


def default_config() -> MatrixCacheConfig:
    """Built-in defaults with environment overrides, no file needed."""
    data = merge_env_overrides({})
    validate_config(data)
    return MatrixCacheConfig.from_dict(data)
