"""YAML config loader with environment API key and runtime get/set."""

import json
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

import yaml

from weatherlookup.config.defaults import API_KEY_ENV, DEFAULT_LOCATION
from weatherlookup.config.schema import LookupConfig


def load_config(path: str | Path | None = None) -> LookupConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields defaults. The API key falls back to
    the OPENWEATHER_API_KEY environment variable, and the default location
    to DEFAULT_LOCATION.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("default_location"):
        raw["default_location"] = DEFAULT_LOCATION.model_dump()

    api = raw.setdefault("api", {}) or {}
    if not api.get("api_key"):
        api["api_key"] = os.environ.get(API_KEY_ENV, "")
    raw["api"] = api

    return LookupConfig(**raw)


def resolve_timezone(config: LookupConfig) -> tzinfo | None:
    """Return the configured zone, or None for the system default.

    The name was checked when the config was validated.
    """
    name = config.display.timezone
    if not name:
        return None
    return ZoneInfo(name)


def get_config_value(config: LookupConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.locale'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: LookupConfig, dotted_key: str, value: Any) -> LookupConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new LookupConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if not isinstance(target.get(part), dict):
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return LookupConfig(**data)
