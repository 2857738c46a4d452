from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader for checker configuration files.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config is not valid YAML: {path}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    allowed = {"version", "checker", "logging"}
    unknown = set(raw.keys()) - allowed
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    if "version" not in raw:
        raise ConfigError("Missing required top-level key: version")
