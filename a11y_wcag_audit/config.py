"""Settings for an audit run.

Precedence (lowest to highest): built-in defaults, environment variables,
YAML config file, command-line options.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

DEFAULT_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_MS = 30000
MIN_TARGET_SIZE = 44
BROWSERS = ("chromium", "firefox", "webkit")

ENV_VARS = {
    "url": "A11Y_AUDIT_URL",
    "timeout_ms": "A11Y_AUDIT_TIMEOUT_MS",
    "browser": "A11Y_AUDIT_BROWSER",
    "axe_path": "AXE_CORE_PATH",
}


class ConfigError(Exception):
    """Raised when settings cannot be loaded or fail validation."""


class AuditSettings(BaseModel):
    url: str = DEFAULT_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    browser: str = "chromium"
    axe_path: Optional[str] = None
    min_target_size: int = MIN_TARGET_SIZE
    json_out: Optional[str] = None

    @field_validator("browser")
    @classmethod
    def _known_browser(cls, v: str) -> str:
        v = v.lower()
        if v not in BROWSERS:
            raise ValueError(f"browser must be one of {', '.join(BROWSERS)}")
        return v

    @field_validator("timeout_ms", "min_target_size")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be positive")
        return v


def _from_env() -> Dict[str, Any]:
    values = {}
    for field, var in ENV_VARS.items():
        raw = os.environ.get(var)
        if raw:
            values[field] = raw
    return values


def _from_file(config_file: str) -> Dict[str, Any]:
    path = Path(config_file)
    if not path.exists():
        raise ConfigError(f"Config file not found: {config_file}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_file}")
    unknown = set(data) - set(AuditSettings.model_fields)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return data


def load_settings(config_file: Optional[str] = None, **overrides: Any) -> AuditSettings:
    values = _from_env()
    if config_file:
        values.update(_from_file(config_file))
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return AuditSettings(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


__all__ = ["AuditSettings", "ConfigError", "load_settings", "DEFAULT_URL"]
