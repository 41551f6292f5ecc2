"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError

from mdtailor.core.errors import ConfigError
from mdtailor.core.models import RouteConfig
from mdtailor.core.routes import ContentConfig, config_error, validate_config


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDTAILOR_"
NESTED_FIELDS = {"routes", "class_names"}   # config.yaml only; not read from the environment
CONTENT_FIELDS = tuple(ContentConfig.model_fields)


class Settings(ContentConfig):
    app_name:    str = "mdtailor"
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    escape_html: bool = Field(default=False, description="HTML-escape node text in markup output")
    routes:      tuple[RouteConfig, ...] = ()
    class_names: dict[str, str] = Field(default_factory=dict, description="CSS class per element tag")


class ConfigLoadError(ValueError):
    """Settings failed validation; error holds every offending field."""

    def __init__(self, error: ConfigError):
        super().__init__(error.message)
        self.error = error


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDTAILOR_<FIELD> env vars, then non-None CLI overrides.

    work_dir and routes go through validate_config; the remaining fields are
    checked by Settings. Either failure raises ConfigLoadError.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if name in NESTED_FIELDS:
            continue
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    content = {k: data.pop(k) for k in CONTENT_FIELDS if k in data}
    content.setdefault("routes", ())
    checked = validate_config(content)
    if not checked.ok:
        raise ConfigLoadError(checked.error)
    try:
        return Settings(**data, work_dir=checked.value.work_dir, routes=checked.value.routes)
    except ValidationError as e:
        raise ConfigLoadError(config_error(e)) from e
