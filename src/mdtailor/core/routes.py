"""Validation of caller-supplied route configuration and route lookup"""

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from mdtailor.core.errors import ConfigError, Err, FieldIssue, Ok, Result, RouteNotFoundError
from mdtailor.core.models import RouteConfig


class ContentConfig(BaseModel):
    """Top-level content configuration: working directory and its routes."""
    model_config = ConfigDict(frozen=True)

    work_dir: str = "content"
    routes:   tuple[RouteConfig, ...]


def config_error(error: ValidationError) -> ConfigError:
    return ConfigError(issues=tuple(
        FieldIssue(path=".".join(str(p) for p in e["loc"]) or "<root>", reason=e["msg"])
        for e in error.errors(include_url=False)
    ))


def validate_config(data: Any) -> Result[ContentConfig, ConfigError]:
    """Check the shape of a configuration mapping."""
    try:
        return Ok(ContentConfig.model_validate(data))
    except ValidationError as e:
        return Err(config_error(e))


def find_route(routes: Sequence[RouteConfig], name: str) -> Result[RouteConfig, RouteNotFoundError]:
    """Return the route called name."""
    for route in routes:
        if route.name == name:
            return Ok(route)
    return Err(RouteNotFoundError(route=name))
