"""YAML front matter parsing and closed-world metadata validation"""

import logging
import re
from dataclasses import replace
from typing import Any, Sequence

import yaml

from mdtailor.core.errors import (
    DocumentError,
    Err,
    FrontMatterSyntaxError,
    Ok,
    Result,
    UnexpectedFieldError,
)
from mdtailor.core.models import FieldSchema
from mdtailor.core.schema import build_validator


logger = logging.getLogger(__name__)


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalars: unquoted dates stay strings, only true/false are booleans."""


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def parse_front_matter(text: str) -> Result[dict[str, Any], FrontMatterSyntaxError]:
    """Return the front matter as a mapping; empty text yields {}."""
    try:
        data = yaml.load(text, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        return Err(FrontMatterSyntaxError(reason=str(e)))
    if data is None:
        return Ok({})
    if not isinstance(data, dict):
        return Err(FrontMatterSyntaxError(reason=f"expected a mapping, got {type(data).__name__}"))
    return Ok({str(k): v for k, v in data.items()})


def unexpected_fields(raw: dict[str, Any], fields: Sequence[FieldSchema]) -> tuple[str, ...]:
    """Keys of raw not declared by any field, in document order."""
    names = {f.name for f in fields}
    return tuple(k for k in raw if k not in names)


def validate_front_matter(
    text: str,
    fields: Sequence[FieldSchema],
    ) -> Result[dict[str, Any], DocumentError]:
    """Parse and validate front matter against fields.

    Schema failures are reported first and carry any undeclared keys as well.
    Undeclared keys fail the document even when every declared field is valid.
    """
    parsed = parse_front_matter(text)
    if not parsed.ok:
        return parsed
    raw = parsed.value

    result = build_validator(fields).validate(raw)
    unexpected = unexpected_fields(raw, fields)
    if not result.ok:
        return Err(replace(result.error, unexpected=unexpected))
    if unexpected:
        return Err(UnexpectedFieldError(fields=unexpected))

    logger.debug("Validated %d metadata field(s)", len(result.value))
    return result
