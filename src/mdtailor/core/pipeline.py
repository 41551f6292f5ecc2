"""Document pipeline: split, validate metadata, parse body"""

from typing import Sequence

from mdtailor.core.blocks import parse_blocks
from mdtailor.core.errors import DocumentError, Ok, Result, log_error
from mdtailor.core.frontmatter import validate_front_matter
from mdtailor.core.models import FieldSchema, LoadedDocument, RouteConfig
from mdtailor.core.routes import find_route
from mdtailor.core.split import split_document


def load_document(
    raw: str,
    fields: Sequence[FieldSchema],
    context: str = "document",
    ) -> Result[LoadedDocument, DocumentError]:
    """Return validated metadata and body nodes, or the first failing stage's error.

    Failures are logged with context before being returned.
    """
    split = split_document(raw)
    if not split.ok:
        log_error(split.error, f"parsing {context}")
        return split

    metadata = validate_front_matter(split.value.front_matter, fields)
    if not metadata.ok:
        log_error(metadata.error, f"validating metadata of {context}")
        return metadata

    body = split.value.body
    return Ok(LoadedDocument(metadata=metadata.value, body=body, nodes=parse_blocks(body)))


def load_route_document(
    raw: str,
    routes: Sequence[RouteConfig],
    route: str,
    ) -> Result[LoadedDocument, DocumentError]:
    """Look up route by name, then load raw against its fields."""
    found = find_route(routes, route)
    if not found.ok:
        log_error(found.error, f"getting metadata for route '{route}'")
        return found
    return load_document(raw, found.value.fields, context=f"route '{route}'")
