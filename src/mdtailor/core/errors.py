"""Result wrappers and the closed set of per-document error values"""

import logging
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union


logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying one error value."""
    error: E
    ok: Literal[False] = False


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class FieldIssue:
    """One offending metadata field: dotted path and a readable reason."""
    path: str
    reason: str


@dataclass(frozen=True)
class ConfigError:
    issues: tuple[FieldIssue, ...] = ()
    kind: Literal["config"] = "config"

    @property
    def message(self) -> str:
        return "Invalid configuration" + (
            ": " + "; ".join(f"{i.path}: {i.reason}" for i in self.issues) if self.issues else ""
        )


@dataclass(frozen=True)
class RouteNotFoundError:
    route: str
    kind: Literal["route_not_found"] = "route_not_found"

    @property
    def message(self) -> str:
        return f"Route '{self.route}' not found in configuration"


@dataclass(frozen=True)
class DocumentFormatError:
    """Raw text did not split into preamble, front matter and body."""
    segments: int
    kind: Literal["document_format"] = "document_format"

    @property
    def message(self) -> str:
        return f"Invalid document format: expected 3 segments around '---', found {self.segments}"


@dataclass(frozen=True)
class FrontMatterSyntaxError:
    reason: str
    kind: Literal["front_matter_syntax"] = "front_matter_syntax"

    @property
    def message(self) -> str:
        return f"Invalid YAML front matter: {self.reason}"


@dataclass(frozen=True)
class SchemaValidationError:
    """Every field that failed validation, collected in one value.

    unexpected lists undeclared keys found in the same front matter.
    """
    issues: tuple[FieldIssue, ...]
    unexpected: tuple[str, ...] = ()
    kind: Literal["schema_validation"] = "schema_validation"

    @property
    def message(self) -> str:
        return f"Metadata validation failed for {len(self.issues)} field(s)"


@dataclass(frozen=True)
class UnexpectedFieldError:
    fields: tuple[str, ...]
    kind: Literal["unexpected_field"] = "unexpected_field"

    @property
    def message(self) -> str:
        return f"Unexpected metadata fields: {', '.join(self.fields)}"


DocumentError = Union[
    ConfigError,
    RouteNotFoundError,
    DocumentFormatError,
    FrontMatterSyntaxError,
    SchemaValidationError,
    UnexpectedFieldError,
]


def log_error(error: DocumentError, context: str) -> None:
    """Log error with its context; per-field detail goes to DEBUG."""
    logger.error("Error in %s: %s", context, error.message)
    if isinstance(error, (SchemaValidationError, ConfigError)):
        for issue in error.issues:
            logger.debug("- Field: %s, Issue: %s", issue.path, issue.reason)
    if isinstance(error, SchemaValidationError) and error.unexpected:
        logger.debug("Unexpected fields: %s", ", ".join(error.unexpected))
    elif isinstance(error, UnexpectedFieldError):
        logger.debug("Unexpected fields: %s", ", ".join(error.fields))
