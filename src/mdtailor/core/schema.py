"""Build a metadata validator from an ordered list of field descriptors"""

from typing import Annotated, Any, Mapping, Sequence

from dateutil import parser as dateparser
from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    create_model,
)

from mdtailor.core.errors import Err, FieldIssue, Ok, Result, SchemaValidationError
from mdtailor.core.models import FieldKind, FieldSchema


def _check_date(value: str) -> str:
    """Accept any string dateutil reads as a calendar date; the string itself is kept."""
    try:
        dateparser.parse(value)
    except (ValueError, OverflowError):
        raise ValueError("Invalid date format") from None
    return value


def _check_number(value: Any) -> Any:
    """Accept ints and floats; bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a valid number")
    return value


DateString = Annotated[StrictStr, AfterValidator(_check_date)]
Number = Annotated[Any, AfterValidator(_check_number)]

SCALAR_TYPES: dict[FieldKind, Any] = {
    FieldKind.string:  StrictStr,
    FieldKind.number:  Number,
    FieldKind.boolean: StrictBool,
    FieldKind.date:    DateString,
    FieldKind.unknown: Any,
}


def field_type(f: FieldSchema) -> Any:
    """Return the annotation a field's raw value must satisfy."""
    if f.kind == FieldKind.array:
        item = f.item_kind if f.item_kind not in (None, FieldKind.array) else FieldKind.string
        return list[SCALAR_TYPES[item]]
    return SCALAR_TYPES[f.kind]


class Validator:
    """Maps a raw front-matter mapping to typed metadata or an aggregated error."""

    def __init__(self, fields: Sequence[FieldSchema]):
        self.fields = tuple(fields)
        # Positional attribute names keep arbitrary keys ("model_config", "allowed-tools")
        # out of pydantic's namespace; the real key is the alias.
        # Optional fields default to None without validation, so an absent key stays unset
        # while an explicit null is still checked against the field type.
        definitions = {
            f"f{i}": (
                field_type(f),
                Field(alias=f.name) if f.required else Field(default=None, alias=f.name),
            )
            for i, f in enumerate(self.fields)
        }
        self.model: type[BaseModel] = create_model(
            "FrontMatter",
            __config__=ConfigDict(strict=True, extra="ignore"),
            **definitions,
        )

    def validate(self, raw: Mapping[str, Any]) -> Result[dict[str, Any], SchemaValidationError]:
        """Validate every declared field and collect all failures."""
        try:
            instance = self.model.model_validate(dict(raw))
        except ValidationError as e:
            return Err(SchemaValidationError(issues=_issues(e)))
        return Ok(instance.model_dump(by_alias=True, exclude_unset=True))


def _issues(error: ValidationError) -> tuple[FieldIssue, ...]:
    """Flatten pydantic errors into (dotted path, message) pairs."""
    return tuple(
        FieldIssue(path=".".join(str(p) for p in e["loc"]), reason=e["msg"])
        for e in error.errors(include_url=False)
    )


def build_validator(fields: Sequence[FieldSchema]) -> Validator:
    """Compile fields into a Validator; the caller's sequence is not modified."""
    return Validator(fields)
