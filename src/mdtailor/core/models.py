"""Field descriptors, route configuration, and body node models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, field_validator, model_validator


class FieldKind(str, Enum):
    """Declared semantic type of a metadata field"""
    string = "string"
    number = "number"
    boolean = "boolean"
    date = "date"
    array = "array"
    unknown = "unknown"


def _as_kind(value: Any) -> Any:
    """Map a declared type name to a FieldKind; unrecognised names become unknown."""
    if isinstance(value, FieldKind) or not isinstance(value, str):
        return value
    try:
        return FieldKind(value)
    except ValueError:
        return FieldKind.unknown


class FieldSchema(BaseModel):
    """One metadata field: name, kind, required flag, optional item kind for arrays."""
    model_config = ConfigDict(frozen=True)

    name:      StrictStr
    kind:      FieldKind
    required:  StrictBool
    item_kind: Optional[FieldKind] = None   # element kind for array fields; string when unset

    @model_validator(mode="before")
    @classmethod
    def _config_spelling(cls, data: Any) -> Any:
        """Accept the `type` / `items: {type}` spelling used in route config files."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "kind" not in data and "type" in data:
            data["kind"] = data.pop("type")
        items = data.pop("items", None)
        if isinstance(items, dict) and "item_kind" not in data and items.get("type") is not None:
            data["item_kind"] = items["type"]
        return data

    @field_validator("kind", "item_kind", mode="before")
    @classmethod
    def _kind(cls, value: Any) -> Any:
        return _as_kind(value)


class RouteConfig(BaseModel):
    """A named route: URL path, content folder, and the fields its documents declare."""
    model_config = ConfigDict(frozen=True)

    name:   StrictStr
    path:   StrictStr
    folder: StrictStr
    fields: tuple[FieldSchema, ...]

    @model_validator(mode="before")
    @classmethod
    def _metadata_alias(cls, data: Any) -> Any:
        if isinstance(data, dict) and "fields" not in data and "metadata" in data:
            data = dict(data)
            data["fields"] = data.pop("metadata")
        return data

    @model_validator(mode="after")
    def _unique_names(self) -> "RouteConfig":
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"Duplicate field name '{f.name}' in route '{self.name}'")
            seen.add(f.name)
        return self


class ListKind(str, Enum):
    unordered = "unordered"
    ordered = "ordered"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Node):
    type:  Literal["heading"] = "heading"
    level: int = Field(ge=1)    # run length of '#', not clamped
    text:  str


class ListOpen(_Node):
    type: Literal["list_open"] = "list_open"
    kind: ListKind


class ListItem(_Node):
    type: Literal["list_item"] = "list_item"
    text: str


class ListClose(_Node):
    type: Literal["list_close"] = "list_close"
    kind: ListKind


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    text: str


class Blank(_Node):
    type: Literal["blank"] = "blank"


DocumentNode = Annotated[
    Union[Heading, ListOpen, ListItem, ListClose, Paragraph, Blank],
    Field(discriminator="type"),
]

NODE_SEQUENCE = TypeAdapter(list[DocumentNode])


@dataclass(frozen=True)
class SplitDocument:
    """Front matter and body text as they appear between/after the delimiters."""
    front_matter: str
    body:         str


@dataclass(frozen=True)
class LoadedDocument:
    """Validated metadata plus the parsed body of one document."""
    metadata: dict[str, Any]
    body:     str
    nodes:    list = field(default_factory=list)   # DocumentNode values in document order
