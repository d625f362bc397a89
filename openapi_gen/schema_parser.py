"""Validate a decoded Swagger document into an immutable schema model.

Handles:
- Definitions and their properties, in document order
- Property classification into field kinds (primitive, array, object ref)
- Paths and operations (decoded for completeness, not rendered)
- Structural checks via Pydantic: a field holding the wrong JSON type is a
  decode error

Hierarchy:
    Schema
    ├── Definition (0..N, keyed by name in the document)
    │   └── Property (0..N)
    │       └── Items        (type == "array")
    └── PathItem (0..N, keyed by URL path)
        └── Operation (one per HTTP method key)
            ├── Response  (keyed by status code)
            └── Parameter
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError
from pydantic import field_validator, model_validator

from .exceptions import SchemaDecodeError
from .loader import load_spec

logger = logging.getLogger(__name__)

# Keys under a path item that hold operations; anything else is ignored
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class Primitive(enum.Enum):
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True)
class ObjectRef:
    """Reference to another definition, e.g. ``#/definitions/Wallet``."""

    ref: str


@dataclass(frozen=True)
class ArrayOf:
    element: Union[Primitive, ObjectRef]


FieldKind = Union[Primitive, ArrayOf, ObjectRef]

_PRIMITIVES = {p.value: p for p in Primitive}


def _named(mapping: Any, key: str) -> Any:
    """Turn ``{name: {...}}`` into ``[{key: name, ...}]`` in document order."""
    if not isinstance(mapping, dict):
        raise ValueError("expected an object keyed by name")
    return [
        {**value, key: name} if isinstance(value, dict) else value
        for name, value in mapping.items()
    ]


class _SchemaModel(BaseModel):
    """Frozen base: unknown keys are ignored, null counts as missing."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ── Definitions ────────────────────────────────────────────────────────────────


class Items(_SchemaModel):
    """Element schema of an array property."""
    type: str = ""
    ref: str = Field(default="", alias="$ref")


class Property(_SchemaModel):
    """One field of a Definition. ``kind`` is decided once, on validation."""
    name: str = ""
    type: str = ""
    ref: str = Field(default="", alias="$ref")
    items: Items = Items()
    format: str = ""
    description: str = ""

    _kind: Optional[Any] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._kind = classify_property(self)

    @property
    def kind(self) -> FieldKind:
        return self._kind


class Definition(_SchemaModel):
    name: str
    description: str = ""
    properties: tuple[Property, ...] = ()

    @field_validator("properties", mode="before")
    @classmethod
    def _properties_by_name(cls, v: Any) -> Any:
        return _named(v, "name")


# ── Paths ──────────────────────────────────────────────────────────────────────


class SchemaRef(_SchemaModel):
    type: str = ""
    ref: str = Field(default="", alias="$ref")


class Response(_SchemaModel):
    status: str
    description: str = ""
    schema_: SchemaRef = Field(default=SchemaRef(), alias="schema")


class Parameter(_SchemaModel):
    name: str = ""
    location: str = Field(default="", alias="in")
    required: bool = False
    type: str = ""
    items: Items = Items()
    schema_: SchemaRef = Field(default=SchemaRef(), alias="schema")


class Operation(_SchemaModel):
    method: str
    summary: str = ""
    operation_id: str = Field(default="", alias="operationId")
    responses: tuple[Response, ...] = ()
    parameters: tuple[Parameter, ...] = ()

    @field_validator("responses", mode="before")
    @classmethod
    def _responses_by_status(cls, v: Any) -> Any:
        return _named(v, "status")

    def response_ref(self, status: str) -> str:
        """Return the schema ``$ref`` of the response for ``status``, or ""."""
        for response in self.responses:
            if response.status == status:
                return response.schema_.ref
        return ""


class PathItem(_SchemaModel):
    path: str
    operations: tuple[Operation, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _collect_operations(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        operations = [
            {**op, "method": method} if isinstance(op, dict) else op
            for method, op in data.items()
            if method in HTTP_METHODS
        ]
        return {"path": data.get("path", ""), "operations": operations}


class Schema(_SchemaModel):
    """The root document: definitions and paths, both in document order."""
    definitions: tuple[Definition, ...] = ()
    paths: tuple[PathItem, ...] = ()

    @field_validator("definitions", mode="before")
    @classmethod
    def _definitions_by_name(cls, v: Any) -> Any:
        return _named(v, "name")

    @field_validator("paths", mode="before")
    @classmethod
    def _paths_by_url(cls, v: Any) -> Any:
        return _named(v, "path")

    def get_definition(self, name: str) -> Definition | None:
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None


def classify_property(prop: Property) -> FieldKind:
    """Decide the field kind of a property.

    integer/boolean/string map to primitives, array maps to ArrayOf with a
    primitive or object element, and anything else is an object reference.
    """
    if prop.type in _PRIMITIVES:
        return _PRIMITIVES[prop.type]

    if prop.type == "array":
        if prop.items.type in _PRIMITIVES:
            return ArrayOf(_PRIMITIVES[prop.items.type])
        if not prop.items.ref:
            logger.warning("property %r: array items have no $ref; element reference is empty", prop.name)
        return ArrayOf(ObjectRef(prop.items.ref))

    if not prop.ref:
        logger.warning(
            "property %r: type %r is not supported and no $ref is set; reference is empty",
            prop.name, prop.type,
        )
    return ObjectRef(prop.ref)


def parse_schema(spec: dict[str, Any], source: str = "<input>") -> Schema:
    """Validate a decoded document into a Schema.

    Raises SchemaDecodeError when a known field has the wrong JSON type.
    """
    try:
        schema = Schema.model_validate(spec)
    except ValidationError as exc:
        raise SchemaDecodeError(f"Unable to decode input {source} : {exc}") from exc

    logger.debug(
        "Parsed %d definitions and %d paths from %s",
        len(schema.definitions), len(schema.paths), source,
    )
    return schema


def load_schema(path: Path | str) -> Schema:
    """Load and validate the schema document at ``path``."""
    return parse_schema(load_spec(path), source=str(path))
