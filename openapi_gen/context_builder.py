"""Build the Jinja2 template context from a normalized Schema.

Maps each definition to a model entry with C# type names and PascalCase
field names, and assembles the full context dict for models.cs.j2.
"""

from __future__ import annotations

from typing import Any

from .config import GeneratorConfig
from .naming import convert_ref_to_class_name, snake_case_to_pascal_case, title
from .schema_parser import ArrayOf, Definition, FieldKind, ObjectRef, Primitive, Schema

GENERATOR_NAME = "openapi-gen"

# C# type for each primitive field kind
_PRIMITIVE_TYPES: dict[Primitive, str] = {
    Primitive.INTEGER: "int",
    Primitive.BOOLEAN: "bool",
    Primitive.STRING: "string",
}


def interface_name(class_name: str) -> str:
    return f"I{class_name}"


def csharp_type(kind: FieldKind) -> str:
    """Return the C# type declared for a field kind.

    Object references use the interface of the referenced model.
    """
    if isinstance(kind, Primitive):
        return _PRIMITIVE_TYPES[kind]
    if isinstance(kind, ArrayOf):
        return f"List<{csharp_type(kind.element)}>"
    if isinstance(kind, ObjectRef):
        return interface_name(convert_ref_to_class_name(kind.ref))
    raise TypeError(f"Unknown field kind: {kind!r}")


def _build_model(definition: Definition) -> dict[str, Any]:
    class_name = title(definition.name)
    fields = [
        {
            "name": snake_case_to_pascal_case(prop.name),
            "json_name": prop.name,
            "type": csharp_type(prop.kind),
            "description": prop.description,
            "is_list": isinstance(prop.kind, ArrayOf),
        }
        for prop in definition.properties
    ]
    return {
        "name": definition.name,
        "class_name": class_name,
        "interface_name": interface_name(class_name),
        "description": definition.description,
        "fields": fields,
    }


def build_context(schema: Schema, config: GeneratorConfig) -> dict[str, Any]:
    """Build the full template context from the schema."""
    models = [_build_model(definition) for definition in schema.definitions]
    return {
        "generator_name": GENERATOR_NAME,
        "namespace": config.namespace,
        "json_attribute": config.json_attribute,
        "models": models,
        "model_count": len(models),
    }
