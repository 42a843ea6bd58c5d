"""
Parsing of raw schema mappings into type descriptors and doc annotations.

The descriptor variant chosen for a mapping follows a fixed priority:
array with items, $ref, combinators (anyOf, allOf, oneOf), enum, plain type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import DocAnnotationError
from .nodes import (
    AppendAnnotation,
    ArrayType,
    CombinatorType,
    EnumType,
    PlainType,
    RefType,
    ReplaceAnnotation,
    RequiredAnnotation,
    TypeDescriptor,
)

COMBINATORS = ("anyOf", "allOf", "oneOf")


def _type_name(raw: Any) -> str | None:
    """Normalize a JSON Schema ``type`` value to display text."""
    if not raw:
        return None
    if isinstance(raw, (list, tuple)):
        return ", ".join(str(name) for name in raw)
    return str(raw)


def parse_type(schema: Any) -> TypeDescriptor:
    """
    Parse a schema (or property) mapping into a type descriptor.

    Args:
        schema: The raw schema mapping

    Returns:
        The descriptor variant matching the first applicable rule
    """
    if isinstance(schema, TypeDescriptor):
        return schema
    if not isinstance(schema, Mapping):
        return PlainType()

    raw_type = schema.get("type")
    items = schema.get("items")
    if raw_type == "array" and items is not None:
        return ArrayType(type_name="array", items=parse_type(items))

    ref = schema.get("$ref")
    if ref:
        return RefType(ref=str(ref))

    for key in COMBINATORS:
        members = schema.get(key)
        if members:
            return CombinatorType(combinator=key, members=[parse_type(member) for member in members])

    values = schema.get("enum")
    if values:
        return EnumType(type_name=_type_name(raw_type), values=list(values))

    return PlainType(type_name=_type_name(raw_type))


def parse_required_annotation(prop: Mapping[str, Any], key: str | None = None) -> RequiredAnnotation | None:
    """
    Parse ``docAnnotation.required`` from a property descriptor.

    Args:
        prop: The property descriptor
        key: Property key, used in error messages

    Returns:
        The annotation, or None when the property has no override

    Raises:
        DocAnnotationError: If the annotation type is neither "replace" nor "append"
    """
    doc_annotation = prop.get("docAnnotation") if isinstance(prop, Mapping) else None
    if not isinstance(doc_annotation, Mapping):
        return None

    annotation = doc_annotation.get("required")
    if not annotation:
        return None

    kind = annotation.get("type") if isinstance(annotation, Mapping) else None
    if kind == "replace":
        return ReplaceAnnotation(value=_annotation_value(annotation))
    if kind == "append":
        return AppendAnnotation(value=_annotation_value(annotation))
    raise DocAnnotationError(kind, key)


def _annotation_value(annotation: Mapping[str, Any]) -> str:
    value = annotation.get("value")
    return "" if value is None else str(value)
