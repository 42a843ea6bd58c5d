"""
Node definitions for documented schemas.

A SchemaNode is one documented unit of the dependency graph. Type descriptors
and doc annotations are the parsed, tagged forms of the raw schema mappings
that the renderer matches over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class SchemaNode:
    """A schema with its identifier and the child schemas it depends on."""

    id: str = ""
    schema: dict[str, Any] = field(default_factory=dict)

    # Edges of the dependency graph; may reach nodes seen elsewhere
    dependencies: list[SchemaNode] = field(default_factory=list, repr=False)


@dataclass
class TypeDescriptor:
    """Base class for parsed type descriptors."""


@dataclass
class ArrayType(TypeDescriptor):
    """An array whose items are described by another descriptor."""

    type_name: str = "array"
    items: TypeDescriptor | None = None


@dataclass
class RefType(TypeDescriptor):
    """A $ref to another documented schema."""

    ref: str = ""


@dataclass
class CombinatorType(TypeDescriptor):
    """anyOf / allOf / oneOf over member descriptors."""

    combinator: str = "anyOf"
    members: list[TypeDescriptor] = field(default_factory=list)


@dataclass
class EnumType(TypeDescriptor):
    """A type restricted to a fixed set of values."""

    type_name: str | None = None
    values: list[Any] = field(default_factory=list)


@dataclass
class PlainType(TypeDescriptor):
    """A bare type name, possibly absent."""

    type_name: str | None = None


@dataclass
class RequiredAnnotation:
    """Base class for docAnnotation.required overrides."""

    value: str = ""

    def apply(self, default: str) -> str:
        raise NotImplementedError


@dataclass
class ReplaceAnnotation(RequiredAnnotation):
    """Replace the computed required text with ``value``."""

    def apply(self, default: str) -> str:
        return self.value


@dataclass
class AppendAnnotation(RequiredAnnotation):
    """Append ``value`` to the computed required text."""

    def apply(self, default: str) -> str:
        return default + self.value
