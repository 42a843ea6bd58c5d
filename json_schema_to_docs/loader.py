"""
Loading of schema files into a SchemaNode graph.

A schema file is either a JSON list of schemas that each carry an ``id``
(or ``$id``), or a JSON object mapping ids to schemas. The dependencies of
a schema are the ids it references through ``$ref``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import SchemaLoadError
from .nodes import SchemaNode

logger = logging.getLogger(__name__)

# Keys whose values are sample data, not schema structure
_DATA_KEYS = {"examples", "antiExamples", "default", "const", "enum"}

# Keys whose values map names to subschemas
_SCHEMA_MAP_KEYS = {"properties", "patternProperties", "definitions", "$defs", "dependentSchemas"}


def find_refs(schema: Any) -> list[str]:
    """
    Collect the ids referenced by ``$ref`` anywhere inside *schema*.

    Local JSON pointers (``#/...``) are ignored. Ids are returned in order of
    first appearance, without duplicates.
    """
    refs: list[str] = []

    def visit(value: Any) -> None:
        if isinstance(value, dict):
            ref = value.get("$ref")
            if isinstance(ref, str) and not ref.startswith("#") and ref not in refs:
                refs.append(ref)
            for key, child in value.items():
                if key in _SCHEMA_MAP_KEYS and isinstance(child, dict):
                    # Keys of these mappings are names, so "default" here is a property
                    for subschema in child.values():
                        visit(subschema)
                elif key not in _DATA_KEYS:
                    visit(child)
        elif isinstance(value, list):
            for child in value:
                visit(child)

    visit(schema)
    return refs


def _entries(data: Any) -> list[tuple[str, dict[str, Any]]]:
    """Extract (id, schema) pairs from the decoded file content."""
    if isinstance(data, list):
        entries = []
        for index, schema in enumerate(data):
            if not isinstance(schema, dict):
                raise SchemaLoadError(f"Schema at index {index} is not an object")
            schema_id = schema.get("id") or schema.get("$id")
            if not schema_id:
                raise SchemaLoadError(f"Schema at index {index} has no id")
            entries.append((str(schema_id), schema))
        return entries

    if isinstance(data, dict):
        entries = []
        for schema_id, schema in data.items():
            if not isinstance(schema, dict):
                raise SchemaLoadError(f"Schema {schema_id!r} is not an object")
            entries.append((schema_id, schema))
        return entries

    raise SchemaLoadError("Schema file must contain a list or an object of schemas")


def schemas_from_data(data: Any, root_id: str | None = None) -> SchemaNode:
    """
    Build the schema graph described by decoded JSON *data*.

    Args:
        data: A list of schemas with ids, or a mapping of id to schema
        root_id: Id of the root schema (default: the first schema)

    Returns:
        The root SchemaNode, with dependencies wired from $ref

    Raises:
        SchemaLoadError: On duplicate ids, unresolved refs or an unknown root
    """
    nodes: dict[str, SchemaNode] = {}
    for schema_id, schema in _entries(data):
        if schema_id in nodes:
            raise SchemaLoadError(f"Duplicate schema id: {schema_id}")
        nodes[schema_id] = SchemaNode(id=schema_id, schema=schema)

    if not nodes:
        raise SchemaLoadError("No schemas found")

    for node in nodes.values():
        for ref in find_refs(node.schema):
            if ref == node.id:
                continue
            if ref not in nodes:
                raise SchemaLoadError(f"Unresolved $ref {ref!r} in schema {node.id}")
            node.dependencies.append(nodes[ref])

    if root_id is None:
        root_id = next(iter(nodes))
    if root_id not in nodes:
        raise SchemaLoadError(f"Root schema {root_id!r} not found")

    logger.debug("Loaded %d schemas, root %s", len(nodes), root_id)
    return nodes[root_id]


def load_schemas(path: str | Path, root_id: str | None = None) -> SchemaNode:
    """Load the schema graph stored in the JSON file at *path*."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in {path}: {e}") from e
    return schemas_from_data(data, root_id)
