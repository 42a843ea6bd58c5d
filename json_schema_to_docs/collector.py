"""
Collection of every schema reachable from a root schema.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .nodes import SchemaNode

logger = logging.getLogger(__name__)


def walk_schemas(root: SchemaNode, callback: Callable[[SchemaNode], None]) -> None:
    """
    Depth-first walk over the dependency graph of *root*.

    *callback* is called once per distinct schema id, in discovery order.
    A schema whose id was already visited is skipped along with its
    dependencies, so graphs that reference an ancestor still terminate.

    Args:
        root: The schema to start from
        callback: Called with each newly discovered schema
    """
    seen: set[str] = set()

    def recurse(node: SchemaNode) -> None:
        if node.id in seen:
            return
        seen.add(node.id)
        callback(node)
        for child in node.dependencies:
            recurse(child)

    recurse(root)


def collect_schemas(root: SchemaNode) -> dict[str, SchemaNode]:
    """Map every id reachable from *root* (root included) to its schema."""
    schemas: dict[str, SchemaNode] = {}

    def record(node: SchemaNode) -> None:
        schemas[node.id] = node

    walk_schemas(root, record)
    logger.debug("Collected %d schemas from %s", len(schemas), root.id)
    return schemas
