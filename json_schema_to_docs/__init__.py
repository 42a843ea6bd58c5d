"""JSON Schema to Docs Generator

A Python package for generating Markdown reference documentation from a
graph of JSON Schema definitions: one section per schema, property tables,
examples and a generated table of contents.
"""

__version__ = "1.0.0"

from .builder import DocsBuilder, build_docs
from .collector import collect_schemas, walk_schemas
from .config import DocsConfig
from .errors import DocAnnotationError, DocsWriteError, SchemaLoadError
from .formatting import format_example, quote_or_fallback, type_or_link
from .loader import load_schemas, schemas_from_data
from .nodes import SchemaNode
from .renderer import SchemaRenderer, render_schema
from .toc import insert_toc

__all__ = [
    "DocsBuilder",
    "build_docs",
    "collect_schemas",
    "walk_schemas",
    "DocsConfig",
    "DocAnnotationError",
    "DocsWriteError",
    "SchemaLoadError",
    "format_example",
    "quote_or_fallback",
    "type_or_link",
    "load_schemas",
    "schemas_from_data",
    "SchemaNode",
    "SchemaRenderer",
    "render_schema",
    "insert_toc",
]
