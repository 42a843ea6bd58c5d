"""
Rendering of a single schema into a Markdown section.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from .config import DocsConfig
from .formatting import format_example, quote_or_fallback, type_or_link
from .links import make_code_link, source_path
from .nodes import SchemaNode
from .parser import parse_required_annotation

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

NO_DESCRIPTION = "_No description given._"
REQUIRED_YES = "**yes**"
REQUIRED_NO = "no"


def create_environment() -> jinja2.Environment:
    """Create the Jinja2 environment holding the Markdown templates."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
    )


def required_text(key: str, prop: Mapping[str, Any], is_required: bool) -> str:
    """
    Text of the "Required" column for one property.

    Args:
        key: The property key
        prop: The property descriptor
        is_required: Whether the key is listed in the schema's ``required``

    Returns:
        ``**yes**`` or ``no``, adjusted by a docAnnotation.required override

    Raises:
        DocAnnotationError: If the override has an unknown type
    """
    text = REQUIRED_YES if is_required else REQUIRED_NO
    annotation = parse_required_annotation(prop, key)
    if annotation is None:
        return text
    return annotation.apply(text)


class SchemaRenderer:
    """Renders one SchemaNode as a self-contained Markdown section."""

    def __init__(self, config: DocsConfig | None = None, environment: jinja2.Environment | None = None):
        """
        Initialize the renderer.

        Args:
            config: Documentation configuration
            environment: Jinja2 environment to load templates from
        """
        self.config = config or DocsConfig()
        self.jinja_env = environment or create_environment()
        self.section_template = self.jinja_env.get_template("section.md.jinja2")

    def render(self, node: SchemaNode) -> str:
        """Render *node* as Markdown."""
        schema = node.schema
        logger.debug("Rendering schema %s", node.id)
        rendered = self.section_template.render(
            node_id=node.id,
            description=schema.get("description") or NO_DESCRIPTION,
            type=type_or_link(schema),
            pattern=quote_or_fallback(schema.get("pattern")),
            source_path=source_path(node.id, self.config),
            code_link=make_code_link(node.id, self.config),
            examples=self._format_examples(schema.get("examples")),
            anti_examples=self._format_examples(schema.get("antiExamples")),
            properties=self._property_rows(schema),
        )
        return rendered.strip()

    def _format_examples(self, examples: list[Any] | None) -> list[str]:
        return [format_example(example, self.config.skip_key) for example in examples or []]

    def _property_rows(self, schema: Mapping[str, Any]) -> list[dict[str, str]]:
        """Table rows for the schema's properties, in source order."""
        properties = schema.get("properties") or schema.get("patternProperties") or {}
        required = schema.get("required") or []
        rows = []
        for key, prop in properties.items():
            # Boolean subschemas (`"key": true`) carry no type or description
            if not isinstance(prop, Mapping):
                prop = {}
            rows.append(
                {
                    "key": quote_or_fallback(key),
                    "required": required_text(key, prop, key in required),
                    "type": type_or_link(prop),
                    "description": prop.get("description") or NO_DESCRIPTION,
                }
            )
        return rows


def render_schema(node: SchemaNode, config: DocsConfig | None = None) -> str:
    """Render *node* as Markdown with a one-off renderer."""
    return SchemaRenderer(config).render(node)
