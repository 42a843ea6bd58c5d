"""
Assembly of the full documentation for a schema graph.

Pipeline:
1. Collect every schema reachable from the root
2. Sort the schemas by id
3. Render one section per schema
4. Wrap the sections in the document template
5. Insert the table of contents
"""

from __future__ import annotations

import logging

from .collector import collect_schemas
from .config import DocsConfig
from .formatting import quote_or_fallback
from .metadata import package_version
from .nodes import SchemaNode
from .renderer import SchemaRenderer, create_environment
from .toc import TOC_OPEN, insert_toc

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n-----\n\n"


class DocsBuilder:
    """Builds one Markdown document describing a schema and all of its dependencies."""

    def __init__(self, config: DocsConfig | None = None):
        self.config = config or DocsConfig()
        self.jinja_env = create_environment()
        self.renderer = SchemaRenderer(self.config, self.jinja_env)
        self.document_template = self.jinja_env.get_template("document.md.jinja2")

    def build(self, root: SchemaNode) -> str:
        """
        Generate the documentation for *root*.

        Args:
            root: The root schema of the dependency graph

        Returns:
            The complete Markdown document

        Raises:
            DocAnnotationError: If a property carries an unknown docAnnotation type
        """
        schemas = collect_schemas(root)
        sections = [self.renderer.render(schemas[schema_id]) for schema_id in sorted(schemas)]
        logger.debug("Rendered %d sections for %s", len(sections), root.id)

        docs = self.document_template.render(
            escape_open=self.config.escape_open,
            escape_close=self.config.escape_close,
            title=quote_or_fallback(self.config.title),
            command=quote_or_fallback(self.config.command),
            version=quote_or_fallback(self.resolve_version()),
            toc_marker=TOC_OPEN,
            sections=sections,
            separator=SECTION_SEPARATOR,
        ).strip()
        return insert_toc(docs, max_depth=self.config.toc_max_depth, bullets=self.config.toc_bullets)

    def resolve_version(self) -> str | None:
        """Version shown in the header: the configured one, else the installed distribution's."""
        if self.config.version:
            return self.config.version
        return package_version(self.config.version_distribution)


def build_docs(root: SchemaNode, config: DocsConfig | None = None) -> str:
    """Generate the documentation for *root* and everything it depends on."""
    return DocsBuilder(config).build(root)
