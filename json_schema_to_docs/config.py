"""
Configuration for the documentation generator.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# Examples may carry this key to keep a field out of test fixtures; it never reaches the docs
SKIP_KEY = "_skipTest"


@dataclass
class DocsConfig:
    """Configuration options for documentation generation."""

    # Name of the documented artifact, shown in the document title
    title: str = "schemas"

    # Command reported as the generator of the document
    command: str = "json_schema_to_docs"

    # Version shown in the header; looked up from version_distribution when unset
    version: str | None = None

    # Installed distribution to read the version from (empty = this package)
    version_distribution: str = ""

    # Base URL for "Source Code" links (empty = relative links)
    source_base_url: str = ""

    # Path of a schema's source file, with {id} replaced by the schema id
    source_path_template: str = "schemas{id}.json"

    # Key stripped from object examples before rendering
    skip_key: str = SKIP_KEY

    # Table of contents options
    toc_max_depth: int = 2
    toc_bullets: str = "*"

    # Comment pair that disables the host renderer's template processing
    escape_open: str = "<!-- {% raw %} -->"
    escape_close: str = "<!-- {% endraw %} -->"

    @staticmethod
    def from_dict(d: dict) -> DocsConfig:
        """Create a config from a dictionary."""
        config = DocsConfig()
        names = {f.name for f in fields(DocsConfig)}
        for k, v in d.items():
            if k in names:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "title": self.title,
            "command": self.command,
            "version": self.version,
            "version_distribution": self.version_distribution,
            "source_base_url": self.source_base_url,
            "source_path_template": self.source_path_template,
            "skip_key": self.skip_key,
            "toc_max_depth": self.toc_max_depth,
            "toc_bullets": self.toc_bullets,
            "escape_open": self.escape_open,
            "escape_close": self.escape_close,
        }
