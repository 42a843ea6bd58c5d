"""
Link helpers: intra-document anchors and source code links.
"""

from __future__ import annotations

from .config import DocsConfig
from .utils import slugify


def anchor(schema_id: str) -> str:
    """Anchor of the section documenting *schema_id*."""
    return "#" + slugify(schema_id)


def source_path(schema_id: str, config: DocsConfig) -> str:
    """Path of the file defining *schema_id*, as shown in the docs."""
    return config.source_path_template.replace("{id}", schema_id)


def make_code_link(schema_id: str, config: DocsConfig) -> str:
    """URL of the file defining *schema_id*."""
    path = source_path(schema_id, config)
    if not config.source_base_url:
        return path
    return f"{config.source_base_url.rstrip('/')}/{path.lstrip('/')}"
