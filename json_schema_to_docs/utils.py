"""
Utility functions for JSON Schema to Docs generator.
"""

import re

# Inline markdown links: [text](target)
_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")

_HTML_TAG_PATTERN = re.compile(r"</?[^>]+>")

# Punctuation dropped from heading slugs, matching GitHub-style anchors
_PUNCTUATION_PATTERN = re.compile(r"[|$&`~=\\/@+*!?({\[\]})<>.,;:'\"^]")
_WIDE_PUNCTUATION_PATTERN = re.compile(r"[。？！，、；：“”【】（）〔〕［］﹃﹄‘’﹁﹂—…－～《》〈〉「」]")


def strip_links(text: str) -> str:
    """Replace markdown links by their visible text."""
    return _LINK_PATTERN.sub(r"\1", text)


def slugify(text: str) -> str:
    """Convert a heading title to the anchor slug a Markdown host generates for it.

    Examples:
        "/AppSchema" -> "appschema"
        "Getting Started" -> "getting-started"
        "`code` title" -> "code-title"

    Args:
        text: The heading title

    Returns:
        The anchor slug, without the leading '#'
    """
    slug = strip_links(text).strip().lower()
    slug = slug.replace(" ", "-").replace("\t", "--")
    slug = _HTML_TAG_PATTERN.sub("", slug)
    slug = _PUNCTUATION_PATTERN.sub("", slug)
    return _WIDE_PUNCTUATION_PATTERN.sub("", slug)
