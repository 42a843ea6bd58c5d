"""
Table of contents generation for Markdown documents.

The table of contents is spliced between ``<!-- toc -->`` and
``<!-- tocstop -->`` markers. A document that already has a table of
contents gets it regenerated in place, so insertion is idempotent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .utils import slugify, strip_links

TOC_OPEN = "<!-- toc -->"
TOC_CLOSE = "<!-- tocstop -->"

_MARKER_PATTERN = re.compile(r"<!-- toc(?:\s*stop)? -->")
_HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_PATTERN = re.compile(r"^[ \t]*(```|~~~)")
_TRAILING_NEWLINES_PATTERN = re.compile(r"\n+$")


@dataclass
class Heading:
    """A heading that appears in the table of contents."""

    level: int
    title: str
    slug: str


def find_headings(markdown: str, max_depth: int = 2) -> list[Heading]:
    """
    Find the ATX headings of *markdown* up to *max_depth*.

    Headings inside fenced code blocks are ignored. Repeated slugs get a
    numeric suffix, the way Markdown hosts disambiguate anchors.

    Args:
        markdown: The document text
        max_depth: Deepest heading level to include

    Returns:
        Headings in document order
    """
    headings: list[Heading] = []
    seen: dict[str, int] = {}
    fence: str | None = None

    for line in markdown.splitlines():
        fence_match = _FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker == fence:
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_PATTERN.match(line)
        if not match:
            continue
        level = len(match.group(1))
        if level > max_depth:
            continue

        title = strip_links(match.group(2).strip())
        slug = slugify(title)
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        if count:
            slug = f"{slug}-{count}"
        headings.append(Heading(level=level, title=title, slug=slug))

    return headings


def generate_toc(markdown: str, max_depth: int = 2, bullets: str = "*") -> str:
    """Render the nested bullet list of links for the headings of *markdown*."""
    headings = find_headings(markdown, max_depth)
    if not headings:
        return ""
    highest = min(heading.level for heading in headings)
    return "\n".join(f"{'  ' * (heading.level - highest)}{bullets} [{heading.title}](#{heading.slug})" for heading in headings)


def insert_toc(markdown: str, max_depth: int = 2, bullets: str = "*") -> str:
    """
    Insert a table of contents at the ``<!-- toc -->`` marker of *markdown*.

    The table of contents lists the headings that follow the marker.
    Documents without a marker are returned unchanged.

    Args:
        markdown: The document text
        max_depth: Deepest heading level listed
        bullets: Bullet character of the list items

    Returns:
        The document with the table of contents spliced in

    Raises:
        ValueError: If the document holds more than one table of contents
    """
    sections = [section.strip() for section in _MARKER_PATTERN.split(markdown)]
    if len(sections) == 1:
        return markdown
    if len(sections) > 3:
        raise ValueError("Only one table of contents per document is supported")

    newlines = _TRAILING_NEWLINES_PATTERN.search(markdown)
    before, after = sections[0], sections[-1]

    toc = generate_toc(after, max_depth, bullets)
    block = f"{TOC_OPEN}\n\n{toc}\n\n{TOC_CLOSE}" if toc else f"{TOC_OPEN}\n\n{TOC_CLOSE}"

    parts = [part for part in (before, block, after) if part]
    return "\n\n".join(parts) + (newlines.group(0) if newlines else "")
