"""
Atomic file writer for generated documentation.

Ensures that an interrupted or rejected write never leaves a partial
document in place of the previous one.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import DocsWriteError
from .toc import TOC_CLOSE, TOC_OPEN

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_markdown: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_markdown: Optional validation function for the document
        """
        self._validate_markdown = validate_markdown or self._default_validate_markdown

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            DocsWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_markdown(content)

            temp_path.replace(path)
            logger.debug("Wrote %s", path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def _default_validate_markdown(self, content: str) -> None:
        """Default document validation.

        Args:
            content: Markdown to validate

        Raises:
            DocsWriteError: If validation fails
        """
        if not content.strip():
            raise DocsWriteError("Generated documentation is empty")

        if content.count(TOC_OPEN) != content.count(TOC_CLOSE):
            raise DocsWriteError("Generated documentation has an unterminated table of contents")
