"""
Exceptions raised while loading schemas and building documentation.
"""

from __future__ import annotations


class DocAnnotationError(ValueError):
    """Raised when a property carries a docAnnotation of an unknown type.

    This aborts the whole document build; no partial document is produced.
    """

    def __init__(self, annotation_type: object, property_key: str | None = None):
        self.annotation_type = annotation_type
        self.property_key = property_key
        message = f"unrecognized docAnnotation type: {annotation_type}"
        if property_key is not None:
            message += f" (property {property_key!r})"
        super().__init__(message)


class SchemaLoadError(ValueError):
    """Raised when a schema file cannot be turned into a schema graph.

    This can happen when:
    - The file is not valid JSON or has an unexpected shape
    - A schema has no id, or two schemas share an id
    - A $ref points at an id that is not in the file
    - The requested root id does not exist
    """


class DocsWriteError(Exception):
    """Raised when generated documentation fails validation before writing."""
