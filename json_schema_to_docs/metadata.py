"""
Package metadata lookup for the document header.
"""

from __future__ import annotations

import importlib.metadata as _im
import logging

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "json_schema_to_docs"


def package_version(distribution: str = "") -> str | None:
    """Return the installed version of *distribution*, or None if it is not installed."""
    name = distribution or DISTRIBUTION_NAME
    try:
        return _im.version(name)
    except _im.PackageNotFoundError:
        logger.debug("Distribution %s is not installed; no version available", name)
        return None
