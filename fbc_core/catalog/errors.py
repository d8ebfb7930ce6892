"""Error types raised by the catalog pipeline."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for catalog pipeline failures."""


class CatalogDecodeError(CatalogError, ValueError):
    """A document or chunk could not be decoded into a catalog record."""


class CatalogIOError(CatalogError, OSError):
    """Filesystem failure that aborts the current operation."""
