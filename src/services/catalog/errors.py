"""Errors raised by catalog storage backends."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogUnavailableError(CatalogError):
    """The storage backend could not be reached."""
