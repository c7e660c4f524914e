"""Catalog package: registry, lookup, and loading of gettext catalogs.

Submodules:
    types    - Catalog protocol and type aliases (SourceText, Template, ...)
    loading  - CatalogLoader protocol, PathCatalogLoader, load_catalogs
    registry - CatalogRegistry (write-once), init_catalogs
    lookup   - MessageKey, resolve, Translator

Python 3.13+. Uses Babel for catalog parsing.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from getprose.catalog.loading import CatalogLoader, PathCatalogLoader, load_catalogs
from getprose.catalog.lookup import MessageKey, Translator, resolve
from getprose.catalog.registry import CatalogRegistry, get_default_registry, init_catalogs
from getprose.catalog.types import Catalog, MessageContext, SourceText, Template

__all__ = [
    # Registry
    "CatalogRegistry",
    "get_default_registry",
    "init_catalogs",
    # Lookup
    "MessageKey",
    "Translator",
    "resolve",
    # Loading
    "CatalogLoader",
    "PathCatalogLoader",
    "load_catalogs",
    # Types
    "Catalog",
    "MessageContext",
    "SourceText",
    "Template",
]
