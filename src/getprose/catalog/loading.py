"""Catalog loading infrastructure for the registry.

Provides the protocol for catalog loaders and a filesystem implementation
that reads compiled gettext ``.mo`` files with path-traversal protection.
Parsing is delegated to ``babel.support.Translations``.

Components:
    CatalogLoader - Protocol for loading one locale's catalog
    PathCatalogLoader - Disk-based loader using a ``{locale}`` path template
    load_catalogs - Load a set of locales into a registry-ready mapping

Python 3.13+. Uses Babel for catalog parsing.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from babel.support import NullTranslations, Translations

from getprose.catalog.types import Catalog
from getprose.constants import LOCALE_PLACEHOLDER
from getprose.diagnostics import CatalogLoadError, ErrorTemplate
from getprose.locale import Locale

__all__ = [
    "CatalogLoader",
    "PathCatalogLoader",
    "load_catalogs",
]

logger = logging.getLogger(__name__)


class CatalogLoader(Protocol):
    """Protocol for loading the compiled catalog of one locale.

    This is a Protocol (structural typing) rather than ABC so callers can
    plug in loaders backed by package resources, databases, or test fixtures.
    """

    def load(self, locale: Locale) -> Catalog:
        """Load the catalog for `locale`.

        Raises:
            CatalogLoadError: If the catalog cannot be read or parsed
        """

    def describe_path(self, locale: Locale) -> str:
        """Return human-readable location for diagnostics."""
        return str(locale)


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader using a path template.

    The template must contain a ``{locale}`` placeholder, substituted with
    the locale's canonical string.

    Security:
        Resolved paths must stay inside root_dir; templates that would escape
        it (symlinks, ``..`` segments) are rejected at load time.

    Example:
        >>> loader = PathCatalogLoader("locales/{locale}/LC_MESSAGES/messages.mo")
        >>> catalog = loader.load(Locale.FR_FR)
        # Loads from: locales/fr_FR/LC_MESSAGES/messages.mo

    Attributes:
        path_template: Path with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of path_template.
        domain: gettext domain recorded on loaded catalogs
    """

    path_template: str
    root_dir: str | None = None
    domain: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate the template.

        Raises:
            ValueError: If path_template does not contain {locale}
        """
        # Without the placeholder every locale would silently load the same file.
        if LOCALE_PLACEHOLDER not in self.path_template:
            msg = (
                f"path_template must contain '{LOCALE_PLACEHOLDER}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.path_template.split(LOCALE_PLACEHOLDER)[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    def describe_path(self, locale: Locale) -> str:
        """Return the locale-substituted path."""
        return self.path_template.replace(LOCALE_PLACEHOLDER, locale.canonical_string())

    def load(self, locale: Locale) -> Catalog:
        """Load and parse the .mo file for `locale`.

        Args:
            locale: Locale to substitute in the path template

        Returns:
            Parsed babel Translations

        Raises:
            CatalogLoadError: If the file is outside root_dir, missing,
                unreadable, or not a valid .mo file
        """
        described = self.describe_path(locale)
        full_path = Path(described).resolve()

        if not full_path.is_relative_to(self._resolved_root):
            reason = f"path escapes root directory {self._resolved_root}"
            raise _load_error(locale, described, reason)

        try:
            with full_path.open("rb") as fp:
                catalog = Translations(fp, domain=self.domain)
        except (OSError, UnicodeDecodeError, ValueError, struct.error) as e:
            raise _load_error(locale, described, str(e)) from e

        logger.debug("Loaded catalog for %s from %s", locale, described)
        return catalog


def _load_error(locale: Locale, path: str, reason: str) -> CatalogLoadError:
    logger.error("Catalog for %s could not be loaded from %s: %s", locale, path, reason)
    return CatalogLoadError(
        ErrorTemplate.catalog_load_failed(str(locale), path, reason),
        locale_code=str(locale),
        path=path,
    )


def load_catalogs(
    loader: CatalogLoader,
    locales: Iterable[Locale],
    *,
    source_locale: Locale | None = None,
) -> dict[Locale, Catalog]:
    """Load every requested locale into a mapping ready for the registry.

    Loading is all-or-nothing: the first failure propagates and no partial
    mapping is returned.

    Args:
        loader: Loader used for every locale except the source locale
        locales: Locales to load
        source_locale: Locale whose catalog is empty (source strings are
            already in that language); added even if not listed in `locales`

    Returns:
        Mapping of Locale to Catalog

    Raises:
        CatalogLoadError: If any catalog fails to load
    """
    catalogs: dict[Locale, Catalog] = {}
    for locale in locales:
        if locale is source_locale:
            continue
        catalogs[locale] = loader.load(locale)

    if source_locale is not None:
        logger.info("Using empty catalog for source locale %s", source_locale)
        catalogs[source_locale] = NullTranslations()

    return catalogs
