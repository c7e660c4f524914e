"""Write-once catalog registry.

Holds one Catalog per Locale. The mapping is published exactly once and is
read-only afterwards, so any number of threads can call get_catalog()
without synchronization.

Thread Safety:
    initialize() serializes on a lock and publishes the frozen mapping with a
    single attribute assignment while holding it. Releasing the lock
    happens-before any later read of the attribute, so readers observe either
    "not initialized" or the complete mapping, never a partial one.

Second initialize():
    Fails with AlreadyInitializedError; the first catalog set stays.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from getprose.catalog.loading import PathCatalogLoader, load_catalogs
from getprose.catalog.types import Catalog
from getprose.constants import CATALOG_FILE_SUFFIX, LOCALE_PLACEHOLDER
from getprose.diagnostics import (
    AlreadyInitializedError,
    ErrorTemplate,
    LocaleNotRegisteredError,
    RegistryNotInitializedError,
)
from getprose.locale import Locale

__all__ = [
    "CatalogRegistry",
    "get_default_registry",
    "init_catalogs",
]

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """Process-wide mapping from Locale to Catalog, initialized once.

    The default instance backs Locale.gettext() and friends. Tests that need
    isolation create their own instance and pass it to Translator.

    Example:
        >>> from babel.support import NullTranslations
        >>> registry = CatalogRegistry()
        >>> registry.initialize({Locale.EN_GB: NullTranslations()})
        >>> registry.get_catalog(Locale.EN_GB).gettext("Hello")
        'Hello'
    """

    __slots__ = ("_catalogs", "_init_lock")

    def __init__(self) -> None:
        self._catalogs: Mapping[Locale, Catalog] | None = None
        self._init_lock = threading.Lock()

    def __repr__(self) -> str:
        catalogs = self._catalogs
        if catalogs is None:
            return "CatalogRegistry(<uninitialized>)"
        return f"CatalogRegistry({', '.join(sorted(catalogs))})"

    @property
    def is_initialized(self) -> bool:
        """True once initialize() has completed."""
        return self._catalogs is not None

    @property
    def locales(self) -> frozenset[Locale]:
        """Registered locales.

        Raises:
            RegistryNotInitializedError: If called before initialize()
        """
        return frozenset(self._require_catalogs())

    def initialize(self, catalogs: Mapping[Locale, Catalog]) -> None:
        """Populate the registry. May be called exactly once.

        Args:
            catalogs: Catalog for each supported locale

        Raises:
            AlreadyInitializedError: If the registry was already initialized
            TypeError: If a key is not a Locale
        """
        for key in catalogs:
            if not isinstance(key, Locale):
                msg = f"Catalog registry keys must be Locale, not {type(key).__name__}"
                raise TypeError(msg)

        frozen: Mapping[Locale, Catalog] = MappingProxyType(dict(catalogs))

        with self._init_lock:
            if self._catalogs is not None:
                raise AlreadyInitializedError(
                    ErrorTemplate.registry_already_initialized(tuple(sorted(self._catalogs)))
                )
            self._catalogs = frozen

        logger.info("Catalog registry initialized for %s", ", ".join(sorted(frozen)) or "no locales")

    def get_catalog(self, locale: Locale) -> Catalog:
        """Resolve a locale to its catalog.

        Args:
            locale: Locale to look up

        Returns:
            The registered Catalog

        Raises:
            RegistryNotInitializedError: If called before initialize()
            LocaleNotRegisteredError: If the locale has no catalog
        """
        catalogs = self._require_catalogs()
        try:
            return catalogs[locale]
        except KeyError:
            raise LocaleNotRegisteredError(
                ErrorTemplate.locale_not_registered(str(locale)), locale_code=str(locale)
            ) from None

    def _require_catalogs(self) -> Mapping[Locale, Catalog]:
        # Single read of the published attribute; no lock on the read path.
        catalogs = self._catalogs
        if catalogs is None:
            raise RegistryNotInitializedError(ErrorTemplate.registry_not_initialized())
        return catalogs


_default_registry = CatalogRegistry()


def get_default_registry() -> CatalogRegistry:
    """Return the process-wide registry used by the Locale shortcuts."""
    return _default_registry


def init_catalogs(
    path: str | Path,
    locales: tuple[Locale, ...] | list[Locale] | None = None,
    *,
    source_locale: Locale | None = None,
    domain: str | None = None,
    registry: CatalogRegistry | None = None,
) -> CatalogRegistry:
    """Load compiled catalogs from a directory and initialize a registry.

    Expects one ``<locale>.mo`` file per locale in `path` (e.g.
    ``locales/en_GB.mo``). The source locale needs no file: its strings are
    already in that language, so it gets an empty catalog.

    Args:
        path: Directory containing the compiled catalogs
        locales: Locales to load (default: every supported Locale)
        source_locale: Locale the source strings are written in
        domain: gettext domain recorded on the loaded catalogs
        registry: Registry to initialize (default: the process-wide one)

    Returns:
        The initialized registry

    Raises:
        CatalogLoadError: If a catalog cannot be read; the registry stays
            uninitialized
        AlreadyInitializedError: If the registry was already initialized
    """
    target = registry if registry is not None else _default_registry
    wanted = tuple(locales) if locales is not None else tuple(Locale)

    loader = PathCatalogLoader(
        f"{Path(path).as_posix()}/{LOCALE_PLACEHOLDER}{CATALOG_FILE_SUFFIX}",
        root_dir=str(path),
        domain=domain,
    )
    catalogs = load_catalogs(loader, wanted, source_locale=source_locale)
    target.initialize(catalogs)
    return target
