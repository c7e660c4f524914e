"""Thread Safety Example - Sharing the catalog registry between threads.

Thread Safety:
    The registry is written once at startup and read-only afterwards, so
    lookups take no lock. Initializing it again fails instead of swapping
    catalogs under running readers.

Demonstrates:
1. Initialize once during startup, then read from many threads
2. A second initialization is rejected
3. Per-test registries through Translator

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo
from babel.support import NullTranslations

from getprose import (
    AlreadyInitializedError,
    CatalogRegistry,
    Locale,
    Translator,
    format_int,
    init_catalogs,
    to_format,
)


def _write_de_catalog(directory: Path) -> None:
    catalog = Catalog(locale="de_DE", fuzzy=False)
    catalog.add(("one item", "{count} items"), ("ein Eintrag", "{count} Einträge"))
    with (directory / "de_DE.mo").open("wb") as fp:
        write_mo(fp, catalog)


def example_1_init_then_read() -> None:
    """Example 1: Load catalogs at startup, then share them for reads."""
    print("=" * 60)
    print("Example 1: Initialize Once, Read Concurrently")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        _write_de_catalog(Path(tmpdir))
        init_catalogs(tmpdir, [Locale.DE_DE, Locale.EN_GB], source_locale=Locale.EN_GB)
    print("[STARTUP] Catalogs loaded")

    def render(count: int) -> str:
        locale = Locale.DE_DE if count % 2 else Locale.EN_GB
        template = locale.ngettext("one item", "{count} items", count)
        return to_format(template).arg("count", format_int(count, locale)).format()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(render, range(1000, 1006)))

    for line in results:
        print(f"  {line}")
    # Output:
    #   1,000 items
    #   1.001 Einträge
    #   ...


def example_2_second_init_rejected() -> None:
    """Example 2: Initialization is a one-shot startup step."""
    print("\n" + "=" * 60)
    print("Example 2: Second Initialization")
    print("=" * 60)

    registry = CatalogRegistry()
    registry.initialize({Locale.EN_GB: NullTranslations()})
    try:
        registry.initialize({Locale.FR_FR: NullTranslations()})
    except AlreadyInitializedError as e:
        print(f"Rejected: {e.diagnostic.message if e.diagnostic else e}")
    # Output: Rejected: Catalog registry is already initialized (en_GB)


def example_3_isolated_registry() -> None:
    """Example 3: Translator bound to its own registry (tests, plugins)."""
    print("\n" + "=" * 60)
    print("Example 3: Isolated Registry")
    print("=" * 60)

    registry = CatalogRegistry()
    registry.initialize({Locale.IT_IT: NullTranslations()})
    translator = Translator(registry)

    print(translator.ngettext(Locale.IT_IT, "one item", "{count} items", 1))
    # Output: one item


if __name__ == "__main__":
    example_1_init_then_read()
    example_2_second_init_rejected()
    example_3_isolated_registry()
