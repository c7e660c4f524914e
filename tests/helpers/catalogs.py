"""In-memory gettext catalogs for tests.

Compiles entries with Babel's MO writer so tests exercise the same parsing
and plural-rule evaluation as catalogs loaded from disk.

Entries are tuples of (msgid, msgstr) or (msgid, msgstr, context), where a
plural msgid is a (singular, plural) pair and its msgstr a tuple with one
string per plural form of the locale.
"""

from __future__ import annotations

from collections.abc import Iterable
from io import BytesIO
from pathlib import Path

from babel.messages.catalog import Catalog as MessageCatalog
from babel.messages.mofile import write_mo
from babel.support import Translations

from getprose.locale import Locale

type MessageId = str | tuple[str, str]
type MessageString = str | tuple[str, ...]
type Entry = tuple[MessageId, MessageString] | tuple[MessageId, MessageString, str]


def compile_mo(locale: Locale, entries: Iterable[Entry]) -> bytes:
    """Compile entries into .mo bytes with the locale's Plural-Forms header."""
    catalog = MessageCatalog(locale=locale.canonical_string(), fuzzy=False, charset="utf-8")
    for entry in entries:
        msgid, msgstr, *rest = entry
        catalog.add(msgid, msgstr, context=rest[0] if rest else None)

    buffer = BytesIO()
    write_mo(buffer, catalog)
    return buffer.getvalue()


def build_catalog(locale: Locale, entries: Iterable[Entry]) -> Translations:
    """Compile entries and parse them back into babel Translations."""
    return Translations(BytesIO(compile_mo(locale, entries)))


def write_catalog(directory: Path, locale: Locale, entries: Iterable[Entry]) -> Path:
    """Write `<directory>/<locale>.mo` and return its path."""
    path = directory / f"{locale.canonical_string()}.mo"
    path.write_bytes(compile_mo(locale, entries))
    return path
