"""Quickstart example for getprose.

Compiles two small catalogs into a temporary directory, loads them, and
renders messages in three locales. Real applications ship .mo files built
from the template written by getprose-extract.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo

from getprose import (
    Locale,
    MissingArgumentError,
    format_date,
    format_float,
    format_int,
    init_catalogs,
    to_format,
)

TRANSLATIONS = {
    Locale.FR_FR: [
        ("Hello, {name}!", "Bonjour, {name} !", None),
        (("one string", "{count} strings"), ("une chaîne", "{count} chaînes"), None),
        ("Open", "Ouvrir", "menu"),
        ("Due on {date}", "Échéance le {date}", None),
    ],
    Locale.RU_RU: [
        ("Hello, {name}!", "Привет, {name}!", None),
        (
            ("one string", "{count} strings"),
            ("{count} строка", "{count} строки", "{count} строк"),
            None,
        ),
        ("Open", "Открыть", "menu"),
    ],
}


def compile_catalogs(directory: Path) -> None:
    """Write <locale>.mo for every locale in TRANSLATIONS."""
    for locale, entries in TRANSLATIONS.items():
        catalog = Catalog(locale=locale.canonical_string(), fuzzy=False)
        for msgid, msgstr, context in entries:
            catalog.add(msgid, msgstr, context=context)
        with (directory / f"{locale}.mo").open("wb") as fp:
            write_mo(fp, catalog)


with tempfile.TemporaryDirectory() as tmpdir:
    compile_catalogs(Path(tmpdir))
    # Source strings are English; en_GB needs no catalog file
    init_catalogs(
        tmpdir, [Locale.EN_GB, Locale.FR_FR, Locale.RU_RU], source_locale=Locale.EN_GB
    )

# Example 1: Simple message with a placeholder
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

for locale in (Locale.EN_GB, Locale.FR_FR, Locale.RU_RU):
    print(to_format(locale.gettext("Hello, {name}!")).arg("name", "Ada").format())
# Output:
# Hello, Ada!
# Bonjour, Ada !
# Привет, Ada!

# Example 2: Plurals
print("\n" + "=" * 50)
print("Example 2: Plural Forms")
print("=" * 50)

for count in (1, 3, 20, 1234):
    locale = Locale.from_str("ru")
    template = locale.ngettext("one string", "{count} strings", count)
    print(to_format(template).arg("count", format_int(count, locale)).format())
# Output:
# 1 строка
# 3 строки
# 20 строк
# 1 234 строки

# Example 3: Context and untranslated strings
print("\n" + "=" * 50)
print("Example 3: Context and Fallback")
print("=" * 50)

print(Locale.FR_FR.pgettext("menu", "Open"))
# Output: Ouvrir
print(Locale.FR_FR.gettext("Not translated yet"))
# Output: Not translated yet

# Example 4: Numbers and dates
print("\n" + "=" * 50)
print("Example 4: Locale-aware Values")
print("=" * 50)

for locale in (Locale.DE_DE, Locale.EN_GB):
    print(format_int(1234567, locale), format_float(0.005, 2, locale))
# Output:
# 1.234.567 0,01
# 1,234,567 0.01

print(
    to_format(Locale.FR_FR.gettext("Due on {date}"))
    .arg("date", format_date(date(2024, 3, 5), Locale.FR_FR, style="long"))
    .format()
)
# Output: Échéance le 5 mars 2024

# Example 5: Broken templates
print("\n" + "=" * 50)
print("Example 5: Template Errors")
print("=" * 50)

try:
    to_format("{count} files").format()
except MissingArgumentError as e:
    print(f"Missing argument: {e.name}")
# Output: Missing argument: count

# Lenient variant for display paths: logs a warning, returns the raw template
print(to_format("{count} files").format_or_template())
# Output: {count} files
