"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent map keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to canonical POSIX form.

    Accepts both BCP-47 (``en-GB``) and POSIX (``en_GB``) separators in any
    letter case. The language subtag is lowercased and the region subtag
    uppercased, which is the form Babel accepts directly.

    Args:
        locale_code: Locale code (e.g., "en-GB", "DE_de", "fr")

    Returns:
        POSIX-formatted locale code (e.g., "en_GB", "de_DE", "fr")

    Example:
        >>> normalize_locale("en-gb")
        'en_GB'
        >>> normalize_locale("PT-pt")
        'pt_PT'
        >>> normalize_locale("ru")
        'ru'
    """
    language, sep, territory = locale_code.strip().replace("-", "_").partition("_")
    if not sep:
        return language.lower()
    return f"{language.lower()}_{territory.upper()}"


@functools.lru_cache(maxsize=32)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, avoiding repeated
    CLDR lookups in number and date formatting.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache (tests and long-running tooling)."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_GB" as fallback.

    Returns:
        Detected locale code in canonical POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0].split("@")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            # Strip encoding (".UTF-8") and modifier ("@euro") suffixes
            return normalize_locale(value.split(".")[0].split("@")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_GB"
