"""The supported locales and central entry point of getprose.

A Locale identifies one language/region pair out of a fixed set. It is the
key of the catalog registry, the handle for translating strings, and the
interop value passed to Babel for number and date rendering.

Typical use:

    >>> from getprose import Locale, format_int, init_catalogs, to_format
    >>> init_catalogs("locales", source_locale=Locale.DE_DE)
    >>> locale = Locale.from_str("de-DE")
    >>> n = 20
    >>> (
    ...     to_format(locale.ngettext("one string", "{count} strings", n))
    ...     .arg("count", format_int(n, locale))
    ...     .format()
    ... )
    '20 strings'

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from getprose.diagnostics import ErrorTemplate, UnsupportedLocaleError
from getprose.locale_utils import get_babel_locale, get_system_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["Locale"]

logger = logging.getLogger(__name__)


class Locale(StrEnum):
    """A supported locale.

    Members are their canonical POSIX string (``language_REGION``), so equality
    and hashing are structural over the canonical form and a Locale can be
    handed to anything expecting a locale string.

    Do NOT reorder or rename members: extraction tooling and persisted user
    settings refer to them by value.
    """

    DE_DE = "de_DE"
    EN_GB = "en_GB"
    ES_ES = "es_ES"
    FR_FR = "fr_FR"
    IT_IT = "it_IT"
    PT_PT = "pt_PT"
    RU_RU = "ru_RU"

    @classmethod
    def from_str(cls, code: str) -> Locale:
        """Parse a locale code.

        Parsing is case-normalizing and accepts both ``language_REGION`` and
        ``language-REGION``. A bare language (``"de"``) maps to the supported
        locale for that language.

        Args:
            code: Locale code (e.g., "de_DE", "en-gb", "ru")

        Returns:
            The matching Locale

        Raises:
            UnsupportedLocaleError: If no supported locale matches
            TypeError: If code is not a string
        """
        if not isinstance(code, str):
            msg = f"Locale code must be str, not {type(code).__name__}"
            raise TypeError(msg)

        normalized = normalize_locale(code)
        for member in cls:
            if normalized in (member.value, member.language):
                return member

        diagnostic = ErrorTemplate.unsupported_locale(code, tuple(m.value for m in cls))
        raise UnsupportedLocaleError(diagnostic, locale_code=code)

    @classmethod
    def from_system(cls, default: Locale | None = None) -> Locale:
        """Detect the locale from the OS and environment.

        Args:
            default: Locale to use when no locale is detected or the detected
                one is unsupported (defaults to EN_GB)

        Returns:
            Detected Locale, or default
        """
        fallback = default if default is not None else cls.EN_GB
        try:
            detected = get_system_locale(raise_on_failure=True)
        except RuntimeError:
            logger.warning("System locale not detected, falling back to %s", fallback)
            return fallback
        try:
            return cls.from_str(detected)
        except UnsupportedLocaleError:
            logger.warning(
                "System locale '%s' is not supported, falling back to %s", detected, fallback
            )
            return fallback

    def canonical_string(self) -> str:
        """Return the canonical ``language_REGION`` form used as interop key."""
        return self.value

    @property
    def language(self) -> str:
        """Language subtag (e.g., 'de')."""
        return self.value.partition("_")[0]

    @property
    def territory(self) -> str:
        """Region subtag (e.g., 'DE')."""
        return self.value.partition("_")[2]

    @property
    def babel_locale(self) -> BabelLocale:
        """Cached Babel Locale for CLDR number/date data."""
        return get_babel_locale(self.value)

    # Translation shortcuts through the default registry. Extraction tooling
    # recognizes these method names, so keep the argument order gettext-like.

    def gettext(self, singular: str) -> str:
        """Get a translation for `singular`."""
        from getprose.catalog.lookup import gettext  # noqa: PLC0415 - circular

        return gettext(self, singular)

    def ngettext(self, singular: str, plural: str, count: int) -> str:
        """Get a translation for `singular` or `plural` depending on `count`.

        The form is chosen by the plural rules of this locale's catalog.
        """
        from getprose.catalog.lookup import ngettext  # noqa: PLC0415 - circular

        return ngettext(self, singular, plural, count)

    def pgettext(self, context: str, singular: str) -> str:
        """Get a translation for `singular`, disambiguated by `context`."""
        from getprose.catalog.lookup import pgettext  # noqa: PLC0415 - circular

        return pgettext(self, context, singular)

    def npgettext(self, context: str, singular: str, plural: str, count: int) -> str:
        """Plural-aware translation disambiguated by `context`."""
        from getprose.catalog.lookup import npgettext  # noqa: PLC0415 - circular

        return npgettext(self, context, singular, plural, count)
