"""Catalog lookup: message key to template string.

Resolves a (context, singular, plural, count) key against a locale's catalog.
A missing translation is never an error: the lookup degrades to the source
text, choosing singular for count == 1 and plural otherwise.

Architecture:
    - MessageKey: validated, immutable lookup key
    - resolve(): pure function over a Catalog
    - Translator: registry-bound facade (injectable registry for tests)
    - gettext()/ngettext()/pgettext()/npgettext(): module shortcuts over the
      default registry, backing the Locale methods

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from getprose.catalog.registry import CatalogRegistry, get_default_registry
from getprose.catalog.types import Catalog, MessageContext, SourceText, Template
from getprose.diagnostics import ErrorTemplate, InvalidMessageKeyError
from getprose.locale import Locale

__all__ = [
    "MessageKey",
    "Translator",
    "gettext",
    "ngettext",
    "npgettext",
    "pgettext",
    "resolve",
]


@dataclass(frozen=True, slots=True)
class MessageKey:
    """Key of one translatable message.

    Attributes:
        singular: Source text (msgid)
        context: Disambiguation context (msgctxt), never part of the output
        plural: Plural source text (msgid_plural); requires count
        count: Quantity selecting the plural form; requires plural
    """

    singular: SourceText
    context: MessageContext | None = None
    plural: SourceText | None = None
    count: int | None = None

    def __post_init__(self) -> None:
        """Validate the plural/count pairing.

        Raises:
            InvalidMessageKeyError: If only one of plural and count is given,
                or count is not a non-negative integer
        """
        if (self.plural is None) != (self.count is None):
            missing = "count" if self.count is None else "plural"
            raise InvalidMessageKeyError(
                ErrorTemplate.invalid_message_key(f"{missing} is required for plural lookup")
            )
        if self.count is not None and (
            isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0
        ):
            raise InvalidMessageKeyError(
                ErrorTemplate.invalid_message_key(
                    f"count must be a non-negative int, got {self.count!r}"
                )
            )

    @property
    def is_plural(self) -> bool:
        """True if the key selects a plural form."""
        return self.plural is not None


def resolve(catalog: Catalog, key: MessageKey) -> Template:
    """Resolve a message key against a catalog.

    Plural-form selection is delegated to the catalog, which evaluates its own
    plural rule over the count.

    Args:
        catalog: Catalog of the target locale
        key: Message to look up

    Returns:
        Translated template, or the source text when no translation exists
    """
    if key.plural is not None and key.count is not None:
        if key.context is None:
            return catalog.ngettext(key.singular, key.plural, key.count)
        return catalog.npgettext(key.context, key.singular, key.plural, key.count)

    if key.context is None:
        # The empty msgid is the catalog header entry, never a translation
        if not key.singular:
            return key.singular
        return catalog.gettext(key.singular)
    return catalog.pgettext(key.context, key.singular)


class Translator:
    """Resolves message keys for a locale through a catalog registry.

    Registry errors (not initialized, locale not registered) propagate; a
    missing translation does not.

    Example:
        >>> translator = Translator(registry)
        >>> translator.ngettext(Locale.EN_GB, "one file", "{count} files", 3)
        '{count} files'
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: CatalogRegistry | None = None) -> None:
        """Bind to a registry.

        Args:
            registry: Registry to read from (default: the process-wide one)
        """
        self._registry = registry

    @property
    def registry(self) -> CatalogRegistry:
        """The bound registry."""
        return self._registry if self._registry is not None else get_default_registry()

    def resolve(self, locale: Locale, key: MessageKey) -> Template:
        """Resolve `key` in the catalog registered for `locale`."""
        return resolve(self.registry.get_catalog(locale), key)

    def gettext(self, locale: Locale, singular: SourceText) -> Template:
        """Get a translation for `singular`."""
        return self.resolve(locale, MessageKey(singular))

    def ngettext(
        self, locale: Locale, singular: SourceText, plural: SourceText, count: int
    ) -> Template:
        """Get a translation for `singular` or `plural` depending on `count`."""
        return self.resolve(locale, MessageKey(singular, plural=plural, count=count))

    def pgettext(self, locale: Locale, context: MessageContext, singular: SourceText) -> Template:
        """Get a translation for `singular` disambiguated by `context`."""
        return self.resolve(locale, MessageKey(singular, context=context))

    def npgettext(
        self,
        locale: Locale,
        context: MessageContext,
        singular: SourceText,
        plural: SourceText,
        count: int,
    ) -> Template:
        """Plural-aware translation disambiguated by `context`."""
        return self.resolve(
            locale, MessageKey(singular, context=context, plural=plural, count=count)
        )


_default_translator = Translator()


def gettext(locale: Locale, singular: SourceText) -> Template:
    """Translate `singular` through the default registry."""
    return _default_translator.gettext(locale, singular)


def ngettext(locale: Locale, singular: SourceText, plural: SourceText, count: int) -> Template:
    """Translate a plural message through the default registry."""
    return _default_translator.ngettext(locale, singular, plural, count)


def pgettext(locale: Locale, context: MessageContext, singular: SourceText) -> Template:
    """Translate `singular` in `context` through the default registry."""
    return _default_translator.pgettext(locale, context, singular)


def npgettext(
    locale: Locale,
    context: MessageContext,
    singular: SourceText,
    plural: SourceText,
    count: int,
) -> Template:
    """Translate a plural message in `context` through the default registry."""
    return _default_translator.npgettext(locale, context, singular, plural, count)
