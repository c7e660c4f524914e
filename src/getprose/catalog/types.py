"""Types for the catalog domain.

The Catalog protocol is the boundary to the gettext backend: getprose never
parses catalog files itself, it only calls the four lookup methods below.
``babel.support.Translations``, ``babel.support.NullTranslations`` and the
stdlib ``gettext`` translation classes all satisfy it structurally.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol, runtime_checkable

__all__ = [
    "Catalog",
    "MessageContext",
    "SourceText",
    "Template",
]

type SourceText = str
"""Untranslated source string, used as msgid (e.g., 'one file')."""

type MessageContext = str
"""Disambiguation context, used as msgctxt (e.g., 'menu')."""

type Template = str
"""Resolved message text that may still contain {name} placeholders."""


@runtime_checkable
class Catalog(Protocol):
    """One locale's translated messages plus its plural rule.

    Every method returns the source text when the catalog has no entry;
    the plural variants fall back to `singular` when n == 1 and `plural`
    otherwise.
    """

    def gettext(self, message: str, /) -> str: ...

    def ngettext(self, singular: str, plural: str, n: int, /) -> str: ...

    def pgettext(self, context: str, message: str, /) -> str: ...

    def npgettext(self, context: str, singular: str, plural: str, n: int, /) -> str: ...
