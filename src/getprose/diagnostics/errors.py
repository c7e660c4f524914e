"""getprose exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Lookup-level absence (a missing translation) is never an exception; these
classes cover lifecycle mistakes, bad input, and broken template content.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AlreadyInitializedError",
    "CatalogLoadError",
    "FormattingError",
    "GetproseError",
    "InvalidMessageKeyError",
    "LocaleNotRegisteredError",
    "MalformedTemplateError",
    "MissingArgumentError",
    "RegistryNotInitializedError",
    "RegistryStateError",
    "TemplateError",
    "UnsupportedLocaleError",
]


class GetproseError(Exception):
    """Base exception for all getprose errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GetproseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedLocaleError(GetproseError, ValueError):
    """Locale string does not match any supported language/region pair.

    Recoverable: callers usually fall back to a default locale.

    Attributes:
        locale_code: The rejected code, as given
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class RegistryStateError(GetproseError, RuntimeError):
    """Catalog registry used out of lifecycle order.

    A programming error: surface it loudly instead of recovering.
    """


class RegistryNotInitializedError(RegistryStateError):
    """Catalog requested before the registry was initialized."""


class AlreadyInitializedError(RegistryStateError):
    """Registry initialized a second time."""


class LocaleNotRegisteredError(GetproseError, LookupError):
    """A supported locale has no catalog in the registry.

    Attributes:
        locale_code: Canonical code of the missing locale
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class CatalogLoadError(GetproseError):
    """A compiled catalog could not be read or parsed.

    Attributes:
        locale_code: Canonical code of the locale being loaded
        path: Human-readable path of the catalog
    """

    def __init__(
        self, message: str | Diagnostic, *, locale_code: str = "", path: str = ""
    ) -> None:
        super().__init__(message)
        self.locale_code = locale_code
        self.path = path


class InvalidMessageKeyError(GetproseError, ValueError):
    """Plural text given without a count, or a count without plural text."""


class TemplateError(GetproseError):
    """Template could not be formatted.

    Attributes:
        template: The template text that failed
    """

    def __init__(self, message: str | Diagnostic, *, template: str = "") -> None:
        super().__init__(message)
        self.template = template


class MalformedTemplateError(TemplateError):
    """Placeholder opened but never closed.

    Indicates a translation-content bug; log it for translators rather than
    showing it to end users.

    Attributes:
        position: Offset of the unterminated opening marker
    """

    def __init__(
        self, message: str | Diagnostic, *, template: str = "", position: int = -1
    ) -> None:
        super().__init__(message, template=template)
        self.position = position


class MissingArgumentError(TemplateError):
    """Template placeholder has no matching argument.

    Attributes:
        name: The unsatisfied placeholder name
    """

    def __init__(self, message: str | Diagnostic, *, template: str = "", name: str = "") -> None:
        super().__init__(message, template=template)
        self.name = name


class FormattingError(GetproseError):
    """Locale-aware rendering of a number or date failed.

    The set of supported locales is fixed, so this signals a configuration
    problem rather than an operational one.

    Attributes:
        locale_code: Canonical code of the locale used
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code
