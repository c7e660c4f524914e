"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps wording testable and consistent, and documents every error case in
    one place.
    """

    @staticmethod
    def unsupported_locale(locale_code: str, supported: tuple[str, ...]) -> Diagnostic:
        """Locale string does not map to any supported locale.

        Args:
            locale_code: The code as given by the caller
            supported: Canonical codes of all supported locales

        Returns:
            Diagnostic for LOCALE_UNSUPPORTED
        """
        msg = f"Unsupported locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNSUPPORTED,
            message=msg,
            hint=f"Use one of: {', '.join(supported)}",
            locale_code=locale_code,
        )

    @staticmethod
    def registry_not_initialized() -> Diagnostic:
        """Catalog registry read before initialize().

        Returns:
            Diagnostic for REGISTRY_NOT_INITIALIZED
        """
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_NOT_INITIALIZED,
            message="Catalog registry has not been initialized",
            hint="Call init_catalogs() or CatalogRegistry.initialize() at startup",
        )

    @staticmethod
    def registry_already_initialized(locales: tuple[str, ...]) -> Diagnostic:
        """Second initialize() call on a registry.

        Args:
            locales: Canonical codes already registered

        Returns:
            Diagnostic for REGISTRY_ALREADY_INITIALIZED
        """
        registered = ", ".join(locales) if locales else "no locales"
        msg = f"Catalog registry is already initialized ({registered})"
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_ALREADY_INITIALIZED,
            message=msg,
            hint="Initialize the registry exactly once per process",
        )

    @staticmethod
    def locale_not_registered(locale_code: str) -> Diagnostic:
        """Supported locale without a catalog in the registry.

        Args:
            locale_code: Canonical locale code

        Returns:
            Diagnostic for LOCALE_NOT_REGISTERED
        """
        msg = f"No catalog registered for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_REGISTERED,
            message=msg,
            hint="Fall back to a default locale or load a catalog for this locale",
            locale_code=locale_code,
        )

    @staticmethod
    def catalog_load_failed(locale_code: str, path: str, reason: str) -> Diagnostic:
        """Compiled catalog could not be read or parsed.

        Args:
            locale_code: Canonical locale code
            path: Human-readable path of the catalog
            reason: Underlying error text

        Returns:
            Diagnostic for CATALOG_LOAD_FAILED
        """
        msg = f"Failed to load catalog for '{locale_code}' from {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOAD_FAILED,
            message=msg,
            hint="Check that the .mo file exists and was compiled with msgfmt or pybabel",
            locale_code=locale_code,
        )

    @staticmethod
    def unterminated_placeholder(position: int) -> Diagnostic:
        """Template has an opening marker without a closing one.

        Args:
            position: Offset of the opening marker

        Returns:
            Diagnostic for TEMPLATE_UNTERMINATED_PLACEHOLDER
        """
        msg = f"Unterminated placeholder starting at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNTERMINATED_PLACEHOLDER,
            message=msg,
            hint="Close the placeholder with '}' in the source or translated string",
            position=position,
        )

    @staticmethod
    def missing_argument(name: str) -> Diagnostic:
        """Template placeholder without a matching argument.

        Args:
            name: Placeholder name

        Returns:
            Diagnostic for ARGUMENT_MISSING
        """
        msg = f"Missing argument '{name}' for template"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_MISSING,
            message=msg,
            hint=f"Add the argument with .arg('{name}', ...)",
            argument_name=name,
        )

    @staticmethod
    def invalid_message_key(reason: str) -> Diagnostic:
        """Message key violates the plural/count pairing contract.

        Args:
            reason: What is wrong with the key

        Returns:
            Diagnostic for MESSAGE_KEY_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_KEY_INVALID,
            message=f"Invalid message key: {reason}",
            hint="Pass plural and count together, or neither",
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel could not render a value.

        Args:
            kind: What was being formatted ('integer', 'float', 'date')
            value: The value that failed
            locale_code: Canonical locale code
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Failed to format {kind} {value!r} for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
        )
