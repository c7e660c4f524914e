"""Diagnostic codes and data structures.

Defines error codes, categories, and the structured diagnostic record carried
by every getprose exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for diagnostics.

    Inherits from ``StrEnum`` so log aggregation receives plain strings
    (``"locale"``, ``"template"``) rather than the ``"ErrorCategory.X"`` repr.

    Categories:
        LOCALE: Locale string does not map to a supported locale
        LIFECYCLE: Catalog registry used out of order (programming error)
        CATALOG: Catalog missing for a locale or failed to load
        TEMPLATE: Template content or arguments do not fit together
        FORMATTING: Locale-aware rendering of a value failed
    """

    LOCALE = "locale"
    LIFECYCLE = "lifecycle"
    CATALOG = "catalog"
    TEMPLATE = "template"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors
        2000-2999: Registry lifecycle and catalog errors
        3000-3999: Template and message key errors
        4000-4999: Value formatting errors
    """

    # Locale errors (1000-1999)
    LOCALE_UNSUPPORTED = 1001

    # Registry and catalog errors (2000-2999)
    REGISTRY_NOT_INITIALIZED = 2001
    REGISTRY_ALREADY_INITIALIZED = 2002
    LOCALE_NOT_REGISTERED = 2003
    CATALOG_LOAD_FAILED = 2101

    # Template errors (3000-3999)
    TEMPLATE_UNTERMINATED_PLACEHOLDER = 3001
    ARGUMENT_MISSING = 3002
    MESSAGE_KEY_INVALID = 3101

    # Formatting errors (4000-4999)
    FORMATTING_FAILED = 4001

    @property
    def category(self) -> ErrorCategory:
        """Category of this code.

        The 2000 range holds both registry lifecycle and catalog codes, so
        codes are mapped explicitly rather than by numeric range.
        """
        match self:
            case DiagnosticCode.LOCALE_UNSUPPORTED:
                return ErrorCategory.LOCALE
            case (
                DiagnosticCode.REGISTRY_NOT_INITIALIZED
                | DiagnosticCode.REGISTRY_ALREADY_INITIALIZED
            ):
                return ErrorCategory.LIFECYCLE
            case DiagnosticCode.LOCALE_NOT_REGISTERED | DiagnosticCode.CATALOG_LOAD_FAILED:
                return ErrorCategory.CATALOG
            case (
                DiagnosticCode.TEMPLATE_UNTERMINATED_PLACEHOLDER
                | DiagnosticCode.ARGUMENT_MISSING
                | DiagnosticCode.MESSAGE_KEY_INVALID
            ):
                return ErrorCategory.TEMPLATE
            case DiagnosticCode.FORMATTING_FAILED:
                return ErrorCategory.FORMATTING


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the error (if any)
        argument_name: Placeholder name involved in the error (if any)
        position: Character offset into a template (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    argument_name: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[ARGUMENT_MISSING]: Missing argument 'count' for template
              = argument: count
              = help: Add the argument with .arg('count', ...)

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
