"""Diagnostic system for getprose errors.

Provides structured error diagnostics with codes, hints, and locale/argument
context, plus the exception hierarchy that carries them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    AlreadyInitializedError,
    CatalogLoadError,
    FormattingError,
    GetproseError,
    InvalidMessageKeyError,
    LocaleNotRegisteredError,
    MalformedTemplateError,
    MissingArgumentError,
    RegistryNotInitializedError,
    RegistryStateError,
    TemplateError,
    UnsupportedLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AlreadyInitializedError",
    "CatalogLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "GetproseError",
    "InvalidMessageKeyError",
    "LocaleNotRegisteredError",
    "MalformedTemplateError",
    "MissingArgumentError",
    "OutputFormat",
    "RegistryNotInitializedError",
    "RegistryStateError",
    "TemplateError",
    "UnsupportedLocaleError",
]
