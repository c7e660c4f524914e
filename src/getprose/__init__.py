"""getprose - locale-aware translation and formatting of user-facing text.

Selects translated messages from compiled gettext catalogs, picks the right
plural form, and fills ``{name}`` placeholders with values rendered in the
locale's numeric and date conventions.

Public API:
    Locale - Supported locales; entry point for gettext/ngettext/pgettext/npgettext
    init_catalogs - Load compiled catalogs and initialize the default registry
    CatalogRegistry - Write-once Locale -> Catalog mapping
    Translator - Registry-bound message lookup
    MessageKey - Validated (context, singular, plural, count) key
    to_format / FormatBuilder - Placeholder substitution
    format_int, format_float, format_date, format_datetime - Value renderers

Exceptions:
    GetproseError - Base exception class
    UnsupportedLocaleError - Unknown locale code
    RegistryNotInitializedError, AlreadyInitializedError - Registry lifecycle misuse
    LocaleNotRegisteredError - No catalog for a locale
    MalformedTemplateError, MissingArgumentError - Template formatting failures

Submodules:
    getprose.catalog - Registry, lookup, and catalog loading
    getprose.runtime - Template formatter and value renderers
    getprose.diagnostics - Error types and diagnostic formatting
    getprose.extraction - POT template extraction (build step)
"""

from .catalog import (
    CatalogRegistry,
    MessageKey,
    Translator,
    get_default_registry,
    init_catalogs,
)
from .diagnostics import (
    AlreadyInitializedError,
    GetproseError,
    LocaleNotRegisteredError,
    MalformedTemplateError,
    MissingArgumentError,
    RegistryNotInitializedError,
    UnsupportedLocaleError,
)
from .locale import Locale
from .runtime import (
    FormatBuilder,
    format_date,
    format_datetime,
    format_float,
    format_int,
    format_template,
    to_format,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("getprose")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AlreadyInitializedError",
    "CatalogRegistry",
    "FormatBuilder",
    "GetproseError",
    "Locale",
    "LocaleNotRegisteredError",
    "MalformedTemplateError",
    "MessageKey",
    "MissingArgumentError",
    "RegistryNotInitializedError",
    "Translator",
    "UnsupportedLocaleError",
    "__version__",
    "format_date",
    "format_datetime",
    "format_float",
    "format_int",
    "format_template",
    "get_default_registry",
    "init_catalogs",
    "to_format",
]
