"""Shared constants for getprose.

Centralizes the values that several packages need so they can be imported
without creating circular dependencies.

Constants are grouped by domain:
- Template syntax: Placeholder delimiters shared with translators
- Catalogs: File naming for compiled gettext catalogs
- Formatting: Limits for locale-aware number rendering
- Extraction: Defaults for the POT template build step

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "PLACEHOLDER_START",
    "PLACEHOLDER_END",
    # Catalogs
    "CATALOG_FILE_SUFFIX",
    "LOCALE_PLACEHOLDER",
    # Formatting
    "MAX_FLOAT_PRECISION",
    "INTEGER_PATTERN",
    # Extraction
    "DEFAULT_COMMENT_TAG",
    "DEFAULT_SOURCE_DATE_EPOCH",
    "GETTEXT_KEYWORDS",
    "POT_CREATION_DATE_PREFIX",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Part of the public contract: translators write `{count}` in msgstr entries.
# Names cannot contain PLACEHOLDER_END.
PLACEHOLDER_START: str = "{"
PLACEHOLDER_END: str = "}"

# ============================================================================
# CATALOGS
# ============================================================================

CATALOG_FILE_SUFFIX: str = ".mo"

# Substituted by PathCatalogLoader with the locale's canonical string.
LOCALE_PLACEHOLDER: str = "{locale}"

# ============================================================================
# FORMATTING
# ============================================================================

# Upper bound for format_float() fraction digits.
MAX_FLOAT_PRECISION: int = 20

# CLDR pattern for grouped integers ('#,##0' = grouping, no fraction).
INTEGER_PATTERN: str = "#,##0"

# ============================================================================
# EXTRACTION
# ============================================================================

DEFAULT_COMMENT_TAG: str = "TRANSLATOR:"

# Used when SOURCE_DATE_EPOCH is unset (header year 1970).
DEFAULT_SOURCE_DATE_EPOCH: int = 1

POT_CREATION_DATE_PREFIX: str = '"POT-Creation-Date'

# Babel keywords: argument positions of msgid, msgid_plural and context.
GETTEXT_KEYWORDS: dict[str, tuple[int | tuple[int, str], ...] | None] = {
    "gettext": None,
    "ngettext": (1, 2),
    "pgettext": ((1, "c"), 2),
    "npgettext": ((1, "c"), 2, 3),
}
