"""Locale-aware date rendering.

Sibling of the number renderers: pure functions producing plain strings for
FormatBuilder.arg(). No calendar arithmetic happens here.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from babel import dates as babel_dates

from getprose.diagnostics import ErrorTemplate, FormattingError
from getprose.locale import Locale

__all__ = ["format_date", "format_datetime"]


def format_date(value: date, locale: Locale, *, style: str = "medium") -> str:
    """Format a date.

    Args:
        value: date (or datetime, whose time part is ignored)
        locale: Target locale
        style: "short", "medium", "long", "full", or a CLDR pattern

    Raises:
        TypeError: If value is not a date
        FormattingError: If Babel rejects the style or locale

    Examples:
        >>> format_date(date(2024, 3, 5), Locale.DE_DE)
        '05.03.2024'
        >>> format_date(date(2024, 3, 5), Locale.DE_DE, style="yyyy-MM-dd")
        '2024-03-05'
    """
    if not isinstance(value, date):
        msg = f"format_date() expects date, not {type(value).__name__}"
        raise TypeError(msg)

    try:
        return str(babel_dates.format_date(value, format=style, locale=locale.babel_locale))
    except (ValueError, KeyError, AttributeError) as e:
        raise FormattingError(
            ErrorTemplate.formatting_failed("date", value, str(locale), str(e)),
            locale_code=str(locale),
        ) from e


def format_datetime(
    value: datetime,
    locale: Locale,
    *,
    style: str = "medium",
    tz: tzinfo | None = None,
) -> str:
    """Format a datetime.

    Args:
        value: datetime to format
        locale: Target locale
        style: "short", "medium", "long", "full", or a CLDR pattern
        tz: Time zone to convert to before formatting. Naive values are
            taken as UTC and aware values keep their own zone when omitted.

    Raises:
        TypeError: If value is not a datetime
        FormattingError: If Babel rejects the style or locale
    """
    if not isinstance(value, datetime):
        msg = f"format_datetime() expects datetime, not {type(value).__name__}"
        raise TypeError(msg)

    try:
        return str(
            babel_dates.format_datetime(
                value, format=style, tzinfo=tz, locale=locale.babel_locale
            )
        )
    except (ValueError, KeyError, AttributeError) as e:
        raise FormattingError(
            ErrorTemplate.formatting_failed("datetime", value, str(locale), str(e)),
            locale_code=str(locale),
        ) from e
