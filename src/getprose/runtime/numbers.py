"""Locale-aware number rendering.

Stateless functions that turn numbers into display strings using Babel's
CLDR data. Their output is meant to be handed to FormatBuilder.arg().

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from babel import numbers as babel_numbers

from getprose.constants import INTEGER_PATTERN, MAX_FLOAT_PRECISION
from getprose.diagnostics import ErrorTemplate, FormattingError
from getprose.locale import Locale

__all__ = ["format_float", "format_int"]


def format_int(value: int, locale: Locale) -> str:
    """Format an integer with the grouping conventions of `locale`.

    Args:
        value: Integer to format
        locale: Target locale

    Returns:
        Grouped, signed integer text

    Raises:
        TypeError: If value is not an int (bool is rejected too)
        FormattingError: If Babel cannot format for this locale

    Examples:
        >>> format_int(1234, Locale.DE_DE)
        '1.234'
        >>> format_int(-1234567, Locale.EN_GB)
        '-1,234,567'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"format_int() expects int, not {type(value).__name__}"
        raise TypeError(msg)

    # Babel quantizes under the current context; keep every digit of the value
    digits = max(28, len(str(abs(value))) + 2)
    try:
        with localcontext(prec=digits):
            return str(
                babel_numbers.format_decimal(
                    value, format=INTEGER_PATTERN, locale=locale.babel_locale
                )
            )
    except (ValueError, KeyError, AttributeError, InvalidOperation) as e:
        raise FormattingError(
            ErrorTemplate.formatting_failed("integer", value, str(locale), str(e)),
            locale_code=str(locale),
        ) from e


def format_float(value: int | float | Decimal, precision: int, locale: Locale) -> str:
    """Format a number with exactly `precision` fraction digits.

    Rounds halves away from zero, based on the exact value of the number (a
    float is not first converted to its shortest repr). A result that rounds
    to zero is rendered without a minus sign.

    Args:
        value: Number to format
        precision: Fraction digits, 0 to MAX_FLOAT_PRECISION
        locale: Target locale

    Returns:
        Grouped text with the locale's decimal separator

    Raises:
        TypeError: If value is not a number
        ValueError: If precision is out of range or value is not finite
        FormattingError: If Babel cannot format for this locale

    Examples:
        >>> format_float(1234, 2, Locale.DE_DE)
        '1.234,00'
        >>> format_float(0.005, 2, Locale.DE_DE)
        '0,01'
        >>> format_float(-0.001, 2, Locale.DE_DE)
        '0,00'
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        msg = f"format_float() expects a number, not {type(value).__name__}"
        raise TypeError(msg)
    if not 0 <= precision <= MAX_FLOAT_PRECISION:
        msg = f"precision must be between 0 and {MAX_FLOAT_PRECISION}, got {precision}"
        raise ValueError(msg)

    exact = Decimal(value)
    if not exact.is_finite():
        msg = f"Cannot format non-finite value {value!r}"
        raise ValueError(msg)

    # Default context precision (28 digits) is too small for large values;
    # Babel quantizes again under the current context.
    digits = max(28, exact.adjusted() + precision + 2)
    pattern = f"{INTEGER_PATTERN}.{'0' * precision}" if precision else INTEGER_PATTERN
    try:
        with localcontext(prec=digits):
            rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
            if rounded.is_zero():
                rounded = rounded.copy_abs()
            return str(
                babel_numbers.format_decimal(rounded, format=pattern, locale=locale.babel_locale)
            )
    except (ValueError, KeyError, AttributeError, InvalidOperation) as e:
        raise FormattingError(
            ErrorTemplate.formatting_failed("float", value, str(locale), str(e)),
            locale_code=str(locale),
        ) from e
