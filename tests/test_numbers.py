"""Tests for runtime/numbers.py: format_int and format_float.

Expected strings use locales whose CLDR symbols are plain ASCII (de_DE,
en_GB, it_IT), so assertions do not depend on narrow no-break spaces.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from getprose.constants import MAX_FLOAT_PRECISION
from getprose.locale import Locale
from getprose.runtime.numbers import format_float, format_int

LOCALES = st.sampled_from(list(Locale))


class TestFormatInt:
    """format_int grouping."""

    @pytest.mark.parametrize(
        ("value", "locale", "expected"),
        [
            (0, Locale.DE_DE, "0"),
            (20, Locale.DE_DE, "20"),
            (1234, Locale.DE_DE, "1.234"),
            (1234, Locale.EN_GB, "1,234"),
            (1234, Locale.IT_IT, "1.234"),
            (-1234567, Locale.EN_GB, "-1,234,567"),
            (-1234567, Locale.DE_DE, "-1.234.567"),
            (10**12, Locale.EN_GB, "1,000,000,000,000"),
            (10**30, Locale.EN_GB, "1" + ",000" * 10),
            (-(2**127), Locale.DE_DE, "-" + f"{2**127:,}".replace(",", ".")),
        ],
    )
    def test_grouping(self, value: int, locale: Locale, expected: str) -> None:
        """Group separators follow the locale."""
        assert format_int(value, locale) == expected

    @pytest.mark.parametrize("value", [True, 1.0, "12", None, Decimal(3)])
    def test_non_int_rejected(self, value: object) -> None:
        """Only real ints are accepted; bool is not a count."""
        with pytest.raises(TypeError, match="expects int"):
            format_int(value, Locale.EN_GB)  # type: ignore[arg-type]

    @given(st.integers(min_value=-(10**40), max_value=10**40), LOCALES)
    def test_digits_preserved(self, value: int, locale: Locale) -> None:
        """Stripping separators and sign leaves the decimal digits."""
        rendered = format_int(value, locale)
        digits = "".join(ch for ch in rendered if ch.isdigit())
        assert digits == str(abs(value))

    @given(st.integers(min_value=0, max_value=999), LOCALES)
    def test_small_values_ungrouped(self, value: int, locale: Locale) -> None:
        """Values below one thousand render as plain digits."""
        assert format_int(value, locale) == str(value)


class TestFormatFloat:
    """format_float rounding and separators."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (0, 0, "0"),
            (0.005, 2, "0,01"),
            (-0.001, 2, "0,00"),
            (-0.005, 2, "-0,01"),
            (1.1234, 3, "1,123"),
            (1234, 5, "1.234,00000"),
            (-1234, 5, "-1.234,00000"),
            (-0.0, 0, "0"),
            (0.0000000000000001, 16, "0,0000000000000001"),
            (2.5, 0, "3"),
            (-2.5, 0, "-3"),
            (1234.5678, 2, "1.234,57"),
        ],
    )
    def test_de_de(self, value: float, precision: int, expected: str) -> None:
        """Decimal comma, dot grouping, halves rounded away from zero."""
        assert format_float(value, precision, Locale.DE_DE) == expected

    def test_en_gb(self) -> None:
        """Decimal point and comma grouping."""
        assert format_float(1234.5, 2, Locale.EN_GB) == "1,234.50"
        assert format_float(-0.25, 1, Locale.EN_GB) == "-0.3"

    def test_decimal_input(self) -> None:
        """Decimal values are formatted from their exact digits."""
        assert format_float(Decimal("1.005"), 2, Locale.EN_GB) == "1.01"

    def test_large_float(self) -> None:
        """Large floats are grouped, not switched to exponent notation."""
        assert format_float(1e21, 0, Locale.EN_GB) == "1,000,000,000,000,000,000,000"

    @pytest.mark.parametrize("precision", range(MAX_FLOAT_PRECISION + 1))
    def test_zero_at_every_precision(self, precision: int) -> None:
        """Zero has exactly `precision` fraction digits."""
        expected = "0," + "0" * precision if precision else "0"
        assert format_float(0.0, precision, Locale.DE_DE) == expected

    @pytest.mark.parametrize("precision", [-1, MAX_FLOAT_PRECISION + 1])
    def test_precision_out_of_range(self, precision: int) -> None:
        """Precision is bounded."""
        with pytest.raises(ValueError, match="precision must be between"):
            format_float(1.0, precision, Locale.EN_GB)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        """NaN and infinities have no localized digits."""
        with pytest.raises(ValueError, match="non-finite"):
            format_float(value, 2, Locale.EN_GB)

    @pytest.mark.parametrize("value", [True, "1.5", None])
    def test_non_number_rejected(self, value: object) -> None:
        """Strings, None and bool are type errors."""
        with pytest.raises(TypeError, match="expects a number"):
            format_float(value, 2, Locale.EN_GB)  # type: ignore[arg-type]

    @given(
        st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False),
        st.integers(min_value=0, max_value=6),
    )
    def test_fraction_digit_count(self, value: float, precision: int) -> None:
        """The output has exactly `precision` digits after the separator."""
        rendered = format_float(value, precision, Locale.EN_GB)
        if precision:
            whole, _, fraction = rendered.partition(".")
            assert len(fraction) == precision
            assert fraction.isdigit()
        else:
            assert "." not in rendered

    @given(st.floats(min_value=-0.004, max_value=0.004, allow_nan=False))
    def test_no_negative_zero(self, value: float) -> None:
        """Values rounding to zero never carry a minus sign."""
        assert format_float(value, 2, Locale.EN_GB) == "0.00"
