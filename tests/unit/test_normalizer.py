"""
Тесты для Normalizer — каноническая нормализация чисел

Проверяемые инварианты:
1. Одно значение → одна каноническая форма
2. Ведущие/хвостовые нули удаляются, ноль без знака
3. Экспоненциальная форма только при превышении threshold
4. Ошибки формата → InvalidNumberFormat
5. Plain развёртывание ограничено max_plain_digits
"""

import sys

import pytest
from pydantic import ValidationError

from spoken_number.core.domain.canonical_number import CanonicalNumber
from spoken_number.core.domain.errors import ArithmeticOverflow, InvalidNumberFormat
from spoken_number.core.math.normalizer import (
    HIGH_PRECISION_THRESHOLD,
    from_significand,
    magnitude_span,
    normalize,
    normalize_number_string,
    render,
    shift,
    to_integer,
)


# =============================================================================
# ТЕСТЫ: normalize
# =============================================================================


class TestNormalize:
    """Тесты разбора числовых строк."""

    def test_strips_zeros(self):
        c = normalize("-00120.500")
        assert c.negative
        assert c.integer_digits == "120"
        assert c.fractional_digits == "5"
        assert c.exponent == 0

    def test_exponential_input_expanded(self):
        """1.5E+3 ниже threshold → plain форма."""
        c = normalize("1.5E+3")
        assert c.integer_digits == "1500"
        assert c.fractional_digits == ""
        assert not c.is_exponential

    def test_lowercase_exponent(self):
        assert render(normalize("2e-3")) == "0.002"

    def test_zero_forms(self):
        """0, 0.0, -0, 0E5 → ноль без знака."""
        for raw in ("0", "0.0", "-0", "0E5", "-0.000", "+0"):
            c = normalize(raw)
            assert c.is_zero
            assert not c.negative
            assert c.exponent == 0

    def test_leading_and_trailing_point(self):
        assert render(normalize(".5")) == "0.5"
        assert render(normalize("5.")) == "5"

    def test_whitespace_removed(self):
        assert render(normalize(" 1 234 ")) == "1234"

    def test_non_string_inputs(self):
        assert render(normalize(42)) == "42"
        assert render(normalize(-0.25)) == "-0.25"

    def test_canonical_input_renormalized(self):
        """CanonicalNumber нормализуется с новым threshold."""
        c = normalize("12345")
        assert render(normalize(c, threshold=3)) == "1.2345E+4"

    def test_invalid_formats(self):
        for raw in ("", "abc", "1.2.3", "--1", "1E", "E5", "1e2.5", ".", "1,000", "inf"):
            with pytest.raises(InvalidNumberFormat, match="does not represent a number"):
                normalize(raw)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter without integer string conversion limit",
    )
    def test_unrepresentable_exponent(self):
        """Exponent длиннее лимита конверсии → InvalidNumberFormat."""
        with pytest.raises(InvalidNumberFormat, match="unrepresentable") as exc_info:
            normalize("1E" + "9" * 5000)
        assert isinstance(exc_info.value.__cause__, ArithmeticOverflow)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter without integer string conversion limit",
    )
    def test_unrenderable_exponent(self):
        """Exponent длиннее лимита конверсии → ArithmeticOverflow при render."""
        number = shift(normalize("1"), 10 ** 5000)
        assert number.is_exponential
        with pytest.raises(ArithmeticOverflow, match="cannot be rendered"):
            render(number)


# =============================================================================
# ТЕСТЫ: Exponential promotion
# =============================================================================


class TestExponentialPromotion:
    """Экспоненциальная форма при превышении threshold."""

    def test_default_threshold(self):
        assert HIGH_PRECISION_THRESHOLD == 64

    def test_large_integer_at_threshold_stays_plain(self):
        c = normalize("1" + "0" * 63)
        assert not c.is_exponential
        assert len(c.integer_digits) == 64

    def test_large_integer_above_threshold(self):
        c = normalize("1" + "0" * 64)
        assert c.is_exponential
        assert c.integer_digits == "1"
        assert c.exponent == 64
        assert render(c) == "1E+64"

    def test_small_fraction_at_threshold_stays_plain(self):
        c = normalize("0." + "0" * 63 + "1")
        assert not c.is_exponential

    def test_small_fraction_above_threshold(self):
        c = normalize("0." + "0" * 64 + "1")
        assert c.is_exponential
        assert c.exponent == -65
        assert render(c) == "1E-65"

    def test_custom_threshold(self):
        assert render(normalize("12345", threshold=3)) == "1.2345E+4"
        assert render(normalize("123", threshold=3)) == "123"

    def test_magnitude_span(self):
        assert magnitude_span(4) == 4
        assert magnitude_span(0) == 1
        assert magnitude_span(-2) == 3


# =============================================================================
# ТЕСТЫ: Rendering
# =============================================================================


class TestRender:
    """Тесты строкового представления."""

    def test_forced_exponential(self):
        assert render(normalize("1234.5"), exponential=True) == "1.2345E+3"
        assert render(normalize("0.05"), exponential=True) == "5E-2"
        assert render(normalize("-7"), exponential=True) == "-7E+0"

    def test_forced_plain(self):
        assert render(normalize("1E+70"), exponential=False) == "1" + "0" * 70
        assert render(normalize("-2.5E-66"), exponential=False) == "-0." + "0" * 65 + "25"

    def test_forced_plain_overflow(self):
        with pytest.raises(ArithmeticOverflow, match="padding zeros"):
            render(normalize("1E+70"), exponential=False, max_plain_digits=10)

    def test_zero(self):
        assert render(CanonicalNumber()) == "0"
        assert render(CanonicalNumber(), exponential=True) == "0"

    def test_normalize_number_string(self):
        assert normalize_number_string("+0012.3400") == "12.34"
        assert normalize_number_string("-0.0") == "0"
        assert normalize_number_string("-1.50E-2") == "-0.015"
        assert normalize_number_string("1.5E+100") == "1.5E+100"


# =============================================================================
# ТЕСТЫ: Significand helpers
# =============================================================================


class TestSignificand:
    """Тесты значащих цифр и операций над ними."""

    def test_significand(self):
        assert normalize("1234.5").significand() == ("12345", 4)
        assert normalize("0.05").significand() == ("5", -1)
        assert normalize("1200").significand() == ("12", 4)
        assert normalize("5E+70").significand() == ("5", 71)
        assert CanonicalNumber().significand() == ("", 0)

    def test_from_significand(self):
        """0.00120 × 10^3 = 1.2"""
        assert render(from_significand(False, "00120", 3)) == "1.2"
        assert render(from_significand(True, "5", -1)) == "-0.05"
        assert from_significand(True, "000", 7).is_zero

    def test_from_significand_invalid_threshold(self):
        with pytest.raises(ValueError, match="threshold"):
            from_significand(False, "1", 1, threshold=0)

    def test_shift(self):
        assert render(shift(normalize("1.5"), 3)) == "1500"
        assert render(shift(normalize("1.5"), -3)) == "0.0015"
        assert render(shift(normalize("1.5"), 100)) == "1.5E+100"
        assert render(shift(normalize("-2.5"), 1)) == "-25"
        assert shift(CanonicalNumber(), 5).is_zero

    def test_to_integer(self):
        assert to_integer(normalize("1E+70")) == 10 ** 70
        assert to_integer(normalize("-42")) == -42
        assert to_integer(CanonicalNumber()) == 0

    def test_to_integer_rejects_fraction(self):
        with pytest.raises(ValueError, match="not an integer"):
            to_integer(normalize("1.5"))


# =============================================================================
# ТЕСТЫ: CanonicalNumber model
# =============================================================================


class TestCanonicalNumberModel:
    """Инварианты Pydantic модели."""

    def test_leading_zeros_rejected(self):
        with pytest.raises(ValidationError):
            CanonicalNumber(integer_digits="01")

    def test_trailing_zeros_rejected(self):
        with pytest.raises(ValidationError):
            CanonicalNumber(integer_digits="1", fractional_digits="50")

    def test_negative_zero_rejected(self):
        with pytest.raises(ValidationError):
            CanonicalNumber(negative=True)

    def test_exponential_needs_single_digit(self):
        with pytest.raises(ValidationError):
            CanonicalNumber(integer_digits="12", exponent=3)
        with pytest.raises(ValidationError):
            CanonicalNumber(integer_digits="0", fractional_digits="5", exponent=3)

    def test_frozen(self):
        c = normalize("1")
        with pytest.raises(ValidationError):
            c.negative = True

    def test_is_integer(self):
        assert normalize("12").is_integer
        assert not normalize("1.2").is_integer
        assert normalize("1.25E+70").is_integer
        assert not normalize("1.25E-70").is_integer
