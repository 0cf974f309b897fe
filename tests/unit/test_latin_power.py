"""
Тесты для Latin Power Namer — имена порядков "-illion"

Проверяемые инварианты:
1. parse(name(n)) == n для всех n >= 1
2. name — тотальная функция, parse — частичная
3. Серии "millia" строго убывают
4. Итеративная реализация работает для огромных индексов
"""

import pytest

from spoken_number.core.domain.errors import InvalidLatinPowerName, NumberCodecError
from spoken_number.core.math.latin_power import (
    chunk_power_name,
    is_latin_power_name,
    latin_power_name,
    latin_power_name_to_latin_power,
)


# =============================================================================
# ТЕСТЫ: latin_power_name
# =============================================================================


class TestLatinPowerName:
    """Тесты построения имён."""

    def test_special_names(self):
        """1..9 — зарезервированные основы + llion."""
        expected = [
            "million", "billion", "trillion", "quadrillion", "quintillion",
            "sextillion", "septillion", "octillion", "nonillion",
        ]
        assert [latin_power_name(n) for n in range(1, 10)] == expected

    def test_small_suffix(self):
        """Десятки == 1 → окончание illion."""
        assert latin_power_name(10) == "decillion"
        assert latin_power_name(11) == "undecillion"
        assert latin_power_name(12) == "duodecillion"
        assert latin_power_name(13) == "tredecillion"
        assert latin_power_name(110) == "cendecillion"

    def test_standard_suffix(self):
        assert latin_power_name(20) == "vigintillion"
        assert latin_power_name(21) == "unvigintillion"
        assert latin_power_name(100) == "centillion"
        assert latin_power_name(101) == "cenuntillion"
        assert latin_power_name(102) == "cenduotillion"
        assert latin_power_name(999) == "nongennovemnonagintillion"

    def test_thousands_separators(self):
        """Старший триплет 1 записывается одними разделителями."""
        assert latin_power_name(1000) == "milliatillion"
        assert latin_power_name(1001) == "milliauntillion"
        assert latin_power_name(2000) == "duomilliatillion"
        assert latin_power_name(1_000_000) == "milliamilliatillion"
        assert latin_power_name(2_000_000) == "duomilliamilliatillion"
        assert latin_power_name(2_001_000) == "duomilliamilliaunmilliatillion"

    def test_zero_and_negative(self):
        assert latin_power_name(0) == ""
        with pytest.raises(ValueError, match="non-negative"):
            latin_power_name(-1)

    def test_dashes(self):
        assert latin_power_name(11, dashes=True) == "un-dec-illion"
        assert latin_power_name(1, dashes=True) == "mi-llion"
        assert latin_power_name(2000, dashes=True) == "duo-millia-tillion"

    def test_huge_index_without_recursion(self):
        """Индекс с тысячами групп не исчерпывает стек."""
        name = latin_power_name(10 ** 3000 + 7)
        assert name == "millia" * 1000 + "septentillion"


# =============================================================================
# ТЕСТЫ: latin_power_name_to_latin_power
# =============================================================================


class TestLatinPowerParse:
    """Тесты разбора имён."""

    def test_round_trip_range(self):
        """parse(name(n)) == n для n ∈ [1, 2000]."""
        for n in range(1, 2001):
            assert latin_power_name_to_latin_power(latin_power_name(n)) == n

    def test_round_trip_large(self):
        for n in (999_999, 1_000_000, 1_000_001, 123_456_789, 10 ** 9 + 7, 10 ** 30 + 12):
            assert latin_power_name_to_latin_power(latin_power_name(n)) == n

    def test_round_trip_dashes(self):
        for n in (1, 11, 1000, 2345):
            assert latin_power_name_to_latin_power(latin_power_name(n, dashes=True)) == n

    def test_case_and_whitespace_ignored(self):
        assert latin_power_name_to_latin_power("Million") == 1
        assert latin_power_name_to_latin_power(" vigin tillion ") == 20
        assert latin_power_name_to_latin_power("MILLIATILLION") == 1000

    def test_invalid_names(self):
        for name in (
            "",
            "illion",
            "tillion",
            "thousand",
            "gazillion",
            "decillions",
            "unmillion",  # основа вне одиночного имени
            "decdecillion",  # повтор категории
            "decunillion",  # десятки перед единицами
            "unmilliatillion",  # старшая единица пишется без "un"
            "milliaduomilliatillion",  # серии millia не убывают
            "centillion-x",
        ):
            with pytest.raises(InvalidLatinPowerName, match="valid latin power name"):
                latin_power_name_to_latin_power(name)

    def test_error_hierarchy(self):
        with pytest.raises(NumberCodecError):
            latin_power_name_to_latin_power("foo")
        with pytest.raises(ValueError):
            latin_power_name_to_latin_power("foo")

    def test_is_latin_power_name(self):
        assert is_latin_power_name("nonillion")
        assert not is_latin_power_name("nonillions")


# =============================================================================
# ТЕСТЫ: chunk_power_name
# =============================================================================


class TestChunkPowerName:
    """Имена разрядов групп из трёх цифр."""

    def test_chunk_power_names(self):
        assert chunk_power_name(0) == ""
        assert chunk_power_name(1) == "thousand"
        assert chunk_power_name(2) == "million"
        assert chunk_power_name(11) == "decillion"
        assert chunk_power_name(12, dashes=True) == "un-dec-illion"

    def test_negative(self):
        with pytest.raises(ValueError):
            chunk_power_name(-1)
