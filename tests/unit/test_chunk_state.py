"""
Тесты для Chunk State Machine

Проверяемые инварианты:
1. Только переходы из TRANSITIONS разрешены
2. "hundred" умножает значение 1..99
3. Литерал занимает группу целиком
4. close() возвращает значение и сбрасывает состояние
5. Значение 10..99 перед tens или teen умножается на 100 (годовая запись)
"""

from fractions import Fraction

import pytest

from spoken_number.codec.chunk_state import (
    SCALED_TRANSITIONS,
    TRANSITIONS,
    ChunkAccumulator,
    ChunkState,
    ChunkToken,
)
from spoken_number.core.domain.errors import InvalidNumberPhrase


# =============================================================================
# ТЕСТЫ: Valid transitions
# =============================================================================


class TestValidTransitions:
    """Допустимые последовательности токенов."""

    def test_initial_state(self):
        acc = ChunkAccumulator()
        assert acc.state == ChunkState.EMPTY
        assert acc.is_empty
        assert acc.value == 0

    def test_tens_then_digit(self):
        """twenty one = 21"""
        acc = ChunkAccumulator()
        result = acc.transition(ChunkToken.TENS, 20)
        assert result.previous_state == ChunkState.EMPTY
        assert result.new_state == ChunkState.HAS_TENS

        result = acc.transition(ChunkToken.DIGIT, 1)
        assert result.new_state == ChunkState.HAS_ONES
        assert result.value == 21

    def test_full_chunk(self):
        """three hundred forty two = 342"""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 3)
        acc.transition(ChunkToken.HUNDRED)
        assert acc.state == ChunkState.HAS_HUNDREDS
        acc.transition(ChunkToken.TENS, 40)
        acc.transition(ChunkToken.DIGIT, 2)
        assert acc.value == 342

    def test_teen_hundred(self):
        """nineteen hundred = 1900"""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TEEN, 19)
        result = acc.transition(ChunkToken.HUNDRED)
        assert result.value == 1900

    def test_hundred_then_teen(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 1)
        acc.transition(ChunkToken.HUNDRED)
        acc.transition(ChunkToken.TEEN, 15)
        assert acc.value == 115

    def test_literal_from_empty(self):
        acc = ChunkAccumulator()
        result = acc.transition(ChunkToken.LITERAL, Fraction("2.5"))
        assert result.new_state == ChunkState.HAS_ONES
        assert result.value == Fraction(5, 2)

    def test_close_resets(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 7)
        assert acc.close() == 7
        assert acc.is_empty
        assert acc.value == 0


class TestYearStyle:
    """Неявное "hundred" между двумя двузначными частями."""

    def test_teen_then_tens(self):
        """nineteen eighty four = 1984"""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TEEN, 19)
        result = acc.transition(ChunkToken.TENS, 80)
        assert result.scaled
        assert result.new_state == ChunkState.HAS_TENS
        assert result.value == 1980

        result = acc.transition(ChunkToken.DIGIT, 4)
        assert not result.scaled
        assert result.value == 1984

    def test_tens_then_tens(self):
        """twenty twenty = 2020"""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TENS, 20)
        assert acc.transition(ChunkToken.TENS, 20).value == 2020

    def test_tens_then_teen(self):
        """twenty nineteen = 2019"""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TENS, 20)
        result = acc.transition(ChunkToken.TEEN, 19)
        assert result.new_state == ChunkState.HAS_ONES
        assert result.value == 2019

    def test_scaled_value_rejects_hundred(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TENS, 20)
        acc.transition(ChunkToken.TENS, 20)
        with pytest.raises(InvalidNumberPhrase, match="HUNDRED after HAS_TENS"):
            acc.transition(ChunkToken.HUNDRED)


# =============================================================================
# ТЕСТЫ: Contradictions
# =============================================================================


class TestContradictions:
    """Переходы вне таблицы отклоняются."""

    def test_digit_after_digit(self):
        """"one two" — противоречие границы группы."""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 1)
        with pytest.raises(InvalidNumberPhrase, match="contradiction"):
            acc.transition(ChunkToken.DIGIT, 2)

    def test_tens_after_ones(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 5)
        with pytest.raises(InvalidNumberPhrase, match="TENS after HAS_ONES"):
            acc.transition(ChunkToken.TENS, 20)

    def test_scaling_needs_two_digit_value(self):
        """"five twenty" и "nineteen eighty nineteen" отклоняются."""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 5)
        with pytest.raises(InvalidNumberPhrase, match="TEEN after HAS_ONES"):
            acc.transition(ChunkToken.TEEN, 11)

        acc = ChunkAccumulator()
        acc.transition(ChunkToken.TEEN, 19)
        acc.transition(ChunkToken.TENS, 80)
        with pytest.raises(InvalidNumberPhrase, match="TEEN after HAS_TENS"):
            acc.transition(ChunkToken.TEEN, 19)

    def test_hundred_on_empty(self):
        acc = ChunkAccumulator()
        with pytest.raises(InvalidNumberPhrase, match="HUNDRED after EMPTY"):
            acc.transition(ChunkToken.HUNDRED)

    def test_hundred_after_hundred(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 1)
        acc.transition(ChunkToken.HUNDRED)
        with pytest.raises(InvalidNumberPhrase, match="contradiction"):
            acc.transition(ChunkToken.HUNDRED)

    def test_hundred_after_value_above_99(self):
        """"one hundred five hundred" отклоняется."""
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 1)
        acc.transition(ChunkToken.HUNDRED)
        acc.transition(ChunkToken.DIGIT, 5)
        with pytest.raises(InvalidNumberPhrase, match="contradiction"):
            acc.transition(ChunkToken.HUNDRED)

    def test_literal_after_digit(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 1)
        with pytest.raises(InvalidNumberPhrase, match="LITERAL after HAS_ONES"):
            acc.transition(ChunkToken.LITERAL, Fraction(1500))

    def test_failed_transition_keeps_state(self):
        acc = ChunkAccumulator()
        acc.transition(ChunkToken.DIGIT, 4)
        with pytest.raises(InvalidNumberPhrase):
            acc.transition(ChunkToken.DIGIT, 2)
        assert acc.state == ChunkState.HAS_ONES
        assert acc.value == 4


# =============================================================================
# ТЕСТЫ: Transition table
# =============================================================================


class TestTransitionTable:
    """Таблица переходов."""

    def test_table_read_only(self):
        with pytest.raises(TypeError):
            TRANSITIONS[(ChunkState.HAS_ONES, ChunkToken.DIGIT)] = ChunkState.HAS_ONES

    def test_no_transition_from_empty_to_empty(self):
        assert ChunkState.EMPTY not in TRANSITIONS.values()

    def test_scaled_table_disjoint(self):
        assert not set(SCALED_TRANSITIONS) & set(TRANSITIONS)
        with pytest.raises(TypeError):
            SCALED_TRANSITIONS[(ChunkState.HAS_ONES, ChunkToken.DIGIT)] = ChunkState.HAS_ONES
