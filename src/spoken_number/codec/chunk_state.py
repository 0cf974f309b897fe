"""Chunk State Machine — накопление значения группы из трёх цифр при разборе фразы.

Явное состояние вместо набора булевых флагов:
- EMPTY: группа пуста
- HAS_ONES: последним прочитан разряд единиц (digit, teen) или литерал
- HAS_TENS: прочитаны десятки ("twenty"), допускается digit
- HAS_HUNDREDS: прочитано "hundred", допускаются tens, teen, digit

Любой переход, отсутствующий в таблице, является противоречием границы
группы ("two" сразу после "one", "twenty" после "five") и отклоняется.

Годовая запись ("nineteen eighty four", "twenty twenty") читается через
SCALED_TRANSITIONS: значение 10..99 умножается на 100 перед tens или teen.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Final, Mapping

from spoken_number.core.domain.errors import InvalidNumberPhrase


class ChunkState(str, Enum):
    """Состояние накопления группы."""
    EMPTY = "EMPTY"
    HAS_ONES = "HAS_ONES"
    HAS_TENS = "HAS_TENS"
    HAS_HUNDREDS = "HAS_HUNDREDS"


class ChunkToken(str, Enum):
    """Вид токена, изменяющего значение группы."""
    DIGIT = "DIGIT"  # one ... nine
    TEEN = "TEEN"  # ten ... nineteen
    TENS = "TENS"  # twenty ... ninety
    HUNDRED = "HUNDRED"
    LITERAL = "LITERAL"  # числовой литерал, заменяющий группу целиком


# Допустимые переходы: (state, token) → new state
TRANSITIONS: Final[Mapping[tuple[ChunkState, ChunkToken], ChunkState]] = MappingProxyType({
    (ChunkState.EMPTY, ChunkToken.DIGIT): ChunkState.HAS_ONES,
    (ChunkState.HAS_TENS, ChunkToken.DIGIT): ChunkState.HAS_ONES,
    (ChunkState.HAS_HUNDREDS, ChunkToken.DIGIT): ChunkState.HAS_ONES,
    (ChunkState.EMPTY, ChunkToken.TEEN): ChunkState.HAS_ONES,
    (ChunkState.HAS_HUNDREDS, ChunkToken.TEEN): ChunkState.HAS_ONES,
    (ChunkState.EMPTY, ChunkToken.TENS): ChunkState.HAS_TENS,
    (ChunkState.HAS_HUNDREDS, ChunkToken.TENS): ChunkState.HAS_TENS,
    (ChunkState.HAS_ONES, ChunkToken.HUNDRED): ChunkState.HAS_HUNDREDS,
    (ChunkState.HAS_TENS, ChunkToken.HUNDRED): ChunkState.HAS_HUNDREDS,
    (ChunkState.EMPTY, ChunkToken.LITERAL): ChunkState.HAS_ONES,
})

# Переходы с неявным "hundred": (state, token) → new state
SCALED_TRANSITIONS: Final[Mapping[tuple[ChunkState, ChunkToken], ChunkState]] = MappingProxyType({
    (ChunkState.HAS_ONES, ChunkToken.TENS): ChunkState.HAS_TENS,
    (ChunkState.HAS_ONES, ChunkToken.TEEN): ChunkState.HAS_ONES,
    (ChunkState.HAS_TENS, ChunkToken.TENS): ChunkState.HAS_TENS,
    (ChunkState.HAS_TENS, ChunkToken.TEEN): ChunkState.HAS_ONES,
})


@dataclass(frozen=True)
class ChunkTransitionResult:
    """Результат перехода состояния группы."""

    previous_state: ChunkState
    new_state: ChunkState
    value: Fraction
    scaled: bool = False


class ChunkAccumulator:
    """Накопитель значения текущей группы.

    "hundred" умножает накопленное значение 1..99 на 100, поэтому
    "nineteen hundred" = 1900, а "one hundred five hundred" отклоняется.
    Литерал (например "1500" или "2.5") занимает группу целиком.
    """

    def __init__(self) -> None:
        self.state = ChunkState.EMPTY
        self.value = Fraction(0)

    @property
    def is_empty(self) -> bool:
        return self.state == ChunkState.EMPTY

    def transition(self, token: ChunkToken, amount: int | Fraction = 0) -> ChunkTransitionResult:
        """Применение токена к группе.

        Args:
            token: вид токена
            amount: значение токена (digit, teen, десятки или литерал; для HUNDRED не используется)

        Returns:
            ChunkTransitionResult с новым состоянием и значением

        Raises:
            InvalidNumberPhrase: если переход не определён (противоречие границы группы)
        """
        previous = self.state
        new_state = TRANSITIONS.get((previous, token))
        scaled = False

        if new_state is None and self._is_whole(10, 99):
            new_state = SCALED_TRANSITIONS.get((previous, token))
            scaled = new_state is not None

        if token == ChunkToken.HUNDRED and new_state is not None:
            if not self._is_whole(1, 99):
                new_state = None

        if new_state is None:
            raise InvalidNumberPhrase(
                f"Chunk boundary contradiction: {token.value} after {previous.value}"
            )

        if token == ChunkToken.HUNDRED:
            self.value *= 100
        elif scaled:
            self.value = self.value * 100 + Fraction(amount)
        else:
            self.value += Fraction(amount)
        self.state = new_state

        return ChunkTransitionResult(
            previous_state=previous,
            new_state=new_state,
            value=self.value,
            scaled=scaled,
        )

    def _is_whole(self, low: int, high: int) -> bool:
        return self.value.denominator == 1 and low <= self.value <= high

    def close(self) -> Fraction:
        """Закрытие группы: возвращает значение и сбрасывает состояние."""
        value = self.value
        self.state = ChunkState.EMPTY
        self.value = Fraction(0)
        return value
