"""
Magnitude — порядок величины числа и его имя

Вспомогательные функции поверх Normalizer:
- power_of_ten: показатель старшей значащей цифры (1234 → 3, 0.05 → -2)
- power_of_ten_truncated: усечение к нулю до кратного 3 (разряд тысяч)
- latin_power: номер группы из трёх цифр
- power_of_ten_name: имя 10^power ("one thousand", "ten millionth")
- ordinal_suffix: порядковое окончание (1 → st, 12 → th, 23 → rd)
"""

from typing import Final

from spoken_number.core.domain.vocabulary import (
    FRACTIONAL_SUFFIX,
    NameSet,
    ordinal_suffix_for_digit,
    word,
)
from spoken_number.core.math.latin_power import chunk_power_name
from spoken_number.core.math.normalizer import NumberLike, normalize

# Первое слово имени по остатку показателя: one, ten, hundred
_GROUP_LEADS: Final[tuple[NameSet, ...]] = (NameSet.DIGITS, NameSet.TENS, NameSet.HUNDREDS)


def power_of_ten(number: NumberLike) -> int:
    """
    Показатель степени десяти старшей значащей цифры (0 для нуля).

    Raises:
        InvalidNumberFormat: Если строка не является числом
    """
    digits, point = normalize(number).significand()
    if not digits:
        return 0
    return point - 1


def power_of_ten_truncated(number: NumberLike) -> int:
    """
    Показатель, усечённый к нулю до кратного 3 (1234567 → 6, 0.0001 → -3).

    Остаток берётся со знаком делимого, поэтому отрицательные показатели
    округляются вверх, к ближайшему разряду тысяч.
    """
    power = power_of_ten(number)
    remainder = abs(power) % 3
    return power - remainder if power >= 0 else power + remainder


def latin_power(number: NumberLike) -> int:
    """Номер группы из трёх цифр старшей значащей цифры (1 — тысячи, -1 — тысячные)."""
    return power_of_ten_truncated(number) // 3


def power_of_ten_name(power: int, dashes: bool = False) -> str:
    """
    Имя 10^power: "one", "ten" или "hundred" и имя разряда тысяч.

    Args:
        power: Показатель степени (отрицательный → дробная единица)
        dashes: Разделять части латинского имени дефисами

    Examples:
        >>> power_of_ten_name(3)
        'one thousand'
        >>> power_of_ten_name(-7)
        'ten millionth'
    """
    fractional = power < 0
    latin, over = divmod(abs(power), 3)

    parts = [word(_GROUP_LEADS[over], 1)]
    if latin > 0:
        parts.append(chunk_power_name(latin, dashes=dashes))

    name = " ".join(parts)
    return name + FRACTIONAL_SUFFIX if fractional else name



def ordinal_suffix(number: NumberLike) -> str:
    """
    Порядковое окончание числа: st, nd, rd или th.

    Дробные числа и числа, оканчивающиеся на 11, 12, 13, получают "th".
    """
    digits, point = normalize(number).significand()
    if not digits or point != len(digits):
        # ноль, дробь или хвостовые нули
        return ordinal_suffix_for_digit(0)

    if len(digits) > 1 and digits[-2] == "1":
        return ordinal_suffix_for_digit(0)
    return ordinal_suffix_for_digit(int(digits[-1]))
