"""
Normalizer — каноническая нормализация числовых строк

Модуль приводит любую текстовую запись десятичного числа к единственному
CanonicalNumber и обратно:
- Plain запись: [+-]digits[.digits] (допускаются ".5" и "5.")
- Экспоненциальная запись: mantissa[.fraction]E[+-]exponent (регистр E не важен)
- Пробельные символы внутри строки игнорируются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Одно значение → одна каноническая форма (при заданном threshold)
2. Ведущие нули целой части и хвостовые нули дробной части удаляются
3. 0, 0.0, -0, 0E5 → ноль без знака
4. Экспоненциальная форма выбирается, только если число цифр между старшей
   значащей цифрой и точкой превышает threshold (передаётся вызывающим кодом)
5. Развёртывание в plain форму никогда не превышает threshold нулей при
   нормализации; явный render(exponential=False) ограничен max_plain_digits
"""

import re
from decimal import Decimal
from typing import Final, Union

from spoken_number.core.domain.canonical_number import CanonicalNumber
from spoken_number.core.domain.errors import ArithmeticOverflow, InvalidNumberFormat

# =============================================================================
# PRECISION ПАРАМЕТРЫ
# =============================================================================

# Порог числа цифр до точки (или нулей после неё), после которого
# число представляется в экспоненциальной форме
HIGH_PRECISION_THRESHOLD: Final[int] = 64

# Максимум нулей, дописываемых при явном развёртывании в plain форму
MAX_PLAIN_DIGITS: Final[int] = 100_000

NumberLike = Union[str, int, float, Decimal, CanonicalNumber]

_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+\-]?)"
    r"(?:(?P<integral>[0-9]+)(?:\.(?P<fractional>[0-9]*))?|\.(?P<fraction_only>[0-9]+))"
    r"(?:E(?P<exponent>[+\-]?[0-9]+))?$"
)


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def _to_int(text: str) -> int:
    """
    Конверсия текста exponent в int.

    Raises:
        ArithmeticOverflow: Если текст превышает лимит конверсии интерпретатора
    """
    try:
        return int(text)
    except ValueError as e:
        raise ArithmeticOverflow(f"Exponent {text[:16]}... cannot be rebased: {e}") from e


def _plain_parts(digits: str, point: int) -> tuple[str, str]:
    """Целая и дробная части plain записи для 0.<digits> × 10^point."""
    if not digits:
        return "0", ""
    if point >= len(digits):
        return digits + "0" * (point - len(digits)), ""
    if point <= 0:
        return "0", "0" * (-point) + digits
    return digits[:point], digits[point:]


def magnitude_span(point: int) -> int:
    """
    Число цифр между старшей значащей цифрой и десятичной точкой.

    Для point > 0 это длина целой части, иначе число нулей после точки плюс
    сама старшая цифра.
    """
    return point if point > 0 else 1 - point


# =============================================================================
# NORMALIZATION
# =============================================================================


def from_significand(
    negative: bool,
    digits: str,
    point: int,
    threshold: int = HIGH_PRECISION_THRESHOLD,
) -> CanonicalNumber:
    """
    Построение CanonicalNumber из значащих цифр и позиции точки.

    Значение = (-1)^negative × 0.<digits> × 10^point.

    Args:
        negative: Знак
        digits: Строка цифр (ведущие/хвостовые нули допускаются)
        point: Позиция десятичной точки относительно начала digits
        threshold: Порог экспоненциальной формы

    Returns:
        Канонический CanonicalNumber
    """
    if threshold < 1:
        raise ValueError(f"threshold must be positive, got {threshold}")

    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")

    if not digits:
        return CanonicalNumber()

    if magnitude_span(point) > threshold:
        return CanonicalNumber(
            negative=negative,
            integer_digits=digits[0],
            fractional_digits=digits[1:],
            exponent=point - 1,
        )

    integer_digits, fractional_digits = _plain_parts(digits, point)
    return CanonicalNumber(
        negative=negative,
        integer_digits=integer_digits,
        fractional_digits=fractional_digits,
    )


def normalize(raw: NumberLike, threshold: int = HIGH_PRECISION_THRESHOLD) -> CanonicalNumber:
    """
    Нормализация числовой строки в CanonicalNumber.

    Args:
        raw: Число (строка, int, Decimal, float или CanonicalNumber)
        threshold: Порог экспоненциальной формы (default: HIGH_PRECISION_THRESHOLD)

    Returns:
        CanonicalNumber в канонической форме

    Raises:
        InvalidNumberFormat: Если строка не является числом

    Examples:
        >>> normalize("-00120.500").integer_digits
        '120'
        >>> normalize("1.5E+3").integer_digits
        '1500'
    """
    if isinstance(raw, CanonicalNumber):
        digits, point = raw.significand()
        return from_significand(raw.negative, digits, point, threshold)

    text = raw if isinstance(raw, str) else str(raw)
    cleaned = "".join(text.split()).upper()

    match = _NUMBER_PATTERN.match(cleaned)
    if match is None:
        raise InvalidNumberFormat(f"The string: {text!r} does not represent a number")

    integral = match.group("integral") or ""
    fractional = match.group("fractional") or match.group("fraction_only") or ""
    try:
        exponent = _to_int(match.group("exponent")) if match.group("exponent") else 0
    except ArithmeticOverflow as e:
        raise InvalidNumberFormat(
            f"The string: {text!r} has an unrepresentable exponent"
        ) from e

    return from_significand(
        match.group("sign") == "-",
        integral + fractional,
        len(integral) + exponent,
        threshold,
    )


def shift(number: CanonicalNumber, places: int, threshold: int = HIGH_PRECISION_THRESHOLD) -> CanonicalNumber:
    """Умножение на 10^places с повторной нормализацией."""
    digits, point = number.significand()
    return from_significand(number.negative, digits, point + places, threshold)


# =============================================================================
# RENDERING
# =============================================================================


def plain_parts(number: CanonicalNumber, max_plain_digits: int = MAX_PLAIN_DIGITS) -> tuple[str, str]:
    """
    Развёрнутые целая и дробная части числа (без знака).

    Raises:
        ArithmeticOverflow: Если развёртывание требует больше max_plain_digits нулей
    """
    digits, point = number.significand()
    padding = max(point - len(digits), -point, 0)
    if padding > max_plain_digits:
        raise ArithmeticOverflow(
            f"Plain expansion needs more than {max_plain_digits} padding zeros"
        )
    return _plain_parts(digits, point)


def to_integer(number: CanonicalNumber, max_plain_digits: int = MAX_PLAIN_DIGITS) -> int:
    """
    Целое значение CanonicalNumber.

    Raises:
        ValueError: Если число не целое
        ArithmeticOverflow: Если развёртывание или конверсия превышают лимиты
    """
    if not number.is_integer:
        raise ValueError(f"{render(number)} is not an integer")
    integer_digits, _ = plain_parts(number, max_plain_digits)
    value = _to_int(integer_digits)
    return -value if number.negative else value


def render(
    number: CanonicalNumber,
    exponential: bool | None = None,
    max_plain_digits: int = MAX_PLAIN_DIGITS,
) -> str:
    """
    Строковое представление CanonicalNumber.

    Args:
        number: Каноническое число
        exponential: None — каноническая форма; True — d.dddE±x; False — plain
        max_plain_digits: Лимит нулей при развёртывании в plain форму

    Returns:
        Строка числа

    Raises:
        ArithmeticOverflow: Если plain развёртывание превышает max_plain_digits
            или exponent превышает лимит конверсии int → str
    """
    if number.is_zero:
        return "0"

    sign = "-" if number.negative else ""
    if exponential is None:
        exponential = number.is_exponential

    if exponential:
        digits, point = number.significand()
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exponent = point - 1
        try:
            exponent_text = str(abs(exponent))
        except ValueError as e:
            raise ArithmeticOverflow(f"Exponent of {exponent.bit_length()} bits cannot be rendered: {e}") from e
        return f"{sign}{mantissa}E{'+' if exponent >= 0 else '-'}{exponent_text}"

    integer_digits, fractional_digits = plain_parts(number, max_plain_digits)
    return sign + integer_digits + ("." + fractional_digits if fractional_digits else "")


def normalize_number_string(raw: NumberLike, threshold: int = HIGH_PRECISION_THRESHOLD) -> str:
    """
    Нормализация числовой строки с возвратом канонической записи.

    Raises:
        InvalidNumberFormat: Если строка не является числом

    Examples:
        >>> normalize_number_string("+0012.3400")
        '12.34'
        >>> normalize_number_string("-0.0")
        '0'
    """
    return render(normalize(raw, threshold))
