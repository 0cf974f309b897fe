"""
Vocabulary — словарь токенов английских числительных

Именованные неизменяемые таблицы вместо позиционного 2-D массива:
категория (NameSet) → упорядоченный кортеж слов. Индекс слова внутри
категории является его числовым значением (digit, tens digit, latin prefix...).

Таблицы инициализируются один раз при импорте и доступны только на чтение,
поэтому безопасно разделяются между потоками без блокировок.

Категории:
- DIGITS, TENS, HUNDREDS, THOUSANDS, TEENS — малые числительные
- LATIN_SPECIAL — зарезервированные основы million ... nonillion
- LATIN_ONES/TENS/HUNDREDS_PREFIXES — латинские префиксы триплета
- LATIN_THOUSANDS_SEPARATORS — разделитель уровней ("millia")
- SUFFIXES — три формы окончания "-illion"
- FRACTIONAL — порядковые суффиксы (th, st, nd, rd)
- RECIPROCAL — основы порядковых слов (fir-st, seco-nd, thi-rd ...)
- MODIFIERS — negative, point, and, oh, o, exponent marker, plural
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# CATEGORIES
# =============================================================================


class NameSet(str, Enum):
    """Категория токенов словаря."""

    DIGITS = "DIGITS"
    TENS = "TENS"
    HUNDREDS = "HUNDREDS"
    THOUSANDS = "THOUSANDS"
    TEENS = "TEENS"
    LATIN_SPECIAL = "LATIN_SPECIAL"
    LATIN_ONES_PREFIXES = "LATIN_ONES_PREFIXES"
    LATIN_TENS_PREFIXES = "LATIN_TENS_PREFIXES"
    LATIN_HUNDREDS_PREFIXES = "LATIN_HUNDREDS_PREFIXES"
    LATIN_THOUSANDS_SEPARATORS = "LATIN_THOUSANDS_SEPARATORS"
    SUFFIXES = "SUFFIXES"
    FRACTIONAL = "FRACTIONAL"
    RECIPROCAL = "RECIPROCAL"
    MODIFIERS = "MODIFIERS"


class Suffix(IntEnum):
    """Формы окончания имени порядка."""

    SPECIAL = 0  # mi-llion ... noni-llion
    SMALL = 1  # dec-illion, undec-illion
    STANDARD = 2  # vigin-tillion, cen-tillion


class Modifier(IntEnum):
    """Модификаторы фразы."""

    NEGATIVE = 0
    POINT = 1
    AND = 2
    OH_HUNDRED = 3
    O_HUNDRED = 4
    EXPONENTIATED = 5
    PLURAL = 6


# =============================================================================
# TABLES
# =============================================================================

NUMBER_NAMES: Final[Mapping[NameSet, tuple[str, ...]]] = MappingProxyType({
    NameSet.DIGITS: (
        "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    ),
    NameSet.TENS: (
        "", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
    ),
    NameSet.HUNDREDS: ("", "hundred"),
    NameSet.THOUSANDS: ("", "thousand"),
    NameSet.TEENS: (
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ),
    NameSet.LATIN_SPECIAL: (
        "", "mi", "bi", "tri", "quadri", "quinti", "sexti", "septi", "octi", "noni",
    ),
    NameSet.LATIN_ONES_PREFIXES: (
        "", "un", "duo", "tre", "quattuor", "quin", "sex", "septen", "octo", "novem",
    ),
    NameSet.LATIN_TENS_PREFIXES: (
        "", "dec", "vigin", "trigin", "quadragin", "quinquagin",
        "sexagin", "septuagin", "octogin", "nonagin",
    ),
    NameSet.LATIN_HUNDREDS_PREFIXES: (
        "", "cen", "duocen", "trecen", "quadringen", "quingen",
        "sescen", "septingen", "octingen", "nongen",
    ),
    NameSet.LATIN_THOUSANDS_SEPARATORS: ("", "millia"),
    NameSet.SUFFIXES: ("llion", "illion", "tillion"),
    NameSet.FRACTIONAL: ("th", "st", "nd", "rd"),
    NameSet.RECIPROCAL: (
        "zero", "fir", "seco", "thi", "four", "fif", "six", "seven", "eigh", "nin",
    ),
    NameSet.MODIFIERS: ("negative", "point", "and", "oh", "o", "times ten to the", "s"),
})

# Обратные таблицы: слово → индекс (пустые слоты пропускаются)
_INDEXES: Final[Mapping[NameSet, Mapping[str, int]]] = MappingProxyType({
    name_set: MappingProxyType({w: i for i, w in enumerate(table) if w})
    for name_set, table in NUMBER_NAMES.items()
})


# =============================================================================
# ACCESSORS
# =============================================================================


def words(name_set: NameSet) -> tuple[str, ...]:
    """Упорядоченные слова категории (с пустыми слотами)."""
    return NUMBER_NAMES[name_set]


def word(name_set: NameSet, index: int) -> str:
    """
    Слово категории по индексу.

    Raises:
        ValueError: Если индекс вне таблицы
    """
    table = NUMBER_NAMES[name_set]
    if not 0 <= index < len(table):
        raise ValueError(f"Index {index} out of range for {name_set.value}")
    return table[index]


def index_of(name_set: NameSet, token: str) -> int | None:
    """Индекс слова в категории или None."""
    return _INDEXES[name_set].get(token)


def contains(name_set: NameSet, token: str) -> bool:
    return token in _INDEXES[name_set]


def modifier(m: Modifier) -> str:
    return NUMBER_NAMES[NameSet.MODIFIERS][m]


def suffix(s: Suffix) -> str:
    return NUMBER_NAMES[NameSet.SUFFIXES][s]


# =============================================================================
# DERIVED CONSTANTS
# =============================================================================

HUNDRED: Final[str] = NUMBER_NAMES[NameSet.HUNDREDS][1]
THOUSAND: Final[str] = NUMBER_NAMES[NameSet.THOUSANDS][1]
MILLIA: Final[str] = NUMBER_NAMES[NameSet.LATIN_THOUSANDS_SEPARATORS][1]
ZERO: Final[str] = NUMBER_NAMES[NameSet.DIGITS][0]

NEGATIVE: Final[str] = modifier(Modifier.NEGATIVE)
POINT: Final[str] = modifier(Modifier.POINT)
AND: Final[str] = modifier(Modifier.AND)
OH: Final[str] = modifier(Modifier.OH_HUNDRED)
O: Final[str] = modifier(Modifier.O_HUNDRED)
EXPONENTIATED: Final[str] = modifier(Modifier.EXPONENTIATED)
PLURAL: Final[str] = modifier(Modifier.PLURAL)

# Суффикс дробной единицы: thousand-th, million-th
FRACTIONAL_SUFFIX: Final[str] = NUMBER_NAMES[NameSet.FRACTIONAL][0]

# Неправильные дробные единицы latin power -1
TENTH: Final[str] = NUMBER_NAMES[NameSet.TENS][1] + FRACTIONAL_SUFFIX
HUNDREDTH: Final[str] = HUNDRED + FRACTIONAL_SUFFIX
THOUSANDTH: Final[str] = THOUSAND + FRACTIONAL_SUFFIX


def ordinal_suffix_for_digit(digit: int) -> str:
    """Порядковый суффикс однозначного числа: 1 → st, 2 → nd, 3 → rd, иначе th."""
    fractional = NUMBER_NAMES[NameSet.FRACTIONAL]
    return fractional[digit] if 1 <= digit <= 3 else fractional[0]


# Порядковые слова цифр: zeroth, first, second, third, fourth ... ninth
ORDINAL_DIGITS: Final[Mapping[str, int]] = MappingProxyType({
    stem + ordinal_suffix_for_digit(i): i
    for i, stem in enumerate(NUMBER_NAMES[NameSet.RECIPROCAL])
})

# Однословные токены, допустимые во фразе (многословный exponent marker разбит)
VALID_TOKENS: Final[frozenset[str]] = frozenset(
    part
    for name_set in (
        NameSet.DIGITS,
        NameSet.TENS,
        NameSet.HUNDREDS,
        NameSet.THOUSANDS,
        NameSet.TEENS,
        NameSet.MODIFIERS,
    )
    for entry in NUMBER_NAMES[name_set]
    for part in entry.split()
    if part
) | frozenset(ORDINAL_DIGITS)

# Токены имени порядка, от длинных к коротким (для жадной токенизации)
LATIN_PREFIX_TOKENS: Final[tuple[str, ...]] = tuple(sorted(
    {
        w
        for name_set in (
            NameSet.LATIN_SPECIAL,
            NameSet.LATIN_ONES_PREFIXES,
            NameSet.LATIN_TENS_PREFIXES,
            NameSet.LATIN_HUNDREDS_PREFIXES,
            NameSet.LATIN_THOUSANDS_SEPARATORS,
        )
        for w in NUMBER_NAMES[name_set]
        if w
    },
    key=lambda w: (-len(w), w),
))

SUFFIX_TOKENS: Final[tuple[str, ...]] = tuple(
    sorted(NUMBER_NAMES[NameSet.SUFFIXES], key=len, reverse=True)
)
