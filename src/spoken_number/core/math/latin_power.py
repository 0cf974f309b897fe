"""
Latin Power Namer — имена порядков "-illion"

Двунаправленное отображение между индексом n >= 1 (10^(3n+3)) и его именем:
    1 → million, 2 → billion, ..., 9 → nonillion, 10 → decillion,
    11 → undecillion, 20 → vigintillion, 100 → centillion,
    1000 → milliatillion, 2000 → duomilliatillion

Имя строится итеративно по триплетам base-1000 (от младшего к старшему):
- каждый триплет даёт префиксы hundreds, ones, tens (в этом порядке)
- группа i >= 1 сопровождается i разделителями "millia" (если триплет ненулевой)
- старший триплет, равный 1, записывается одними разделителями
- младший триплет выбирает окончание: tens == 1 → "illion", иначе "tillion"
- n <= 9 — зарезервированные основы (mi, bi, ... noni) + "llion"

Рекурсия не используется: глубина стека O(1) для любых индексов.
"""

from typing import Final

from spoken_number.core.domain.errors import InvalidLatinPowerName
from spoken_number.core.domain.vocabulary import (
    LATIN_PREFIX_TOKENS,
    MILLIA,
    SUFFIX_TOKENS,
    THOUSAND,
    NameSet,
    Suffix,
    index_of,
    suffix,
    words,
)

# Последний индекс с зарезервированной основой (nonillion)
LATIN_SPECIAL_MAX: Final[int] = 9

_HUNDREDS = words(NameSet.LATIN_HUNDREDS_PREFIXES)
_TENS = words(NameSet.LATIN_TENS_PREFIXES)
_ONES = words(NameSet.LATIN_ONES_PREFIXES)
_SPECIAL = words(NameSet.LATIN_SPECIAL)

# Порядок категорий внутри триплета
_RANK_HUNDREDS: Final[int] = 0
_RANK_ONES: Final[int] = 1
_RANK_TENS: Final[int] = 2


# =============================================================================
# ENCODE
# =============================================================================


def latin_power_name(power: int, dashes: bool = False) -> str:
    """
    Имя порядка по индексу "-illion".

    Args:
        power: Индекс n >= 0 (0 → пустая строка)
        dashes: Разделять части имени дефисами ("un-dec-illion")

    Returns:
        Имя порядка

    Raises:
        ValueError: Если power отрицательный

    Examples:
        >>> latin_power_name(1)
        'million'
        >>> latin_power_name(10)
        'decillion'
        >>> latin_power_name(102)
        'cenduotillion'
    """
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    if power == 0:
        return ""

    if power <= LATIN_SPECIAL_MAX:
        parts = [_SPECIAL[power], suffix(Suffix.SPECIAL)]
    else:
        segments: list[list[str]] = []
        remaining = power
        group = 0
        while remaining > 0:
            triple = remaining % 1000
            remaining //= 1000
            hundreds, tens, ones = triple // 100, (triple // 10) % 10, triple % 10

            if group == 0:
                tail = suffix(Suffix.SMALL if tens == 1 else Suffix.STANDARD)
                segments.append([_HUNDREDS[hundreds], _ONES[ones], _TENS[tens], tail])
            elif triple == 1 and remaining == 0:
                segments.append([MILLIA] * group)
            elif triple > 0:
                segments.append([_HUNDREDS[hundreds], _ONES[ones], _TENS[tens]] + [MILLIA] * group)
            group += 1

        parts = [part for segment in reversed(segments) for part in segment]

    return ("-" if dashes else "").join(part for part in parts if part)


def chunk_power_name(latin_power: int, dashes: bool = False) -> str:
    """
    Имя разряда для chunk с latin power k (10^(3k)).

    0 → "", 1 → "thousand", k >= 2 → latin_power_name(k - 1).
    """
    if latin_power < 0:
        raise ValueError(f"latin_power must be non-negative, got {latin_power}")
    if latin_power == 0:
        return ""
    if latin_power == 1:
        return THOUSAND
    return latin_power_name(latin_power - 1, dashes=dashes)



# =============================================================================
# DECODE
# =============================================================================


def _tokenize(body: str) -> list[str] | None:
    """Жадная токенизация по словарю префиксов (длинные токены первыми)."""
    tokens: list[str] = []
    position = 0
    while position < len(body):
        for token in LATIN_PREFIX_TOKENS:
            if body.startswith(token, position):
                tokens.append(token)
                position += len(token)
                break
        else:
            return None
    return tokens


def _replay(tokens: list[str]) -> int | None:
    """
    Восстановление индекса по токенам (слева направо, от старших групп).

    Серии "millia" должны строго убывать; внутри триплета порядок
    hundreds → ones → tens, каждая категория не более одного раза.
    """
    if len(tokens) == 1 and index_of(NameSet.LATIN_SPECIAL, tokens[0]) is not None:
        return index_of(NameSet.LATIN_SPECIAL, tokens[0])

    total = 0
    triple = 0
    last_rank = -1
    last_run: int | None = None
    position = 0

    while position < len(tokens):
        token = tokens[position]

        if token == MILLIA:
            run = 0
            while position < len(tokens) and tokens[position] == MILLIA:
                run += 1
                position += 1
            if last_run is not None and run >= last_run:
                return None
            last_run = run
            total += (triple or 1) * 1000 ** run
            triple = 0
            last_rank = -1
            continue

        hundreds = index_of(NameSet.LATIN_HUNDREDS_PREFIXES, token)
        ones = index_of(NameSet.LATIN_ONES_PREFIXES, token)
        tens = index_of(NameSet.LATIN_TENS_PREFIXES, token)
        if hundreds is not None:
            rank, value = _RANK_HUNDREDS, hundreds * 100
        elif ones is not None:
            rank, value = _RANK_ONES, ones
        elif tens is not None:
            rank, value = _RANK_TENS, tens * 10
        else:
            # Зарезервированная основа вне одиночного имени
            return None

        if rank <= last_rank:
            return None
        last_rank = rank
        triple += value
        position += 1

    return total + triple


def latin_power_name_to_latin_power(name: str) -> int:
    """
    Индекс "-illion" по имени порядка.

    Регистр, пробелы и дефисы игнорируются. Имя принимается, только если
    повторное кодирование найденного индекса воспроизводит его полностью.

    Args:
        name: Имя порядка ("million", "un-dec-illion", "Vigintillion")

    Returns:
        Индекс n >= 1

    Raises:
        InvalidLatinPowerName: Если имя не соответствует грамматике
    """
    cleaned = "".join(name.lower().replace("-", "").split())

    for tail in SUFFIX_TOKENS:
        if not cleaned.endswith(tail):
            continue
        tokens = _tokenize(cleaned[: -len(tail)])
        if tokens is None:
            continue
        power = _replay(tokens)
        if power is not None and power >= 1 and latin_power_name(power) == cleaned:
            return power

    raise InvalidLatinPowerName(
        f"The string: {name!r} does not represent a valid latin power name"
    )


def is_latin_power_name(name: str) -> bool:
    try:
        latin_power_name_to_latin_power(name)
    except InvalidLatinPowerName:
        return False
    return True
