"""
Phrase Encoder — число → английская фраза

Алгоритм:
1. Нормализация входа (Normalizer) с порогом config.high_precision_threshold
2. Целая часть режется на группы по 3 цифры справа; каждая ненулевая группа
   произносится как small number + имя разряда ("thousand", "million", ...)
3. Дробная часть:
   - SIMPLE: "point" + цифра за цифрой
   - FANCY: "and" + группы по 3 цифры от точки с дробными единицами
     ("tenths", "hundredths", "thousandths", "millionths", ...)
   - DEFAULT: FANCY для дробей с доминирующими нулями, иначе SIMPLE
4. Числа в экспоненциальной форме (или не разворачиваемые в plain)
   произносятся как "<mantissa> times ten to the <exponent>"

Кодирование детерминировано: один вход → одна фраза.
"""

import logging

from spoken_number.codec.config import CodecConfig
from spoken_number.core.domain.canonical_number import Chunk, FractionMode
from spoken_number.core.domain.errors import ArithmeticOverflow, InvalidNumberFormat
from spoken_number.core.domain.vocabulary import (
    AND,
    EXPONENTIATED,
    FRACTIONAL_SUFFIX,
    HUNDRED,
    HUNDREDTH,
    NEGATIVE,
    PLURAL,
    POINT,
    TENTH,
    THOUSANDTH,
    ZERO,
    NameSet,
    word,
)
from spoken_number.core.math.latin_power import chunk_power_name, latin_power_name
from spoken_number.core.math.normalizer import (
    NumberLike,
    from_significand,
    normalize,
    plain_parts,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SMALL NUMBERS & CHUNKS
# =============================================================================


def small_number_name(value: int) -> str:
    """
    Имя числа 0..999.

    Raises:
        ValueError: Если value вне 0..999

    Examples:
        >>> small_number_name(115)
        'one hundred fifteen'
        >>> small_number_name(40)
        'forty'
    """
    if not 0 <= value <= 999:
        raise ValueError(f"small number must be in 0..999, got {value}")
    if value == 0:
        return ZERO

    hundreds, rest = divmod(value, 100)
    tens, ones = divmod(rest, 10)

    parts: list[str] = []
    if hundreds:
        parts += [word(NameSet.DIGITS, hundreds), HUNDRED]
    if tens == 1:
        parts.append(word(NameSet.TEENS, ones))
    else:
        if tens:
            parts.append(word(NameSet.TENS, tens))
        if ones:
            parts.append(word(NameSet.DIGITS, ones))
    return " ".join(parts)


def split_chunks(integer_digits: str) -> list[Chunk]:
    """
    Ненулевые группы по 3 цифры целой части, от старшей к младшей.

    Examples:
        "1002003" → [Chunk(1, 2), Chunk(2, 1), Chunk(3, 0)]
    """
    chunks: list[Chunk] = []
    end = len(integer_digits)
    latin_power = 0
    while end > 0:
        value = int(integer_digits[max(end - 3, 0):end])
        if value:
            chunks.append(Chunk(value=value, latin_power=latin_power))
        end -= 3
        latin_power += 1
    chunks.reverse()
    return chunks


def fractional_unit(value: int, latin_power: int) -> tuple[int, str]:
    """
    Значение и имя дробной единицы для группы value при 10^(-3 * latin_power).

    Группа первых трёх цифр после точки сокращается до десятых/сотых,
    если оканчивается нулями (500 → 5 tenths, 140 → 14 hundredths).
    """
    if latin_power == 1:
        if value % 100 == 0:
            return value // 100, TENTH
        if value % 10 == 0:
            return value // 10, HUNDREDTH
        return value, THOUSANDTH
    return value, latin_power_name(latin_power - 1) + FRACTIONAL_SUFFIX


# =============================================================================
# ENCODER
# =============================================================================


class PhraseEncoder:
    """Кодирование чисел в английские фразы."""

    def __init__(self, config: CodecConfig | None = None):
        self.config = config or CodecConfig()

    def encode(self, number: NumberLike, fraction_mode: FractionMode = FractionMode.DEFAULT) -> str:
        """
        Фраза для числа.

        Args:
            number: Число (строка, int, Decimal или CanonicalNumber)
            fraction_mode: Режим произношения дробной части

        Returns:
            Фраза ("negative one thousand two point five")

        Raises:
            InvalidNumberFormat: Если строка не является числом
        """
        fraction_mode = FractionMode(fraction_mode)
        canonical = normalize(number, self.config.high_precision_threshold)

        if canonical.is_zero:
            return ZERO
        if canonical.is_exponential:
            logger.debug("Exponential form for %s, phrasing with exponent", canonical.exponent)
            return self.encode_exponential(canonical)

        try:
            integer_digits, fractional_digits = plain_parts(canonical, self.config.max_plain_digits)
        except ArithmeticOverflow as e:
            logger.debug("Plain expansion overflow, falling back to exponential phrase: %s", e)
            return self.encode_exponential(canonical)

        words: list[str] = [NEGATIVE] if canonical.negative else []
        integer_words = self._integer_words(integer_digits)
        words += integer_words
        if fractional_digits:
            words += self._fractional_words(fractional_digits, fraction_mode, bool(integer_words))
        return " ".join(words)

    def encode_exponential(self, number: NumberLike) -> str:
        """
        Экспоненциальная фраза: "<mantissa> times ten to the <exponent>".

        Мантисса произносится в SIMPLE режиме, exponent как целое без
        экспоненциального повышения.

        Raises:
            InvalidNumberFormat: Если строка не является числом
        """
        canonical = normalize(number, self.config.high_precision_threshold)
        if canonical.is_zero:
            return f"{ZERO} {EXPONENTIATED} {ZERO}"

        digits, point = canonical.significand()
        mantissa = from_significand(
            canonical.negative, digits, 1, self.config.high_precision_threshold
        )
        mantissa_phrase = self.encode(mantissa, FractionMode.SIMPLE)
        return f"{mantissa_phrase} {EXPONENTIATED} {self._integer_phrase(point - 1)}"

    def _integer_phrase(self, value: int) -> str:
        """Целое без экспоненциального повышения (для exponent)."""
        if value == 0:
            return ZERO
        words = [NEGATIVE] if value < 0 else []
        try:
            digits = str(abs(value))
        except ValueError as e:
            raise InvalidNumberFormat(f"Exponent is too large to phrase: {e}") from e
        return " ".join(words + self._integer_words(digits))

    def _integer_words(self, integer_digits: str) -> list[str]:
        words: list[str] = []
        for chunk in split_chunks(integer_digits):
            words.append(small_number_name(chunk.value))
            power_name = chunk_power_name(chunk.latin_power)
            if power_name:
                words.append(power_name)
        return words

    def _is_zero_heavy(self, fractional_digits: str) -> bool:
        """Дробь с доминирующими нулями читается именованными единицами."""
        zero_run = self.config.zero_run_threshold
        leading = len(fractional_digits) - len(fractional_digits.lstrip("0"))
        significant = len(fractional_digits) - leading
        return leading >= min(significant, zero_run) or "0" * zero_run in fractional_digits

    def _fractional_words(
        self,
        fractional_digits: str,
        fraction_mode: FractionMode,
        has_integer: bool,
    ) -> list[str]:
        fancy = fraction_mode == FractionMode.FANCY or (
            fraction_mode == FractionMode.DEFAULT and self._is_zero_heavy(fractional_digits)
        )
        if not fancy:
            return [POINT] + [word(NameSet.DIGITS, int(d)) for d in fractional_digits]

        words: list[str] = [AND] if has_integer else []
        for start in range(0, len(fractional_digits), 3):
            value = int(fractional_digits[start:start + 3].ljust(3, "0"))
            if not value:
                continue
            named, unit = fractional_unit(value, start // 3 + 1)
            words.append(small_number_name(named))
            words.append(unit + PLURAL if named > 1 else unit)
        return words


# =============================================================================
# MODULE API
# =============================================================================


def number_to_phrase(
    number: NumberLike,
    fraction_mode: FractionMode = FractionMode.DEFAULT,
    config: CodecConfig | None = None,
) -> str:
    """
    Английская фраза для числа.

    Examples:
        >>> number_to_phrase("1234.5")
        'one thousand two hundred thirty four point five'
        >>> number_to_phrase("1.5", FractionMode.FANCY)
        'one and five tenths'
    """
    return PhraseEncoder(config).encode(number, fraction_mode)


def number_to_exponential_phrase(number: NumberLike, config: CodecConfig | None = None) -> str:
    """
    Экспоненциальная фраза для числа.

    Examples:
        >>> number_to_exponential_phrase("1500")
        'one point five times ten to the three'
    """
    return PhraseEncoder(config).encode_exponential(number)
