"""
Phrase Decoder — английская фраза → число

Алгоритм:
1. Нижний регистр, схлопывание пробелов; фраза из одного числового
   литерала нормализуется напрямую
2. Разбиение по модификатору "times ten to the" (не более одного раза)
3. Токенизация по пробелам и дефисам; "oh hundred" / "o hundred" → "hundred";
   целые литералы < 1000 разворачиваются encoder'ом обратно в слова
4. Накопление групп (ChunkAccumulator): слово порядка ("thousand", "million",
   "decillion") или дробная единица ("tenths", "millionths") закрывает
   группу в components[latin_power]
5. Свёртка components в целые 0..999 (переносы вверх, дробные остатки вниз)
6. Сборка цифр от старшей группы к младшей, цифры после "point",
   знак и рекурсивно разобранный exponent

Фраза принимается целиком или отклоняется с InvalidNumberPhrase;
внутренние ошибки (InvalidLatinPowerName, ArithmeticOverflow) сцеплены
через __cause__ и наружу не выходят.
"""

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Final, Mapping

from spoken_number.codec.chunk_state import ChunkAccumulator, ChunkToken
from spoken_number.codec.config import CodecConfig
from spoken_number.codec.encoder import small_number_name
from spoken_number.core.domain.canonical_number import CanonicalNumber
from spoken_number.core.domain.errors import (
    ArithmeticOverflow,
    InvalidLatinPowerName,
    InvalidNumberPhrase,
    NumberCodecError,
)
from spoken_number.core.domain.vocabulary import (
    AND,
    EXPONENTIATED,
    FRACTIONAL_SUFFIX,
    HUNDRED,
    HUNDREDTH,
    NEGATIVE,
    O,
    OH,
    ORDINAL_DIGITS,
    PLURAL,
    POINT,
    TENTH,
    THOUSAND,
    THOUSANDTH,
    ZERO,
    NameSet,
    index_of,
)
from spoken_number.core.math.latin_power import latin_power_name_to_latin_power
from spoken_number.core.math.normalizer import (
    MAX_PLAIN_DIGITS,
    from_significand,
    normalize,
    render,
    shift,
    to_integer,
)

logger = logging.getLogger(__name__)

_EXPONENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\b" + re.escape(EXPONENTIATED) + r"\b")

# Число целиком: 12, -3.5, .25, 1.5e+70
_NUMERIC_PHRASE: Final[re.Pattern[str]] = re.compile(
    r"^[+\-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+\-]?[0-9]+)?$"
)

# Литерал внутри фразы, допускается exponent (1e3) или порядковое окончание (21st, 100th)
_LITERAL_TOKEN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<digits>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:(?P<exponent>e[+\-]?[0-9]+)|(?P<ordinal>st|nd|rd|th))?$"
)
_SIGNED_LITERAL_TOKEN: Final[re.Pattern[str]] = re.compile(
    r"^[+\-](?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+\-]?[0-9]+)?$"
)

# Отделённый пробелом знак в начале фразы: "- 5" → "-5", "- five" → "negative five"
_DETACHED_SIGN: Final[re.Pattern[str]] = re.compile(r"^([+\-]) (?=[0-9.])")
_DETACHED_MINUS: Final[re.Pattern[str]] = re.compile(r"^- ")

# Неправильные дробные единицы первой группы после точки: слово → множитель
_IRREGULAR_UNITS: Final[Mapping[str, int]] = MappingProxyType({
    TENTH: 100,
    HUNDREDTH: 10,
    THOUSANDTH: 1,
})


# =============================================================================
# TOKENIZER
# =============================================================================


@dataclass(frozen=True)
class PhraseToken:
    """Слово фразы; для числового литерала literal содержит его значение."""

    text: str
    literal: Fraction | None = None

    @property
    def is_literal(self) -> bool:
        return self.literal is not None


def _literal_token(text: str) -> PhraseToken:
    match = _LITERAL_TOKEN.match(text)
    try:
        value = Fraction(match.group("digits"))
        exponent = int(match.group("exponent")[1:]) if match.group("exponent") else 0
    except ValueError as e:
        raise InvalidNumberPhrase(f"Numeric literal {text[:16]}... is too long") from e
    if abs(exponent) > MAX_PLAIN_DIGITS:
        raise InvalidNumberPhrase(
            f"Numeric literal {text[:16]}... has an exponent beyond {MAX_PLAIN_DIGITS}"
        )
    return PhraseToken(text=text, literal=value * Fraction(10) ** exponent)


def tokenize(text: str) -> list[PhraseToken]:
    """
    Разбиение фразы на токены по пробелам и дефисам.

    Знак литерала допускается только у первого слова ("-5 million").
    "oh hundred" и "o hundred" заменяются на "hundred".

    Raises:
        InvalidNumberPhrase: Пустой фрагмент между дефисами или знак не в начале
    """
    tokens: list[PhraseToken] = []
    for position, raw in enumerate(text.split()):
        if _SIGNED_LITERAL_TOKEN.match(raw):
            if position != 0:
                raise InvalidNumberPhrase(f"Misplaced sign in {raw!r}")
            if raw.startswith("-"):
                tokens.append(PhraseToken(NEGATIVE))
            tokens.append(_literal_token(raw[1:]))
            continue

        if _LITERAL_TOKEN.match(raw):
            tokens.append(_literal_token(raw))
            continue

        for part in raw.split("-"):
            if not part:
                raise InvalidNumberPhrase(f"Empty fragment in {raw!r}")
            tokens.append(_literal_token(part) if _LITERAL_TOKEN.match(part) else PhraseToken(part))

    return [
        token
        for position, token in enumerate(tokens)
        if not (
            token.text in (OH, O)
            and position + 1 < len(tokens)
            and tokens[position + 1].text == HUNDRED
        )
    ]


def fraction_unit(text: str) -> tuple[int, int] | None:
    """
    Latin power и множитель дробной единицы или None.

    tenth(s) → (-1, 100), hundredth(s) → (-1, 10), thousandth(s) → (-1, 1),
    <illion>th(s) → (-(n + 1), 1).
    """
    base = text[: -len(PLURAL)] if text.endswith(FRACTIONAL_SUFFIX + PLURAL) else text
    if base in _IRREGULAR_UNITS:
        return -1, _IRREGULAR_UNITS[base]
    if not base.endswith(FRACTIONAL_SUFFIX):
        return None
    try:
        return -(latin_power_name_to_latin_power(base[: -len(FRACTIONAL_SUFFIX)]) + 1), 1
    except InvalidLatinPowerName:
        return None


# =============================================================================
# DECODER
# =============================================================================


class PhraseDecoder:
    """Разбор английских числительных в CanonicalNumber."""

    def __init__(self, config: CodecConfig | None = None):
        self.config = config or CodecConfig()

    def decode(self, phrase: str) -> CanonicalNumber:
        """
        Число по фразе.

        Args:
            phrase: Фраза ("one thousand two hundred thirty four point five")

        Returns:
            CanonicalNumber

        Raises:
            InvalidNumberPhrase: Если фраза не является корректным числительным
        """
        try:
            return self._decode(phrase)
        except InvalidNumberPhrase as e:
            logger.debug("Rejected phrase %r: %s", phrase, e)
            raise
        except NumberCodecError as e:
            logger.debug("Rejected phrase %r: %s", phrase, e)
            raise InvalidNumberPhrase(
                f"The string: {phrase!r} is not a valid number phrase: {e}"
            ) from e

    def _decode(self, phrase: str) -> CanonicalNumber:
        text = " ".join(phrase.lower().split())
        if not text:
            raise InvalidNumberPhrase("Empty number phrase")

        text = _DETACHED_SIGN.sub(r"\1", text)
        text = _DETACHED_MINUS.sub(NEGATIVE + " ", text)

        parts = _EXPONENT_PATTERN.split(text)
        if len(parts) > 2:
            raise InvalidNumberPhrase(f"Doubled modifier {EXPONENTIATED!r}")

        mantissa_text = parts[0].strip()
        if not mantissa_text:
            raise InvalidNumberPhrase(f"Empty fragment before {EXPONENTIATED!r}")
        mantissa = self._decode_plain(mantissa_text)
        if len(parts) == 1:
            return mantissa

        exponent_text = parts[1].strip()
        if not exponent_text:
            raise InvalidNumberPhrase(f"Empty fragment after {EXPONENTIATED!r}")
        exponent_number = self._decode_plain(exponent_text)
        if not exponent_number.is_integer:
            raise InvalidNumberPhrase(f"Exponent {render(exponent_number)} is not an integer")

        exponent = to_integer(exponent_number, self.config.max_plain_digits)
        return shift(mantissa, exponent, self.config.high_precision_threshold)

    def _decode_plain(self, text: str) -> CanonicalNumber:
        """Разбор фразы без экспоненциального модификатора."""
        if _NUMERIC_PHRASE.match(text):
            return normalize(text, self.config.high_precision_threshold)

        tokens = tokenize(text)
        negative = bool(tokens) and tokens[0].text == NEGATIVE
        if negative:
            tokens = tokens[1:]
        if any(token.text == NEGATIVE for token in tokens):
            raise InvalidNumberPhrase(f"Misplaced modifier {NEGATIVE!r}")
        if not tokens:
            raise InvalidNumberPhrase(f"Empty fragment after {NEGATIVE!r}")

        and_count = sum(1 for token in tokens if token.text == AND)
        if and_count > 1:
            logger.debug("Dropping %d occurrences of %r", and_count, AND)
            tokens = [token for token in tokens if token.text != AND]
        if all(token.text == AND for token in tokens):
            raise InvalidNumberPhrase(f"No number words in {text!r}")

        points = [position for position, token in enumerate(tokens) if token.text == POINT]
        if len(points) > 1:
            raise InvalidNumberPhrase(f"Doubled modifier {POINT!r}")

        if points:
            integer_tokens, point_tokens = tokens[: points[0]], tokens[points[0] + 1:]
            if not point_tokens:
                raise InvalidNumberPhrase(f"Empty fragment after {POINT!r}")
        else:
            integer_tokens, point_tokens = tokens, []

        point_digits = "".join(self._point_digit(token) for token in point_tokens)
        components = self._accumulate(self._expand_literals(integer_tokens))
        if point_tokens and any(power < 0 for power in components):
            raise InvalidNumberPhrase(f"Fractional units cannot precede {POINT!r}")

        digits, point = self._assemble(components, point_digits)
        return from_significand(negative, digits, point, self.config.high_precision_threshold)

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def _expand_literals(self, tokens: list[PhraseToken]) -> list[PhraseToken]:
        """Целые литералы < 1000 заменяются словами ("21" → "twenty one")."""
        expanded: list[PhraseToken] = []
        for token in tokens:
            if token.is_literal and token.literal.denominator == 1 and token.literal < 1000 \
                    and "." not in token.text:
                words = small_number_name(int(token.literal)).split()
                logger.debug("Splicing literal %r as %s", token.text, words)
                expanded += [PhraseToken(w) for w in words]
            else:
                expanded.append(token)
        return expanded

    @staticmethod
    def _point_digit(token: PhraseToken) -> str:
        """Цифры токена после "point": слово цифры, порядковое слово или литерал."""
        if token.is_literal and token.text.isdigit():
            return token.text
        digit = index_of(NameSet.DIGITS, token.text)
        if digit is None:
            digit = ORDINAL_DIGITS.get(token.text)
        if digit is None:
            raise InvalidNumberPhrase(f"{token.text!r} is not a digit after {POINT!r}")
        return str(digit)

    # -------------------------------------------------------------------------
    # Chunk accumulation
    # -------------------------------------------------------------------------

    def _accumulate(self, tokens: list[PhraseToken]) -> dict[int, Fraction]:
        """
        Накопление групп в components: latin power → значение группы.

        Слова порядка строго убывают; одиночное "and" закрывает группу
        на power 0 и допускает ещё одно закрытие на power 0 после себя.
        """
        components: dict[int, Fraction] = {}
        if len(tokens) == 1 and tokens[0].text == ZERO:
            return components

        accumulator = ChunkAccumulator()
        last_power: int | None = None
        zero_reopened = False

        def close(power: int, multiplier: int = 1) -> None:
            nonlocal last_power, zero_reopened
            if accumulator.is_empty:
                raise InvalidNumberPhrase("Power word without a preceding magnitude")
            reopened = zero_reopened and power == 0 and last_power == 0
            if last_power is not None and power >= last_power and not reopened:
                raise InvalidNumberPhrase("Magnitudes must strictly decrease")
            components[power] = components.get(power, Fraction(0)) + accumulator.close() * multiplier
            last_power = power
            zero_reopened = False

        for token in tokens:
            text = token.text

            if token.is_literal:
                accumulator.transition(ChunkToken.LITERAL, token.literal)
                continue

            if text == AND:
                if not accumulator.is_empty:
                    close(0)
                    zero_reopened = True
                continue

            digit = index_of(NameSet.DIGITS, text)
            if digit is None:
                digit = ORDINAL_DIGITS.get(text)
            if digit is not None:
                if digit == 0:
                    raise InvalidNumberPhrase(f"{text!r} is only valid as the whole number")
                accumulator.transition(ChunkToken.DIGIT, digit)
                continue

            teen = index_of(NameSet.TEENS, text)
            if teen is not None:
                accumulator.transition(ChunkToken.TEEN, 10 + teen)
                continue

            tens = index_of(NameSet.TENS, text)
            if tens is not None:
                accumulator.transition(ChunkToken.TENS, 10 * tens)
                continue

            if text == HUNDRED:
                accumulator.transition(ChunkToken.HUNDRED)
                continue

            unit = fraction_unit(text)
            if unit is not None:
                power, multiplier = unit
                close(power, multiplier)
                continue

            close(self._integer_power(text))

        if not accumulator.is_empty:
            close(0)
        return components

    @staticmethod
    def _integer_power(text: str) -> int:
        """Latin power слова порядка: thousand → 1, million → 2, ..."""
        if text == THOUSAND:
            return 1
        try:
            return latin_power_name_to_latin_power(text) + 1
        except InvalidLatinPowerName as e:
            raise InvalidNumberPhrase(f"Unknown token {text!r}") from e

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    @staticmethod
    def _fold(components: dict[int, Fraction]) -> dict[int, int]:
        """Свёртка components в целые 0..999: дробные остатки вниз, переносы вверх."""
        work = dict(components)

        pending = sorted(work, reverse=True)
        index = 0
        while index < len(pending):
            power = pending[index]
            value = work[power]
            whole = value.numerator // value.denominator
            work[power] = Fraction(whole)
            if value != whole:
                if power - 1 not in work:
                    work[power - 1] = Fraction(0)
                    pending.insert(index + 1, power - 1)
                work[power - 1] += (value - whole) * 1000
            index += 1

        pending = sorted(work)
        index = 0
        while index < len(pending):
            power = pending[index]
            carry, value = divmod(int(work[power]), 1000)
            work[power] = Fraction(value)
            if carry:
                if power + 1 not in work:
                    work[power + 1] = Fraction(0)
                    pending.insert(index + 1, power + 1)
                work[power + 1] += carry
            index += 1

        return {power: int(value) for power, value in work.items() if value}

    def _check_padding(self, zeros: int) -> None:
        if zeros > self.config.max_plain_digits:
            raise ArithmeticOverflow(
                f"Reassembly needs more than {self.config.max_plain_digits} padding zeros"
            )

    def _assemble(self, components: dict[int, Fraction], point_digits: str) -> tuple[str, int]:
        """Значащие цифры и позиция точки: значение = 0.<digits> × 10^point."""
        folded = self._fold(components)
        if not folded:
            return point_digits, 0

        powers = sorted(folded, reverse=True)
        pieces = [str(folded[powers[0]])]
        for higher, lower in zip(powers, powers[1:]):
            gap = higher - lower - 1
            self._check_padding(3 * gap)
            pieces.append("000" * gap + f"{folded[lower]:03d}")
        digits = "".join(pieces)
        lowest = powers[-1]

        if not point_digits:
            return digits, len(digits) + 3 * lowest

        if lowest < 0:
            raise InvalidNumberPhrase(f"Fractional literal cannot precede {POINT!r}")
        self._check_padding(3 * lowest)
        digits += "000" * lowest
        return digits + point_digits, len(digits)


# =============================================================================
# MODULE API
# =============================================================================


def phrase_to_number(phrase: str, config: CodecConfig | None = None) -> str:
    """
    Каноническая запись числа по фразе.

    Raises:
        InvalidNumberPhrase: Если фраза не является корректным числительным

    Examples:
        >>> phrase_to_number("one thousand two hundred thirty four")
        '1234'
        >>> phrase_to_number("negative twenty-one point five")
        '-21.5'
    """
    number = PhraseDecoder(config).decode(phrase)
    try:
        return render(number)
    except ArithmeticOverflow as e:
        raise InvalidNumberPhrase(
            f"The string: {phrase[:32]!r} decodes to an unrenderable number"
        ) from e
