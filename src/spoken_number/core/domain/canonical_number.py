"""
CanonicalNumber — нормализованное представление десятичного числа

Immutable Pydantic модель (sign, integer digits, fractional digits, exponent).
Создаётся заново на каждый вызов, не разделяется между вызовами.

ИНВАРИАНТЫ:
1. Ноль представлен единственным образом: ("0", "", exponent=0, negative=False)
2. integer_digits без ведущих нулей ("0" если целая часть пуста)
3. fractional_digits без хвостовых нулей
4. exponent != 0 → integer_digits ровно одна ненулевая цифра
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class FractionMode(str, Enum):
    """Режим произношения дробной части."""

    DEFAULT = "DEFAULT"  # point ... или and ... в зависимости от нулей
    SIMPLE = "SIMPLE"  # всегда цифра за цифрой: "point one four"
    FANCY = "FANCY"  # всегда именованные единицы: "and fourteen hundredths"


# =============================================================================
# CHUNK
# =============================================================================


@dataclass(frozen=True)
class Chunk:
    """Группа до трёх цифр и её latin power (10^(3 * latin_power))."""

    value: int
    latin_power: int


# =============================================================================
# CANONICAL NUMBER
# =============================================================================


class CanonicalNumber(BaseModel):
    """
    Каноническое число.

    Plain форма: exponent == 0, значение = integer_digits.fractional_digits.
    Экспоненциальная форма: значение = d.fractional_digits × 10^exponent.
    """

    negative: bool = Field(False, description="Знак числа")
    integer_digits: str = Field("0", pattern=r"^[0-9]+$", description="Цифры целой части")
    fractional_digits: str = Field("", pattern=r"^[0-9]*$", description="Цифры дробной части")
    exponent: int = Field(0, description="Сдвиг степени десяти (0 для plain формы)")

    model_config = {"frozen": True}

    @field_validator("integer_digits")
    @classmethod
    def validate_integer_digits(cls, v: str) -> str:
        """Без ведущих нулей (кроме самого "0")."""
        if len(v) > 1 and v.startswith("0"):
            raise ValueError(f"integer_digits has leading zeros: {v!r}")
        return v

    @field_validator("fractional_digits")
    @classmethod
    def validate_fractional_digits(cls, v: str) -> str:
        """Без хвостовых нулей."""
        if v.endswith("0"):
            raise ValueError(f"fractional_digits has trailing zeros: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "CanonicalNumber":
        if self.integer_digits == "0" and not self.fractional_digits:
            if self.negative:
                raise ValueError("zero cannot be negative")
            if self.exponent != 0:
                raise ValueError("zero cannot carry an exponent")
        if self.exponent != 0 and (
            len(self.integer_digits) != 1 or self.integer_digits == "0"
        ):
            raise ValueError(
                f"exponential form needs one nonzero leading digit, got {self.integer_digits!r}"
            )
        return self

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == "0" and not self.fractional_digits

    @property
    def is_exponential(self) -> bool:
        return self.exponent != 0

    @property
    def is_integer(self) -> bool:
        """Целое ли значение (для экспоненциальной формы учитывается exponent)."""
        if self.exponent == 0:
            return not self.fractional_digits
        return len(self.fractional_digits) <= self.exponent

    def significand(self) -> tuple[str, int]:
        """
        Значащие цифры и позиция десятичной точки.

        Значение = 0.<digits> × 10^point (со знаком). Для нуля ("", 0).

        Examples:
            1234.5 → ("12345", 4)
            0.05   → ("5", -1)
            5E+70  → ("5", 71)
        """
        if self.is_zero:
            return "", 0
        if self.exponent != 0:
            return self.integer_digits + self.fractional_digits, self.exponent + 1
        if self.integer_digits != "0":
            digits = (self.integer_digits + self.fractional_digits).rstrip("0")
            return digits, len(self.integer_digits)
        zeros = len(self.fractional_digits) - len(self.fractional_digits.lstrip("0"))
        return self.fractional_digits[zeros:], -zeros
