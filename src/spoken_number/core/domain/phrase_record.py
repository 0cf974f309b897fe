"""
PhraseRecord — сериализуемая пара "число ⇄ фраза"

Immutable Pydantic модель для выдачи результата кодирования/разбора
(CLI --json) и проверки по контракту phrase_record.json.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from spoken_number.core.domain.canonical_number import FractionMode

# Каноническая запись: 0, -12.5, 0.05, 1.5E+70, -2E-80
NUMBER_PATTERN: Final[str] = (
    r"^(0|-?([1-9][0-9]*(\.[0-9]*[1-9])?|0\.[0-9]*[1-9])|-?[1-9](\.[0-9]*[1-9])?E[+-][0-9]+)$"
)


class PhraseRecord(BaseModel):
    """
    Результат кодека.

    number — каноническая запись числа (plain или d.dddE±x),
    phrase — английская фраза.
    """

    number: str = Field(
        ...,
        pattern=NUMBER_PATTERN,
        description="Каноническая запись числа",
    )
    phrase: str = Field(..., min_length=1, description="Английская фраза")
    fraction_mode: FractionMode = Field(FractionMode.DEFAULT, description="Режим дробной части")
    exponential: bool = Field(False, description="Фраза в экспоненциальной форме")

    model_config = {"frozen": True}

    @field_validator("phrase")
    @classmethod
    def validate_phrase(cls, v: str) -> str:
        """Фраза в нижнем регистре без лишних пробелов."""
        normalized = " ".join(v.split())
        if normalized != v or v != v.lower():
            raise ValueError(f"phrase must be lower case and single spaced: {v!r}")
        return v
