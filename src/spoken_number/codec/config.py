"""CodecConfig — параметры кодека числительных."""

from dataclasses import dataclass

from spoken_number.core.math.normalizer import HIGH_PRECISION_THRESHOLD, MAX_PLAIN_DIGITS


@dataclass(frozen=True)
class CodecConfig:
    """Конфигурация encoder/decoder.

    - high_precision_threshold — число цифр до точки (или нулей после неё),
      после которого число представляется в экспоненциальной форме
    - max_plain_digits — лимит нулей при развёртывании в plain форму;
      при превышении encoder переходит на экспоненциальную фразу
    """

    high_precision_threshold: int = HIGH_PRECISION_THRESHOLD
    max_plain_digits: int = MAX_PLAIN_DIGITS

    def __post_init__(self) -> None:
        if self.high_precision_threshold < 2:
            raise ValueError(
                f"high_precision_threshold must be >= 2, got {self.high_precision_threshold}"
            )
        if self.max_plain_digits < 0:
            raise ValueError(f"max_plain_digits must be >= 0, got {self.max_plain_digits}")

    @property
    def zero_run_threshold(self) -> int:
        """Длина серии нулей, после которой DEFAULT режим читает дробь единицами."""
        return self.high_precision_threshold // 2
