"""
spoken-number — English numeral phrases for arbitrary-precision decimals.

    >>> number_to_phrase("1234.5")
    'one thousand two hundred thirty four point five'
    >>> phrase_to_number("negative five")
    '-5'
"""

from spoken_number.codec import (
    CodecConfig,
    PhraseDecoder,
    PhraseEncoder,
    number_to_exponential_phrase,
    number_to_phrase,
    phrase_to_number,
    small_number_name,
)
from spoken_number.core.domain import (
    ArithmeticOverflow,
    CanonicalNumber,
    Chunk,
    FractionMode,
    InvalidLatinPowerName,
    InvalidNumberFormat,
    InvalidNumberPhrase,
    NumberCodecError,
    PhraseRecord,
)
from spoken_number.core.math import (
    HIGH_PRECISION_THRESHOLD,
    latin_power,
    latin_power_name,
    latin_power_name_to_latin_power,
    normalize,
    normalize_number_string,
    ordinal_suffix,
    power_of_ten,
    power_of_ten_name,
    power_of_ten_truncated,
    render,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "number_to_phrase",
    "number_to_exponential_phrase",
    "phrase_to_number",
    "small_number_name",
    "PhraseEncoder",
    "PhraseDecoder",
    "CodecConfig",
    # Normalizer
    "HIGH_PRECISION_THRESHOLD",
    "normalize",
    "normalize_number_string",
    "render",
    # Latin power names
    "latin_power_name",
    "latin_power_name_to_latin_power",
    # Magnitude
    "power_of_ten",
    "power_of_ten_truncated",
    "latin_power",
    "power_of_ten_name",
    "ordinal_suffix",
    # Data model
    "CanonicalNumber",
    "Chunk",
    "FractionMode",
    "PhraseRecord",
    # Errors
    "NumberCodecError",
    "InvalidNumberFormat",
    "InvalidNumberPhrase",
    "InvalidLatinPowerName",
    "ArithmeticOverflow",
]
