"""
Domain models and value objects.

Contains the token vocabulary, CanonicalNumber, PhraseRecord and error kinds.
"""

from spoken_number.core.domain.canonical_number import CanonicalNumber, Chunk, FractionMode
from spoken_number.core.domain.errors import (
    ArithmeticOverflow,
    InvalidLatinPowerName,
    InvalidNumberFormat,
    InvalidNumberPhrase,
    NumberCodecError,
)
from spoken_number.core.domain.phrase_record import PhraseRecord
from spoken_number.core.domain.vocabulary import (
    NUMBER_NAMES,
    Modifier,
    NameSet,
    Suffix,
    contains,
    index_of,
    modifier,
    suffix,
    word,
    words,
)

__all__ = [
    # Errors
    "NumberCodecError",
    "InvalidNumberFormat",
    "InvalidNumberPhrase",
    "InvalidLatinPowerName",
    "ArithmeticOverflow",
    # Vocabulary
    "NUMBER_NAMES",
    "NameSet",
    "Suffix",
    "Modifier",
    "words",
    "word",
    "index_of",
    "contains",
    "modifier",
    "suffix",
    # Canonical number model
    "CanonicalNumber",
    "Chunk",
    "FractionMode",
    # Phrase record model
    "PhraseRecord",
]
