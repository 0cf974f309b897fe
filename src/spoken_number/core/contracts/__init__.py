"""
Contract Validation Module

Валидация сериализованных CanonicalNumber и PhraseRecord по JSON Schema.
"""

from .validators import (
    CanonicalNumberValidator,
    ContractValidator,
    PhraseRecordValidator,
    SchemaLoader,
    validate_canonical_number,
    validate_phrase_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CanonicalNumberValidator",
    "PhraseRecordValidator",
    # Functions
    "validate_canonical_number",
    "validate_phrase_record",
]
