"""Phrase codec — кодирование чисел в английские фразы и разбор фраз обратно.

- PhraseEncoder: число → фраза (plain, FANCY дроби, экспоненциальная форма)
- PhraseDecoder: фраза → CanonicalNumber с явным ChunkState автоматом
"""

from spoken_number.codec.chunk_state import ChunkAccumulator, ChunkState, ChunkToken, ChunkTransitionResult
from spoken_number.codec.config import CodecConfig
from spoken_number.codec.decoder import PhraseDecoder, PhraseToken, phrase_to_number, tokenize
from spoken_number.codec.encoder import (
    PhraseEncoder,
    number_to_exponential_phrase,
    number_to_phrase,
    small_number_name,
    split_chunks,
)

__all__ = [
    "CodecConfig",
    "PhraseEncoder",
    "PhraseDecoder",
    "PhraseToken",
    "ChunkAccumulator",
    "ChunkState",
    "ChunkToken",
    "ChunkTransitionResult",
    "number_to_phrase",
    "number_to_exponential_phrase",
    "small_number_name",
    "split_chunks",
    "phrase_to_number",
    "tokenize",
]
