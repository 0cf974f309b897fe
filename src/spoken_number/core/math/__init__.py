"""
Core math modules для spoken-number

Нормализация чисел, имена порядков "-illion" и порядок величины.
"""

# Normalizer
from spoken_number.core.math.normalizer import (
    HIGH_PRECISION_THRESHOLD,
    MAX_PLAIN_DIGITS,
    from_significand,
    magnitude_span,
    normalize,
    normalize_number_string,
    plain_parts,
    render,
    shift,
    to_integer,
)

# Latin power names
from spoken_number.core.math.latin_power import (
    chunk_power_name,
    is_latin_power_name,
    latin_power_name,
    latin_power_name_to_latin_power,
)

# Magnitude
from spoken_number.core.math.magnitude import (
    latin_power,
    ordinal_suffix,
    power_of_ten,
    power_of_ten_name,
    power_of_ten_truncated,
)

__all__ = [
    # Normalizer
    "HIGH_PRECISION_THRESHOLD",
    "MAX_PLAIN_DIGITS",
    "normalize",
    "normalize_number_string",
    "from_significand",
    "magnitude_span",
    "shift",
    "plain_parts",
    "to_integer",
    "render",
    # Latin power names
    "latin_power_name",
    "latin_power_name_to_latin_power",
    "is_latin_power_name",
    "chunk_power_name",
    # Magnitude
    "power_of_ten",
    "power_of_ten_truncated",
    "latin_power",
    "power_of_ten_name",
    "ordinal_suffix",
]
