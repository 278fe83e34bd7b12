"""
Core math modules для civiltime

Высокоточная decimal-арифметика и целочисленное деление с усечением.
"""

# Precision (high-precision seconds interface)
from civiltime.core.math.precision import (
    DECIMAL_CONTEXT_PRECISION,
    DEFAULT_PRECISION_CONFIG,
    MAX_FRACTION_DIGITS,
    DecimalLike,
    PrecisionConfig,
    add,
    divide,
    floor,
    fraction,
    from_parts,
    round_int,
    round_to,
    scale,
    subtract,
    to_decimal,
    to_fixed,
    to_fixed_trimmed,
    trunc,
)

# Integer Division (truncating)
from civiltime.core.math.integer_division import tdiv, tmod

__all__ = [
    # Precision — Constants
    "DECIMAL_CONTEXT_PRECISION",
    "DEFAULT_PRECISION_CONFIG",
    "MAX_FRACTION_DIGITS",
    # Precision — Types
    "DecimalLike",
    "PrecisionConfig",
    # Precision — Functions
    "add",
    "divide",
    "floor",
    "fraction",
    "from_parts",
    "round_int",
    "round_to",
    "scale",
    "subtract",
    "to_decimal",
    "to_fixed",
    "to_fixed_trimmed",
    "trunc",
    # Integer Division
    "tdiv",
    "tmod",
]
