"""
Core math modules для fixed_decimal

Целочисленные примитивы фиксированной ширины и interop с reference-типом.
"""

# Unsigned integer primitives
from fixed_decimal.core.math.uint import (
    checked_add,
    checked_div,
    checked_mul,
    checked_rem,
    checked_sub,
    mul_div_ceil,
    mul_div_floor,
    narrow,
    pow10,
    saturating_add,
    saturating_sub,
    validate_uint,
)

# Reference 18-decimal interop
from fixed_decimal.core.math.reference import (
    REFERENCE_CONTEXT,
    atomics_to_reference,
    from_reference_atomics,
    reference_sqrt,
    reference_to_atomics,
    scale_factor_from_18,
    scale_factor_to_18,
    to_reference_atomics,
)

__all__ = [
    # Unsigned — Validation
    "validate_uint",
    "pow10",
    # Unsigned — Checked
    "checked_add",
    "checked_sub",
    "checked_mul",
    "checked_div",
    "checked_rem",
    "narrow",
    # Unsigned — Saturating
    "saturating_add",
    "saturating_sub",
    # Unsigned — Double-width
    "mul_div_floor",
    "mul_div_ceil",
    # Reference — Constants
    "REFERENCE_CONTEXT",
    # Reference — Functions
    "scale_factor_to_18",
    "scale_factor_from_18",
    "to_reference_atomics",
    "from_reference_atomics",
    "atomics_to_reference",
    "reference_to_atomics",
    "reference_sqrt",
]
