"""
Domain models and value objects.

Contains the fixed-point Decimal value type and its per-precision aliases.
"""

from fixed_decimal.core.domain.decimal import (
    CustomDecimal,
    Decimal,
    Decimal6,
    Decimal9,
    Decimal12,
    Decimal18,
    decimal_type,
)

__all__ = [
    "Decimal",
    "decimal_type",
    # Aliases
    "CustomDecimal",
    "Decimal6",
    "Decimal9",
    "Decimal12",
    "Decimal18",
]
