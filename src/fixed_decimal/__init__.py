"""
fixed_decimal — fixed-point decimal с выбираемой точностью

Беззнаковый decimal поверх Uint128 atomics для детерминированных
вычислений без float. Storage-формат совместим с 18-decimal
reference-типом host-платформы.

Пример:
    >>> from fixed_decimal import Decimal6, Decimal9
    >>> price = Decimal6.from_str("1.5")
    >>> price.to_precision(Decimal9).atomics()
    1500000000
"""

import logging

from fixed_decimal.core.constants import (
    CUSTOM_DECIMAL_FRACTIONAL,
    CUSTOM_DECIMALS,
    DEFAULT_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES,
    REFERENCE_DECIMAL_PLACES,
    SCALE_FACTOR,
    U128_MAX,
    U256_MAX,
)
from fixed_decimal.core.domain import (
    CustomDecimal,
    Decimal,
    Decimal6,
    Decimal9,
    Decimal12,
    Decimal18,
    decimal_type,
)
from fixed_decimal.core.errors import (
    ConversionError,
    DecimalError,
    DecimalOverflowError,
    DecimalParseError,
    DecimalUnderflowError,
    DivisionByZeroError,
    HostError,
    PrecisionConversionOverflow,
    RangeExceededError,
    host_error_message,
)
from fixed_decimal.core.math.reference import scale_factor_from_18, scale_factor_to_18

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Types
    "Decimal",
    "decimal_type",
    "CustomDecimal",
    "Decimal6",
    "Decimal9",
    "Decimal12",
    "Decimal18",
    # Constants
    "CUSTOM_DECIMALS",
    "CUSTOM_DECIMAL_FRACTIONAL",
    "SCALE_FACTOR",
    "DEFAULT_DECIMAL_PLACES",
    "MAX_DECIMAL_PLACES",
    "REFERENCE_DECIMAL_PLACES",
    "U128_MAX",
    "U256_MAX",
    # Helpers
    "scale_factor_to_18",
    "scale_factor_from_18",
    # Errors
    "DecimalError",
    "DecimalOverflowError",
    "DecimalUnderflowError",
    "DivisionByZeroError",
    "RangeExceededError",
    "DecimalParseError",
    "ConversionError",
    "PrecisionConversionOverflow",
    "HostError",
    "host_error_message",
]
