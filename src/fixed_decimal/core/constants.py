"""
Constants — Конфигурация fixed-point Decimal

Все параметры модуля являются константами уровня модуля (Final) и
не меняются во время выполнения. Производные константы конкретной
точности (FRACTIONAL, ONE, MAX) вычисляются в фабрике типов.
"""

from typing import Final

# =============================================================================
# ШИРИНА ЦЕЛЫХ ЧИСЕЛ
# =============================================================================

# Максимум для u32 (показатель степени)
U32_MAX: Final[int] = 2**32 - 1

# Максимум для u64 (percent/permille/bps)
U64_MAX: Final[int] = 2**64 - 1

# Максимум нативной ширины atomics (Uint128)
U128_MAX: Final[int] = 2**128 - 1

# Максимум double-width промежуточного результата (Uint256)
U256_MAX: Final[int] = 2**256 - 1

# Число десятичных цифр U128_MAX: любое u128 < 10^39
U128_DIGITS: Final[int] = 39


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================

# Максимальное число знаков: 10^38 < 2^128, поэтому ONE всегда помещается
MAX_DECIMAL_PLACES: Final[int] = 38

# Точность внешнего reference-типа и storage-формата
REFERENCE_DECIMAL_PLACES: Final[int] = 18

# Точность по умолчанию (CustomDecimal)
DEFAULT_DECIMAL_PLACES: Final[int] = 6

# Максимальная внутренняя точность reference sqrt (половина от 18)
REFERENCE_SQRT_MAX_PRECISION: Final[int] = 9


# =============================================================================
# LEGACY-КОНСТАНТЫ (6-decimal CustomDecimal)
# =============================================================================

CUSTOM_DECIMALS: Final[int] = DEFAULT_DECIMAL_PLACES

CUSTOM_DECIMAL_FRACTIONAL: Final[int] = 10**DEFAULT_DECIMAL_PLACES

# Множитель между 6 и 18 знаками: 10^12
SCALE_FACTOR: Final[int] = 10 ** (REFERENCE_DECIMAL_PLACES - DEFAULT_DECIMAL_PLACES)
