"""
Reference Decimal — Interop с 18-decimal reference-типом

Reference-тип host-платформы хранит значение как Uint128 atomics
с ровно 18 знаками после точки. Модуль содержит:
- пересчёт atomics между точностью D и 18 знаками
- конверсию 18-decimal atomics ↔ decimal.Decimal (точное значение)
- reference-алгоритм квадратного корня

ПРАВИЛА ПЕРЕСЧЁТА:
    D < 18: to_18 = atomics * 10^(18-D)   (может переполнить Uint128)
            from_18 = atomics // 10^(18-D) (усечение)
    D ≥ 18: to_18 = atomics // 10^(D-18)  (усечение)
            from_18 = atomics * 10^(D-18)  (может переполнить Uint128)
"""

import decimal
import logging
import math
from typing import Final, Union

from fixed_decimal.core.constants import (
    REFERENCE_DECIMAL_PLACES,
    REFERENCE_SQRT_MAX_PRECISION,
    U128_MAX,
)
from fixed_decimal.core.errors import ConversionError, RangeExceededError
from fixed_decimal.core.math.uint import checked_mul, pow10

logger = logging.getLogger(__name__)

# Контекст с запасом точности: u256 atomics занимают не более 78 цифр
REFERENCE_CONTEXT: Final[decimal.Context] = decimal.Context(
    prec=100,
    rounding=decimal.ROUND_DOWN,
)

# Значения с большим порядком заведомо не помещаются ни в одну ширину
_MAX_ADJUSTED_EXPONENT: Final[int] = 80

ReferenceInput = Union[decimal.Decimal, int]


# =============================================================================
# ПЕРЕСЧЁТ ATOMICS
# =============================================================================


def scale_factor_to_18(places: int) -> int:
    """Множитель D → 18 знаков (1 для D ≥ 18)"""
    if places >= REFERENCE_DECIMAL_PLACES:
        return 1
    return pow10(REFERENCE_DECIMAL_PLACES - places)


def scale_factor_from_18(places: int) -> int:
    """Делитель 18 → D знаков (1 для D ≥ 18)"""
    if places >= REFERENCE_DECIMAL_PLACES:
        return 1
    return pow10(REFERENCE_DECIMAL_PLACES - places)


def to_reference_atomics(atomics: int, places: int) -> int:
    """
    Пересчёт D-decimal atomics в 18-decimal atomics.

    Raises:
        DecimalOverflowError: Если результат не помещается в Uint128 (D < 18)
    """
    if places >= REFERENCE_DECIMAL_PLACES:
        return atomics // pow10(places - REFERENCE_DECIMAL_PLACES)
    return checked_mul(
        atomics,
        pow10(REFERENCE_DECIMAL_PLACES - places),
        message="reference decimal conversion overflow",
    )


def from_reference_atomics(atomics18: int, places: int) -> int:
    """
    Пересчёт 18-decimal atomics в D-decimal atomics.

    Raises:
        DecimalOverflowError: Если результат не помещается в Uint128 (D > 18)
    """
    if places >= REFERENCE_DECIMAL_PLACES:
        return checked_mul(
            atomics18,
            pow10(places - REFERENCE_DECIMAL_PLACES),
            message="reference decimal conversion overflow",
        )
    return atomics18 // pow10(REFERENCE_DECIMAL_PLACES - places)


# =============================================================================
# decimal.Decimal ↔ 18-DECIMAL ATOMICS
# =============================================================================


def atomics_to_reference(atomics18: int) -> decimal.Decimal:
    """
    Точное decimal.Decimal значение для 18-decimal atomics.

    Examples:
        >>> atomics_to_reference(1_500_000_000_000_000_000)
        Decimal('1.500000000000000000')
    """
    return decimal.Decimal(atomics18).scaleb(-REFERENCE_DECIMAL_PLACES, context=REFERENCE_CONTEXT)


def reference_to_atomics(
    value: ReferenceInput,
    bound: int = U128_MAX,
    type_name: str = "Decimal",
) -> int:
    """
    18-decimal atomics для decimal.Decimal (или int) значения.

    Знаки после 18-го отбрасываются (усечение к нулю).

    Args:
        value: Неотрицательное конечное значение
        bound: Максимум atomics целевого reference-типа
        type_name: Имя reference-типа (для сообщения об ошибке)

    Returns:
        18-decimal atomics в пределах bound

    Raises:
        TypeError: Если value не decimal.Decimal и не int
        ConversionError: Если value NaN/Inf, отрицательное или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, (decimal.Decimal, int)):
        raise TypeError(f"expected decimal.Decimal or int, got {type(value).__name__}")

    value = decimal.Decimal(value)

    if not value.is_finite():
        raise ConversionError(f"{type_name} value must be finite, got {value}")

    if value.is_signed() and not value.is_zero():
        raise ConversionError(f"{type_name} value must be non-negative, got {value}")

    if value.is_zero():
        return 0

    if value.adjusted() + REFERENCE_DECIMAL_PLACES > _MAX_ADJUSTED_EXPONENT:
        raise ConversionError(f"value too large for {type_name}")

    scaled = value.scaleb(REFERENCE_DECIMAL_PLACES, context=REFERENCE_CONTEXT)
    atomics18 = int(scaled.to_integral_value(rounding=decimal.ROUND_DOWN))

    if atomics18 > bound:
        logger.debug("Rejected reference value %s: exceeds %s range", value, type_name)
        raise ConversionError(f"value too large for {type_name}")

    if scaled != atomics18:
        logger.debug("Truncated reference value %s to 18 decimal places", value)

    return atomics18


# =============================================================================
# REFERENCE SQRT
# =============================================================================


def reference_sqrt(atomics18: int) -> int:
    """
    Квадратный корень 18-decimal значения (алгоритм reference-типа).

    Выбирается максимальная точность p ∈ [9..0], при которой
    atomics * 10^(2p) помещается в Uint128:
        result = isqrt(atomics * 10^(2p)) * 10^(9-p)

    Для больших значений часть младших знаков теряется.

    Args:
        atomics18: 18-decimal atomics (u128)

    Returns:
        18-decimal atomics результата (усечение)

    Examples:
        >>> reference_sqrt(4 * 10**18)
        2000000000000000000
    """
    for precision in range(REFERENCE_SQRT_MAX_PRECISION, -1, -1):
        inner = atomics18 * pow10(2 * precision)
        if inner <= U128_MAX:
            outer = pow10(REFERENCE_SQRT_MAX_PRECISION - precision)
            return math.isqrt(inner) * outer

    raise RangeExceededError(f"sqrt input exceeds Uint128 range: {atomics18}")
