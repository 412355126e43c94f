"""
Storage Codec — Сериализация в reference 18-decimal формате

Сериализованная форма всегда вычисляется так, как будто значение
масштабировано до 18 знаков, независимо от собственной точности D.
Поэтому Decimal6, Decimal9, Decimal18 и внешний 18-decimal reference-тип
дают байт-в-байт одинаковые строки для равных значений.

Формат (JSON string scalar):
    "0", "1.5", "123.456789012345678"
    - целая часть без ведущих нулей
    - хвостовые нули дробной части отброшены
    - без дробной части, если она нулевая

Десериализация принимает дробную часть любой длины:
    len ≤ D → масштабирование вверх до D знаков
    len > D → масштабирование вниз (усечение) до D знаков
"""

import json
import logging
from typing import Any

from fixed_decimal.core.codec.text import (
    DIGITS_RE,
    parse_integer_part,
    parse_uint,
    split_atomics,
    trim_fraction,
)
from fixed_decimal.core.constants import REFERENCE_DECIMAL_PLACES
from fixed_decimal.core.errors import DecimalOverflowError, DecimalParseError
from fixed_decimal.core.math.uint import checked_add, checked_mul, pow10

logger = logging.getLogger(__name__)


def rescale_fraction_to_18(fraction: int, places: int) -> int:
    """
    Пересчёт D-scaled дробной части в 18-scaled.

    D < 18: умножение на 10^(18-D); D > 18: деление с усечением.
    """
    if places >= REFERENCE_DECIMAL_PLACES:
        return fraction // pow10(places - REFERENCE_DECIMAL_PLACES)
    return fraction * pow10(REFERENCE_DECIMAL_PLACES - places)


def serialize_decimal(atomics: int, places: int) -> str:
    """
    Storage-строка для D-decimal atomics.

    Args:
        atomics: Значение в D-decimal atomics
        places: Число знаков D

    Returns:
        Каноническая строка в reference 18-decimal формате

    Examples:
        >>> serialize_decimal(1_500_000, 6)
        '1.5'
        >>> serialize_decimal(0, 6)
        '0'
    """
    integer, fraction = split_atomics(atomics, places)
    if fraction == 0:
        return str(integer)

    fraction_18 = rescale_fraction_to_18(fraction, places)
    trimmed = trim_fraction(fraction_18, REFERENCE_DECIMAL_PLACES)

    # D > 18: все значащие цифры могли оказаться за 18-м знаком
    if not trimmed:
        return str(integer)

    return f"{integer}.{trimmed}"


def deserialize_decimal(text: str, places: int) -> int:
    """
    D-decimal atomics из storage-строки.

    Args:
        text: Строка вида "123", "1.5" или "1.500000000000000000"
        places: Число знаков D

    Returns:
        atomics в пределах U128_MAX

    Raises:
        DecimalParseError: Некорректный формат, не-цифры или переполнение
            при сборке целой и дробной частей

    Examples:
        >>> deserialize_decimal("1.500000000000000000", 6)
        1500000
        >>> deserialize_decimal("1.123456789012345678", 6)
        1123456
    """
    if not isinstance(text, str):
        raise DecimalParseError(f"Invalid decimal format: {text!r}")

    parts = text.split(".")

    if len(parts) == 1:
        integer = _parse_storage_integer(parts[0])
        return _combine(integer, 0, places)

    if len(parts) == 2:
        integer = _parse_storage_integer(parts[0])
        fractional_str = parts[1]
        fractional_value = _parse_storage_fraction(fractional_str, places)

        if len(fractional_str) > places and fractional_str[places:].strip("0"):
            logger.debug(
                "Truncated stored decimal from %d to %d decimal places",
                len(fractional_str),
                places,
            )

        return _combine(integer, fractional_value, places)

    raise DecimalParseError(f"Invalid decimal format: {text}")


def _parse_storage_integer(segment: str) -> int:
    try:
        return parse_integer_part(segment)
    except DecimalParseError:
        raise DecimalParseError(f"Invalid integer part: {segment}") from None


def _parse_storage_fraction(segment: str, places: int) -> int:
    # Дробная часть любой длины; в int() попадают только первые D цифр
    if DIGITS_RE.fullmatch(segment) is None:
        raise DecimalParseError(f"Invalid fractional part: {segment}")

    kept = segment[:places]
    if not kept:
        return 0
    return parse_uint(kept, "fractional part") * pow10(places - len(kept))


def _combine(integer: int, fractional_value: int, places: int) -> int:
    try:
        return checked_add(checked_mul(integer, pow10(places)), fractional_value)
    except DecimalOverflowError:
        raise DecimalParseError("Overflow in decimal value") from None


# =============================================================================
# JSON SCALAR
# =============================================================================


def dumps_decimal(atomics: int, places: int) -> str:
    """JSON-документ (string scalar) для D-decimal atomics"""
    return json.dumps(serialize_decimal(atomics, places))


def loads_decimal(payload: str, places: int) -> int:
    """
    D-decimal atomics из JSON-документа.

    Raises:
        DecimalParseError: Если payload не JSON или не string scalar
    """
    try:
        value: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        raise DecimalParseError(f"Invalid JSON: {e.msg}") from None

    if not isinstance(value, str):
        raise DecimalParseError("expected a string representing a decimal number")

    return deserialize_decimal(value, places)
