"""
Text Codec — Display / Parse в десятичной нотации

Формат:
    integer = atomics // 10^D
    remainder = atomics % 10^D
    remainder == 0 → "integer"
    иначе         → "integer.fraction", fraction = remainder, дополненный
                    нулями слева до D цифр, без хвостовых нулей

Парсинг:
    "123"      → 123 * 10^D
    "1.5"      → 1 * 10^D + 5 * 10^(D-1)
    дробная часть длиннее D → DecimalParseError (too many decimal places)
"""

import re
from typing import Final

from fixed_decimal.core.constants import U128_DIGITS, U128_MAX
from fixed_decimal.core.errors import DecimalParseError
from fixed_decimal.core.math.uint import checked_add, checked_mul, pow10

# Только ASCII-цифры: знаки, пробелы и "_" не допускаются
DIGITS_RE: Final[re.Pattern] = re.compile(r"[0-9]+")


def split_atomics(atomics: int, places: int) -> tuple[int, int]:
    """
    Разделение atomics на целую и дробную (D-scaled) части.

    Examples:
        >>> split_atomics(1_500_000, 6)
        (1, 500000)
    """
    return divmod(atomics, pow10(places))


def trim_fraction(fraction: int, width: int) -> str:
    """
    Дробная часть как строка: zero-pad до width, без хвостовых нулей.

    fraction должен быть ненулевым, поэтому результат не пустой.

    Examples:
        >>> trim_fraction(500000, 6)
        '5'
        >>> trim_fraction(123, 6)
        '000123'
    """
    return str(fraction).rjust(width, "0").rstrip("0")


def parse_uint(segment: str, label: str) -> int:
    """
    Разбор беззнакового целого из строки цифр.

    Ведущие нули отбрасываются до int(); значащих цифр не больше
    U128_DIGITS.

    Args:
        segment: Строка для разбора
        label: "integer" или "fractional" (для сообщения об ошибке)

    Raises:
        DecimalParseError: Если segment пустой, содержит не только цифры
            или длиннее U128_DIGITS значащих цифр
    """
    if DIGITS_RE.fullmatch(segment) is None:
        raise DecimalParseError(f"Invalid {label}: {segment}")

    significant = segment.lstrip("0")
    if len(significant) > U128_DIGITS:
        raise DecimalParseError(
            f"Invalid {label}: {len(significant)} significant digits (max {U128_DIGITS})"
        )
    return int(significant or "0")


def format_decimal(atomics: int, places: int) -> str:
    """
    Каноническое текстовое представление D-decimal atomics.

    Examples:
        >>> format_decimal(1_500_000, 6)
        '1.5'
        >>> format_decimal(1_000_000, 6)
        '1'
    """
    integer, fraction = split_atomics(atomics, places)
    if fraction == 0:
        return str(integer)
    return f"{integer}.{trim_fraction(fraction, places)}"


def parse_decimal(text: str, places: int) -> int:
    """
    Разбор текстовой формы в D-decimal atomics.

    Args:
        text: Строка вида "123" или "123.456"
        places: Число знаков D

    Returns:
        atomics в пределах U128_MAX

    Raises:
        DecimalParseError: Некорректный формат, не-цифры, целая часть
            вне Uint128 или больше D знаков после точки
        DecimalOverflowError: integer * 10^D + fraction не помещается в Uint128

    Examples:
        >>> parse_decimal("1.5", 6)
        1500000
        >>> parse_decimal("0.000001", 6)
        1
    """
    if not isinstance(text, str):
        raise DecimalParseError(f"Invalid decimal format: {text!r}")

    parts = text.split(".")

    if len(parts) == 1:
        integer = parse_integer_part(parts[0])
        return checked_mul(integer, pow10(places))

    if len(parts) == 2:
        integer = parse_integer_part(parts[0])
        fractional_str = parts[1]

        if len(fractional_str) > places:
            raise DecimalParseError(
                f"Too many decimal places: {len(fractional_str)} (max {places})"
            )

        fractional = parse_uint(fractional_str, "fractional")
        scaled_fractional = fractional * pow10(places - len(fractional_str))

        return checked_add(checked_mul(integer, pow10(places)), scaled_fractional)

    raise DecimalParseError(f"Invalid decimal format: {text}")


def parse_integer_part(segment: str) -> int:
    """Целая часть: только цифры и не больше Uint128"""
    integer = parse_uint(segment, "integer")
    if integer > U128_MAX:
        raise DecimalParseError(f"Invalid integer: {segment}")
    return integer
