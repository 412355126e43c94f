"""
Unsigned Integer Primitives — Checked / Saturating / Double-Width Math

Python int не ограничен по ширине, поэтому ширина Uint128 / Uint256
моделируется явными проверками границ. Все функции детерминированы и
не имеют состояния.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не выходит за [0, bound] молча
2. Переполнение → DecimalOverflowError, отрицательный результат →
   DecimalUnderflowError, деление на ноль → DivisionByZeroError
3. Сужение double-width результата в 128 бит → RangeExceededError
4. Деление всегда усекает к нулю (floor для беззнаковых)
"""

from functools import lru_cache
from typing import Optional

from fixed_decimal.core.constants import U128_MAX, U256_MAX
from fixed_decimal.core.errors import (
    DecimalOverflowError,
    DecimalUnderflowError,
    DivisionByZeroError,
    RangeExceededError,
)

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint(value: int, name: str, bound: int = U128_MAX) -> int:
    """
    Проверка, что значение является беззнаковым целым в пределах ширины.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        bound: Максимально допустимое значение (default: U128_MAX)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        RangeExceededError: Если value < 0 или value > bound
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0 or value > bound:
        raise RangeExceededError(f"{name} must be in [0, {bound}], got {value}")

    return value


@lru_cache(maxsize=128)
def pow10(exp: int) -> int:
    """
    10^exp для неотрицательного exp.

    Examples:
        >>> pow10(0)
        1
        >>> pow10(6)
        1000000
    """
    if exp < 0:
        raise ValueError(f"exp must be non-negative, got {exp}")
    return 10**exp


# =============================================================================
# CHECKED-ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int, bound: int = U128_MAX, message: Optional[str] = None) -> int:
    """
    Сложение с проверкой переполнения.

    Raises:
        DecimalOverflowError: Если a + b > bound
    """
    result = a + b
    if result > bound:
        raise DecimalOverflowError(message)
    return result


def checked_sub(a: int, b: int, message: Optional[str] = None) -> int:
    """
    Вычитание с проверкой отрицательного результата.

    Raises:
        DecimalUnderflowError: Если a < b
    """
    if b > a:
        raise DecimalUnderflowError(message)
    return a - b


def checked_mul(a: int, b: int, bound: int = U128_MAX, message: Optional[str] = None) -> int:
    """
    Умножение с проверкой переполнения.

    Raises:
        DecimalOverflowError: Если a * b > bound
    """
    result = a * b
    if result > bound:
        raise DecimalOverflowError(message)
    return result


def checked_div(a: int, b: int, message: Optional[str] = None) -> int:
    """
    Целочисленное деление с усечением.

    Raises:
        DivisionByZeroError: Если b == 0
    """
    if b == 0:
        raise DivisionByZeroError(message)
    return a // b


def checked_rem(a: int, b: int, message: Optional[str] = None) -> int:
    """
    Остаток от деления.

    Raises:
        DivisionByZeroError: Если b == 0
    """
    if b == 0:
        raise DivisionByZeroError(message)
    return a % b


def narrow(value: int, bound: int = U128_MAX, message: Optional[str] = None) -> int:
    """
    Сужение wide-результата в нативную ширину.

    Raises:
        RangeExceededError: Если value > bound
    """
    if value > bound:
        raise RangeExceededError(message)
    return value


# =============================================================================
# SATURATING-ОПЕРАЦИИ
# =============================================================================


def saturating_add(a: int, b: int, bound: int = U128_MAX) -> int:
    """Сложение с насыщением до bound"""
    return min(a + b, bound)


def saturating_sub(a: int, b: int) -> int:
    """Вычитание с насыщением до нуля"""
    return max(a - b, 0)


# =============================================================================
# DOUBLE-WIDTH MUL/DIV
# =============================================================================


def mul_div_floor(
    a: int,
    b: int,
    denominator: int,
    message: Optional[str] = None,
) -> int:
    """
    floor(a * b / denominator) через 256-битный промежуточный результат.

    Алгоритм:
        wide = widen(a) * widen(b)      (проверка U256_MAX)
        result = wide // denominator    (усечение)
        narrow(result)                  (проверка U128_MAX)

    Args:
        a: Первый множитель (u128)
        b: Второй множитель (u128)
        denominator: Делитель
        message: Сообщение для RangeExceededError при сужении

    Returns:
        Результат в пределах U128_MAX

    Raises:
        DecimalOverflowError: Если произведение не помещается в 256 бит
        DivisionByZeroError: Если denominator == 0
        RangeExceededError: Если результат не помещается в 128 бит

    Examples:
        >>> mul_div_floor(2_500_000, 1000, 1_000_000)
        2500
    """
    wide = checked_mul(a, b, bound=U256_MAX)
    return narrow(checked_div(wide, denominator), message=message)


def mul_div_ceil(
    a: int,
    b: int,
    denominator: int,
    message: Optional[str] = None,
) -> int:
    """
    ceil(a * b / denominator): floor плюс единица при ненулевом остатке.

    Raises:
        DecimalOverflowError: Если произведение не помещается в 256 бит
        DivisionByZeroError: Если denominator == 0
        RangeExceededError: Если результат не помещается в 128 бит
    """
    wide = checked_mul(a, b, bound=U256_MAX)
    quotient = checked_div(wide, denominator)
    if wide % denominator:
        quotient += 1
    return narrow(quotient, message=message)
