"""
Тесты для модуля Unsigned Integer Primitives

Проверяет:
1. Валидацию беззнаковых целых и границ ширины
2. Checked-операции (переполнение, underflow, деление на ноль)
3. Saturating-операции
4. Double-width mul/div с сужением в Uint128
"""

import pytest

from fixed_decimal.core.constants import U64_MAX, U128_MAX, U256_MAX
from fixed_decimal.core.errors import (
    DecimalOverflowError,
    DecimalUnderflowError,
    DivisionByZeroError,
    RangeExceededError,
)
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

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidateUint:
    """Тесты для validate_uint"""

    def test_valid_values_returned_unchanged(self) -> None:
        assert validate_uint(0, "x") == 0
        assert validate_uint(5, "x") == 5
        assert validate_uint(U128_MAX, "x") == U128_MAX

    def test_negative_rejected(self) -> None:
        with pytest.raises(RangeExceededError, match="x must be in"):
            validate_uint(-1, "x")

    def test_above_bound_rejected(self) -> None:
        with pytest.raises(RangeExceededError):
            validate_uint(U128_MAX + 1, "x")

    def test_custom_bound(self) -> None:
        assert validate_uint(U64_MAX, "x", bound=U64_MAX) == U64_MAX
        with pytest.raises(RangeExceededError):
            validate_uint(U64_MAX + 1, "x", bound=U64_MAX)

    def test_non_int_rejected(self) -> None:
        """float, str и bool не принимаются"""
        with pytest.raises(TypeError, match="x must be an int"):
            validate_uint(1.5, "x")
        with pytest.raises(TypeError):
            validate_uint("1", "x")
        with pytest.raises(TypeError):
            validate_uint(True, "x")


class TestPow10:
    """Тесты для pow10"""

    def test_values(self) -> None:
        assert pow10(0) == 1
        assert pow10(6) == 1_000_000
        assert pow10(18) == 10**18

    def test_negative_exponent_rejected(self) -> None:
        with pytest.raises(ValueError):
            pow10(-1)


# =============================================================================
# CHECKED-ОПЕРАЦИИ
# =============================================================================


class TestCheckedOperations:
    """Тесты checked_add / checked_sub / checked_mul / checked_div / checked_rem"""

    def test_add(self) -> None:
        assert checked_add(1, 2) == 3
        assert checked_add(U128_MAX, 0) == U128_MAX

    def test_add_overflow(self) -> None:
        with pytest.raises(DecimalOverflowError):
            checked_add(U128_MAX, 1)

    def test_add_overflow_custom_message(self) -> None:
        with pytest.raises(DecimalOverflowError, match="attempt to add with overflow"):
            checked_add(U128_MAX, 1, message="attempt to add with overflow")

    def test_sub(self) -> None:
        assert checked_sub(5, 2) == 3
        assert checked_sub(2, 2) == 0

    def test_sub_underflow(self) -> None:
        with pytest.raises(DecimalUnderflowError):
            checked_sub(1, 2)

    def test_mul(self) -> None:
        assert checked_mul(6, 7) == 42

    def test_mul_overflow_and_wide_bound(self) -> None:
        """2^64 * 2^64 = 2^128 не помещается в 128 бит, но помещается в 256"""
        with pytest.raises(DecimalOverflowError):
            checked_mul(2**64, 2**64)
        assert checked_mul(2**64, 2**64, bound=U256_MAX) == 2**128

    def test_div_truncates(self) -> None:
        assert checked_div(7, 2) == 3
        assert checked_div(1, 3) == 0

    def test_div_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            checked_div(1, 0)

    def test_rem(self) -> None:
        assert checked_rem(7, 3) == 1
        with pytest.raises(DivisionByZeroError):
            checked_rem(7, 0)

    def test_narrow(self) -> None:
        assert narrow(5) == 5
        assert narrow(U128_MAX) == U128_MAX
        with pytest.raises(RangeExceededError):
            narrow(U128_MAX + 1)


class TestSaturatingOperations:
    """Тесты saturating_add / saturating_sub"""

    def test_add_clamps_to_max(self) -> None:
        assert saturating_add(U128_MAX, 5) == U128_MAX
        assert saturating_add(1, 2) == 3

    def test_sub_clamps_to_zero(self) -> None:
        assert saturating_sub(1, 5) == 0
        assert saturating_sub(5, 1) == 4


# =============================================================================
# DOUBLE-WIDTH
# =============================================================================


class TestMulDiv:
    """Тесты mul_div_floor / mul_div_ceil"""

    def test_floor_basic(self) -> None:
        assert mul_div_floor(2_500_000, 1000, 1_000_000) == 2500

    def test_floor_uses_wide_intermediate(self) -> None:
        """U128_MAX * U128_MAX не помещается в 128 бит, результат помещается"""
        assert mul_div_floor(U128_MAX, U128_MAX, U128_MAX) == U128_MAX

    def test_floor_narrow_failure(self) -> None:
        with pytest.raises(RangeExceededError, match="ratio overflow"):
            mul_div_floor(U128_MAX, 2, 1, message="ratio overflow")

    def test_floor_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            mul_div_floor(1, 1, 0)

    def test_ceil_adds_one_on_remainder(self) -> None:
        assert mul_div_ceil(1, 1, 3) == 1
        assert mul_div_ceil(4, 1, 3) == 2

    def test_ceil_exact(self) -> None:
        assert mul_div_ceil(3, 1, 3) == 1
        assert mul_div_ceil(0, 5, 3) == 0
