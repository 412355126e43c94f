"""
Тесты interop с 18-decimal reference-типом

Проверяет:
1. Пересчёт atomics D ↔ 18 знаков
2. Конверсию в decimal.Decimal и обратно (усечение)
3. Конверсию из 256-битного reference-типа
4. Reference-алгоритм sqrt
5. Legacy-константы и scale factor helpers
"""

import decimal as std_decimal

import pytest

from fixed_decimal import (
    CUSTOM_DECIMAL_FRACTIONAL,
    CUSTOM_DECIMALS,
    SCALE_FACTOR,
    Decimal,
    Decimal6,
    Decimal9,
    Decimal18,
    scale_factor_from_18,
    scale_factor_to_18,
)
from fixed_decimal.core.constants import U128_MAX
from fixed_decimal.core.errors import ConversionError, DecimalOverflowError
from fixed_decimal.core.math.reference import (
    atomics_to_reference,
    from_reference_atomics,
    reference_sqrt,
    to_reference_atomics,
)

D = std_decimal.Decimal

# =============================================================================
# ATOMICS
# =============================================================================


class TestReferenceAtomics:
    """to_reference_atomics / from_reference_atomics"""

    def test_scale_up_below_18(self) -> None:
        assert to_reference_atomics(1_500_000, 6) == 1_500_000_000_000_000_000
        assert Decimal6.from_str("1.5").reference_atomics() == 1_500_000_000_000_000_000

    def test_scale_down_below_18(self) -> None:
        assert from_reference_atomics(1_123_456_789_012_345_678, 6) == 1_123_456

    def test_identity_at_18(self) -> None:
        assert to_reference_atomics(12345, 18) == 12345
        assert from_reference_atomics(12345, 18) == 12345

    def test_above_18(self) -> None:
        assert to_reference_atomics(10**20 + 99, 20) == 10**18
        assert from_reference_atomics(10**18, 20) == 10**20

    def test_overflow(self) -> None:
        with pytest.raises(DecimalOverflowError):
            Decimal6.MAX.reference_atomics()
        with pytest.raises(DecimalOverflowError):
            from_reference_atomics(U128_MAX, 20)


# =============================================================================
# decimal.Decimal
# =============================================================================


class TestToReference:
    """to_reference"""

    def test_exact_value(self) -> None:
        ref = Decimal6.from_str("1.5").to_reference()
        assert ref == D("1.5")
        assert str(ref) == "1.500000000000000000"

    def test_atomics_to_reference(self) -> None:
        assert atomics_to_reference(1) == D("0.000000000000000001")
        assert atomics_to_reference(0) == D("0")

    def test_precision_above_18_truncates(self) -> None:
        assert Decimal[20].raw(10**20 + 1).to_reference() == D("1")


class TestFromReference:
    """from_reference"""

    def test_truncates_to_precision(self) -> None:
        ref = D("1.123456789012345678")
        assert Decimal6.from_reference(ref) == Decimal6.from_str("1.123456")
        assert Decimal9.from_reference(ref) == Decimal9.from_str("1.123456789")
        assert Decimal18.from_reference(ref).atomics() == 1_123_456_789_012_345_678

    def test_truncates_beyond_18_places(self) -> None:
        assert Decimal18.from_reference(D("0.0000000000000000019")).atomics() == 1

    def test_int_input(self) -> None:
        assert Decimal6.from_reference(5) == Decimal6.from_int(5)

    @pytest.mark.parametrize("text", ["0", "0.000001", "1.5", "123.456789"])
    def test_roundtrip(self, text: str) -> None:
        x = Decimal6.from_str(text)
        assert Decimal6.from_reference(x.to_reference()) == x

    def test_negative_zero(self) -> None:
        assert Decimal6.from_reference(D("-0")) == Decimal6.ZERO

    def test_negative_rejected(self) -> None:
        with pytest.raises(ConversionError, match="non-negative"):
            Decimal6.from_reference(D("-1"))

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "sNaN"])
    def test_non_finite_rejected(self, text: str) -> None:
        with pytest.raises(ConversionError, match="finite"):
            Decimal6.from_reference(D(text))

    def test_too_large(self) -> None:
        with pytest.raises(ConversionError, match="too large for Decimal"):
            Decimal6.from_reference(D("1E+30"))

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError):
            Decimal6.from_reference(1.5)
        with pytest.raises(TypeError):
            Decimal6.from_reference("1.5")

    def test_widening_above_18_overflow(self) -> None:
        with pytest.raises(DecimalOverflowError):
            Decimal[20].from_reference(D(10**19))

    def test_precision_above_18(self) -> None:
        assert Decimal[20].from_reference(D("1.5")).atomics() == 150 * 10**18


class TestFromWideReference:
    """from_wide_reference (Decimal256)"""

    def test_in_range(self) -> None:
        assert Decimal6.from_wide_reference(D("1.5")) == Decimal6.from_str("1.5")

    def test_fits_wide_but_not_narrow(self) -> None:
        with pytest.raises(ConversionError, match="Decimal256 value too large for Decimal"):
            Decimal6.from_wide_reference(D("1E+30"))

    def test_beyond_wide_range(self) -> None:
        with pytest.raises(ConversionError, match="value too large for Decimal256"):
            Decimal6.from_wide_reference(D("1E+70"))


# =============================================================================
# SQRT
# =============================================================================


class TestReferenceSqrt:
    """reference_sqrt"""

    def test_exact(self) -> None:
        assert reference_sqrt(4 * 10**18) == 2 * 10**18
        assert reference_sqrt(0) == 0
        assert reference_sqrt(10**18) == 10**18

    def test_max_input_uses_lowest_precision(self) -> None:
        assert reference_sqrt(U128_MAX) == (2**64 - 1) * 10**9


# =============================================================================
# LEGACY
# =============================================================================


class TestLegacyConstants:
    """Константы и helpers для 6-decimal типа по умолчанию"""

    def test_constants(self) -> None:
        assert CUSTOM_DECIMALS == 6
        assert CUSTOM_DECIMAL_FRACTIONAL == 10**6
        assert SCALE_FACTOR == 10**12

    def test_scale_factors(self) -> None:
        assert scale_factor_to_18(6) == 10**12
        assert scale_factor_from_18(6) == 10**12
        assert scale_factor_to_18(18) == 1
        assert scale_factor_to_18(20) == 1
        assert scale_factor_from_18(20) == 1

    def test_scale_factor_matches_conversion(self) -> None:
        x = Decimal6.from_str("1.5")
        assert x.reference_atomics() == x.atomics() * scale_factor_to_18(6)
