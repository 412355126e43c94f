"""
Тесты для таксономии ошибок Decimal

Проверяет:
1. Сообщения по умолчанию и пользовательские сообщения
2. Наследование от builtin-исключений
3. Маппинг в host-ошибку (host_error_message / HostError)
"""

import pytest

from fixed_decimal import Decimal6
from fixed_decimal.core.errors import (
    ARITHMETIC_ERRORS,
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


class TestErrorMessages:
    """Тексты ошибок"""

    def test_default_messages(self) -> None:
        assert str(DecimalOverflowError()) == "Overflow in Decimal operation"
        assert str(DecimalUnderflowError()) == "Underflow in Decimal operation"
        assert str(DivisionByZeroError()) == "Division by zero"
        assert str(RangeExceededError()) == "Value exceeds valid range for Decimal"

    def test_custom_message(self) -> None:
        err = DecimalOverflowError("attempt to add with overflow")
        assert err.message == "attempt to add with overflow"
        assert str(err) == "attempt to add with overflow"

    def test_parse_error(self) -> None:
        err = DecimalParseError("invalid format")
        assert err.detail == "invalid format"
        assert str(err) == "Failed to parse Decimal: invalid format"

    def test_conversion_error(self) -> None:
        assert str(ConversionError("bad value")) == "Conversion error: bad value"

    def test_precision_conversion_overflow(self) -> None:
        err = PrecisionConversionOverflow(6, 18)
        assert err.from_decimals == 6
        assert err.to_decimals == 18
        assert str(err) == (
            "Precision conversion overflow: cannot convert from 6 to 18 decimals"
        )


class TestErrorHierarchy:
    """Совместимость с generic-обработчиками"""

    @pytest.mark.parametrize(
        "err",
        [
            DecimalOverflowError(),
            DecimalUnderflowError(),
            DivisionByZeroError(),
            RangeExceededError(),
            DecimalParseError("x"),
            ConversionError("x"),
            PrecisionConversionOverflow(6, 18),
        ],
    )
    def test_all_are_decimal_errors(self, err: DecimalError) -> None:
        assert isinstance(err, DecimalError)

    def test_builtin_bases(self) -> None:
        assert isinstance(DecimalOverflowError(), OverflowError)
        assert isinstance(RangeExceededError(), OverflowError)
        assert isinstance(PrecisionConversionOverflow(6, 18), OverflowError)
        assert isinstance(DecimalUnderflowError(), ArithmeticError)
        assert isinstance(DivisionByZeroError(), ZeroDivisionError)
        assert isinstance(DecimalParseError("x"), ValueError)
        assert isinstance(ConversionError("x"), ValueError)

    def test_parse_errors_are_not_arithmetic(self) -> None:
        """checked-формы не глотают ошибки парсинга и конверсии"""
        assert not issubclass(DecimalParseError, ARITHMETIC_ERRORS)
        assert not issubclass(ConversionError, ARITHMETIC_ERRORS)


class TestHostMapping:
    """Маппинг в host-ошибку"""

    @pytest.mark.parametrize(
        "err,expected",
        [
            (DecimalOverflowError(), "Decimal overflow"),
            (DecimalOverflowError("attempt to add with overflow"), "Decimal overflow"),
            (DecimalUnderflowError(), "Decimal underflow"),
            (DivisionByZeroError(), "Division by zero"),
            (RangeExceededError(), "Value exceeds valid range"),
            (DecimalParseError("invalid format"), "Parse error: invalid format"),
            (ConversionError("negative"), "Conversion error: negative"),
            (
                PrecisionConversionOverflow(6, 18),
                "Precision conversion overflow: cannot convert from 6 to 18 decimals",
            ),
        ],
    )
    def test_host_error_message(self, err: DecimalError, expected: str) -> None:
        assert host_error_message(err) == expected

    def test_host_error_from_decimal_error(self) -> None:
        host = HostError.from_decimal_error(DecimalOverflowError())
        assert "overflow" in host.msg.lower()
        assert str(host) == host.msg

    def test_host_error_from_operation(self) -> None:
        """Ошибка реальной операции пересекает host-границу"""
        with pytest.raises(DecimalOverflowError) as exc_info:
            Decimal6.MAX + Decimal6.ONE

        host = HostError.from_decimal_error(exc_info.value)
        assert host.msg == "Decimal overflow"

    def test_precision_overflow_crosses_boundary(self) -> None:
        with pytest.raises(PrecisionConversionOverflow) as exc_info:
            Decimal6.MAX.to_precision(18)

        host = HostError.from_decimal_error(exc_info.value)
        assert "6 to 18" in host.msg
