"""
Errors — Таксономия ошибок Decimal

Каждая ошибка наследуется от DecimalError и от ближайшего builtin-исключения,
поэтому общие обработчики (except OverflowError, except ValueError)
продолжают работать.

Политика:
- panicking-форма операции выбрасывает исключение
- checked-форма возвращает None для арифметических ошибок
- saturating-форма никогда не выбрасывает (clamp к MAX/ZERO)
- парсинг и десериализация выбрасывают только DecimalParseError
  или DecimalOverflowError
"""

from typing import Optional


class DecimalError(Exception):
    """Базовый класс всех ошибок Decimal"""

    default_message: str = "Decimal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class DecimalOverflowError(DecimalError, OverflowError):
    """Переполнение при арифметической операции"""

    default_message = "Overflow in Decimal operation"


class DecimalUnderflowError(DecimalError, ArithmeticError):
    """Результат операции меньше нуля"""

    default_message = "Underflow in Decimal operation"


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Деление (или остаток) на ноль"""

    default_message = "Division by zero"


class RangeExceededError(DecimalError, OverflowError):
    """
    Результат не помещается в нативную ширину (Uint128).

    Используется, когда double-width шаг формально успешен, но сужение
    результата обратно в 128 бит невозможно.
    """

    default_message = "Value exceeds valid range for Decimal"


class DecimalParseError(DecimalError, ValueError):
    """Некорректная текстовая или сериализованная форма"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse Decimal: {detail}")


class ConversionError(DecimalError, ValueError):
    """Ошибка конверсии между Decimal и внешними типами"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Conversion error: {detail}")


class PrecisionConversionOverflow(DecimalError, OverflowError):
    """Расширение точности (widening) не помещается в Uint128"""

    def __init__(self, from_decimals: int, to_decimals: int):
        self.from_decimals = from_decimals
        self.to_decimals = to_decimals
        super().__init__(
            f"Precision conversion overflow: cannot convert from "
            f"{from_decimals} to {to_decimals} decimals"
        )


# Ошибки, которые checked-формы превращают в None
ARITHMETIC_ERRORS = (
    DecimalOverflowError,
    DecimalUnderflowError,
    DivisionByZeroError,
    RangeExceededError,
    PrecisionConversionOverflow,
)


# =============================================================================
# HOST BOUNDARY
# =============================================================================


def host_error_message(err: DecimalError) -> str:
    """
    Текстовое сообщение host-уровня для ошибки Decimal.

    Args:
        err: Ошибка Decimal любого вида

    Returns:
        Сообщение для generic host error
    """
    if isinstance(err, DecimalOverflowError):
        return "Decimal overflow"
    if isinstance(err, DecimalUnderflowError):
        return "Decimal underflow"
    if isinstance(err, DivisionByZeroError):
        return "Division by zero"
    if isinstance(err, RangeExceededError):
        return "Value exceeds valid range"
    if isinstance(err, DecimalParseError):
        return f"Parse error: {err.detail}"
    if isinstance(err, ConversionError):
        return f"Conversion error: {err.detail}"
    if isinstance(err, PrecisionConversionOverflow):
        return (
            f"Precision conversion overflow: cannot convert from "
            f"{err.from_decimals} to {err.to_decimals} decimals"
        )
    return err.message


class HostError(Exception):
    """Generic host error с человекочитаемым сообщением"""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)

    @classmethod
    def from_decimal_error(cls, err: DecimalError) -> "HostError":
        return cls(host_error_message(err))
