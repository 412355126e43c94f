"""
Decimal — Fixed-Point Decimal с выбираемой точностью

Значение хранится как беззнаковое целое (atomics) ширины Uint128, где
10^D соответствует 1.0. Точность D фиксируется при создании типа:
decimal_type(6) / Decimal[6] возвращает отдельный номинальный класс,
и операции между разными точностями запрещены (TypeError).

Три уровня API для арифметики:
- panicking (операторы, pow, ...) → исключение DecimalError
- checked_* → None при переполнении / делении на ноль
- saturating_* → clamp к MAX / ZERO

Промежуточные результаты умножения и деления вычисляются в 256 битах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 ≤ atomics ≤ U128_MAX для любого экземпляра
2. Экземпляры неизменяемы; каждая операция возвращает новое значение
3. Деление и сужение точности усекают к нулю (никогда не округляют)
4. Расширение точности без потерь, но может переполниться
"""

import decimal as std_decimal
import threading
from functools import total_ordering
from typing import Any, Callable, ClassVar, Iterable, Optional, TypeVar, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from fixed_decimal.core.codec.storage import (
    deserialize_decimal,
    dumps_decimal,
    loads_decimal,
    serialize_decimal,
)
from fixed_decimal.core.codec.text import format_decimal, parse_decimal
from fixed_decimal.core.constants import (
    DEFAULT_DECIMAL_PLACES,
    MAX_DECIMAL_PLACES,
    U32_MAX,
    U64_MAX,
    U128_DIGITS,
    U128_MAX,
    U256_MAX,
)
from fixed_decimal.core.contracts import stored_decimal_json_schema
from fixed_decimal.core.errors import (
    ARITHMETIC_ERRORS,
    ConversionError,
    DecimalUnderflowError,
    DivisionByZeroError,
    PrecisionConversionOverflow,
)
from fixed_decimal.core.math.reference import (
    ReferenceInput,
    atomics_to_reference,
    from_reference_atomics,
    reference_sqrt,
    reference_to_atomics,
    to_reference_atomics,
)
from fixed_decimal.core.math.uint import (
    checked_add,
    checked_mul,
    checked_rem,
    checked_sub,
    mul_div_ceil,
    mul_div_floor,
    pow10,
    saturating_add,
    saturating_sub,
    validate_uint,
)

DecimalT = TypeVar("DecimalT", bound="Decimal")

# Целевая точность: число знаков или конкретный класс Decimal
PrecisionTarget = Union[int, type["Decimal"]]


def _checked(operation: Callable[..., Any], *args: Any) -> Any:
    # checked-уровень: та же реализация, арифметические ошибки → None
    try:
        return operation(*args)
    except ARITHMETIC_ERRORS:
        return None


def _is_amount(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# DECIMAL
# =============================================================================


@total_ordering
class Decimal:
    """
    Fixed-point decimal с D знаками после точки.

    Базовый класс абстрактный: конкретный тип получается через
    decimal_type(D) или Decimal[D]. Готовые алиасы: Decimal6, Decimal9,
    Decimal12, Decimal18, CustomDecimal (= Decimal6).

    Константы класса:
        DECIMAL_PLACES: D
        FRACTIONAL: 10^D (atomics для 1.0)
        ZERO, ONE, MAX: значения 0, 1.0 и максимум Uint128

    Examples:
        >>> a = Decimal6.from_str("1.5")
        >>> b = Decimal6.percent(50)
        >>> str(a + b)
        '2'
        >>> Decimal6.from_str("1.5").to_precision(Decimal9).atomics()
        1500000000
    """

    __slots__ = ("_atomics",)

    DECIMAL_PLACES: ClassVar[int]
    FRACTIONAL: ClassVar[int]
    ZERO: ClassVar["Decimal"]
    ONE: ClassVar["Decimal"]
    MAX: ClassVar["Decimal"]

    def __init__(self, atomics: int = 0):
        if not hasattr(type(self), "DECIMAL_PLACES"):
            raise TypeError("Decimal is abstract; use Decimal[places] or decimal_type(places)")
        object.__setattr__(self, "_atomics", validate_uint(atomics, "atomics"))

    def __class_getitem__(cls, places: int) -> type["Decimal"]:
        return decimal_type(places)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore_decimal, (self.DECIMAL_PLACES, self._atomics))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def raw(cls: type[DecimalT], atomics: int) -> DecimalT:
        """
        Создание из готовых atomics без масштабирования.

        Examples:
            >>> Decimal6.raw(1_500_000)
            Decimal6('1.5')
        """
        return cls(atomics)

    @classmethod
    def from_atomics(cls: type[DecimalT], value: int, input_decimals: int) -> DecimalT:
        """
        Создание из atomics с input_decimals знаками.

        input_decimals < D: масштабирование вверх (проверка переполнения)
        input_decimals > D: масштабирование вниз (усечение, без ошибок)

        Args:
            value: atomics во входной точности (u128)
            input_decimals: Число знаков value

        Raises:
            DecimalOverflowError: Если масштабирование вверх переполняет Uint128
            ValueError: Если input_decimals вне [0, U32_MAX]

        Examples:
            >>> Decimal6.from_atomics(15, 1).atomics()
            1500000
            >>> Decimal6.from_atomics(1_234_567_890, 9).atomics()
            1234567
        """
        validate_uint(value, "value")
        if isinstance(input_decimals, bool) or not isinstance(input_decimals, int):
            raise TypeError("input_decimals must be an int")
        if input_decimals < 0 or input_decimals > U32_MAX:
            raise ValueError(f"input_decimals must be in [0, {U32_MAX}], got {input_decimals}")

        places = cls.DECIMAL_PLACES
        if input_decimals < places:
            return cls(checked_mul(value, pow10(places - input_decimals)))
        if input_decimals > places:
            shift = input_decimals - places
            # u128 < 10^39: при таком сдвиге остаётся ноль
            if shift >= U128_DIGITS:
                return cls.ZERO
            return cls(value // pow10(shift))
        return cls(value)

    @classmethod
    def percent(cls: type[DecimalT], x: int) -> DecimalT:
        """Создание из процентов: percent(50) == 0.5"""
        return cls._from_fraction_of(x, 100)

    @classmethod
    def permille(cls: type[DecimalT], x: int) -> DecimalT:
        """Создание из промилле: permille(125) == 0.125"""
        return cls._from_fraction_of(x, 1000)

    @classmethod
    def bps(cls: type[DecimalT], x: int) -> DecimalT:
        """Создание из basis points: bps(50) == 0.005"""
        return cls._from_fraction_of(x, 10_000)

    @classmethod
    def _from_fraction_of(cls: type[DecimalT], x: int, divisor: int) -> DecimalT:
        # Прямое умножение без wide-промежуточного результата; для D < 4
        # множитель FRACTIONAL // divisor может быть нулевым
        validate_uint(x, "x", bound=U64_MAX)
        return cls(checked_mul(x, cls.FRACTIONAL // divisor, message="attempt to multiply with overflow"))

    @classmethod
    def from_ratio(cls: type[DecimalT], numerator: int, denominator: int) -> DecimalT:
        """
        numerator / denominator с усечением.

        Вычисляется как numerator * FRACTIONAL / denominator в 256 битах.

        Raises:
            DivisionByZeroError: Если denominator == 0
            RangeExceededError: Если результат не помещается в Uint128

        Examples:
            >>> Decimal6.from_ratio(1, 3).atomics()
            333333
        """
        validate_uint(numerator, "numerator")
        validate_uint(denominator, "denominator")
        if denominator == 0:
            raise DivisionByZeroError("Denominator must not be zero")
        return cls(mul_div_floor(numerator, cls.FRACTIONAL, denominator, message="ratio overflow"))

    @classmethod
    def checked_from_ratio(cls: type[DecimalT], numerator: int, denominator: int) -> Optional[DecimalT]:
        """from_ratio, возвращающий None при делении на ноль или переполнении"""
        return _checked(cls.from_ratio, numerator, denominator)

    @classmethod
    def from_int(cls: type[DecimalT], value: int) -> DecimalT:
        """
        Целое число как значение в целых единицах (5 → 5.0).

        Raises:
            DecimalOverflowError: Если value * FRACTIONAL не помещается в Uint128
        """
        return cls(checked_mul(validate_uint(value, "value"), cls.FRACTIONAL))

    @classmethod
    def from_str(cls: type[DecimalT], text: str) -> DecimalT:
        """
        Разбор десятичной нотации ("1.5", "123").

        Raises:
            DecimalParseError: Некорректный формат или больше D знаков
            DecimalOverflowError: Значение не помещается в Uint128
        """
        return cls(parse_decimal(text, cls.DECIMAL_PLACES))

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def atomics(self) -> int:
        """Внутреннее целое значение (масштаб 10^D)"""
        return self._atomics

    def decimal_places(self) -> int:
        return self.DECIMAL_PLACES

    def is_zero(self) -> bool:
        return self._atomics == 0

    def __bool__(self) -> bool:
        return self._atomics != 0

    # =========================================================================
    # PRECISION CONVERSION
    # =========================================================================

    def to_precision(self, target: PrecisionTarget) -> "Decimal":
        """
        Конверсия в точность target (класс Decimal или число знаков).

        Расширение (D2 > D) без потерь, сужение (D2 < D) усекает.

        Raises:
            PrecisionConversionOverflow: Если расширение переполняет Uint128

        Examples:
            >>> Decimal9.from_str("1.123456789").to_precision(6)
            Decimal6('1.123456')
        """
        target_cls = _resolve_precision(target)
        return target_cls(self._rescaled_atomics(target_cls.DECIMAL_PLACES))

    def try_to_precision(self, target: PrecisionTarget) -> Optional["Decimal"]:
        """to_precision, возвращающий None при переполнении"""
        target_cls = _resolve_precision(target)
        return _checked(self.to_precision, target_cls)

    def _rescaled_atomics(self, places: int) -> int:
        own = self.DECIMAL_PLACES
        if places == own:
            return self._atomics
        if places > own:
            scaled = self._atomics * pow10(places - own)
            if scaled > U128_MAX:
                raise PrecisionConversionOverflow(own, places)
            return scaled
        return self._atomics // pow10(own - places)

    # =========================================================================
    # ARITHMETIC (единая реализация для всех уровней API)
    # =========================================================================

    def _require_same(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"unsupported operand types: {type(self).__name__} and {type(other).__name__}; "
                f"convert explicitly with to_precision()"
            )

    def _add(self: DecimalT, other: DecimalT) -> DecimalT:
        return type(self)(checked_add(self._atomics, other._atomics, message="attempt to add with overflow"))

    def _sub(self: DecimalT, other: DecimalT) -> DecimalT:
        return type(self)(
            checked_sub(self._atomics, other._atomics, message="attempt to subtract with overflow")
        )

    def _mul(self: DecimalT, other: DecimalT) -> DecimalT:
        return type(self)(
            mul_div_floor(
                self._atomics,
                other._atomics,
                self.FRACTIONAL,
                message="multiplication result exceeds Uint128 range",
            )
        )

    def _div(self: DecimalT, other: DecimalT) -> DecimalT:
        if other._atomics == 0:
            raise DivisionByZeroError()
        return type(self)(
            mul_div_floor(
                self._atomics,
                self.FRACTIONAL,
                other._atomics,
                message="division result exceeds Uint128 range",
            )
        )

    def _rem(self: DecimalT, other: DecimalT) -> DecimalT:
        return type(self)(checked_rem(self._atomics, other._atomics))

    def _pow(self: DecimalT, exp: int) -> DecimalT:
        if exp == 0:
            return self.ONE
        if exp == 1:
            return self
        if self.is_zero():
            return self.ZERO
        if self == self.ONE:
            return self

        result = self
        for _ in range(1, exp):
            result = result._mul(self)
            if result.is_zero():
                break
        return result

    # =========================================================================
    # CHECKED OPERATIONS
    # =========================================================================

    def checked_add(self: DecimalT, other: DecimalT) -> Optional[DecimalT]:
        """Сложение, None при переполнении"""
        self._require_same(other)
        return _checked(self._add, other)

    def checked_sub(self: DecimalT, other: DecimalT) -> Optional[DecimalT]:
        """Вычитание, None при отрицательном результате"""
        self._require_same(other)
        return _checked(self._sub, other)

    def checked_mul(self: DecimalT, other: DecimalT) -> Optional[DecimalT]:
        """Умножение, None если результат не помещается в Uint128"""
        self._require_same(other)
        return _checked(self._mul, other)

    def checked_div(self: DecimalT, other: DecimalT) -> Optional[DecimalT]:
        """Деление, None при делении на ноль или переполнении"""
        self._require_same(other)
        return _checked(self._div, other)

    def checked_rem(self: DecimalT, other: DecimalT) -> Optional[DecimalT]:
        """Остаток, None при делении на ноль"""
        self._require_same(other)
        return _checked(self._rem, other)

    def checked_pow(self: DecimalT, exp: int) -> Optional[DecimalT]:
        """Степень через повторное умножение, None при переполнении"""
        _validate_exponent(exp)
        return _checked(self._pow, exp)

    # =========================================================================
    # SATURATING OPERATIONS
    # =========================================================================

    def saturating_add(self: DecimalT, other: DecimalT) -> DecimalT:
        """Сложение с насыщением до MAX"""
        self._require_same(other)
        return type(self)(saturating_add(self._atomics, other._atomics))

    def saturating_sub(self: DecimalT, other: DecimalT) -> DecimalT:
        """Вычитание с насыщением до ZERO"""
        self._require_same(other)
        return type(self)(saturating_sub(self._atomics, other._atomics))

    def saturating_mul(self: DecimalT, other: DecimalT) -> DecimalT:
        """Умножение с насыщением до MAX"""
        result = self.checked_mul(other)
        return self.MAX if result is None else result

    # =========================================================================
    # OPERATORS (panicking)
    # =========================================================================

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._sub(other)

    def __mul__(self, other):
        if type(other) is type(self):
            return self._mul(other)
        if _is_amount(other):
            return self.mul_floor(other)
        return NotImplemented

    def __rmul__(self, other):
        # amount * decimal (коммутативно)
        if _is_amount(other):
            return self.mul_floor(other)
        return NotImplemented

    def __truediv__(self, other):
        if type(other) is type(self):
            return self._div(other)
        if _is_amount(other):
            return self.div_amount(other)
        return NotImplemented

    def __mod__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._rem(other)

    def __pow__(self, exp, modulo=None):
        if modulo is not None or not _is_amount(exp):
            return NotImplemented
        return self.pow(exp)

    def __neg__(self):
        # Беззнаковый тип: отрицание определено только для нуля
        if self.is_zero():
            return self
        raise DecimalUnderflowError("Negation of non-zero Decimal is not supported")

    def pow(self: DecimalT, exp: int) -> DecimalT:
        """
        Степень через повторное checked-умножение.

        x.pow(0) == ONE, x.pow(1) == x, ZERO.pow(n > 0) == ZERO.

        Raises:
            RangeExceededError: Если промежуточный результат не помещается в Uint128
        """
        _validate_exponent(exp)
        return self._pow(exp)

    # =========================================================================
    # RAW AMOUNT INTEROP
    # =========================================================================

    def mul_floor(self, amount: int) -> int:
        """
        Применение ставки к raw amount: floor(atomics * amount / FRACTIONAL).

        Raises:
            RangeExceededError: Если результат не помещается в Uint128

        Examples:
            >>> Decimal6.from_str("2.5").mul_floor(1000)
            2500
        """
        validate_uint(amount, "amount")
        return mul_div_floor(
            self._atomics,
            amount,
            self.FRACTIONAL,
            message="multiplication result exceeds Uint128 range",
        )

    def mul_ceil(self, amount: int) -> int:
        """
        Применение ставки к raw amount с округлением вверх.

        Любой ненулевой остаток добавляет одну единицу amount.
        """
        validate_uint(amount, "amount")
        return mul_div_ceil(
            self._atomics,
            amount,
            self.FRACTIONAL,
            message="multiplication result exceeds Uint128 range",
        )

    def div_amount(self: DecimalT, amount: int) -> DecimalT:
        """
        Деление atomics на raw amount без пересчёта масштаба (усечение).

        Raises:
            DivisionByZeroError: Если amount == 0
        """
        validate_uint(amount, "amount")
        if amount == 0:
            raise DivisionByZeroError()
        return type(self)(self._atomics // amount)

    def to_uint_floor(self) -> int:
        """Целая часть (floor)"""
        return self._atomics // self.FRACTIONAL

    def to_uint_ceil(self) -> int:
        """Целая часть с округлением вверх"""
        return self.ceil().to_uint_floor()

    # =========================================================================
    # ROUNDING & MATH
    # =========================================================================

    def floor(self: DecimalT) -> DecimalT:
        """Наибольшее целое ≤ значения"""
        return type(self)(self._atomics // self.FRACTIONAL * self.FRACTIONAL)

    def ceil(self: DecimalT) -> DecimalT:
        """
        Наименьшее целое ≥ значения.

        Raises:
            DecimalOverflowError: Если floor + ONE переполняет Uint128
        """
        floor = self.floor()
        if floor == self:
            return floor
        return floor._add(self.ONE)

    def sqrt(self: DecimalT) -> DecimalT:
        """
        Квадратный корень через reference 18-decimal алгоритм.

        Значение пересчитывается в 18 знаков, корень считается reference
        алгоритмом и пересчитывается обратно в D знаков (усечение).
        Для очень больших значений часть младших знаков теряется.
        """
        atomics18 = to_reference_atomics(self._atomics, self.DECIMAL_PLACES)
        return type(self)(from_reference_atomics(reference_sqrt(atomics18), self.DECIMAL_PLACES))

    def min(self: DecimalT, other: DecimalT) -> DecimalT:
        self._require_same(other)
        return self if self < other else other

    def max(self: DecimalT, other: DecimalT) -> DecimalT:
        self._require_same(other)
        return self if self > other else other

    def abs_diff(self: DecimalT, other: DecimalT) -> DecimalT:
        """Модуль разности |self - other|"""
        self._require_same(other)
        if self > other:
            return self._sub(other)
        return other._sub(self)

    @classmethod
    def sum_of(cls: type[DecimalT], values: Iterable[DecimalT]) -> DecimalT:
        """Сумма значений (пустая последовательность → ZERO)"""
        total = cls.ZERO
        for value in values:
            total = total + value
        return total

    @classmethod
    def product_of(cls: type[DecimalT], values: Iterable[DecimalT]) -> DecimalT:
        """Произведение значений (пустая последовательность → ONE)"""
        result = cls.ONE
        for value in values:
            result = result * value
        return result

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._atomics == other._atomics

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._atomics < other._atomics

    def __hash__(self) -> int:
        return hash((self.DECIMAL_PLACES, self._atomics))

    # =========================================================================
    # TEXT
    # =========================================================================

    def __str__(self) -> str:
        return format_decimal(self._atomics, self.DECIMAL_PLACES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    # =========================================================================
    # STORAGE
    # =========================================================================

    def to_storage_string(self) -> str:
        """
        Storage-форма в reference 18-decimal формате.

        Равные значения разной точности дают одинаковую строку.

        Examples:
            >>> Decimal6.percent(50).to_storage_string()
            '0.5'
        """
        return serialize_decimal(self._atomics, self.DECIMAL_PLACES)

    @classmethod
    def from_storage_string(cls: type[DecimalT], text: str) -> DecimalT:
        """
        Значение из storage-строки с любым числом знаков.

        Лишние знаки (больше D) отбрасываются усечением.

        Raises:
            DecimalParseError: Некорректный формат или переполнение
        """
        return cls(deserialize_decimal(text, cls.DECIMAL_PLACES))

    def to_json(self) -> str:
        """JSON string scalar: '"1.5"'"""
        return dumps_decimal(self._atomics, self.DECIMAL_PLACES)

    @classmethod
    def from_json(cls: type[DecimalT], payload: str) -> DecimalT:
        return cls(loads_decimal(payload, cls.DECIMAL_PLACES))

    # =========================================================================
    # REFERENCE DECIMAL INTEROP
    # =========================================================================

    def reference_atomics(self) -> int:
        """
        atomics в 18-decimal reference-масштабе.

        Raises:
            DecimalOverflowError: Если пересчёт в 18 знаков переполняет Uint128
        """
        return to_reference_atomics(self._atomics, self.DECIMAL_PLACES)

    def to_reference(self) -> std_decimal.Decimal:
        """
        Точное значение reference-типа (ровно 18 знаков после точки).

        Для D > 18 знаки после 18-го отбрасываются.
        """
        return atomics_to_reference(self.reference_atomics())

    @classmethod
    def from_reference(cls: type[DecimalT], value: ReferenceInput) -> DecimalT:
        """
        Значение из reference-типа (decimal.Decimal или int).

        Знаки после 18-го и после D-го отбрасываются усечением.

        Raises:
            ConversionError: Значение отрицательное, не конечное или не
                помещается в 128-битный reference-тип
            DecimalOverflowError: Расширение до D > 18 переполняет Uint128
        """
        atomics18 = reference_to_atomics(value)
        return cls(from_reference_atomics(atomics18, cls.DECIMAL_PLACES))

    @classmethod
    def from_wide_reference(cls: type[DecimalT], value: ReferenceInput) -> DecimalT:
        """
        Значение из 256-битного reference-типа (Decimal256).

        Конверсия идёт через 128-битный 18-decimal reference-тип.

        Raises:
            ConversionError: Значение вне диапазона Decimal256 или не
                помещается в 128-битный reference-тип
        """
        atomics18 = reference_to_atomics(value, bound=U256_MAX, type_name="Decimal256")
        if atomics18 > U128_MAX:
            raise ConversionError("Decimal256 value too large for Decimal")
        return cls(from_reference_atomics(atomics18, cls.DECIMAL_PLACES))

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        if not hasattr(cls, "DECIMAL_PLACES"):
            raise TypeError("Decimal is abstract; annotate fields with a concrete precision")

        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_field,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return stored_decimal_json_schema()

    @classmethod
    def _validate_field(cls, value: Any) -> "Decimal":
        if type(value) is cls:
            return value
        if isinstance(value, str):
            return cls.from_storage_string(value)
        # ValueError → pydantic ValidationError
        raise ValueError(
            f"expected {cls.__name__} or decimal string, got {type(value).__name__}"
        )


def _serialize_field(value: Decimal) -> str:
    return value.to_storage_string()


def _validate_exponent(exp: int) -> None:
    if not _is_amount(exp):
        raise TypeError(f"exponent must be an int, got {type(exp).__name__}")
    if exp < 0 or exp > U32_MAX:
        raise ValueError(f"exponent must be in [0, {U32_MAX}], got {exp}")


def _resolve_precision(target: PrecisionTarget) -> type[Decimal]:
    if isinstance(target, type) and issubclass(target, Decimal):
        if not hasattr(target, "DECIMAL_PLACES"):
            raise TypeError("target precision must be a concrete Decimal type")
        return target
    return decimal_type(target)


def _restore_decimal(places: int, atomics: int) -> Decimal:
    return decimal_type(places)(atomics)


# =============================================================================
# ФАБРИКА ТИПОВ
# =============================================================================

_TYPES: dict[int, type[Decimal]] = {}
_TYPES_LOCK = threading.Lock()


def decimal_type(places: int) -> type[Decimal]:
    """
    Класс Decimal с places знаками после точки.

    Для одного places всегда возвращается один и тот же класс, поэтому
    Decimal[6] is Decimal6.

    Args:
        places: Число знаков D (0 ≤ D ≤ MAX_DECIMAL_PLACES)

    Returns:
        Подкласс Decimal с константами DECIMAL_PLACES, FRACTIONAL, ZERO, ONE, MAX

    Raises:
        TypeError: Если places не int
        ValueError: Если places вне [0, MAX_DECIMAL_PLACES]
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise TypeError(f"decimal places must be an int, got {type(places).__name__}")
    if places < 0 or places > MAX_DECIMAL_PLACES:
        raise ValueError(f"decimal places must be in [0, {MAX_DECIMAL_PLACES}], got {places}")

    with _TYPES_LOCK:
        cls = _TYPES.get(places)
        if cls is None:
            name = f"Decimal{places}"
            cls = type(
                name,
                (Decimal,),
                {
                    "__slots__": (),
                    "__module__": __name__,
                    "__qualname__": name,
                    "DECIMAL_PLACES": places,
                    "FRACTIONAL": pow10(places),
                },
            )
            cls.ZERO = cls(0)
            cls.ONE = cls(pow10(places))
            cls.MAX = cls(U128_MAX)
            _TYPES[places] = cls
        return cls


# =============================================================================
# АЛИАСЫ
# =============================================================================

Decimal6 = decimal_type(6)
Decimal9 = decimal_type(9)
Decimal12 = decimal_type(12)
Decimal18 = decimal_type(18)

# Тип по умолчанию (6 знаков)
CustomDecimal = decimal_type(DEFAULT_DECIMAL_PLACES)
