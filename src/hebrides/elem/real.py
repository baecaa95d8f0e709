"""
Real — Модель вещественного числа

Immutable Pydantic модель, оборачивающая одно 64-битное значение float.

Поддерживает:
- Арифметику с Real, int и float (деление на ноль по правилам IEEE-754)
- NaN-aware сравнение: NaN не равен ничему, включая себя
- Трансцендентные функции с явной проверкой области определения
- Запросы знака и округление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операция вне области определения → DomainError (а не NaN или ValueError из math)
2. NaN на входе пропагирует в NaN на выходе (DomainError только для явных нарушений)
3. Переполнение даёт ±inf, как у f64, а не OverflowError
4. Экземпляры неизменяемы (frozen=True)
"""

import math
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from hebrides.core.errors import conversion_failure, domain_violation
from hebrides.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    Tolerance,
    coerce_float,
    compare_with_tolerance,
    ieee_divide,
    is_close,
    is_number,
    is_valid_float,
)

if TYPE_CHECKING:
    from hebrides.elem.angle import Angle
    from hebrides.elem.complex import Complex

RealLike = Union["Real", int, float]


def _operand(other: Any) -> Optional[float]:
    """
    Значение операнда как float, либо None если тип не поддерживается.

    Raises:
        ConversionError: Если int не помещается в float
    """
    if isinstance(other, Real):
        return other.value
    if is_number(other):
        return coerce_float(other, "Real")
    return None


def _comparand(other: Any) -> Optional[Union[int, float]]:
    """Операнд сравнения: int сравнивается с float точно, без конверсии."""
    if isinstance(other, Real):
        return other.value
    if is_number(other):
        return other
    return None


def _power(base: float, exponent: float) -> float:
    """
    base ** exponent с результатами f64 вместо исключений Python.

    Вызывающий код отвечает за проверку отрицательного base
    с нецелым exponent.
    """
    odd = exponent.is_integer() and exponent % 2 == 1

    if base == 0.0 and exponent < 0.0:
        # Знак бесконечности сохраняется только для нечётной степени
        return math.copysign(math.inf, base) if odd else math.inf

    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if (base < 0.0 and odd) else math.inf


def _integer_power_limit(base: float, power: int) -> float:
    """base ** power для int, не помещающегося в float: 1, ±inf или ±0."""
    if math.isnan(base):
        return math.nan

    magnitude = abs(base)
    if magnitude == 1.0:
        result = 1.0
    elif (magnitude > 1.0) == (power > 0):
        result = math.inf
    else:
        result = 0.0

    if math.copysign(1.0, base) < 0.0 and power % 2 == 1:
        return -result
    return result


# =============================================================================
# REAL MODEL
# =============================================================================


class Real(BaseModel):
    """
    Модель вещественного числа.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.

    Examples:
        >>> Real(2.0) + 1
        Real(3.0)
        >>> Real(4.0).sqrt()
        Real(2.0)
        >>> Real(-1.0).sqrt()  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DomainError: sqrt is undefined for -1.0: ...
    """

    value: float = Field(..., description="Значение (64-bit float)")

    model_config = {"frozen": True}

    ZERO: ClassVar["Real"]
    ONE: ClassVar["Real"]

    def __init__(self, value: Any, **data: Any) -> None:
        super().__init__(value=value, **data)

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_number(cls, data: Any) -> Any:
        """Позволяет валидировать Real из числа (например, поле Complex.re)."""
        if isinstance(data, Real):
            return {"value": data.value}
        if is_number(data):
            return {"value": data}
        return data

    @field_validator("value", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        """Только int/float: строки и bool не являются вещественными числами."""
        if isinstance(v, Real):
            return v.value
        if not is_number(v):
            raise ValueError(f"Real requires an int or float, got {type(v).__name__}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы и конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, value: float) -> "Real":
        """Создание Real из float."""
        return cls(value)

    @classmethod
    def from_number(cls, value: Any) -> "Real":
        """
        Конверсия числа в Real.

        Raises:
            ConversionError: Если value не int/float
        """
        return cls(coerce_float(value, "Real.from_number"))

    @classmethod
    def try_from(cls, value: "Complex") -> "Real":
        """
        Конверсия Complex → Real.

        Raises:
            ConversionError: Если мнимая часть не равна нулю
        """
        if value.im.value != 0.0:
            raise conversion_failure(
                "Real.try_from", value, "imaginary part is not zero"
            )
        return cls(value.re.value)

    def to_complex(self) -> "Complex":
        """Создание Complex с нулевой мнимой частью."""
        from hebrides.elem.complex import Complex

        return Complex(self.value, 0.0)

    def __float__(self) -> float:
        return self.value

    def __complex__(self) -> complex:
        return complex(self.value, 0.0)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Real({self.value!r})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other_value = _comparand(other)
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        other_value = _comparand(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    def __le__(self, other: object) -> bool:
        other_value = _comparand(other)
        if other_value is None:
            return NotImplemented
        return self.value <= other_value

    def __gt__(self, other: object) -> bool:
        other_value = _comparand(other)
        if other_value is None:
            return NotImplemented
        return self.value > other_value

    def __ge__(self, other: object) -> bool:
        other_value = _comparand(other)
        if other_value is None:
            return NotImplemented
        return self.value >= other_value

    def partial_cmp(self, other: RealLike) -> Optional[int]:
        """
        Частичное сравнение.

        Returns:
            -1, 0 или 1; None если хотя бы одно значение NaN
        """
        other_value = self._require_operand(other, "partial_cmp")
        if math.isnan(self.value) or math.isnan(other_value):
            return None
        return (self.value > other_value) - (self.value < other_value)

    def cmp(self, other: RealLike) -> int:
        """
        Полное сравнение.

        Raises:
            DomainError: Если хотя бы одно значение NaN
        """
        ordering = self.partial_cmp(other)
        if ordering is None:
            raise domain_violation("cmp", (self.value, other), "NaN has no ordering")
        return ordering

    def compare(self, other: RealLike, tol: float = DEFAULT_TOLERANCE.abs_tol) -> int:
        """
        Сравнение с абсолютной толерантностью: 0 если |self - other| <= tol.

        Raises:
            DomainError: Если хотя бы одно значение NaN
        """
        other_value = self._require_operand(other, "compare")
        if math.isnan(self.value) or math.isnan(other_value):
            raise domain_violation(
                "compare", (self.value, other), "NaN has no ordering"
            )
        return compare_with_tolerance(self.value, other_value, tol)

    def is_close(self, other: RealLike, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Приближённое равенство с учётом толерантности."""
        return is_close(self.value, self._require_operand(other, "is_close"), tolerance)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def positive(self) -> bool:
        """Строго больше нуля (0 и NaN — нет)."""
        return self.value > 0.0

    def negative(self) -> bool:
        """Строго меньше нуля (0 и NaN — нет)."""
        return self.value < 0.0

    def is_finite(self) -> bool:
        return is_valid_float(self.value)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_operand(self, other: Any, operation: str) -> float:
        other_value = _operand(other)
        if other_value is None:
            raise conversion_failure(
                operation, other, f"expected Real, int or float, got {type(other).__name__}"
            )
        return other_value

    def __add__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(self.value + other_value)

    def __radd__(self, other: Any) -> "Real":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(self.value - other_value)

    def __rsub__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(other_value - self.value)

    def __mul__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(self.value * other_value)

    def __rmul__(self, other: Any) -> "Real":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(ieee_divide(self.value, other_value))

    def __rtruediv__(self, other: Any) -> "Real":
        other_value = _operand(other)
        if other_value is None:
            return NotImplemented
        return Real(ieee_divide(other_value, self.value))

    def __neg__(self) -> "Real":
        return Real(-self.value)

    def __pos__(self) -> "Real":
        return self

    def __abs__(self) -> "Real":
        return self.abs()

    def __pow__(self, power: Any) -> "Real":
        if _comparand(power) is None:
            return NotImplemented
        return self.pow(power)

    def __rpow__(self, base: Any) -> "Real":
        if not is_number(base):
            return NotImplemented
        return Real.from_number(base).pow(self)

    def abs(self) -> "Real":
        """Абсолютное значение."""
        return Real(abs(self.value))

    def squared(self) -> "Real":
        return Real(self.value * self.value)

    def floor(self) -> "Real":
        if not is_valid_float(self.value):
            return self
        return Real(float(math.floor(self.value)))

    def ceil(self) -> "Real":
        if not is_valid_float(self.value):
            return self
        return Real(float(math.ceil(self.value)))

    # -------------------------------------------------------------------------
    # Степени и логарифмы
    # -------------------------------------------------------------------------

    def sqrt(self) -> "Real":
        """
        Квадратный корень.

        Raises:
            DomainError: Если значение отрицательное
        """
        if self.value < 0.0:
            raise domain_violation("sqrt", self.value, "negative input")
        return Real(math.sqrt(self.value))

    def powi(self, power: int) -> "Real":
        """
        Целая степень. Всегда определена: 0 ** (-n) даёт бесконечность.
        """
        if isinstance(power, bool) or not isinstance(power, int):
            raise conversion_failure("powi", power, "integer exponent expected")
        try:
            exponent = float(power)
        except OverflowError:
            return Real(_integer_power_limit(self.value, power))
        return Real(_power(self.value, exponent))

    def powf(self, power: RealLike) -> "Real":
        """
        Вещественная степень.

        Raises:
            DomainError: Если основание отрицательное, а степень нецелая
        """
        exponent = self._require_operand(power, "powf")
        if self.value < 0.0 and is_valid_float(exponent) and not exponent.is_integer():
            raise domain_violation(
                "powf",
                self.value,
                f"negative base with non-integer exponent {exponent!r}",
            )
        return Real(_power(self.value, exponent))

    def pow(self, power: RealLike) -> "Real":
        """Степень: int → powi, иначе powf."""
        if isinstance(power, int) and not isinstance(power, bool):
            return self.powi(power)
        return self.powf(power)

    def exp(self) -> "Real":
        """e в степени self."""
        try:
            return Real(math.exp(self.value))
        except OverflowError:
            return Real(math.inf)

    def ln(self) -> "Real":
        """
        Натуральный логарифм.

        Raises:
            DomainError: Если значение <= 0
        """
        if self.value <= 0.0:
            raise domain_violation("ln", self.value, "logarithm of a non-positive number")
        return Real(math.log(self.value))

    def log(self, base: RealLike) -> "Real":
        """
        Логарифм по основанию base.

        Raises:
            DomainError: Если значение <= 0, base <= 0 или base == 1
        """
        base_value = self._require_operand(base, "log")
        if base_value <= 0.0 or base_value == 1.0:
            raise domain_violation("log", base_value, "base must be positive and not 1")
        return Real(self.ln().value / math.log(base_value))

    # -------------------------------------------------------------------------
    # Тригонометрия (аргумент в радианах)
    # -------------------------------------------------------------------------

    def sin(self) -> "Real":
        return Real(math.sin(self.value)) if is_valid_float(self.value) else Real(math.nan)

    def cos(self) -> "Real":
        return Real(math.cos(self.value)) if is_valid_float(self.value) else Real(math.nan)

    def tan(self) -> "Real":
        return Real(math.tan(self.value)) if is_valid_float(self.value) else Real(math.nan)

    def sinh(self) -> "Real":
        try:
            return Real(math.sinh(self.value))
        except OverflowError:
            return Real(math.copysign(math.inf, self.value))

    def cosh(self) -> "Real":
        try:
            return Real(math.cosh(self.value))
        except OverflowError:
            return Real(math.inf)

    def tanh(self) -> "Real":
        return Real(math.tanh(self.value))

    # -------------------------------------------------------------------------
    # Обратные функции → Angle
    # -------------------------------------------------------------------------

    def arcsin(self) -> "Angle":
        """
        Арксинус.

        Raises:
            DomainError: Если значение вне [-1, 1]
        """
        from hebrides.elem.angle import Angle

        if self.value < -1.0 or self.value > 1.0:
            raise domain_violation("arcsin", self.value, "input outside [-1, 1]")
        return Angle.from_radians(math.asin(self.value))

    def arccos(self) -> "Angle":
        """
        Арккосинус.

        Raises:
            DomainError: Если значение вне [-1, 1]
        """
        from hebrides.elem.angle import Angle

        if self.value < -1.0 or self.value > 1.0:
            raise domain_violation("arccos", self.value, "input outside [-1, 1]")
        return Angle.from_radians(math.acos(self.value))

    def arctan(self) -> "Angle":
        from hebrides.elem.angle import Angle

        return Angle.from_radians(math.atan(self.value))

    def arcsinh(self) -> "Angle":
        from hebrides.elem.angle import Angle

        return Angle.from_radians(math.asinh(self.value))

    def arccosh(self) -> "Angle":
        """
        Гиперболический арккосинус.

        Raises:
            DomainError: Если значение < 1
        """
        from hebrides.elem.angle import Angle

        if self.value < 1.0:
            raise domain_violation("arccosh", self.value, "input below 1")
        return Angle.from_radians(math.acosh(self.value))

    def arctanh(self) -> "Angle":
        """
        Гиперболический арктангенс.

        Raises:
            DomainError: Если значение вне открытого интервала (-1, 1)
        """
        from hebrides.elem.angle import Angle

        if self.value <= -1.0 or self.value >= 1.0:
            raise domain_violation("arctanh", self.value, "input outside (-1, 1)")
        return Angle.from_radians(math.atanh(self.value))


Real.ZERO = Real(0.0)
Real.ONE = Real(1.0)
