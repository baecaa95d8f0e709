"""
Complex — Модель комплексного числа

Immutable Pydantic модель: пара Real (re, im) в алгебраической форме.

Поддерживает:
- Арифметику с Complex, Real, int, float и встроенным complex
- Деление по алгоритму Смита (устойчиво к переполнению промежуточных значений)
- Комплексные трансцендентные функции (главные ветви)
- Норму, аргумент (azimuthal) и полярную форму

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ln(0) и особые точки arctan(±i), arctanh(±1) → DomainError
2. Деление на ноль: компоненты делятся на вещественный ноль (±inf / NaN);
   NaN в делителе даёт (NaN, NaN)
3. Переполнение в exp, sin, cos, sinh, cosh даёт ±inf, а не OverflowError
4. hash согласован с == для float, Real и встроенного complex
"""

import cmath
import math
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, Field, field_serializer

from hebrides.core.errors import domain_violation
from hebrides.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    Tolerance,
    coerce_float,
    ieee_divide,
    is_close,
    is_number,
)
from hebrides.elem.angle import Angle
from hebrides.elem.real import Real


def _operand(other: Any) -> Optional[tuple[float, float]]:
    """Операнд как пара (re, im), либо None если тип не поддерживается."""
    if isinstance(other, Complex):
        return other.re.value, other.im.value
    if isinstance(other, Real):
        return other.value, 0.0
    if is_number(other):
        return coerce_float(other, "Complex"), 0.0
    if isinstance(other, complex):
        return other.real, other.imag
    return None


def _divide(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """(a + bi) / (c + di) по алгоритму Смита."""
    if math.isnan(c) or math.isnan(d):
        return math.nan, math.nan

    if c == 0.0 and d == 0.0:
        return ieee_divide(a, c), ieee_divide(b, c)

    if abs(c) >= abs(d):
        ratio = d / c
        denom = c + d * ratio
        return (a + b * ratio) / denom, (b - a * ratio) / denom

    ratio = c / d
    denom = c * ratio + d
    return (a * ratio + b) / denom, (b * ratio - a) / denom


def _scaled(magnitude: float, factor: float) -> float:
    """magnitude * factor; точный ноль factor обнуляет и бесконечный magnitude."""
    if factor == 0.0 and math.isinf(magnitude):
        return math.copysign(0.0, magnitude) * factor
    return magnitude * factor


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Модель комплексного числа.

    Immutable модель (frozen=True). Сериализуется как {"re": x, "im": y}.

    Examples:
        >>> Complex(1.0, 2.0) * Complex.I
        Complex(re=-2.0, im=1.0)
        >>> Complex(3.0, 4.0).norm()
        Real(5.0)
    """

    re: Real = Field(..., description="Вещественная часть")
    im: Real = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]

    def __init__(self, re: Any, im: Any, **data: Any) -> None:
        super().__init__(re=re, im=im, **data)

    @field_serializer("re", "im")
    def serialize_part(self, part: Real) -> float:
        return part.value

    # -------------------------------------------------------------------------
    # Конструкторы и конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, re: float, im: float) -> "Complex":
        """Создание Complex из двух float."""
        return cls(re, im)

    @classmethod
    def from_real(cls, value: Real) -> "Complex":
        return cls(value, 0.0)

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Конверсия встроенного complex."""
        return cls(value.real, value.imag)

    @classmethod
    def from_polar(cls, norm: Any, angle: Angle) -> "Complex":
        """
        Создание из полярной формы: norm * e^(iθ).

        Args:
            norm: Модуль (Real, int или float)
            angle: Аргумент
        """
        r = norm.value if isinstance(norm, Real) else coerce_float(norm, "Complex.from_polar")
        unit = angle.to_complex()
        return cls(r * unit.re.value, r * unit.im.value)

    def to_polar(self) -> tuple[Real, Angle]:
        """Полярная форма: (норма, аргумент)."""
        return self.norm(), self.azimuthal()

    def __complex__(self) -> complex:
        return complex(self.re.value, self.im.value)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        im = self.im.value
        if math.copysign(1.0, im) < 0:
            return f"{self.re.value} - {-im}i"
        return f"{self.re.value} + {im}i"

    def __repr__(self) -> str:
        return f"Complex(re={self.re.value!r}, im={self.im.value!r})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if is_number(other):
            # int сравнивается точно, без конверсии во float
            return self.im.value == 0.0 and self.re.value == other
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return self.re.value == pair[0] and self.im.value == pair[1]

    def __hash__(self) -> int:
        return hash(complex(self.re.value, self.im.value))

    def is_close(self, other: Any, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Приближённое равенство: по обеим компонентам."""
        pair = _operand(other)
        if pair is None:
            return False
        return is_close(self.re.value, pair[0], tolerance) and is_close(
            self.im.value, pair[1], tolerance
        )

    def is_real(self) -> bool:
        """Мнимая часть равна нулю."""
        return self.im.value == 0.0

    def is_imaginary(self) -> bool:
        """Вещественная часть равна нулю."""
        return self.re.value == 0.0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return Complex(self.re.value + pair[0], self.im.value + pair[1])

    def __radd__(self, other: Any) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return Complex(self.re.value - pair[0], self.im.value - pair[1])

    def __rsub__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return Complex(pair[0] - self.re.value, pair[1] - self.im.value)

    def __mul__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        a, b = self.re.value, self.im.value
        c, d = pair
        return Complex(a * c - b * d, a * d + b * c)

    def __rmul__(self, other: Any) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return Complex(*_divide(self.re.value, self.im.value, pair[0], pair[1]))

    def __rtruediv__(self, other: Any) -> "Complex":
        pair = _operand(other)
        if pair is None:
            return NotImplemented
        return Complex(*_divide(pair[0], pair[1], self.re.value, self.im.value))

    def __neg__(self) -> "Complex":
        return Complex(-self.re.value, -self.im.value)

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> "Complex":
        return self.abs()

    def conjugate(self) -> "Complex":
        return Complex(self.re.value, -self.im.value)

    def squared(self) -> "Complex":
        """self * self."""
        return self * self

    # -------------------------------------------------------------------------
    # Норма и аргумент
    # -------------------------------------------------------------------------

    def norm(self) -> Real:
        """Модуль |z| (без переполнения промежуточного re² + im²)."""
        return Real(math.hypot(self.re.value, self.im.value))

    def abs(self) -> "Complex":
        """Абсолютное значение (норма) как Complex с нулевой мнимой частью."""
        return Complex(self.norm(), 0.0)

    def azimuthal(self) -> Angle:
        """Аргумент (азимутальный угол) в (-π, π]."""
        return Angle.from_radians(math.atan2(self.im.value, self.re.value))

    # -------------------------------------------------------------------------
    # Трансцендентные функции
    # -------------------------------------------------------------------------

    def _apply(self, func: Callable[[complex], complex], operation: str) -> "Complex":
        """Применение функции cmath; ValueError cmath → DomainError."""
        try:
            result = func(complex(self))
        except ValueError:
            raise domain_violation(operation, complex(self), "singular point")
        return Complex.from_builtin(result)

    def exp(self) -> "Complex":
        """e^z = e^re * (cos(im) + i sin(im))."""
        magnitude = Real(self.re.value).exp().value
        if self.im.value == 0.0:
            return Complex(magnitude, self.im.value)
        return Complex(
            magnitude * Real(self.im.value).cos().value,
            magnitude * Real(self.im.value).sin().value,
        )

    def ln(self) -> "Complex":
        """
        Главная ветвь натурального логарифма.

        Raises:
            DomainError: Для нуля
        """
        if self.re.value == 0.0 and self.im.value == 0.0:
            raise domain_violation("ln", complex(self), "logarithm of zero")
        return self._apply(cmath.log, "ln")

    def sqrt(self) -> "Complex":
        """Главный квадратный корень."""
        return self._apply(cmath.sqrt, "sqrt")

    # sin, cos, sinh, cosh раскладываются на вещественные функции Real,
    # которые дают ±inf при переполнении вместо OverflowError cmath

    def sin(self) -> "Complex":
        """sin(x + iy) = sin x cosh y + i cos x sinh y."""
        x, y = Real(self.re.value), Real(self.im.value)
        return Complex(
            _scaled(y.cosh().value, x.sin().value),
            _scaled(y.sinh().value, x.cos().value),
        )

    def cos(self) -> "Complex":
        """cos(x + iy) = cos x cosh y - i sin x sinh y."""
        x, y = Real(self.re.value), Real(self.im.value)
        return Complex(
            _scaled(y.cosh().value, x.cos().value),
            -_scaled(y.sinh().value, x.sin().value),
        )

    def tan(self) -> "Complex":
        return self._apply(cmath.tan, "tan")

    def sinh(self) -> "Complex":
        """sinh(x + iy) = sinh x cos y + i cosh x sin y."""
        x, y = Real(self.re.value), Real(self.im.value)
        return Complex(
            _scaled(x.sinh().value, y.cos().value),
            _scaled(x.cosh().value, y.sin().value),
        )

    def cosh(self) -> "Complex":
        """cosh(x + iy) = cosh x cos y + i sinh x sin y."""
        x, y = Real(self.re.value), Real(self.im.value)
        return Complex(
            _scaled(x.cosh().value, y.cos().value),
            _scaled(x.sinh().value, y.sin().value),
        )

    def tanh(self) -> "Complex":
        return self._apply(cmath.tanh, "tanh")

    def arcsin(self) -> "Complex":
        return self._apply(cmath.asin, "arcsin")

    def arccos(self) -> "Complex":
        return self._apply(cmath.acos, "arccos")

    def arctan(self) -> "Complex":
        """Комплексный арктангенс. Raises DomainError в точках ±i."""
        return self._apply(cmath.atan, "arctan")

    def arcsinh(self) -> "Complex":
        return self._apply(cmath.asinh, "arcsinh")

    def arccosh(self) -> "Complex":
        return self._apply(cmath.acosh, "arccosh")

    def arctanh(self) -> "Complex":
        """Комплексный гиперболический арктангенс. Raises DomainError в точках ±1."""
        return self._apply(cmath.atanh, "arctanh")


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
