"""
Angle — Модель углового значения

Immutable Pydantic модель. Внутреннее представление — радианы;
градусы доступны только через явные конструкторы и конвертеры.

ЗАПРЕЩЕНО сравнивать Angle с голым float: единицы (радианы/градусы)
неоднозначны, поэтому Angle == 1.0 всегда False.
"""

import math
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

from hebrides.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    Tolerance,
    coerce_float,
    ieee_divide,
    is_close,
    is_number,
)
from hebrides.elem.real import Real

if TYPE_CHECKING:
    from hebrides.elem.complex import Complex


def _scalar(value: Any) -> Any:
    """Множитель для Angle: Real, int или float; иначе None."""
    if isinstance(value, Real):
        return value.value
    if is_number(value):
        return coerce_float(value, "Angle")
    return None


class Angle(BaseModel):
    """
    Модель углового значения.

    Examples:
        >>> Angle.from_degrees(180.0).in_radians()
        3.141592653589793
    """

    radians: float = Field(..., description="Значение угла в радианах")

    model_config = {"frozen": True}

    @field_validator("radians", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        if not is_number(v):
            raise ValueError(f"Angle requires an int or float, got {type(v).__name__}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы и конвертеры
    # -------------------------------------------------------------------------

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        """Создание Angle из значения в радианах."""
        return cls(radians=coerce_float(value, "Angle.from_radians"))

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        """Создание Angle из значения в градусах."""
        return cls(radians=cls.to_radians(coerce_float(value, "Angle.from_degrees")))

    @classmethod
    def from_complex(cls, value: "Complex") -> "Angle":
        """Аргумент комплексного числа (эквивалент value.azimuthal())."""
        return value.azimuthal()

    @staticmethod
    def to_degrees(value: float) -> float:
        """Конверсия значения в радианах в градусы."""
        return math.degrees(value)

    @staticmethod
    def to_radians(value: float) -> float:
        """Конверсия значения в градусах в радианы."""
        return math.radians(value)

    def in_radians(self) -> float:
        return self.radians

    def in_degrees(self) -> float:
        return self.to_degrees(self.radians)

    def to_complex(self) -> "Complex":
        """Единичный Complex e^(iθ)."""
        from hebrides.elem.complex import Complex

        return Complex(self.cos(), self.sin())

    def __float__(self) -> float:
        return self.radians

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.in_degrees()}°"

    def __repr__(self) -> str:
        return f"Angle(radians={self.radians!r})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians == other.radians

    def __hash__(self) -> int:
        return hash(self.radians)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians < other.radians

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians <= other.radians

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians > other.radians

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.radians >= other.radians

    def is_close(self, other: "Angle", tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Приближённое равенство (в радианах, без учёта периода)."""
        return is_close(self.radians, other.radians, tolerance)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(radians=self.radians + other.radians)

    def __sub__(self, other: Any) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(radians=self.radians - other.radians)

    def __neg__(self) -> "Angle":
        return Angle(radians=-self.radians)

    def __mul__(self, other: Any) -> "Angle":
        factor = _scalar(other)
        if factor is None:
            return NotImplemented
        return Angle(radians=self.radians * factor)

    def __rmul__(self, other: Any) -> "Angle":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        # Angle / Angle → безразмерное отношение
        if isinstance(other, Angle):
            return ieee_divide(self.radians, other.radians)
        divisor = _scalar(other)
        if divisor is None:
            return NotImplemented
        return Angle(radians=ieee_divide(self.radians, divisor))

    def normalized(self) -> "Angle":
        """Эквивалентный угол в [0, 2π)."""
        if not math.isfinite(self.radians):
            return Angle(radians=math.nan)
        wrapped = self.radians % math.tau
        # -1e-20 % tau округляется ровно до tau
        if wrapped >= math.tau:
            wrapped = 0.0
        return Angle(radians=wrapped)

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    def sin(self) -> Real:
        return Real(self.radians).sin()

    def cos(self) -> Real:
        return Real(self.radians).cos()

    def tan(self) -> Real:
        return Real(self.radians).tan()
