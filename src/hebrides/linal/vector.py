"""
Vector — Конечномерный вектор

Immutable Pydantic модель. Компоненты — любые числа библиотеки
(int, float, Real, Complex); арифметика делегируется самим компонентам.

Векторы разной размерности никогда не равны, а сложение/скалярное
произведение векторов разной размерности → DomainError.
"""

import math
from typing import Any, Iterable, Iterator

from pydantic import BaseModel, Field, field_validator

from hebrides.core.errors import conversion_failure, domain_violation
from hebrides.core.math.numerical_safeguards import EPS_CALC, coerce_float, is_number
from hebrides.elem import Complex, Real


def _is_scalar(value: Any) -> bool:
    return is_number(value) or isinstance(value, (Real, Complex, complex))


def _modulus(component: Any) -> float:
    if isinstance(component, Complex):
        return component.norm().value
    if isinstance(component, complex):
        return abs(component)
    if isinstance(component, Real):
        return abs(component.value)
    return abs(coerce_float(component, "Vector.norm"))


def _scalar_components(components: Iterable[Any], operation: str) -> tuple[Any, ...]:
    """
    Кортеж компонент с проверкой, что каждая является числом.

    Raises:
        ConversionError: Если компонента не int, float, Real или Complex
    """
    checked = tuple(components)
    for component in checked:
        if not _is_scalar(component):
            raise conversion_failure(
                operation,
                component,
                f"expected a number, Real or Complex, got {type(component).__name__}",
            )
    return checked


class Vector(BaseModel):
    """
    Модель конечномерного вектора.

    Examples:
        >>> Vector.new([1, 2, 3]) == Vector.new([1, 2, 3])
        True
        >>> Vector.new([3.0, 4.0]).norm()
        Real(5.0)
    """

    components: tuple[Any, ...] = Field(..., description="Компоненты вектора")

    model_config = {"frozen": True}

    def __init__(self, components: Iterable[Any], **data: Any) -> None:
        super().__init__(components=tuple(components), **data)

    @field_validator("components", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            return v
        return _scalar_components(v, "Vector")

    @classmethod
    def new(cls, components: Iterable[Any]) -> "Vector":
        """Создание вектора из последовательности компонент (копируется)."""
        return cls(_scalar_components(components, "Vector.new"))

    @classmethod
    def zeros(cls, dimension: int) -> "Vector":
        return cls(Real.ZERO for _ in range(dimension))

    @property
    def dimension(self) -> int:
        return len(self.components)

    # -------------------------------------------------------------------------
    # Протокол последовательности
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> Any:
        return self.components[index]

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.components)

    def __repr__(self) -> str:
        return f"Vector({list(self.components)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self.components) != len(other.components):
            return False
        return all(a == b for a, b in zip(self.components, other.components))

    def __hash__(self) -> int:
        return hash(self.components)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_same_dimension(self, other: "Vector", operation: str) -> None:
        if len(self) != len(other):
            raise domain_violation(
                operation,
                (len(self), len(other)),
                "vectors must have the same dimension",
            )

    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_dimension(other, "vector_add")
        return Vector(a + b for a, b in zip(self.components, other.components))

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_dimension(other, "vector_sub")
        return Vector(a - b for a, b in zip(self.components, other.components))

    def __neg__(self) -> "Vector":
        return Vector(-a for a in self.components)

    def __mul__(self, other: Any) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        return Vector(a * other for a in self.components)

    def __rmul__(self, other: Any) -> "Vector":
        if not _is_scalar(other):
            return NotImplemented
        return Vector(other * a for a in self.components)

    def dot(self, other: "Vector") -> Any:
        """
        Скалярное произведение Σ a_i * b_i (без комплексного сопряжения).

        Raises:
            DomainError: Если размерности не совпадают
        """
        self._require_same_dimension(other, "dot")
        return sum((a * b for a, b in zip(self.components, other.components)), Real.ZERO)

    def norm(self) -> Real:
        """Евклидова норма (для Complex компонент используется модуль)."""
        return Real(math.hypot(*(_modulus(c) for c in self.components)))

    def normalized(self) -> "Vector":
        """
        Единичный вектор того же направления.

        Raises:
            DomainError: Если норма меньше EPS_CALC
        """
        length = self.norm()
        if length.value < EPS_CALC:
            raise domain_violation("normalized", length.value, "vector norm is zero")
        return self * (1.0 / length.value)
