"""
Matrix — Прямоугольная матрица

Immutable Pydantic модель: кортеж строк одинаковой длины.
Компоненты — любые числа библиотеки (int, float, Real, Complex).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все строки одной ненулевой длины, компоненты — числа
   (иначе ConversionError в Matrix.new)
2. Несовпадение размерностей в +, -, @ → DomainError
"""

from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator

from hebrides.core.errors import conversion_failure, domain_violation
from hebrides.elem import Real
from hebrides.linal.vector import Vector, _is_scalar, _scalar_components


def _rectangular_rows(rows: Iterable[Iterable[Any]]) -> tuple[tuple[Any, ...], ...]:
    """
    Нормализация строк в кортеж кортежей с проверкой прямоугольности.

    Raises:
        ConversionError: Если строки разной длины, пустые или содержат не числа
    """
    normalized = tuple(_scalar_components(row, "Matrix.new") for row in rows)
    widths = {len(row) for row in normalized}
    if len(widths) > 1:
        raise conversion_failure(
            "Matrix.new", sorted(widths), "rows must all have the same length"
        )
    if widths == {0}:
        raise conversion_failure("Matrix.new", len(normalized), "rows must not be empty")
    return normalized


class Matrix(BaseModel):
    """
    Модель прямоугольной матрицы.

    Examples:
        >>> Matrix.identity(2) @ Vector.new([3, 4])
        Vector([Real(3.0), Real(4.0)])
    """

    rows: tuple[tuple[Any, ...], ...] = Field(..., description="Строки матрицы")

    model_config = {"frozen": True}

    @field_validator("rows", mode="before")
    @classmethod
    def validate_rectangular(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            return v
        return _rectangular_rows(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, rows: Iterable[Iterable[Any]]) -> "Matrix":
        """
        Создание матрицы из строк.

        Raises:
            ConversionError: Если строки разной длины
        """
        return cls(rows=_rectangular_rows(rows))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size × size из Real.ONE / Real.ZERO."""
        return cls(
            rows=tuple(
                tuple(Real.ONE if i == j else Real.ZERO for j in range(size))
                for i in range(size)
            )
        )

    @classmethod
    def from_columns(cls, columns: Iterable[Vector]) -> "Matrix":
        return cls.new(columns).transpose()

    # -------------------------------------------------------------------------
    # Форма и доступ
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(число строк, число столбцов)."""
        if not self.rows:
            return (0, 0)
        return (len(self.rows), len(self.rows[0]))

    def row(self, index: int) -> Vector:
        return Vector(self.rows[index])

    def column(self, index: int) -> Vector:
        return Vector(row[index] for row in self.rows)

    def __getitem__(self, position: tuple[int, int]) -> Any:
        i, j = position
        return self.rows[i][j]

    def transpose(self) -> "Matrix":
        _, n_cols = self.shape
        return Matrix(rows=tuple(self.column(j).components for j in range(n_cols)))

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.rows]!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            a == b
            for row_a, row_b in zip(self.rows, other.rows)
            for a, b in zip(row_a, row_b)
        )

    def __hash__(self) -> int:
        return hash(self.rows)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _require_same_shape(self, other: "Matrix", operation: str) -> None:
        if self.shape != other.shape:
            raise domain_violation(
                operation, (self.shape, other.shape), "matrices must have the same shape"
            )

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "matrix_add")
        return Matrix(
            rows=tuple(
                tuple(a + b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )
        )

    def __sub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other, "matrix_sub")
        return Matrix(
            rows=tuple(
                tuple(a - b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )
        )

    def __mul__(self, other: Any) -> "Matrix":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix(rows=tuple(tuple(a * other for a in row) for row in self.rows))

    def __rmul__(self, other: Any) -> "Matrix":
        if not _is_scalar(other):
            return NotImplemented
        return Matrix(rows=tuple(tuple(other * a for a in row) for row in self.rows))

    def __matmul__(self, other: Any) -> Any:
        """
        Матричное произведение с Matrix или Vector.

        Raises:
            DomainError: Если число столбцов self не равно размерности other
        """
        if isinstance(other, Vector):
            if self.shape[1] != len(other):
                raise domain_violation(
                    "matmul", (self.shape, len(other)), "inner dimensions differ"
                )
            return Vector(self.row(i).dot(other) for i in range(self.shape[0]))

        if isinstance(other, Matrix):
            if self.shape[1] != other.shape[0]:
                raise domain_violation(
                    "matmul", (self.shape, other.shape), "inner dimensions differ"
                )
            return Matrix(
                rows=tuple(
                    tuple(self.row(i).dot(other.column(j)) for j in range(other.shape[1]))
                    for i in range(self.shape[0])
                )
            )

        return NotImplemented
