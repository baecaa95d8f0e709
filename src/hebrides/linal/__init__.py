"""
Linear algebra: Vector и Matrix.

Конечномерные векторы и прямоугольные матрицы над числовыми типами
hebrides (int, float, Real, Complex).
"""

from hebrides.linal.matrix import Matrix
from hebrides.linal.vector import Vector

__all__ = [
    "Vector",
    "Matrix",
]
