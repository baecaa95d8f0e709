"""
Elementary numeric types: Real, Complex, Angle.

Immutable Pydantic модели значений. Порядок импорта важен:
Angle зависит от Real, Complex — от обоих.
"""

from hebrides.elem.real import Real
from hebrides.elem.angle import Angle
from hebrides.elem.complex import Complex

__all__ = [
    "Real",
    "Angle",
    "Complex",
]
