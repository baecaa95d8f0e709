"""
A general mathematics library.

`Real` и `Complex` — реализации соответствующих математических объектов,
`Angle` — угловая величина с явной конверсией градусы/радианы,
`Vector` и `Matrix` — основа системы линейной алгебры.
"""

import logging

from hebrides.core.errors import ConversionError, DomainError, HebridesError
from hebrides.core.math.numerical_safeguards import DEFAULT_TOLERANCE, Tolerance
from hebrides.elem import Angle, Complex, Real
from hebrides.linal import Matrix, Vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Numeric types
    "Real",
    "Complex",
    "Angle",
    # Linear algebra
    "Vector",
    "Matrix",
    # Errors
    "HebridesError",
    "DomainError",
    "ConversionError",
    # Configuration
    "Tolerance",
    "DEFAULT_TOLERANCE",
]
