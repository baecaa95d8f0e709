"""
Core math modules для hebrides

Общие численные примитивы: epsilon-параметры, толерантность сравнений,
деление по IEEE-754 и приведение входных значений к float.
"""

# Numerical Safeguards
from hebrides.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Configuration
    DEFAULT_TOLERANCE,
    Tolerance,
    # Division & coercion
    coerce_float,
    ieee_divide,
    is_number,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    is_valid_float,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Configuration
    "DEFAULT_TOLERANCE",
    "Tolerance",
    # Numerical Safeguards — Division & coercion
    "coerce_float",
    "ieee_divide",
    "is_number",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
    "is_valid_float",
]
