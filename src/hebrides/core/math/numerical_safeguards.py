"""
Numerical Safeguards — Примитивы безопасной арифметики

Модуль обеспечивает единые правила работы с float для всех типов hebrides:
- Epsilon-параметры и конфигурация толерантности для приближённых сравнений
- Деление по правилам IEEE-754 (±inf / NaN вместо ZeroDivisionError)
- Приведение входных значений к float с явной ошибкой конверсии
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не бросает ZeroDivisionError (результат как у f64)
2. NaN пропагирует через арифметику, а не заменяется fallback-значением
3. bool и строки никогда не принимаются как числа
4. Все операции детерминированы и воспроизводимы
"""

import math
from dataclasses import dataclass
from typing import Any, Final

from hebrides.core.errors import conversion_failure

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КОНФИГУРАЦИЯ ТОЛЕРАНТНОСТИ
# =============================================================================


@dataclass(frozen=True)
class Tolerance:
    """Конфигурация приближённого сравнения float.

    Используется методами is_close у Real, Complex и Angle.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if self.rel_tol < 0 or self.abs_tol < 0:
            raise ValueError(
                f"tolerances must be non-negative, got rel_tol={self.rel_tol}, "
                f"abs_tol={self.abs_tol}"
            )


DEFAULT_TOLERANCE: Final[Tolerance] = Tolerance()


# =============================================================================
# ДЕЛЕНИЕ И ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по правилам IEEE-754.

    Python бросает ZeroDivisionError при делении на 0.0; f64 возвращает
    ±inf или NaN. Знак бесконечности учитывает знак нуля в знаменателе.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, либо ±inf / NaN при нулевом знаменателе

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator


def is_number(value: Any) -> bool:
    """Проверка, что значение — int или float (bool не считается числом)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_float(value: Any, operation: str) -> float:
    """
    Приведение int/float к float.

    Args:
        value: Входное значение
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        ConversionError: Если value не int/float или int не помещается в f64
    """
    if not is_number(value):
        raise conversion_failure(
            operation, value, f"expected int or float, got {type(value).__name__}"
        )

    try:
        return float(value)
    except OverflowError:
        raise conversion_failure(operation, value, "integer too large for float")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    tolerance: Tolerance = DEFAULT_TOLERANCE,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Толерантности сравнения (default: DEFAULT_TOLERANCE)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Raises:
        ValueError: Если a или b — NaN (порядок не определён)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    if math.isnan(a) or math.isnan(b):
        raise ValueError(f"cannot order NaN: a={a}, b={b}")

    if a == b:
        # Покрывает inf == inf, где a - b даёт NaN
        return 0

    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
