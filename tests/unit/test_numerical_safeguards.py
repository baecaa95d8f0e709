"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Деление по правилам IEEE-754
2. Приведение входных значений к float
3. Epsilon-сравнения float и конфигурацию толерантности
4. Иерархию ошибок
"""

import math

import pytest

from hebrides.core.errors import ConversionError, DomainError, HebridesError
from hebrides.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    Tolerance,
    coerce_float,
    compare_with_tolerance,
    ieee_divide,
    is_close,
    is_number,
    is_valid_float,
)


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_normal_division(self) -> None:
        """Обычное деление работает корректно"""
        assert ieee_divide(10.0, 2.0) == 5.0
        assert ieee_divide(-10.0, 4.0) == -2.5

    def test_positive_over_zero_is_inf(self) -> None:
        """x / 0 → +inf для положительного x"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_sign_of_zero_respected(self) -> None:
        """Знак нуля в знаменателе определяет знак бесконечности"""
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        """0 / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_over_zero_is_nan(self) -> None:
        """NaN / 0 → NaN"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_never_raises_zero_division(self) -> None:
        """ZeroDivisionError никогда не пропагирует"""
        for numerator in (1.0, -1.0, 0.0, math.inf, math.nan):
            ieee_divide(numerator, 0.0)


# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ ТИПОВ
# =============================================================================


class TestCoerceFloat:
    """Тесты для coerce_float и is_number"""

    def test_int_and_float_accepted(self) -> None:
        """int и float приводятся к float"""
        assert coerce_float(3, "test") == 3.0
        assert isinstance(coerce_float(3, "test"), float)
        assert coerce_float(2.5, "test") == 2.5

    def test_bool_rejected(self) -> None:
        """bool не является числом"""
        assert not is_number(True)
        with pytest.raises(ConversionError, match="expected int or float"):
            coerce_float(True, "test")

    def test_string_rejected(self) -> None:
        """Строки не приводятся к float"""
        with pytest.raises(ConversionError) as exc_info:
            coerce_float("1.5", "Real.from_number")
        assert exc_info.value.operation == "Real.from_number"
        assert exc_info.value.value == "1.5"

    def test_huge_int_rejected(self) -> None:
        """int вне диапазона f64 → ConversionError"""
        with pytest.raises(ConversionError, match="too large"):
            coerce_float(10**400, "test")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e-10)
        assert is_valid_float(1e10)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_match(self) -> None:
        """Точное совпадение"""
        assert is_close(1.0, 1.0)
        assert is_close(0.0, 0.0)

    def test_close_values_within_tolerance(self) -> None:
        """Близкие значения в пределах толерантности"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1.0, 1.0 - 1e-10)

    def test_far_values_not_close(self) -> None:
        """Далёкие значения не близки"""
        assert not is_close(1.0, 1.1)

    def test_small_absolute_difference(self) -> None:
        """Абсолютная толерантность вблизи нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-10)

    def test_custom_tolerance(self) -> None:
        """Пользовательская толерантность работает"""
        loose = Tolerance(rel_tol=1e-1, abs_tol=1e-1)
        assert is_close(1.0, 1.01, loose)
        assert not is_close(1.0, 1.01)


class TestTolerance:
    """Тесты для конфигурации Tolerance"""

    def test_defaults(self) -> None:
        """Значения по умолчанию совпадают с epsilon-константами"""
        assert DEFAULT_TOLERANCE.rel_tol == EPS_FLOAT_COMPARE_REL
        assert DEFAULT_TOLERANCE.abs_tol == EPS_FLOAT_COMPARE_ABS

    def test_negative_tolerance_rejected(self) -> None:
        """Отрицательная толерантность запрещена"""
        with pytest.raises(ValueError, match="non-negative"):
            Tolerance(rel_tol=-1e-9)

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        with pytest.raises(AttributeError):
            DEFAULT_TOLERANCE.rel_tol = 0.5  # type: ignore


class TestCompareWithTolerance:
    """Тесты для compare_with_tolerance"""

    def test_ordering(self) -> None:
        """Обычное упорядочивание"""
        assert compare_with_tolerance(1.0, 2.0) == -1
        assert compare_with_tolerance(2.0, 1.0) == 1

    def test_within_tolerance_is_equal(self) -> None:
        """Разница в пределах tol → 0"""
        assert compare_with_tolerance(1.0, 1.0 + 1e-13) == 0
        assert compare_with_tolerance(1.0, 1.1, tol=0.2) == 0

    def test_infinities(self) -> None:
        """inf == inf, хотя inf - inf = NaN"""
        assert compare_with_tolerance(math.inf, math.inf) == 0
        assert compare_with_tolerance(-math.inf, math.inf) == -1

    def test_nan_rejected(self) -> None:
        """NaN не упорядочивается"""
        with pytest.raises(ValueError, match="NaN"):
            compare_with_tolerance(math.nan, 1.0)


# =============================================================================
# ТЕСТЫ ИЕРАРХИИ ОШИБОК
# =============================================================================


class TestErrorHierarchy:
    """Тесты для DomainError / ConversionError"""

    def test_domain_error_is_value_error(self) -> None:
        """DomainError ловится как ValueError и HebridesError"""
        assert issubclass(DomainError, ValueError)
        assert issubclass(DomainError, HebridesError)

    def test_conversion_error_is_value_error(self) -> None:
        """ConversionError ловится как ValueError и HebridesError"""
        assert issubclass(ConversionError, ValueError)
        assert issubclass(ConversionError, HebridesError)

    def test_error_payload(self) -> None:
        """operation и value доступны для диагностики"""
        err = DomainError("ln is undefined", operation="ln", value=0.0)
        assert str(err) == "ln is undefined"
        assert err.operation == "ln"
        assert err.value == 0.0
