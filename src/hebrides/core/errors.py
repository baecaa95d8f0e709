"""
Errors — Иерархия исключений hebrides

Два вида ошибок:
- DomainError: операция не определена для данного входа
  (ln(0), sqrt(-1), arcsin(2), несовпадение размерностей и т.д.)
- ConversionError: значение нельзя представить в целевом типе
  (Complex с ненулевой мнимой частью → Real, строка → Real)

Оба типа наследуют ValueError, поэтому существующий код, ловящий
ValueError (как для math.log), продолжает работать.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class HebridesError(Exception):
    """
    Базовый класс для всех ошибок hebrides.

    Attributes:
        operation: Имя операции, вызвавшей ошибку (например, 'ln')
        value: Значение, на котором операция не определена
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.value = value


class DomainError(HebridesError, ValueError):
    """
    Операция не определена для данного входа.

    Примеры: логарифм нуля, arccos вне [-1, 1], корень из отрицательного Real.
    """

    pass


class ConversionError(HebridesError, ValueError):
    """
    Значение не может быть представлено в целевом типе.

    Пример: Real.try_from(Complex(1.0, 2.0)).
    """

    pass


def domain_violation(operation: str, value: Any, reason: str) -> DomainError:
    """
    Создание DomainError с записью события в лог.

    Args:
        operation: Имя операции
        value: Входное значение
        reason: Описание нарушенного ограничения

    Returns:
        DomainError, готовый к raise
    """
    logger.debug(
        "domain_violation",
        extra={"operation": operation, "value": value, "reason": reason},
    )
    return DomainError(
        f"{operation} is undefined for {value!r}: {reason}",
        operation=operation,
        value=value,
    )


def conversion_failure(operation: str, value: Any, reason: str) -> ConversionError:
    """Создание ConversionError с записью события в лог."""
    logger.debug(
        "conversion_failure",
        extra={"operation": operation, "value": value, "reason": reason},
    )
    return ConversionError(
        f"cannot convert {value!r} ({operation}): {reason}",
        operation=operation,
        value=value,
    )
