"""
Core primitives: ошибки, численные safeguards и контракты сериализации.

Модули этого пакета не зависят от конкретных числовых типов (Real, Complex,
Angle) и используются ими как фундамент.
"""

from hebrides.core.errors import ConversionError, DomainError, HebridesError

__all__ = [
    "HebridesError",
    "DomainError",
    "ConversionError",
]
