"""
Contract Validation Module

Валидация сериализованных значений hebrides (Real, Complex, Angle)
против JSON Schema контрактов.
"""

from .validators import (
    AnglePayloadValidator,
    ComplexPayloadValidator,
    ContractValidator,
    RealPayloadValidator,
    SCHEMA_DIR,
    SchemaLoader,
    payload_validator,
    validate_angle_payload,
    validate_complex_payload,
    validate_model,
    validate_real_payload,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RealPayloadValidator",
    "ComplexPayloadValidator",
    "AnglePayloadValidator",
    # Functions
    "validate_real_payload",
    "validate_complex_payload",
    "validate_angle_payload",
    "validate_model",
    "payload_validator",
]
