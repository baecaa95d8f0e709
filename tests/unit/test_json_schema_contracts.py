"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema контрактов сериализованных значений:
- Валидность самих схем
- Валидация правильных payload
- Детекция нарушений required полей и типов
- Интеграция с Pydantic моделями (model_dump → validate → model_validate)
"""

import pytest
from jsonschema import ValidationError

from hebrides import Angle, Complex, Real, Vector
from hebrides.core.contracts import (
    SCHEMA_DIR,
    AnglePayloadValidator,
    ComplexPayloadValidator,
    RealPayloadValidator,
    SchemaLoader,
    payload_validator,
    validate_angle_payload,
    validate_complex_payload,
    validate_model,
    validate_real_payload,
)


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    assert loader.load_schema("real")["required"] == ["value"]
    assert loader.load_schema("complex")["required"] == ["re", "im"]
    assert loader.load_schema("angle")["required"] == ["radians"]


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("complex")
    schema2 = loader.load_schema("complex")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_missing_directory(tmp_path):
    """Несуществующий каталог схем → RuntimeError."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Файл, не являющийся JSON Schema → ValueError."""
    (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - PAYLOAD VALIDATION
# =============================================================================


def test_real_payload_accepted():
    validator = RealPayloadValidator()
    validator.validate({"value": 1.5})  # Не должно выбросить исключение
    assert validator.is_valid({"value": -3})


def test_real_payload_rejects_wrong_type():
    """Строка и bool не являются number."""
    validator = RealPayloadValidator()

    with pytest.raises(ValidationError) as exc_info:
        validator.validate({"value": "1.5"})
    assert "is not of type 'number'" in str(exc_info.value)
    assert not validator.is_valid({"value": True})


def test_complex_payload_rejects_missing_required_field():
    """Валидация отклоняет данные без обязательных полей."""
    with pytest.raises(ValidationError) as exc_info:
        validate_complex_payload({"re": 1.0})
    assert "'im' is a required property" in str(exc_info.value)


def test_complex_payload_rejects_extra_field():
    assert not ComplexPayloadValidator().is_valid({"re": 1.0, "im": 2.0, "abs": 3.0})


def test_angle_payload_rejects_degrees_field():
    """Угол сериализуется только в радианах."""
    with pytest.raises(ValidationError):
        validate_angle_payload({"degrees": 90.0})


def test_iter_errors_returns_all_errors():
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = ComplexPayloadValidator()

    invalid_data = {
        "re": "1",  # type violation - НАРУШЕНИЕ
        "im": None,  # type violation - НАРУШЕНИЕ
        "phase": 0.0,  # additionalProperties - НАРУШЕНИЕ
    }

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) == 3


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_real_model_generates_valid_json():
    """Проверка, что Real.model_dump() проходит контракт."""
    payload = Real(2.5).model_dump()

    validate_real_payload(payload)
    assert Real.model_validate(payload) == Real(2.5)


def test_complex_model_generates_valid_json():
    """Компоненты Complex сериализуются как плоские числа."""
    payload = Complex(1.0, -2.0).model_dump()

    validate_complex_payload(payload)
    assert Complex.model_validate(payload) == Complex(1.0, -2.0)


def test_angle_model_generates_valid_json():
    payload = Angle.from_degrees(90.0).model_dump()

    AnglePayloadValidator().validate(payload)
    assert Angle.model_validate(payload) == Angle.from_degrees(90.0)


def test_validate_model_picks_contract_by_type():
    """validate_model выбирает контракт по типу модели и возвращает payload."""
    assert validate_model(Real(1.5)) == {"value": 1.5}
    assert validate_model(Complex(1.0, 2.0)) == {"re": 1.0, "im": 2.0}
    assert validate_model(Angle.from_radians(0.5)) == {"radians": 0.5}


def test_validate_model_without_contract():
    """Для Vector контракта нет."""
    with pytest.raises(FileNotFoundError):
        validate_model(Vector.new([1.0]))


def test_payload_validator_is_shared():
    assert payload_validator("complex") is payload_validator("complex")


def test_available_schemas():
    assert SchemaLoader().available() == ["angle", "complex", "real"]
    assert SchemaLoader().load_schema("real") is not None
    assert SCHEMA_DIR.is_dir()
