"""
JSON Schema Contract Validators

Контракты сериализованных значений hebrides. Каждая модель значения
(Real, Complex, Angle) сериализуется через model_dump() в плоский JSON
объект из чисел; контракт фиксирует его форму:

- real.json:    {"value": number}
- complex.json: {"re": number, "im": number}
- angle.json:   {"radians": number}

Лишние ключи запрещены (additionalProperties: false), поэтому, например,
угол в градусах ({"degrees": 90}) контракт не проходит. Схемы лежат в
schema/ внутри пакета и устанавливаются вместе с ним как package data.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel


SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик контрактов из каталога schema_dir (по умолчанию SCHEMA_DIR).

    Каждая схема проходит meta-validation (Draft 2020-12) при первой
    загрузке и далее отдаётся из кэша.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> list[str]:
        """Имена контрактов, лежащих в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка контракта по имени ('real', 'complex', 'angle').

        Raises:
            FileNotFoundError: Если файла контракта нет
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка payload одного типа значений против его контракта.

    Принимает как готовый dict, так и саму модель (validate_model), которая
    предварительно сериализуется через model_dump().
    """

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None):
        self.schema_name = schema_name or self.schema_name
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload не соответствует контракту
        """
        self.validator.validate(data)

    def validate_model(self, value: BaseModel) -> Dict[str, Any]:
        """Сериализация модели и проверка результата; возвращает payload."""
        payload = value.model_dump()
        self.validate(payload)
        return payload

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения контракта, а не только первое."""
        return self.validator.iter_errors(data)


class RealPayloadValidator(ContractValidator):
    """{"value": x} для Real."""

    schema_name = "real"


class ComplexPayloadValidator(ContractValidator):
    """{"re": x, "im": y} для Complex: компоненты плоские, а не вложенные Real."""

    schema_name = "complex"


class AnglePayloadValidator(ContractValidator):
    """{"radians": x} для Angle: градусы не сериализуются."""

    schema_name = "angle"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def payload_validator(schema_name: str) -> ContractValidator:
    """Разделяемый валидатор контракта (создаётся один раз на имя)."""
    return ContractValidator(schema_name)


def validate_real_payload(data: Dict[str, Any]) -> None:
    payload_validator("real").validate(data)


def validate_complex_payload(data: Dict[str, Any]) -> None:
    payload_validator("complex").validate(data)


def validate_angle_payload(data: Dict[str, Any]) -> None:
    payload_validator("angle").validate(data)


def validate_model(value: BaseModel) -> Dict[str, Any]:
    """
    Проверка сериализации любой модели значения hebrides.

    Контракт выбирается по имени класса (Real → real.json).

    Raises:
        FileNotFoundError: Если для типа нет контракта
        ValidationError: Если payload не соответствует контракту
    """
    return payload_validator(type(value).__name__.lower()).validate_model(value)
