"""
JSON Schema Contract Validators

Модуль для валидации JSON payload комплексных типов согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (поставляются внутри пакета, schema/):
- complex_number.json
- complex_vector.json
- complex_matrix.json

Ограничение: инвариант len(elements) == rows * columns не выражается в
JSON Schema и проверяется моделью ComplexMatrixPayload.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("Contract %s rejected payload: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ComplexNumberValidator(ContractValidator):
    """Валидатор для complex_number контракта."""

    def __init__(self):
        super().__init__("complex_number")


class ComplexVectorValidator(ContractValidator):
    """Валидатор для complex_vector контракта."""

    def __init__(self):
        super().__init__("complex_vector")


class ComplexMatrixValidator(ContractValidator):
    """Валидатор для complex_matrix контракта."""

    def __init__(self):
        super().__init__("complex_matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_number(data: Dict[str, Any]) -> None:
    """
    Валидация complex_number данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexNumberValidator().validate(data)


def validate_complex_vector(data: Dict[str, Any]) -> None:
    """
    Валидация complex_vector данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexVectorValidator().validate(data)


def validate_complex_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация complex_matrix данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexMatrixValidator().validate(data)
