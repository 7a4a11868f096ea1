"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Интеграция с Pydantic payload моделями
"""

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PayloadValidationError

from qlinalg.core.contracts import (
    ComplexMatrixPayload,
    ComplexMatrixValidator,
    ComplexNumberValidator,
    ComplexVectorValidator,
    SchemaLoader,
    validate_complex_matrix,
    validate_complex_number,
    validate_complex_vector,
)
from qlinalg.core.domain import ComplexMatrix

# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_complex_number():
    """Валидный complex_number."""
    return {"real": -1.0, "imaginary": 3.0}


@pytest.fixture
def valid_complex_vector():
    """Валидный complex_vector."""
    return {
        "elements": [
            {"real": 6.0, "imaginary": -4.0},
            {"real": 7.0, "imaginary": 3.0},
            {"real": 4.2, "imaginary": -8.1},
        ]
    }


@pytest.fixture
def valid_complex_matrix():
    """Валидная complex_matrix 2x2."""
    return {
        "elements": [
            {"real": 1.0, "imaginary": 0.0},
            {"real": 2.0, "imaginary": 0.0},
            {"real": 3.0, "imaginary": 0.0},
            {"real": 4.0, "imaginary": 0.0},
        ],
        "rows": 2,
        "columns": 2,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["complex_number", "complex_vector", "complex_matrix"])
    def test_schemas_load(self, schema_name: str) -> None:
        """Все схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["type"] == "object"

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("complex_number") is loader.load_schema("complex_number")

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("quaternion")

    def test_missing_directory_raises(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_raises(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COMPLEX NUMBER
# =============================================================================


class TestComplexNumberContract:
    """Тесты complex_number контракта"""

    def test_valid(self, valid_complex_number) -> None:
        validate_complex_number(valid_complex_number)
        assert ComplexNumberValidator().is_valid(valid_complex_number)

    def test_integers_are_numbers(self) -> None:
        validate_complex_number({"real": 1, "imaginary": -2})

    @pytest.mark.parametrize("missing", ["real", "imaginary"])
    def test_missing_required_field(self, valid_complex_number, missing: str) -> None:
        del valid_complex_number[missing]
        with pytest.raises(ValidationError, match=missing):
            validate_complex_number(valid_complex_number)

    def test_wrong_type(self, valid_complex_number) -> None:
        valid_complex_number["real"] = "1.0"
        with pytest.raises(ValidationError):
            validate_complex_number(valid_complex_number)

    def test_additional_properties_rejected(self, valid_complex_number) -> None:
        valid_complex_number["phase"] = 0.5
        assert not ComplexNumberValidator().is_valid(valid_complex_number)


# =============================================================================
# COMPLEX VECTOR
# =============================================================================


class TestComplexVectorContract:
    """Тесты complex_vector контракта"""

    def test_valid(self, valid_complex_vector) -> None:
        validate_complex_vector(valid_complex_vector)

    def test_empty_vector_valid(self) -> None:
        validate_complex_vector({"elements": []})

    def test_invalid_element(self, valid_complex_vector) -> None:
        valid_complex_vector["elements"][1] = {"real": 7.0}
        with pytest.raises(ValidationError):
            validate_complex_vector(valid_complex_vector)

    def test_iter_errors_reports_every_element(self, valid_complex_vector) -> None:
        valid_complex_vector["elements"][0] = {"real": "x", "imaginary": 0}
        valid_complex_vector["elements"][2] = {"imaginary": 0}
        errors = list(ComplexVectorValidator().iter_errors(valid_complex_vector))
        assert len(errors) == 2


# =============================================================================
# COMPLEX MATRIX
# =============================================================================


class TestComplexMatrixContract:
    """Тесты complex_matrix контракта"""

    def test_valid(self, valid_complex_matrix) -> None:
        validate_complex_matrix(valid_complex_matrix)

    def test_negative_rows_rejected(self, valid_complex_matrix) -> None:
        valid_complex_matrix["rows"] = -1
        with pytest.raises(ValidationError):
            validate_complex_matrix(valid_complex_matrix)

    def test_non_integer_columns_rejected(self, valid_complex_matrix) -> None:
        valid_complex_matrix["columns"] = 2.5
        assert not ComplexMatrixValidator().is_valid(valid_complex_matrix)

    def test_shape_invariant_not_expressible_in_schema(self, valid_complex_matrix) -> None:
        """Схема пропускает неверное количество элементов, модель — нет"""
        valid_complex_matrix["rows"] = 3
        validate_complex_matrix(valid_complex_matrix)
        with pytest.raises(PayloadValidationError):
            ComplexMatrixPayload.model_validate(valid_complex_matrix)

    def test_payload_dump_conforms_to_schema(self) -> None:
        """model_dump() доменной матрицы проходит схему"""
        matrix = ComplexMatrix.from_pairs([[(1, 2), (3, -4)], [(0, 0), (5.5, 1)]])
        validate_complex_matrix(ComplexMatrixPayload.from_domain(matrix).model_dump())
