"""
Tests for Pydantic Payload Models

Покрывает:
- Создание и валидация моделей
- JSON сериализация/десериализация
- Конверсию в/из доменных типов
- Проверку инварианта формы матрицы
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from qlinalg.core.contracts import (
    ComplexMatrixPayload,
    ComplexNumberPayload,
    ComplexVectorPayload,
)
from qlinalg.core.domain import ComplexMatrix, ComplexNumber, ComplexVector

# =============================================================================
# COMPLEX NUMBER
# =============================================================================


class TestComplexNumberPayload:
    """Тесты ComplexNumberPayload"""

    def test_round_trip_through_domain(self) -> None:
        z = ComplexNumber(-1, 3)
        assert ComplexNumberPayload.from_domain(z).to_domain() == z

    def test_json_round_trip(self) -> None:
        payload = ComplexNumberPayload(real=9.0, imaginary=-5.0)
        restored = ComplexNumberPayload.model_validate_json(payload.model_dump_json())
        assert restored == payload

    def test_missing_field_raises(self) -> None:
        with pytest.raises(ValidationError):
            ComplexNumberPayload.model_validate({"real": 1.0})

    def test_extra_field_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ComplexNumberPayload.model_validate({"real": 1.0, "imaginary": 0.0, "phase": 0.0})

    def test_frozen(self) -> None:
        payload = ComplexNumberPayload(real=1.0, imaginary=2.0)
        with pytest.raises(ValidationError):
            payload.real = 5.0  # type: ignore[misc]


# =============================================================================
# COMPLEX VECTOR
# =============================================================================


class TestComplexVectorPayload:
    """Тесты ComplexVectorPayload"""

    def test_round_trip_through_domain(self) -> None:
        v = ComplexVector.from_pairs([(6, -4), (7, 3), (4.2, -8.1)])
        payload = ComplexVectorPayload.from_domain(v)
        assert len(payload.elements) == 3
        assert payload.to_domain() == v

    def test_model_validate_nested(self) -> None:
        payload = ComplexVectorPayload.model_validate(
            {"elements": [{"real": 1, "imaginary": 2}, {"real": 3, "imaginary": 4}]}
        )
        assert payload.to_domain() == ComplexVector.from_pairs([(1, 2), (3, 4)])

    def test_empty_vector(self) -> None:
        assert ComplexVectorPayload(elements=[]).to_domain() == ComplexVector([])


# =============================================================================
# COMPLEX MATRIX
# =============================================================================


class TestComplexMatrixPayload:
    """Тесты ComplexMatrixPayload"""

    def test_round_trip_through_domain(self) -> None:
        m = ComplexMatrix.from_pairs([[(3, 2), (0, 0), (5, -6)], [(1, 0), (4, 2), (0, 1)]])
        payload = ComplexMatrixPayload.from_domain(m)
        assert (payload.rows, payload.columns) == (2, 3)
        assert payload.to_domain() == m

    def test_json_round_trip(self) -> None:
        m = ComplexMatrix.identity(3)
        text = ComplexMatrixPayload.from_domain(m).model_dump_json()
        assert ComplexMatrixPayload.model_validate_json(text).to_domain() == m

    def test_shape_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="expected rows \\* columns = 4"):
            ComplexMatrixPayload(
                elements=[ComplexNumberPayload(real=1.0, imaginary=0.0)],
                rows=2,
                columns=2,
            )

    def test_negative_dimension_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexMatrixPayload(elements=[], rows=-1, columns=0)
