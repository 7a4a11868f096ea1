"""
Payload Models — Pydantic модели JSON-представления комплексных типов

Immutable Pydantic модели (frozen=True), совместимые с JSON Schema из
schema/. Доменные типы не зависят от pydantic: конверсия выполняется
явно через from_domain() / to_domain().

Модели:
- ComplexNumberPayload  {real, imaginary}
- ComplexVectorPayload  {elements}
- ComplexMatrixPayload  {elements, rows, columns}, len(elements) == rows * columns
"""

from pydantic import BaseModel, Field, model_validator

from qlinalg.core.domain.complex_matrix import ComplexMatrix
from qlinalg.core.domain.complex_number import ComplexNumber
from qlinalg.core.domain.complex_vector import ComplexVector


# =============================================================================
# SCALAR
# =============================================================================


class ComplexNumberPayload(BaseModel):
    """JSON-представление ComplexNumber."""

    real: float = Field(..., description="Вещественная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_domain(cls, value: ComplexNumber) -> "ComplexNumberPayload":
        return cls(real=value.real, imaginary=value.imaginary)

    def to_domain(self) -> ComplexNumber:
        return ComplexNumber(self.real, self.imaginary)


# =============================================================================
# VECTOR
# =============================================================================


class ComplexVectorPayload(BaseModel):
    """JSON-представление ComplexVector."""

    elements: list[ComplexNumberPayload] = Field(..., description="Координаты вектора")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_domain(cls, value: ComplexVector) -> "ComplexVectorPayload":
        return cls(elements=[ComplexNumberPayload.from_domain(x) for x in value])

    def to_domain(self) -> ComplexVector:
        return ComplexVector(x.to_domain() for x in self.elements)


# =============================================================================
# MATRIX
# =============================================================================


class ComplexMatrixPayload(BaseModel):
    """
    JSON-представление ComplexMatrix (row-major).

    Проверяет инвариант формы на этапе валидации payload, чтобы
    невалидная матрица отклонялась до конструирования доменного типа.
    """

    elements: list[ComplexNumberPayload] = Field(
        ..., description="Элементы построчно (row-major)"
    )
    rows: int = Field(..., ge=0, description="Количество строк")
    columns: int = Field(..., ge=0, description="Количество столбцов")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_shape(self) -> "ComplexMatrixPayload":
        if len(self.elements) != self.rows * self.columns:
            raise ValueError(
                f"Matrix payload has {len(self.elements)} elements, "
                f"expected rows * columns = {self.rows * self.columns}"
            )
        return self

    @classmethod
    def from_domain(cls, value: ComplexMatrix) -> "ComplexMatrixPayload":
        return cls(
            elements=[ComplexNumberPayload.from_domain(x) for x in value.elements],
            rows=value.rows,
            columns=value.columns,
        )

    def to_domain(self) -> ComplexMatrix:
        return ComplexMatrix(
            (x.to_domain() for x in self.elements), self.rows, self.columns
        )
