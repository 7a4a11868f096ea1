"""
Contract Validation Module

JSON Schema контракты и Pydantic payload модели для обмена комплексными
скалярами, векторами и матрицами.
"""

from .models import (
    ComplexMatrixPayload,
    ComplexNumberPayload,
    ComplexVectorPayload,
)
from .validators import (
    ComplexMatrixValidator,
    ComplexNumberValidator,
    ComplexVectorValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_matrix,
    validate_complex_number,
    validate_complex_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexNumberValidator",
    "ComplexVectorValidator",
    "ComplexMatrixValidator",
    # Payload models
    "ComplexNumberPayload",
    "ComplexVectorPayload",
    "ComplexMatrixPayload",
    # Functions
    "validate_complex_number",
    "validate_complex_vector",
    "validate_complex_matrix",
]
