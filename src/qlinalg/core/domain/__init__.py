"""
Domain models and value objects.

Contains the layered entities ComplexNumber -> ComplexVector -> ComplexMatrix,
their coordinate representations and the error taxonomy.
"""

from qlinalg.core.domain.complex_matrix import ComplexMatrix
from qlinalg.core.domain.complex_number import (
    Cartesian,
    ComplexNumber,
    PhaseConvention,
    Polar,
)
from qlinalg.core.domain.complex_vector import ComplexVector
from qlinalg.core.domain.errors import (
    DimensionMismatch,
    DivisionByZero,
    LinearAlgebraError,
    OutOfRange,
    ShapeMismatch,
)

__all__ = [
    # Scalar
    "ComplexNumber",
    "Cartesian",
    "Polar",
    "PhaseConvention",
    # Vector
    "ComplexVector",
    # Matrix
    "ComplexMatrix",
    # Errors
    "LinearAlgebraError",
    "DivisionByZero",
    "DimensionMismatch",
    "ShapeMismatch",
    "OutOfRange",
]
