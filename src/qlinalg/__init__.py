"""
qlinalg — complex linear algebra for quantum computing exercises

Scalar complex arithmetic, fixed-size complex vectors and complex matrices
with dimension-safe operations.
"""

from qlinalg.core.domain import (
    Cartesian,
    ComplexMatrix,
    ComplexNumber,
    ComplexVector,
    DimensionMismatch,
    DivisionByZero,
    LinearAlgebraError,
    OutOfRange,
    PhaseConvention,
    Polar,
    ShapeMismatch,
)
from qlinalg.core.math import DEFAULT_TOLERANCE, ToleranceConfig

__version__ = "0.1.0"

__all__ = [
    "ComplexNumber",
    "Cartesian",
    "Polar",
    "PhaseConvention",
    "ComplexVector",
    "ComplexMatrix",
    "LinearAlgebraError",
    "DivisionByZero",
    "DimensionMismatch",
    "ShapeMismatch",
    "OutOfRange",
    "ToleranceConfig",
    "DEFAULT_TOLERANCE",
]
