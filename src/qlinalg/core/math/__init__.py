"""
Core math modules для qlinalg

Численные примитивы, общие для всех доменных типов.
"""

# Numerical Safeguards
from qlinalg.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Config
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    # Checks
    is_close,
    is_valid_float,
)

# Formatting
from qlinalg.core.math.formatting import format_real

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Config
    "DEFAULT_TOLERANCE",
    "ToleranceConfig",
    # Numerical Safeguards — Checks
    "is_close",
    "is_valid_float",
    # Formatting
    "format_real",
]
