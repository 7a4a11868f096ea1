"""
Numerical Safeguards — сравнение float с учётом машинной точности

Модуль содержит примитивы, которыми пользуются все доменные типы
(ComplexNumber, ComplexVector, ComplexMatrix) для приближённых сравнений:
- Epsilon-параметры по умолчанию
- ToleranceConfig — конфигурация толерантностей
- Проверка валидности float (NaN/Inf)
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное равенство (==) доменных типов НЕ использует epsilon
2. Приближённое сравнение всегда явно (is_close + ToleranceConfig)
3. Все операции детерминированы и не имеют скрытого состояния
"""

import math
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Нужна для сравнений около нуля, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Конфигурация толерантностей для приближённых сравнений.

    Используется в is_close доменных типов. Алгоритм сравнения:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        if not is_valid_float(self.rel_tol) or self.rel_tol < 0:
            raise ValueError(f"rel_tol must be a non-negative finite float, got {self.rel_tol}")
        if not is_valid_float(self.abs_tol) or self.abs_tol < 0:
            raise ValueError(f"abs_tol must be a non-negative finite float, got {self.abs_tol}")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Толерантности сравнения (default: DEFAULT_TOLERANCE)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(0.6, 0.6000000000000001)
        True
    """
    return math.isclose(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)

