"""
Errors — типизированные ошибки нарушения инвариантов

Все ошибки поднимаются синхронно в точке нарушения и не восстанавливаются
внутри библиотеки. Каждая ошибка также наследует встроенное исключение,
которое естественно ловить вызывающему коду:

- DivisionByZero    -> ZeroDivisionError (деление на (0, 0))
- DimensionMismatch -> ValueError        (векторы разной длины)
- ShapeMismatch     -> ValueError        (несовместимые формы матриц)
- OutOfRange        -> IndexError        (индекс элемента матрицы вне границ)
"""

from typing import Any


class LinearAlgebraError(ArithmeticError):
    """Базовый класс всех ошибок qlinalg."""

    pass


class DivisionByZero(LinearAlgebraError, ZeroDivisionError):
    """Деление комплексного числа на точный ноль (0, 0)."""

    pass


class DimensionMismatch(LinearAlgebraError, ValueError):
    """
    Операция над векторами разной длины.

    Attributes:
        expected: Длина левого операнда
        actual: Длина правого операнда
    """

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatch(LinearAlgebraError, ValueError):
    """
    Несовместимые формы матриц.

    Поднимается при конструировании (len(elements) != rows * columns),
    сложении матриц разной формы и умножении при lhs.columns != rhs.rows.

    Attributes:
        expected: Ожидаемая форма или количество элементов
        actual: Фактическая форма или количество элементов
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class OutOfRange(LinearAlgebraError, IndexError):
    """Индекс элемента матрицы за пределами (rows, columns)."""

    def __init__(self, message: str, index: tuple[int, int], shape: tuple[int, int]):
        super().__init__(message)
        self.index = index
        self.shape = shape
