"""
ComplexVector — вектор фиксированной длины над комплексными числами

Упорядоченная неизменяемая последовательность ComplexNumber. Длина N
фиксируется при конструировании; все операнды бинарной операции обязаны
иметь одну длину, иначе DimensionMismatch.

ФОРМУЛЫ:
    (v1 + v2)[i] = v1[i] + v2[i]
    (v * c)[i]   = v[i] * c
    (-v)[i]      = -v[i]
    v1 - v2      = v1 + (-v2)
    <v1, v2>     = sum(conj(v1[i]) * v2[i])    (сопряжённо-линейно по v1)
    ||v||        = sqrt(Re <v, v>)
    d(v1, v2)    = ||v1 - v2||
"""

import logging
import math
from typing import Iterable, Iterator

from qlinalg.core.domain.complex_number import ComplexNumber
from qlinalg.core.domain.errors import DimensionMismatch
from qlinalg.core.math.numerical_safeguards import DEFAULT_TOLERANCE, ToleranceConfig

logger = logging.getLogger(__name__)


class ComplexVector:
    """
    Комплексный вектор фиксированной длины.

    Immutable: элементы хранятся в tuple, все операции возвращают новый вектор.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[ComplexNumber]):
        items = tuple(elements)
        for position, item in enumerate(items):
            if not isinstance(item, ComplexNumber):
                raise TypeError(
                    f"ComplexVector element {position} must be ComplexNumber, "
                    f"got {type(item).__name__}"
                )
        self._elements = items

    @classmethod
    def zeros(cls, dimension: int) -> "ComplexVector":
        """Нулевой вектор длины dimension."""
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")
        return cls(ComplexNumber.zero() for _ in range(dimension))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "ComplexVector":
        """Конструктор из пар (real, imaginary)."""
        return cls(ComplexNumber(real, imaginary) for real, imaginary in pairs)

    @property
    def elements(self) -> tuple[ComplexNumber, ...]:
        return self._elements

    @property
    def dimension(self) -> int:
        return len(self._elements)

    def _check_dimension(self, other: "ComplexVector", operation: str) -> None:
        if len(self) != len(other):
            logger.debug(
                "Vector dimension mismatch in %s: %d != %d", operation, len(self), len(other)
            )
            raise DimensionMismatch(
                f"Cannot {operation} vectors of different size: {len(self)} != {len(other)}",
                expected=len(self),
                actual=len(other),
            )

    # ---------- vector space operations ----------

    def add(self, other: "ComplexVector") -> "ComplexVector":
        """
        Покоординатное сложение.

        Raises:
            DimensionMismatch: Если длины векторов различаются
        """
        self._check_dimension(other, "add")
        return ComplexVector(x + y for x, y in zip(self._elements, other._elements))

    def scalar_multiply(self, scalar: ComplexNumber) -> "ComplexVector":
        return ComplexVector(x * scalar for x in self._elements)

    def negate(self) -> "ComplexVector":
        """Аддитивная обратная: покоординатное отрицание."""
        return ComplexVector(-x for x in self._elements)

    def subtract(self, other: "ComplexVector") -> "ComplexVector":
        self._check_dimension(other, "subtract")
        return self.add(other.negate())

    def conjugate(self) -> "ComplexVector":
        return ComplexVector(x.conjugate() for x in self._elements)

    # ---------- inner product structure ----------

    def inner_product(self, other: "ComplexVector") -> ComplexNumber:
        """
        Скалярное произведение <self, other> = sum(conj(self[i]) * other[i]).

        Сопряжённо-линейно по первому аргументу, линейно по второму:
        inner_product(v1, v2) == conjugate(inner_product(v2, v1)).

        Raises:
            DimensionMismatch: Если длины векторов различаются
        """
        self._check_dimension(other, "take inner product of")
        return ComplexNumber.sum(
            x.conjugate() * y for x, y in zip(self._elements, other._elements)
        )

    def norm(self) -> float:
        """
        Норма sqrt(<v, v>).

        Мнимая часть <v, v> всегда 0 (conj(z) * z = |z|^2), используется
        только вещественная часть.
        """
        return math.sqrt(self.inner_product(self).real)

    def distance_to(self, other: "ComplexVector") -> float:
        """
        Расстояние ||self - other||.

        Симметрично точно (а не приближённо): v2 - v1 == -(v1 - v2)
        покоординатно, а norm(-x) == norm(x).
        """
        return self.subtract(other).norm()

    # ---------- comparison ----------

    def is_close(
        self, other: "ComplexVector", tolerance: ToleranceConfig = DEFAULT_TOLERANCE
    ) -> bool:
        """Приближённое покоординатное сравнение; векторы разной длины не близки."""
        if len(self) != len(other):
            return False
        return all(x.is_close(y, tolerance) for x, y in zip(self._elements, other._elements))

    # ---------- sequence protocol ----------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ComplexNumber]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> ComplexNumber:
        return self._elements[index]

    # ---------- dunder sugar ----------

    def __add__(self, other: object) -> "ComplexVector":
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexVector":
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "ComplexVector":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.scalar_multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> "ComplexVector":
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"ComplexVector({list(self._elements)!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self._elements) + "]"
