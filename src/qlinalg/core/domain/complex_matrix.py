"""
ComplexMatrix — прямоугольная матрица над комплексными числами

Хранение: плоский список элементов в row-major порядке + (rows, columns).
Смещение элемента [row, column] = row * columns + column.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(elements) == rows * columns (проверяется при конструировании)
2. Сложение требует одинаковых dimensions()
3. Умножение требует lhs.columns == rhs.rows, результат (lhs.rows, rhs.columns)
4. Матрица-вектор вычисляется ТОЛЬКО через matrix x matrix:
   m * from_vector(v), затем столбец результата -> ComplexVector
5. Арифметика никогда не изменяет операнды; единственная мутация —
   явная запись элемента m[row, column] = value

ФОРМУЛЫ:
    (m1 * m2)[j, k] = sum_h m1[j, h] * m2[h, k],  h = 0 .. m1.columns - 1
    adjoint(m)[j, k] = conj(m[k, j])
"""

import logging
from typing import Iterable, Iterator, Sequence

from qlinalg.core.domain.complex_number import ComplexNumber
from qlinalg.core.domain.complex_vector import ComplexVector
from qlinalg.core.domain.errors import OutOfRange, ShapeMismatch
from qlinalg.core.math.numerical_safeguards import DEFAULT_TOLERANCE, ToleranceConfig

logger = logging.getLogger(__name__)


class ComplexMatrix:
    """
    Комплексная матрица rows x columns.

    Матрица с columns == 1 изоморфна ComplexVector длины rows и служит
    мостом для композиции векторов и матриц.
    """

    __slots__ = ("_elements", "_rows", "_columns")

    # Элементы изменяемы через __setitem__, поэтому матрица не hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, elements: Iterable[ComplexNumber], rows: int, columns: int):
        """
        Конструктор из плоского списка в row-major порядке.

        Args:
            elements: Элементы построчно
            rows: Количество строк
            columns: Количество столбцов

        Raises:
            ShapeMismatch: Если len(elements) != rows * columns или форма отрицательная
            TypeError: Если элемент не ComplexNumber
        """
        items = list(elements)

        if rows < 0 or columns < 0:
            raise ShapeMismatch(
                f"Matrix dimensions must be non-negative, got {rows}x{columns}",
                actual=(rows, columns),
            )

        if len(items) != rows * columns:
            logger.debug(
                "Matrix construction shape mismatch: %d elements for %dx%d",
                len(items),
                rows,
                columns,
            )
            raise ShapeMismatch(
                f"Cannot build a {rows}x{columns} matrix from {len(items)} elements",
                expected=rows * columns,
                actual=len(items),
            )

        for position, item in enumerate(items):
            if not isinstance(item, ComplexNumber):
                raise TypeError(
                    f"ComplexMatrix element {position} must be ComplexNumber, "
                    f"got {type(item).__name__}"
                )

        self._elements = items
        self._rows = rows
        self._columns = columns

    # ---------- constructors ----------

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "ComplexMatrix":
        return cls((ComplexNumber.zero() for _ in range(rows * columns)), rows, columns)

    @classmethod
    def identity(cls, size: int) -> "ComplexMatrix":
        """Единичная матрица size x size."""
        matrix = cls.zeros(size, size)
        for i in range(size):
            matrix[i, i] = ComplexNumber.one()
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[ComplexNumber]]) -> "ComplexMatrix":
        """
        Конструктор из списка строк.

        Raises:
            ShapeMismatch: Если строки разной длины
        """
        columns = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != columns:
                raise ShapeMismatch(
                    f"Row {index} has {len(row)} elements, expected {columns}",
                    expected=columns,
                    actual=len(row),
                )
        return cls((item for row in rows for item in row), len(rows), columns)

    @classmethod
    def from_pairs(
        cls, rows: Sequence[Sequence[tuple[float, float]]]
    ) -> "ComplexMatrix":
        """Конструктор из строк пар (real, imaginary)."""
        return cls.from_rows(
            [[ComplexNumber(real, imaginary) for real, imaginary in row] for row in rows]
        )

    @classmethod
    def from_vector(cls, vector: ComplexVector) -> "ComplexMatrix":
        """Вектор длины N -> матрица N x 1 (единственный путь в matrix x matrix)."""
        return cls(vector.elements, len(vector), 1)

    # ---------- shape & access ----------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def elements(self) -> tuple[ComplexNumber, ...]:
        return tuple(self._elements)

    def dimensions(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def _offset(self, row: int, column: int) -> int:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            logger.debug(
                "Matrix index (%d, %d) out of range for %dx%d",
                row,
                column,
                self._rows,
                self._columns,
            )
            raise OutOfRange(
                f"Index ({row}, {column}) out of range for "
                f"{self._rows}x{self._columns} matrix",
                index=(row, column),
                shape=self.dimensions(),
            )
        return row * self._columns + column

    def at(self, row: int, column: int) -> ComplexNumber:
        """
        Элемент [row, column].

        Raises:
            OutOfRange: Если row >= rows или column >= columns (или отрицательные)
        """
        return self._elements[self._offset(row, column)]

    def iter_rows(self) -> Iterator[tuple[ComplexNumber, ...]]:
        for row in range(self._rows):
            start = row * self._columns
            yield tuple(self._elements[start : start + self._columns])

    # ---------- algebra ----------

    def add(self, other: "ComplexMatrix") -> "ComplexMatrix":
        """
        Поэлементное сложение.

        Raises:
            ShapeMismatch: Если dimensions() различаются
        """
        if self.dimensions() != other.dimensions():
            logger.debug(
                "Matrix addition shape mismatch: %s != %s",
                self.dimensions(),
                other.dimensions(),
            )
            raise ShapeMismatch(
                f"Cannot add matrices of different shape: "
                f"{self._rows}x{self._columns} and {other._rows}x{other._columns}",
                expected=self.dimensions(),
                actual=other.dimensions(),
            )
        return ComplexMatrix(
            (x + y for x, y in zip(self._elements, other._elements)),
            self._rows,
            self._columns,
        )

    def scalar_multiply(self, scalar: ComplexNumber) -> "ComplexMatrix":
        return ComplexMatrix(
            (scalar * x for x in self._elements), self._rows, self._columns
        )

    def negate(self) -> "ComplexMatrix":
        """Аддитивная обратная: поэлементное отрицание."""
        return ComplexMatrix((-x for x in self._elements), self._rows, self._columns)

    def subtract(self, other: "ComplexMatrix") -> "ComplexMatrix":
        return self.add(other.negate())

    def multiply(self, other: "ComplexMatrix") -> "ComplexMatrix":
        """
        Стандартное произведение матриц.

        Args:
            other: Правый операнд (other.rows == self.columns)

        Returns:
            Матрица (self.rows, other.columns)

        Raises:
            ShapeMismatch: Если self.columns != other.rows
        """
        if self._columns != other._rows:
            logger.debug(
                "Matrix product shape mismatch: %s x %s",
                self.dimensions(),
                other.dimensions(),
            )
            raise ShapeMismatch(
                f"Cannot multiply {self._rows}x{self._columns} matrix by "
                f"{other._rows}x{other._columns} matrix",
                expected=self._columns,
                actual=other._rows,
            )

        result = ComplexMatrix.zeros(self._rows, other._columns)

        for j in range(self._rows):
            for k in range(other._columns):
                accumulator = ComplexNumber.zero()
                for h in range(self._columns):
                    accumulator = accumulator + self.at(j, h) * other.at(h, k)
                result[j, k] = accumulator

        return result

    def multiply_vector(self, vector: ComplexVector) -> ComplexVector:
        """
        Произведение матрицы на вектор.

        Вычисляется как self.multiply(from_vector(vector)), столбец результата
        интерпретируется как вектор длины self.rows.

        Raises:
            ShapeMismatch: Если len(vector) != self.columns
        """
        return self.multiply(ComplexMatrix.from_vector(vector)).to_vector()

    def to_vector(self) -> ComplexVector:
        """
        Матрица N x 1 -> вектор длины N.

        Raises:
            ShapeMismatch: Если columns != 1
        """
        if self._columns != 1:
            raise ShapeMismatch(
                f"Only single-column matrices convert to vectors, got "
                f"{self._rows}x{self._columns}",
                expected=1,
                actual=self._columns,
            )
        return ComplexVector(self._elements)

    def transpose(self) -> "ComplexMatrix":
        return ComplexMatrix(
            (self.at(j, k) for k in range(self._columns) for j in range(self._rows)),
            self._columns,
            self._rows,
        )

    def conjugate(self) -> "ComplexMatrix":
        return ComplexMatrix(
            (x.conjugate() for x in self._elements), self._rows, self._columns
        )

    def adjoint(self) -> "ComplexMatrix":
        """Эрмитово сопряжение (dagger): транспонирование + сопряжение."""
        return self.transpose().conjugate()

    # ---------- comparison ----------

    def is_close(
        self, other: "ComplexMatrix", tolerance: ToleranceConfig = DEFAULT_TOLERANCE
    ) -> bool:
        if self.dimensions() != other.dimensions():
            return False
        return all(x.is_close(y, tolerance) for x, y in zip(self._elements, other._elements))

    # ---------- dunder sugar ----------

    @staticmethod
    def _unpack_index(index: object) -> tuple[int, int]:
        if not (isinstance(index, tuple) and len(index) == 2):
            raise TypeError(f"Matrix index must be a (row, column) pair, got {index!r}")
        return index

    def __getitem__(self, index: tuple[int, int]) -> ComplexNumber:
        row, column = self._unpack_index(index)
        return self.at(row, column)

    def __setitem__(self, index: tuple[int, int], value: ComplexNumber) -> None:
        row, column = self._unpack_index(index)
        if not isinstance(value, ComplexNumber):
            raise TypeError(f"Matrix element must be ComplexNumber, got {type(value).__name__}")
        self._elements[self._offset(row, column)] = value

    def __add__(self, other: object) -> "ComplexMatrix":
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexMatrix":
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object):
        if isinstance(other, ComplexNumber):
            return self.scalar_multiply(other)
        if isinstance(other, ComplexMatrix):
            return self.multiply(other)
        if isinstance(other, ComplexVector):
            return self.multiply_vector(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "ComplexMatrix":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.scalar_multiply(other)

    def __matmul__(self, other: object):
        if isinstance(other, ComplexMatrix):
            return self.multiply(other)
        if isinstance(other, ComplexVector):
            return self.multiply_vector(other)
        return NotImplemented

    def __neg__(self) -> "ComplexMatrix":
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._elements == other._elements

    def __repr__(self) -> str:
        return f"ComplexMatrix({self._elements!r}, rows={self._rows}, columns={self._columns})"

    def __str__(self) -> str:
        rendered_rows = ("[" + ", ".join(str(x) for x in row) + "]" for row in self.iter_rows())
        return "[" + ",".join(rendered_rows) + "]"
