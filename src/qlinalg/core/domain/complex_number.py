"""
ComplexNumber — комплексный скаляр и его координатные представления

Immutable value-тип (frozen dataclass): каждая операция возвращает новый
экземпляр, равенство точное покомпонентное (без epsilon).

Представления:
- ComplexNumber(real, imaginary)
- Cartesian(x, y)               — тождественно (real, imaginary)
- Polar(magnitude, phase)       — (|z|, atan(y / x)) по умолчанию

ФОРМУЛЫ:
    (a+bi) + (c+di) = (a+c) + (b+d)i
    (a+bi) * (c+di) = (ac-bd) + (ad+bc)i
    (a+bi) - (c+di) = (a+bi) + (-(c+di))
    (r1+i1 i) / (r2+i2 i) = ((r1*r2 + i1*i2) + (r2*i1 - r1*i2)i) / (r2^2 + i2^2)
    |a+bi| = sqrt(a^2 + b^2)

Фаза полярной формы:
    PhaseConvention.PRINCIPAL_ATAN (default) — atan(y / x), совпадает с эталонным
    выводом, но склеивает квадранты II/IV с IV/II (Cartesian(-1, 1) и
    Cartesian(1, -1) дают одну фазу).
    PhaseConvention.FULL_QUADRANT — atan2(y, x), полный диапазон (-pi, pi].
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, NamedTuple

from qlinalg.core.domain.errors import DivisionByZero
from qlinalg.core.math.formatting import format_real
from qlinalg.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    is_close,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class PhaseConvention(str, Enum):
    """Способ вычисления фазы при переходе в полярные координаты."""

    PRINCIPAL_ATAN = "atan"
    FULL_QUADRANT = "atan2"


def _phase(x: float, y: float, convention: PhaseConvention) -> float:
    # Начало координат: фаза не определена, принимаем 0.0 для обеих конвенций
    if x == 0.0 and y == 0.0:
        return 0.0

    if convention is PhaseConvention.FULL_QUADRANT:
        return math.atan2(y, x)

    if x == 0.0:
        # y / +-0 по IEEE 754 даёт +-inf, atan(+-inf) = +-pi/2
        return math.atan(math.copysign(math.inf, y) * math.copysign(1.0, x))

    return math.atan(y / x)


def _ieee_divide(numerator: float, denominator: float) -> float:
    # Модуль делителя в квадрате может уйти в 0.0 при ненулевом делителе:
    # результат как у IEEE 754 (+-inf или NaN) вместо ZeroDivisionError
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _coerce_real(value: object, field: str) -> float:
    # bool — подкласс int, но как компонента числа не имеет смысла
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field} must be int or float, got {type(value).__name__}")
    return float(value)


# =============================================================================
# COORDINATE REPRESENTATIONS
# =============================================================================


class Cartesian(NamedTuple):
    """Декартовы координаты точки на комплексной плоскости."""

    x: float
    y: float

    def to_polar(
        self, convention: PhaseConvention = PhaseConvention.PRINCIPAL_ATAN
    ) -> "Polar":
        """
        Конверсия в полярные координаты.

        Args:
            convention: Способ вычисления фазы (default: atan(y / x))

        Returns:
            Polar(sqrt(x^2 + y^2), phase)
        """
        magnitude = math.sqrt(self.x * self.x + self.y * self.y)
        return Polar(magnitude, _phase(self.x, self.y, convention))

    def to_complex(self) -> "ComplexNumber":
        return ComplexNumber(self.x, self.y)

    def __str__(self) -> str:
        return f"({format_real(self.x)}, {format_real(self.y)})"


class Polar(NamedTuple):
    """Полярные координаты: модуль и фаза (радианы)."""

    magnitude: float
    phase: float

    def to_cartesian(self) -> Cartesian:
        """Конверсия (m, p) -> (m*cos(p), m*sin(p))."""
        return Cartesian(
            self.magnitude * math.cos(self.phase),
            self.magnitude * math.sin(self.phase),
        )

    def to_complex(self) -> "ComplexNumber":
        return self.to_cartesian().to_complex()

    def __str__(self) -> str:
        return f"({format_real(self.magnitude)}, {format_real(self.phase)})"


# =============================================================================
# COMPLEX NUMBER
# =============================================================================


@dataclass(frozen=True)
class ComplexNumber:
    """
    Комплексное число real + imaginary*i.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Любая пара float допустима, валидация не выполняется.

    Операторы делегируют именованным методам:
        +  add          -  subtract      *  multiply
        /  divide       -z negate        abs(z)  abs
    """

    real: float
    imaginary: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", _coerce_real(self.real, "real"))
        object.__setattr__(self, "imaginary", _coerce_real(self.imaginary, "imaginary"))

    # ---------- constructors ----------

    @classmethod
    def zero(cls) -> "ComplexNumber":
        """Аддитивная единица (0, 0)."""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "ComplexNumber":
        """Мультипликативная единица (1, 0)."""
        return cls(1.0, 0.0)

    @classmethod
    def from_cartesian(cls, cartesian: Cartesian) -> "ComplexNumber":
        return cls(cartesian.x, cartesian.y)

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "ComplexNumber":
        """
        Конструктор из полярной формы.

        Args:
            magnitude: Модуль
            phase: Фаза (радианы)

        Returns:
            ComplexNumber(m*cos(p), m*sin(p))
        """
        return Polar(magnitude, phase).to_complex()

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexNumber":
        return cls(value.real, value.imag)

    @classmethod
    def sum(cls, values: Iterable["ComplexNumber"]) -> "ComplexNumber":
        """
        Сумма последовательности комплексных чисел.

        Свёртка с нулём (0, 0) в качестве начального значения,
        поэтому sum([]) == (0, 0).
        """
        return reduce(cls.add, values, cls.zero())

    # ---------- field operations ----------

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def negate(self) -> "ComplexNumber":
        """Аддитивная обратная: (a, b) -> (-a, -b)."""
        return ComplexNumber(-self.real, -self.imaginary)

    def subtract(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.add(other.negate())

    def multiply(self, other: "ComplexNumber") -> "ComplexNumber":
        real_part = (self.real * other.real) - (self.imaginary * other.imaginary)
        imaginary_part = (self.real * other.imaginary) + (self.imaginary * other.real)
        return ComplexNumber(real_part, imaginary_part)

    def divide(self, other: "ComplexNumber") -> "ComplexNumber":
        """
        Деление комплексных чисел (умножение на сопряжённое).

        Args:
            other: Делитель

        Returns:
            Частное self / other

        Raises:
            DivisionByZero: Если other точно равен (0, 0). Сравнение точное,
                сколь угодно малый ненулевой делитель допустим: если квадрат
                его модуля уходит в 0.0, части частного равны +-inf или NaN.
        """
        if other.real == 0.0 and other.imaginary == 0.0:
            logger.debug("Complex division by zero: %s / %s", self, other)
            raise DivisionByZero(f"Cannot divide {self} by zero")

        r1, i1 = self.real, self.imaginary
        r2, i2 = other.real, other.imaginary
        denominator = r2 * r2 + i2 * i2

        real_part = _ieee_divide((r1 * r2) + (i1 * i2), denominator)
        imaginary_part = _ieee_divide((r2 * i1) - (r1 * i2), denominator)
        return ComplexNumber(real_part, imaginary_part)

    def abs(self) -> float:
        """Модуль: sqrt(real^2 + imaginary^2)."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imaginary)

    # ---------- conversions ----------

    def to_cartesian(self) -> Cartesian:
        return Cartesian(self.real, self.imaginary)

    def to_polar(
        self, convention: PhaseConvention = PhaseConvention.PRINCIPAL_ATAN
    ) -> Polar:
        """
        Конверсия в полярную форму (|z|, phase).

        Round-trip через Polar приближённый: ошибки округления cos/sin,
        а для PRINCIPAL_ATAN ещё и потеря квадранта при real < 0.
        """
        return self.to_cartesian().to_polar(convention)

    def to_complex(self) -> complex:
        return complex(self.real, self.imaginary)

    # ---------- comparison ----------

    def is_close(
        self, other: "ComplexNumber", tolerance: ToleranceConfig = DEFAULT_TOLERANCE
    ) -> bool:
        """Приближённое покомпонентное сравнение (== остаётся точным)."""
        return is_close(self.real, other.real, tolerance) and is_close(
            self.imaginary, other.imaginary, tolerance
        )

    # ---------- dunder sugar ----------

    def __add__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "ComplexNumber":
        # Векторы и матрицы обрабатывают c * v через __rmul__
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ComplexNumber":
        return self.negate()

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return self.to_complex()

    def __str__(self) -> str:
        operator = "+" if self.imaginary >= 0.0 else ""
        return f"{format_real(self.real)}{operator}{format_real(self.imaginary)}i"
