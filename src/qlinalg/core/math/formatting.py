"""
Текстовое представление вещественных чисел

Все доменные типы печатаются через format_real, чтобы текстовая форма
совпадала с эталонным выводом:
- кратчайшая десятичная запись, однозначно восстанавливающая double
- целые значения без дробной части: 8.0 -> "8", -0.0 -> "-0"
- без экспоненциальной нотации: 1e-05 -> "0.00001"
- "inf", "-inf", "NaN" для не-finite значений
"""

import math
from decimal import Decimal


def format_real(value: float) -> str:
    """
    Форматирование float в позиционной записи.

    Args:
        value: Значение для форматирования

    Returns:
        Строковое представление

    Examples:
        >>> format_real(8.0)
        '8'
        >>> format_real(-1.5)
        '-1.5'
        >>> format_real(0.6000000000000001)
        '0.6000000000000001'
        >>> format_real(1e-05)
        '0.00001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr даёт кратчайшие цифры, Decimal разворачивает экспоненту
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
