"""
Result Formatter — Упорядоченные списки ResultItem для отображения

- build_number_results: результат выражения (float) → Dec/Hex/Bin/Oct
  для целых, безопасно представимых значений, иначе одна строка Dec
- conversion_items: ConversionResult → Hex/Dec/Bin/Oct
"""

import math
from typing import Final, List

from fuzzycal.core.domain.results import ConversionResult, ResultItem
from fuzzycal.core.math.radix import to_bin, to_dec, to_hex, to_oct

# Наибольшее целое, точно представимое в double (2**53 - 1)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Начиная с этой величины целые float выводятся в экспоненциальной записи
_EXPONENT_THRESHOLD: Final[float] = 1e21


def is_safe_integer(value: float) -> bool:
    """
    Целое ли значение и точно ли оно представимо в double.

    Examples:
        >>> is_safe_integer(297.0)
        True
        >>> is_safe_integer(2.8)
        False
        >>> is_safe_integer(2.0**53)
        False
        >>> is_safe_integer(10**400)
        False
    """
    if isinstance(value, int):
        return abs(value) <= MAX_SAFE_INTEGER
    if not math.isfinite(value):
        return False
    return float(value).is_integer() and abs(value) <= MAX_SAFE_INTEGER


def format_number(value: float) -> str:
    """
    Короткая десятичная запись float.

    Целые float выводятся без ".0", пока они меньше 1e21; int выводится
    точно при любой величине.

    Examples:
        >>> format_number(297.0)
        '297'
        >>> format_number(2.8)
        '2.8'
    """
    if isinstance(value, int):
        return to_dec(value)
    if math.isfinite(value) and float(value).is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(float(value))


def build_number_results(value: float) -> List[ResultItem]:
    """
    Список представлений числового результата.

    Args:
        value: Результат выражения

    Returns:
        4 элемента (Dec, Hex, Bin, Oct) для безопасных целых,
        иначе 1 элемент "Dec (float or large)"
    """
    if is_safe_integer(value):
        n = int(value)
        return [
            ResultItem(label=str(n), description="Dec"),
            ResultItem(label=to_hex(n), description="Hex"),
            ResultItem(label=to_bin(n), description="Bin"),
            ResultItem(label=to_oct(n), description="Oct"),
        ]
    return [ResultItem(label=format_number(value), description="Dec (float or large)")]


def conversion_items(result: ConversionResult) -> List[ResultItem]:
    """
    Список представлений результата конверсии (Hex, Dec, Bin, Oct).

    Представление в целевом основании (first), если есть, идёт первым.
    """
    items = []
    if result.first is not None:
        items.append(ResultItem(label=result.first, description="Target"))
    items.extend(
        [
            ResultItem(label=result.hex, description="Hex"),
            ResultItem(label=result.dec, description="Dec"),
            ResultItem(label=result.bin, description="Bin"),
            ResultItem(label=result.oct, description="Oct"),
        ]
    )
    return items
