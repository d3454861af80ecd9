"""
Radix — Примитивы целых произвольной точности

Модуль обеспечивает разбор и форматирование знаковых целых в основаниях 2..36:
- Разбор строки цифр в заданном основании (с проверкой каждой цифры)
- Канонические представления: 0x (верхний регистр), десятичное, 0b, 0o
- Представление в произвольном основании с каноническим префиксом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак всегда перед префиксом: -0xFF, никогда 0x-FF
2. Все представления выводятся из одного int, поэтому точны для любой величины
3. int() не используется для разбора ввода напрямую: он принимает пробелы,
   подчёркивания и префиксы, которые здесь должны проверяться явно
"""

from typing import Final

from fuzzycal.core.domain.numerals import DIGIT_ALPHABET, MAX_BASE, MIN_BASE
from fuzzycal.core.errors import InvalidDigit, UnrecognizedFormat

# Канонические префиксы для оснований с префиксом
BASE_PREFIXES: Final[dict[int, str]] = {16: "0x", 2: "0b", 8: "0o"}

_DIGIT_INDEX: Final[dict[str, int]] = {ch: i for i, ch in enumerate(DIGIT_ALPHABET)}

# Десятичные цифры выводятся блоками по 18: str() от целых длиннее
# sys.get_int_max_str_digits() бросает ValueError
_DEC_CHUNK_DIGITS: Final[int] = 18
_DEC_CHUNK: Final[int] = 10**_DEC_CHUNK_DIGITS


# =============================================================================
# РАЗБОР
# =============================================================================


def clamp_base(base: int) -> int:
    """
    Ограничение основания диапазоном [2, 36].

    Examples:
        >>> clamp_base(1)
        2
        >>> clamp_base(99)
        36
    """
    if base < MIN_BASE:
        return MIN_BASE
    if base > MAX_BASE:
        return MAX_BASE
    return base


def parse_digits(digits: str, base: int) -> int:
    """
    Разбор беззнаковой строки цифр в заданном основании.

    Регистр не важен. Подчёркивания должны быть удалены вызывающим кодом.

    Args:
        digits: Цифры из алфавита 0-9a-z
        base: Основание в [2, 36]

    Returns:
        Неотрицательное целое

    Raises:
        UnrecognizedFormat: Если строка пуста
        InvalidDigit: Если символ не цифра или цифра >= base
    """
    if not digits:
        raise UnrecognizedFormat(digits)

    acc = 0
    for ch in digits.lower():
        idx = _DIGIT_INDEX.get(ch)
        if idx is None or idx >= base:
            raise InvalidDigit(ch, base)
        acc = acc * base + idx
    return acc


def parse_signed_digits(text: str, base: int) -> int:
    """
    Разбор строки вида [+-]digits в основании base (underscores игнорируются).

    Raises:
        UnrecognizedFormat: Если цифр нет
        InvalidDigit: Если цифра вне основания
    """
    clean = text.replace("_", "").strip()
    sign = -1 if clean.startswith("-") else 1
    body = clean[1:] if clean[:1] in ("+", "-") else clean
    return sign * parse_digits(body, base)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _digits_in_base(magnitude: int, base: int) -> str:
    """Цифры неотрицательного целого в нижнем регистре."""
    if base == 10:
        return _decimal_digits(magnitude)
    if base == 16:
        return format(magnitude, "x")
    if base == 2:
        return format(magnitude, "b")
    if base == 8:
        return format(magnitude, "o")
    if magnitude == 0:
        return "0"

    out = []
    while magnitude:
        magnitude, rem = divmod(magnitude, base)
        out.append(DIGIT_ALPHABET[rem])
    return "".join(reversed(out))


def to_hex(n: int) -> str:
    """
    Каноническое шестнадцатеричное: 0x + верхний регистр.

    Examples:
        >>> to_hex(255)
        '0xFF'
        >>> to_hex(-255)
        '-0xFF'
    """
    body = _digits_in_base(abs(n), 16).upper()
    return ("-0x" if n < 0 else "0x") + body


def _decimal_digits(magnitude: int) -> str:
    if magnitude < _DEC_CHUNK:
        return str(magnitude)

    chunks = []
    while magnitude >= _DEC_CHUNK:
        magnitude, rem = divmod(magnitude, _DEC_CHUNK)
        chunks.append(f"{rem:0{_DEC_CHUNK_DIGITS}d}")
    chunks.append(str(magnitude))
    return "".join(reversed(chunks))


def to_dec(n: int) -> str:
    """
    Десятичное представление любой величины.

    Examples:
        >>> to_dec(-10**20)
        '-100000000000000000000'
    """
    return ("-" if n < 0 else "") + _decimal_digits(abs(n))


def to_bin(n: int) -> str:
    """Каноническое двоичное: 0b + цифры, знак перед префиксом."""
    return ("-0b" if n < 0 else "0b") + _digits_in_base(abs(n), 2)


def to_oct(n: int) -> str:
    """Каноническое восьмеричное: 0o + цифры, знак перед префиксом."""
    return ("-0o" if n < 0 else "0o") + _digits_in_base(abs(n), 8)


def format_base(n: int, base: int) -> str:
    """
    Представление в произвольном основании.

    Префикс только для 16/2/8; шестнадцатеричные цифры в верхнем регистре,
    остальные в нижнем.

    Args:
        n: Знаковое целое
        base: Основание в [2, 36]

    Returns:
        [-][prefix]digits

    Raises:
        ValueError: Если основание вне [2, 36]

    Examples:
        >>> format_base(255, 16)
        '0xFF'
        >>> format_base(-35, 36)
        '-z'
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")

    body = _digits_in_base(abs(n), base)
    if base == 16:
        body = body.upper()
    prefix = BASE_PREFIXES.get(base, "")
    return ("-" if n < 0 else "") + prefix + body
