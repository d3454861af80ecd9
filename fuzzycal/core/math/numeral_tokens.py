"""
Numeral Tokens — Поиск числовых литералов внутри текста выражения

Две операции над текстом выражения:
- strip_numeral_tokens: заменяет все числовые литералы на "0", чтобы буквы
  внутри чисел (ff в 0xff, суффиксы h/b/o) не принимались за идентификаторы
- promote_leading_zero_numerals: переписывает 0ff / 0123 в 0x0ff / 0x0123
  для повторной попытки вычисления

Шаблоны применяются по очереди, каждый слева направо по всему тексту.
Порядок шаблонов значим.
"""

import re
from typing import Final

PLACEHOLDER: Final[str] = "0"

NUMERAL_TOKEN_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"[+-]?\s*0x[0-9a-f_]+", re.IGNORECASE),
    re.compile(r"[+-]?\s*0b[01_]+", re.IGNORECASE),
    re.compile(r"[+-]?\s*0o[0-7_]+", re.IGNORECASE),
    re.compile(r"[+-]?\s*[0-9a-f_]+h\b", re.IGNORECASE),
    re.compile(r"\b0[0-9a-f_]+\b", re.IGNORECASE),
    re.compile(r"[+-]?\s*[01_]+b\b", re.IGNORECASE),
    re.compile(r"[+-]?\s*[0-7_]+o\b", re.IGNORECASE),
    re.compile(r"[+-]?\s*\d{1,2}\s*#\s*[0-9a-z_]+", re.IGNORECASE),
    re.compile(r"[+-]?\s*base\s*\d{1,2}\s+[0-9a-z_]+", re.IGNORECASE),
    re.compile(r"[+-]?\s*(?:\d[0-9_]*)(?:\.\d[0-9_]*)?"),
)

_LEADING_ZERO_TOKEN_RE: Final = re.compile(r"\b0[0-9a-fA-F_]{2,}\b")
_ALL_ZEROS_RE: Final = re.compile(r"^0+$")


def strip_numeral_tokens(text: str) -> str:
    """
    Замена всех числовых литералов на плейсхолдер.

    Examples:
        >>> strip_numeral_tokens("0xff + 42")
        '0 0'
        >>> strip_numeral_tokens("sin(pi/6)")
        'sin(pi/0)'
    """
    stripped = text
    for pattern in NUMERAL_TOKEN_PATTERNS:
        stripped = pattern.sub(PLACEHOLDER, stripped)
    return stripped


def _promote(match: re.Match[str]) -> str:
    token = match.group(0)
    if _ALL_ZEROS_RE.match(token):
        return token
    return "0x" + token.replace("_", "")


def promote_leading_zero_numerals(text: str) -> str:
    """
    Переписывание токенов "0 + 2+ hex-цифр/underscores" в явный hex.

    Токены из одних нулей не трогаются. Если ничего не изменилось,
    возвращается исходная строка.

    Examples:
        >>> promote_leading_zero_numerals("0ff + 1")
        '0x0ff + 1'
        >>> promote_leading_zero_numerals("000 + 1")
        '000 + 1'
    """
    return _LEADING_ZERO_TOKEN_RE.sub(_promote, text)
