"""
Base Converter — Разбор числа в одной из нотаций и вывод в четырёх основаниях

Поддерживаемые нотации (в порядке приоритета, первое совпадение выигрывает):
    a. N#value        — 16#FF, 2#1010 (основание ограничивается [2, 36])
    b. base N value   — base2 1010, BASE16 ff
    c. автоопределение:
       - 0 + только десятичные цифры → hex (legacy leading-zero convention)
       - 0x / 0b / 0o префиксы
       - суффиксы h / b / o
       - только десятичные цифры → dec
       - hex-цифры с хотя бы одной буквой a-f → hex

Целевое основание задаётся через "->" или слово "to": "FF -> dec", "255 to 36".

Порядок правил сохраняется буквально: неоднозначные строки ("777": dec или
oct?) разрешаются порядком правил, а не "более правильной" грамматикой.
"""

import logging
import re
from typing import Final, Optional

from fuzzycal.core.domain.numerals import (
    MAX_BASE,
    MIN_BASE,
    BaseSpec,
    NumeralNotation,
    NumeralToken,
)
from fuzzycal.core.domain.results import ConversionResult
from fuzzycal.core.errors import UnrecognizedFormat
from fuzzycal.core.math.radix import (
    clamp_base,
    format_base,
    parse_digits,
    parse_signed_digits,
    to_bin,
    to_dec,
    to_hex,
    to_oct,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

_ARROW_RE: Final = re.compile(r"(.*?)(?:->|\s+to\s+)(.*)", re.IGNORECASE)

_RADIX_HASH_RE: Final = re.compile(r"^\s*(\d{1,2})\s*#\s*([-+]?[0-9a-zA-Z_]+)\s*$")
_BASE_WORD_RE: Final = re.compile(
    r"^\s*base\s*(\d{1,2})\s+([-+]?[0-9a-zA-Z_]+)\s*$", re.IGNORECASE
)

_LEADING_ZERO_RE: Final = re.compile(r"^0[0-9]+$")
_HEX_SUFFIX_RE: Final = re.compile(r"^([0-9a-f]+)h$", re.IGNORECASE)
_BIN_SUFFIX_RE: Final = re.compile(r"^([01]+)b$", re.IGNORECASE)
_OCT_SUFFIX_RE: Final = re.compile(r"^([0-7]+)o$", re.IGNORECASE)
_DECIMAL_RE: Final = re.compile(r"^[0-9]+$")
_BARE_HEX_RE: Final = re.compile(r"^[0-9a-f]*[a-f][0-9a-f]*$", re.IGNORECASE)

_PREFIX_BASES: Final[dict[str, int]] = {"0x": 16, "0b": 2, "0o": 8}

# Таблица тегов целевого основания
_TAG_BASES: Final[dict[str, int]] = {
    "hex": 16,
    "16": 16,
    "0x": 16,
    "dec": 10,
    "10": 10,
    "bin": 2,
    "2": 2,
    "0b": 2,
    "oct": 8,
    "8": 8,
    "0o": 8,
    "0": 8,
}


# =============================================================================
# BASE SPEC
# =============================================================================


def parse_base_spec(text: str) -> BaseSpec:
    """
    Разбиение ввода на значение и тег целевого основания.

    Разделитель: первое вхождение "->" или слова "to" в пробелах
    (регистр не важен).

    Examples:
        >>> parse_base_spec("FF -> dec")
        BaseSpec(left='FF', right='dec')
        >>> parse_base_spec("255")
        BaseSpec(left='255', right='')
    """
    stripped = text.strip()
    match = _ARROW_RE.match(stripped)
    if match:
        return BaseSpec(left=match.group(1).strip(), right=match.group(2).strip())
    return BaseSpec(left=stripped, right="")


def detect_base_from_tag(tag: str) -> Optional[int]:
    """
    Основание по тегу: hex/dec/bin/oct, префикс или десятичное число в [2, 36].

    Returns:
        Основание или None, если тег не распознан
    """
    t = tag.strip().lower()
    if t in _TAG_BASES:
        return _TAG_BASES[t]
    if t.isdigit():
        n = int(t)
        if MIN_BASE <= n <= MAX_BASE:
            return n
    return None


# =============================================================================
# PARSING
# =============================================================================


def parse_auto(text: str) -> NumeralToken:
    """
    Автоопределение нотации для строки без явного основания.

    Args:
        text: Строка вида [+-]число (underscores допустимы)

    Returns:
        NumeralToken с распознанной нотацией

    Raises:
        UnrecognizedFormat: Если ни одно правило не подошло
        InvalidDigit: Если после префикса 0x/0b/0o стоят недопустимые цифры
    """
    s = text.strip()
    sign = 1
    if s.startswith("+"):
        s = s[1:]
    if s.startswith("-"):
        sign = -1
        s = s[1:]
    s = s.replace("_", "")

    if _LEADING_ZERO_RE.match(s):
        return NumeralToken(
            value=sign * parse_digits(s, 16), from_base=16, notation=NumeralNotation.LEADING_ZERO
        )

    prefix_base = _PREFIX_BASES.get(s[:2].lower())
    if prefix_base is not None:
        return NumeralToken(
            value=sign * parse_digits(s[2:], prefix_base),
            from_base=prefix_base,
            notation=NumeralNotation.PREFIXED,
        )

    for pattern, base in ((_HEX_SUFFIX_RE, 16), (_BIN_SUFFIX_RE, 2), (_OCT_SUFFIX_RE, 8)):
        match = pattern.match(s)
        if match:
            return NumeralToken(
                value=sign * parse_digits(match.group(1), base),
                from_base=base,
                notation=NumeralNotation.SUFFIXED,
            )

    if _DECIMAL_RE.match(s):
        return NumeralToken(
            value=sign * parse_digits(s, 10), from_base=10, notation=NumeralNotation.DECIMAL
        )

    if _BARE_HEX_RE.match(s):
        return NumeralToken(
            value=sign * parse_digits(s, 16), from_base=16, notation=NumeralNotation.BARE_HEX
        )

    raise UnrecognizedFormat(text)


def parse_numeral(text: str) -> NumeralToken:
    """
    Разбор значения: N#value, затем base N value, затем автоопределение.

    Raises:
        UnrecognizedFormat, InvalidDigit
    """
    match = _RADIX_HASH_RE.match(text)
    notation = NumeralNotation.RADIX_HASH
    if not match:
        match = _BASE_WORD_RE.match(text)
        notation = NumeralNotation.BASE_WORD

    if match:
        base = clamp_base(int(match.group(1)))
        return NumeralToken(
            value=parse_signed_digits(match.group(2), base),
            from_base=base,
            notation=notation,
        )

    return parse_auto(text)


# =============================================================================
# CONVERTER
# =============================================================================


class NumeralConverter:
    """
    Конвертер: строка → NumeralToken → ConversionResult.

    Stateless: каждый вызов является чистой функцией от ввода.
    """

    def parse(self, text: str) -> NumeralToken:
        """Разбор ввода вместе с тегом целевого основания."""
        spec = parse_base_spec(text)
        token = parse_numeral(spec.left)
        if spec.has_target:
            target = detect_base_from_tag(spec.right)
            if target is None:
                logger.debug("Ignoring unrecognized target base tag %r", spec.right)
            else:
                token = token.model_copy(update={"target_base": target})
        return token

    def render(self, token: NumeralToken) -> ConversionResult:
        """Четыре канонических представления (+ first для целевого основания)."""
        n = token.value
        first = format_base(n, token.target_base) if token.target_base is not None else None
        return ConversionResult(
            hex=to_hex(n),
            dec=to_dec(n),
            bin=to_bin(n),
            oct=to_oct(n),
            first=first,
        )

    def convert(self, text: str) -> ConversionResult:
        """
        Полная конверсия.

        Args:
            text: "255", "FF -> dec", "16#FF", "base2 1010", "-0b1010", ...

        Returns:
            ConversionResult

        Raises:
            UnrecognizedFormat: Если нотация не распознана
            InvalidDigit: Если цифра вне основания
        """
        token = self.parse(text)
        logger.debug(
            "Parsed %r as %s (base %d)", text, token.notation.value, token.from_base
        )
        return self.render(token)


_CONVERTER = NumeralConverter()


def convert_bases(text: str) -> ConversionResult:
    """Конверсия через общий экземпляр NumeralConverter."""
    return _CONVERTER.convert(text)
