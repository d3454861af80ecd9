"""
Тесты для Radix primitives

Проверяет:
1. Разбор цифр в основаниях 2..36
2. Канонические представления и знак перед префиксом
3. format_base для произвольных оснований
"""

import pytest

from fuzzycal.core.errors import InvalidDigit, UnrecognizedFormat
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


class TestClampBase:
    """Ограничение основания"""

    def test_within_range_unchanged(self) -> None:
        assert clamp_base(2) == 2
        assert clamp_base(16) == 16
        assert clamp_base(36) == 36

    def test_clamped(self) -> None:
        assert clamp_base(0) == 2
        assert clamp_base(1) == 2
        assert clamp_base(99) == 36


class TestParseDigits:
    """Разбор беззнаковых цифр"""

    def test_case_insensitive(self) -> None:
        assert parse_digits("FF", 16) == 255
        assert parse_digits("ff", 16) == 255
        assert parse_digits("Zz", 36) == 35 * 36 + 35

    def test_digit_out_of_base(self) -> None:
        with pytest.raises(InvalidDigit):
            parse_digits("g", 16)
        with pytest.raises(InvalidDigit):
            parse_digits("8", 8)

    def test_non_alphabet_character(self) -> None:
        with pytest.raises(InvalidDigit):
            parse_digits("1-", 10)

    def test_empty(self) -> None:
        with pytest.raises(UnrecognizedFormat):
            parse_digits("", 10)

    def test_signed(self) -> None:
        assert parse_signed_digits("-1_0", 10) == -10
        assert parse_signed_digits("+z", 36) == 35


class TestCanonicalRenderings:
    """0x / dec / 0b / 0o"""

    def test_zero(self) -> None:
        assert to_hex(0) == "0x0"
        assert to_dec(0) == "0"
        assert to_bin(0) == "0b0"
        assert to_oct(0) == "0o0"

    def test_hex_uppercase(self) -> None:
        assert to_hex(0xDEADBEEF) == "0xDEADBEEF"

    @pytest.mark.parametrize("v", [1, 10, 255, 2**53 + 1, 2**200])
    def test_sign_before_prefix(self, v) -> None:
        assert to_hex(-v) == "-" + to_hex(v)
        assert to_bin(-v) == "-" + to_bin(v)
        assert to_oct(-v) == "-" + to_oct(v)
        assert to_dec(-v) == "-" + to_dec(v)


class TestFormatBase:
    """Произвольное основание"""

    @pytest.mark.parametrize("n,base,expected", [
        (255, 16, "0xFF"),
        (255, 2, "0b11111111"),
        (255, 8, "0o377"),
        (255, 10, "255"),
        (35, 36, "z"),
        (-35, 36, "-z"),
        (0, 7, "0"),
        (9, 3, "100"),
    ])
    def test_renderings(self, n, base, expected) -> None:
        assert format_base(n, base) == expected

    @pytest.mark.parametrize("base", [0, 1, 37])
    def test_invalid_base(self, base) -> None:
        with pytest.raises(ValueError, match="base must be in"):
            format_base(10, base)


class TestDecimalRendering:
    """Десятичный вывод не упирается в лимит int/str"""

    def test_chunk_boundaries(self) -> None:
        assert to_dec(10**18) == "1" + "0" * 18
        assert to_dec(10**18 - 1) == "9" * 18
        assert to_dec(10**36 + 7) == "1" + "0" * 34 + "07"

    def test_beyond_str_digit_limit(self) -> None:
        assert to_dec(10**5000) == "1" + "0" * 5000
        assert to_dec(-(10**5000)) == "-1" + "0" * 5000

    def test_format_base_ten(self) -> None:
        assert format_base(10**5000 - 1, 10) == "9" * 5000

    def test_parse_long_decimal(self) -> None:
        assert parse_digits("1" + "0" * 5000, 10) == 10**5000
