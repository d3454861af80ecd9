"""
Тесты для Domain Models

Проверяет:
- Immutability (frozen=True)
- Валидацию полей (основания, префиксы, непустые label)
- Payload для передачи в UI
"""

import pytest
from pydantic import ValidationError

from fuzzycal.core.domain import (
    BaseSpec,
    ConversionResult,
    NumeralNotation,
    NumeralToken,
    ResultItem,
)


# =============================================================================
# RESULT ITEM
# =============================================================================


class TestResultItem:
    """Тесты для ResultItem"""

    def test_valid_item(self) -> None:
        item = ResultItem(label="0xFF", description="Hex")
        assert item.label == "0xFF"
        assert item.description == "Hex"

    def test_immutable(self) -> None:
        item = ResultItem(label="255", description="Dec")
        with pytest.raises(ValidationError):
            item.label = "256"

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResultItem(label="", description="Dec")


# =============================================================================
# CONVERSION RESULT
# =============================================================================


class TestConversionResult:
    """Тесты для ConversionResult"""

    def test_payload_without_first(self) -> None:
        result = ConversionResult(hex="0xFF", dec="255", bin="0b11111111", oct="0o377")
        assert result.to_payload() == {
            "hex": "0xFF",
            "dec": "255",
            "bin": "0b11111111",
            "oct": "0o377",
        }

    def test_payload_with_first(self) -> None:
        result = ConversionResult(
            hex="0xFF", dec="255", bin="0b11111111", oct="0o377", first="255"
        )
        assert result.to_payload()["first"] == "255"

    def test_negative_hex_prefix_accepted(self) -> None:
        result = ConversionResult(hex="-0xA", dec="-10", bin="-0b1010", oct="-0o12")
        assert result.hex == "-0xA"

    @pytest.mark.parametrize("bad_hex", ["FF", "0x-FF", "-FF"])
    def test_sign_after_prefix_rejected(self, bad_hex) -> None:
        with pytest.raises(ValidationError, match="hex rendering"):
            ConversionResult(hex=bad_hex, dec="255", bin="0b1", oct="0o1")

    def test_immutable(self) -> None:
        result = ConversionResult(hex="0x1", dec="1", bin="0b1", oct="0o1")
        with pytest.raises(ValidationError):
            result.dec = "2"


# =============================================================================
# NUMERALS
# =============================================================================


class TestNumeralToken:
    """Тесты для NumeralToken"""

    def test_valid_token(self) -> None:
        token = NumeralToken(value=-255, from_base=16, notation=NumeralNotation.PREFIXED)
        assert token.is_negative
        assert token.target_base is None

    def test_arbitrary_precision(self) -> None:
        token = NumeralToken(value=2**200, from_base=10, notation=NumeralNotation.DECIMAL)
        assert token.value == 2**200

    @pytest.mark.parametrize("base", [0, 1, 37])
    def test_from_base_out_of_range(self, base) -> None:
        with pytest.raises(ValidationError):
            NumeralToken(value=1, from_base=base, notation=NumeralNotation.DECIMAL)

    def test_target_base_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            NumeralToken(
                value=1, from_base=10, notation=NumeralNotation.DECIMAL, target_base=37
            )


class TestBaseSpec:
    """Тесты для BaseSpec"""

    def test_has_target(self) -> None:
        assert BaseSpec(left="FF", right="dec").has_target
        assert not BaseSpec(left="FF").has_target
