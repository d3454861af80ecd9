"""
Domain models and value objects.

Contains the immutable value objects passed between the parsing core and its
callers: NumeralToken, BaseSpec, ConversionResult, ResultItem.
"""

from fuzzycal.core.domain.numerals import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    BaseSpec,
    NumeralNotation,
    NumeralToken,
)
from fuzzycal.core.domain.results import ConversionResult, ResultItem

__all__ = [
    # Numerals
    "DIGIT_ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
    "BaseSpec",
    "NumeralNotation",
    "NumeralToken",
    # Results
    "ConversionResult",
    "ResultItem",
]
