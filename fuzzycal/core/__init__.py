"""
Core parsing and evaluation primitives.

This package is independent of any UI: every entry point is a pure function of
its input text.
"""

from fuzzycal.core.errors import (
    EmptyInput,
    FuzzyCalError,
    InvalidDigit,
    InvalidExpression,
    UnknownIdentifier,
    UnrecognizedFormat,
    UnsafeCharacter,
)

__all__ = [
    "FuzzyCalError",
    "EmptyInput",
    "UnsafeCharacter",
    "UnknownIdentifier",
    "InvalidExpression",
    "UnrecognizedFormat",
    "InvalidDigit",
]
