"""
Core math modules для FuzzyCal

Вычисление выражений и конверсия чисел между системами счисления.
"""

# Radix primitives
from fuzzycal.core.math.radix import (
    BASE_PREFIXES,
    clamp_base,
    format_base,
    parse_digits,
    parse_signed_digits,
    to_bin,
    to_dec,
    to_hex,
    to_oct,
)

# Numeral tokens inside expressions
from fuzzycal.core.math.numeral_tokens import (
    promote_leading_zero_numerals,
    strip_numeral_tokens,
)

# Allowed identifiers
from fuzzycal.core.math.identifiers import (
    ALLOWED_IDENTIFIERS,
    ENGINE_CONSTANTS,
    ENGINE_FUNCTIONS,
    IDENTIFIER_TO_ENGINE,
    is_allowed_identifier,
)

# Expression evaluator
from fuzzycal.core.math.expression import (
    UNSAFE_CHARACTERS,
    EvaluatorConfig,
    ExpressionEvaluator,
    evaluate_expression,
    validate_expression,
)

# Base converter
from fuzzycal.core.math.base_converter import (
    NumeralConverter,
    convert_bases,
    detect_base_from_tag,
    parse_auto,
    parse_base_spec,
    parse_numeral,
)

# Result formatting
from fuzzycal.core.math.result_formatter import (
    MAX_SAFE_INTEGER,
    build_number_results,
    conversion_items,
    format_number,
    is_safe_integer,
)

__all__ = [
    # Radix — Constants
    "BASE_PREFIXES",
    # Radix — Functions
    "clamp_base",
    "format_base",
    "parse_digits",
    "parse_signed_digits",
    "to_bin",
    "to_dec",
    "to_hex",
    "to_oct",
    # Numeral tokens
    "promote_leading_zero_numerals",
    "strip_numeral_tokens",
    # Identifiers
    "ALLOWED_IDENTIFIERS",
    "ENGINE_CONSTANTS",
    "ENGINE_FUNCTIONS",
    "IDENTIFIER_TO_ENGINE",
    "is_allowed_identifier",
    # Expression — Types
    "UNSAFE_CHARACTERS",
    "EvaluatorConfig",
    "ExpressionEvaluator",
    # Expression — Functions
    "evaluate_expression",
    "validate_expression",
    # Base converter — Types
    "NumeralConverter",
    # Base converter — Functions
    "convert_bases",
    "detect_base_from_tag",
    "parse_auto",
    "parse_base_spec",
    "parse_numeral",
    # Result formatting
    "MAX_SAFE_INTEGER",
    "build_number_results",
    "conversion_items",
    "format_number",
    "is_safe_integer",
]
