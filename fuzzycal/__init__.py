"""
FuzzyCal — calculator and base converter core.

Public entry points:
- validate_expression / evaluate_expression
- convert_bases
- build_number_results
"""

from fuzzycal.core.math import (
    build_number_results,
    conversion_items,
    convert_bases,
    evaluate_expression,
    validate_expression,
)

__version__ = "0.1.0"

__all__ = [
    "build_number_results",
    "conversion_items",
    "convert_bases",
    "evaluate_expression",
    "validate_expression",
]
