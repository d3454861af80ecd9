"""
Contract Validation Module

Валидация JSON payload, передаваемых на границу UI.
"""

from .validators import (
    ContractValidator,
    ConversionResultValidator,
    ResultItemsValidator,
    SchemaLoader,
    validate_conversion_result,
    validate_result_items,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionResultValidator",
    "ResultItemsValidator",
    # Functions
    "validate_conversion_result",
    "validate_result_items",
]
