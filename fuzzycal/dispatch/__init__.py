"""Dispatch — выбор конвейера для произвольного текста и debounce выделений.

- SelectionClassifier: NUMERAL / EXPRESSION / IGNORED
- SelectionSession: события выделения → отложенное вычисление → sink
"""

from .classifier import (
    ClassificationResult,
    ClassifierConfig,
    DispatchResult,
    InputKind,
    SelectionClassifier,
)
from .session import Debouncer, SelectionConfig, SelectionSession

__all__ = [
    "ClassificationResult",
    "ClassifierConfig",
    "DispatchResult",
    "InputKind",
    "SelectionClassifier",
    "Debouncer",
    "SelectionConfig",
    "SelectionSession",
]
