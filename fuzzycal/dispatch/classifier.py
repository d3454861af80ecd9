"""
Classifier — Выбор конвейера для произвольного текста

Для текста без явного тега решает: число (NumeralConverter) или выражение
(ExpressionEvaluator).

Порядок проверок:
1. Пустой или слишком длинный текст → IGNORED
2. Явный тег основания ("FF -> dec") → NUMERAL
3. Явная нотация числа (префикс, суффикс, N#value, base N, только цифры) → NUMERAL
4. hex-цифры с хотя бы одной буквой a-f → NUMERAL
5. Только двоичные или только восьмеричные цифры → NUMERAL
6. Не проходит валидацию выражения → IGNORED
7. Иначе → EXPRESSION

Числовые проверки идут раньше валидации выражения: строка из одних цифр
иначе прошла бы как (вырожденное) выражение.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, List, Optional

from fuzzycal.core.domain.results import ResultItem
from fuzzycal.core.errors import FuzzyCalError
from fuzzycal.core.math.base_converter import (
    NumeralConverter,
    detect_base_from_tag,
    parse_base_spec,
)
from fuzzycal.core.math.expression import ExpressionEvaluator
from fuzzycal.core.math.result_formatter import build_number_results, conversion_items

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

_EXPLICIT_NUMERAL_RE: Final = re.compile(
    r"^\s*[+-]?(?:0x[0-9a-f_]+|0b[01_]+|0o[0-7_]+|[0-9][0-9_]*|[0-9a-f_]+h|[01_]+b"
    r"|[0-7_]+o|\d{1,2}#[0-9a-z_]+|base\s*\d{1,2}\s+[0-9a-z_]+)\s*$",
    re.IGNORECASE,
)
_HEX_RUN_RE: Final = re.compile(r"^[+-]?[0-9a-f_]+$", re.IGNORECASE)
_HEX_LETTER_RE: Final = re.compile(r"[a-f]", re.IGNORECASE)
_BINARY_RUN_RE: Final = re.compile(r"^[+-]?[01_]+$")
_OCTAL_RUN_RE: Final = re.compile(r"^[+-]?[0-7_]+$")


# =============================================================================
# ENUMS / RESULTS
# =============================================================================


class InputKind(str, Enum):
    """Класс входного текста"""

    NUMERAL = "numeral"
    EXPRESSION = "expression"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ClassificationResult:
    """Результат классификации."""

    kind: InputKind
    text: str

    # Какое правило сработало (для диагностики)
    reason: str


@dataclass(frozen=True)
class DispatchResult:
    """
    Результат полного прогона: классификация + вычисление.

    При ошибке items пуст, а error содержит человекочитаемое сообщение.
    """

    kind: InputKind
    text: str
    items: List[ResultItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.items)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ClassifierConfig:
    """Конфигурация классификатора."""

    # Более длинные выделения игнорируются
    max_selection_length: int = 200


# =============================================================================
# CLASSIFIER
# =============================================================================


class SelectionClassifier:
    """
    Классификатор текста и диспетчер конвейеров.

    Stateless: вычислитель и конвертер не хранят состояния между вызовами.
    """

    def __init__(
        self,
        config: ClassifierConfig | None = None,
        evaluator: ExpressionEvaluator | None = None,
        converter: NumeralConverter | None = None,
    ):
        self.config = config or ClassifierConfig()
        self.evaluator = evaluator or ExpressionEvaluator()
        self.converter = converter or NumeralConverter()

    def classify(self, text: str) -> ClassificationResult:
        """
        Классификация текста.

        Args:
            text: Произвольный текст (например, выделение в редакторе)

        Returns:
            ClassificationResult с kind и сработавшим правилом
        """
        s = text.strip()

        if not s:
            return ClassificationResult(InputKind.IGNORED, s, "empty")
        if len(s) > self.config.max_selection_length:
            return ClassificationResult(InputKind.IGNORED, s, "too_long")

        spec = parse_base_spec(s)
        if spec.has_target and detect_base_from_tag(spec.right) is not None:
            return ClassificationResult(InputKind.NUMERAL, s, "target_tag")

        if _EXPLICIT_NUMERAL_RE.match(s):
            return ClassificationResult(InputKind.NUMERAL, s, "explicit_notation")
        if _HEX_RUN_RE.match(s) and _HEX_LETTER_RE.search(s):
            return ClassificationResult(InputKind.NUMERAL, s, "bare_hex")
        if _BINARY_RUN_RE.match(s):
            return ClassificationResult(InputKind.NUMERAL, s, "binary_run")
        if _OCTAL_RUN_RE.match(s):
            return ClassificationResult(InputKind.NUMERAL, s, "octal_run")

        error = self.evaluator.check(s)
        if error is not None:
            return ClassificationResult(InputKind.IGNORED, s, error)

        return ClassificationResult(InputKind.EXPRESSION, s, "valid_expression")

    def run(self, kind: InputKind, text: str) -> List[ResultItem]:
        """
        Прогон выбранного конвейера.

        Raises:
            FuzzyCalError: Любая ошибка конвейера (без частичных результатов)
            ValueError: Если kind == IGNORED
        """
        if kind == InputKind.NUMERAL:
            return conversion_items(self.converter.convert(text))
        if kind == InputKind.EXPRESSION:
            return build_number_results(self.evaluator.evaluate(text))
        raise ValueError(f"Cannot run pipeline for {kind.value} input")

    def dispatch(self, text: str) -> DispatchResult:
        """
        Классификация и вычисление с ошибкой в виде результата.

        Returns:
            DispatchResult (error заполнен при IGNORED или ошибке конвейера)
        """
        classification = self.classify(text)
        logger.debug(
            "Classified %r as %s (%s)",
            classification.text,
            classification.kind.value,
            classification.reason,
        )

        if classification.kind == InputKind.IGNORED:
            return DispatchResult(
                kind=classification.kind,
                text=classification.text,
                error=f"Input ignored: {classification.reason}",
            )

        try:
            items = self.run(classification.kind, classification.text)
        except FuzzyCalError as exc:
            return DispatchResult(kind=classification.kind, text=classification.text, error=str(exc))

        return DispatchResult(kind=classification.kind, text=classification.text, items=items)
