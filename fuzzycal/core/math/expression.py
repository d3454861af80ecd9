"""
Expression — Безопасное вычисление арифметических выражений

Конвейер:
1. validate  — пустой ввод, небезопасные символы, неизвестные идентификаторы
               (числовые литералы вырезаются до поиска идентификаторов)
2. rewrite   — идентификаторы → имена примитивов движка, ^ → **
3. evaluate  — разбор в синтаксическое дерево и обход ограниченным
               вычислителем (литералы, скобки, + - * /, унарные +/-, **,
               вызовы функций из закрытой таблицы)
4. fallback  — при ошибке вычисления ровно одна попытка переписать
               ведущие нули в hex (0ff → 0x0ff) и вычислить ещё раз

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произвольный код не исполняется никогда: безопасность обеспечивается
   ограниченной грамматикой вычислителя, а не только валидацией
2. Fallback выполняется не более одного раза и только после ошибки
   вычисления (никогда после ошибки валидации)
3. Результат: конечный float; inf/nan/complex считаются ошибкой
"""

import ast
import logging
import math
import re
import unicodedata
from dataclasses import dataclass
from typing import Final, Optional

from fuzzycal.core.errors import (
    EmptyInput,
    FuzzyCalError,
    InvalidExpression,
    UnknownIdentifier,
    UnsafeCharacter,
)
from fuzzycal.core.math.identifiers import (
    ENGINE_CONSTANTS,
    ENGINE_FUNCTIONS,
    IDENTIFIER_TO_ENGINE,
    is_allowed_identifier,
)
from fuzzycal.core.math.numeral_tokens import (
    promote_leading_zero_numerals,
    strip_numeral_tokens,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

UNSAFE_CHARACTERS: Final[str] = "\"'`\\;"

_UNSAFE_RE: Final = re.compile(r"[\"'`\\;]")
# Любые буквы, включая не-ASCII; имена сверяются после NFKC, как в парсере
_WORD_RE: Final = re.compile(r"[^\W\d]+")

# Длинные имена первыми: atan2 раньше atan
_IDENTIFIER_RE: Final = re.compile(
    r"(?<![A-Za-z0-9_.])("
    + "|".join(sorted(IDENTIFIER_TO_ENGINE, key=len, reverse=True))
    + r")\b"
)

_BINARY_OPS: Final = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: lambda a, b: a / b,
    ast.Pow: lambda a, b: a**b,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация ExpressionEvaluator."""

    # Максимальная длина выражения (символов)
    max_length: int = 2000

    # Повторная попытка с 0ff → 0x0ff после ошибки вычисления
    leading_zero_fallback: bool = True


# =============================================================================
# EVALUATOR
# =============================================================================


class ExpressionEvaluator:
    """
    Вычислитель выражений над закрытым набором констант и функций.

    Stateless: конфигурация неизменяема.
    """

    def __init__(self, config: EvaluatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EvaluatorConfig()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, text: str) -> None:
        """
        Проверка выражения до вычисления.

        Raises:
            EmptyInput: Пустой ввод или только пробелы
            UnsafeCharacter: Кавычки, backtick, обратный слэш или ';'
            InvalidExpression: Выражение длиннее max_length
            UnknownIdentifier: Идентификатор вне allowed-identifier set
        """
        if not text or not text.strip():
            raise EmptyInput()

        unsafe = _UNSAFE_RE.search(text)
        if unsafe:
            raise UnsafeCharacter(unsafe.group(0))

        if len(text) > self.config.max_length:
            raise InvalidExpression(
                f"Expression too long (limit: {self.config.max_length} chars)"
            )

        normalized = unicodedata.normalize("NFKC", text)
        for match in _WORD_RE.finditer(strip_numeral_tokens(normalized)):
            if not is_allowed_identifier(match.group(0)):
                raise UnknownIdentifier(match.group(0))

    def check(self, text: str) -> Optional[str]:
        """Сообщение об ошибке валидации или None, если выражение допустимо."""
        try:
            self.validate(text)
        except FuzzyCalError as exc:
            return str(exc)
        return None

    # -------------------------------------------------------------------------
    # Rewrite
    # -------------------------------------------------------------------------

    @staticmethod
    def rewrite(text: str) -> str:
        """
        Идентификаторы → имена примитивов движка, ^ → **.

        Замена выполняется за один проход, поэтому уже переписанные имена
        повторно не затрагиваются.

        Examples:
            >>> ExpressionEvaluator.rewrite("ln(E)^2")
            'log(e)**2'
        """
        rewritten = _IDENTIFIER_RE.sub(lambda m: IDENTIFIER_TO_ENGINE[m.group(1)], text)
        return rewritten.replace("^", "**")

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self, text: str) -> float:
        """
        Валидация, переписывание и вычисление выражения.

        Args:
            text: Выражение, например "(2+3*4)/5", "sin(pi/6)", "0xff + 42"

        Returns:
            Конечный float

        Raises:
            EmptyInput, UnsafeCharacter, UnknownIdentifier: ошибки валидации
            InvalidExpression: выражение не удалось вычислить (в т.ч. после fallback)
        """
        self.validate(text)

        try:
            return self._evaluate_strict(text)
        except InvalidExpression as exc:
            if not self.config.leading_zero_fallback:
                raise

            promoted = promote_leading_zero_numerals(text)
            if promoted == text:
                raise

            logger.debug("Retrying %r with leading-zero hex promotion: %r", text, promoted)
            try:
                return self._evaluate_strict(promoted)
            except InvalidExpression:
                raise exc

    def _evaluate_strict(self, text: str) -> float:
        source = self.rewrite(text).strip()
        try:
            tree = ast.parse(source, mode="eval")
        except (SyntaxError, ValueError) as exc:
            msg = getattr(exc, "msg", None) or str(exc)
            raise InvalidExpression(f"Syntax error: {msg}") from exc

        try:
            value = self._eval_node(tree.body)
        except FuzzyCalError:
            raise
        except (ArithmeticError, ValueError, TypeError, RecursionError) as exc:
            raise InvalidExpression(f"Cannot evaluate expression: {exc}") from exc

        if isinstance(value, complex) or not math.isfinite(value):
            raise InvalidExpression(f"Result is not a finite real number: {value}")
        return value

    def _eval_node(self, node: ast.AST) -> float:
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
                raise InvalidExpression("Only numeric literals are allowed")
            return float(node.value)

        if isinstance(node, ast.UnaryOp):
            operand = self._eval_node(node.operand)
            if isinstance(node.op, ast.USub):
                return -operand
            if isinstance(node.op, ast.UAdd):
                return +operand
            raise InvalidExpression(f"Unsupported operator: {type(node.op).__name__}")

        if isinstance(node, ast.BinOp):
            op = _BINARY_OPS.get(type(node.op))
            if op is None:
                raise InvalidExpression(f"Unsupported operator: {type(node.op).__name__}")
            left = self._eval_node(node.left)
            right = self._eval_node(node.right)
            result = op(left, right)
            if isinstance(result, complex):
                raise InvalidExpression("Result is not a real number")
            return result

        if isinstance(node, ast.Name):
            name = IDENTIFIER_TO_ENGINE.get(node.id, node.id)
            if name in ENGINE_CONSTANTS:
                return ENGINE_CONSTANTS[name]
            raise InvalidExpression(f"Unknown name: {node.id}")

        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name):
                raise InvalidExpression("Only built-in math functions can be called")
            name = IDENTIFIER_TO_ENGINE.get(node.func.id, node.func.id)
            if name not in ENGINE_FUNCTIONS:
                raise InvalidExpression("Only built-in math functions can be called")
            if node.keywords or any(isinstance(arg, ast.Starred) for arg in node.args):
                raise InvalidExpression("Only positional arguments are allowed")
            args = [self._eval_node(arg) for arg in node.args]
            return ENGINE_FUNCTIONS[name](*args)

        raise InvalidExpression(f"Unsupported syntax: {type(node).__name__}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_EVALUATOR = ExpressionEvaluator()


def validate_expression(text: str) -> Optional[str]:
    """
    Валидация выражения без exception.

    Returns:
        Сообщение об ошибке или None
    """
    return _EVALUATOR.check(text)


def evaluate_expression(text: str) -> float:
    """Вычисление выражения общим экземпляром ExpressionEvaluator."""
    return _EVALUATOR.evaluate(text)
