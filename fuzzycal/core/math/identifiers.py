"""
Identifiers — Закрытый набор констант и функций выражений

Каждый допустимый идентификатор отображается на имя примитива движка
вычислений (ENGINE_CONSTANTS / ENGINE_FUNCTIONS). pi/PI и e/E различаются
как имена, но указывают на одну константу; ln является синонимом log.

Функции работают в double precision и повторяют семантику привычных
калькуляторных функций: round округляет половину вверх (к +inf), log:
натуральный логарифм, min/max принимают любое число аргументов.
"""

import math
from typing import Callable, Final, Mapping


def _round_half_up(x: float) -> float:
    # round(-2.5) == -2.0, round(2.5) == 3.0
    return float(math.floor(x + 0.5))


def _as_float(fn: Callable[..., float]) -> Callable[..., float]:
    def wrapper(*args: float) -> float:
        return float(fn(*args))

    wrapper.__name__ = getattr(fn, "__name__", "fn")
    return wrapper


# =============================================================================
# ENGINE PRIMITIVES
# =============================================================================

ENGINE_CONSTANTS: Final[Mapping[str, float]] = {
    "pi": math.pi,
    "e": math.e,
}

ENGINE_FUNCTIONS: Final[Mapping[str, Callable[..., float]]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "atan2": math.atan2,
    "pow": math.pow,
    "sqrt": math.sqrt,
    "abs": math.fabs,
    "log": math.log,
    "exp": math.exp,
    "min": _as_float(min),
    "max": _as_float(max),
    "floor": _as_float(math.floor),
    "ceil": _as_float(math.ceil),
    "round": _round_half_up,
    "trunc": _as_float(math.trunc),
}


# =============================================================================
# ALLOWED IDENTIFIERS
# =============================================================================

# Идентификатор выражения → имя примитива движка
IDENTIFIER_TO_ENGINE: Final[Mapping[str, str]] = {
    "pi": "pi",
    "PI": "pi",
    "e": "e",
    "E": "e",
    "sin": "sin",
    "cos": "cos",
    "tan": "tan",
    "asin": "asin",
    "acos": "acos",
    "atan": "atan",
    "atan2": "atan2",
    "pow": "pow",
    "sqrt": "sqrt",
    "abs": "abs",
    "log": "log",
    "ln": "log",
    "exp": "exp",
    "min": "min",
    "max": "max",
    "floor": "floor",
    "ceil": "ceil",
    "round": "round",
    "trunc": "trunc",
}

ALLOWED_IDENTIFIERS: Final[frozenset[str]] = frozenset(IDENTIFIER_TO_ENGINE)


def is_allowed_identifier(name: str) -> bool:
    """Проверка принадлежности к allowed-identifier set (регистр важен)."""
    return name in ALLOWED_IDENTIFIERS
