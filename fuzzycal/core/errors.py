"""
Errors — Таксономия ошибок ядра

Все ошибки локальные, синхронные и не требуют повторов (за исключением
единственной попытки leading-zero promotion в ExpressionEvaluator).

Иерархия:
    FuzzyCalError (ValueError)
    ├── EmptyInput
    ├── UnsafeCharacter
    ├── UnknownIdentifier
    ├── InvalidExpression
    ├── UnrecognizedFormat
    └── InvalidDigit
"""


class FuzzyCalError(ValueError):
    """Базовая ошибка ядра. Сообщение всегда человекочитаемое."""


class EmptyInput(FuzzyCalError):
    """Пустой ввод или только пробелы."""

    def __init__(self, message: str = "Expression is empty"):
        super().__init__(message)


class UnsafeCharacter(FuzzyCalError):
    """Ввод содержит кавычки, обратный слэш или точку с запятой."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unsafe character in input: {char!r}")


class UnknownIdentifier(FuzzyCalError):
    """Идентификатор вне allowed-identifier set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported identifier: {name}")


class InvalidExpression(FuzzyCalError):
    """Выражение не удалось разобрать или вычислить."""


class UnrecognizedFormat(FuzzyCalError):
    """Ни одна нотация числа не подошла."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unrecognized number format: {text!r}")


class InvalidDigit(FuzzyCalError):
    """Цифра вне алфавита или больше основания системы счисления."""

    def __init__(self, digit: str, base: int):
        self.digit = digit
        self.base = base
        super().__init__(f"Digit {digit!r} is out of range for base {base}")
