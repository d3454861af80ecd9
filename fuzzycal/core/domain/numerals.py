"""
Numerals — Модели разобранного числа и спецификации основания

NumeralToken: знаковое целое произвольной точности + происхождение
(исходное основание, нотация, опциональное целевое основание).
BaseSpec: разбиение ввода на значение и тег целевого основания
("FF -> dec", "1010 to hex").

Immutable Pydantic модели, живут одну конверсию.
"""

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# 36-символьный алфавит цифр (регистр не важен при разборе)
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ENUMS
# =============================================================================


class NumeralNotation(str, Enum):
    """Нотация, по которой было распознано число"""

    RADIX_HASH = "radix_hash"  # 16#FF
    BASE_WORD = "base_word"  # base2 1010
    LEADING_ZERO = "leading_zero"  # 0123 -> hex
    PREFIXED = "prefixed"  # 0x / 0b / 0o
    SUFFIXED = "suffixed"  # FFh / 1010b / 17o
    DECIMAL = "decimal"  # 255
    BARE_HEX = "bare_hex"  # FF, deadbeef


# =============================================================================
# MODELS
# =============================================================================


class BaseSpec(BaseModel):
    """
    Результат разбиения ввода по стрелке ("->") или слову "to".

    left:  значение (всегда присутствует, может быть пустым)
    right: тег целевого основания ("" если не указан)
    """

    left: str = Field(..., description="Часть со значением")
    right: str = Field("", description="Тег целевого основания")

    model_config = {"frozen": True}

    @property
    def has_target(self) -> bool:
        return bool(self.right)


class NumeralToken(BaseModel):
    """
    Разобранное целое число.

    value: знаковое целое произвольной точности (Python int)
    from_base: основание, в котором было записано значение
    target_base: основание из тега BaseSpec.right (если распознан)
    """

    value: int = Field(..., description="Значение (arbitrary precision)")
    from_base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Исходное основание")
    notation: NumeralNotation = Field(..., description="Распознанная нотация")
    target_base: Optional[int] = Field(
        None, ge=MIN_BASE, le=MAX_BASE, description="Целевое основание из тега"
    )

    model_config = {"frozen": True}

    @property
    def is_negative(self) -> bool:
        return self.value < 0
