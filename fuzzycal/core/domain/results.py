"""
Results — Модели результатов для отображения

ResultItem: пара (label, description). Порядок элементов в списке значим
(Hex, Dec, Bin, Oct для конверсии; Dec, Hex, Bin, Oct для выражения).
ConversionResult: четыре канонических представления целого + опциональное
представление в запрошенном целевом основании.
"""

import re
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field, field_validator

_HEX_RENDERING_RE: Final = re.compile(r"^-?0x[0-9A-F]+$")


class ResultItem(BaseModel):
    """Одна строка результата: label копируется, description поясняет."""

    label: str = Field(..., min_length=1, description="Значение для копирования")
    description: str = Field(..., description="Подпись (Hex, Dec, Bin, Oct, ...)")

    model_config = {"frozen": True}


class ConversionResult(BaseModel):
    """
    Канонические представления одного целого числа.

    Все четыре поля выведены из одного и того же знакового целого, поэтому
    точны и согласованы для любой величины (в т.ч. > 2**53).
    """

    hex: str = Field(..., description="0x + верхний регистр, знак перед префиксом")
    dec: str = Field(..., description="Десятичное без префикса")
    bin: str = Field(..., description="0b + двоичные цифры")
    oct: str = Field(..., description="0o + восьмеричные цифры")
    first: Optional[str] = Field(None, description="Представление в целевом основании")

    model_config = {"frozen": True}

    @field_validator("hex")
    @classmethod
    def validate_hex_prefix(cls, v: str) -> str:
        """Знак всегда стоит перед префиксом: -0xFF, не 0x-FF"""
        if not _HEX_RENDERING_RE.match(v):
            raise ValueError(f"hex rendering must look like 0xFF or -0xFF, got {v!r}")
        return v

    def to_payload(self) -> Dict[str, Any]:
        """Словарь для передачи в UI (first опускается, если не задан)."""
        return self.model_dump(exclude_none=True)
