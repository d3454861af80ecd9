"""
Contracts — JSON Schema для payload, уходящих в UI и в `fuzzycal --json`

- conversion_result.json: hex/dec/bin/oct (+ first) после NumeralConverter
- result_items.json: упорядоченный список (label, description)

Схемы лежат в schema/ рядом с модулем, проверяются по Draft 2020-12
один раз при загрузке. Нарушение контракта означает ошибку в коде
форматирования, поэтому наружу уходит jsonschema.ValidationError как есть.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Union

import jsonschema
from jsonschema import Draft202012Validator

Payload = Union[Dict[str, Any], List[Any]]

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

CONVERSION_RESULT_SCHEMA: Final[str] = "conversion_result"
RESULT_ITEMS_SCHEMA: Final[str] = "result_items"


class SchemaLoader:
    """Чтение и meta-проверка схем из каталога, с кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: нет файла <schema_name>.json
            ValueError: схема не проходит Draft 2020-12 meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as exc:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {exc.message}") from exc

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


class ContractValidator:
    """Draft 2020-12 валидатор одной схемы из schema/."""

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Payload) -> None:
        self._validator.validate(data)

    def is_valid(self, data: Payload) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Payload) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


class ConversionResultValidator(ContractValidator):
    schema_name = CONVERSION_RESULT_SCHEMA


class ResultItemsValidator(ContractValidator):
    schema_name = RESULT_ITEMS_SCHEMA


# Валидаторы без состояния: по одному на процесс
_CONVERSION_RESULT_VALIDATOR = ConversionResultValidator()
_RESULT_ITEMS_VALIDATOR = ResultItemsValidator()


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """Проверка ConversionResult.to_payload()."""
    _CONVERSION_RESULT_VALIDATOR.validate(data)


def validate_result_items(data: List[Dict[str, Any]]) -> None:
    _RESULT_ITEMS_VALIDATOR.validate(data)
