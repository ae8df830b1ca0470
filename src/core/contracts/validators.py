"""
JSON Schema контракт для ChargeOutcome

Вывод CLI в режиме --json (успех или ошибка валидации) проверяется
против schema/charge_outcome.json перед выдачей потребителю.
Использует библиотеку jsonschema (Draft 2020-12).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

OUTCOME_SCHEMA_NAME: Final[str] = "charge_outcome"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (с кэшированием).

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Директория со схемами

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является корректной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


_OUTCOME_VALIDATOR = Draft202012Validator(load_schema(OUTCOME_SCHEMA_NAME))


def validate_charge_outcome(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованного ChargeOutcome (model_dump(mode="json")).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _OUTCOME_VALIDATOR.validate(data)


def outcome_errors(data: Dict[str, Any]) -> list[str]:
    """Все нарушения контракта в виде "путь: сообщение" (пустой список, если данные валидны)."""
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in sorted(
            _OUTCOME_VALIDATOR.iter_errors(data),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
    ]
