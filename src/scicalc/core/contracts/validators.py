"""
JSON Schema контракт payload'а EvalResult.

Front end в режиме --json проверяет EvalResult.to_payload() против
schema/eval_result.json (Draft 2020-12) перед выводом.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"
EVAL_RESULT_SCHEMA = "eval_result"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Args:
        schema_name: Имя схемы без расширения (например, 'eval_result')
        schema_dir: Каталог схем (default: schema/ рядом с модулем)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
    return schema


class EvalResultValidator:
    """Валидатор payload'а EvalResult."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema = load_schema(EVAL_RESULT_SCHEMA, schema_dir)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self._validator.validate(data)


@lru_cache(maxsize=1)
def _default_validator() -> EvalResultValidator:
    return EvalResultValidator()


def validate_eval_result(data: Dict[str, Any]) -> None:
    """
    Валидация payload результата вычисления.

    Args:
        data: Результат EvalResult.to_payload()

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _default_validator().validate(data)
