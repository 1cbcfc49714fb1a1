"""
Тесты для JSON Schema контракта eval_result

Проверяет:
1. Загрузка и meta-валидация схемы
2. Валидные payload'ы (success и все виды ошибок)
3. Отклонение нарушений контракта
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from scicalc.core.contracts import EvalResultValidator, load_schema, validate_eval_result
from scicalc.core.domain import ErrorKind, EvalResult
from scicalc.parser import evaluate


@pytest.fixture
def validator() -> EvalResultValidator:
    return EvalResultValidator()


class TestLoadSchema:
    """Тесты load_schema"""

    def test_loads_eval_result_schema(self):
        schema = load_schema("eval_result")
        assert schema["title"] == "EvalResult"

    def test_schema_cached(self):
        assert load_schema("eval_result") is load_schema("eval_result")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)

    def test_validator_from_custom_directory(self, tmp_path: Path):
        (tmp_path / "eval_result.json").write_text('{"type": "object"}', encoding="utf-8")
        EvalResultValidator(tmp_path).validate({"anything": 1})


class TestEvalResultContract:
    """Тесты payload'ов EvalResult"""

    def test_success_payload_valid(self, validator):
        validator.validate(evaluate("2+3*4").to_payload())

    @pytest.mark.parametrize("expression", ["", "1/0", "log(-1)", "fact(171)", "2+", "foo(1)"])
    def test_error_payloads_valid(self, validator, expression):
        result = evaluate(expression)
        assert not result.ok
        validator.validate(result.to_payload())

    @pytest.mark.parametrize("kind", [kind for kind in ErrorKind if kind != ErrorKind.SUCCESS])
    def test_every_error_kind_valid(self, kind):
        validate_eval_result(EvalResult.failure(kind).to_payload())

    def test_success_with_message_invalid(self, validator):
        payload = {"value": 1.0, "error": "Success", "message": "unexpected"}
        with pytest.raises(ValidationError):
            validator.validate(payload)

    def test_error_with_value_invalid(self, validator):
        payload = {"value": 1.0, "error": "Overflow", "message": "Overflow error"}
        with pytest.raises(ValidationError):
            validator.validate(payload)

    def test_unknown_error_kind_invalid(self, validator):
        payload = {"value": None, "error": "Boom", "message": "Unknown error"}
        with pytest.raises(ValidationError, match="Boom"):
            validator.validate(payload)

    def test_extra_fields_invalid(self, validator):
        payload = {"value": 1.0, "error": "Success", "message": "", "position": 3}
        with pytest.raises(ValidationError):
            validator.validate(payload)
