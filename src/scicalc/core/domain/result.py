"""EvalResult — единый конверт результата вычисления

Каждая арифметическая/научная операция и итоговый evaluate() возвращают
EvalResult вместо исключения:
- value: float64 результат (при ошибке не используется, хранится 0.0)
- error: классификация ErrorKind
- message: короткое человекочитаемое сообщение, пустое при Success

Immutable Pydantic модель, создаётся заново каждой операцией.
"""

from enum import Enum
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator

# Максимальная длина message (включая префикс из error_message)
MESSAGE_MAX_LENGTH: Final[int] = 127


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Классификация результата вычисления (закрытое множество)."""

    SUCCESS = "Success"
    INVALID_INPUT = "InvalidInput"
    DIVISION_BY_ZERO = "DivisionByZero"
    MATH_DOMAIN = "MathDomain"
    OVERFLOW = "Overflow"
    PARSE_ERROR = "ParseError"


_ERROR_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.SUCCESS: "Success",
    ErrorKind.INVALID_INPUT: "Invalid input",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.MATH_DOMAIN: "Math domain error",
    ErrorKind.OVERFLOW: "Overflow error",
    ErrorKind.PARSE_ERROR: "Parse error",
}

UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error"


def error_message(kind: Any) -> str:
    """
    Фиксированное описание для ErrorKind.

    Args:
        kind: ErrorKind (или его строковое значение)

    Returns:
        Человекочитаемая строка; "Unknown error" для значений вне enum

    Examples:
        >>> error_message(ErrorKind.DIVISION_BY_ZERO)
        'Division by zero'
        >>> error_message("MathDomain")
        'Math domain error'
        >>> error_message(42)
        'Unknown error'
    """
    try:
        return _ERROR_MESSAGES[ErrorKind(kind)]
    except (ValueError, KeyError):
        return UNKNOWN_ERROR_MESSAGE


def _bounded(text: str, limit: int = MESSAGE_MAX_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


# =============================================================================
# MODELS
# =============================================================================


class EvalResult(BaseModel):
    """Результат операции или всего выражения.

    Инварианты:
    - error == SUCCESS → message == ""
    - error != SUCCESS → value игнорируется вызывающим кодом
    - len(message) <= MESSAGE_MAX_LENGTH
    """

    value: float = Field(0.0, description="Результат (только при SUCCESS)")
    error: ErrorKind = Field(ErrorKind.SUCCESS, description="Классификация результата")
    message: str = Field(
        "", max_length=MESSAGE_MAX_LENGTH, description="Описание ошибки, пусто при SUCCESS"
    )

    model_config = {"frozen": True}

    @field_validator("message")
    @classmethod
    def validate_message_empty_on_success(cls, v: str, info) -> str:
        """При SUCCESS сообщение должно быть пустым"""
        if info.data.get("error") == ErrorKind.SUCCESS and v:
            raise ValueError(f"message must be empty on success, got {v!r}")
        return v

    @classmethod
    def success(cls, value: float) -> "EvalResult":
        return cls(value=value, error=ErrorKind.SUCCESS, message="")

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str = "") -> "EvalResult":
        """
        Конструктор результата с ошибкой.

        Сообщение строится как error_message(kind) [+ ": " + detail] и
        обрезается до MESSAGE_MAX_LENGTH.

        Raises:
            ValueError: Если kind == SUCCESS (ошибка программиста)
        """
        if kind == ErrorKind.SUCCESS:
            raise ValueError("failure() requires a non-success ErrorKind")

        message = error_message(kind)
        if detail:
            message = f"{message}: {detail}"
        return cls(value=0.0, error=kind, message=_bounded(message))

    @property
    def ok(self) -> bool:
        return self.error == ErrorKind.SUCCESS

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-совместимое представление (контракт eval_result.json).

        value == None при ошибке: значение не определено.
        """
        value: Optional[float] = self.value if self.ok else None
        return {
            "value": value,
            "error": self.error.value,
            "message": self.message,
        }
