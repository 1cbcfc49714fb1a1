"""Parser configuration: лимиты и режимы разбора выражений."""

import sys
from dataclasses import dataclass
from typing import Final

from scicalc.core.math.numerical_safeguards import validate_positive_limit

# Максимальная вложенность (скобки, вызовы функций, унарные знаки).
# Каждый уровень занимает до FRAMES_PER_LEVEL фреймов Python
# (factor → factor_body → call → expression → term).
MAX_DEPTH_DEFAULT: Final[int] = 128
FRAMES_PER_LEVEL: Final[int] = 5

# Фреймы, оставляемые вызывающему коду (test runner, CLI, pydantic)
RESERVED_FRAMES: Final[int] = 200

# Лимиты буферов литералов; более длинный литерал отклоняется, не обрезается
MAX_NUMBER_LENGTH_DEFAULT: Final[int] = 63
MAX_IDENTIFIER_LENGTH_DEFAULT: Final[int] = 31


def max_depth_limit() -> int:
    """Наибольший max_depth, который помещается в текущий recursion limit."""
    return max(1, (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL)


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация ExpressionEvaluator.

    - strict_trailing: False: ввод после полного выражения игнорируется
      ("2 3" → 2); True: это PARSE_ERROR
    - max_depth: лимит вложенности, превышение → PARSE_ERROR;
      не больше max_depth_limit()
    - max_number_length / max_identifier_length: длина литералов
    """
    strict_trailing: bool = False
    max_depth: int = MAX_DEPTH_DEFAULT
    max_number_length: int = MAX_NUMBER_LENGTH_DEFAULT
    max_identifier_length: int = MAX_IDENTIFIER_LENGTH_DEFAULT

    def __post_init__(self) -> None:
        validate_positive_limit(self.max_depth, "max_depth")
        validate_positive_limit(self.max_number_length, "max_number_length")
        validate_positive_limit(self.max_identifier_length, "max_identifier_length")

        limit = max_depth_limit()
        if self.max_depth > limit:
            raise ValueError(
                f"max_depth must be <= {limit} for recursion limit "
                f"{sys.getrecursionlimit()}, got {self.max_depth}"
            )
