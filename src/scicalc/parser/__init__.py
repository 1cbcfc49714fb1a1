"""Parser — рекурсивный спуск по тексту выражения с вычислением на лету.

- ParserConfig: лимиты вложенности и длины литералов, strict_trailing
- ParserCursor: позиция разбора одного вызова
- ExpressionEvaluator / evaluate: единственная операция для front end'а
"""

from .config import ParserConfig
from .cursor import ParserCursor
from .evaluator import ExpressionEvaluator, evaluate
from .functions import DEFAULT_FUNCTIONS, UnaryFunction, function_names

__all__ = [
    "ParserConfig",
    "ParserCursor",
    "ExpressionEvaluator",
    "evaluate",
    "DEFAULT_FUNCTIONS",
    "UnaryFunction",
    "function_names",
]
