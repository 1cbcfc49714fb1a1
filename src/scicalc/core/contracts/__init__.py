"""
Contract Validation Module

Валидация JSON представления результатов вычисления.
"""

from .validators import EvalResultValidator, load_schema, validate_eval_result

__all__ = [
    "EvalResultValidator",
    "load_schema",
    "validate_eval_result",
]
