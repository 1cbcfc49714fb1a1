"""
scicalc — recursive-descent evaluator for arithmetic and scientific expressions.

The core is a pure function of its input text: ``evaluate(expression)``
returns an ``EvalResult`` carrying either a float64 value or a classified
error. Nothing in the core performs I/O or keeps state between calls.
"""

from scicalc.core.domain.result import ErrorKind, EvalResult, error_message
from scicalc.parser import ExpressionEvaluator, ParserConfig, evaluate

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "EvalResult",
    "error_message",
    "ExpressionEvaluator",
    "ParserConfig",
    "evaluate",
]
