"""Таблица именованных функций одного аргумента.

Минимальный набор: sin, cos, log, sqrt. Остальные записи расширяют его
примитивами из scicalc.core.math. Таблица read-only; другой набор функций
передаётся в ExpressionEvaluator(functions=...).
"""

from types import MappingProxyType
from typing import Callable, Mapping

from scicalc.core.domain.result import EvalResult
from scicalc.core.math import primitives

UnaryFunction = Callable[[float], EvalResult]

DEFAULT_FUNCTIONS: Mapping[str, UnaryFunction] = MappingProxyType(
    {
        "sin": primitives.sin,
        "cos": primitives.cos,
        "tan": primitives.tan,
        "asin": primitives.asin,
        "acos": primitives.acos,
        "atan": primitives.atan,
        "log": primitives.log,
        "log10": primitives.log10,
        "exp": primitives.exp,
        "sqrt": primitives.sqrt,
        "abs": primitives.absolute,
        "fact": primitives.factorial,
    }
)


def function_names(functions: Mapping[str, UnaryFunction] = DEFAULT_FUNCTIONS) -> list[str]:
    return sorted(functions)
