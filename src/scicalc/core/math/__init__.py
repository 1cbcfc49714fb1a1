"""
Core math modules для scicalc

Математические примитивы с классификацией ошибок вместо исключений.
"""

# Numerical Safeguards
from scicalc.core.math.numerical_safeguards import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FACTORIAL_MAX_ARG,
    FLOAT_MAX,
    # Checks
    difference_overflows,
    is_close,
    is_integral,
    is_valid_float,
    sum_overflows,
    validate_positive_limit,
)

# Primitives
from scicalc.core.math.primitives import (
    absolute,
    acos,
    add,
    asin,
    atan,
    cos,
    divide,
    exp,
    factorial,
    log,
    log10,
    multiply,
    power,
    sin,
    sqrt,
    subtract,
    tan,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "FACTORIAL_MAX_ARG",
    "FLOAT_MAX",
    # Numerical Safeguards — Checks
    "difference_overflows",
    "is_close",
    "is_integral",
    "is_valid_float",
    "sum_overflows",
    "validate_positive_limit",
    # Primitives — Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    # Primitives — Scientific
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "log",
    "log10",
    "exp",
    "sqrt",
    "absolute",
    "factorial",
]
