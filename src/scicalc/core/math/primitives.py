"""
Primitives — арифметика и научные функции с классификацией ошибок

Каждая операция возвращает EvalResult и никогда не бросает исключение для
числового входа:
- add/subtract: проверка переполнения ДО вычисления
- multiply/divide: деление на ноль до вычисления, non-finite результат → OVERFLOW
- power/log/log10/sqrt/asin/acos: нарушение области определения → MATH_DOMAIN
- sin/cos/tan/atan/exp/absolute: non-finite вход → INVALID_INPUT
- factorial: только неотрицательные целые, n > 170 → OVERFLOW

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. SUCCESS возвращается только с конечным value
2. Ошибки math.* (ValueError/OverflowError) не выходят наружу
3. Нет общего состояния между вызовами
"""

import math

from scicalc.core.domain.result import ErrorKind, EvalResult
from scicalc.core.math.numerical_safeguards import (
    FACTORIAL_MAX_ARG,
    difference_overflows,
    is_integral,
    is_valid_float,
    sum_overflows,
)


def _finite_or(value: float, kind: ErrorKind, detail: str) -> EvalResult:
    if is_valid_float(value):
        return EvalResult.success(value)
    return EvalResult.failure(kind, detail)


def _non_finite_input(name: str, value: float) -> EvalResult:
    return EvalResult.failure(ErrorKind.INVALID_INPUT, f"{name}() argument is not finite: {value}")


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float) -> EvalResult:
    """
    Сложение с предварительной проверкой переполнения.

    Examples:
        >>> add(2.0, 3.0).value
        5.0
        >>> add(1.7e308, 1.7e308).error
        <ErrorKind.OVERFLOW: 'Overflow'>
    """
    if sum_overflows(a, b):
        return EvalResult.failure(ErrorKind.OVERFLOW, f"{a} + {b}")
    return _finite_or(a + b, ErrorKind.OVERFLOW, f"{a} + {b}")


def subtract(a: float, b: float) -> EvalResult:
    """Вычитание с предварительной проверкой переполнения."""
    if difference_overflows(a, b):
        return EvalResult.failure(ErrorKind.OVERFLOW, f"{a} - {b}")
    return _finite_or(a - b, ErrorKind.OVERFLOW, f"{a} - {b}")


def multiply(a: float, b: float) -> EvalResult:
    return _finite_or(a * b, ErrorKind.OVERFLOW, f"{a} * {b}")


def divide(a: float, b: float) -> EvalResult:
    """
    Деление.

    b == 0 → DIVISION_BY_ZERO без вычисления (в т.ч. для -0.0).
    Non-finite частное (например 1e308 / 1e-308) → OVERFLOW.
    """
    if b == 0:
        return EvalResult.failure(ErrorKind.DIVISION_BY_ZERO, f"{a} / {b}")
    return _finite_or(a / b, ErrorKind.OVERFLOW, f"{a} / {b}")


def power(base: float, exponent: float) -> EvalResult:
    """
    Возведение в степень через math.pow.

    Любая ошибка области определения (ValueError, например (-8) ** 0.5)
    или non-finite результат (OverflowError) классифицируется как MATH_DOMAIN.
    """
    detail = f"pow({base}, {exponent})"
    try:
        result = math.pow(base, exponent)
    except (ValueError, OverflowError):
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, detail)
    return _finite_or(result, ErrorKind.MATH_DOMAIN, detail)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(value: float) -> EvalResult:
    if not is_valid_float(value):
        return _non_finite_input("sin", value)
    return EvalResult.success(math.sin(value))


def cos(value: float) -> EvalResult:
    if not is_valid_float(value):
        return _non_finite_input("cos", value)
    return EvalResult.success(math.cos(value))


def tan(value: float) -> EvalResult:
    # Для конечного float tan конечен: pi/2 не представим точно
    if not is_valid_float(value):
        return _non_finite_input("tan", value)
    return _finite_or(math.tan(value), ErrorKind.MATH_DOMAIN, f"tan({value})")


def asin(value: float) -> EvalResult:
    """Арксинус, область определения [-1, 1] проверяется явно."""
    if not is_valid_float(value):
        return _non_finite_input("asin", value)
    if value < -1.0 or value > 1.0:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"asin() argument out of [-1, 1]: {value}")
    return EvalResult.success(math.asin(value))


def acos(value: float) -> EvalResult:
    """Арккосинус, область определения [-1, 1] проверяется явно."""
    if not is_valid_float(value):
        return _non_finite_input("acos", value)
    if value < -1.0 or value > 1.0:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"acos() argument out of [-1, 1]: {value}")
    return EvalResult.success(math.acos(value))


def atan(value: float) -> EvalResult:
    if not is_valid_float(value):
        return _non_finite_input("atan", value)
    return EvalResult.success(math.atan(value))


# =============================================================================
# ЛОГАРИФМЫ, ЭКСПОНЕНТА, КОРНИ
# =============================================================================


def log(value: float) -> EvalResult:
    """
    Натуральный логарифм.

    value <= 0 → MATH_DOMAIN до вызова math.log.
    NaN/Inf вход даёт non-finite результат → MATH_DOMAIN.
    """
    if value <= 0:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"log() argument must be positive: {value}")
    try:
        result = math.log(value)
    except ValueError:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"log({value})")
    return _finite_or(result, ErrorKind.MATH_DOMAIN, f"log({value})")


def log10(value: float) -> EvalResult:
    """Десятичный логарифм, те же правила что и log()."""
    if value <= 0:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"log10() argument must be positive: {value}")
    try:
        result = math.log10(value)
    except ValueError:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"log10({value})")
    return _finite_or(result, ErrorKind.MATH_DOMAIN, f"log10({value})")


def exp(value: float) -> EvalResult:
    """
    Экспонента.

    math.exp бросает OverflowError для value > ~709.78 → OVERFLOW.
    """
    if not is_valid_float(value):
        return _non_finite_input("exp", value)
    try:
        result = math.exp(value)
    except OverflowError:
        return EvalResult.failure(ErrorKind.OVERFLOW, f"exp({value})")
    return _finite_or(result, ErrorKind.OVERFLOW, f"exp({value})")


def sqrt(value: float) -> EvalResult:
    if value < 0:
        return EvalResult.failure(ErrorKind.MATH_DOMAIN, f"sqrt() argument must be non-negative: {value}")
    # sqrt(x) <= max(x, 1): переполнение невозможно, остаётся только NaN/Inf вход
    return _finite_or(math.sqrt(value), ErrorKind.MATH_DOMAIN, f"sqrt({value})")


def absolute(value: float) -> EvalResult:
    if not is_valid_float(value):
        return _non_finite_input("abs", value)
    return EvalResult.success(abs(value))


def factorial(value: float) -> EvalResult:
    """
    Факториал неотрицательного целого.

    Порядок проверок:
        1. value не целое или value < 0 (включая NaN/Inf) → MATH_DOMAIN
        2. value > FACTORIAL_MAX_ARG (170) → OVERFLOW
        3. итеративное произведение 2..n

    Examples:
        >>> factorial(5.0).value
        120.0
        >>> factorial(0.0).value
        1.0
        >>> factorial(171.0).error
        <ErrorKind.OVERFLOW: 'Overflow'>
    """
    if not is_integral(value) or value < 0:
        return EvalResult.failure(
            ErrorKind.MATH_DOMAIN, f"factorial() requires a non-negative integer: {value}"
        )
    if value > FACTORIAL_MAX_ARG:
        return EvalResult.failure(
            ErrorKind.OVERFLOW, f"factorial() argument exceeds {FACTORIAL_MAX_ARG}: {value}"
        )

    result = 1.0
    for k in range(2, int(value) + 1):
        result *= k
    return EvalResult.success(result)
