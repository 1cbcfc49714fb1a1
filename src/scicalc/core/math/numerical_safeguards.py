"""
Numerical Safeguards — границы float64 и защитные проверки

Модуль собирает константы и проверки, на которые опираются примитивы
калькулятора:
- Границы представимого диапазона float64
- Проверки NaN/Inf
- Предварительная проверка переполнения для сложения и вычитания
- Epsilon-сравнения float для тестов и self-check

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверки не бросают исключений для любых float входов
2. Переполнение обнаруживается до вычисления (add/subtract)
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

# =============================================================================
# ГРАНИЦЫ FLOAT64
# =============================================================================

# Максимальное конечное значение float64 (~1.7976931348623157e308)
FLOAT_MAX: Final[float] = sys.float_info.max

# Наибольший аргумент факториала, результат которого ещё конечен:
# 170! ~ 7.26e306, 171! > FLOAT_MAX
FACTORIAL_MAX_ARG: Final[int] = 170


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения результатов вычислений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность (сравнения около нуля, например sin(pi))
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: float) -> bool:
    """
    Проверка, что float конечен и не имеет дробной части.

    Examples:
        >>> is_integral(5.0)
        True
        >>> is_integral(3.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return is_valid_float(value) and float(value).is_integer()


# =============================================================================
# ПРОВЕРКИ ПЕРЕПОЛНЕНИЯ
# =============================================================================


def sum_overflows(a: float, b: float, limit: float = FLOAT_MAX) -> bool:
    """
    Предварительная проверка переполнения для a + b.

    Сравнение выполняется без вычисления самой суммы:
        b > 0 и a > limit - b   → переполнение вверх
        b < 0 и a < -limit - b  → переполнение вниз

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        limit: Граница диапазона (default: FLOAT_MAX)

    Returns:
        True если сумма выходит за [-limit, limit]

    Examples:
        >>> sum_overflows(1.0, 2.0)
        False
        >>> sum_overflows(FLOAT_MAX, FLOAT_MAX)
        True
        >>> sum_overflows(-FLOAT_MAX, -FLOAT_MAX)
        True
    """
    if b > 0:
        return a > limit - b
    if b < 0:
        return a < -limit - b
    return False


def difference_overflows(a: float, b: float, limit: float = FLOAT_MAX) -> bool:
    """
    Предварительная проверка переполнения для a - b.

    Эквивалентна sum_overflows(a, -b): смена знака float точна.
    """
    return sum_overflows(a, -b, limit)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> # abs diff < abs_tol
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def validate_positive_limit(value: int, name: str) -> None:
    """
    Валидация целочисленного лимита (глубина, длина буфера).

    Raises:
        ValueError: Если value не является положительным int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
