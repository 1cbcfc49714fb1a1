"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Границы float64 и константы
2. NaN/Inf и целочисленные проверки
3. Предварительную проверку переполнения add/subtract
4. Epsilon-сравнения float
5. Валидацию лимитов
"""

import doctest
import math
import sys

import pytest

from scicalc.core.math import numerical_safeguards
from scicalc.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FACTORIAL_MAX_ARG,
    FLOAT_MAX,
    difference_overflows,
    is_close,
    is_integral,
    is_valid_float,
    sum_overflows,
    validate_positive_limit,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Тесты констант"""

    def test_float_max_is_system_limit(self) -> None:
        assert FLOAT_MAX == sys.float_info.max
        assert math.isinf(FLOAT_MAX * 2)

    def test_factorial_max_arg_is_last_finite(self) -> None:
        """170! конечен, 171! уже нет"""
        assert math.isfinite(float(math.factorial(FACTORIAL_MAX_ARG)))
        with pytest.raises(OverflowError):
            float(math.factorial(FACTORIAL_MAX_ARG + 1))

    def test_tolerances_positive(self) -> None:
        assert EPS_FLOAT_COMPARE_REL > 0
        assert EPS_FLOAT_COMPARE_ABS > 0


# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e308)
        assert is_valid_float(-1e-10)

    def test_nan_invalid(self) -> None:
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsIntegral:
    """Тесты для is_integral"""

    def test_whole_numbers(self) -> None:
        assert is_integral(0.0)
        assert is_integral(5.0)
        assert is_integral(-3.0)
        assert is_integral(1e20)

    def test_fractions(self) -> None:
        assert not is_integral(3.5)
        assert not is_integral(-0.1)

    def test_non_finite_not_integral(self) -> None:
        """Inf/NaN не считаются целыми (без OverflowError)"""
        assert not is_integral(float("inf"))
        assert not is_integral(float("nan"))


# =============================================================================
# ТЕСТЫ ПРОВЕРКИ ПЕРЕПОЛНЕНИЯ
# =============================================================================


class TestSumOverflows:
    """Тесты для sum_overflows"""

    def test_small_values_do_not_overflow(self) -> None:
        assert not sum_overflows(1.0, 2.0)
        assert not sum_overflows(-1.0, -2.0)
        assert not sum_overflows(1e300, 1e300)

    def test_zero_never_overflows(self) -> None:
        assert not sum_overflows(FLOAT_MAX, 0.0)
        assert not sum_overflows(-FLOAT_MAX, 0.0)

    def test_positive_overflow(self) -> None:
        assert sum_overflows(FLOAT_MAX, FLOAT_MAX)
        assert sum_overflows(1.5e308, 1e308)

    def test_negative_overflow(self) -> None:
        assert sum_overflows(-FLOAT_MAX, -FLOAT_MAX)
        assert sum_overflows(-1.5e308, -1e308)

    def test_opposite_signs_never_overflow(self) -> None:
        """Слагаемые разных знаков не переполняются"""
        assert not sum_overflows(FLOAT_MAX, -FLOAT_MAX)
        assert not sum_overflows(-FLOAT_MAX, FLOAT_MAX)


class TestDifferenceOverflows:
    """Тесты для difference_overflows"""

    def test_small_values_do_not_overflow(self) -> None:
        assert not difference_overflows(5.0, 3.0)

    def test_overflow_cases(self) -> None:
        assert difference_overflows(FLOAT_MAX, -FLOAT_MAX)
        assert difference_overflows(-FLOAT_MAX, FLOAT_MAX)

    def test_same_sign_never_overflows(self) -> None:
        assert not difference_overflows(FLOAT_MAX, FLOAT_MAX)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_equality(self) -> None:
        assert is_close(1.0, 1.0)

    def test_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)

    def test_absolute_tolerance_near_zero(self) -> None:
        """sin(pi) ~ 1.2e-16 считается нулём"""
        assert is_close(0.0, math.sin(math.pi))
        assert not is_close(0.0, 1e-6)

    def test_docstring_examples(self) -> None:
        """Примеры в docstring модуля выполняются"""
        outcome = doctest.testmod(numerical_safeguards)
        assert outcome.attempted > 0
        assert outcome.failed == 0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidatePositiveLimit:
    """Тесты для validate_positive_limit"""

    def test_valid_limit(self) -> None:
        validate_positive_limit(1, "max_depth")
        validate_positive_limit(128, "max_depth")

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_raises(self, value: int) -> None:
        with pytest.raises(ValueError, match="max_depth must be positive"):
            validate_positive_limit(value, "max_depth")

    @pytest.mark.parametrize("value", [1.5, "10", True, None])
    def test_non_int_raises(self, value: object) -> None:
        with pytest.raises(ValueError, match="max_depth must be an int"):
            validate_positive_limit(value, "max_depth")  # type: ignore[arg-type]
