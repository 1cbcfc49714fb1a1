"""Self-check — прогон контрольных выражений с отчётом как значением.

Счётчики passed/failed не хранятся в глобальном состоянии: каждый вызов
run_self_check() возвращает собственный SelfCheckReport, поэтому прогоны
можно выполнять параллельно.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from scicalc.core.domain.result import ErrorKind, EvalResult
from scicalc.core.math.numerical_safeguards import is_close
from scicalc.logging import get_logger
from scicalc.parser.evaluator import ExpressionEvaluator

logger = get_logger()


@dataclass(frozen=True)
class SelfCheckCase:
    """Контрольное выражение и ожидаемый результат.

    expected_value проверяется только при expected_error == SUCCESS.
    """
    expression: str
    expected_error: ErrorKind = ErrorKind.SUCCESS
    expected_value: Optional[float] = None

    def matches(self, result: EvalResult) -> bool:
        if result.error != self.expected_error:
            return False
        if self.expected_error != ErrorKind.SUCCESS or self.expected_value is None:
            return True
        return is_close(result.value, self.expected_value)


@dataclass(frozen=True)
class SelfCheckFailure:
    case: SelfCheckCase
    actual: EvalResult

    def describe(self) -> str:
        expected = self.case.expected_error.value
        if self.case.expected_error == ErrorKind.SUCCESS and self.case.expected_value is not None:
            expected = f"{self.case.expected_value!r}"
        actual = repr(self.actual.value) if self.actual.ok else self.actual.message
        return f"{self.case.expression!r}: expected {expected}, got {actual}"


@dataclass(frozen=True)
class SelfCheckReport:
    """Результат одного прогона self-check."""

    total: int
    passed: int
    failures: tuple[SelfCheckFailure, ...]

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def all_passed(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        return f"{self.passed}/{self.total} self-check cases passed"


DEFAULT_CASES: tuple[SelfCheckCase, ...] = (
    SelfCheckCase("2+3*4", expected_value=14.0),
    SelfCheckCase("(2+3)*4", expected_value=20.0),
    SelfCheckCase("10 - 4 - 3", expected_value=3.0),
    SelfCheckCase("8 / 4 / 2", expected_value=1.0),
    SelfCheckCase("-(2 + 3)", expected_value=-5.0),
    SelfCheckCase("sin(0)", expected_value=0.0),
    SelfCheckCase("cos(0)", expected_value=1.0),
    SelfCheckCase("sqrt(16)", expected_value=4.0),
    SelfCheckCase("log(1)", expected_value=0.0),
    SelfCheckCase("sqrt(sqrt(256))", expected_value=4.0),
    SelfCheckCase("fact(5)", expected_value=120.0),
    SelfCheckCase("", expected_error=ErrorKind.INVALID_INPUT),
    SelfCheckCase("   ", expected_error=ErrorKind.INVALID_INPUT),
    SelfCheckCase("1/0", expected_error=ErrorKind.DIVISION_BY_ZERO),
    SelfCheckCase("log(-1)", expected_error=ErrorKind.MATH_DOMAIN),
    SelfCheckCase("sqrt(-4)", expected_error=ErrorKind.MATH_DOMAIN),
    SelfCheckCase("fact(171)", expected_error=ErrorKind.OVERFLOW),
    SelfCheckCase("2+", expected_error=ErrorKind.PARSE_ERROR),
    SelfCheckCase("(2+3", expected_error=ErrorKind.PARSE_ERROR),
    SelfCheckCase("foo(1)", expected_error=ErrorKind.PARSE_ERROR),
)


def run_self_check(
    cases: Iterable[SelfCheckCase] = DEFAULT_CASES,
    evaluator: Optional[ExpressionEvaluator] = None,
) -> SelfCheckReport:
    """
    Прогон контрольных выражений.

    Args:
        cases: контрольные выражения (default: DEFAULT_CASES)
        evaluator: вычислитель (default: ExpressionEvaluator())

    Returns:
        SelfCheckReport этого прогона
    """
    evaluator = evaluator or ExpressionEvaluator()
    total = 0
    failures: list[SelfCheckFailure] = []

    for case in cases:
        total += 1
        result = evaluator.evaluate(case.expression)
        if not case.matches(result):
            failure = SelfCheckFailure(case=case, actual=result)
            logger.debug("self-check failed: %s", failure.describe())
            failures.append(failure)

    return SelfCheckReport(total=total, passed=total - len(failures), failures=tuple(failures))
