"""Expression Evaluator — рекурсивный спуск с вычислением за один проход.

Грамматика (по возрастанию приоритета, левая ассоциативность):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '(' expression ')'
                | '-' factor
                | '+' factor
                | identifier '(' expression ')'
                | number
    number     := digits ('.' digits)? (('e' | 'E') ('+' | '-')? digits)?
    identifier := letter (letter | digit)*

Нет отдельного потока токенов и нет AST: каждое правило читает символы через
ParserCursor и сразу возвращает EvalResult. Ошибки распространяются
возвратом: вызывающее правило проверяет result.ok и немедленно возвращает
тот же результат, не читая ввод дальше. Первая ошибка выигрывает.
"""

import string
from typing import Final, Mapping, Optional

from scicalc.core.domain.result import ErrorKind, EvalResult
from scicalc.core.math.numerical_safeguards import is_valid_float
from scicalc.core.math.primitives import add, divide, multiply, subtract
from scicalc.parser.config import ParserConfig
from scicalc.parser.cursor import WHITESPACE, ParserCursor
from scicalc.parser.functions import DEFAULT_FUNCTIONS, UnaryFunction

DIGITS: Final[str] = string.digits
LETTERS: Final[str] = string.ascii_letters
EXPONENT_MARKERS: Final[str] = "eE"


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in DIGITS


def _is_letter(ch: Optional[str]) -> bool:
    return ch is not None and ch in LETTERS


class ExpressionEvaluator:
    """Вычислитель выражений.

    Экземпляр хранит только неизменяемую конфигурацию и таблицу функций,
    поэтому reentrant и может использоваться из нескольких потоков.
    Всё состояние разбора живёт в ParserCursor одного вызова evaluate().
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        functions: Optional[Mapping[str, UnaryFunction]] = None,
    ):
        """
        Args:
            config: лимиты и режимы разбора (default: ParserConfig())
            functions: таблица функций одного аргумента (default: DEFAULT_FUNCTIONS)
        """
        self.config = config or ParserConfig()
        self.functions: Mapping[str, UnaryFunction] = (
            DEFAULT_FUNCTIONS if functions is None else dict(functions)
        )

    def evaluate(self, expression: str) -> EvalResult:
        """Разбор и вычисление выражения.

        Args:
            expression: текст выражения ('.' как десятичный разделитель)

        Returns:
            EvalResult со значением или первой обнаруженной ошибкой
        """
        if not isinstance(expression, str):
            return EvalResult.failure(
                ErrorKind.INVALID_INPUT, f"expression must be text, got {type(expression).__name__}"
            )
        if not expression.strip(WHITESPACE):
            return EvalResult.failure(ErrorKind.INVALID_INPUT, "empty expression")

        cursor = ParserCursor(expression)
        try:
            result = self._expression(cursor)
        except RecursionError:
            # recursion limit был понижен после создания ParserConfig
            return self._parse_error(
                cursor, f"nesting exceeds interpreter recursion limit at position {cursor.position}"
            )
        if not result.ok:
            return result

        if self.config.strict_trailing:
            cursor.skip_whitespace()
            if not cursor.at_end:
                return self._parse_error(cursor, f"trailing input: {cursor.describe()}")

        return result

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_error(cursor: ParserCursor, detail: str) -> EvalResult:
        cursor.fail(ErrorKind.PARSE_ERROR)
        return EvalResult.failure(ErrorKind.PARSE_ERROR, detail)

    @staticmethod
    def _propagate(cursor: ParserCursor, result: EvalResult) -> EvalResult:
        cursor.fail(result.error)
        return result

    # -------------------------------------------------------------------------
    # Grammar
    # -------------------------------------------------------------------------

    def _expression(self, cursor: ParserCursor) -> EvalResult:
        left = self._term(cursor)
        if not left.ok:
            return left

        while True:
            cursor.skip_whitespace()
            op = cursor.current_char
            if op not in ("+", "-"):
                return left
            cursor.advance()

            right = self._term(cursor)
            if not right.ok:
                return right

            if op == "+":
                combined = add(left.value, right.value)
            else:
                combined = subtract(left.value, right.value)
            if not combined.ok:
                return self._propagate(cursor, combined)
            left = combined

    def _term(self, cursor: ParserCursor) -> EvalResult:
        left = self._factor(cursor)
        if not left.ok:
            return left

        while True:
            cursor.skip_whitespace()
            op = cursor.current_char
            if op not in ("*", "/"):
                return left
            cursor.advance()

            right = self._factor(cursor)
            if not right.ok:
                return right

            if op == "*":
                combined = multiply(left.value, right.value)
            else:
                combined = divide(left.value, right.value)
            if not combined.ok:
                return self._propagate(cursor, combined)
            left = combined

    def _factor(self, cursor: ParserCursor) -> EvalResult:
        # failed: дальнейшие правила ничего не читают и не вычисляют
        if cursor.failed:
            return EvalResult.failure(cursor.error, f"parsing stopped at position {cursor.position}")

        cursor.skip_whitespace()
        if cursor.depth >= self.config.max_depth:
            return self._parse_error(
                cursor,
                f"nesting deeper than {self.config.max_depth} levels at position {cursor.position}",
            )

        cursor.depth += 1
        try:
            return self._factor_body(cursor)
        finally:
            cursor.depth -= 1

    def _factor_body(self, cursor: ParserCursor) -> EvalResult:
        ch = cursor.current_char

        if ch == "(":
            cursor.advance()
            inner = self._expression(cursor)
            if not inner.ok:
                return inner
            return self._expect_closing(cursor, inner)

        if ch == "-":
            cursor.advance()
            operand = self._factor(cursor)
            if not operand.ok:
                return operand
            return EvalResult.success(-operand.value)

        if ch == "+":
            cursor.advance()
            return self._factor(cursor)

        if _is_letter(ch):
            return self._call(cursor)

        if _is_digit(ch):
            return self._number(cursor)

        return self._parse_error(cursor, cursor.describe())

    def _expect_closing(self, cursor: ParserCursor, inner: EvalResult) -> EvalResult:
        cursor.skip_whitespace()
        if cursor.current_char != ")":
            return self._parse_error(cursor, f"expected ')', {cursor.describe()}")
        cursor.advance()
        return inner

    def _number(self, cursor: ParserCursor) -> EvalResult:
        start = cursor.position
        buffer: list[str] = []

        def take_digits() -> None:
            while _is_digit(cursor.current_char):
                buffer.append(cursor.current_char)
                cursor.advance()

        take_digits()

        if cursor.current_char == ".":
            buffer.append(".")
            cursor.advance()
            if not _is_digit(cursor.current_char):
                return self._parse_error(cursor, f"expected digit after '.', {cursor.describe()}")
            take_digits()

        if cursor.current_char is not None and cursor.current_char in EXPONENT_MARKERS:
            buffer.append("e")
            cursor.advance()
            if cursor.current_char in ("+", "-"):
                buffer.append(cursor.current_char)
                cursor.advance()
            if not _is_digit(cursor.current_char):
                return self._parse_error(cursor, f"expected exponent digits, {cursor.describe()}")
            take_digits()

        if len(buffer) > self.config.max_number_length:
            return self._parse_error(
                cursor,
                f"numeric literal at position {start} longer than "
                f"{self.config.max_number_length} characters",
            )

        literal = "".join(buffer)
        value = float(literal)
        if not is_valid_float(value):
            return self._propagate(
                cursor,
                EvalResult.failure(ErrorKind.OVERFLOW, f"numeric literal out of range: {literal}"),
            )
        return EvalResult.success(value)

    def _call(self, cursor: ParserCursor) -> EvalResult:
        start = cursor.position
        chars: list[str] = []
        while _is_letter(cursor.current_char) or _is_digit(cursor.current_char):
            chars.append(cursor.current_char)
            cursor.advance()

        if len(chars) > self.config.max_identifier_length:
            return self._parse_error(
                cursor,
                f"identifier at position {start} longer than "
                f"{self.config.max_identifier_length} characters",
            )

        name = "".join(chars)
        function = self.functions.get(name)
        if function is None:
            return self._parse_error(cursor, f"unknown function {name!r} at position {start}")

        if cursor.current_char != "(":
            return self._parse_error(cursor, f"expected '(' after {name!r}, {cursor.describe()}")
        cursor.advance()

        argument = self._expression(cursor)
        if not argument.ok:
            return argument
        argument = self._expect_closing(cursor, argument)
        if not argument.ok:
            return argument

        result = function(argument.value)
        if not result.ok:
            return self._propagate(cursor, result)
        return result


_DEFAULT_EVALUATOR = ExpressionEvaluator()


def evaluate(expression: str, config: Optional[ParserConfig] = None) -> EvalResult:
    """
    Вычисление выражения (единственная операция ядра для front end'а).

    Examples:
        >>> evaluate("2+3*4").value
        14.0
        >>> evaluate("1/0").error
        <ErrorKind.DIVISION_BY_ZERO: 'DivisionByZero'>
    """
    evaluator = _DEFAULT_EVALUATOR if config is None else ExpressionEvaluator(config)
    return evaluator.evaluate(expression)
