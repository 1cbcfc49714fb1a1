"""Command line front end: interactive loop and one-shot evaluation."""

from __future__ import annotations

import argparse
import json
import sys
from typing import TextIO

from scicalc.core.contracts import validate_eval_result
from scicalc.core.domain.result import EvalResult
from scicalc.logging import get_logger, set_level
from scicalc.parser import ExpressionEvaluator, ParserConfig, function_names
from scicalc.selfcheck import run_self_check

PROMPT = "> "
QUIT_COMMANDS = frozenset({"quit", "exit"})
DEFAULT_PRECISION = 6

logger = get_logger()


def format_result(result: EvalResult, precision: int = DEFAULT_PRECISION, as_json: bool = False) -> str:
    if as_json:
        payload = result.to_payload()
        validate_eval_result(payload)
        return json.dumps(payload, sort_keys=True)
    if result.ok:
        return f"{result.value:.{precision}f}"
    return result.message


def run_repl(
    evaluator: ExpressionEvaluator,
    stdin: TextIO,
    stdout: TextIO,
    precision: int = DEFAULT_PRECISION,
    as_json: bool = False,
) -> int:
    """Read-eval-print loop until quit/exit or EOF. Returns the number of failed lines."""
    interactive = stdin.isatty()
    failures = 0
    while True:
        if interactive:
            stdout.write(PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line.strip().lower() in QUIT_COMMANDS:
            break
        if not line.strip():
            continue

        result = evaluator.evaluate(line)
        if not result.ok:
            failures += 1
            logger.info("evaluation failed: %s", result.error.value)
        stdout.write(format_result(result, precision, as_json) + "\n")
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scicalc",
        description="Evaluate arithmetic and scientific expressions",
        epilog="Functions: " + ", ".join(function_names()),
    )
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        dest="expressions",
        help="Evaluate an expression and exit (repeatable); write --expression=-5 for expressions starting with '-'",
    )
    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION, help="Digits after the decimal point")
    parser.add_argument("--strict", action="store_true", help="Reject trailing input after an expression")
    parser.add_argument("--max-depth", type=int, default=ParserConfig().max_depth, help="Maximum nesting depth")
    parser.add_argument("--json", action="store_true", help="Print results as JSON payloads")
    parser.add_argument("--self-check", action="store_true", help="Run the built-in self-check and exit")
    parser.add_argument("--log-level", default="warning", help="Logging level (debug, info, warning, error)")
    return parser


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        set_level(args.log_level)
        config = ParserConfig(strict_trailing=args.strict, max_depth=args.max_depth)
    except ValueError as exc:
        parser.error(str(exc))
    if args.precision < 0:
        parser.error("--precision must be non-negative")

    evaluator = ExpressionEvaluator(config)
    logger.debug("evaluator ready: %s", config)

    if args.self_check:
        report = run_self_check(evaluator=evaluator)
        for failure in report.failures:
            stdout.write(f"FAIL {failure.describe()}\n")
        stdout.write(report.summary() + "\n")
        return 0 if report.all_passed else 1

    if args.expressions:
        failed = False
        for expression in args.expressions:
            result = evaluator.evaluate(expression)
            failed = failed or not result.ok
            stdout.write(format_result(result, args.precision, args.json) + "\n")
        return 1 if failed else 0

    run_repl(evaluator, stdin, stdout, precision=args.precision, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
