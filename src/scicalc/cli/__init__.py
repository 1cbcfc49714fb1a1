"""Interactive and one-shot command line front end."""

from .repl import build_parser, format_result, main, run_repl

__all__ = ["build_parser", "format_result", "main", "run_repl"]
