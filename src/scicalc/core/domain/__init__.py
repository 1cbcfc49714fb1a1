"""
Domain models and value objects.

Contains the evaluation result envelope and its error classification.
"""

from scicalc.core.domain.result import (
    MESSAGE_MAX_LENGTH,
    UNKNOWN_ERROR_MESSAGE,
    ErrorKind,
    EvalResult,
    error_message,
)

__all__ = [
    "MESSAGE_MAX_LENGTH",
    "UNKNOWN_ERROR_MESSAGE",
    "ErrorKind",
    "EvalResult",
    "error_message",
]
