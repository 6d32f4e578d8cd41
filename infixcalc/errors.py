"""Error codes, terminal colours and the messages shown for failed evaluations."""

from __future__ import annotations

from enum import IntEnum

WHITE = "\033[0;37m"
RED = "\033[0;31m"
YELLOW = "\033[0;33m"
GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
CYAN = "\033[0;36m"
BLACK = "\033[0;30m"
NORMAL = "\033[0m"

BG_CYAN = "\033[0;46m"
BG_GREEN = "\033[0;42m"
BG_YELLOW = "\033[0;43m"
BG_RED = "\033[0;41m"


class ErrorCode(IntEnum):
    """Outcome of converting or evaluating an expression."""

    SUCCESSFUL_EXIT = 0
    NO_STRING_TO_PARSE = 1
    UNDEFINED_OPERATION = 2
    MISSING_OPERANDS = 3
    MISSING_OPERATOR = 4
    DIVIDE_BY_ZERO = 5
    UNDEFINED = 6
    INDETERMINATE = 7


_MESSAGES = {
    ErrorCode.UNDEFINED_OPERATION: "UNDEFINED OPERATION ERROR!",
    ErrorCode.MISSING_OPERANDS: "MISSING OPERANDS ERROR!",
    ErrorCode.MISSING_OPERATOR: "MISSING OPERATOR ERROR!",
    ErrorCode.DIVIDE_BY_ZERO: "DIVISION BY ZERO ERROR!",
    ErrorCode.UNDEFINED: "UNDEFINED ERROR!",
    ErrorCode.INDETERMINATE: "INDETERMINATE ERROR!",
}

_UNKNOWN = "UNKNOWN ERROR!"


def error_message(code: int, color: bool = False) -> str:
    """Return the message for an error code.

    Success and an empty input have no message and give an empty string.
    Codes outside the known set give the unknown-error message.
    """
    try:
        known = ErrorCode(code)
    except ValueError:
        text = _UNKNOWN
    else:
        if known in (ErrorCode.SUCCESSFUL_EXIT, ErrorCode.NO_STRING_TO_PARSE):
            return ""
        text = _MESSAGES[known]
    return f"{RED}{text}{NORMAL}" if color else text


class CalculatorError(Exception):
    """Raised when an expression cannot be converted or evaluated."""

    def __init__(self, code: int) -> None:
        self.code = code
        message = error_message(code) or getattr(code, "name", str(code))
        super().__init__(message)