"""The operator table and the arithmetic and logical operations on integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from .errors import CalculatorError, ErrorCode
from .stack import Stack

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Operation:
    """An operator symbol with its precedence, arity and table position."""

    symbol: str
    precedence: int
    operands: int
    identifier: int


_TABLE = (
    ("(", 8, 0),
    (")", 8, 0),
    ("!", 7, 1),
    ("^", 6, 2),
    ("*", 5, 2),
    ("/", 5, 2),
    ("%", 5, 2),
    ("+", 4, 2),
    ("-", 4, 2),
    (">", 3, 2),
    ("<", 3, 2),
    (">=", 3, 2),
    ("<=", 3, 2),
    ("!=", 2, 2),
    ("==", 2, 2),
    ("&&", 1, 2),
    ("||", 0, 2),
)

OPERATIONS: tuple[Operation, ...] = tuple(
    Operation(symbol, precedence, operands, identifier)
    for identifier, (symbol, precedence, operands) in enumerate(_TABLE)
)

_BY_SYMBOL = {operation.symbol: operation for operation in OPERATIONS}


def find_operation(symbol: str) -> Operation | None:
    """Return the operation for ``symbol``, or None if there is none."""
    return _BY_SYMBOL.get(symbol)


def _as_int(value: Any) -> int:
    """Read an integer the way a leading-number parse does; 0 if none."""
    if isinstance(value, int):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; a non-positive exponent gives 1."""
    return base**exponent if exponent > 0 else 1


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    return left - right * _truncating_div(left, right)


def _checked(function: Callable[[int, int], int]) -> Callable[[int, int], int]:
    def apply(left: int, right: int) -> int:
        if left == 0 and right == 0:
            raise CalculatorError(ErrorCode.INDETERMINATE)
        if right == 0:
            raise CalculatorError(ErrorCode.DIVIDE_BY_ZERO)
        return function(left, right)

    return apply


def _power(left: int, right: int) -> int:
    if left == 0 and right == 0:
        raise CalculatorError(ErrorCode.INDETERMINATE)
    return power(left, right)


_BINARY: dict[str, Callable[[int, int], int]] = {
    "^": _power,
    "*": lambda left, right: left * right,
    "/": _checked(_truncating_div),
    "%": _checked(_truncating_mod),
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    ">": lambda left, right: int(left > right),
    "<": lambda left, right: int(left < right),
    ">=": lambda left, right: int(left >= right),
    "<=": lambda left, right: int(left <= right),
    "!=": lambda left, right: int(left != right),
    "==": lambda left, right: int(left == right),
    "&&": lambda left, right: int(bool(left) and bool(right)),
    "||": lambda left, right: int(bool(left) or bool(right)),
}


def evaluate_binary(symbol: str, left: int, right: int) -> int:
    """Apply the binary operator ``symbol`` to ``left`` and ``right``.

    Division and remainder truncate toward zero.  Raises CalculatorError
    with INDETERMINATE for 0^0, 0/0 and 0%0, DIVIDE_BY_ZERO for a zero
    divisor, and UNDEFINED_OPERATION for a symbol with no binary meaning.
    """
    function = _BINARY.get(symbol)
    if function is None:
        raise CalculatorError(ErrorCode.UNDEFINED_OPERATION)
    return function(left, right)


def perform_operation(stack: Stack, symbol: str) -> None:
    """Apply ``symbol`` to the operands on ``stack`` and push the result.

    The right operand is taken first; the stack must still hold an item
    after that.  For a binary operator two items must remain beneath the
    left operand once it is taken, otherwise MISSING_OPERANDS is raised.
    """
    right = _as_int(stack.pop())
    if stack.is_empty():
        raise CalculatorError(ErrorCode.MISSING_OPERANDS)

    if symbol == "!":
        stack.push(int(not right))
        return

    left = _as_int(stack.pop())
    if len(stack) < 2:
        raise CalculatorError(ErrorCode.MISSING_OPERANDS)

    stack.push(evaluate_binary(symbol, left, right))