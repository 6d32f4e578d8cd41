"""Evaluation of postfix token sequences."""

from __future__ import annotations

from typing import Iterable

from .errors import CalculatorError, ErrorCode
from .operations import _as_int, evaluate_binary
from .stack import Stack


def is_operand(token: str) -> bool:
    """Return True if ``token`` starts with a digit."""
    return bool(token) and "0" <= token[0] <= "9"


def consume_operator(stack: Stack, token: str) -> int:
    """Take the operands of ``token`` off ``stack`` and return the result.

    The operands are removed even when an error is raised.  Raises
    CalculatorError with MISSING_OPERANDS when the stack runs out.
    """
    if stack.is_empty():
        raise CalculatorError(ErrorCode.MISSING_OPERANDS)
    right = _as_int(stack.pop())
    if token == "!":
        return int(not right)
    if stack.is_empty():
        raise CalculatorError(ErrorCode.MISSING_OPERANDS)
    left = _as_int(stack.pop())
    return evaluate_binary(token, left, right)


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate postfix ``tokens`` and return the integer result.

    An empty sequence raises MISSING_OPERANDS.  Operands left over at the
    end, including after a failed operation, raise MISSING_OPERATOR.
    """
    stack = Stack()
    items = list(tokens) or [""]

    for token in items:
        if is_operand(token):
            stack.push(_as_int(token))
            continue
        try:
            stack.push(consume_operator(stack, token))
        except CalculatorError as error:
            if not stack.is_empty():
                raise CalculatorError(ErrorCode.MISSING_OPERATOR) from error
            raise

    answer = stack.pop()
    if not stack.is_empty():
        raise CalculatorError(ErrorCode.MISSING_OPERATOR)
    return _as_int(answer)