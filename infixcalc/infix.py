"""Conversion of infix expressions into postfix token lists."""

from __future__ import annotations

from .errors import CalculatorError, ErrorCode
from .operations import Operation, find_operation
from .stack import Stack
from .tokenizer import TokenKind, next_token


def _close_group(operators: Stack, output: list[str]) -> None:
    while not operators.is_empty() and operators.top() != "(":
        output.append(operators.pop())
    if operators.is_empty():
        raise CalculatorError(ErrorCode.MISSING_OPERATOR)
    operators.pop()


def _push_operator(incoming: Operation, operators: Stack, output: list[str]) -> None:
    while not operators.is_empty():
        top_symbol = operators.top()
        top = find_operation(top_symbol)
        # An open parenthesis acts as a floor: everything after it binds tighter.
        precedence = -1 if top_symbol == "(" else top.precedence
        if precedence < incoming.precedence:
            break
        if top_symbol == "^" and incoming.symbol == "^":
            break
        output.append(operators.pop())
    operators.push(incoming.symbol)


def infix_to_postfix(text: str) -> list[str]:
    """Convert an infix expression into a list of postfix tokens.

    Raises CalculatorError with NO_STRING_TO_PARSE for empty text,
    UNDEFINED_OPERATION for an unknown operator (spaces included), and
    MISSING_OPERATOR for text without any operator or with an unmatched
    closing parenthesis.
    """
    if not text:
        raise CalculatorError(ErrorCode.NO_STRING_TO_PARSE)

    output: list[str] = []
    operators = Stack()
    seen_operation = False
    position = 0

    while position < len(text):
        token, position = next_token(text, position)
        if token.kind is TokenKind.END:
            break
        if token.kind is TokenKind.NUMBER:
            output.append(str(token.value))
            continue

        seen_operation = True
        operation = find_operation(token.text)
        if operation is None:
            raise CalculatorError(ErrorCode.UNDEFINED_OPERATION)
        if operation.symbol == "(":
            operators.push(operation.symbol)
        elif operation.symbol == ")":
            _close_group(operators, output)
        else:
            _push_operator(operation, operators, output)

    if not seen_operation:
        raise CalculatorError(ErrorCode.MISSING_OPERATOR)

    output.extend(operators)
    return output