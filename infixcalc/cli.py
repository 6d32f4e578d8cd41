"""Interactive calculator: reads infix expressions and prints their values."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .errors import CalculatorError, ErrorCode, error_message
from .infix import infix_to_postfix
from .postfix import evaluate_postfix
from .tokenqueue import TokenQueue

DEFAULT_LIMIT = 255
QUIT_COMMAND = "quit"


def read_expression(
    stream: TextIO,
    limit: int = DEFAULT_LIMIT,
    output: TextIO | None = None,
) -> str | None:
    """Read one line of at most ``limit`` characters from ``stream``.

    Lines that are too long are reported on ``output`` and another line is
    read in their place.  The trailing newline is removed.  Returns None
    once the stream is exhausted.
    """
    output = sys.stdout if output is None else output
    while True:
        line = stream.readline()
        if not line:
            return None
        text = line[:-1] if line.endswith("\n") else line
        if len(text) <= limit:
            return text
        print(f"Error, input exceeds {limit}-character limit.", file=output)


def evaluate_line(text: str, color: bool = True) -> list[str]:
    """Convert and evaluate one infix expression.

    Returns the lines the calculator shows for it: the postfix form and the
    value on success, or the error message when a stage fails.  An empty
    expression shows nothing.
    """
    try:
        postfix = infix_to_postfix(text)
    except CalculatorError as error:
        message = error_message(error.code, color)
        return [message] if message else []

    queue = TokenQueue()
    for token in postfix:
        queue.enqueue(token)
    lines = [queue.to_string(color)]

    try:
        value = evaluate_postfix(postfix)
    except CalculatorError as error:
        message = error_message(error.code, color)
        if message:
            lines.append(message)
        return lines

    lines.append(str(value))
    return lines


def _is_success(code: int) -> bool:
    return code == ErrorCode.SUCCESSFUL_EXIT


def main(argv: list[str] | None = None) -> int:
    """Read expressions from standard input until ``quit`` or end of input."""
    parser = argparse.ArgumentParser(
        prog="infixcalc",
        description="Evaluate integer infix expressions read from standard input.",
    )
    parser.parse_args(argv)

    while True:
        text = read_expression(sys.stdin, DEFAULT_LIMIT, sys.stdout)
        if text is None:
            break
        for line in evaluate_line(text, color=True):
            print(line)
        if text == QUIT_COMMAND:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())