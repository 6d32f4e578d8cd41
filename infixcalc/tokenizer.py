"""Splits an infix or postfix expression into number and operator tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_DIGITS = "0123456789"


class TokenKind(Enum):
    """What a scanned token is."""

    NUMBER = 0
    OPERATION = 1
    END = 2


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, its text and, for numbers, its value."""

    kind: TokenKind
    text: str
    value: int | None = None


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _scan_number(text: str, position: int) -> int:
    end = position
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def _operator_length(text: str, position: int) -> int:
    first = text[position]
    if first in "<>!":
        follows = [_char_at(text, position + offset) == "=" for offset in (1, 2, 3)]
        if not follows[0]:
            return 1
        if not follows[1]:
            return 2
        # A lone comparison followed by "==" keeps the "==" intact.
        if not follows[2]:
            return 1
        return 2
    if first in "=&|":
        return 2
    return 1


def next_token(text: str, position: int) -> tuple[Token, int]:
    """Scan one token starting at ``position``.

    Returns the token and the position after it.  At the end of the text an
    END token is returned with the position unchanged.  Two-character
    operators always advance by two, even when only one character remains.
    """
    if position >= len(text):
        return Token(TokenKind.END, ""), position

    if text[position] in _DIGITS:
        end = _scan_number(text, position)
    else:
        end = position + _operator_length(text, position)

    raw = text[position:end]
    if raw and raw[0] in _DIGITS:
        number = int(raw)
        if number > 0 or raw == "0":
            return Token(TokenKind.NUMBER, raw, number), end
    return Token(TokenKind.OPERATION, raw), end


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of ``text`` in order, without the END marker."""
    position = 0
    while position < len(text):
        token, position = next_token(text, position)
        if token.kind is TokenKind.END:
            return
        yield token