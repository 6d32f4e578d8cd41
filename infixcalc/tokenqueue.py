"""A first-in, first-out queue of tokens."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from .errors import BLUE, NORMAL
from .tokenizer import TokenKind, tokenize


class TokenQueue:
    """A queue of token strings in the order they were added."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def head(self) -> Any:
        """Return the front item; IndexError if empty."""
        if not self._items:
            raise IndexError("head of an empty queue")
        return self._items[0]

    def tail(self) -> Any:
        """Return the most recently added item; IndexError if empty."""
        if not self._items:
            raise IndexError("tail of an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._items)

    def to_string(self, color: bool = False) -> str:
        """Return the items, each followed by a space, optionally in blue."""
        if not self._items:
            return ""
        body = "".join(f"{item} " for item in self._items)
        return f"{BLUE}{body}{NORMAL}" if color else body

    def __repr__(self) -> str:
        return f"TokenQueue({list(self._items)!r})"


def string_to_queue(text: str) -> TokenQueue:
    """Tokenize space-separated postfix text into a queue.

    Numbers are stored in their canonical decimal form; single spaces are
    dropped.
    """
    queue = TokenQueue()
    for token in tokenize(text):
        if token.kind is TokenKind.NUMBER:
            queue.enqueue(str(token.value))
        elif token.text != " ":
            queue.enqueue(token.text)
    return queue