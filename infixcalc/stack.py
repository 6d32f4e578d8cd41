"""A last-in, first-out stack of tokens."""

from __future__ import annotations

from typing import Any, Iterator


class Stack:
    """A stack whose pop and top give an empty string when it is empty."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Place ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item, or ``""`` if the stack is empty."""
        return self._items.pop() if self._items else ""

    def top(self) -> Any:
        """Return the top item without removing it, or ``""`` if empty."""
        return self._items[-1] if self._items else ""

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"