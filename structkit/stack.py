"""Stacks backed by a fixed-size array and by linked nodes, plus string reversal."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """Stack stored in a fixed-capacity array."""

    def __init__(self, max_size: int = 50) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top; raise StackOverflowError when full."""
        if len(self._items) == self.max_size:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if not self._items:
            raise IndexError("no element to pop")
        return self._items.pop()

    def top(self) -> Any:
        """The value on top, left in place."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Values from bottom to top."""
        return iter(self._items)


class _Node:
    __slots__ = ("value", "link")

    def __init__(self, value: Any, link: Optional["_Node"]) -> None:
        self.value = value
        self.link = link


class LinkedStack:
    """Unbounded stack made of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if self._top is None:
            raise IndexError("stack is empty")
        node = self._top
        self._top = node.link
        self._size -= 1
        return node.value

    def top(self) -> Any:
        """The value on top, left in place."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.link


def reverse_string(text: str) -> str:
    """Reverse a string by pushing each character and popping them all."""
    stack = LinkedStack()
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in range(len(stack)))