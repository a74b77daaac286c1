"""FIFO queue made of linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional[_Node] = None


class LinkedQueue:
    """Queue with constant-time enqueue at the rear and dequeue at the front."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove the front value and return it."""
        if self._front is None:
            raise IndexError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """The front value, left in place."""
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Values from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next