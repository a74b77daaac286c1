"""Doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class DoublyLinkedList:
    """Doubly linked list with insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put a value in front of the first one."""
        node = _Node(value)
        if self._head is not None:
            self._head.prev = node
            node.next = self._head
        self._head = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        """Put a value after the last one."""
        node = _Node(value)
        self._size += 1
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node
        node.prev = last

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while node.next is not None:
            node = node.next
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size