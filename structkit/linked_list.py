"""Singly linked list with positional insertion, deletion and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next


class LinkedList:
    """Singly linked list; positions given to it count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        """Node at a 0-based index that is known to be in range."""
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_beginning(self, value: Any) -> None:
        """Put a value in front of the first one."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: Any) -> None:
        """Put a value after the last one."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert a value so that it ends up at the given 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.insert_beginning(value)
        elif position == self._size + 1:
            self.append(value)
        else:
            previous = self._node_at(position - 2)
            previous.next = _Node(value, previous.next)
            self._size += 1

    def delete_first(self) -> Any:
        """Remove the first value and return it."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove the last value and return it."""
        if self._head is None:
            raise IndexError("list is empty")
        return self.delete_at(self._size)

    def delete_at(self, position: int) -> Any:
        """Remove the value at the given 1-based position and return it."""
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.delete_first()
        previous = self._node_at(position - 2)
        target = previous.next
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.value

    def index(self, value: Any) -> int:
        """0-based position of the first node holding value."""
        for count, node in enumerate(self._nodes()):
            if node.value == value:
                return count
        raise ValueError(f"{value!r} not found")

    def reverse(self) -> None:
        """Reverse the links in place, walking the list once."""
        previous: Optional[_Node] = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the links in place by recursing to the last node."""
        if self._head is None:
            return
        old_head = self._head
        self._reverse_from(old_head)
        self._tail = old_head

    def _reverse_from(self, node: _Node) -> None:
        if node.next is None:
            self._head = node
            return
        self._reverse_from(node.next)
        node.next.next = node
        node.next = None

    def reverse_with_stack(self) -> None:
        """Reverse the links in place by pushing every node onto a stack."""
        stack = list(self._nodes())
        if not stack:
            return
        self._head = current = stack.pop()
        while stack:
            current.next = stack.pop()
            current = current.next
        current.next = None
        self._tail = current

    def reversed_values(self) -> list[Any]:
        """Values from last to first, gathered recursively; the list is unchanged."""
        result: list[Any] = []
        self._collect_backwards(self._head, result)
        return result

    def _collect_backwards(self, node: Optional[_Node], out: list[Any]) -> None:
        if node is None:
            return
        self._collect_backwards(node.next, out)
        out.append(node.value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "End_of_list"