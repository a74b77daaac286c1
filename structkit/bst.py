"""Binary search tree with the usual queries, traversals and validity checks."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class BinarySearchTree:
    """Binary search tree; values equal to a node go to its left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a value, keeping duplicates in the left subtree."""
        node = TreeNode(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value <= current.value else current.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def minimum(self) -> Any:
        """Smallest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        return self._leftmost(self.root).value

    def maximum(self) -> Any:
        """Largest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.value

    def level_order(self) -> list[Any]:
        """Values breadth first, left to right within each level."""
        result = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def preorder(self) -> list[Any]:
        """Values in root, left, right order."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[Any]:
        """Values in left, root, right order, which is sorted order."""
        result = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[Any]:
        """Values in left, right, root order."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def delete(self, value: Any) -> bool:
        """Remove one node holding value; return whether one was found."""
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def successor(self, value: Any) -> Any:
        """Next value in inorder after the node holding value, or None.

        Raises KeyError when the value is not in the tree.
        """
        current = self._find(value)
        if current is None:
            raise KeyError(value)
        if current.right is not None:
            return self._leftmost(current.right).value
        successor: Optional[TreeNode] = None
        ancestor = self.root
        while ancestor is not current:
            if current.value < ancestor.value:
                successor = ancestor
                ancestor = ancestor.left
            else:
                ancestor = ancestor.right
        return None if successor is None else successor.value

    def _find(self, value: Any) -> Optional[TreeNode]:
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.right if node.value < value else node.left
        return None

    @staticmethod
    def _leftmost(node: TreeNode) -> TreeNode:
        while node.left is not None:
            node = node.left
        return node


def _all_values(root: Optional[TreeNode]) -> Iterator[Any]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        stack.extend(child for child in (node.left, node.right) if child is not None)


def is_bst(root: Optional[TreeNode]) -> bool:
    """Check the ordering by comparing every subtree value with its ancestor."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if not all(v <= node.value for v in _all_values(node.left)):
            return False
        if not all(v > node.value for v in _all_values(node.right)):
            return False
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return True


def is_bst_by_range(root: Optional[TreeNode]) -> bool:
    """Check the ordering by passing down the allowed range of each node."""
    stack = [(root, -math.inf, math.inf)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if node.value <= low or node.value > high:
            return False
        stack.append((node.left, low, node.value))
        stack.append((node.right, node.value, high))
    return True