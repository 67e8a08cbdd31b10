"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from .node import Node
from .properties import _walk, is_complete


def is_heap(tree: Node | None) -> bool:
    """Return True if ``tree`` is a complete tree in which no child
    holds a greater value than its parent.

    An empty tree is not a heap.
    """
    if tree is None or not is_complete(tree):
        return False
    return all(
        child.value <= node.value
        for node in _walk(tree)
        for child in (node.left, node.right)
        if child is not None
    )


class MaxHeap:
    """A max binary heap; the root always holds the greatest value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._size = 0
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def _node_at(self, position: int) -> Node:
        """Return the node at a 1-based level-order position."""
        node = self.root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node it settles in."""
        position = self._size + 1
        if position == 1:
            node = self.root = Node(value)
        else:
            parent = self._node_at(position // 2)
            node = Node(value, parent)
            if position % 2:
                parent.right = node
            else:
                parent.left = node
        self._size = position
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the greatest value."""
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        last = self._node_at(self._size)
        self._size -= 1
        parent = last.parent
        if parent is None:
            self.root = None
            return top
        self.root.value = last.value
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            if node.right is not None and node.right.value >= node.left.value:
                child = node.right
            else:
                child = node.left
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Extract every value, returning them in descending order.

        The heap is empty afterwards.
        """
        return [self.extract() for _ in range(self._size)]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"MaxHeap(size={self._size})"