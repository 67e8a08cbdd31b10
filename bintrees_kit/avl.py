"""Self-balancing AVL trees of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import pairwise

from .bst import BinarySearchTree, is_bst
from .node import Node, rotate_left, rotate_right
from .properties import _walk, balance


def is_avl(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid AVL tree.

    Values must be strictly ordered as in a binary search tree, and the
    heights of the two subtrees of every node may differ by at most one.
    An empty tree is not an AVL tree.
    """
    return is_bst(tree) and all(abs(balance(node)) <= 1 for node in _walk(tree))


class AVLTree(BinarySearchTree):
    """An AVL tree holding distinct integers.

    Values are inserted in the order given; duplicates are ignored.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    @classmethod
    def from_sorted(cls, values: Iterable[int]) -> AVLTree:
        """Build a balanced tree directly from strictly ascending values.

        Each subtree is rooted at the middle element of its slice, the lower
        middle for slices of even length.
        """
        items = list(values)
        if any(a >= b for a, b in pairwise(items)):
            raise ValueError("values must be in strictly ascending order")

        def build(low: int, high: int, parent: Node | None) -> Node | None:
            # low and high are exclusive bounds
            if high - low <= 1:
                return None
            mid = low + (high - low) // 2
            node = Node(items[mid], parent)
            node.left = build(low, mid, node)
            node.right = build(mid, high, node)
            return node

        tree = cls()
        tree.root = build(-1, len(items), None)
        tree._size = len(items)
        return tree

    def _rebalance_from(self, node: Node | None) -> None:
        while node is not None:
            factor = balance(node)
            if factor > 1:
                if balance(node.left) < 0:
                    rotate_left(node.left)
                node = rotate_right(node)
            elif factor < -1:
                if balance(node.right) > 0:
                    rotate_right(node.right)
                node = rotate_left(node)
            if node.parent is None:
                self.root = node
            node = node.parent

    def insert(self, value: int) -> Node | None:
        """Insert ``value``, rebalance, and return its new node.

        Returns None if the value is already in the tree.
        """
        node = super().insert(value)
        if node is not None:
            self._rebalance_from(node.parent)
        return node

    def remove(self, value: int) -> None:
        """Remove ``value`` and rebalance; absent values are ignored.

        A node with two children takes the value of its in-order
        successor, which is then removed in its place.
        """
        self._rebalance_from(self._unlink(value))

    def __contains__(self, value: object) -> bool:
        """Return True if ``value`` is stored in the tree."""
        return super().__contains__(value)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in ascending order."""
        return super().__iter__()

    def __len__(self) -> int:
        """Return the number of stored values."""
        return super().__len__()