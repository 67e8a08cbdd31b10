"""Binary search trees of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .node import Node
from .traversal import inorder


def is_bst(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid binary search tree.

    Values must be strictly ordered, so duplicates are not allowed.
    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, lower, upper = stack.pop()
        too_low = lower is not None and node.value <= lower
        too_high = upper is not None and node.value >= upper
        if too_low or too_high:
            return False
        if node.left is not None:
            stack.append((node.left, lower, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, upper))
    return True


class BinarySearchTree:
    """A binary search tree holding distinct integers.

    Values are inserted in the order given; duplicates are ignored.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Node | None:
        """Insert ``value`` and return its new node.

        Returns None if the value is already in the tree.
        """
        parent: Node | None = None
        current = self.root
        while current is not None:
            if value == current.value:
                return None
            parent = current
            current = current.left if value < current.value else current.right
        node = Node(value, parent)
        if parent is None:
            self.root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        return node

    def search(self, value: int) -> Node | None:
        """Return the node holding ``value``, or None if it is absent."""
        current = self.root
        while current is not None and current.value != value:
            current = current.left if value < current.value else current.right
        return current

    def remove(self, value: int) -> None:
        """Remove ``value`` from the tree; absent values are ignored.

        A node with two children takes the value of its in-order
        successor, which is then removed in its place.
        """
        self._unlink(value)

    def _unlink(self, value: int) -> Node | None:
        """Remove ``value`` and return the parent of the node taken out.

        Returns None if the value was absent or the removed node was the root.
        """
        node = self.search(value)
        if node is None:
            return None
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        self._size -= 1
        return parent

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"