"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Node | None) -> int:
    """Return the number of levels in the tree, 0 for an empty tree."""
    levels = 0
    layer = [tree] if tree is not None else []
    while layer:
        levels += 1
        layer = [
            child
            for node in layer
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest root-to-leaf path.

    An empty tree and a single node both have height 0.
    """
    return max(_levels(tree) - 1, 0)


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right.

    An empty tree has a balance factor of 0.
    """
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full with every leaf on the same level.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    return size(tree) == 2 ** _levels(tree) - 1


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is filled except possibly the last,
    which is filled from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    total = size(tree)
    queue: deque[tuple[Node, int]] = deque([(tree, 0)])
    while queue:
        node, index = queue.popleft()
        if index >= total:
            return False
        if node.left is not None:
            queue.append((node.left, 2 * index + 1))
        if node.right is not None:
            queue.append((node.right, 2 * index + 2))
    return True