"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def _start(tree: Node | None) -> list[Node]:
    return [] if tree is None else [tree]


def _children(node: Node) -> list[Node]:
    """Return the existing children of ``node``, left first."""
    return [child for child in (node.left, node.right) if child is not None]


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node first, then the left subtree, then the right."""
    stack = _start(tree)
    while stack:
        node = stack.pop()
        yield node.value
        stack.extend(reversed(_children(node)))


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values from the left subtree, then the node, then the right."""
    stack: list[Node] = []
    current = tree
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.value
        current = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values from the left subtree, then the right, then the node."""
    stack = [(node, False) for node in _start(tree)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(_children(node)))


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    queue = deque(_start(tree))
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(_children(node))