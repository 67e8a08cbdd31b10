"""Binary tree nodes and the structural operations on them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent records the parent link only; the parent's
    child slots are left untouched. Use :func:`insert_left` or
    :func:`insert_right` to attach a new child.
    """

    value: int
    parent: Node | None = None
    left: Node | None = None
    right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in self.ancestors())

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


def _replace_child(parent: Node | None, old: Node, new: Node | None) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    elif parent.right is old:
        parent.right = new


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("parent must be a node")
    node = Node(value, parent)
    if parent.left is not None:
        node.left = parent.left
        parent.left.parent = node
    parent.left = node
    return node


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("parent must be a node")
    node = Node(value, parent)
    if parent.right is not None:
        node.right = parent.right
        parent.right.parent = node
    parent.right = node
    return node


def delete(tree: Node | None) -> None:
    """Dismantle a whole tree, unlinking every node in it.

    If ``tree`` is a subtree, it is also detached from its parent.
    """
    if tree is None:
        return
    _replace_child(tree.parent, tree, None)
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor.
    """
    if first is None or second is None:
        return None
    second_line = {id(node) for node in (second, *second.ancestors())}
    for candidate in (first, *first.ancestors()):
        if id(candidate) in second_line:
            return candidate
    return None


def rotate_left(tree: Node) -> Node:
    """Rotate ``tree`` to the left and return the new subtree root."""
    if tree is None or tree.right is None:
        raise ValueError("cannot rotate left: node has no right child")
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    _replace_child(tree.parent, tree, pivot)
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate ``tree`` to the right and return the new subtree root."""
    if tree is None or tree.left is None:
        raise ValueError("cannot rotate right: node has no left child")
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    _replace_child(tree.parent, tree, pivot)
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot