"""Linked binary trees: nodes, traversals, measurements, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "properties", "bst", "avl", "heap"]