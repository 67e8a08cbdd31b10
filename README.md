# bintrees_kit

Linked binary trees in plain Python: nodes that know their parent, the usual
traversals and measurements, and three ready-made tree kinds: a binary search
tree, a self-balancing AVL tree and a max binary heap. The package has no
dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Nodes

`bintrees_kit.node` holds the `Node` class and the operations that rewire
nodes in place. A `Node` has `value`, `parent`, `left` and `right`.

```python
from bintrees_kit.node import Node, insert_left, insert_right, lowest_common_ancestor

root = Node(98)
left = insert_left(root, 12)
right = insert_right(root, 402)
leaf = insert_right(left, 54)

leaf.is_leaf()          # True
root.is_root()          # True
leaf.depth()            # 2
left.sibling() is right # True
leaf.uncle() is right   # True
lowest_common_ancestor(leaf, right) is root  # True
```

- `insert_left` / `insert_right` add a new child; an existing child on that
  side is pushed down beneath the new node. Passing `None` as the parent
  raises `ValueError`.
- `Node(value, parent)` only records the parent link; it does not attach the
  node to the parent's child slots.
- `Node.ancestors()` yields the parent, grandparent and so on up to the root.
- `lowest_common_ancestor(first, second)` returns the deepest shared ancestor
  (a node counts as its own ancestor), or `None` if there is none.
- `rotate_left` / `rotate_right` rotate a subtree, update the parent's child
  link, and return the new subtree root. They raise `ValueError` when the
  needed child is missing.
- `delete(tree)` detaches a tree from its parent and unlinks every node in it.

## Traversals

`bintrees_kit.traversal` provides generators that yield node values:

```python
from bintrees_kit.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(postorder(root))   # [54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54]
```

An empty tree (`None`) yields nothing.

## Measurements and shape checks

`bintrees_kit.properties` offers:

- `height(tree)`: edges on the longest root-to-leaf path; 0 for a single node
  or an empty tree.
- `size(tree)`, `leaves(tree)`, `internal_nodes(tree)`: node counts.
- `balance(tree)`: height of the left subtree minus that of the right.
- `is_full(tree)`, `is_perfect(tree)`, `is_complete(tree)`: shape checks;
  each returns `False` for an empty tree.

## Binary search trees

```python
from bintrees_kit.bst import BinarySearchTree, is_bst

tree = BinarySearchTree([98, 402, 12, 46, 128, 256, 512, 50, 68, 89])
46 in tree        # True
tree.search(46)   # the Node holding 46
tree.remove(98)
list(tree)        # values in ascending order
len(tree)         # 9
```

`insert` returns the new node, or `None` if the value is already present.
`remove` ignores absent values; a node with two children takes its in-order
successor's value. `is_bst(node)` checks any node-built tree for strict
search-tree ordering (no duplicates); an empty tree is not a BST.

## AVL trees

```python
from bintrees_kit.avl import AVLTree, is_avl

tree = AVLTree([98, 402, 12, 46, 128, 256, 512, 50, 68, 89])
tree.insert(7)
tree.remove(128)
is_avl(tree.root)   # True
balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
balanced.root.value # 4
```

`AVLTree` is a `BinarySearchTree` that rebalances after each insert and
remove. `from_sorted` builds a balanced tree directly and raises `ValueError`
if the values are not strictly ascending. `is_avl(node)` checks both search
ordering and AVL balance.

## Max binary heaps

```python
from bintrees_kit.heap import MaxHeap, is_heap

heap = MaxHeap([98, 402, 12, 46, 128, 256, 512, 50, 68, 89])
heap.insert(1000)
is_heap(heap.root)      # True
heap.extract()          # 1000
heap.to_sorted_list()   # remaining values, largest first; empties the heap
bool(heap)              # False
```

`extract` on an empty heap raises `IndexError`. `is_heap(node)` checks a
node-built tree for completeness and the max-heap ordering.

## What this package does not do

It is a library only: there is no command-line tool, no function that prints
or draws a tree, and no way to save trees to or load them from storage.