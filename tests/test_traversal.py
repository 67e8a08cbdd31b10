import pytest
from hypothesis import given
from hypothesis import strategies as st

from bintrees_kit.bst import BinarySearchTree
from bintrees_kit.node import Node, insert_left, insert_right
from bintrees_kit.traversal import inorder, levelorder, postorder, preorder

ALL = [preorder, inorder, postorder, levelorder]
VALUE_LISTS = st.lists(st.integers(-1000, 1000), min_size=1, max_size=60)


@pytest.fixture
def tree():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 402)
    insert_left(left, 6)
    insert_right(left, 56)
    insert_left(right, 256)
    insert_right(right, 512)
    return root


@pytest.mark.parametrize(
    ("traverse", "expected"),
    [
        (preorder, [98, 12, 6, 56, 402, 256, 512]),
        (inorder, [6, 12, 56, 98, 256, 402, 512]),
        (postorder, [6, 56, 12, 256, 512, 402, 98]),
        (levelorder, [98, 12, 402, 6, 56, 256, 512]),
    ],
)
def test_orders(tree, traverse, expected):
    assert list(traverse(tree)) == expected


def test_empty_tree():
    assert list(preorder(None)) == []
    assert list(inorder(None)) == []
    assert list(postorder(None)) == []
    assert list(levelorder(None)) == []


@pytest.mark.parametrize("traverse", ALL)
def test_single_node(traverse):
    assert list(traverse(Node(7))) == [7]


def test_levelorder_with_gaps():
    root = Node(1)
    a = insert_left(root, 2)
    b = insert_right(root, 3)
    insert_right(a, 4)
    insert_left(b, 5)
    assert list(levelorder(root)) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("traverse", ALL)
def test_deep_chain_does_not_recurse(traverse):
    root = current = Node(0)
    for value in range(1, 5000):
        current = insert_right(current, value)
    visited = list(traverse(root))
    assert visited[:3] in ([0, 1, 2], [4999, 4998, 4997])
    assert len(visited) == 5000


@given(VALUE_LISTS)
def test_inorder_of_search_tree_is_sorted(values):
    root = BinarySearchTree(values).root
    assert list(inorder(root)) == sorted(set(values))


@given(VALUE_LISTS)
def test_traversals_visit_same_values(values):
    root = BinarySearchTree(values).root
    expected = sorted(set(values))
    for traverse in (preorder, postorder, levelorder):
        assert sorted(traverse(root)) == expected


@given(VALUE_LISTS)
def test_root_position(values):
    root = BinarySearchTree(values).root
    assert next(preorder(root)) == values[0]
    assert next(levelorder(root)) == values[0]
    assert list(postorder(root))[-1] == values[0]