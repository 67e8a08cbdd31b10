import pytest
from hypothesis import given
from hypothesis import strategies as st

from bintrees_kit.heap import MaxHeap, is_heap
from bintrees_kit.node import Node, insert_left, insert_right
from bintrees_kit.traversal import levelorder


def test_insert_sifts_up():
    heap = MaxHeap([1, 2, 3])
    assert list(levelorder(heap.root)) == [3, 1, 2]


def test_insert_returns_node_holding_value():
    heap = MaxHeap([5, 4, 3])
    node = heap.insert(10)
    assert node.value == 10
    assert node is heap.root


def test_insert_small_value_stays_at_bottom():
    heap = MaxHeap([9, 8])
    node = heap.insert(1)
    assert node.value == 1
    assert node.parent is heap.root
    assert heap.root.right is node


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract()


def test_extract_returns_max_and_shrinks():
    heap = MaxHeap([4, 9, 2, 7])
    assert heap.extract() == 9
    assert len(heap) == 3
    assert is_heap(heap.root)


def test_extract_single_value_empties_heap():
    heap = MaxHeap([6])
    assert heap.extract() == 6
    assert heap.root is None
    assert not heap


def test_len_and_bool():
    heap = MaxHeap()
    assert len(heap) == 0
    assert not heap
    heap.insert(3)
    assert len(heap) == 1
    assert heap


def test_duplicates_are_kept():
    heap = MaxHeap([5, 5, 1, 5])
    assert heap.to_sorted_list() == [5, 5, 5, 1]


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1))
def test_heap_invariant_after_inserts(values):
    heap = MaxHeap(values)
    assert is_heap(heap.root)
    assert len(heap) == len(values)
    assert heap.root.value == max(values)


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_to_sorted_list_descending_and_consumes(values):
    heap = MaxHeap(values)
    assert heap.to_sorted_list() == sorted(values, reverse=True)
    assert len(heap) == 0
    assert heap.root is None


@given(st.lists(st.integers(min_value=-100, max_value=100), min_size=2))
def test_heap_invariant_holds_between_extracts(values):
    heap = MaxHeap(values)
    heap.extract()
    assert is_heap(heap.root)
    assert len(heap) == len(values) - 1


def test_is_heap_empty_is_false():
    assert is_heap(None) is False


def test_is_heap_single_node():
    assert is_heap(Node(1)) is True


def test_is_heap_allows_equal_values():
    root = Node(4)
    insert_left(root, 4)
    insert_right(root, 4)
    assert is_heap(root) is True


def test_is_heap_rejects_larger_child():
    root = Node(4)
    insert_left(root, 9)
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete_tree():
    root = Node(10)
    insert_right(root, 5)
    assert is_heap(root) is False