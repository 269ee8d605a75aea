import pytest

from marica.ase_node import NodeType, ReaderNode


def test_single_child_is_returned_directly():
    root = ReaderNode()
    child = ReaderNode(NodeType.VALUE, 3)
    assert root.add_child("A", child) is child
    assert root.get_child("A") is child
    assert root.has_child("A")


def test_repeated_child_returns_array():
    root = ReaderNode()
    first = root.add_child("A", ReaderNode(NodeType.VALUE, 1))
    second = root.add_child("A", ReaderNode(NodeType.VALUE, 2))
    group = root.get_child("A")
    assert group.type is NodeType.ARRAY
    assert len(group) == 2
    assert group.get_element(0) is first
    assert group.get_element(1) is second


def test_add_child_by_type():
    root = ReaderNode()
    child = root.add_child("B", NodeType.ARRAY)
    assert child.type is NodeType.ARRAY
    assert root.get_child("B") is child


def test_missing_child():
    root = ReaderNode()
    assert root.get_child("X") is None
    assert not root.has_child("X")


def test_none_child_is_kept():
    root = ReaderNode()
    root.add_child("U", None)
    assert root.has_child("U")
    assert root.get_child("U") is None


def test_add_element_and_get():
    node = ReaderNode(NodeType.ARRAY)
    created = node.add_element(NodeType.VALUE)
    assert created.type is NodeType.VALUE
    assert node.get_element(0) is created
    assert len(node) == 1


def test_get_element_out_of_range():
    node = ReaderNode(NodeType.ARRAY)
    with pytest.raises(IndexError):
        node.get_element(0)
    with pytest.raises(IndexError):
        node.get_element(-1)


def test_set_element_pads_with_none():
    node = ReaderNode(NodeType.ARRAY)
    element = ReaderNode(NodeType.VALUE, "x")
    assert node.set_element(3, element) is element
    assert len(node) == 4
    assert node.get_element(0) is None
    assert node.get_element(3) is element


def test_set_element_replaces():
    node = ReaderNode(NodeType.ARRAY)
    node.add_element(ReaderNode(NodeType.VALUE, 1))
    replacement = ReaderNode(NodeType.VALUE, 2)
    node.set_element(0, replacement)
    assert len(node) == 1
    assert node.get_element(0).value == 2


def test_empty_node_is_truthy():
    assert bool(ReaderNode()) is True
    assert len(ReaderNode()) == 0


def test_keys_in_order():
    root = ReaderNode()
    root.add_child("B", NodeType.VALUE)
    root.add_child("A", NodeType.VALUE)
    assert root.keys() == ["B", "A"]