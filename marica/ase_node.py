"""Tree of values produced when reading ASE text."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

__all__ = ["NodeType", "ReaderNode"]


class NodeType(Enum):
    """Shape of a reader node."""

    DICT = auto()
    ARRAY = auto()
    VALUE = auto()


class ReaderNode:
    """A node holding keyed children, positional elements and an optional value."""

    def __init__(self, node_type: NodeType = NodeType.DICT, value: Any = None) -> None:
        self.type = node_type
        self.value = value
        self._children: dict[str, ReaderNode] = {}
        self._elements: list[ReaderNode | None] = []

    def __repr__(self) -> str:
        return (
            f"ReaderNode({self.type.name}, value={self.value!r}, "
            f"children={list(self._children)}, elements={len(self._elements)})"
        )

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._elements)

    def keys(self) -> list[str]:
        """Names of the children, in insertion order."""
        return list(self._children)

    def add_child(self, key: str, child: ReaderNode | NodeType | None) -> ReaderNode | None:
        """Add a child under ``key``; a NodeType creates a fresh node of that type."""
        group = self._children.get(key)
        if group is None:
            group = self._children[key] = ReaderNode(NodeType.ARRAY)
        return group.add_element(child)

    def get_child(self, key: str) -> ReaderNode | None:
        """Return the single child under ``key``, all of them when there are several, or None."""
        group = self._children.get(key)
        if group is None:
            return None
        if len(group) > 1:
            return group
        return group.get_element(0)

    def has_child(self, key: str) -> bool:
        return key in self._children

    def add_element(self, element: ReaderNode | NodeType | None) -> ReaderNode | None:
        """Append an element; a NodeType creates a fresh node of that type."""
        if isinstance(element, NodeType):
            element = ReaderNode(element)
        self._elements.append(element)
        return element

    def set_element(self, index: int, element: ReaderNode | None) -> ReaderNode | None:
        """Place ``element`` at ``index``, padding with None as needed."""
        if index < 0:
            raise IndexError("element index must not be negative")
        if index >= len(self._elements):
            self._elements.extend([None] * (index + 1 - len(self._elements)))
        self._elements[index] = element
        return element

    def get_element(self, index: int) -> ReaderNode | None:
        if index < 0 or index >= len(self._elements):
            raise IndexError("element index out of range")
        return self._elements[index]