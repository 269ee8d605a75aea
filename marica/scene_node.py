"""Nodes of the scene graph."""

from __future__ import annotations

import copy
import weakref
from collections.abc import Iterator
from numbers import Real
from typing import Any

import numpy as np

from marica.transform import Quaternion, Transform, apply_matrix

__all__ = ["SceneNode"]


class SceneNode:
    """A node with a transform, child nodes, drawables and an optional shader."""

    def __init__(self) -> None:
        self._transform = Transform()
        self._parent_ref: weakref.ref[SceneNode] | None = None
        self._children: list[SceneNode] = []
        self._drawables: list[Any] = []
        self.shader_program: Any = None
        self.overlay = False

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(tuple(self._children))

    @property
    def parent(self) -> SceneNode | None:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> tuple[SceneNode, ...]:
        return tuple(self._children)

    @property
    def drawables(self) -> tuple[Any, ...]:
        return tuple(self._drawables)

    @property
    def transform(self) -> Transform:
        """A copy of the node's local transform."""
        return copy.deepcopy(self._transform)

    @property
    def location(self) -> np.ndarray:
        return self._transform.location

    @location.setter
    def location(self, value: Any) -> None:
        self._transform.location = value

    @property
    def rotation(self) -> Quaternion:
        return self._transform.rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self._transform.rotation = value

    @property
    def scale(self) -> np.ndarray:
        return self._transform.scale

    @scale.setter
    def scale(self, value: Any) -> None:
        if isinstance(value, Real):
            self._transform.set_uniform_scale(value)
        else:
            self._transform.scale = value

    def global_location(self) -> np.ndarray:
        parent = self.parent
        if parent is not None:
            return apply_matrix(parent.global_transform_matrix(), self.location)
        return self.location

    def global_rotation(self) -> Quaternion:
        parent = self.parent
        if parent is not None:
            return Quaternion.from_matrix(
                parent.global_rotation_matrix() @ self.rotation_matrix()
            )
        return self.rotation

    def rotation_matrix(self) -> np.ndarray:
        return self._transform.rotation_matrix()

    def global_rotation_matrix(self) -> np.ndarray:
        parent = self.parent
        if parent is not None:
            return parent.global_rotation_matrix() @ self.rotation_matrix()
        return self.rotation_matrix()

    def global_scale(self) -> np.ndarray:
        if self.parent is not None:
            return np.linalg.norm(self.global_transform_matrix()[:3, :3], axis=0)
        return self.scale

    def transform_matrix(self) -> np.ndarray:
        return self._transform.matrix()

    def global_transform_matrix(self) -> np.ndarray:
        parent = self.parent
        if parent is not None:
            return parent.global_transform_matrix() @ self.transform_matrix()
        return self.transform_matrix()

    def set_parent(self, parent: SceneNode | None) -> None:
        """Record ``parent``, detaching from the previous parent first."""
        current = self.parent
        if current is parent:
            return
        if current is not None:
            current.remove_child(self)
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def add_child(self, child: SceneNode) -> SceneNode:
        """Attach ``child`` below this node and return it."""
        if not any(existing is child for existing in self._children):
            self._children.append(child)
            child.set_parent(self)
        return child

    def remove_child(self, child: SceneNode) -> None:
        """Detach ``child`` from this node, if it is one of its children."""
        for position, existing in enumerate(self._children):
            if existing is child:
                del self._children[position]
                child.set_parent(None)
                return

    def add_drawable(self, drawable: Any) -> Any:
        """Attach ``drawable`` once and return it."""
        if not any(existing is drawable for existing in self._drawables):
            self._drawables.append(drawable)
        return drawable

    def remove_drawable(self, drawable: Any) -> None:
        for position, existing in enumerate(self._drawables):
            if existing is drawable:
                del self._drawables[position]
                return

    def is_empty(self) -> bool:
        """True when the node has no children."""
        return not self._children

    def clear(self) -> None:
        """Drop all children and drawables."""
        self._children.clear()
        self._drawables.clear()