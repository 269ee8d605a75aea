"""Bones and the named collection of bones forming a skeleton."""

from __future__ import annotations

import weakref

import numpy as np

from marica.transform import Transform

__all__ = ["Bone", "Skeletal"]


class Bone:
    """A bone with a current transform, a rest origin and links to its relatives."""

    def __init__(self) -> None:
        self.transform = Transform()
        self.origin = Transform()
        self._parent_ref: weakref.ref[Bone] | None = None
        self._children: dict[int, Bone] = {}

    @property
    def parent(self) -> Bone | None:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> tuple[Bone, ...]:
        return tuple(self._children.values())

    def add_child(self, child: Bone) -> None:
        """Link ``child`` below this bone."""
        if id(child) not in self._children:
            self._children[id(child)] = child
            child.set_parent(self)

    def remove_child(self, child: Bone) -> None:
        """Unlink ``child`` from this bone."""
        if id(child) in self._children:
            del self._children[id(child)]
            child.unset_parent()

    def global_matrix(self) -> np.ndarray:
        """Matrix of the bone's current transform."""
        return self.transform.matrix()

    def global_origin_matrix(self) -> np.ndarray:
        """Rest matrix of the bone combined with those of its ancestors."""
        parent = self.parent
        if parent is not None:
            return parent.global_origin_matrix() @ self.origin.matrix()
        return self.origin.matrix()

    def set_parent(self, parent: Bone | None) -> None:
        """Make ``parent`` this bone's parent and register with it."""
        if self.parent is parent:
            return
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        if parent is not None:
            parent.add_child(self)

    def unset_parent(self) -> None:
        """Detach this bone from its parent, if it has one."""
        old = self.parent
        self._parent_ref = None
        if old is not None:
            old.remove_child(self)


class Skeletal:
    """Bones looked up by name."""

    def __init__(self) -> None:
        self._bones: dict[str, Bone] = {}

    def __len__(self) -> int:
        return len(self._bones)

    def __contains__(self, name: str) -> bool:
        return name in self._bones

    def get_bone(self, name: str) -> Bone | None:
        """Return the bone called ``name``, or None."""
        return self._bones.get(name)

    def add_bone(self, key: str, bone: Bone) -> None:
        """Register ``bone`` under ``key``; a name may be used only once."""
        if key in self._bones:
            raise ValueError(f"bone {key!r} already exists")
        self._bones[key] = bone

    def bone_names(self) -> list[str]:
        """Names of all bones, sorted."""
        return sorted(self._bones)