"""Skeletal mesh record types: quaternions, points and joint positions."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["VQuat", "VPoint", "VJointPos"]


@dataclass(frozen=True)
class VQuat:
    """A quaternion as stored in skeletal mesh files."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __str__(self) -> str:
        return f"X: {self.x:g} Y: {self.y:g} Z: {self.z:g} W: {self.w:g}"

    def __add__(self, other: object) -> VQuat:
        if not isinstance(other, VQuat):
            return NotImplemented
        return VQuat(other.x + self.x, other.y + self.y, other.z + self.z, other.w + self.w)

    def __sub__(self, other: object) -> VQuat:
        """Return ``other`` minus this quaternion, component by component."""
        if not isinstance(other, VQuat):
            return NotImplemented
        return VQuat(other.x - self.x, other.y - self.y, other.z - self.z, other.w - self.w)


@dataclass(frozen=True)
class VPoint:
    """A point as stored in skeletal mesh files."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"X: {self.x:g} Y: {self.y:g} Z: {self.z:g}"

    def __add__(self, other: object) -> VPoint:
        if not isinstance(other, VPoint):
            return NotImplemented
        return VPoint(other.x + self.x, other.y + self.y, other.z + self.z)

    def __sub__(self, other: object) -> VPoint:
        """Return ``other`` minus this point, component by component."""
        if not isinstance(other, VPoint):
            return NotImplemented
        return VPoint(other.x - self.x, other.y - self.y, other.z - self.z)


@dataclass(frozen=True)
class VJointPos:
    """Orientation and position of a joint, with its length and extents."""

    orientation: VQuat = field(default_factory=VQuat)
    position: VPoint = field(default_factory=VPoint)
    length: float = 0.0
    x_size: float = 0.0
    y_size: float = 0.0
    z_size: float = 0.0

    def __str__(self) -> str:
        return f"Orientation: {self.orientation}\nPosition: {self.position}"

    def __add__(self, other: object) -> VJointPos:
        if not isinstance(other, VJointPos):
            return NotImplemented
        return VJointPos(
            orientation=other.orientation + self.orientation,
            position=other.position + self.position,
        )

    def __sub__(self, other: object) -> VJointPos:
        """Combine the differences of orientation and position, as for VQuat and VPoint."""
        if not isinstance(other, VJointPos):
            return NotImplemented
        return VJointPos(
            orientation=other.orientation - self.orientation,
            position=other.position - self.position,
        )