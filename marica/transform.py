"""Rotations, affine matrices and the location/rotation/scale transform."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

__all__ = [
    "Quaternion",
    "Transform",
    "translation_matrix",
    "scale_matrix",
    "apply_matrix",
]


def _vec3(value: Any) -> np.ndarray:
    """Return ``value`` as a new float vector of three components."""
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected three numeric components, got {value!r}") from exc
    if arr.shape != (3,):
        raise ValueError(f"expected three components, got shape {arr.shape}")
    return arr.copy()


def _mat4(matrix: Any) -> np.ndarray:
    arr = np.asarray(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def to_matrix(self) -> np.ndarray:
        """Return the 4x4 rotation matrix of this quaternion."""
        x, y, z, w = self.x, self.y, self.z, self.w
        m = np.eye(4)
        m[:3, :3] = [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
        return m

    @classmethod
    def from_matrix(cls, matrix: Any) -> Quaternion:
        """Build the quaternion of the rotation held in a 3x3 or 4x4 matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape not in ((3, 3), (4, 4)):
            raise ValueError(f"expected a 3x3 or 4x4 matrix, got shape {m.shape}")
        m = m[:3, :3]
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0:
            s = math.sqrt(trace + 1.0) * 2
            return cls(
                (m[2, 1] - m[1, 2]) / s,
                (m[0, 2] - m[2, 0]) / s,
                (m[1, 0] - m[0, 1]) / s,
                0.25 * s,
            )
        if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2
            return cls(
                0.25 * s,
                (m[0, 1] + m[1, 0]) / s,
                (m[0, 2] + m[2, 0]) / s,
                (m[2, 1] - m[1, 2]) / s,
            )
        if m[1, 1] > m[2, 2]:
            s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2
            return cls(
                (m[0, 1] + m[1, 0]) / s,
                0.25 * s,
                (m[1, 2] + m[2, 1]) / s,
                (m[0, 2] - m[2, 0]) / s,
            )
        s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2
        return cls(
            (m[0, 2] + m[2, 0]) / s,
            (m[1, 2] + m[2, 1]) / s,
            0.25 * s,
            (m[1, 0] - m[0, 1]) / s,
        )


def translation_matrix(location: Any) -> np.ndarray:
    """Return the 4x4 matrix that moves points by ``location``."""
    m = np.eye(4)
    m[:3, 3] = _vec3(location)
    return m


def scale_matrix(scale: Any) -> np.ndarray:
    """Return the 4x4 matrix that scales points per axis by ``scale``."""
    m = np.eye(4)
    m[:3, :3] = np.diag(_vec3(scale))
    return m


def apply_matrix(matrix: Any, point: Any) -> np.ndarray:
    """Transform a point by a 4x4 matrix."""
    homogeneous = np.append(_vec3(point), 1.0)
    return (_mat4(matrix) @ homogeneous)[:3]


class Transform:
    """Location, rotation and per-axis scale of an object."""

    def __init__(
        self,
        location: Any = (0.0, 0.0, 0.0),
        rotation: Quaternion | None = None,
        scale: Any = (1.0, 1.0, 1.0),
    ) -> None:
        self.location = location
        self.rotation = rotation if rotation is not None else Quaternion()
        self.scale = scale

    def __repr__(self) -> str:
        return (
            f"Transform(location={self._location.tolist()}, "
            f"rotation={self.rotation!r}, scale={self._scale.tolist()})"
        )

    @property
    def location(self) -> np.ndarray:
        return self._location.copy()

    @location.setter
    def location(self, value: Any) -> None:
        self._location = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Any) -> None:
        self._scale = _vec3(value)

    def set_uniform_scale(self, value: float) -> None:
        """Scale equally along all three axes."""
        self._scale = np.full(3, float(value))

    def rotation_matrix(self) -> np.ndarray:
        return self.rotation.to_matrix()

    def location_matrix(self) -> np.ndarray:
        return translation_matrix(self._location)

    def scale_matrix(self) -> np.ndarray:
        return scale_matrix(self._scale)

    def matrix(self) -> np.ndarray:
        """Scale, then rotate, then translate."""
        return self.location_matrix() @ self.rotation_matrix() @ self.scale_matrix()