"""Triangle meshes with materials and skeleton, read from PSK files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from marica.skeletal import Bone, Skeletal
from marica.transform import Quaternion
from marica.unanimation import VPoint, VQuat

__all__ = ["Vertex", "Face", "Model"]

_CHUNK = struct.Struct("<20s3i")
_POINT = struct.Struct("<3f")
_WEDGE = struct.Struct("<H2x2fB")
_TRIANGLE = struct.Struct("<3H")
_MATERIAL = struct.Struct("<64s")
_BONE = struct.Struct("<64sIii4f3f")
_INFLUENCE = struct.Struct("<fii")


@dataclass
class Vertex:
    """A mesh vertex with texture coordinates and material index."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    u: float = 0.0
    v: float = 0.0
    material_index: int = 0


@dataclass(frozen=True)
class Face:
    """A triangle given by three vertex indices."""

    vertexes: tuple[int, int, int] = (0, 0, 0)


def _c_string(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


def _read_chunk(stream: BinaryIO, record: struct.Struct) -> list[tuple]:
    """Read one chunk header and its records, decoding the leading fields of each."""
    header = stream.read(_CHUNK.size)
    if len(header) < _CHUNK.size:
        raise ValueError("truncated PSK chunk header")
    _name, _flags, size, count = _CHUNK.unpack(header)
    if size < 0 or count < 0:
        raise ValueError("negative PSK chunk size or count")
    if count and size < record.size:
        raise ValueError(f"PSK record size {size} is smaller than {record.size}")
    data = stream.read(size * count)
    if len(data) < size * count:
        raise ValueError("truncated PSK chunk data")
    return [record.unpack_from(data, offset) for offset in range(0, size * count, size)]


def _check_index(index: int, limit: int, what: str) -> int:
    if not 0 <= index < limit:
        raise ValueError(f"{what} index {index} out of range")
    return index


@dataclass
class Model:
    """Vertices, faces, materials and skeleton of a mesh, with skinning links."""

    vertices: list[Vertex] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    materials: list[str] = field(default_factory=list)
    skeletal: Skeletal = field(default_factory=Skeletal)
    vlinks: dict[int, set[str]] = field(default_factory=dict)
    blinks: dict[str, list[tuple[int, float]]] = field(default_factory=dict)

    @classmethod
    def read_psk(cls, filename: str | os.PathLike[str]) -> Model:
        """Read a PSK skeletal mesh; a file that cannot be opened gives an empty model."""
        model = cls()
        try:
            stream = open(filename, "rb")
        except OSError:
            return model

        with stream:
            header = stream.read(_CHUNK.size)
            if len(header) < _CHUNK.size:
                raise ValueError("truncated PSK file header")
            points = [VPoint(*record) for record in _read_chunk(stream, _POINT)]
            wedges = _read_chunk(stream, _WEDGE)
            triangles = _read_chunk(stream, _TRIANGLE)
            materials = _read_chunk(stream, _MATERIAL)
            bones = _read_chunk(stream, _BONE)
            influences = _read_chunk(stream, _INFLUENCE)

        plinks: dict[int, list[int]] = {}
        for index, (point_index, u, v, material_index) in enumerate(wedges):
            point = points[_check_index(point_index, len(points), "point")]
            model.vertices.append(Vertex(point.x, point.y, point.z, u, v, material_index))
            plinks.setdefault(point_index, []).append(index)

        model.faces = [Face(tuple(record)) for record in triangles]
        model.materials = ["./" + _c_string(name) for (name,) in materials]

        names: list[str] = []
        bone_objects: list[Bone] = []
        parents: list[int] = []
        for raw_name, _flags, _children, parent_index, *values in bones:
            orientation = VQuat(*values[:4])
            position = VPoint(*values[4:])
            bone = Bone()
            bone.origin.location = (position.x, position.y, position.z)
            bone.origin.rotation = Quaternion(
                orientation.x, orientation.y, orientation.z, orientation.w
            )
            name = _c_string(raw_name)
            model.skeletal.add_bone(name, bone)
            names.append(name)
            bone_objects.append(bone)
            parents.append(parent_index)

        for bone, parent_index in zip(bone_objects[1:], parents[1:]):
            parent = bone_objects[_check_index(parent_index, len(bone_objects), "parent bone")]
            parent.add_child(bone)

        for weight, point_index, bone_index in influences:
            bone_name = names[_check_index(bone_index, len(names), "bone")]
            targets = plinks.get(point_index, [])
            for vertex_index in targets:
                model.vlinks.setdefault(vertex_index, set()).add(bone_name)
            model.blinks.setdefault(bone_name, []).extend(
                (vertex_index, weight) for vertex_index in targets
            )

        return model