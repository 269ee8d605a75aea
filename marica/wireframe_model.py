"""Edge lists built from triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass, field

from marica.model import Model, Vertex

__all__ = ["Edge", "WireframeModel"]


@dataclass(frozen=True, order=True)
class Edge:
    """A line between two vertex indices."""

    vertexes: tuple[int, int] = (0, 0)


def _position(vertex: Vertex) -> tuple[float, float, float]:
    return (vertex.x, vertex.y, vertex.z)


@dataclass
class WireframeModel:
    """Distinct vertex positions and the distinct edges between them."""

    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @classmethod
    def from_model(cls, model: Model) -> WireframeModel:
        """Merge vertices sharing a position and collect each triangle edge once."""
        result = cls()
        index_of: dict[tuple[float, float, float], int] = {}
        for vertex in sorted(model.vertices, key=_position):
            key = _position(vertex)
            if key not in index_of:
                index_of[key] = len(result.vertices)
                result.vertices.append(vertex)

        conformity = [index_of[_position(vertex)] for vertex in model.vertices]

        pairs: set[tuple[int, int]] = set()
        for face in model.faces:
            corners = [conformity[index] for index in face.vertexes]
            for first, second in zip(corners, corners[1:] + corners[:1]):
                pairs.add((min(first, second), max(first, second)))
        result.edges = [Edge(pair) for pair in sorted(pairs)]
        return result