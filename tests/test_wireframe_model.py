from marica.model import Face, Model, Vertex
from marica.wireframe_model import Edge, WireframeModel


def _quad_model():
    # Two triangles of a unit square, each with its own copies of the corners.
    corners = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]
    order = [0, 1, 2, 0, 2, 3]
    vertices = [Vertex(*corners[c], u=float(i)) for i, c in enumerate(order)]
    return Model(vertices=vertices, faces=[Face((0, 1, 2)), Face((3, 4, 5))])


def test_vertices_are_distinct_and_sorted():
    wire = WireframeModel.from_model(_quad_model())
    positions = [(v.x, v.y, v.z) for v in wire.vertices]
    assert positions == sorted(set(positions))
    assert len(positions) == 4


def test_first_vertex_of_each_position_is_kept():
    wire = WireframeModel.from_model(_quad_model())
    origin = wire.vertices[0]
    assert (origin.x, origin.y, origin.z) == (0.0, 0.0, 0.0)
    assert origin.u == 0.0


def test_shared_edge_appears_once():
    wire = WireframeModel.from_model(_quad_model())
    assert len(wire.edges) == 5
    assert len(set(wire.edges)) == len(wire.edges)


def test_edges_are_ordered_and_in_range():
    wire = WireframeModel.from_model(_quad_model())
    assert wire.edges == sorted(wire.edges)
    for edge in wire.edges:
        low, high = edge.vertexes
        assert low <= high < len(wire.vertices)


def test_single_triangle():
    model = Model(
        vertices=[Vertex(2.0, 0.0, 0.0), Vertex(0.0, 0.0, 0.0), Vertex(1.0, 0.0, 0.0)],
        faces=[Face((0, 1, 2))],
    )
    wire = WireframeModel.from_model(model)
    assert [v.x for v in wire.vertices] == [0.0, 1.0, 2.0]
    assert wire.edges == [Edge((0, 1)), Edge((0, 2)), Edge((1, 2))]


def test_empty_model():
    wire = WireframeModel.from_model(Model())
    assert wire.vertices == [] and wire.edges == []