"""geodome: geodesic polyhedra for dome builders.

geodome grows a geodesic sphere from a small regular polyhedron by
splitting every triangular face into a finer lattice and projecting
the vertices onto a sphere, then reports the strut lengths.

Example usage::

    from geodome import make_polyhedron, decorate_edges, group_edges_by_length

    dome = make_polyhedron("icosahedron").subdivide(3).spherify("radius", 5.0)
    for group in group_edges_by_length(decorate_edges(dome)):
        print(group.length, len(group))
"""

from geodome.construction import (
    build_dome,
    edge_lengths,
    from_points,
    load_config,
    make_icosahedron,
    make_octahedron,
    make_polyhedron,
    make_tetrahedron,
    save_config,
    spherify,
    subdivide,
)
from geodome.edges import (
    DecoratedEdge,
    EdgeGroup,
    decorate_edges,
    group_edges_by_length,
    round_to_place,
)
from geodome.errors import (
    DegenerateVector,
    GeodomeError,
    InvalidFrequency,
    InvalidMode,
    UnknownPolyhedron,
)
from geodome.formatting import format_vertices, full_digits
from geodome.model import (
    DomeConfig,
    PolyhedronId,
    SpherifyMode,
    Vector3,
    Vertex,
    VertexOverride,
    triangle_compare,
    vector_compare,
    vertex_compare,
)
from geodome.rendering import render_wireframe

__all__ = [
    "DecoratedEdge",
    "DegenerateVector",
    "DomeConfig",
    "EdgeGroup",
    "GeodomeError",
    "InvalidFrequency",
    "InvalidMode",
    "PolyhedronId",
    "SpherifyMode",
    "UnknownPolyhedron",
    "Vector3",
    "Vertex",
    "VertexOverride",
    "build_dome",
    "decorate_edges",
    "edge_lengths",
    "format_vertices",
    "from_points",
    "full_digits",
    "group_edges_by_length",
    "load_config",
    "make_icosahedron",
    "make_octahedron",
    "make_polyhedron",
    "make_tetrahedron",
    "render_wireframe",
    "round_to_place",
    "save_config",
    "spherify",
    "subdivide",
    "triangle_compare",
    "vector_compare",
    "vertex_compare",
]
