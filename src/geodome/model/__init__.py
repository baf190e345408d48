"""Core data model for geodome: vectors, vertices, orders and build config.

Everything is re-exported here so that ``from geodome.model import
Vertex`` works without knowing the submodule layout.
"""

from geodome.model.comparators import (
    triangle_compare,
    triangle_key,
    vector_compare,
    vector_key,
    vertex_compare,
    vertex_key,
)
from geodome.model.dome_config import (
    DomeConfig,
    PolyhedronId,
    SpherifyMode,
    check_frequency,
    resolve_polyhedron_id,
    resolve_spherify_mode,
)
from geodome.model.vector import Vector3
from geodome.model.vertex import Edge, Triangle, Vertex, VertexOverride

__all__ = [
    "DomeConfig",
    "Edge",
    "PolyhedronId",
    "SpherifyMode",
    "Triangle",
    "Vector3",
    "Vertex",
    "VertexOverride",
    "check_frequency",
    "resolve_polyhedron_id",
    "resolve_spherify_mode",
    "triangle_compare",
    "triangle_key",
    "vector_compare",
    "vector_key",
    "vertex_compare",
    "vertex_key",
]
