"""Graph construction: base polyhedra, subdivision, projection and builds."""

from geodome.construction.config_io import load_config, save_config
from geodome.construction.dome import build_dome
from geodome.construction.polyhedra import (
    from_points,
    int_to_letter,
    make_icosahedron,
    make_octahedron,
    make_polyhedron,
    make_tetrahedron,
)
from geodome.construction.spherify import edge_lengths, spherify
from geodome.construction.subdivide import subdivide

__all__ = [
    "build_dome",
    "edge_lengths",
    "from_points",
    "int_to_letter",
    "load_config",
    "make_icosahedron",
    "make_octahedron",
    "make_polyhedron",
    "make_tetrahedron",
    "save_config",
    "spherify",
    "subdivide",
]
