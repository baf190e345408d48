"""Shared test fixtures for geodome."""

import matplotlib

matplotlib.use("Agg")

import pytest

from geodome.construction.polyhedra import (
    make_icosahedron,
    make_octahedron,
    make_tetrahedron,
)
from geodome.model import Vector3, Vertex


@pytest.fixture
def icosahedron():
    """Return a vertex of a fresh base icosahedron."""
    return make_icosahedron()


@pytest.fixture
def octahedron():
    """Return a vertex of a fresh base octahedron."""
    return make_octahedron()


@pytest.fixture
def tetrahedron():
    """Return a vertex of a fresh base tetrahedron."""
    return make_tetrahedron()


@pytest.fixture
def path_of_three():
    """Return ``(zero, one, two)`` connected as zero - one - two."""
    zero = Vertex("zero", Vector3(0, 1, 2))
    one = Vertex("one", Vector3(1, 2, 3))
    two = Vertex("two", Vector3(2, 3, 4))
    zero.connect(one)
    one.connect(two)
    return zero, one, two


def _complete_graph(n: int) -> list[Vertex]:
    vertices = [Vertex(f"v{i}", Vector3(i, i * i, 1)) for i in range(n)]
    for i, a in enumerate(vertices):
        for b in vertices[i + 1:]:
            a.connect(b)
    return vertices


@pytest.fixture
def complete_graph():
    """Return a factory building n mutually connected vertices."""
    return _complete_graph

