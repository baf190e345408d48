"""Factories for the small base polyhedra a dome is grown from."""

from __future__ import annotations

import math
import string
from collections.abc import Sequence

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from geodome._constants import DEFAULT_TOLERANCE
from geodome.model import (
    PolyhedronId,
    Vector3,
    Vertex,
    resolve_polyhedron_id,
)

_PHI = (1 + math.sqrt(5)) / 2
_ROOT_2 = math.sqrt(2)
_ROOT_6 = math.sqrt(6)


def int_to_letter(n: int) -> str:
    """Map ``0..25`` to ``"A".."Z"``.

    Raises:
        ValueError: If *n* is outside ``0..25``.
    """
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n < 26:
        raise ValueError(f"Invalid integer ({n!r}) for letter conversion")
    return string.ascii_uppercase[n]


def _connect_at_distance(vertices: list[Vertex], length: float) -> None:
    """Connect every pair of vertices exactly *length* apart."""
    for i, a in enumerate(vertices):
        for b in vertices[i + 1:]:
            if math.isclose(
                a.vector3.distance_to(b.vector3), length, abs_tol=DEFAULT_TOLERANCE,
            ):
                a.connect(b)


def make_icosahedron() -> Vertex:
    """Return a vertex of a regular icosahedron with edge length 2.

    The twelve vertices are the cyclic permutations of
    ``(0, +-1, +-phi)``, keyed ``"A"`` to ``"L"``.  Every vertex lies at
    distance ``sqrt(1 + phi**2)`` from the origin and has five
    neighbours.
    """
    vertices: list[Vertex] = []
    for i in range(12):
        a = 0.0
        b = 2 * (i % 2) - 1.0
        c = (2 * ((i // 2) % 2) - 1) * _PHI
        if i < 4:
            position = Vector3(a, b, c)
        elif i < 8:
            position = Vector3(b, c, a)
        else:
            position = Vector3(c, a, b)
        vertices.append(Vertex(int_to_letter(i), position))

    _connect_at_distance(vertices, 2.0)
    return vertices[0]


def make_octahedron() -> Vertex:
    """Return the top vertex of a unit octahedron keyed ``"A"`` to ``"F"``."""
    positions = [
        (0, 1, 0),   # top
        (0, -1, 0),  # bottom
        (0, 0, 1),   # near
        (0, 0, -1),  # far
        (-1, 0, 0),  # left
        (1, 0, 0),   # right
    ]
    vertices = [
        Vertex(int_to_letter(i), Vector3(*p)) for i, p in enumerate(positions)
    ]
    _connect_at_distance(vertices, _ROOT_2)
    return vertices[0]


def make_tetrahedron() -> Vertex:
    """Return the top vertex of a regular tetrahedron inscribed in the unit sphere."""
    positions = [
        (0.0, 1.0, 0.0),                           # top
        (0.0, -1 / 3, 2 * _ROOT_2 / 3),            # near
        (-_ROOT_6 / 3, -1 / 3, -_ROOT_2 / 3),      # left
        (_ROOT_6 / 3, -1 / 3, -_ROOT_2 / 3),       # right
    ]
    vertices = [
        Vertex(int_to_letter(i), Vector3(*p)) for i, p in enumerate(positions)
    ]
    for i, a in enumerate(vertices):
        for b in vertices[i + 1:]:
            a.connect(b)
    return vertices[0]


_FACTORIES = {
    PolyhedronId.ICOSAHEDRON: make_icosahedron,
    PolyhedronId.OCTAHEDRON: make_octahedron,
    PolyhedronId.TETRAHEDRON: make_tetrahedron,
}


def make_polyhedron(polyhedron_id: PolyhedronId | str) -> Vertex:
    """Build a base polyhedron by name.

    Args:
        polyhedron_id: A :class:`PolyhedronId` or its string value
            (``"icosahedron"``, ``"octahedron"`` or ``"tetrahedron"``).

    Returns:
        A vertex of the new polyhedron.

    Raises:
        UnknownPolyhedron: If the id names no known polyhedron.
    """
    return _FACTORIES[resolve_polyhedron_id(polyhedron_id)]()


def from_points(
    coords: np.ndarray | Sequence[Sequence[float]],
    keys: Sequence[str] | None = None,
) -> Vertex:
    """Build a triangulated convex polyhedron from a point cloud.

    The convex hull of *coords* is triangulated and each hull triangle
    contributes its three edges.  Points strictly inside the hull are
    dropped.  Flat faces with more than three corners are split into
    triangles by the hull, so they gain diagonal edges.  Those diagonals
    can close 3-cycles that are not hull faces, and
    :func:`~geodome.construction.subdivide.subdivide` lays a lattice
    over every 3-cycle.

    Args:
        coords: Array of shape ``(n, 3)`` with ``n >= 4``.
        keys: Optional keys, one per point.  Defaults to the point
            index as a string.

    Returns:
        The hull vertex with the lowest input index.

    Raises:
        ValueError: If *coords* has the wrong shape, *keys* has the
            wrong length, or the points do not span a 3D hull.
    """
    coords = np.asarray(coords, dtype=float)
    if coords.ndim != 2 or coords.shape[1] != 3:
        raise ValueError(f"coords must have shape (n, 3), got {coords.shape}")
    if keys is None:
        keys = [str(i) for i in range(len(coords))]
    elif len(keys) != len(coords):
        raise ValueError(
            f"expected {len(coords)} keys, got {len(keys)}"
        )

    try:
        hull = ConvexHull(coords)
    except QhullError as exc:
        raise ValueError("points do not span a three-dimensional hull") from exc

    vertices = {
        int(i): Vertex(keys[int(i)], Vector3.from_array(coords[int(i)]))
        for i in sorted(hull.vertices)
    }
    for simplex in hull.simplices:
        i, j, k = (int(s) for s in simplex)
        vertices[i].connect(vertices[j])
        vertices[j].connect(vertices[k])
        vertices[k].connect(vertices[i])
    return vertices[min(vertices)]
