"""Canonical total orders over vectors, vertices and triangles.

Each ``*_compare`` function returns a negative, zero or positive
``int`` in the manner of a classic comparison function.  The matching
``*_key`` objects wrap them with :func:`functools.cmp_to_key` for use
with :func:`sorted`.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geodome.model.vector import Vector3
    from geodome.model.vertex import Triangle, Vertex


def _cmp(a: float | str, b: float | str) -> int:
    return (a > b) - (a < b)


def vector_compare(a: Vector3, b: Vector3) -> int:
    """Compare vectors lexicographically on ``(x, y, z)``."""
    return _cmp(a.x, b.x) or _cmp(a.y, b.y) or _cmp(a.z, b.z)


def vertex_compare(a: Vertex, b: Vertex) -> int:
    """Compare vertices by key, then by position."""
    return _cmp(a.key, b.key) or vector_compare(a.vector3, b.vector3)


def triangle_compare(a: Triangle, b: Triangle) -> int:
    """Compare canonically ordered triangles member by member."""
    return (
        vertex_compare(a[0], b[0])
        or vertex_compare(a[1], b[1])
        or vertex_compare(a[2], b[2])
    )


vector_key = cmp_to_key(vector_compare)
vertex_key = cmp_to_key(vertex_compare)
triangle_key = cmp_to_key(triangle_compare)
