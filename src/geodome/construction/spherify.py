"""Radial projection of a vertex graph onto a sphere."""

from __future__ import annotations

import logging

import numpy as np

from geodome.errors import DegenerateVector
from geodome.model import (
    SpherifyMode,
    Vertex,
    VertexOverride,
    resolve_spherify_mode,
)

logger = logging.getLogger(__name__)


def spherify(
    vertex: Vertex,
    mode: SpherifyMode | str = SpherifyMode.RADIUS,
    value: float = 1.0,
) -> Vertex:
    """Project every vertex of a component onto a sphere about the origin.

    Each vertex moves along its own direction from the origin, so this
    is not a uniform scale when the input vertices lie at different
    distances.  The input graph is not modified.

    In ``"radius"`` mode *value* is the sphere radius.  In
    ``"min_length"`` / ``"max_length"`` mode the graph is first
    projected onto the unit sphere, its shortest (or longest) edge is
    measured, and the radius is chosen so that edge has length *value*.

    Args:
        vertex: Any vertex of the component to project.
        mode: A :class:`SpherifyMode` or its string value.  The
            spellings ``"minLength"`` and ``"maxLength"`` are accepted.
        value: Target radius or edge length; must be positive.

    Returns:
        The projected copy of *vertex*.

    Raises:
        InvalidMode: If *mode* is not a spherify mode.
        DegenerateVector: If any vertex lies at the origin, or, in a
            length mode, if there is no edge to measure or the measured
            edge has zero length.
        ValueError: If *value* is not positive.
    """
    mode = resolve_spherify_mode(mode)
    if not value > 0:
        raise ValueError(f"value must be positive, got {value}")
    _check_off_origin(vertex)

    if mode is SpherifyMode.RADIUS:
        radius = float(value)
    else:
        lengths = edge_lengths(_project(vertex, 1.0))
        if lengths.size == 0:
            raise DegenerateVector(
                f"{mode.value} mode needs at least one edge to measure", vertex,
            )
        reference = lengths.min() if mode is SpherifyMode.MIN_LENGTH else lengths.max()
        if reference == 0:
            raise DegenerateVector(
                "a zero-length edge cannot be scaled to a target length",
                float(reference),
            )
        radius = float(value / reference)

    logger.debug("Spherify mode=%s value=%g -> radius %g", mode.value, value, radius)
    return _project(vertex, radius)


def edge_lengths(vertex: Vertex) -> np.ndarray:
    """Return the length of every edge in the component, in edge order."""
    edges = vertex.edges
    if not edges:
        return np.zeros(0)
    a = np.array([tuple(p.vector3) for p, _ in edges], dtype=float)
    b = np.array([tuple(q.vector3) for _, q in edges], dtype=float)
    return np.linalg.norm(b - a, axis=1)


def _check_off_origin(vertex: Vertex) -> None:
    for _, v in vertex.iter_vertices():
        if v.vector3.magnitude == 0:
            raise DegenerateVector(
                f"vertex {v.key!r} lies at the origin and has no radial direction",
                v,
            )


def _project(vertex: Vertex, radius: float) -> Vertex:
    def transform(original: Vertex, _index: int) -> VertexOverride:
        v = original.vector3
        return VertexOverride.from_vector(v.times(radius).divided_by(v.magnitude))

    return vertex.copy(transform)
