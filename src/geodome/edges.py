"""Edge statistics: rounded strut lengths, labels and length groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby

import numpy as np

from geodome._constants import DEFAULT_PRECISION, EDGE_SEPARATOR
from geodome.construction.spherify import edge_lengths
from geodome.model import Vector3, Vertex, vertex_compare


def round_to_place(number: float | np.ndarray, place: int = 0) -> float | np.ndarray:
    """Round to a decimal place, halves rounding up.

    A negative *place* keeps ``-place`` digits after the decimal point
    (``place=-2`` rounds to hundredths); a non-negative *place* rounds
    to the nearest ``10**place``.  Halves round towards positive
    infinity, so ``round_to_place(2.5) == 3`` and
    ``round_to_place(-2.5) == -2``.

    Args:
        number: A scalar or an array of values.
        place: Power of ten to round to.

    Returns:
        A ``float`` for scalar input, otherwise an array.
    """
    values = np.asarray(number, dtype=float)
    if place < 0:
        scale = 10.0 ** -place
        rounded = np.floor(values * scale + 0.5) / scale
    else:
        scale = 10.0 ** place
        rounded = np.floor(values / scale + 0.5) * scale
    if rounded.ndim == 0:
        return float(rounded)
    return rounded


@dataclass(frozen=True)
class DecoratedEdge:
    """An edge with its rounded length and a display label.

    Attributes:
        vectors: Endpoint positions, ordered by the vertex order.
        length: Edge length rounded to the requested place.
        label: Endpoint keys in vertex order, joined by
            :data:`~geodome._constants.EDGE_SEPARATOR`.
    """

    vectors: tuple[Vector3, Vector3]
    length: float
    label: str


@dataclass
class EdgeGroup:
    """Edges sharing the same rounded length.

    Attributes:
        length: The shared rounded length.
        edges: Members of the group, in label order.
    """

    length: float
    edges: list[DecoratedEdge] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.edges)


def decorate_edges(
    vertex: Vertex,
    place: int = DEFAULT_PRECISION,
) -> list[DecoratedEdge]:
    """Describe every edge of a component for reporting.

    Args:
        vertex: Any vertex of the component.
        place: Rounding place for lengths, see :func:`round_to_place`.

    Returns:
        One :class:`DecoratedEdge` per edge, sorted by label.
    """
    edges = vertex.edges
    lengths = round_to_place(edge_lengths(vertex), place)

    decorated: list[DecoratedEdge] = []
    for (a, b), length in zip(edges, lengths):
        if vertex_compare(a, b) > 0:
            a, b = b, a
        decorated.append(DecoratedEdge(
            vectors=(a.vector3, b.vector3),
            length=float(length),
            label=f"{a.key}{EDGE_SEPARATOR}{b.key}",
        ))
    decorated.sort(key=lambda edge: edge.label)
    return decorated


def group_edges_by_length(decorated: list[DecoratedEdge]) -> list[EdgeGroup]:
    """Group decorated edges by rounded length.

    Groups are ordered by increasing length.  The sort is stable, so
    label-sorted input stays label-sorted within each group.

    Args:
        decorated: Output of :func:`decorate_edges`.

    Returns:
        One :class:`EdgeGroup` per distinct length.
    """
    ordered = sorted(decorated, key=lambda edge: edge.length)
    return [
        EdgeGroup(length=length, edges=list(members))
        for length, members in groupby(ordered, key=lambda edge: edge.length)
    ]
