"""Frequency subdivision of triangular faces into a triangular lattice."""

from __future__ import annotations

import logging

from geodome.model import Vector3, Vertex, check_frequency

logger = logging.getLogger(__name__)


class _EdgeChain:
    """The ``frequency + 1`` vertices along one original edge.

    Index 0 is the endpoint the chain was first requested from.
    Intermediate slots start empty and are filled by whichever face
    reaches them first.
    """

    def __init__(self, start: Vertex, end: Vertex, frequency: int) -> None:
        self.start = start
        self.end = end
        self.slots: list[Vertex | None] = [start] + [None] * (frequency - 1) + [end]

    def label(self, index: int) -> str:
        return f"edge {self.start.key}-{self.end.key} {index}"


class _ChainView:
    """One orientation of an :class:`_EdgeChain`."""

    def __init__(self, chain: _EdgeChain, reverse: bool) -> None:
        self._chain = chain
        self._reverse = reverse

    def _slot(self, index: int) -> int:
        return len(self._chain.slots) - 1 - index if self._reverse else index

    def vertex_at(self, index: int, position: Vector3) -> Vertex:
        """Return the vertex at *index*, creating it at *position* if needed."""
        slot = self._slot(index)
        vertex = self._chain.slots[slot]
        if vertex is None:
            vertex = Vertex(self._chain.label(slot), position)
            self._chain.slots[slot] = vertex
        return vertex


class _EdgeChains:
    """Memo of edge chains keyed by undirected edge."""

    def __init__(self, frequency: int) -> None:
        self._frequency = frequency
        self._chains: dict[frozenset[Vertex], _EdgeChain] = {}

    def get(self, start: Vertex, end: Vertex) -> _ChainView:
        key = frozenset((start, end))
        chain = self._chains.get(key)
        if chain is None:
            chain = _EdgeChain(start, end, self._frequency)
            self._chains[key] = chain
        return _ChainView(chain, reverse=chain.start is not start)

    def __len__(self) -> int:
        return len(self._chains)


def subdivide(vertex: Vertex, frequency: int) -> Vertex:
    """Replace every triangular face with a ``frequency**2`` triangle lattice.

    Each face ``(A, B, C)`` is treated as rows ``0..frequency`` with row
    ``r`` holding ``r + 1`` vertices at::

        A + (B - A) * r / frequency + (C - B) * c / frequency

    for column ``c`` in ``0..r``.  Vertices on an original edge are
    shared by every face touching that edge, so a closed polyhedron
    with V vertices, E edges and F faces ends up with
    ``V + E*(f-1) + F*(f-1)*(f-2)/2`` vertices.  Original corner-to-corner
    connections are removed before the lattice is wired.

    Positions are interpolated on the flat faces; call
    :func:`~geodome.construction.spherify.spherify` afterwards to
    project them onto a sphere.

    New vertices are keyed ``"edge {P}-{Q} {i}"`` (the *i*-th point
    from *P* along edge *PQ*) or ``"internal {B}-{A}-{C} {r},{c}"``.

    Every 3-cycle of the graph is treated as a face, including cycles
    that are not faces of the surface.  A tetrahedron subdivided once
    has such a cycle around each degree-3 corner, so subdividing it a
    second time lays a lattice over those cycles as well and adds
    struts that a single higher-frequency pass would not.

    Args:
        vertex: Any vertex of the component to subdivide.
        frequency: Number of segments each original edge is split
            into.  ``1`` returns an isomorphic copy.

    Returns:
        The copy of *vertex* in the subdivided graph.  The input graph
        is not modified.

    Raises:
        InvalidFrequency: If *frequency* is not a positive integer.
    """
    frequency = check_frequency(frequency)
    result = vertex.copy()
    triangles = result.triangles
    chains = _EdgeChains(frequency)

    for a, b, c in triangles:
        ab = chains.get(a, b)
        ac = chains.get(a, c)
        bc = chains.get(b, c)
        a.disconnect(b).disconnect(c)
        b.disconnect(c)

        origin = a.vector3
        step_row = b.vector3.minus(a.vector3).divided_by(frequency)
        step_col = c.vector3.minus(b.vector3).divided_by(frequency)

        def position(row: int, col: int) -> Vector3:
            return origin.plus(step_row.times(row)).plus(step_col.times(col))

        previous_row: list[Vertex] = []
        for row in range(frequency + 1):
            current_row: list[Vertex] = []
            for col in range(row + 1):
                if col == 0:
                    current = ab.vertex_at(row, position(row, col))
                elif col == row:
                    current = ac.vertex_at(row, position(row, col))
                elif row == frequency:
                    current = bc.vertex_at(col, position(row, col))
                else:
                    current = Vertex(
                        f"internal {b.key}-{a.key}-{c.key} {row},{col}",
                        position(row, col),
                    )

                if col > 0:
                    current.connect(previous_row[col - 1])
                    current.connect(current_row[-1])
                if col < row:
                    current.connect(previous_row[col])
                current_row.append(current)
            previous_row = current_row

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Subdivided %d faces (%d edges) at frequency %d into %d vertices",
            len(triangles), len(chains), frequency, len(result.to_list()),
        )
    return result
