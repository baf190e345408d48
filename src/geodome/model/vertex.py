from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from geodome.model.comparators import triangle_key, vertex_key
from geodome.model.vector import Vector3

if TYPE_CHECKING:
    from geodome.model.dome_config import SpherifyMode

T = TypeVar("T")

Edge = tuple["Vertex", "Vertex"]
Triangle = tuple["Vertex", "Vertex", "Vertex"]


@dataclass(frozen=True)
class VertexOverride:
    """Per-vertex overrides applied by :meth:`Vertex.copy`.

    Every field defaults to ``None``, meaning "keep the original
    value".  Any other value, including ``0.0`` or ``""``, replaces
    the original on the copy.

    Attributes:
        key: Replacement key.
        x: Replacement x coordinate.
        y: Replacement y coordinate.
        z: Replacement z coordinate.
    """

    key: str | None = None
    x: float | None = None
    y: float | None = None
    z: float | None = None

    @classmethod
    def from_vector(cls, vector: Vector3, key: str | None = None) -> VertexOverride:
        """Override all three coordinates (and optionally the key)."""
        return cls(key=key, x=vector.x, y=vector.y, z=vector.z)


VertexTransform = Callable[["Vertex", int], "VertexOverride | None"]


class Vertex:
    """A point in a connectivity graph.

    A graph has no container object: any vertex is a handle to every
    vertex reachable from it.  Adjacency is always mutual and a vertex
    is never connected to itself.  Vertices hash and compare by
    identity, so two vertices with the same key and position are still
    distinct nodes.

    Example usage::

        a = Vertex("A", Vector3(0, 0, 0))
        b = Vertex("B", Vector3(3, 4, 0))
        a.connect(b)
        [(p.key, q.key) for p, q in a.edges]   # [("A", "B")]

    Attributes:
        key: Display label, used for ordering.  Not required to be
            unique.
        vector3: Position of the vertex.
    """

    def __init__(self, key: str, vector3: Vector3) -> None:
        self.key = key
        self.vector3 = vector3
        # dict used as an insertion-ordered set for reproducible traversal.
        self._connections: dict[Vertex, None] = {}

    def __repr__(self) -> str:
        return f"Vertex({self.key!r}, {self.vector3})"

    def __str__(self) -> str:
        return f"{self.key}: {self.vector3}"

    # ---- connectivity ------------------------------------------------

    def connect(self, other: Vertex) -> Vertex:
        """Connect two vertices in both directions.

        Connecting an already-connected pair is a no-op.

        Returns:
            ``self``, so calls can be chained.

        Raises:
            ValueError: If *other* is this vertex.
        """
        if other is self:
            raise ValueError(f"cannot connect vertex {self.key!r} to itself")
        self._connections[other] = None
        other._connections[self] = None
        return self

    def disconnect(self, other: Vertex) -> Vertex:
        """Remove the connection between two vertices, if any.

        Returns:
            ``self``, so calls can be chained.
        """
        self._connections.pop(other, None)
        other._connections.pop(self, None)
        return self

    def is_connected_to(self, other: Vertex) -> bool:
        return other in self._connections

    @property
    def connections(self) -> list[Vertex]:
        """Direct neighbours, as a fresh list in connection order."""
        return list(self._connections)

    # ---- traversal ---------------------------------------------------

    def iter_vertices(self) -> Iterator[tuple[int, Vertex]]:
        """Yield ``(index, vertex)`` for every vertex in the component.

        Depth-first from ``self``, each vertex exactly once regardless
        of cycles.  ``self`` is always index 0.
        """
        stack: list[Vertex] = [self]
        seen: set[Vertex] = {self}
        index = 0
        while stack:
            vertex = stack.pop()
            yield index, vertex
            index += 1
            for neighbour in vertex._connections:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)

    def for_each(self, func: Callable[[Vertex, int], Any]) -> None:
        """Call ``func(vertex, index)`` on every vertex in the component."""
        for index, vertex in self.iter_vertices():
            func(vertex, index)

    def map(self, func: Callable[[Vertex, int], T]) -> list[T]:
        """Collect ``func(vertex, index)`` over the component."""
        return [func(vertex, index) for index, vertex in self.iter_vertices()]

    def reduce(self, func: Callable[[T, Vertex, int], T], initial: T) -> T:
        """Fold ``func(acc, vertex, index)`` over the component."""
        acc = initial
        for index, vertex in self.iter_vertices():
            acc = func(acc, vertex, index)
        return acc

    def to_list(self) -> list[Vertex]:
        """Every vertex in the component, in traversal order."""
        return [vertex for _, vertex in self.iter_vertices()]

    def coords(self) -> np.ndarray:
        """Positions of the component in traversal order, shape ``(n, 3)``."""
        return np.array(
            [tuple(vertex.vector3) for _, vertex in self.iter_vertices()],
            dtype=float,
        )

    # ---- copy --------------------------------------------------------

    def copy(self, transform: VertexTransform | None = None) -> Vertex:
        """Return a disjoint, isomorphic copy of the component.

        The component is traversed once, building an original-to-copy
        table.  When *transform* is given it is called as
        ``transform(original, index)`` and may return a
        :class:`VertexOverride` (or ``None``) for the copy.  The copy's
        adjacency is then wired from the original's through the table.

        Args:
            transform: Optional per-vertex override callback.

        Returns:
            The copy of ``self``.
        """
        table: dict[Vertex, Vertex] = {}
        for index, original in self.iter_vertices():
            override = transform(original, index) if transform else None
            if override is None:
                override = VertexOverride()
            table[original] = Vertex(
                original.key if override.key is None else override.key,
                original.vector3.copy(override.x, override.y, override.z),
            )

        for original, duplicate in table.items():
            for neighbour in original._connections:
                duplicate.connect(table[neighbour])

        return table[self]

    # ---- structural queries ------------------------------------------

    @property
    def edges(self) -> list[Edge]:
        """One ``(a, b)`` pair per undirected edge in the component.

        Pairs appear in traversal order; an edge is reported once,
        never also as ``(b, a)``.
        """
        result: list[Edge] = []
        done: set[Vertex] = set()
        for _, vertex in self.iter_vertices():
            for neighbour in vertex._connections:
                if neighbour not in done:
                    result.append((vertex, neighbour))
            done.add(vertex)
        return result

    @property
    def triangles(self) -> list[Triangle]:
        """Every 3-cycle in the component, each exactly once.

        Each triangle is a tuple sorted by the vertex order, and the
        list is sorted by the triangle order.
        """
        found: dict[frozenset[Vertex], Triangle] = {}
        for _, vertex in self.iter_vertices():
            neighbours = vertex.connections
            for i, outer in enumerate(neighbours):
                for inner in neighbours[:i]:
                    if not outer.is_connected_to(inner):
                        continue
                    members = frozenset((vertex, outer, inner))
                    if members not in found:
                        found[members] = tuple(
                            sorted((vertex, outer, inner), key=vertex_key)
                        )
        return sorted(found.values(), key=triangle_key)

    # ---- construction shortcuts ----------------------------------------

    def spherify(
        self,
        mode: SpherifyMode | str = "radius",
        value: float = 1.0,
    ) -> Vertex:
        """Project the component onto a sphere.

        Convenience wrapper around
        :func:`geodome.construction.spherify.spherify`.
        """
        from geodome.construction.spherify import spherify

        return spherify(self, mode, value)

    def subdivide(self, frequency: int) -> Vertex:
        """Split every triangular face into ``frequency**2`` faces.

        Convenience wrapper around
        :func:`geodome.construction.subdivide.subdivide`.
        """
        from geodome.construction.subdivide import subdivide

        return subdivide(self, frequency)
