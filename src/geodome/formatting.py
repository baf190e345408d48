"""Plain-text display of vertices and edge statistics."""

from __future__ import annotations

from geodome.edges import EdgeGroup
from geodome.errors import InvalidMode
from geodome.model import Vertex, vector_key, vertex_key
from geodome.model._util import full_digits

_VERTEX_FORMATS = ("single", "key", "keyless", "desmos")

__all__ = [
    "format_full",
    "format_summary",
    "format_vertices",
    "full_digits",
]


def format_vertices(vertex: Vertex, mode: str = "single") -> str:
    """Describe vertex positions as text.

    Modes:

    - ``"single"``: only *vertex*, as ``"key: (x, y, z)"``.
    - ``"key"``: every vertex of the component as ``"key: (x, y, z)"``,
      one per line, sorted by the vertex order.
    - ``"keyless"``: every position as ``"(x, y, z)"``, one per line,
      sorted by the vector order.
    - ``"desmos"``: every position in one bracketed list with no
      whitespace, for pasting into a graphing calculator.

    Raises:
        InvalidMode: If *mode* is not one of the above.
    """
    if mode not in _VERTEX_FORMATS:
        raise InvalidMode(mode, _VERTEX_FORMATS)
    if mode == "single":
        return str(vertex)

    if mode == "key":
        vertices = sorted(vertex.to_list(), key=vertex_key)
        return "\n".join(str(v) for v in vertices)

    vectors = sorted((v.vector3 for v in vertex.to_list()), key=vector_key)
    if mode == "keyless":
        return "\n".join(str(v) for v in vectors)
    return "[" + ",".join(str(v).replace(" ", "") for v in vectors) + "]"


def format_summary(groups: list[EdgeGroup], total: int) -> str:
    """One ``"Length of L: N"`` line per group, then the edge total."""
    lines = [f"Length of {full_digits(g.length)}: {len(g)}" for g in groups]
    lines.append(f"TOTAL EDGES: {total}")
    return "\n".join(lines)


def format_full(groups: list[EdgeGroup], total: int) -> str:
    """Every edge label under its length heading, then the edge total."""
    blocks = []
    for group in groups:
        labels = "\n\t".join(edge.label for edge in group.edges)
        blocks.append(
            f"Edge length: {full_digits(group.length)}\n"
            f"Count: {len(group)}\n"
            f"\t{labels}"
        )
    blocks.append(f"TOTAL EDGES: {total}")
    return "\n".join(blocks)
