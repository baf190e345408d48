"""Static matplotlib renderer: :func:`render_wireframe` entry point."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure

from geodome.errors import DegenerateVector
from geodome.model import Vertex

_FAR_ALPHA = 0.3
"""Opacity of the edges furthest from the viewer."""


def view_rotation(
    direction: Sequence[float] | np.ndarray,
    up: Sequence[float] | np.ndarray = (0.0, 1.0, 0.0),
) -> np.ndarray:
    """Rotation matrix for a camera looking along *direction*.

    Rows are the camera basis vectors (right, up, forward), so
    ``coords @ R.T`` maps world coordinates to camera coordinates with
    *direction* pointing into the screen.  If *up* is parallel to
    *direction*, ``[0, 0, 1]`` is used as the up hint instead.

    Raises:
        DegenerateVector: If *direction* has zero length.
    """
    d = np.asarray(direction, dtype=float)
    d_len = np.linalg.norm(d)
    if d_len < 1e-12:
        raise DegenerateVector("view direction must be non-zero", tuple(d))
    fwd = d / d_len

    right = np.cross(np.asarray(up, dtype=float), fwd)
    if np.linalg.norm(right) < 1e-12:
        right = np.cross(np.array([0.0, 0.0, 1.0]), fwd)
    right /= np.linalg.norm(right)
    up_actual = np.cross(fwd, right)
    return np.array([right, up_actual, fwd])


def render_wireframe(
    vertex: Vertex,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    direction: Sequence[float] = (0.0, 0.0, 1.0),
    colour: str | tuple[float, float, float] = "black",
    line_width: float = 1.0,
    depth_fade: bool = True,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
) -> Figure:
    """Draw the edges of a component as an orthographic wireframe.

    Example usage::

        dome = make_polyhedron("icosahedron").subdivide(3).spherify()
        render_wireframe(dome, "dome.png")

        # Into an existing axes:
        fig, ax = plt.subplots()
        render_wireframe(dome, ax=ax, direction=(1, 1, 1))

    Args:
        vertex: Any vertex of the component to draw.
        output: Optional file path to save the figure.  The figure is
            closed after saving.
        ax: Existing axes to draw into.  When given, *output*,
            *figsize* and *dpi* are ignored and the caller keeps
            control of the figure.
        direction: Viewing direction, from the camera into the scene.
        colour: Edge colour.
        line_width: Edge line width (points).
        depth_fade: Whether edges further from the viewer are drawn
            more transparent.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for the saved file.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.
    """
    rotation = view_rotation(direction)
    edges = vertex.edges
    if edges:
        starts = np.array([tuple(a.vector3) for a, _ in edges]) @ rotation.T
        ends = np.array([tuple(b.vector3) for _, b in edges]) @ rotation.T
    else:
        starts = ends = np.zeros((0, 3))
    segments = np.stack([starts[:, :2], ends[:, :2]], axis=1)

    rgba = np.tile(to_rgba(colour), (len(segments), 1))
    if depth_fade and len(segments) > 1:
        # Camera z points into the screen, so larger depth is further away.
        depth = (starts[:, 2] + ends[:, 2]) / 2
        span = np.ptp(depth)
        if span > 0:
            nearness = (depth.max() - depth) / span
            rgba[:, 3] = _FAR_ALPHA + (1 - _FAR_ALPHA) * nearness

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax must belong to a matplotlib Figure")
        _draw(ax, segments, rgba, line_width)
        return fig

    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    _draw(ax, segments, rgba, line_width)
    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")
        plt.close(fig)
    return fig


def _draw(
    ax: Axes, segments: np.ndarray, rgba: np.ndarray, line_width: float,
) -> None:
    ax.add_collection(LineCollection(segments, colors=rgba, linewidths=line_width))
    ax.set_aspect("equal")
    ax.autoscale_view()
    ax.set_axis_off()
