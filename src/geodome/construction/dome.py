"""Build pipeline composing a base polyhedron, subdivision and projection."""

from __future__ import annotations

import logging

from geodome.construction.polyhedra import make_polyhedron
from geodome.construction.spherify import spherify
from geodome.construction.subdivide import subdivide
from geodome.model import DomeConfig, Vertex

logger = logging.getLogger(__name__)


def build_dome(config: DomeConfig) -> Vertex:
    """Build the geodesic polyhedron described by *config*.

    With ``config.spherify`` set, the flat base polyhedron is
    subdivided and the result is projected onto the sphere, so every
    vertex ends up on the sphere.  Otherwise only the base polyhedron
    is projected and its faces are subdivided flat.  In that case a
    length target is multiplied by the frequency, because each base
    edge is later split into *frequency* struts.

    The two orders give different vertex positions: subdivision
    interpolates linearly across the flat faces.

    Args:
        config: The build recipe.

    Returns:
        A vertex of the finished polyhedron.
    """
    base = make_polyhedron(config.polyhedron)
    logger.info(
        "Building %s at frequency %d (%s=%g, spherify=%s)",
        config.polyhedron.value, config.frequency,
        config.size_mode.value, config.size_value, config.spherify,
    )
    if config.spherify:
        return spherify(
            subdivide(base, config.frequency),
            config.size_mode,
            config.size_value,
        )

    value = config.size_value
    if config.size_mode.is_length:
        value *= config.frequency
    return subdivide(spherify(base, config.size_mode, value), config.frequency)
