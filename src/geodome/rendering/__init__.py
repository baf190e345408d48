"""Rendering backends for geodome."""

from geodome.rendering.static import render_wireframe, view_rotation

__all__ = ["render_wireframe", "view_rotation"]
