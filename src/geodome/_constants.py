"""Shared constants used across the model, construction and output layers."""

DEFAULT_PRECISION: int = -2
"""Default rounding place for reported edge lengths (two decimals)."""

EDGE_SEPARATOR: str = " | "
"""Separator between the two endpoint keys in an edge label."""

DEFAULT_TOLERANCE: float = 1e-9
"""Absolute tolerance used when matching vertex distances in the polyhedron factories."""

FULL_DIGITS_MAX_FRACTION: int = 20
"""Maximum number of fractional digits shown by the display formatter."""
