"""Demo: geodesic sphere from the convex hull of a Fibonacci point set."""

from pathlib import Path

import numpy as np

from geodome import decorate_edges, from_points, group_edges_by_length, render_wireframe

OUTPUT = Path(__file__).resolve().parent / "fibonacci.pdf"

# Points spread evenly over the unit sphere along a golden-angle spiral.
n = 60
golden_angle = np.pi * (3 - np.sqrt(5))
i = np.arange(n)
y = 1 - 2 * (i + 0.5) / n
r = np.sqrt(1 - y ** 2)
theta = golden_angle * i
coords = np.column_stack([r * np.cos(theta), y, r * np.sin(theta)])

sphere = from_points(coords, keys=[f"P{k:02d}" for k in range(n)])
print(f"Hull: {len(sphere.to_list())} vertices, {len(sphere.triangles)} faces")

decorated = decorate_edges(sphere, place=-3)
groups = group_edges_by_length(decorated)
print(f"{len(decorated)} struts in {len(groups)} distinct lengths")
print(f"Shortest {groups[0].length}, longest {groups[-1].length}")

render_wireframe(sphere, OUTPUT, direction=(0, -1, 0.2))
print(f"Rendered to {OUTPUT}")
