"""Generate static images for the documentation."""

from pathlib import Path

import matplotlib.pyplot as plt

from geodome import DomeConfig, build_dome, make_polyhedron, render_wireframe

OUT = Path(__file__).resolve().parent


def frequency_panel(polyhedron: str, frequencies=(1, 2, 3, 4)) -> plt.Figure:
    """Side-by-side wireframes of one base polyhedron at rising frequency."""
    fig, axes = plt.subplots(1, len(frequencies), figsize=(3 * len(frequencies), 3))
    for ax, frequency in zip(axes, frequencies):
        dome = build_dome(DomeConfig(polyhedron=polyhedron, frequency=frequency))
        render_wireframe(dome, ax=ax, direction=(1, 0.6, 0.8))
        ax.set_title(f"{frequency}V")
    return fig


def order_comparison() -> plt.Figure:
    """Subdivide-then-spherify against spherify-then-subdivide."""
    fig, (left, right) = plt.subplots(1, 2, figsize=(6, 3))
    base = make_polyhedron("icosahedron")
    render_wireframe(base.subdivide(4).spherify(), ax=left, direction=(1, 0.6, 0.8))
    left.set_title("spherified")
    render_wireframe(base.spherify().subdivide(4), ax=right, direction=(1, 0.6, 0.8))
    right.set_title("flat faces")
    return fig


def generate_docs_images() -> None:
    # Hero image
    dome = build_dome(DomeConfig(frequency=6))
    render_wireframe(dome, OUT / "icosahedron_6v.svg", figsize=(5, 5))
    print(f"  wrote {OUT / 'icosahedron_6v.svg'}")

    for polyhedron in ("icosahedron", "octahedron", "tetrahedron"):
        fig = frequency_panel(polyhedron)
        path = OUT / f"{polyhedron}_frequencies.svg"
        fig.savefig(path, bbox_inches="tight")
        plt.close(fig)
        print(f"  wrote {path}")

    fig = order_comparison()
    fig.savefig(OUT / "spherify_order.svg", bbox_inches="tight")
    plt.close(fig)
    print(f"  wrote {OUT / 'spherify_order.svg'}")


if __name__ == "__main__":
    generate_docs_images()
