"""Demo script: build a 3V icosahedral dome, list its struts and render it."""

from pathlib import Path

from geodome import (
    DomeConfig,
    build_dome,
    decorate_edges,
    group_edges_by_length,
    render_wireframe,
    save_config,
)

OUTPUT = Path(__file__).resolve().parent / "dome_3v.pdf"
CONFIG = Path(__file__).resolve().parent / "dome_3v.json"


def main():
    config = DomeConfig(frequency=3, size_mode="radius", size_value=2.5)
    dome = build_dome(config)
    print(f"Built dome: {len(dome.to_list())} vertices, {len(dome.triangles)} faces")

    decorated = decorate_edges(dome, config.precision)
    for group in group_edges_by_length(decorated):
        print(f"  {len(group):3d} struts of length {group.length}")
    print(f"  {len(decorated):3d} struts in total")

    save_config(CONFIG, config)
    print(f"Saved config to {CONFIG}")

    render_wireframe(dome, OUTPUT, direction=(1, 0.6, 0.8))
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
