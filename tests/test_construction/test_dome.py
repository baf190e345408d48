"""Tests for the full dome build pipeline."""

import logging

import pytest

from geodome.construction.dome import build_dome
from geodome.construction.spherify import edge_lengths
from geodome.model import DomeConfig


class TestSpherified:
    def test_default_is_unit_icosahedron(self):
        dome = build_dome(DomeConfig())
        assert len(dome.to_list()) == 12
        for v in dome.to_list():
            assert v.vector3.magnitude == pytest.approx(1)

    @pytest.mark.parametrize("frequency, count", [(2, 42), (3, 92), (4, 162)])
    def test_vertex_counts(self, frequency, count):
        dome = build_dome(DomeConfig(frequency=frequency, size_value=5))
        vertices = dome.to_list()
        assert len(vertices) == count
        for v in vertices:
            assert v.vector3.magnitude == pytest.approx(5)

    def test_min_length(self):
        dome = build_dome(DomeConfig(
            frequency=3, size_mode="min_length", size_value=0.5,
        ))
        assert edge_lengths(dome).min() == pytest.approx(0.5)

    def test_max_length(self):
        dome = build_dome(DomeConfig(
            polyhedron="octahedron", frequency=2,
            size_mode="max_length", size_value=2,
        ))
        assert edge_lengths(dome).max() == pytest.approx(2)

    def test_subdivided_struts_differ_in_length(self):
        dome = build_dome(DomeConfig(frequency=2))
        lengths = edge_lengths(dome).round(9)
        assert len(set(lengths.tolist())) == 2


class TestFlat:
    def test_length_target_applies_to_struts(self):
        dome = build_dome(DomeConfig(
            frequency=3, size_mode="min_length", size_value=1, spherify=False,
        ))
        assert edge_lengths(dome) == pytest.approx([1.0] * 270)

    def test_radius_only_reaches_corners(self):
        dome = build_dome(DomeConfig(frequency=2, size_value=3, spherify=False))
        magnitudes = {
            v.key: v.vector3.magnitude for v in dome.to_list()
        }
        for key in "ABCDEFGHIJKL":
            assert magnitudes[key] == pytest.approx(3)
        assert all(m < 3 for k, m in magnitudes.items() if len(k) > 1)

    def test_tetrahedron(self):
        dome = build_dome(DomeConfig(
            polyhedron="tetrahedron", frequency=2, spherify=False,
        ))
        assert len(dome.to_list()) == 10
        assert len(dome.edges) == 24
        # 16 lattice faces plus one 3-cycle around each degree-3 corner.
        assert len(dome.triangles) == 20


class TestLogging:
    def test_logs_build_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="geodome"):
            build_dome(DomeConfig(polyhedron="octahedron", frequency=2))
        assert "Building octahedron at frequency 2" in caplog.text
