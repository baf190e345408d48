"""Tests for plain-text vertex and edge reports."""

import pytest

from geodome.edges import decorate_edges, group_edges_by_length
from geodome.errors import InvalidMode
from geodome.formatting import (
    format_full,
    format_summary,
    format_vertices,
    full_digits,
)
from geodome.model import Vector3, Vertex


@pytest.fixture
def scalene():
    a = Vertex("A", Vector3(0, 0, 0))
    b = Vertex("B", Vector3(3, 4, 0))
    c = Vertex("C", Vector3(0, 0, 1))
    c.connect(b).connect(a)
    a.connect(b)
    return c


class TestFullDigits:
    @pytest.mark.parametrize("number, text", [
        (1.0, "1"),
        (0.5, "0.5"),
        (-0.0, "0"),
        (1e-7, "0.0000001"),
        (1e21, "1000000000000000000000"),
        (-2.25, "-2.25"),
    ])
    def test_formats(self, number, text):
        assert full_digits(number) == text

    def test_caps_fraction_digits(self):
        assert full_digits(1e-25) == "0"
        assert full_digits(1.5e-20) == "0.00000000000000000002"


class TestFormatVertices:
    def test_single(self, scalene):
        assert format_vertices(scalene) == "C: (0, 0, 1)"

    def test_key(self, scalene):
        assert format_vertices(scalene, "key") == (
            "A: (0, 0, 0)\n"
            "B: (3, 4, 0)\n"
            "C: (0, 0, 1)"
        )

    def test_keyless_sorted_by_position(self, scalene):
        assert format_vertices(scalene, "keyless") == (
            "(0, 0, 0)\n"
            "(0, 0, 1)\n"
            "(3, 4, 0)"
        )

    def test_desmos(self, scalene):
        assert format_vertices(scalene, "desmos") == "[(0,0,0),(0,0,1),(3,4,0)]"

    def test_unknown_mode(self, scalene):
        with pytest.raises(InvalidMode, match="csv") as excinfo:
            format_vertices(scalene, "csv")
        assert excinfo.value.value == "csv"


class TestEdgeReports:
    def test_summary(self, scalene):
        decorated = decorate_edges(scalene)
        text = format_summary(group_edges_by_length(decorated), len(decorated))
        assert text == (
            "Length of 1: 1\n"
            "Length of 5: 1\n"
            "Length of 5.1: 1\n"
            "TOTAL EDGES: 3"
        )

    def test_full(self, scalene):
        decorated = decorate_edges(scalene)
        text = format_full(group_edges_by_length(decorated), len(decorated))
        assert text == (
            "Edge length: 1\nCount: 1\n\tA | C\n"
            "Edge length: 5\nCount: 1\n\tA | B\n"
            "Edge length: 5.1\nCount: 1\n\tB | C\n"
            "TOTAL EDGES: 3"
        )

    def test_full_lists_every_label(self, icosahedron):
        decorated = decorate_edges(icosahedron)
        text = format_full(group_edges_by_length(decorated), len(decorated))
        assert text.count("\n\t") == 30
        assert text.startswith("Edge length: 2\nCount: 30\n\tA | B\n")

    def test_empty(self):
        assert format_summary([], 0) == "TOTAL EDGES: 0"
        assert format_full([], 0) == "TOTAL EDGES: 0"
