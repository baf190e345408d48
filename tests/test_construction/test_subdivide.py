"""Tests for frequency subdivision of triangular faces."""

from collections import Counter

import pytest

from geodome.construction.polyhedra import make_icosahedron, make_octahedron, make_tetrahedron
from geodome.construction.spherify import spherify
from geodome.construction.subdivide import subdivide
from geodome.errors import InvalidFrequency
from geodome.model import Vector3, Vertex


def _adjacency(vertex: Vertex) -> dict[str, set[str]]:
    return {v.key: {n.key for n in v.connections} for v in vertex.to_list()}


def _keyed(vertex: Vertex) -> dict[str, Vertex]:
    return {v.key: v for v in vertex.to_list()}


def _expected_vertices(v: int, e: int, f: int, frequency: int) -> int:
    return v + e * (frequency - 1) + f * (frequency - 1) * (frequency - 2) // 2


BASES = [
    # factory, V, E, F
    (make_icosahedron, 12, 30, 20),
    (make_octahedron, 6, 12, 8),
    (make_tetrahedron, 4, 6, 4),
]

# Bases whose subdivided corners keep degree 4 or more, so every 3-cycle
# of the result is a lattice face.
FACE_BASES = [base for base in BASES if base[0] is not make_tetrahedron]


class TestFrequencyOne:
    def test_isomorphic_copy(self, icosahedron):
        result = subdivide(icosahedron, 1)
        assert _adjacency(result) == _adjacency(icosahedron)

    def test_distinct_objects(self, icosahedron):
        result = subdivide(icosahedron, 1)
        assert set(result.to_list()).isdisjoint(icosahedron.to_list())

    def test_positions_unchanged(self, icosahedron):
        original = _keyed(icosahedron)
        for key, v in _keyed(subdivide(icosahedron, 1)).items():
            assert v.vector3 == original[key].vector3


class TestCounts:
    def test_icosahedron_frequency_two(self, icosahedron):
        result = subdivide(icosahedron, 2)
        keys = {v.key for v in result.to_list()}
        assert len(keys) == 42
        assert set("ABCDEFGHIJKL") <= keys

    @pytest.mark.parametrize("factory, v, e, f", BASES)
    @pytest.mark.parametrize("frequency", [2, 3, 4, 5])
    def test_vertex_and_edge_counts(self, factory, v, e, f, frequency):
        result = subdivide(factory(), frequency)
        assert len(result.to_list()) == _expected_vertices(v, e, f, frequency)
        assert len(result.edges) == e * frequency ** 2

    @pytest.mark.parametrize("factory, v, e, f", FACE_BASES)
    @pytest.mark.parametrize("frequency", [2, 3, 4, 5])
    def test_face_counts(self, factory, v, e, f, frequency):
        assert len(subdivide(factory(), frequency).triangles) == f * frequency ** 2

    def test_degree_three_corners_add_three_cycles(self, tetrahedron):
        # Each corner keeps three neighbours that are pairwise connected,
        # closing one 3-cycle per corner on top of the 16 lattice faces.
        result = subdivide(tetrahedron, 2)
        assert len(result.triangles) == 16 + 4

    def test_euler_characteristic(self, icosahedron):
        result = subdivide(icosahedron, 4)
        v = len(result.to_list())
        e = len(result.edges)
        f = len(result.triangles)
        assert v - e + f == 2

    @pytest.mark.parametrize("frequency", [2, 3, 4])
    def test_degrees(self, icosahedron, frequency):
        degrees = Counter(
            len(v.connections) for v in subdivide(icosahedron, frequency).to_list()
        )
        assert degrees[5] == 12
        assert set(degrees) == {5, 6}


class TestSharedEdges:
    @pytest.mark.parametrize("frequency", [2, 3, 5])
    def test_one_chain_per_original_edge(self, icosahedron, frequency):
        keys = [v.key for v in subdivide(icosahedron, frequency).to_list()]
        chains = Counter(k.rsplit(" ", 1)[0] for k in keys if k.startswith("edge "))
        assert len(chains) == 30
        assert set(chains.values()) == {frequency - 1}

    @pytest.mark.parametrize("frequency", [2, 3, 4])
    def test_no_coincident_vertices(self, icosahedron, frequency):
        positions = [
            tuple(round(c, 9) for c in v.vector3)
            for v in subdivide(icosahedron, frequency).to_list()
        ]
        assert len(set(positions)) == len(positions)

    def test_keys_unique(self, octahedron):
        keys = [v.key for v in subdivide(octahedron, 4).to_list()]
        assert len(set(keys)) == len(keys)

    def test_edge_chain_keys_are_ordered(self, icosahedron):
        for v in subdivide(icosahedron, 3).to_list():
            if v.key.startswith("edge "):
                first, second = v.key.split(" ")[1].split("-")
                assert first < second


class TestLattice:
    def test_edge_midpoints(self, icosahedron):
        original = _keyed(icosahedron)
        result = _keyed(subdivide(icosahedron, 2))
        for key, v in result.items():
            if not key.startswith("edge "):
                continue
            p, q = key.split(" ")[1].split("-")
            midpoint = original[p].vector3.plus(original[q].vector3).divided_by(2)
            assert v.vector3.is_equal_to(midpoint, 1e-12)

    def test_edge_offsets_measured_from_first_key(self, octahedron):
        original = _keyed(octahedron)
        result = _keyed(subdivide(octahedron, 4))
        v = result["edge A-C 1"]
        expected = original["A"].vector3.times(0.75).plus(original["C"].vector3.times(0.25))
        assert v.vector3.is_equal_to(expected, 1e-12)

    def test_interior_vertices(self, icosahedron):
        keys = [v.key for v in subdivide(icosahedron, 3).to_list()]
        interior = [k for k in keys if k.startswith("internal ")]
        assert len(interior) == 20
        assert all(k.endswith(" 2,1") for k in interior)

    def test_interior_vertex_at_face_centroid(self, tetrahedron):
        result = subdivide(tetrahedron, 3)
        original = _keyed(tetrahedron)
        for v in result.to_list():
            if not v.key.startswith("internal "):
                continue
            corner_keys = v.key.split(" ")[1].split("-")
            centroid = Vector3(0, 0, 0)
            for k in corner_keys:
                centroid = centroid.plus(original[k].vector3)
            assert v.vector3.is_equal_to(centroid.divided_by(3), 1e-12)

    def test_original_corners_not_adjacent(self, icosahedron):
        result = subdivide(icosahedron, 2)
        originals = [v for v in result.to_list() if len(v.key) == 1]
        for a in originals:
            assert not any(n in originals for n in a.connections)

    def test_edges_split_evenly(self, icosahedron):
        result = subdivide(icosahedron, 4)
        lengths = {
            round(a.vector3.distance_to(b.vector3), 9) for a, b in result.edges
        }
        assert lengths == {0.5}

    def test_non_face_edges_untouched(self):
        a = Vertex("a", Vector3(1, 0, 0))
        b = Vertex("b", Vector3(0, 1, 0))
        a.connect(b)
        result = subdivide(a, 3)
        assert _adjacency(result) == {"a": {"b"}, "b": {"a"}}

    def test_vertex_method(self, icosahedron):
        assert len(icosahedron.subdivide(2).to_list()) == 42


class TestPurity:
    def test_input_untouched(self, icosahedron):
        before = _adjacency(icosahedron)
        subdivide(icosahedron, 3)
        assert _adjacency(icosahedron) == before
        assert len(icosahedron.edges) == 30

    def test_output_disjoint(self, icosahedron):
        result = subdivide(icosahedron, 2)
        assert set(result.to_list()).isdisjoint(icosahedron.to_list())

    @pytest.mark.parametrize("frequency", [0, -3, 1.5, 2.0, "2", True])
    def test_invalid_frequency(self, icosahedron, frequency):
        before = _adjacency(icosahedron)
        with pytest.raises(InvalidFrequency):
            subdivide(icosahedron, frequency)
        assert _adjacency(icosahedron) == before


class TestOrderMatters:
    def test_subdivide_then_spherify_differs(self, icosahedron):
        sphere_last = _keyed(spherify(subdivide(icosahedron, 2), "radius", 1))
        sphere_first = _keyed(subdivide(spherify(icosahedron, "radius", 1), 2))
        assert sphere_last.keys() == sphere_first.keys()

        midpoint_key = next(k for k in sphere_last if k.startswith("edge "))
        on_sphere = sphere_last[midpoint_key].vector3
        flat = sphere_first[midpoint_key].vector3
        assert on_sphere.magnitude == pytest.approx(1)
        assert flat.magnitude < 1 - 1e-3
        assert not on_sphere.is_equal_to(flat, 1e-6)

    def test_original_corners_agree(self, icosahedron):
        sphere_last = _keyed(spherify(subdivide(icosahedron, 2), "radius", 1))
        sphere_first = _keyed(subdivide(spherify(icosahedron, "radius", 1), 2))
        for key in "ABCDEFGHIJKL":
            assert sphere_last[key].vector3.is_equal_to(sphere_first[key].vector3, 1e-12)


class TestRepeatedSubdivision:
    def test_every_three_cycle_gets_a_lattice(self, tetrahedron):
        # The 4 corner 3-cycles of a 2V tetrahedron are not faces, but a
        # second pass subdivides them too: 20 lattices instead of 16.
        result = subdivide(subdivide(tetrahedron, 2), 2)
        assert len(result.to_list()) == 10 + 24
        assert len(result.edges) == 24 * 2 + 20 * 3
        assert len(result.edges) > 24 * 2 + 16 * 3

    def test_icosahedron_passes_compose(self, icosahedron):
        twice = subdivide(subdivide(icosahedron, 2), 2)
        once = subdivide(icosahedron, 4)
        assert len(twice.to_list()) == len(once.to_list())
        assert len(twice.edges) == len(once.edges)
