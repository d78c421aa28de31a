"""Tests for the square lattice geometry."""

import pytest

from culturegrid.core.grid import SquareGrid


class TestAddressing:
    def test_index_position_roundtrip(self):
        g = SquareGrid(4, 1.0)
        for i in range(16):
            x, y = g.position_of(i)
            assert g.index_of(x, y) == i

    def test_row_major(self):
        g = SquareGrid(3, 1.0)
        assert g.position_of(5) == (2, 1)
        assert g.index_of(0, 2) == 6

    def test_len(self):
        assert len(SquareGrid(6, 1.0)) == 36


class TestNeighborhoods:
    def test_von_neumann_at_radius_one(self):
        g = SquareGrid(5, 1.0)
        center = g.index_of(2, 2)
        assert sorted(g.neighbors(center).tolist()) == sorted([
            g.index_of(1, 2), g.index_of(3, 2), g.index_of(2, 1), g.index_of(2, 3),
        ])

    def test_bounded_corners_and_edges(self):
        g = SquareGrid(5, 1.0)
        assert g.neighbor_count(g.index_of(0, 0)) == 2
        assert g.neighbor_count(g.index_of(2, 0)) == 3

    def test_no_wraparound(self):
        g = SquareGrid(5, 1.0)
        assert g.index_of(4, 0) not in g.neighbors(g.index_of(0, 0)).tolist()

    def test_chebyshev_radius_one_is_moore(self):
        g = SquareGrid(5, 1.0, metric="chebyshev")
        assert g.neighbor_count(g.index_of(2, 2)) == 8
        assert g.neighbor_count(g.index_of(0, 0)) == 3

    @pytest.mark.parametrize("radius,expected", [(1.5, 8), (2.0, 12), (2.9, 24)])
    def test_euclidean_radius_growth(self, radius, expected):
        g = SquareGrid(7, radius)
        assert g.neighbor_count(g.index_of(3, 3)) == expected

    def test_excludes_self(self):
        g = SquareGrid(4, 3.0)
        for i in range(16):
            assert i not in g.neighbors(i).tolist()

    def test_single_cell_has_no_neighbors(self):
        g = SquareGrid(1, 5.0)
        assert g.neighbor_count(0) == 0

    def test_neighborhood_is_symmetric(self):
        g = SquareGrid(6, 2.3)
        for i in range(len(g)):
            for j in g.neighbors(i):
                assert i in g.neighbors(int(j)).tolist()

    def test_huge_radius_covers_grid(self):
        g = SquareGrid(3, 1e9)
        assert all(g.neighbor_count(i) == 8 for i in range(9))
        assert len(g._offsets) == 24


class TestDistanceAndPairs:
    def test_distance_metrics(self):
        assert SquareGrid(3, 1.0).distance((0, 0), (1, 1)) == pytest.approx(2 ** 0.5)
        assert SquareGrid(3, 1.0, metric="chebyshev").distance((0, 0), (1, 1)) == 1.0

    def test_neighbor_pairs_unique(self):
        g = SquareGrid(3, 1.0)
        pairs = g.neighbor_pairs()
        assert len(pairs) == 12
        assert all(i < j for i, j in pairs)
        assert len(set(pairs)) == len(pairs)

    def test_to_dict(self):
        g = SquareGrid(4, 2.0, metric="chebyshev")
        assert g.to_dict() == {"size": 4, "radius": 2.0, "metric": "chebyshev"}
