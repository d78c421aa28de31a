"""Tests for same-culture region analysis."""

import numpy as np

from conftest import make_engine, set_cultures
from culturegrid.core.regions import build_adjacency, find_regions


def _checkerboard(size):
    return [[(x + y) % 2] for y in range(size) for x in range(size)]


class TestRegionPartition:
    def test_uniform_grid_is_one_region(self):
        engine = make_engine(world_size=5, traits=1)
        assert engine.compute_regions() == (1, 25)
        assert engine.region_report.region_sizes == [25]

    def test_checkerboard_von_neumann_isolates_every_cell(self):
        engine = make_engine(world_size=4, features=1, traits=2)
        set_cultures(engine, _checkerboard(4))
        assert engine.compute_regions() == (16, 1)

    def test_checkerboard_moore_joins_diagonals(self):
        engine = make_engine(world_size=4, features=1, traits=2, neighborhood="chebyshev")
        set_cultures(engine, _checkerboard(4))
        assert engine.compute_regions() == (2, 8)

    def test_distant_identical_cultures_are_separate_regions(self):
        engine = make_engine(world_size=3, features=2, traits=9)
        cultures = [[i, i] for i in range(9)]
        cultures[8] = [0, 0]  # same culture as cell 0, opposite corner
        set_cultures(engine, cultures)
        region_count, giant = engine.compute_regions()
        assert region_count == 9
        assert giant == 1
        labels = engine.region_report.labels
        assert labels[0] != labels[8]

    def test_chain_of_neighbors_connects_region(self):
        engine = make_engine(world_size=3, features=2, traits=9)
        cultures = [[i, i] for i in range(9)]
        for idx in (0, 1, 2, 5, 8):  # top row then down the right column
            cultures[idx] = [8, 8]
        set_cultures(engine, cultures)
        region_count, giant = engine.compute_regions()
        assert giant == 5
        assert region_count == 5

    def test_two_stripes(self):
        engine = make_engine(world_size=4, features=2, traits=2)
        set_cultures(engine, [[0, 0] if y < 2 else [1, 1] for y in range(4) for x in range(4)])
        assert engine.compute_regions() == (2, 8)
        assert engine.region_report.region_sizes == [8, 8]


class TestRegionGuarantees:
    def test_sizes_sum_to_population(self):
        engine = make_engine(world_size=7, features=3, traits=3)
        for _ in range(15):
            engine.run_tick()
        region_count, giant = engine.compute_regions()
        report = engine.region_report
        assert region_count >= 1
        assert giant <= 49
        assert sum(report.region_sizes) == 49
        assert len(report.region_sizes) == region_count
        assert giant == report.region_sizes[0]

    def test_labels_cover_every_agent(self):
        engine = make_engine(world_size=6, features=2, traits=3)
        engine.run(max_ticks=10)
        engine.compute_regions()
        labels = engine.region_report.labels
        assert labels.min() == 0
        assert labels.max() == engine.region_report.region_count - 1
        assert sorted(np.bincount(labels).tolist(), reverse=True) == engine.region_report.region_sizes

    def test_region_members_share_culture(self):
        engine = make_engine(world_size=6, features=2, traits=2)
        engine.run()
        engine.compute_regions()
        labels = engine.region_report.labels
        for region in range(engine.region_report.region_count):
            members = [a for a in engine.population if labels[a.id] == region]
            first = members[0].culture
            assert all(np.array_equal(first, m.culture) for m in members)

    def test_idempotent(self):
        engine = make_engine(world_size=6, features=3, traits=3)
        for _ in range(5):
            engine.run_tick()
        first = engine.compute_regions()
        first_labels = engine.region_report.labels.copy()
        assert engine.compute_regions() == first
        np.testing.assert_array_equal(engine.region_report.labels, first_labels)

    def test_explored_flags_set_after_pass(self):
        engine = make_engine(world_size=4)
        engine.compute_regions()
        assert all(a.explored for a in engine.population)

    def test_large_uniform_grid_has_no_recursion_limit(self):
        engine = make_engine(world_size=60, features=2, traits=1)
        assert engine.compute_regions() == (1, 3600)

    def test_analysis_does_not_change_cultures(self):
        engine = make_engine(world_size=5)
        before = [a.culture.copy() for a in engine.population]
        engine.compute_regions()
        for b, a in zip(before, engine.population):
            np.testing.assert_array_equal(b, a.culture)


class TestAdjacency:
    def test_edges_only_for_identical_neighbors(self):
        engine = make_engine(world_size=2, features=2, traits=3)
        set_cultures(engine, [[0, 0], [0, 0], [0, 1], [2, 2]])
        adjacency = build_adjacency(engine.population, engine.grid)
        assert adjacency[0] == [1]
        assert adjacency[1] == [0]
        assert adjacency[2] == []
        assert adjacency[3] == []

    def test_find_regions_on_explicit_population(self):
        engine = make_engine(world_size=2, features=1, traits=2)
        set_cultures(engine, [[0], [0], [1], [1]])
        report = find_regions(engine.population, engine.grid)
        assert report.as_tuple() == (2, 2)
