"""Tests for MetricsCollector."""

import pytest

from conftest import make_engine
from culturegrid.metrics.collector import MetricsCollector, TickMetrics


def _collect(engine, ticks):
    collector = MetricsCollector(engine.config)
    for _ in range(ticks):
        engine.run_tick()
        collector.collect(engine, engine.history[-1])
    return collector


class TestCollect:
    def test_one_entry_per_tick(self, small_engine):
        collector = _collect(small_engine, 4)
        assert len(collector.metrics_history) == 4
        assert all(isinstance(m, TickMetrics) for m in collector.metrics_history)
        assert [m.tick for m in collector.metrics_history] == [1, 2, 3, 4]

    def test_copies_snapshot_fields(self, small_engine):
        collector = _collect(small_engine, 1)
        m = collector.metrics_history[0]
        snap = small_engine.history[0]
        assert m.active_count == snap.active_count
        assert m.distinct_culture_count == snap.distinct_culture_count
        assert m.interactions == snap.interactions
        assert m.population_size == 25

    def test_fractions_in_range(self):
        engine = make_engine(world_size=6, features=4, traits=3)
        collector = _collect(engine, 10)
        for m in collector.metrics_history:
            assert 0.0 <= m.active_fraction <= 1.0
            assert 0.0 < m.largest_culture_fraction <= 1.0
            assert 0.0 <= m.mean_neighbor_similarity <= 1.0
            assert m.largest_culture_size >= 1

    def test_uniform_population(self):
        engine = make_engine(world_size=4, traits=1)
        m = _collect(engine, 1).metrics_history[0]
        assert m.largest_culture_size == 16
        assert m.largest_culture_fraction == 1.0
        assert m.mean_neighbor_similarity == 1.0
        assert m.active_fraction == 0.0


class TestTimeSeries:
    def test_time_series(self, small_engine):
        collector = _collect(small_engine, 3)
        series = collector.get_time_series("distinct_culture_count")
        assert series == [s.distinct_culture_count for s in small_engine.history]

    def test_unknown_field(self, small_engine):
        collector = _collect(small_engine, 1)
        with pytest.raises(AttributeError):
            collector.get_time_series("nonexistent")

    def test_reset(self, small_engine):
        collector = _collect(small_engine, 2)
        collector.reset()
        assert collector.metrics_history == []
