"""
Metrics Collector — enhanced per-tick statistics.

Extends TickSnapshot with dominance and local-similarity measures and
provides time series extraction for plotting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from culturegrid.core.config import ExperimentConfig
from culturegrid.core.engine import SimulationEngine, TickSnapshot
from culturegrid.core.population import largest_culture_size
from culturegrid.core.similarity import overlap


@dataclass
class TickMetrics:
    """Extended metrics for a single tick."""

    # Base snapshot data
    tick: int
    active_count: int
    distinct_culture_count: int
    interactions: int

    # Derived
    population_size: int
    active_fraction: float
    largest_culture_size: int
    largest_culture_fraction: float
    mean_neighbor_similarity: float  # mean overlap/F over within-radius pairs


class MetricsCollector:
    """
    Collects and aggregates metrics across ticks.

    Works alongside the simulation engine to provide richer analytics
    than the base TickSnapshot.
    """

    def __init__(self, config: ExperimentConfig):
        self.config = config
        self.metrics_history: list[TickMetrics] = []

    def collect(self, engine: SimulationEngine, snapshot: TickSnapshot) -> TickMetrics:
        """Collect enhanced metrics for the engine's current state."""
        pop = engine.population
        total = max(len(pop), 1)
        largest = largest_culture_size(pop)

        metrics = TickMetrics(
            tick=snapshot.tick,
            active_count=snapshot.active_count,
            distinct_culture_count=snapshot.distinct_culture_count,
            interactions=snapshot.interactions,
            population_size=len(pop),
            active_fraction=snapshot.active_count / total,
            largest_culture_size=largest,
            largest_culture_fraction=largest / total,
            mean_neighbor_similarity=self._mean_neighbor_similarity(engine),
        )
        self.metrics_history.append(metrics)
        return metrics

    def _mean_neighbor_similarity(self, engine: SimulationEngine) -> float:
        if engine.grid is None:
            return 0.0
        pairs = engine.grid.neighbor_pairs()
        if not pairs:
            return 1.0
        pop = engine.population
        features = self.config.features
        return float(np.mean([
            overlap(pop[i].culture, pop[j].culture) / features for i, j in pairs
        ]))

    # ------------------------------------------------------------------
    # Time series
    # ------------------------------------------------------------------
    def get_time_series(self, field_name: str) -> list[Any]:
        """Values of one TickMetrics field across all collected ticks.

        Raises AttributeError for unknown fields.
        """
        if field_name not in TickMetrics.__dataclass_fields__:
            raise AttributeError(f"TickMetrics has no field {field_name!r}")
        return [getattr(m, field_name) for m in self.metrics_history]

    def reset(self) -> None:
        self.metrics_history = []
