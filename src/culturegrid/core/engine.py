"""
Main simulation engine.

Runs Axelrod's culture model on a fixed square grid: each tick is one
asynchronous sweep over the population in a fresh random order, and
region analysis can be requested at any point between ticks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from culturegrid.core.agent import Agent
from culturegrid.core.config import ExperimentConfig
from culturegrid.core.errors import EmptyGridError
from culturegrid.core.grid import SquareGrid
from culturegrid.core.interaction import interact
from culturegrid.core.population import PopulationTracker
from culturegrid.core.regions import RegionReport, find_regions
from culturegrid.core.similarity import is_partial, overlap

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tick metrics (lightweight snapshot)
# ---------------------------------------------------------------------------
@dataclass
class TickSnapshot:
    """Per-tick aggregates recorded after each sweep."""
    tick: int
    active_count: int
    distinct_culture_count: int
    interactions: int  # successful trait copies during the sweep


# ---------------------------------------------------------------------------
# Simulation Engine
# ---------------------------------------------------------------------------
class SimulationEngine:
    """
    Owns the grid, the population and every aggregate of one simulation.

    Per tick (``run_tick``):
    1. Reset the active count
    2. Shuffle the population
    3. Visit each agent in that order, mutating cultures in place
    4. Recompute the distinct-culture count and record a snapshot
    """

    def __init__(self, config: ExperimentConfig):
        self.config = config
        self.rng = np.random.default_rng(config.random_seed)

        # State
        self.grid: SquareGrid | None = None
        self.population: list[Agent] = []
        self.tracker = PopulationTracker()
        self.history: list[TickSnapshot] = []
        self.initial_culture_count = 0
        self.region_report: RegionReport | None = None
        self._tick = 0

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def setup(self, config: ExperimentConfig | None = None) -> None:
        """(Re)initialise grid, population and aggregates.

        Raises ``InvalidParameter`` if the configuration is out of range;
        in that case the engine keeps its previous state.
        """
        config = config or self.config
        config.validate()

        self.config = config
        self.rng = np.random.default_rng(config.random_seed)
        self.grid = SquareGrid(config.world_size, config.radius, config.neighborhood)
        self.population = self._create_population()
        self.tracker.reset()
        self.tracker.end_sweep(self.population)
        self.initial_culture_count = self.tracker.distinct_culture_count
        self.history = []
        self.region_report = None
        self._tick = 0

        logger.debug(
            "Set up %dx%d grid (F=%d, q=%d, radius=%s, %s) with %d cultures",
            config.world_size, config.world_size, config.features,
            config.traits, config.radius, config.neighborhood,
            self.tracker.distinct_culture_count,
        )

    def _create_population(self) -> list[Agent]:
        """One agent per cell with independent uniform random cultures."""
        cfg = self.config
        cultures = self.rng.integers(
            0, cfg.traits, size=(cfg.population_size, cfg.features),
        )
        return [
            Agent(id=i, position=self.grid.position_of(i), culture=cultures[i].copy())
            for i in range(cfg.population_size)
        ]

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------
    def run_tick(self) -> int:
        """Perform one randomly ordered sweep and return the active count."""
        self._require_population()
        features = self.config.features
        pop = self.population

        self.tracker.begin_sweep(pop)
        interactions = 0

        for idx in self.rng.permutation(len(pop)):
            target = pop[idx]
            neighbors = self.grid.neighbors(int(idx))
            if len(neighbors) == 0:
                continue

            if not any(
                is_partial(overlap(target.culture, pop[j].culture), features)
                for j in neighbors
            ):
                continue

            self.tracker.mark_active(target)
            # Selection is uniform over ALL within-radius agents, not only the
            # partial-overlap ones counted above.
            chosen = pop[int(neighbors[self.rng.integers(len(neighbors))])]
            if interact(target, chosen, self.rng):
                interactions += 1

        self.tracker.end_sweep(pop)
        self._tick += 1

        self.history.append(TickSnapshot(
            tick=self._tick,
            active_count=self.tracker.active_count,
            distinct_culture_count=self.tracker.distinct_culture_count,
            interactions=interactions,
        ))
        if self.tracker.active_count == 0:
            logger.debug(
                "Absorbed at tick %d with %d cultures",
                self._tick, self.tracker.distinct_culture_count,
            )
        return self.tracker.active_count

    def run(self, max_ticks: int | None = None) -> list[TickSnapshot]:
        """Tick until absorbed or ``max_ticks`` sweeps have run.

        Sets up the engine first if it has no population yet.
        Returns the snapshots recorded by this call.
        """
        if not self.population:
            self.setup()
        limit = self.config.max_ticks if max_ticks is None else max_ticks
        start = len(self.history)

        for _ in range(limit):
            if self.run_tick() == 0:
                break

        return self.history[start:]

    def is_absorbed(self) -> bool:
        """True once a completed sweep found no active agent."""
        return self._tick > 0 and self.tracker.active_count == 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def tick_count(self) -> int:
        return self._tick

    def active_count(self) -> int:
        return self.tracker.active_count

    def distinct_culture_count(self) -> int:
        return self.tracker.distinct_culture_count

    # ------------------------------------------------------------------
    # Region analysis
    # ------------------------------------------------------------------
    def compute_regions(self) -> tuple[int, int]:
        """Partition the grid into same-culture regions.

        Returns ``(region_count, giant_region_size)``; the full report is
        kept on ``region_report`` until the next call.
        """
        self._require_population()
        self.region_report = find_regions(self.population, self.grid)
        return self.region_report.as_tuple()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_population(self) -> None:
        if not self.population or self.grid is None:
            raise EmptyGridError("Simulation has no agents; call setup() first")


def setup(
    world_size: int,
    features: int,
    traits: int,
    radius: float = 1.0,
    seed: int | None = None,
    **overrides,
) -> SimulationEngine:
    """Build a config from the classic model parameters and set up an engine."""
    config = ExperimentConfig(
        world_size=world_size,
        features=features,
        traits=traits,
        radius=radius,
        random_seed=seed,
        **overrides,
    )
    engine = SimulationEngine(config)
    engine.setup()
    return engine
