"""
Population tracker — per-sweep aggregates over the whole population.

Culture counts are always recomputed from scratch so they stay correct
however many in-place mutations the last sweep made.
"""

from __future__ import annotations

import numpy as np

from culturegrid.core.agent import Agent


def culture_matrix(population: list[Agent]) -> np.ndarray:
    """Stack every agent's culture into an (n_agents, F) array."""
    return np.array([a.culture for a in population])


def distinct_culture_count(population: list[Agent]) -> int:
    """Number of unique culture vectors in the population."""
    if not population:
        return 0
    return int(len(np.unique(culture_matrix(population), axis=0)))


def culture_labels(population: list[Agent]) -> np.ndarray:
    """Dense integer label per agent; equal labels iff equal cultures."""
    if not population:
        return np.zeros(0, dtype=np.int64)
    _, inverse = np.unique(culture_matrix(population), axis=0, return_inverse=True)
    return inverse.reshape(-1).astype(np.int64)


def largest_culture_size(population: list[Agent]) -> int:
    """Number of agents sharing the most common culture."""
    if not population:
        return 0
    _, counts = np.unique(culture_matrix(population), axis=0, return_counts=True)
    return int(counts.max())


class PopulationTracker:
    """Holds the aggregates the scheduler updates during a sweep."""

    def __init__(self) -> None:
        self.active_count: int = 0
        self.distinct_culture_count: int = 0

    def reset(self) -> None:
        self.active_count = 0
        self.distinct_culture_count = 0

    def begin_sweep(self, population: list[Agent]) -> None:
        self.active_count = 0
        for agent in population:
            agent.active = False

    def mark_active(self, agent: Agent) -> None:
        agent.active = True
        self.active_count += 1

    def end_sweep(self, population: list[Agent]) -> None:
        self.distinct_culture_count = distinct_culture_count(population)
