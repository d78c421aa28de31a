"""
Region analyzer — connected same-culture regions on the grid.

Two agents are linked when they are within the interaction radius of each
other AND share an identical culture. A region is a connected component of
that graph; the largest one is the giant region. Two distant agents with
the same culture belong to different regions unless a chain of nearby
identical agents joins them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from culturegrid.core.agent import Agent
from culturegrid.core.grid import SquareGrid
from culturegrid.core.similarity import overlap


@dataclass
class RegionReport:
    """Result of one region analysis pass."""

    region_count: int
    giant_region_size: int
    region_sizes: list[int] = field(default_factory=list)  # descending
    labels: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.int64))

    def as_tuple(self) -> tuple[int, int]:
        return (self.region_count, self.giant_region_size)


def build_adjacency(population: list[Agent], grid: SquareGrid) -> list[list[int]]:
    """Undirected same-culture adjacency list, rebuilt from current cultures."""
    features = len(population[0].culture) if population else 0
    adjacency: list[list[int]] = [[] for _ in population]
    for i, j in grid.neighbor_pairs():
        if overlap(population[i].culture, population[j].culture) == features:
            adjacency[i].append(j)
            adjacency[j].append(i)
    return adjacency


def find_regions(population: list[Agent], grid: SquareGrid) -> RegionReport:
    """Label every agent with its region and report region statistics.

    Uses an explicit stack so large uniform grids cannot exhaust the
    interpreter's recursion limit.
    """
    adjacency = build_adjacency(population, grid)
    for agent in population:
        agent.explored = False

    labels = np.full(len(population), -1, dtype=np.int64)
    sizes: list[int] = []

    for seed in population:
        if seed.explored:
            continue
        region = len(sizes)
        seed.explored = True
        labels[seed.id] = region
        stack = [seed.id]
        size = 0
        while stack:
            current = stack.pop()
            size += 1
            for nxt in adjacency[current]:
                other = population[nxt]
                if not other.explored:
                    other.explored = True
                    labels[nxt] = region
                    stack.append(nxt)
        sizes.append(size)

    return RegionReport(
        region_count=len(sizes),
        giant_region_size=max(sizes) if sizes else 0,
        region_sizes=sorted(sizes, reverse=True),
        labels=labels,
    )
