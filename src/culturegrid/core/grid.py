"""
Square lattice geometry for the culture grid.

The world is a bounded ``size x size`` lattice (no wraparound) holding
exactly one agent per cell. Cells are addressed either by ``(x, y)``
coordinates or by a flat row-major index ``y * size + x``; the flat index
is also the agent's position in the engine's population list.

Agents never move, so the within-radius neighbourhood of every cell is
computed once when the grid is built and reused by every tick and every
region analysis.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np


class SquareGrid:
    """A bounded square lattice with precomputed radius neighbourhoods.

    Attributes:
        size: Side length of the lattice.
        radius: Interaction radius. Cells at distance ``<= radius`` are
            neighbours.
        metric: ``"euclidean"`` or ``"chebyshev"``.
    """

    def __init__(self, size: int, radius: float, metric: str = "euclidean") -> None:
        """Build the lattice and its neighbourhood table.

        Args:
            size: Side length (number of cells per row).
            radius: Interaction radius.
            metric: Distance metric used to decide who is a neighbour.
        """
        self.size: int = size
        self.radius: float = radius
        self.metric: str = metric
        self._offsets: list[tuple[int, int]] = self._radius_offsets()
        self._neighbors: list[np.ndarray] = [
            self._compute_neighbors(i) for i in range(self.cell_count)
        ]
        self._pairs: list[tuple[int, int]] | None = None

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def __len__(self) -> int:
        return self.cell_count

    # ---- Addressing ----

    def index_of(self, x: int, y: int) -> int:
        """Flat row-major index of cell ``(x, y)``."""
        return y * self.size + x

    def position_of(self, index: int) -> tuple[int, int]:
        """Coordinates ``(x, y)`` of a flat cell index."""
        y, x = divmod(index, self.size)
        return (x, y)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    # ---- Distance ----

    def distance(self, a: tuple[int, int], b: tuple[int, int]) -> float:
        """Distance between two cells under this grid's metric.

        Args:
            a: First position as (x, y).
            b: Second position as (x, y).

        Returns:
            Euclidean or Chebyshev distance.
        """
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if self.metric == "chebyshev":
            return float(max(dx, dy))
        return math.hypot(dx, dy)

    # ---- Neighbor queries ----

    def neighbors(self, index: int) -> np.ndarray:
        """Flat indices of every other cell within ``radius`` of ``index``.

        The returned array is shared; callers must not modify it.
        """
        return self._neighbors[index]

    def neighbor_count(self, index: int) -> int:
        return len(self._neighbors[index])

    def _radius_offsets(self) -> list[tuple[int, int]]:
        """All ``(dx, dy) != (0, 0)`` displacements within the radius."""
        # Offsets beyond size - 1 can never land in bounds.
        reach = min(int(math.floor(self.radius)), self.size - 1)
        offsets: list[tuple[int, int]] = []
        for dy in range(-reach, reach + 1):
            for dx in range(-reach, reach + 1):
                if dx == 0 and dy == 0:
                    continue
                if self.distance((0, 0), (dx, dy)) <= self.radius:
                    offsets.append((dx, dy))
        return offsets

    def _compute_neighbors(self, index: int) -> np.ndarray:
        x, y = self.position_of(index)
        cells = [
            self.index_of(x + dx, y + dy)
            for dx, dy in self._offsets
            if self.in_bounds(x + dx, y + dy)
        ]
        return np.array(sorted(cells), dtype=np.int64)

    # ---- Pair enumeration ----

    def neighbor_pairs(self) -> list[tuple[int, int]]:
        """Every unordered within-radius pair ``(i, j)`` with ``i < j``."""
        if self._pairs is None:
            self._pairs = [
                (i, int(j))
                for i, nbrs in enumerate(self._neighbors)
                for j in nbrs
                if j > i
            ]
        return self._pairs

    # ---- Serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "radius": self.radius,
            "metric": self.metric,
        }
