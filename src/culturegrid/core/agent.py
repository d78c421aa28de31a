"""
Core agent dataclass for the culture grid.

Each agent sits on one grid cell for its whole life and carries an
F-length integer culture vector that interactions mutate in place.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Agent:
    """A grid cell's resident and its culture vector."""

    # === Identity ===
    id: int
    position: tuple[int, int]

    # === Culture (length F, each value in [0, q-1]) ===
    culture: np.ndarray

    # === Derived per-sweep state ===
    active: bool = False

    # === Region analysis scratch flag ===
    explored: bool = False

    def __repr__(self) -> str:
        culture = ",".join(str(int(v)) for v in self.culture)
        return (
            f"Agent(id={self.id}, position={self.position}, "
            f"culture=[{culture}], active={self.active})"
        )
