"""
Axelrod interaction rule.

The target copies one trait from the neighbour with probability equal to
their similarity. Interaction is directional: only the target changes.
"""

from __future__ import annotations

import numpy as np

from culturegrid.core.agent import Agent
from culturegrid.core.similarity import is_partial, overlap


def interact(target: Agent, neighbor: Agent, rng: np.random.Generator) -> bool:
    """Run one interaction of ``target`` with ``neighbor``.

    Returns True if the target copied a trait.
    """
    features = len(target.culture)
    ov = overlap(target.culture, neighbor.culture)
    if not is_partial(ov, features):
        return False

    if rng.random() >= ov / features:
        return False

    # A differing feature exists because ov < F; scan cyclically from a random start.
    i = int(rng.integers(features))
    while target.culture[i] == neighbor.culture[i]:
        i = (i + 1) % features
    target.culture[i] = neighbor.culture[i]
    return True
