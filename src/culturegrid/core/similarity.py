"""
Similarity engine: overlap between two culture vectors.

Overlap is the number of features on which two agents hold the same
trait. It drives both the interaction probability and the same-culture
adjacency used by region analysis.
"""

from __future__ import annotations

import numpy as np


def overlap(a: np.ndarray, b: np.ndarray) -> int:
    """Count the feature positions where ``a`` and ``b`` hold equal traits.

    Both vectors must have the same length F. The result is in [0, F].
    """
    if len(a) != len(b):
        raise ValueError(
            f"Culture vectors differ in length ({len(a)} vs {len(b)})"
        )
    return int(np.count_nonzero(np.asarray(a) == np.asarray(b)))


def similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Overlap as a fraction of F, i.e. the interaction probability."""
    return overlap(a, b) / len(a)


def is_partial(ov: int, features: int) -> bool:
    """True when the overlap allows interaction (strictly between 0 and F)."""
    return 0 < ov < features
