"""
Serializers for converting simulation objects to JSON-safe dicts.

Handles numpy arrays and scalar types.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import numpy as np

from culturegrid.api.sessions import SimulationSession
from culturegrid.core.population import culture_labels
from culturegrid.metrics.collector import TickMetrics


def to_python(v: Any) -> Any:
    """Convert numpy scalars/arrays to plain Python values."""
    if isinstance(v, np.ndarray):
        return v.tolist()
    if isinstance(v, (np.integer, np.floating)):
        return v.item()
    return v


def serialize_session(session: SimulationSession) -> dict[str, Any]:
    engine = session.engine
    return {
        "id": session.id,
        "name": session.name,
        "status": session.status,
        "current_tick": session.current_tick,
        "max_ticks": session.config.max_ticks,
        "population_size": len(engine.population),
        "active_count": engine.active_count(),
        "distinct_culture_count": engine.distinct_culture_count(),
        "is_absorbed": engine.is_absorbed(),
        "config": session.config.to_dict(),
    }


def serialize_metrics(m: TickMetrics) -> dict[str, Any]:
    d = asdict(m)
    for key in ("active_fraction", "largest_culture_fraction", "mean_neighbor_similarity"):
        d[key] = round(float(d[key]), 4)
    return {k: to_python(v) for k, v in d.items()}


def serialize_regions(session: SimulationSession) -> dict[str, Any]:
    report = session.engine.region_report
    return {
        "tick": session.current_tick,
        "region_count": report.region_count,
        "giant_region_size": report.giant_region_size,
        "region_sizes": [int(s) for s in report.region_sizes],
    }


def serialize_grid(session: SimulationSession) -> dict[str, Any]:
    """Cell-by-cell culture data for an external renderer."""
    engine = session.engine
    size = session.config.world_size
    labels = culture_labels(engine.population).reshape(size, size)
    report = engine.region_report
    return {
        "tick": session.current_tick,
        "world_size": size,
        "features": session.config.features,
        "geometry": engine.grid.to_dict(),
        "cultures": [to_python(a.culture) for a in engine.population],
        "culture_labels": labels.tolist(),
        "region_labels": (
            report.labels.reshape(size, size).tolist() if report is not None else None
        ),
    }
