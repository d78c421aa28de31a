"""Tick metrics endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from culturegrid.api.schemas import SummaryResponse, TimeSeriesResponse
from culturegrid.api.serializers import to_python, serialize_metrics

router = APIRouter()


def _get(request: Request, session_id: str):
    mgr = request.app.state.session_manager
    try:
        return mgr.get_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")


@router.get("/{session_id}/ticks")
def get_ticks(
    session_id: str,
    request: Request,
    from_tick: int = Query(0, ge=0),
    to_tick: int | None = Query(None),
) -> list[dict[str, Any]]:
    session = _get(request, session_id)
    metrics = session.collector.metrics_history
    end = to_tick if to_tick is not None else len(metrics)
    return [serialize_metrics(m) for m in metrics[from_tick:end]]


@router.get("/{session_id}/time-series/{field_name}", response_model=TimeSeriesResponse)
def get_time_series(session_id: str, field_name: str, request: Request):
    session = _get(request, session_id)
    collector = session.collector
    try:
        values = collector.get_time_series(field_name)
    except AttributeError:
        raise HTTPException(status_code=400, detail=f"Unknown metric field: '{field_name}'")

    return {
        "field": field_name,
        "ticks": [m.tick for m in collector.metrics_history],
        "values": [to_python(v) for v in values],
    }


@router.get("/{session_id}/summary", response_model=SummaryResponse)
def get_summary(session_id: str, request: Request):
    session = _get(request, session_id)
    engine = session.engine
    history = session.collector.metrics_history
    return {
        "ticks_run": engine.tick_count(),
        "is_absorbed": engine.is_absorbed(),
        "initial_distinct_cultures": engine.initial_culture_count,
        "final_distinct_cultures": engine.distinct_culture_count(),
        "total_interactions": sum(m.interactions for m in history),
        "peak_active_count": max((m.active_count for m in history), default=0),
    }
