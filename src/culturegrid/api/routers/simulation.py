"""Simulation session management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from culturegrid.api.schemas import (
    CreateSessionRequest,
    GridResponse,
    RegionResponse,
    RunRequest,
    SessionResponse,
    SessionSummary,
    StepRequest,
)
from culturegrid.api.serializers import serialize_grid, serialize_regions, serialize_session
from culturegrid.core.config import ExperimentConfig
from culturegrid.core.errors import EmptyGridError, InvalidParameter
from culturegrid.experiment.presets import get_preset

router = APIRouter()


def _get(request: Request, session_id: str):
    mgr = request.app.state.session_manager
    try:
        return mgr.get_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")


@router.post("/sessions", response_model=SessionResponse)
def create_session(req: CreateSessionRequest, request: Request):
    mgr = request.app.state.session_manager

    config = None
    try:
        if req.preset:
            config = get_preset(req.preset)
        elif req.config:
            config = ExperimentConfig.from_dict(req.config)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0]))
    except TypeError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid config: {exc}")

    try:
        session = mgr.create_session(config=config, name=req.name)
    except InvalidParameter as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return serialize_session(session)


@router.get("/sessions", response_model=list[SessionSummary])
def list_sessions(request: Request):
    mgr = request.app.state.session_manager
    return mgr.list_sessions()


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, request: Request):
    return serialize_session(_get(request, session_id))


@router.delete("/sessions/{session_id}")
def delete_session(session_id: str, request: Request):
    mgr = request.app.state.session_manager
    try:
        mgr.delete_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return {"deleted": True}


@router.post("/sessions/{session_id}/step", response_model=SessionResponse)
def step_session(session_id: str, req: StepRequest, request: Request):
    mgr = request.app.state.session_manager
    _get(request, session_id)
    try:
        session = mgr.step(session_id, req.n)
    except EmptyGridError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return serialize_session(session)


@router.post("/sessions/{session_id}/run", response_model=SessionResponse)
def run_session(session_id: str, req: RunRequest, request: Request):
    mgr = request.app.state.session_manager
    _get(request, session_id)
    try:
        session = mgr.run_until_absorbed(session_id, req.max_ticks)
    except EmptyGridError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return serialize_session(session)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
def reset_session(session_id: str, request: Request):
    mgr = request.app.state.session_manager
    _get(request, session_id)
    return serialize_session(mgr.reset_session(session_id))


@router.post("/sessions/{session_id}/regions", response_model=RegionResponse)
def compute_regions(session_id: str, request: Request):
    mgr = request.app.state.session_manager
    _get(request, session_id)
    try:
        session = mgr.compute_regions(session_id)
    except EmptyGridError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return serialize_regions(session)


@router.get("/sessions/{session_id}/grid", response_model=GridResponse)
def get_grid(session_id: str, request: Request):
    return serialize_grid(_get(request, session_id))
