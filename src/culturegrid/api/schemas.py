"""
Pydantic models for API request/response validation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Any


# === Simulation ===

class CreateSessionRequest(BaseModel):
    config: dict[str, Any] | None = None
    preset: str | None = None
    name: str | None = None


class StepRequest(BaseModel):
    n: int = Field(1, ge=1)


class RunRequest(BaseModel):
    max_ticks: int | None = Field(None, ge=0)


class SessionSummary(BaseModel):
    id: str
    name: str
    status: str
    current_tick: int
    max_ticks: int
    population_size: int


class SessionResponse(BaseModel):
    id: str
    name: str
    status: str
    current_tick: int
    max_ticks: int
    population_size: int
    active_count: int
    distinct_culture_count: int
    is_absorbed: bool
    config: dict[str, Any]


class RegionResponse(BaseModel):
    tick: int
    region_count: int
    giant_region_size: int
    region_sizes: list[int]


class GridResponse(BaseModel):
    tick: int
    world_size: int
    features: int
    geometry: dict[str, Any]  # size, radius, metric of the lattice
    cultures: list[list[int]]  # row-major, one culture vector per cell
    culture_labels: list[list[int]]  # world_size x world_size, equal label = same culture
    region_labels: list[list[int]] | None


# === Metrics ===

class SummaryResponse(BaseModel):
    ticks_run: int
    is_absorbed: bool
    initial_distinct_cultures: int
    final_distinct_cultures: int
    total_interactions: int
    peak_active_count: int


class TimeSeriesResponse(BaseModel):
    field: str
    ticks: list[int]
    values: list[Any]
