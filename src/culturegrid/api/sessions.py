"""
Session manager for culture-grid simulations.

Each session wraps a SimulationEngine + MetricsCollector and supports
tick-by-tick stepping, running to absorption, and on-demand region
analysis. Sessions live in memory only and every operation runs inline
on the calling thread.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from culturegrid.core.config import ExperimentConfig
from culturegrid.core.engine import SimulationEngine
from culturegrid.metrics.collector import MetricsCollector

logger = logging.getLogger(__name__)


@dataclass
class SimulationSession:
    """A simulation session and its collected metrics."""

    id: str
    name: str
    config: ExperimentConfig
    engine: SimulationEngine
    collector: MetricsCollector
    status: str = "created"  # created | running | absorbed | completed

    @property
    def current_tick(self) -> int:
        return self.engine.tick_count()


class SessionManager:
    """Manages multiple in-memory simulation sessions."""

    def __init__(self) -> None:
        self.sessions: dict[str, SimulationSession] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_session(
        self,
        config: ExperimentConfig | None = None,
        name: str | None = None,
    ) -> SimulationSession:
        """Create and set up a new session.

        Raises ``InvalidParameter`` if the configuration is out of range.
        """
        if config is None:
            config = ExperimentConfig()

        engine = SimulationEngine(config)
        engine.setup()

        session = SimulationSession(
            id=uuid.uuid4().hex[:8],
            name=name or config.experiment_name,
            config=config,
            engine=engine,
            collector=MetricsCollector(config),
        )
        self.sessions[session.id] = session
        logger.info(
            "Created session %s (%dx%d, F=%d, q=%d, radius=%s)",
            session.id, config.world_size, config.world_size,
            config.features, config.traits, config.radius,
        )
        return session

    def get_session(self, session_id: str) -> SimulationSession:
        """Get a session by ID. Raises KeyError if not found."""
        try:
            return self.sessions[session_id]
        except KeyError:
            raise KeyError(f"Session '{session_id}' not found") from None

    def step(self, session_id: str, n: int = 1) -> SimulationSession:
        """Advance a session by N ticks, stopping early once absorbed."""
        session = self.get_session(session_id)
        if session.status in ("absorbed", "completed"):
            return session

        session.status = "running"
        for _ in range(n):
            if session.current_tick >= session.config.max_ticks:
                session.status = "completed"
                break
            self._advance(session)
            if session.status == "absorbed":
                break
        return session

    def run_until_absorbed(
        self, session_id: str, max_ticks: int | None = None,
    ) -> SimulationSession:
        """Tick until absorbed, bounded by ``max_ticks`` more ticks (or the config bound)."""
        session = self.get_session(session_id)
        remaining = session.config.max_ticks - session.current_tick
        if max_ticks is not None:
            remaining = min(remaining, max_ticks)
        if remaining > 0:
            self.step(session_id, remaining)
        elif (
            session.status not in ("absorbed", "completed")
            and session.current_tick >= session.config.max_ticks
        ):
            session.status = "completed"
        return session

    def compute_regions(self, session_id: str) -> SimulationSession:
        """Run region analysis on the session's current grid."""
        session = self.get_session(session_id)
        region_count, giant = session.engine.compute_regions()
        logger.info(
            "Session %s at tick %d: %d regions, giant region %d",
            session.id, session.current_tick, region_count, giant,
        )
        return session

    def reset_session(self, session_id: str) -> SimulationSession:
        """Re-run setup with the same configuration (and seed)."""
        session = self.get_session(session_id)
        session.engine.setup(session.config)
        session.collector = MetricsCollector(session.config)
        session.status = "created"
        return session

    def delete_session(self, session_id: str) -> None:
        """Delete a session. Raises KeyError if not found."""
        self.get_session(session_id)
        del self.sessions[session_id]

    def list_sessions(self) -> list[dict[str, Any]]:
        """List all sessions as summary dicts."""
        return [
            {
                "id": s.id,
                "name": s.name,
                "status": s.status,
                "current_tick": s.current_tick,
                "max_ticks": s.config.max_ticks,
                "population_size": len(s.engine.population),
            }
            for s in self.sessions.values()
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance(self, session: SimulationSession) -> None:
        engine = session.engine
        active = engine.run_tick()
        session.collector.collect(engine, engine.history[-1])
        if active == 0:
            session.status = "absorbed"
            logger.info(
                "Session %s absorbed at tick %d with %d cultures",
                session.id, engine.tick_count(), engine.distinct_culture_count(),
            )
        elif engine.tick_count() >= session.config.max_ticks:
            session.status = "completed"
            logger.warning(
                "Session %s hit max_ticks=%d before absorbing",
                session.id, session.config.max_ticks,
            )
