"""
Shared test configuration.

Provides small engines and a helper for writing cultures onto a grid so
region and interaction scenarios can be set up by hand.
"""

import numpy as np
import pytest

from culturegrid.core.agent import Agent
from culturegrid.core.config import ExperimentConfig
from culturegrid.core.engine import SimulationEngine


def make_engine(**overrides) -> SimulationEngine:
    params = {"world_size": 5, "features": 3, "traits": 3, "random_seed": 42}
    params.update(overrides)
    engine = SimulationEngine(ExperimentConfig(**params))
    engine.setup()
    return engine


def set_cultures(engine: SimulationEngine, cultures) -> None:
    """Overwrite every agent's culture, row-major, in place."""
    for agent, culture in zip(engine.population, cultures):
        agent.culture[:] = culture


def make_agent(culture, agent_id=0) -> Agent:
    return Agent(id=agent_id, position=(agent_id, 0), culture=np.array(culture))


class FixedRng:
    """Stand-in generator whose draws are fixed by the test."""

    def __init__(self, uniform: float = 0.0, start: int = 0):
        self.uniform = uniform
        self.start = start

    def random(self):
        return self.uniform

    def integers(self, high):
        return self.start

    def permutation(self, n):
        return np.arange(n)


@pytest.fixture
def small_engine():
    return make_engine()
