"""
Experiment presets — pre-configured experiment templates.

Each preset returns an ExperimentConfig reproducing one of the classic
settings from the culture-dissemination literature.
"""

from __future__ import annotations

from typing import Callable

from culturegrid.core.config import ExperimentConfig


def baseline() -> ExperimentConfig:
    """Axelrod's reference setting: 10x10 grid, 5 features, 10 traits."""
    return ExperimentConfig(
        experiment_name="baseline",
        world_size=10,
        features=5,
        traits=10,
        radius=1.0,
    )


def few_traits() -> ExperimentConfig:
    """Fewer traits per feature — cultures converge to fewer regions."""
    return ExperimentConfig(
        experiment_name="few_traits",
        world_size=10,
        features=5,
        traits=5,
    )


def many_traits() -> ExperimentConfig:
    """More traits per feature — more stable regions survive."""
    return ExperimentConfig(
        experiment_name="many_traits",
        world_size=10,
        features=5,
        traits=15,
    )


def wide_radius() -> ExperimentConfig:
    """Interaction range of two cells instead of the von Neumann neighbourhood."""
    return ExperimentConfig(
        experiment_name="wide_radius",
        world_size=10,
        features=5,
        traits=10,
        radius=2.0,
    )


def large_world() -> ExperimentConfig:
    """A 20x20 territory with the baseline culture parameters."""
    return ExperimentConfig(
        experiment_name="large_world",
        world_size=20,
        features=5,
        traits=10,
    )


# Registry of all presets
PRESETS: dict[str, Callable[[], ExperimentConfig]] = {
    "baseline": baseline,
    "few_traits": few_traits,
    "many_traits": many_traits,
    "wide_radius": wide_radius,
    "large_world": large_world,
}


def get_preset(name: str) -> ExperimentConfig:
    """Get a preset configuration by name."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset: '{name}'. Available: {list(PRESETS.keys())}")
    return PRESETS[name]()


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())
