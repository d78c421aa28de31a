#!/usr/bin/env python3
"""Run a baseline culture-grid simulation and print results."""

from culturegrid.core.config import ExperimentConfig
from culturegrid.core.engine import SimulationEngine


def main():
    config = ExperimentConfig(
        experiment_name="baseline",
        world_size=10,
        features=5,
        traits=10,
        radius=1.0,
        random_seed=42,
    )

    print(f"=== Culture Grid: {config.experiment_name} ===")
    print(f"Grid: {config.world_size}x{config.world_size}")
    print(f"Features (F): {config.features}  Traits (q): {config.traits}")
    print(f"Radius: {config.radius} ({config.neighborhood})")
    print()

    engine = SimulationEngine(config)
    engine.setup()
    print(f"Initial distinct cultures: {engine.distinct_culture_count()}")
    history = engine.run()

    print(f"{'Tick':>6} {'Active':>7} {'Cultures':>9} {'Copies':>7}")
    print("-" * 32)
    for snap in history:
        if snap.tick % 100 == 0 or snap.active_count == 0:
            print(
                f"{snap.tick:6d} {snap.active_count:7d} "
                f"{snap.distinct_culture_count:9d} {snap.interactions:7d}"
            )

    region_count, giant = engine.compute_regions()
    print()
    print(f"=== Final State (Tick {engine.tick_count()}) ===")
    print(f"Absorbed: {engine.is_absorbed()}")
    print(f"Distinct cultures: {engine.distinct_culture_count()}")
    print(f"Regions: {region_count}")
    print(f"Giant region: {giant} of {config.population_size} agents")
    print(f"Region sizes: {engine.region_report.region_sizes}")


if __name__ == "__main__":
    main()
