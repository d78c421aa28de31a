"""
Experiment Runner — parameter sweeps, comparisons and batch execution.

Each experiment runs a fresh engine until the grid is absorbed (no agent
can interact any more) or the tick bound is hit, then measures regions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from culturegrid.core.config import ExperimentConfig
from culturegrid.core.engine import SimulationEngine, TickSnapshot
from culturegrid.metrics.collector import MetricsCollector, TickMetrics


@dataclass
class ExperimentResult:
    """Result of a single experiment run."""
    config: ExperimentConfig
    history: list[TickSnapshot]
    metrics: list[TickMetrics]
    ticks_run: int
    absorbed: bool
    final_distinct_cultures: int
    region_count: int
    giant_region_size: int

    @property
    def giant_region_fraction(self) -> float:
        return self.giant_region_size / max(self.config.population_size, 1)


@dataclass
class ComparisonResult:
    """Result of comparing two or more experiments."""
    results: dict[str, ExperimentResult]
    config_diffs: dict[str, Any]


class ExperimentRunner:
    """
    Run, compare, and sweep simulation experiments.
    """

    def run_experiment(
        self,
        config: ExperimentConfig,
        collect_metrics: bool = True,
    ) -> ExperimentResult:
        """Run a single experiment to absorption and return results."""
        engine = SimulationEngine(config)
        engine.setup()

        metrics_list: list[TickMetrics] = []
        collector = MetricsCollector(config) if collect_metrics else None
        for _ in range(config.max_ticks):
            active = engine.run_tick()
            if collector is not None:
                metrics_list.append(collector.collect(engine, engine.history[-1]))
            if active == 0:
                break

        region_count, giant = engine.compute_regions()

        return ExperimentResult(
            config=config,
            history=list(engine.history),
            metrics=metrics_list,
            ticks_run=engine.tick_count(),
            absorbed=engine.is_absorbed(),
            final_distinct_cultures=engine.distinct_culture_count(),
            region_count=region_count,
            giant_region_size=giant,
        )

    def compare_experiments(
        self,
        configs: dict[str, ExperimentConfig],
        collect_metrics: bool = True,
    ) -> ComparisonResult:
        """Run each labelled config; diffs are taken against the first label."""
        results = {
            label: self.run_experiment(config, collect_metrics)
            for label, config in configs.items()
        }

        labels = list(configs)
        reference = labels[0] if labels else None
        diffs: dict[str, Any] = {
            f"{reference}_vs_{label}": configs[reference].diff(configs[label])
            for label in labels[1:]
        }
        return ComparisonResult(results=results, config_diffs=diffs)

    def run_parameter_sweep(
        self,
        base_config: ExperimentConfig,
        param_name: str,
        values: list[Any],
        collect_metrics: bool = True,
    ) -> dict[str, ExperimentResult]:
        """
        Run one experiment per value of a single config field.

        Args:
            base_config: Configuration every run starts from
            param_name: ExperimentConfig field to vary, e.g. ``"traits"``
            values: Values to assign to that field
            collect_metrics: Whether to collect per-tick metrics

        Returns:
            Dict keyed ``"<param>=<value>"``
        """
        return {
            f"{param_name}={val}": self.run_experiment(
                _variant(base_config, **{
                    "experiment_name": f"sweep_{param_name}={val}",
                    param_name: val,
                }),
                collect_metrics,
            )
            for val in values
        }

    def run_multi_seed(
        self,
        config: ExperimentConfig,
        seeds: list[int],
        collect_metrics: bool = False,
    ) -> list[ExperimentResult]:
        """
        Run the same configuration with multiple random seeds.

        Useful for measuring variance in the number of surviving regions.
        """
        return [
            self.run_experiment(
                _variant(
                    config,
                    random_seed=seed,
                    experiment_name=f"{config.experiment_name}_seed{seed}",
                ),
                collect_metrics,
            )
            for seed in seeds
        ]

    @staticmethod
    def summarize(results: list[ExperimentResult]) -> dict[str, float]:
        """Mean and spread of the headline outcomes across runs."""
        if not results:
            return {}
        regions = [r.region_count for r in results]
        cultures = [r.final_distinct_cultures for r in results]
        ticks = [r.ticks_run for r in results]
        return {
            "runs": len(results),
            "mean_region_count": float(np.mean(regions)),
            "std_region_count": float(np.std(regions)),
            "mean_distinct_cultures": float(np.mean(cultures)),
            "mean_ticks": float(np.mean(ticks)),
            "absorbed_fraction": float(np.mean([r.absorbed for r in results])),
        }


def _variant(config: ExperimentConfig, **changes: Any) -> ExperimentConfig:
    """Copy of ``config`` with some fields replaced."""
    return ExperimentConfig.from_dict({**config.to_dict(), **changes})
