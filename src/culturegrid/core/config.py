"""
Master configuration for a culture-grid experiment.

ALL tunable parameters live here. Nothing in the simulation is hardcoded.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

from culturegrid.core.errors import InvalidParameter

NEIGHBORHOODS = ("euclidean", "chebyshev")


@dataclass
class ExperimentConfig:
    """
    Master configuration — ALL parameters as tunable sliders.

    ``features`` is Axelrod's F (length of every culture vector) and
    ``traits`` is q (number of values each feature can take).
    Use ``to_dict()`` / ``from_dict()`` for serialization and comparison.
    """

    # === Experiment identity ===
    experiment_name: str = "default"
    random_seed: int | None = None

    # === World ===
    world_size: int = 10  # grid is world_size x world_size, one agent per cell

    # === Culture ===
    features: int = 5
    traits: int = 10

    # === Interaction neighbourhood ===
    radius: float = 1.0
    neighborhood: str = "euclidean"  # 'euclidean' or 'chebyshev'

    # === Run control ===
    max_ticks: int = 10_000  # safety bound for run(); absorption normally stops first

    @property
    def population_size(self) -> int:
        return self.world_size * self.world_size

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Raise ``InvalidParameter`` if any parameter has the wrong type or is out of range."""
        for name in ("world_size", "features", "traits", "max_ticks"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidParameter(f"{name} must be an integer, got {value!r}")
        if isinstance(self.radius, bool) or not isinstance(self.radius, Real):
            raise InvalidParameter(f"radius must be a number, got {self.radius!r}")
        if not math.isfinite(self.radius):
            raise InvalidParameter(f"radius must be finite, got {self.radius}")

        if self.world_size < 1:
            raise InvalidParameter(f"world_size must be >= 1, got {self.world_size}")
        if self.features < 1:
            raise InvalidParameter(f"features must be >= 1, got {self.features}")
        if self.traits < 1:
            raise InvalidParameter(f"traits must be >= 1, got {self.traits}")
        if not self.radius > 0:
            raise InvalidParameter(f"radius must be > 0, got {self.radius}")
        if self.neighborhood not in NEIGHBORHOODS:
            raise InvalidParameter(
                f"Unknown neighborhood {self.neighborhood!r}; "
                f"expected one of {', '.join(NEIGHBORHOODS)}"
            )
        if self.max_ticks < 0:
            raise InvalidParameter(f"max_ticks must be >= 0, got {self.max_ticks}")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ExperimentConfig:
        """Deserialize from a dict."""
        return cls(**{k: v for k, v in d.items() if not k.startswith("_")})

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    @classmethod
    def from_json(cls, s: str) -> ExperimentConfig:
        return cls.from_dict(json.loads(s))

    def diff(self, other: ExperimentConfig) -> dict[str, tuple[Any, Any]]:
        """Return parameters that differ between two configs."""
        diffs: dict[str, tuple[Any, Any]] = {}
        for k in self.to_dict():
            v1 = getattr(self, k)
            v2 = getattr(other, k)
            if v1 != v2:
                diffs[k] = (v1, v2)
        return diffs
