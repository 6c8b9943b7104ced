"""Core data structures for the feedback vertex set pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

Point = Tuple[float, float]

GREEDY_STRATEGIES = ("degree", "impact")

# Validity checks per two-for-one round; ``None`` in options lifts the cap.
DEFAULT_TWO_FOR_ONE_TRIALS = 2000


class InputError(ValueError):
    """Raised when points, thresholds or options violate a precondition."""


@dataclass
class AnnealOptions:
    """Cooling schedule for the simulated annealing refiner."""

    initial_temperature: float = 200.0
    cooling_rate: float = 0.99
    max_iterations: int = 300
    min_temperature: float = 1.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.initial_temperature) and self.initial_temperature > 0.0):
            raise InputError(f"initial_temperature must be positive, got {self.initial_temperature!r}")
        if not 0.0 < self.cooling_rate < 1.0:
            raise InputError(f"cooling_rate must lie in (0, 1), got {self.cooling_rate!r}")
        if self.max_iterations < 0:
            raise InputError(f"max_iterations must be non-negative, got {self.max_iterations!r}")
        if self.min_temperature <= 0.0:
            raise InputError(f"min_temperature must be positive, got {self.min_temperature!r}")


@dataclass
class SolveOptions:
    """Solver façade options."""

    greedy: str = "impact"
    random_seed: Optional[int] = None
    max_local_rounds: int = 1000
    two_for_one: bool = True
    max_two_for_one_trials: Optional[int] = DEFAULT_TWO_FOR_ONE_TRIALS
    anneal: bool = True
    anneal_options: AnnealOptions = field(default_factory=AnnealOptions)
    max_refine_cycles: int = 20
    verify: bool = True

    def __post_init__(self) -> None:
        if self.greedy not in GREEDY_STRATEGIES:
            raise InputError(
                f"greedy must be one of {', '.join(GREEDY_STRATEGIES)}, got {self.greedy!r}"
            )
        if self.max_local_rounds < 1:
            raise InputError(f"max_local_rounds must be at least 1, got {self.max_local_rounds!r}")
        if self.max_two_for_one_trials is not None and self.max_two_for_one_trials < 0:
            raise InputError(
                f"max_two_for_one_trials must be non-negative, got {self.max_two_for_one_trials!r}"
            )
        if self.max_refine_cycles < 0:
            raise InputError(f"max_refine_cycles must be non-negative, got {self.max_refine_cycles!r}")


@dataclass
class FVSResult:
    """Outcome of a full solve, with the size reached after each stage."""

    points: List[Point]
    threshold: float
    stage_sizes: Dict[str, int] = field(default_factory=dict)
    refine_cycles: int = 0
    valid: bool = True

    @property
    def size(self) -> int:
        return len(self.points)


__all__ = [
    "AnnealOptions",
    "DEFAULT_TWO_FOR_ONE_TRIALS",
    "FVSResult",
    "GREEDY_STRATEGIES",
    "InputError",
    "Point",
    "SolveOptions",
]
