"""Simulated annealing over feedback vertex set sizes."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .logging_utils import apply_debug_logging
from .model import AnnealOptions, Point
from .problem import FVSProblem

logger = logging.getLogger(__name__)


@dataclass
class AnnealState:
    """Loop state carried between annealing iterations."""

    current: List[Point]
    best: List[Point]
    temperature: float
    iterations_remaining: int
    accepted: int = 0
    rejected: int = 0
    invalid: int = 0
    history: List[int] = field(default_factory=list)

    @classmethod
    def start(cls, fvs: Sequence[Point], options: AnnealOptions) -> "AnnealState":
        return cls(
            current=list(fvs),
            best=list(fvs),
            temperature=float(options.initial_temperature),
            iterations_remaining=int(options.max_iterations),
        )

    def running(self, options: AnnealOptions) -> bool:
        return self.temperature > options.min_temperature and self.iterations_remaining > 0


def propose(problem: FVSProblem, current: Sequence[Point], rng: np.random.Generator) -> List[Point]:
    """Return ``current`` with one random vertex removed or one random outsider added."""

    members = set(current)
    outside = [vertex for vertex in problem.vertices if vertex not in members]
    remove = bool(rng.random() < 0.5)
    if remove and not current:
        remove = False
    elif not remove and not outside:
        remove = True

    neighbour = list(current)
    if remove:
        if neighbour:
            neighbour.pop(int(rng.integers(len(neighbour))))
    else:
        neighbour.append(outside[int(rng.integers(len(outside)))])
    return neighbour


def accept(current_size: int, candidate_size: int, temperature: float, rng: np.random.Generator) -> bool:
    """Metropolis rule on solution size."""

    if candidate_size < current_size:
        return True
    return bool(rng.random() < math.exp((current_size - candidate_size) / temperature))


def step(
    problem: FVSProblem,
    state: AnnealState,
    options: AnnealOptions,
    rng: np.random.Generator,
) -> None:
    candidate = propose(problem, state.current, rng)
    if not problem.is_valid(candidate):
        state.invalid += 1
    elif accept(len(state.current), len(candidate), state.temperature, rng):
        state.current = candidate
        state.accepted += 1
        if len(state.current) < len(state.best):
            state.best = list(state.current)
            logger.debug(
                "New best size %d at temperature %.3f", len(state.best), state.temperature
            )
    else:
        state.rejected += 1
    state.history.append(len(state.current))
    state.temperature *= options.cooling_rate
    state.iterations_remaining -= 1


def anneal(
    problem: FVSProblem,
    fvs: Sequence[Point],
    options: Optional[AnnealOptions] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Point]:
    """Refine a valid ``fvs`` and return the smallest valid set visited."""

    options = options or AnnealOptions()
    rng = rng if rng is not None else np.random.default_rng()
    state = AnnealState.start(fvs, options)
    while state.running(options):
        step(problem, state, options, rng)

    logger.info(
        "Annealing finished: best=%d start=%d accepted=%d rejected=%d invalid=%d",
        len(state.best),
        len(fvs),
        state.accepted,
        state.rejected,
        state.invalid,
    )
    return state.best


apply_debug_logging(globals(), logger=logger, skip={"accept", "propose", "step"})


__all__ = ["AnnealState", "accept", "anneal", "propose", "step"]
