"""Validity-preserving moves that shrink a feasible feedback vertex set."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Optional, Sequence

from .logging_utils import apply_debug_logging
from .model import DEFAULT_TWO_FOR_ONE_TRIALS, Point
from .problem import FVSProblem

logger = logging.getLogger(__name__)


def elide_pass(problem: FVSProblem, fvs: Sequence[Point]) -> List[Point]:
    """Drop, left to right, every vertex whose removal keeps the set valid."""

    result = list(fvs)
    index = 0
    while index < len(result):
        trial = result[:index] + result[index + 1:]
        if problem.is_valid(trial):
            logger.debug("Elided redundant vertex %s", result[index])
            result = trial
        else:
            index += 1
    return result


def prune_pass(problem: FVSProblem, fvs: Sequence[Point]) -> List[Point]:
    """Single elision sweep that visits the lowest-degree vertices first."""

    ordered = list(fvs)
    if not ordered:
        return ordered
    degrees = problem.degrees(ordered, ())
    ordered = [vertex for _, vertex in sorted(zip(degrees.tolist(), ordered), key=lambda item: item[0])]
    return elide_pass(problem, ordered)


def two_for_one_pass(
    problem: FVSProblem,
    fvs: Sequence[Point],
    max_trials: Optional[int] = None,
) -> Optional[List[Point]]:
    """Replace two vertices of ``fvs`` by a single outside vertex.

    Pairs and candidates are tried in order; the first valid replacement is
    returned, or ``None`` when none exists within ``max_trials`` checks.
    Candidates need at least two neighbours once the pair is restored, since
    anything else cannot lie on a cycle.
    """

    current = list(fvs)
    members = set(current)
    outside = [vertex for vertex in problem.vertices if vertex not in members]
    if len(current) < 2 or not outside:
        return None

    trials = 0
    for i, j in combinations(range(len(current)), 2):
        base = [vertex for k, vertex in enumerate(current) if k != i and k != j]
        degrees = problem.degrees(outside, base)
        for candidate, degree in zip(outside, degrees):
            if degree < 2:
                continue
            if max_trials is not None and trials >= max_trials:
                logger.debug("Two-for-one search stopped after %d trials", trials)
                return None
            trials += 1
            trial = base + [candidate]
            if problem.is_valid(trial):
                logger.debug(
                    "Replaced %s and %s by %s", current[i], current[j], candidate
                )
                return trial
    return None


def local_search(
    problem: FVSProblem,
    fvs: Sequence[Point],
    *,
    max_rounds: int = 1000,
    two_for_one: bool = True,
    max_two_for_one_trials: Optional[int] = DEFAULT_TWO_FOR_ONE_TRIALS,
) -> List[Point]:
    """Alternate elision and two-for-one rounds until neither improves."""

    current = list(fvs)
    start = len(current)
    for round_index in range(max_rounds):
        improved = False

        elided = elide_pass(problem, current)
        if len(elided) < len(current):
            current = elided
            improved = True

        if two_for_one:
            replaced = two_for_one_pass(problem, current, max_two_for_one_trials)
            if replaced is not None:
                current = replaced
                improved = True

        if not improved:
            logger.info(
                "Local search converged after %d round(s): %d -> %d", round_index + 1, start, len(current)
            )
            break
    else:
        logger.warning("Local search stopped at the %d round cap with size %d", max_rounds, len(current))
    return current


apply_debug_logging(globals(), logger=logger)


__all__ = ["elide_pass", "local_search", "prune_pass", "two_for_one_pass"]
