"""Greedy construction of an initial feedback vertex set."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .logging_utils import apply_debug_logging
from .model import InputError, Point
from .problem import FVSProblem

logger = logging.getLogger(__name__)


def _extend_by_degree(problem: FVSProblem, fvs: List[Point]) -> List[Point]:
    remaining = problem.remaining_vertices(fvs)
    while problem.has_cycles_among(problem.remaining_positions(fvs)):
        degrees = problem.degrees(remaining, fvs)
        # argmax keeps the first maximum, i.e. enumeration order on ties
        chosen = remaining.pop(int(np.argmax(degrees)))
        fvs.append(chosen)
        logger.debug("Degree greedy picked %s (degree=%d)", chosen, int(degrees.max()))
    return fvs


def degree_greedy(problem: FVSProblem) -> List[Point]:
    """Remove the highest-degree vertex until the rest of the graph is a forest."""

    return _extend_by_degree(problem, [])


def impact_scores(problem: FVSProblem, pool: List[Point], removed: List[Point]) -> np.ndarray:
    """Score ``pool`` by degree plus the summed degree of each neighbour.

    All counts are taken in the graph left after deleting ``removed``.
    """

    positions = problem.remaining_positions(removed)
    adj = problem.adjacency(positions)
    degree = adj.sum(axis=1)
    impact = degree + adj.astype(int) @ degree
    slot = {pos: idx for idx, pos in enumerate(positions)}
    rows = [slot[problem.copies[vertex][0]] for vertex in pool]
    return impact[rows]


def impact_greedy(problem: FVSProblem) -> List[Point]:
    """Remove the highest-impact vertex until the candidate set is valid.

    Vertices with fewer than two neighbours never lie on a cycle and are left
    out of the candidate pool.
    """

    fvs: List[Point] = []
    initial = problem.degrees(problem.vertices, fvs)
    pool = [vertex for vertex, degree in zip(problem.vertices, initial) if degree >= 2]
    logger.debug("Impact greedy pool holds %d of %d vertices", len(pool), problem.size)

    while pool and not problem.is_valid(fvs):
        scores = impact_scores(problem, pool, fvs)
        chosen = pool.pop(int(np.argmax(scores)))
        fvs.append(chosen)
        logger.debug("Impact greedy picked %s (impact=%d)", chosen, int(scores.max()))

    if not problem.is_valid(fvs):
        logger.warning("Impact pool exhausted with cycles left; continuing by degree")
        _extend_by_degree(problem, fvs)
    return fvs


def greedy_fvs(problem: FVSProblem, strategy: str = "impact") -> List[Point]:
    """Build a feasible feedback vertex set with the named strategy."""

    if strategy == "degree":
        fvs = degree_greedy(problem)
    elif strategy == "impact":
        fvs = impact_greedy(problem)
    else:
        raise InputError(f"Unknown greedy strategy {strategy!r}")
    logger.info("Greedy (%s) selected %d of %d vertices", strategy, len(fvs), problem.size)
    return fvs


apply_debug_logging(globals(), logger=logger, skip={"impact_scores"})


__all__ = ["degree_greedy", "greedy_fvs", "impact_greedy", "impact_scores"]
