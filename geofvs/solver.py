"""Solver façade chaining greedy construction, local search and annealing."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .annealing import anneal
from .greedy import greedy_fvs
from .local_search import local_search, prune_pass
from .logging_utils import apply_debug_logging
from .model import FVSResult, Point, SolveOptions
from .problem import FVSProblem

logger = logging.getLogger(__name__)


def _local_search(problem: FVSProblem, fvs: List[Point], options: SolveOptions) -> List[Point]:
    return local_search(
        problem,
        fvs,
        max_rounds=options.max_local_rounds,
        two_for_one=options.two_for_one,
        max_two_for_one_trials=options.max_two_for_one_trials,
    )


def refine(
    problem: FVSProblem,
    fvs: List[Point],
    options: SolveOptions,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[List[Point], int]:
    """Alternate annealing, pruning and local search until a cycle stops shrinking ``fvs``.

    Returns the refined set and the number of cycles run.
    """

    rng = rng if rng is not None else np.random.default_rng(options.random_seed)
    cycles = 0
    while cycles < options.max_refine_cycles:
        cycles += 1
        before = len(fvs)
        fvs = anneal(problem, fvs, options.anneal_options, rng)
        fvs = prune_pass(problem, fvs)
        fvs = _local_search(problem, fvs, options)
        logger.info("Refinement cycle %d: %d -> %d", cycles, before, len(fvs))
        if len(fvs) >= before:
            break
    return fvs, cycles


def solve(
    points: Iterable[object],
    edge_threshold: float,
    options: Optional[SolveOptions] = None,
) -> FVSResult:
    """Compute a feedback vertex set and report the size after each stage."""

    options = options or SolveOptions()
    problem = FVSProblem.from_points(points, edge_threshold)
    logger.info(
        "Solving FVS for %d point(s) with threshold=%g", len(problem.points), problem.threshold
    )

    if problem.is_valid(()):
        logger.info("Input graph is already a forest; nothing to remove")
        return FVSResult(points=[], threshold=problem.threshold, stage_sizes={"greedy": 0})

    stage_sizes = {}
    fvs = greedy_fvs(problem, options.greedy)
    stage_sizes["greedy"] = len(fvs)

    fvs = _local_search(problem, fvs, options)
    stage_sizes["local_search"] = len(fvs)

    cycles = 0
    if options.anneal and options.max_refine_cycles > 0:
        fvs, cycles = refine(problem, fvs, options)
        stage_sizes["annealing"] = len(fvs)

    valid = problem.is_valid(fvs)
    if options.verify and not valid:
        raise RuntimeError("Refinement produced a vertex set that leaves a cycle")

    logger.info("Solved: |FVS|=%d stages=%s", len(fvs), stage_sizes)
    return FVSResult(
        points=fvs,
        threshold=problem.threshold,
        stage_sizes=stage_sizes,
        refine_cycles=cycles,
        valid=valid,
    )


def compute_feedback_vertex_set(
    points: Iterable[object],
    edge_threshold: float,
    options: Optional[SolveOptions] = None,
) -> List[Point]:
    """Return points whose removal leaves the threshold graph acyclic."""

    return solve(points, edge_threshold, options).points


apply_debug_logging(globals(), logger=logger)


__all__ = ["compute_feedback_vertex_set", "refine", "solve"]
