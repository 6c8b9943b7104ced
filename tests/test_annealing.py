import numpy as np
import pytest

from geofvs import AnnealOptions, AnnealState, FVSProblem, InputError, anneal, greedy_fvs
from geofvs.annealing import accept, propose, step

BOWTIE = [(0.0, 0.0), (1.0, 0.5), (1.0, -0.5), (-1.0, 0.5), (-1.0, -0.5)]


def _random_problem(seed, count=16, threshold=2.0):
    rng = np.random.default_rng(seed)
    points = [tuple(row) for row in rng.uniform(0.0, 6.0, size=(count, 2)).tolist()]
    return FVSProblem.from_points(points, threshold)


def test_accept_smaller_always():
    rng = np.random.default_rng(0)
    assert all(accept(5, 4, 1e-6, rng) for _ in range(20))


def test_accept_equal_size_always():
    rng = np.random.default_rng(0)
    assert all(accept(5, 5, 2.0, rng) for _ in range(20))


def test_accept_growth_vanishes_when_cold():
    rng = np.random.default_rng(0)
    assert not any(accept(5, 6, 1e-9, rng) for _ in range(20))


def test_accept_growth_sometimes_when_hot():
    rng = np.random.default_rng(0)
    outcomes = [accept(5, 6, 200.0, rng) for _ in range(50)]
    assert any(outcomes)


def test_propose_adds_when_current_empty():
    problem = FVSProblem.from_points(BOWTIE, 1.5)
    rng = np.random.default_rng(3)
    for _ in range(10):
        candidate = propose(problem, [], rng)
        assert len(candidate) == 1
        assert candidate[0] in problem


def test_propose_removes_when_everything_selected():
    problem = FVSProblem.from_points(BOWTIE, 1.5)
    rng = np.random.default_rng(3)
    for _ in range(10):
        candidate = propose(problem, list(BOWTIE), rng)
        assert len(candidate) == len(BOWTIE) - 1


def test_step_updates_schedule():
    problem = FVSProblem.from_points(BOWTIE, 1.5)
    options = AnnealOptions(initial_temperature=10.0, cooling_rate=0.5, max_iterations=4)
    state = AnnealState.start([(0.0, 0.0)], options)
    step(problem, state, options, np.random.default_rng(1))
    assert state.temperature == pytest.approx(5.0)
    assert state.iterations_remaining == 3
    assert state.accepted + state.rejected + state.invalid == 1
    assert problem.is_valid(state.current)


def test_anneal_respects_iteration_budget():
    problem = _random_problem(4)
    start = greedy_fvs(problem, "degree")
    options = AnnealOptions(max_iterations=25)
    state = AnnealState.start(start, options)
    rng = np.random.default_rng(0)
    while state.running(options):
        step(problem, state, options, rng)
    assert len(state.history) == 25


def test_anneal_cold_start_returns_input():
    problem = FVSProblem.from_points(BOWTIE, 1.5)
    options = AnnealOptions(initial_temperature=1.0)
    fvs = [(1.0, 0.5), (-1.0, 0.5)]
    assert anneal(problem, fvs, options, np.random.default_rng(0)) == fvs


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_anneal_returns_valid_set_no_larger_than_input(seed):
    problem = _random_problem(seed)
    start = greedy_fvs(problem, "impact")
    best = anneal(problem, start, rng=np.random.default_rng(seed))
    assert problem.is_valid(best)
    assert len(best) <= len(start)


def test_anneal_is_deterministic_for_a_seed():
    problem = _random_problem(11)
    start = greedy_fvs(problem, "degree")
    first = anneal(problem, start, rng=np.random.default_rng(42))
    second = anneal(problem, start, rng=np.random.default_rng(42))
    assert first == second


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_temperature": 0.0},
        {"cooling_rate": 1.0},
        {"cooling_rate": 0.0},
        {"max_iterations": -1},
        {"min_temperature": 0.0},
    ],
)
def test_anneal_options_validation(kwargs):
    with pytest.raises(InputError):
        AnnealOptions(**kwargs)
