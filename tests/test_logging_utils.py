import logging

import numpy as np

from geofvs import FVSProblem, anneal, greedy_fvs
from geofvs.logging_utils import debug_log_call, summarize


def test_summarize_collapses_point_lists():
    text = summarize([(0, 0), (1, 2), (3, 4), (5, 6)])
    assert text == "<4 point(s): (0, 0), (1, 2), (3, 4), ...>"


def test_summarize_arrays_and_scalars():
    assert summarize(np.zeros((2, 3))) == "ndarray(shape=(2, 3), dtype=float64)"
    assert summarize(1.5) == "1.5"


def test_debug_log_call_records_entry_and_exit(caplog):
    logger = logging.getLogger("geofvs.tests")

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="geofvs.tests"):
        assert double(4) == 8

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "double" in message for message in messages)
    assert any(message.endswith("-> 8") for message in messages)


def test_greedy_module_is_wrapped(caplog):
    problem = FVSProblem.from_points([(0, 0), (1, 0), (0.5, 0.8)], 2)
    with caplog.at_level(logging.DEBUG, logger="geofvs.greedy"):
        greedy_fvs(problem)
    assert any("Entering greedy_fvs" in record.getMessage() for record in caplog.records)


def test_annealing_module_is_wrapped(caplog):
    problem = FVSProblem.from_points([(0, 0), (1, 0), (0.5, 0.8)], 2)
    with caplog.at_level(logging.DEBUG, logger="geofvs.annealing"):
        anneal(problem, [(0, 0)], rng=np.random.default_rng(0))
    messages = [record.getMessage() for record in caplog.records]
    assert any("Entering anneal" in message for message in messages)
    assert not any("Entering step" in message for message in messages)
