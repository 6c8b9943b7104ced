from .model import DEFAULT_TWO_FOR_ONE_TRIALS, AnnealOptions, FVSResult, InputError, Point, SolveOptions
from .geometry import adjacent, as_point, as_points, distance, pairwise_distances
from .cycles import UnionFind, has_cycles
from .validate import is_valid, neighbors
from .problem import FVSProblem
from .greedy import degree_greedy, greedy_fvs, impact_greedy
from .local_search import elide_pass, local_search, prune_pass, two_for_one_pass
from .annealing import AnnealState, anneal
from .solver import compute_feedback_vertex_set, refine, solve
from .points_io import format_points, parse_points, read_points, write_points

__all__ = [
    'AnnealOptions',
    'DEFAULT_TWO_FOR_ONE_TRIALS',
    'AnnealState',
    'FVSProblem',
    'FVSResult',
    'InputError',
    'Point',
    'SolveOptions',
    'UnionFind',
    'adjacent',
    'anneal',
    'as_point',
    'as_points',
    'compute_feedback_vertex_set',
    'degree_greedy',
    'distance',
    'elide_pass',
    'format_points',
    'greedy_fvs',
    'has_cycles',
    'impact_greedy',
    'is_valid',
    'local_search',
    'neighbors',
    'pairwise_distances',
    'parse_points',
    'prune_pass',
    'read_points',
    'refine',
    'solve',
    'two_for_one_pass',
    'write_points',
]
