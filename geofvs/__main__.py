import argparse
import logging
import sys
from typing import Optional, Sequence

from geofvs import (
    AnnealOptions,
    InputError,
    SolveOptions,
    format_points,
    read_points,
    solve,
    write_points,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute a small feedback vertex set of a geometric threshold graph"
    )
    parser.add_argument("path", help="Path to a file with one 'x y' point per line")
    parser.add_argument(
        "--threshold",
        type=float,
        required=True,
        help="Points strictly closer than this distance are joined by an edge",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the annealing stage",
    )
    parser.add_argument(
        "--greedy",
        choices=["degree", "impact"],
        default="impact",
        help="Initial construction strategy (default: impact)",
    )
    parser.add_argument(
        "--no-anneal",
        action="store_true",
        help="Skip the simulated annealing refinement",
    )
    parser.add_argument(
        "--anneal-iterations",
        type=int,
        default=300,
        help="Iteration budget per annealing run (default: 300)",
    )
    parser.add_argument(
        "--output",
        help="Write the selected points to this path instead of stdout",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        points = read_points(args.path)
        options = SolveOptions(
            greedy=args.greedy,
            random_seed=args.seed,
            anneal=not args.no_anneal,
            anneal_options=AnnealOptions(max_iterations=args.anneal_iterations),
        )
        result = solve(points, args.threshold, options)
    except (InputError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    print(f"Points: {len(points)}")
    print(f"Threshold: {result.threshold:g}")
    print("Stages:")
    for stage, size in result.stage_sizes.items():
        print(f"  {stage}: {size}")
    print(f"FVS size: {result.size}")

    if args.output:
        write_points(args.output, result.points)
        print(f"FVS written to {args.output}")
    else:
        sys.stdout.write(format_points(result.points))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
