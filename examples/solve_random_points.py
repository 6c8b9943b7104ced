"""Example pipeline: scatter points and compute a feedback vertex set."""

import numpy as np

from geofvs import SolveOptions, is_valid, solve

THRESHOLD = 1.2


def main() -> None:
    rng = np.random.default_rng(2024)
    points = [tuple(row) for row in rng.uniform(0.0, 10.0, size=(60, 2)).round(2).tolist()]
    result = solve(points, THRESHOLD, SolveOptions(random_seed=123))
    print("Points:", len(points))
    print("Stage sizes:", result.stage_sizes)
    print("FVS size:", result.size)
    print("Valid:", is_valid(points, result.points, THRESHOLD))
    for x, y in result.points:
        print(f"({x:.2f}, {y:.2f})")


if __name__ == "__main__":
    main()
