"""Example: two far-apart triangles need one removed vertex each."""

import math

from geofvs import compute_feedback_vertex_set

H = math.sqrt(3.0) / 2.0
POINTS = [
    (0.0, 0.0), (1.0, 0.0), (0.5, H),
    (10.0, 0.0), (11.0, 0.0), (10.5, H),
]


def main() -> None:
    fvs = compute_feedback_vertex_set(POINTS, 2.0)
    print("Removed:", fvs)


if __name__ == "__main__":
    main()
