"""Floorplan route demo.

Loads ``examples/floorplan/scene.json``, builds its navigation graph and prints
the route to a destination node, either from another node or from the node
nearest to an arbitrary point:

    uv run python examples/floorplan/run.py --start A --goal F
    uv run python examples/floorplan/run.py --from-point 3 8 -2.5 --goal F --segments

Curve sampling follows ``PATHFINDER_CURVE_DIVISIONS`` / ``PATHFINDER_CURVE_TYPE``.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from svg_pathfinder import (
    PathfinderError,
    SceneLoader,
    build_route,
    route_segments,
    sample_route_curve,
)
from svg_pathfinder.config import Config
from svg_pathfinder.logging_utils import log_error, log_info

SCENES_DIR = Path(__file__).resolve().parent


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Floorplan route demo")
    parser.add_argument("--scene", default="scene", help="Scene file name (without .json)")
    parser.add_argument("--start", default="A", help="Start node id")
    parser.add_argument("--goal", default="F", help="Destination node id")
    parser.add_argument(
        "--from-point",
        nargs=3,
        type=float,
        metavar=("X", "Y", "Z"),
        help="Start from the node nearest to this point instead of --start",
    )
    parser.add_argument("--segments", action="store_true", help="Print per-segment output")
    parser.add_argument("--divisions", type=int, default=None, help="Curve sample count")
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    Config.validate()
    log_info(Config.display())

    loader = SceneLoader(SCENES_DIR)
    scene = loader.load(args.scene)
    try:
        graph = loader.build_graph(scene)
        start = args.start
        if args.from_point is not None:
            start = graph.nearest(tuple(args.from_point)).id
            log_info(f"Nearest node to {tuple(args.from_point)} is {start}")
        route = build_route(graph, start, args.goal)
    except PathfinderError as exc:
        log_error(str(exc))
        return 1

    print(f"Route {' -> '.join(route.node_ids)} (length {route.length:.2f})")
    if args.segments:
        for source, target in route_segments(graph.shortest_path(start, args.goal)):
            print(f"  {tuple(source)} -> {tuple(target)}")
    else:
        curve = sample_route_curve(graph.shortest_path(start, args.goal), args.divisions)
        print(f"  curve: {len(curve)} samples from {tuple(curve[0])} to {tuple(curve[-1])}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(parse_args()))
