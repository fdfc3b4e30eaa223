"""Interactive proximity-graph demo: click the canvas to add drifting points."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

# Allow running the script from the repo without installing the package first.
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from proximity_graph import DISTANCE_BETWEEN_VERTICES, ProximityScene, SceneConfig  # noqa: E402
from proximity_graph.viewer import run_live_view  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=800, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Canvas height in pixels")
    parser.add_argument(
        "--distance",
        type=float,
        default=DISTANCE_BETWEEN_VERTICES,
        help="Points closer than this are connected (default: 200)",
    )
    parser.add_argument("--interval", type=int, default=16, help="Milliseconds between frames")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spawn headings/speeds")
    parser.add_argument("--verbose", action="store_true", help="Log spawns and culls")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = SceneConfig(
        canvas_size=(args.width, args.height),
        connection_distance=args.distance,
        seed=args.seed,
    )
    scene = ProximityScene(config)
    print("Canvas ready. Left-click to add points, 'c' to clear, 'q' to quit.")
    run_live_view(scene, interval_ms=args.interval)


if __name__ == "__main__":
    main()
