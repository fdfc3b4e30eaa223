"""Run a headless proximity-graph scene and save it as a GIF plus a JSON timeline."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path

# Allow running the script from the repo without installing the package first.
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from proximity_graph import (  # noqa: E402
    DISTANCE_BETWEEN_VERTICES,
    ProximityScene,
    SceneConfig,
    save_animation,
)

DEFAULT_OUTPUT = Path(__file__).with_name("proximity_graph.gif")

logger = logging.getLogger("record_frames")


def _random_clicks(
    count: int,
    canvas_size: tuple[int, int],
    *,
    margin: float,
    rng: random.Random,
) -> list[tuple[float, float]]:
    width, height = canvas_size
    margin = min(margin, width / 2.0 - 1.0, height / 2.0 - 1.0)
    return [
        (rng.uniform(margin, width - margin), rng.uniform(margin, height - margin))
        for _ in range(count)
    ]


def run_recording(
    *,
    canvas_size: tuple[int, int] = (800, 600),
    distance: float = DISTANCE_BETWEEN_VERTICES,
    points: int = 20,
    steps: int = 300,
    seed: int = 1337,
    output_path: Path | None = DEFAULT_OUTPUT,
    timeline_output: Path | None = None,
    record_every: int = 1,
    frame_duration_ms: int = 16,
) -> dict:
    rng = random.Random(seed)
    scene = ProximityScene(
        SceneConfig(canvas_size=canvas_size, connection_distance=distance),
        rng=random.Random(seed + 1),
    )
    scene.spawn_many(_random_clicks(points, canvas_size, margin=20.0, rng=rng))

    record_every = max(record_every, 1)
    frames = []
    timeline = []
    culled = 0
    for step in range(steps):
        if step % record_every == 0:
            timeline.append(scene.snapshot(step))
            frames.append(scene.render())
        culled += scene.tick()
        if not len(scene.graph):
            logger.info("All points left the canvas after %d steps", step + 1)
            break
    timeline.append(scene.snapshot())

    result = {
        "canvas": {"width": canvas_size[0], "height": canvas_size[1]},
        "spawned": points,
        "steps": scene.tick_count,
        "culled": culled,
        "remaining": len(scene.graph),
        "final_edges": len(scene.graph.edges()),
    }

    if output_path is not None and frames:
        save_animation(frames, output_path, frame_duration_ms=frame_duration_ms)
        result["output"] = str(output_path)

    if timeline_output is not None:
        timeline_output.parent.mkdir(parents=True, exist_ok=True)
        timeline_output.write_text(json.dumps(scene.timeline_payload(timeline), indent=2), encoding="utf-8")
        result["timeline_output"] = str(timeline_output)
        result["timeline_frames"] = len(timeline)

    return result


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=800, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Canvas height in pixels")
    parser.add_argument("--distance", type=float, default=DISTANCE_BETWEEN_VERTICES, help="Connection distance")
    parser.add_argument("--points", type=int, default=20, help="Number of simulated clicks")
    parser.add_argument("--steps", type=int, default=300, help="Number of ticks to run")
    parser.add_argument("--seed", type=int, default=1337, help="Random seed")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Animated GIF output path")
    parser.add_argument("--no-gif", action="store_true", help="Skip writing the GIF")
    parser.add_argument(
        "--timeline-output",
        type=Path,
        default=None,
        help="Optional path to dump the per-step positions and edges as JSON",
    )
    parser.add_argument(
        "--timeline-interval",
        type=int,
        default=1,
        help="Record every Nth frame (1 = every step)",
    )
    parser.add_argument("--frame-ms", type=int, default=16, help="GIF frame duration in milliseconds")
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    args = parse_args()
    result = run_recording(
        canvas_size=(args.width, args.height),
        distance=args.distance,
        points=args.points,
        steps=args.steps,
        seed=args.seed,
        output_path=None if args.no_gif else args.output,
        timeline_output=args.timeline_output,
        record_every=args.timeline_interval,
        frame_duration_ms=args.frame_ms,
    )
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
