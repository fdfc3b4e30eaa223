"""Quick console demo for the proximity_graph Graph."""

from __future__ import annotations

import math
import time

from proximity_graph import Graph, Point, inside_canvas, within_distance


def main() -> None:
    graph = Graph(connection_fn=within_distance(200.0))
    for point in (
        Point(x=150.0, y=300.0, angle=0.0, velocity=0.5),
        Point(x=300.0, y=200.0, angle=math.pi / 2, velocity=0.5),
        Point(x=650.0, y=300.0, angle=math.pi, velocity=0.5),
        Point(x=400.0, y=560.0, angle=math.pi / 4, velocity=0.5),
    ):
        graph.add_point(point)
    visible = inside_canvas(800, 600)

    print("Initial positions:")
    print(graph.positions())
    print(f"Initial edges: {graph.edges()}")

    for step in range(1, 251):
        graph.move()
        graph.remove_points_by_criteria(visible)
        if step % 50 == 0:
            print(f"After {step} steps: {len(graph)} points, edges {graph.edges()}")
            time.sleep(0.05)

    print("Final positions:")
    for idx, (x, y) in enumerate(graph.positions()):
        print(f"  Point {idx}: ({x:.2f}, {y:.2f})")


if __name__ == "__main__":
    main()
