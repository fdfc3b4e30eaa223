"""Host loop around :class:`Graph`: click-to-spawn, per-tick movement and culling."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Iterable, Tuple

from PIL import Image

from .core import Graph, Point
from .predicates import DISTANCE_BETWEEN_VERTICES, inside_canvas, within_distance
from .rendering import (
    BACKGROUND_COLOR,
    EDGE_COLOR,
    POINT_COLOR,
    Color,
    GraphDrawer,
    PillowGraphDrawer,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneConfig:
    """Canvas, connection and palette settings for a :class:`ProximityScene`."""

    canvas_size: Tuple[int, int] = (800, 600)
    connection_distance: float = DISTANCE_BETWEEN_VERTICES
    point_size: int = 10
    max_velocity: float = 1.0
    background: Color = BACKGROUND_COLOR
    point_color: Color = POINT_COLOR
    edge_color: Color = EDGE_COLOR
    edge_width: int = 1
    seed: int | None = None

    def __post_init__(self) -> None:
        width, height = self.canvas_size
        if width <= 0 or height <= 0:
            raise ValueError("canvas_size must be positive in both dimensions")
        if self.point_size <= 0:
            raise ValueError("point_size must be positive")
        if self.max_velocity < 0.0:
            raise ValueError("max_velocity must be non-negative")

    @property
    def width(self) -> int:
        return self.canvas_size[0]

    @property
    def height(self) -> int:
        return self.canvas_size[1]


class ProximityScene:
    """Drives a proximity graph one frame at a time.

    ``step()`` follows the frame order of the interactive demo: render the
    current state, advance every point, then drop the points that left the
    canvas.
    """

    def __init__(
        self,
        config: SceneConfig | None = None,
        *,
        drawer: GraphDrawer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or SceneConfig()
        self.graph = Graph(connection_fn=within_distance(self.config.connection_distance))
        self.drawer: GraphDrawer = drawer or PillowGraphDrawer(
            self.config.canvas_size,
            point_size=self.config.point_size,
            background=self.config.background,
            point_color=self.config.point_color,
            edge_color=self.config.edge_color,
            edge_width=self.config.edge_width,
        )
        self._rng = rng or random.Random(self.config.seed)
        self._visible = inside_canvas(self.config.width, self.config.height)
        self.tick_count = 0

    def spawn_at(self, x: float, y: float) -> Point:
        """Add a point at ``(x, y)`` with a random heading and speed."""

        velocity = self._rng.random() * self.config.max_velocity
        angle = self._rng.random() * (math.pi * 2)
        point = Point(x=float(x), y=float(y), angle=angle, velocity=velocity)
        self.graph.add_point(point)
        logger.debug("Spawned point at (%.1f, %.1f) heading %.3f rad", point.x, point.y, angle)
        return point

    def spawn_many(self, positions: Iterable[Tuple[float, float]]) -> list[Point]:
        return [self.spawn_at(x, y) for x, y in positions]

    def clear(self) -> None:
        self.graph = Graph(connection_fn=self.graph.connection_fn)

    def tick(self) -> int:
        """Move every point once and cull those outside the canvas.

        Returns the number of points removed.
        """

        self.graph.move()
        removed = self.graph.remove_points_by_criteria(self._visible)
        self.tick_count += 1
        if removed:
            logger.debug("Tick %d culled %d point(s)", self.tick_count, len(removed))
        return len(removed)

    def render(self) -> Image.Image:
        return self.drawer.draw(self.graph.get_points(), self.graph.get_connections())

    def step(self) -> Image.Image:
        frame = self.render()
        self.tick()
        return frame

    def snapshot(self, step: int | None = None) -> dict[str, Any]:
        """Return a JSON-serializable record of the current positions and edges."""

        return {
            "step": self.tick_count if step is None else step,
            "positions": [[x, y] for x, y in self.graph.positions()],
            "edges": [[i, j] for i, j in self.graph.edges()],
        }

    def timeline_payload(self, frames: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "canvas": {"width": self.config.width, "height": self.config.height},
            "connection_distance": self.config.connection_distance,
            "timeline": frames,
        }


__all__ = ["SceneConfig", "ProximityScene"]
