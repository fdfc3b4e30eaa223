"""Frame rendering for proximity graphs with pluggable backends.

Pillow is the only rasterizer today; anything implementing
:class:`GraphDrawer` can be handed to a scene instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence, Tuple, runtime_checkable

import numpy as np
from PIL import Image, ImageDraw

from .core import Point

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0)
POINT_COLOR: Color = (255, 0, 0)
EDGE_COLOR: Color = (0, 128, 0)


@runtime_checkable
class GraphDrawer(Protocol):
    """Protocol implemented by concrete drawing backends."""

    name: str

    def draw(self, points: Sequence[Point], connections: np.ndarray) -> Image.Image:
        """Paint ``points`` and their connected pairs onto a fresh frame."""


class PillowGraphDrawer:
    """Rasterize a graph with Pillow's ImageDraw.

    Edges are drawn first so the point squares stay on top of them.
    """

    name = "pillow"

    def __init__(
        self,
        canvas_size: Tuple[int, int] = (800, 600),
        *,
        point_size: int = 10,
        background: Color = BACKGROUND_COLOR,
        point_color: Color = POINT_COLOR,
        edge_color: Color = EDGE_COLOR,
        edge_width: int = 1,
    ) -> None:
        width, height = canvas_size
        if width <= 0 or height <= 0:
            raise ValueError("canvas_size must be positive in both dimensions")
        self.canvas_size = (int(width), int(height))
        self.point_size = point_size
        self.background = background
        self.point_color = point_color
        self.edge_color = edge_color
        self.edge_width = edge_width

    def draw(self, points: Sequence[Point], connections: np.ndarray) -> Image.Image:
        image = Image.new("RGB", self.canvas_size, color=self.background)
        if not points:
            return image
        draw = ImageDraw.Draw(image)

        for i in range(len(points)):
            for j in range(i):
                if connections[i][j]:
                    self._draw_connection(draw, points[i], points[j])

        for point in points:
            self._draw_point(draw, point)
        return image

    def _draw_point(self, draw: ImageDraw.ImageDraw, point: Point) -> None:
        half = self.point_size / 2.0
        bbox = (point.x - half, point.y - half, point.x + half - 1, point.y + half - 1)
        draw.rectangle(bbox, fill=self.point_color)

    def _draw_connection(self, draw: ImageDraw.ImageDraw, start: Point, end: Point) -> None:
        draw.line([(start.x, start.y), (end.x, end.y)], fill=self.edge_color, width=self.edge_width)


def get_graph_drawer(preferred: str | None = None, **kwargs) -> GraphDrawer:
    """Return a drawer by name; ``None`` picks the default backend."""

    normalized = (preferred or "").strip().lower()
    if normalized in ("", "pillow"):
        return PillowGraphDrawer(**kwargs)
    raise ValueError(f"Unknown drawer '{preferred}'")


def frame_to_array(image: Image.Image) -> np.ndarray:
    """Return the frame as a ``(height, width, 3)`` uint8 array."""

    return np.asarray(image.convert("RGB"), dtype=np.uint8)


def save_animation(
    frames: Sequence[Image.Image],
    path: Path | str,
    *,
    frame_duration_ms: int = 16,
    loop: int = 0,
) -> Path:
    """Write ``frames`` as an animated GIF and return the output path."""

    if not frames:
        raise ValueError("frames must not be empty")
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    first, *rest = frames
    first.save(
        output,
        save_all=True,
        append_images=list(rest),
        duration=max(int(frame_duration_ms), 1),
        loop=loop,
    )
    logger.info("Saved %d frames to %s", len(frames), output)
    return output


__all__ = [
    "BACKGROUND_COLOR",
    "POINT_COLOR",
    "EDGE_COLOR",
    "GraphDrawer",
    "PillowGraphDrawer",
    "get_graph_drawer",
    "frame_to_array",
    "save_animation",
]
