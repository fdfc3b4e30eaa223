from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

import numpy as np

from .predicates import always_connected

logger = logging.getLogger(__name__)

ConnectionFn = Callable[["Point", "Point"], bool]
Criteria = Callable[["Point"], bool]

_FIXED_FIELDS = ("angle", "velocity")


@dataclass(eq=False)
class Point:
    """A vertex drifting along a fixed heading.

    ``angle`` (radians) and ``velocity`` are fixed once the point exists; only
    the position changes, one unit step per :meth:`move`. ``velocity`` is kept
    on the point but does not scale the step.
    """

    x: float
    y: float
    angle: float = 0.0
    velocity: float = 0.0

    def __post_init__(self) -> None:
        for name in ("x", "y", "angle"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number")
        if not math.isfinite(self.velocity) or self.velocity < 0.0:
            raise ValueError("velocity must be finite and non-negative")

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"Point.{name} cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def move(self) -> None:
        self.x += math.cos(self.angle)
        self.y += math.sin(self.angle)


class Graph:
    """Ordered set of points plus the proximity relation between them.

    Every mutation rebuilds the ``n x n`` connectivity matrix from
    ``connection_fn``. Each unordered pair is evaluated once, outer index
    first, and mirrored so the matrix is symmetric with a false diagonal.
    """

    def __init__(
        self,
        points: Iterable[Point] | None = None,
        connection_fn: ConnectionFn | None = None,
    ) -> None:
        self._points: List[Point] = list(points or [])
        self.connection_fn: ConnectionFn = connection_fn or always_connected
        self._connections = np.zeros((0, 0), dtype=bool)

        self._init_connections()
        self._calculate_connections()

    def __len__(self) -> int:
        return len(self._points)

    def add_point(self, point: Point) -> None:
        self._points.append(point)
        self._init_connections()
        self._calculate_connections()

    def remove_point(self, point: Point) -> None:
        """Drop every entry that is ``point``; unknown points are ignored."""

        self._points = [p for p in self._points if p is not point]
        self._init_connections()
        self._calculate_connections()

    def remove_points_by_criteria(self, criteria: Criteria) -> List[Point]:
        """Keep only the points satisfying ``criteria`` and return the dropped ones."""

        kept: List[Point] = []
        removed: List[Point] = []
        for point in self._points:
            (kept if criteria(point) else removed).append(point)
        if removed:
            logger.debug("Removing %d of %d points", len(removed), len(self._points))
        self._points = kept
        self._init_connections()
        self._calculate_connections()
        return removed

    def move(self) -> None:
        """Advance every point one step and refresh connectivity."""

        for point in self._points:
            point.move()
        self._calculate_connections()

    def get_points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def get_connections(self) -> np.ndarray:
        """Return a read-only view of the ``n x n`` boolean connectivity matrix."""

        view = self._connections.view()
        view.flags.writeable = False
        return view

    def edges(self) -> List[Tuple[int, int]]:
        """Connected index pairs ``(i, j)`` with ``j < i``, ordered by ``i`` then ``j``."""

        rows, cols = np.nonzero(np.tril(self._connections, k=-1))
        return [(int(i), int(j)) for i, j in zip(rows, cols)]

    def positions(self) -> List[Tuple[float, float]]:
        return [(point.x, point.y) for point in self._points]

    def _init_connections(self) -> None:
        n = len(self._points)
        self._connections = np.zeros((n, n), dtype=bool)

    def _calculate_connections(self) -> None:
        points = self._points
        n = len(points)
        if n != self._connections.shape[0]:
            self._init_connections()
        if n < 2:
            return

        for i in range(1, n):
            a = points[i]
            for j in range(i):
                connected = bool(self.connection_fn(a, points[j]))
                self._connections[i, j] = connected
                self._connections[j, i] = connected
