"""Connection predicates and culling criteria for :class:`~proximity_graph.core.Graph`."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .core import Point

DISTANCE_BETWEEN_VERTICES = 200.0


@runtime_checkable
class ConnectionPredicate(Protocol):
    """Decides whether two points share an edge.

    Implementations must only read the two points; mutating the owning graph
    from inside a predicate is not supported.
    """

    def __call__(self, a: Point, b: Point) -> bool:
        ...


def always_connected(a: Point, b: Point) -> bool:
    return True


def euclidean_distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def within_distance(threshold: float = DISTANCE_BETWEEN_VERTICES) -> Callable[[Point, Point], bool]:
    """Return a predicate connecting points strictly closer than ``threshold``."""

    if not math.isfinite(threshold) or threshold < 0.0:
        raise ValueError("threshold must be finite and non-negative")

    def connected(a: Point, b: Point) -> bool:
        return euclidean_distance(a, b) < threshold

    return connected


def inside_canvas(width: float, height: float) -> Callable[[Point], bool]:
    """Return a criterion that holds while a point is strictly inside the canvas."""

    def visible(point: Point) -> bool:
        return 0.0 < point.x < width and 0.0 < point.y < height

    return visible


__all__ = [
    "DISTANCE_BETWEEN_VERTICES",
    "ConnectionPredicate",
    "always_connected",
    "euclidean_distance",
    "within_distance",
    "inside_canvas",
]
