"""proximity_graph package."""

from .core import Graph, Point
from .predicates import (
    DISTANCE_BETWEEN_VERTICES,
    ConnectionPredicate,
    always_connected,
    euclidean_distance,
    inside_canvas,
    within_distance,
)
from .rendering import GraphDrawer, PillowGraphDrawer, frame_to_array, get_graph_drawer, save_animation
from .scene import ProximityScene, SceneConfig

__all__ = [
	"Point",
	"Graph",
	"ConnectionPredicate",
	"DISTANCE_BETWEEN_VERTICES",
	"always_connected",
	"euclidean_distance",
	"within_distance",
	"inside_canvas",
	"SceneConfig",
	"ProximityScene",
	"GraphDrawer",
	"PillowGraphDrawer",
	"get_graph_drawer",
	"frame_to_array",
	"save_animation",
	"run_live_view",
]
__version__ = "0.1.0"


def __getattr__(name: str):
    # matplotlib is only imported when the live view is requested.
    if name == "run_live_view":
        from .viewer import run_live_view

        return run_live_view
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
