"""Interactive matplotlib window for a :class:`ProximityScene`.

Left-click inside the canvas to spawn a point, ``c`` clears the graph and
``q`` closes the window.
"""

from __future__ import annotations

import logging
from typing import Tuple

import matplotlib.pyplot as plt
from matplotlib import animation
from matplotlib.figure import Figure

from .rendering import frame_to_array
from .scene import ProximityScene

logger = logging.getLogger(__name__)


def run_live_view(
    scene: ProximityScene,
    *,
    interval_ms: int = 16,
    show: bool = True,
) -> Tuple[Figure, animation.FuncAnimation]:
    """Open the live view and animate ``scene`` every ``interval_ms``.

    The caller must keep the returned animation alive when ``show`` is false.
    """

    width, height = scene.config.canvas_size
    fig, ax = plt.subplots(figsize=(width / 100.0, height / 100.0))
    image = ax.imshow(frame_to_array(scene.render()), extent=(0, width, height, 0), origin="upper")
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)

    def on_click(event) -> None:
        if event.inaxes != ax or event.button != 1:
            return
        if event.xdata is None or event.ydata is None:
            return
        scene.spawn_at(event.xdata, event.ydata)

    def on_key(event) -> None:
        if event.key == "c":
            scene.clear()
            logger.info("Cleared all points")
        elif event.key == "q":
            plt.close(fig)

    def update(_frame: int):
        image.set_data(frame_to_array(scene.step()))
        return (image,)

    fig.canvas.mpl_connect("button_press_event", on_click)
    fig.canvas.mpl_connect("key_press_event", on_key)

    anim = animation.FuncAnimation(
        fig,
        update,
        interval=interval_ms,
        blit=False,
        cache_frame_data=False,
    )

    if show:
        plt.show()
    return fig, anim


__all__ = ["run_live_view"]
