"""Adapters between a Matplotlib Axes and the scale bar math.

The x axis is longitude and the y axis is latitude, both in degrees.
"""

from __future__ import annotations

from map_scale.distance import ViewBounds

__all__ = ["is_view", "bounds_from_axes", "container_height_in"]

_VIEW_METHODS = ("get_xlim", "get_ylim", "add_artist", "get_children")


def is_view(obj: object) -> bool:
    """Return True if ``obj`` behaves like an Axes that can host the overlay."""
    if isinstance(obj, (str, bytes)):
        return False
    if not all(callable(getattr(obj, name, None)) for name in _VIEW_METHODS):
        return False
    return getattr(obj, "figure", None) is not None


def bounds_from_axes(ax) -> ViewBounds:
    return ViewBounds.from_limits(ax.get_xlim(), ax.get_ylim())


def container_height_in(ax) -> float:
    """Physical height of the Axes box in inches.

    Read from the Axes display box, so it follows figure resizes but not
    zoom, and works for Axes placed inside a ``SubFigure``.

    Notes
    -----
    This is the inner plotting box. Tick labels and titles are not
    included, so the height does not jump when tick labels change on zoom.
    """
    return float(ax.get_window_extent().height) / float(ax.figure.dpi)
