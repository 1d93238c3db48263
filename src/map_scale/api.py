"""Public entry points for adding and removing map scale bars."""

from __future__ import annotations

from typing import Any, Optional

from map_scale.config import parse_scale_args
from map_scale.controller import ScaleBarController
from map_scale.errors import InvalidViewError
from map_scale.logger import get_logger, view_label
from map_scale.overlay_mpl import OverlayArtifacts, remove_overlay

LOGGER = get_logger(__name__)

__all__ = ["make_scale", "remove_scale", "get_controller"]

# The controller lives on its Axes so both are collected together.
_CONTROLLER_ATTR = "_map_scale_controller"


def make_scale(*args: Any, **kwargs: Any) -> OverlayArtifacts:
    """Draw a scale bar on an Axes whose limits are longitude/latitude degrees.

    Parameters
    ----------
    *args
        The Axes, followed by optional name/value pairs.
    ax : matplotlib.axes.Axes, optional
        The Axes, if not passed positionally.
    units : {"si", "imp"}
        Metric (mm/m/km) or imperial (in/ft/mi) labels. Default ``"si"``.
    location : str
        One of ``northeast/ne``, ``northwest/nw``, ``southeast/se``,
        ``southwest/sw``, ``north/n``, ``south/s``. Default ``"se"``.
    width : float
        Target bar length as a fraction of the view width, clamped to
        [0.1, 0.9]. Default 0.2.
    set_callbacks : bool
        Rebuild the bar on zoom, pan and click, and rescale the label on
        resize. Default True.

    Returns
    -------
    OverlayArtifacts
        The box, line and label artists.

    Raises
    ------
    ScaleBarError
        For invalid arguments, before the Axes is modified.

    Examples
    --------
    >>> fig, ax = plt.subplots()
    >>> ax.set_xlim(-100, -90); ax.set_ylim(30, 40)
    >>> make_scale(ax, "location", "south", "units", "imp")
    """
    view, config = parse_scale_args(*args, **kwargs)
    if view is None:
        raise InvalidViewError("An Axes must be passed as the first argument or as ax=")

    _detach(view)
    controller = ScaleBarController(view, config)
    LOGGER.debug(
        "Binding scale bar: location=%s width=%.2f units=%s auto_refresh=%s",
        config.anchor.value,
        config.width_fraction,
        config.unit_system.value,
        config.auto_refresh,
        extra={"view": view_label(view)},
    )
    # Bind only once the first draw succeeded.
    artifacts = controller.refresh()
    if config.auto_refresh:
        controller.subscribe()
        setattr(view, _CONTROLLER_ATTR, controller)
    return artifacts


def remove_scale(ax) -> int:
    """Remove the scale bar and its event bindings from ``ax``."""
    controller = _detach(ax)
    if controller is not None:
        return controller.remove()
    return remove_overlay(ax)


def get_controller(ax) -> Optional[ScaleBarController]:
    return getattr(ax, _CONTROLLER_ATTR, None)


def _detach(ax) -> Optional[ScaleBarController]:
    controller = get_controller(ax)
    if controller is not None:
        controller.unsubscribe()
        setattr(ax, _CONTROLLER_ATTR, None)
    return controller
