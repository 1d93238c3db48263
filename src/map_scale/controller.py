"""Controller that keeps a scale bar in sync with its Axes."""

from __future__ import annotations

from typing import List, Optional

from map_scale.config import ScaleConfig
from map_scale.distance import ViewBounds, center_latitude, ground_distance_m
from map_scale.logger import get_logger, view_label
from map_scale.overlay_mpl import OverlayArtifacts, draw_overlay, remove_overlay
from map_scale.placement import compute_placement, label_font_size
from map_scale.units import select_scale
from map_scale.view import bounds_from_axes, container_height_in

LOGGER = get_logger(__name__)

_ZOOM_PAN_MODES = ("zoom rect", "pan/zoom")


class ScaleBarController:
    """Scale bar bound to one Axes with a fixed configuration.

    Notes
    -----
    The controller connects to the canvas at most once, no matter how
    many times :meth:`refresh` runs. Resize events only rescale the label
    font; zoom-end, pan-end and clicks on the Axes rebuild the overlay from
    the current limits.
    """

    def __init__(self, ax, config: ScaleConfig) -> None:
        self.ax = ax
        self.config = config
        self.artifacts: Optional[OverlayArtifacts] = None
        self._cids: List[int] = []

    @property
    def canvas(self):
        return self.ax.figure.canvas

    @property
    def subscribed(self) -> bool:
        return bool(self._cids)

    def refresh(
        self,
        bounds: Optional[ViewBounds] = None,
        container_height: Optional[float] = None,
    ) -> OverlayArtifacts:
        """Rebuild the overlay from ``bounds`` (default: current Axes limits)."""
        if bounds is None:
            bounds = bounds_from_axes(self.ax)
        if container_height is None:
            container_height = container_height_in(self.ax)
        distance_m = ground_distance_m(bounds)
        spec = select_scale(distance_m, self.config.width_fraction, self.config.unit_system)
        placement = compute_placement(bounds, spec.distance_m, self.config.anchor)
        self.artifacts = draw_overlay(self.ax, placement, spec, label_font_size(container_height))
        LOGGER.debug(
            "Refreshed at center lat %.4f: %s",
            center_latitude(bounds),
            spec.label,
            extra={"view": view_label(self.ax)},
        )
        self.canvas.draw_idle()
        return self.artifacts

    def update_font_size(self, container_height: Optional[float] = None) -> None:
        if self.artifacts is None:
            return
        if container_height is None:
            container_height = container_height_in(self.ax)
        self.artifacts.label.set_fontsize(label_font_size(container_height))

    def subscribe(self) -> None:
        if self._cids:
            return
        canvas = self.canvas
        self._cids = [
            canvas.mpl_connect("resize_event", self._on_resize),
            canvas.mpl_connect("button_press_event", self._on_button_press),
            canvas.mpl_connect("button_release_event", self._on_button_release),
        ]
        LOGGER.info("Scale bar subscribed to canvas events", extra={"view": view_label(self.ax)})

    def unsubscribe(self) -> None:
        if not self._cids:
            return
        for cid in self._cids:
            self.canvas.mpl_disconnect(cid)
        self._cids = []
        LOGGER.info("Scale bar unsubscribed from canvas events", extra={"view": view_label(self.ax)})

    def remove(self) -> int:
        """Disconnect and delete the overlay; returns the number of artists removed."""
        self.unsubscribe()
        self.artifacts = None
        removed = remove_overlay(self.ax)
        self.canvas.draw_idle()
        return removed

    def _navigation_mode(self) -> str:
        toolbar = getattr(self.canvas, "toolbar", None)
        mode = getattr(toolbar, "mode", "")
        return str(mode) if mode else ""

    def _owns(self, inaxes) -> bool:
        """True for the bound Axes or a twinx/twiny partner drawn over it."""
        if inaxes is None:
            return False
        if inaxes is self.ax:
            return True
        return bool(
            self.ax.get_shared_x_axes().joined(self.ax, inaxes)
            or self.ax.get_shared_y_axes().joined(self.ax, inaxes)
        )

    def _on_resize(self, event) -> None:
        self.update_font_size()

    def _on_button_press(self, event) -> None:
        if not self._owns(event.inaxes) or self._navigation_mode():
            return
        self.refresh()

    def _on_button_release(self, event) -> None:
        if self._navigation_mode() not in _ZOOM_PAN_MODES:
            return
        self.refresh()
