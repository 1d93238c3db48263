"""Matplotlib artists for the scale bar overlay.

Every artist created here carries the gid ``SCALE_TAG``. Any code can find
or remove the overlay by that tag without going through a controller, and
artists without the tag are never touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon
from matplotlib.text import Text

from map_scale.constants import SCALE_TAG
from map_scale.logger import get_logger, view_label
from map_scale.placement import Placement
from map_scale.units import ScaleSpec

LOGGER = get_logger(__name__)

__all__ = ["OverlayArtifacts", "find_overlay_artists", "remove_overlay", "draw_overlay"]


@dataclass(frozen=True)
class OverlayArtifacts:
    box: Polygon
    line: Line2D
    label: Text

    def __iter__(self):
        return iter((self.box, self.line, self.label))


def find_overlay_artists(ax) -> List[Artist]:
    return [child for child in ax.get_children() if child.get_gid() == SCALE_TAG]


def remove_overlay(ax) -> int:
    """Remove all tagged artists from ``ax`` and return how many were removed."""
    old = find_overlay_artists(ax)
    for artist in old:
        artist.remove()
    if old:
        LOGGER.debug("Removed %d scale bar artists", len(old), extra={"view": view_label(ax)})
    return len(old)


def draw_overlay(ax, placement: Placement, spec: ScaleSpec, font_size: float) -> OverlayArtifacts:
    """Replace the overlay on ``ax`` with a box, baseline and label.

    Artists are added with ``add_artist`` so they do not extend the data
    limits or trigger autoscaling.
    """
    box = Polygon(placement.box_xy, closed=True, facecolor="w", edgecolor="k", linewidth=0.5, zorder=5)
    line = Line2D(placement.baseline_lon, placement.baseline_lat, color="k", linewidth=3, zorder=6)
    label = Text(
        placement.label_position[0],
        placement.label_position[1],
        spec.label,
        ha="center",
        va="center",
        fontsize=font_size,
        zorder=7,
    )
    for artist in (box, line, label):
        artist.set_gid(SCALE_TAG)

    remove_overlay(ax)
    ax.add_artist(box)
    ax.add_artist(line)
    ax.add_artist(label)
    LOGGER.debug("Drew scale bar '%s'", spec.label, extra={"view": view_label(ax)})
    return OverlayArtifacts(box=box, line=line, label=label)
