"""Ground distance spanned by a degree-based view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from map_scale.constants import EARTH_RADIUS_M

__all__ = ["ViewBounds", "center_latitude", "ground_distance_m"]


@dataclass(frozen=True)
class ViewBounds:
    """Visible extent of the view in degrees."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    @classmethod
    def from_limits(cls, xlim: Sequence[float], ylim: Sequence[float]) -> "ViewBounds":
        """Build bounds from Axes x (longitude) and y (latitude) limits.

        Inverted axes are accepted; limits are sorted.
        """
        x0, x1 = float(xlim[0]), float(xlim[1])
        y0, y1 = float(ylim[0]), float(ylim[1])
        return cls(
            lat_min=min(y0, y1),
            lat_max=max(y0, y1),
            lon_min=min(x0, x1),
            lon_max=max(x0, x1),
        )

    @property
    def dlat(self) -> float:
        return self.lat_max - self.lat_min

    @property
    def dlon(self) -> float:
        return self.lon_max - self.lon_min


def center_latitude(bounds: ViewBounds) -> float:
    return (bounds.lat_min + bounds.lat_max) / 2.0


def ground_distance_m(bounds: ViewBounds) -> float:
    """Distance along the center-latitude parallel spanned by the longitude extent.

    Uses a spherical tangent approximation, so it is only meaningful for
    modest extents. Returns 0 when the center latitude is outside [-90, 90].
    """
    mlat = center_latitude(bounds)
    if abs(mlat) > 90:
        return 0.0
    return EARTH_RADIUS_M * math.cos(math.radians(mlat)) * math.radians(bounds.dlon)
