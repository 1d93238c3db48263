"""Anchor-based geometry for the scale bar box, baseline and label."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from map_scale.config import Anchor
from map_scale.constants import (
    BOX_MARGIN_ABOVE,
    BOX_MARGIN_BELOW,
    BOX_MARGIN_LON,
    EARTH_RADIUS_M,
    FONT_SCALE,
    LABEL_OFFSET,
    NORTH_INSET,
    SIDE_INSET,
    SOUTH_INSET,
)
from map_scale.distance import ViewBounds, center_latitude

__all__ = ["Placement", "span_degrees", "compute_placement", "label_font_size"]


@dataclass(frozen=True)
class Placement:
    """Scale bar geometry in data (lon/lat) coordinates.

    Parameters
    ----------
    baseline_lon, baseline_lat : np.ndarray
        Baseline endpoints, shape (2,). Both endpoints share one latitude.
    box_lon, box_lat : np.ndarray
        Box corners, shape (4,), in drawing order.
    label_position : tuple[float, float]
        Label anchor (lon, lat); the label is centered on it.
    """

    baseline_lon: np.ndarray
    baseline_lat: np.ndarray
    box_lon: np.ndarray
    box_lat: np.ndarray
    label_position: Tuple[float, float]

    @property
    def box_xy(self) -> np.ndarray:
        return np.column_stack([self.box_lon, self.box_lat])


def span_degrees(distance_m: float, center_lat: float) -> float:
    """Longitude span covering ``distance_m`` along the ``center_lat`` parallel."""
    if distance_m == 0:
        return 0.0
    return math.degrees(distance_m / (EARTH_RADIUS_M * math.cos(math.radians(center_lat))))


def compute_placement(bounds: ViewBounds, distance_m: float, anchor: Anchor) -> Placement:
    dlat = bounds.dlat
    dlon = bounds.dlon
    span = span_degrees(distance_m, center_latitude(bounds))

    if anchor.is_south:
        lat = bounds.lat_min + SOUTH_INSET * dlat
    else:
        lat = bounds.lat_max - NORTH_INSET * dlat

    if anchor.is_east:
        start = bounds.lon_max - SIDE_INSET * dlon
        lons = np.array([start, start - span])
    elif anchor.is_west:
        start = bounds.lon_min + SIDE_INSET * dlon
        lons = np.array([start, start + span])[::-1]
    else:
        mid = (bounds.lon_min + bounds.lon_max) / 2.0
        lons = np.array([mid - span / 2.0, mid + span / 2.0])[::-1]
    lats = np.array([lat, lat])

    # Endpoint 0 is the eastern end for every anchor.
    east = lons[0] + BOX_MARGIN_LON * dlon
    west = lons[1] - BOX_MARGIN_LON * dlon
    top = lat + BOX_MARGIN_ABOVE * dlat
    bottom = lat - BOX_MARGIN_BELOW * dlat
    box_lon = np.array([east, west, west, east])
    box_lat = np.array([top, top, bottom, bottom])

    label_position = (
        float(box_lon.mean()),
        float(box_lat.mean()) + LABEL_OFFSET * dlat,
    )
    return Placement(
        baseline_lon=lons,
        baseline_lat=lats,
        box_lon=box_lon,
        box_lat=box_lat,
        label_position=label_position,
    )


def label_font_size(container_height_in: float) -> float:
    """Label font size in points for a container of the given height in inches."""
    return container_height_in * FONT_SCALE
