"""Nice-number selection and unit labels for the scale bar."""

from __future__ import annotations

import math
from dataclasses import dataclass

from map_scale.config import UnitSystem
from map_scale.constants import (
    FOOT_LABEL_DIVISOR,
    INCHES_PER_FOOT,
    METERS_PER_FOOT,
    MILES_PER_METER,
)

__all__ = ["ScaleSpec", "nice_round", "round_to_base", "format_magnitude", "select_scale"]


@dataclass(frozen=True)
class ScaleSpec:
    """Chosen bar length.

    ``distance_m`` is the ground length the drawn bar represents, which is
    the rounded value converted back to meters rather than the raw target.
    """

    magnitude: float
    unit_label: str
    distance_m: float

    @property
    def label(self) -> str:
        return f"{format_magnitude(self.magnitude)} {self.unit_label}"


def nice_round(x: float) -> float:
    """Round down to 1, 2 or 5 times a power of ten.

    Returns 0 for non-positive or non-finite input.
    """
    if not math.isfinite(x) or x <= 0:
        return 0.0
    power = math.floor(math.log10(x))
    scale = 10.0**power
    mantissa = x / scale
    if mantissa >= 5:
        nice = 5
    elif mantissa >= 2:
        nice = 2
    else:
        nice = 1
    return nice * scale


def round_to_base(x: float, base: float = 1.0) -> float:
    """Round to the nearest multiple of ``base``, halves away from zero."""
    return math.copysign(math.floor(abs(x) / base + 0.5), x) * base


def format_magnitude(value: float) -> str:
    nearest = round(value)
    if abs(value - nearest) <= 1e-9 * max(1.0, abs(value)):
        return str(int(nearest))
    return f"{value:.5g}"


def select_scale(distance_m: float, width_fraction: float, unit_system: UnitSystem) -> ScaleSpec:
    """Pick a magnitude and unit for ``distance_m * width_fraction``.

    Metric tiers are km, m and mm. The m/mm boundary compares the target
    length against ``width_fraction``, matching the long-standing behavior
    of the tool. Imperial tiers are mi, ft and in.
    """
    target = distance_m * width_fraction
    if unit_system is UnitSystem.METRIC:
        rounded = nice_round(target)
        if target > 1e3:
            return ScaleSpec(rounded / 1e3, "km", rounded)
        if target > width_fraction:
            return ScaleSpec(rounded, "m", rounded)
        return ScaleSpec(rounded * 1e3, "mm", rounded)

    if target > 1 / MILES_PER_METER:
        miles = nice_round(target * MILES_PER_METER)
        return ScaleSpec(miles, "mi", miles / MILES_PER_METER)
    if target > METERS_PER_FOOT:
        feet = nice_round(target / FOOT_LABEL_DIVISOR)
        return ScaleSpec(feet, "ft", feet * METERS_PER_FOOT)
    inches = round_to_base(target / FOOT_LABEL_DIVISOR * INCHES_PER_FOOT, 1.0)
    return ScaleSpec(inches, "in", inches / INCHES_PER_FOOT * METERS_PER_FOOT)
