"""Scale bar configuration and argument parsing."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from map_scale.constants import (
    DEFAULT_LOCATION,
    DEFAULT_UNITS,
    DEFAULT_WIDTH_FRACTION,
    MAX_WIDTH_FRACTION,
    MIN_WIDTH_FRACTION,
)
from map_scale.errors import (
    InvalidLocationError,
    InvalidUnitsError,
    InvalidWidthError,
    UnrecognizedParameterError,
)
from map_scale.logger import get_logger
from map_scale.view import is_view

LOGGER = get_logger(__name__)

__all__ = [
    "Anchor",
    "UnitSystem",
    "LOCATION_ALIASES",
    "ScaleConfig",
    "clamp_width",
    "parse_anchor",
    "parse_units",
    "parse_width",
    "parse_scale_args",
]


class Anchor(str, Enum):
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"
    N = "n"
    S = "s"

    @property
    def is_south(self) -> bool:
        return self in (Anchor.SE, Anchor.SW, Anchor.S)

    @property
    def is_east(self) -> bool:
        return self in (Anchor.NE, Anchor.SE)

    @property
    def is_west(self) -> bool:
        return self in (Anchor.NW, Anchor.SW)


class UnitSystem(str, Enum):
    METRIC = "si"
    IMPERIAL = "imp"


LOCATION_ALIASES: Dict[str, Anchor] = {
    "northeast": Anchor.NE,
    "ne": Anchor.NE,
    "north": Anchor.N,
    "n": Anchor.N,
    "southeast": Anchor.SE,
    "se": Anchor.SE,
    "south": Anchor.S,
    "s": Anchor.S,
    "southwest": Anchor.SW,
    "sw": Anchor.SW,
    "northwest": Anchor.NW,
    "nw": Anchor.NW,
}

_PARAM_NAMES = ("units", "location", "width", "set_callbacks")


def clamp_width(width: float) -> float:
    """Bound a width fraction to [0.1, 0.9]."""
    return min(max(width, MIN_WIDTH_FRACTION), MAX_WIDTH_FRACTION)


def parse_width(value: Any) -> float:
    """Validate and clamp a width fraction."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidWidthError(f"WIDTH must be a real number, got {value!r}")
    value = float(value)
    if math.isnan(value):
        raise InvalidWidthError("WIDTH must be a real number, got nan")
    return clamp_width(value)


def parse_units(value: Any) -> UnitSystem:
    if isinstance(value, UnitSystem):
        return value
    if isinstance(value, str):
        try:
            return UnitSystem(value.lower())
        except ValueError:
            pass
    raise InvalidUnitsError(f"UNITS must be one of the following: si, imp (got {value!r})")


def parse_anchor(value: Any) -> Anchor:
    if isinstance(value, Anchor):
        return value
    if isinstance(value, str) and value.lower() in LOCATION_ALIASES:
        return LOCATION_ALIASES[value.lower()]
    raise InvalidLocationError(
        f"LOCATION must be one of the following: {', '.join(LOCATION_ALIASES)} (got {value!r})"
    )


@dataclass(frozen=True)
class ScaleConfig:
    """Options captured when a scale bar is bound to a view.

    Notes
    -----
    Instances are immutable; rebinding a view with different options means
    building a new config.
    """

    width_fraction: float = DEFAULT_WIDTH_FRACTION
    anchor: Anchor = LOCATION_ALIASES[DEFAULT_LOCATION]
    unit_system: UnitSystem = UnitSystem(DEFAULT_UNITS)
    auto_refresh: bool = True

    @classmethod
    def from_options(
        cls,
        *,
        width: Any = DEFAULT_WIDTH_FRACTION,
        location: Any = DEFAULT_LOCATION,
        units: Any = DEFAULT_UNITS,
        set_callbacks: Any = True,
    ) -> "ScaleConfig":
        """Validate loose option values and build a config."""
        return cls(
            width_fraction=parse_width(width),
            anchor=parse_anchor(location),
            unit_system=parse_units(units),
            auto_refresh=bool(set_callbacks),
        )


def parse_scale_args(*args: Any, **kwargs: Any) -> Tuple[Optional[object], ScaleConfig]:
    """Parse the flat ``name, value`` argument grammar.

    Parameters
    ----------
    *args
        Optional leading view (anything passing :func:`map_scale.view.is_view`)
        followed by name/value pairs: ``units``, ``location``, ``width``,
        ``set_callbacks``. Names are case-insensitive.
    **kwargs
        The same options as keywords, plus ``ax`` for the view. Keywords win
        over positional pairs.

    Returns
    -------
    view, config : tuple[object or None, ScaleConfig]
        The view is ``None`` when none was supplied.

    Raises
    ------
    ScaleBarError
        On the first invalid value or unknown name. Nothing is mutated.
    """
    view = kwargs.pop("ax", None)
    options: Dict[str, Any] = {}
    items = list(args)
    idx = 0
    if items and is_view(items[0]):
        if view is None:
            view = items[0]
        idx = 1
    while idx < len(items):
        name = items[idx]
        if not isinstance(name, str):
            _fail(UnrecognizedParameterError(f"Unrecognized parameter: {name!r}"))
        key = name.lower()
        if key not in _PARAM_NAMES:
            _fail(UnrecognizedParameterError(f"Unrecognized parameter: {name}"))
        if idx + 1 >= len(items):
            _fail(UnrecognizedParameterError(f"Missing value for parameter: {name}"))
        options[key] = items[idx + 1]
        idx += 2
    for name, value in kwargs.items():
        key = name.lower()
        if key not in _PARAM_NAMES:
            _fail(UnrecognizedParameterError(f"Unrecognized parameter: {name}"))
        options[key] = value
    try:
        config = ScaleConfig.from_options(**options)
    except (InvalidWidthError, InvalidUnitsError, InvalidLocationError) as exc:
        _fail(exc)
    return view, config


def _fail(exc: Exception) -> None:
    LOGGER.debug("Rejected scale bar arguments: %s", exc)
    raise exc
