"""Map Scale package."""

from map_scale.api import get_controller, make_scale, remove_scale
from map_scale.config import Anchor, ScaleConfig, UnitSystem, parse_scale_args
from map_scale.constants import SCALE_TAG
from map_scale.controller import ScaleBarController
from map_scale.distance import ViewBounds
from map_scale.errors import (
    InvalidLocationError,
    InvalidUnitsError,
    InvalidViewError,
    InvalidWidthError,
    ScaleBarError,
    UnrecognizedParameterError,
)
from map_scale.overlay_mpl import OverlayArtifacts

__all__ = [
    "__version__",
    "make_scale",
    "remove_scale",
    "get_controller",
    "parse_scale_args",
    "Anchor",
    "ScaleConfig",
    "UnitSystem",
    "SCALE_TAG",
    "ScaleBarController",
    "ViewBounds",
    "OverlayArtifacts",
    "ScaleBarError",
    "InvalidWidthError",
    "InvalidUnitsError",
    "InvalidLocationError",
    "UnrecognizedParameterError",
    "InvalidViewError",
]

__version__ = "1.0.0"
