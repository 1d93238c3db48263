"""Errors raised while parsing scale bar arguments.

All of them are raised before the view is touched, so a failed call leaves
any existing overlay exactly as it was.
"""

from __future__ import annotations

__all__ = [
    "ScaleBarError",
    "InvalidWidthError",
    "InvalidUnitsError",
    "InvalidLocationError",
    "UnrecognizedParameterError",
    "InvalidViewError",
]


class ScaleBarError(ValueError):
    """Base class for argument errors; ``code`` identifies the failure kind."""

    code = "MAPSCALE:ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidWidthError(ScaleBarError):
    code = "MAPSCALE:WIDTH"


class InvalidUnitsError(ScaleBarError):
    code = "MAPSCALE:UNITS"


class InvalidLocationError(ScaleBarError):
    code = "MAPSCALE:LOCATION"


class UnrecognizedParameterError(ScaleBarError):
    code = "MAPSCALE:PARAM"


class InvalidViewError(ScaleBarError):
    code = "MAPSCALE:VIEW"
