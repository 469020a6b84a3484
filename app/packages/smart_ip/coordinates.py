"""Coordinate formatting.

Converts signed decimal degrees into degrees/minutes/seconds for display,
e.g. ``-45.5075`` latitude becomes ``45° 30' 27" S``.
"""

import math
from dataclasses import dataclass
from enum import Enum


class InvalidInputError(ValueError):
    """Raised when a coordinate has no DMS decomposition (NaN or infinite)."""


class Axis(Enum):
    """Coordinate axis, selects the hemisphere letters."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"


# (non-negative, negative)
HEMISPHERE_LETTERS = {
    Axis.LATITUDE: ("N", "S"),
    Axis.LONGITUDE: ("E", "W"),
}

SECONDS_PRECISION = 6


@dataclass(frozen=True)
class DMS:
    """Degrees/minutes/seconds decomposition of a coordinate."""

    degrees: int
    minutes: int
    seconds: float
    hemisphere_negative: bool


def to_dms(coord: float) -> DMS:
    """Decompose a decimal-degree coordinate into degrees, minutes and seconds.

    Each step multiplies the remaining fraction by 60 and floors it to get the
    next unit. Seconds are rounded to 6 decimal places; a rounding result of
    60 seconds carries into minutes (and 60 minutes into degrees).

    Args:
        coord: Signed coordinate in decimal degrees

    Returns:
        DMS with non-negative components and the sign in hemisphere_negative

    Raises:
        InvalidInputError: If coord is NaN or infinite
    """
    if not math.isfinite(coord):
        raise InvalidInputError(f"Coordinate must be a finite number, got {coord!r}")

    value = abs(coord)
    degrees = math.floor(value)
    remainder = (value - degrees) * 60
    minutes = math.floor(remainder)
    seconds = round((remainder - minutes) * 60, SECONDS_PRECISION)

    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    return DMS(
        degrees=degrees,
        minutes=minutes,
        seconds=float(seconds),
        hemisphere_negative=coord < 0,
    )


def _format_seconds(seconds: float) -> str:
    text = f"{seconds:.{SECONDS_PRECISION}f}".rstrip("0").rstrip(".")
    return text or "0"


def format_dms(coord: float, axis: Axis) -> str:
    """Format a coordinate for display, e.g. ``40° 42' 46.08" N``.

    Raises:
        InvalidInputError: If coord is NaN or infinite
    """
    dms = to_dms(coord)
    positive, negative = HEMISPHERE_LETTERS[axis]
    hemisphere = negative if dms.hemisphere_negative else positive
    return (
        f"{dms.degrees}° {dms.minutes}' {_format_seconds(dms.seconds)}\" {hemisphere}"
    )
