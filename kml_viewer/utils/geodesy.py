"""Spherical-Earth distance and coordinate usability checks.

Every builder decides whether to fold a coordinate pair through
``check_coordinate`` before touching its values, so the skip rules live
in one place:

- ``MISSING``: not a sequence, or fewer than two components
- ``NON_NUMERIC``: lon or lat is not a finite real number
  (strings, booleans, ``None``, ``nan`` and ``inf`` all fail)
- ``USABLE``: safe to destructure as ``(lon, lat)``
"""

from __future__ import annotations

import enum
import math

from kml_viewer.core.constants import EARTH_RADIUS_KM


class CoordinateStatus(enum.Enum):
    """Outcome of the per-coordinate validity check."""

    USABLE = "usable"
    MISSING = "missing"
    NON_NUMERIC = "non_numeric"


def check_coordinate(pair: object) -> CoordinateStatus:
    """Classify a raw ``[lon, lat, ...]`` coordinate pair."""
    if not isinstance(pair, list | tuple) or len(pair) < 2:
        return CoordinateStatus.MISSING
    if not (_is_finite_number(pair[0]) and _is_finite_number(pair[1])):
        return CoordinateStatus.NON_NUMERIC
    return CoordinateStatus.USABLE


def is_usable(pair: object) -> bool:
    return check_coordinate(pair) is CoordinateStatus.USABLE


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres using the haversine formula.

    Args:
        lat1, lon1: First point (degrees).
        lat2, lon2: Second point (degrees).

    Returns:
        Distance in kilometres on a sphere of radius ``EARTH_RADIUS_KM``.
        Non-finite inputs propagate ``nan``; callers filter with
        ``check_coordinate`` first.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a past 1.0 for near-antipodal points.
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
