"""Module for numeric helpers shared by the projections"""

__all__ = ['atanh', 'ensure_finite', 'wrap_longitude']

import math

from geogrids._const import TWO_PI
from geogrids.errors import RangeError


def atanh(value: float) -> float:
    """Inverse hyperbolic tangent, evaluated as 0.5 * ln((1 + x) / (1 - x))"""
    return 0.5 * math.log((1 + value) / (1 - value))


def wrap_longitude(longitude: float) -> float:
    """
    Shifts a longitude by one revolution, at most, into [-pi, pi].

    Args:
        longitude:
            A longitude in radians, within one revolution of [-pi, pi]

    Returns:
        (float) the wrapped longitude
    """
    if longitude > math.pi:
        longitude -= TWO_PI
    if longitude < -math.pi:
        longitude += TWO_PI
    return longitude


def ensure_finite(latitude: float, longitude: float) -> None:
    """
    Rejects NaN and infinite geodetic values before any trigonometry runs.

    Raises:
        RangeError: if either value is not finite
    """
    if not math.isfinite(latitude):
        raise RangeError('latitude')
    if not math.isfinite(longitude):
        raise RangeError('longitude')
