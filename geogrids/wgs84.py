"""
Ready-to-use converters for the WGS84 ellipsoid
"""

__all__ = ['default_mgrs', 'default_ups', 'default_utm']

from functools import lru_cache

from geogrids.ellipsoids import WGS84
from geogrids.mgrs import MGRS
from geogrids.ups import UPS
from geogrids.utm import UTM


@lru_cache(maxsize=1)
def default_utm() -> UTM:
    """The shared WGS84 UTM converter, built on first use"""
    return UTM.from_ellipsoid(WGS84)


@lru_cache(maxsize=1)
def default_ups() -> UPS:
    """The shared WGS84 UPS converter, built on first use"""
    return UPS.from_ellipsoid(WGS84)


@lru_cache(maxsize=1)
def default_mgrs() -> MGRS:
    """The shared WGS84 MGRS converter, built on first use"""
    return MGRS.from_ellipsoid(WGS84)
