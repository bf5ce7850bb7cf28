from geogrids._version import __version__  # noqa: F401
from geogrids.utils.logging import LOGGER
from geogrids.coordinates import (
    GeodeticCoordinate, Hemisphere, MapCoordinate, UPSCoordinate, UTMCoordinate
)
from geogrids.ellipsoids import ELLIPSOIDS, WGS84, Ellipsoid, get_ellipsoid
from geogrids.errors import (
    ConvergenceError, CoordinateConversionError, MGRSConsistencyError, MGRSFormatError,
    RangeError, UnknownEllipsoidError
)
from geogrids.transverse_mercator import TransverseMercator
from geogrids.polar_stereographic import PolarStereographic
from geogrids.utm import UTM
from geogrids.ups import UPS
from geogrids.mgrs import MGRS
from geogrids.wgs84 import default_mgrs, default_ups, default_utm

__all__ = [
    'ConvergenceError',
    'CoordinateConversionError',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GeodeticCoordinate',
    'Hemisphere',
    'MGRS',
    'MGRSConsistencyError',
    'MGRSFormatError',
    'MapCoordinate',
    'PolarStereographic',
    'RangeError',
    'TransverseMercator',
    'UPS',
    'UPSCoordinate',
    'UTM',
    'UTMCoordinate',
    'UnknownEllipsoidError',
    'WGS84',
    'default_mgrs',
    'default_ups',
    'default_utm',
    'get_ellipsoid',
    'LOGGER',
]
