"""
Universal Transverse Mercator grid, built from sixty Transverse Mercator zones
"""

__all__ = ['UTM', 'ZONE_EXCEPTIONS', 'ZoneException', 'central_meridian', 'natural_zone']

import math
from typing import NamedTuple, Tuple

from pydantic import validate_call

from geogrids._const import (
    EPSILON_RADIANS, TWO_PI, UTM_FALSE_EASTING, UTM_MAX_EASTING, UTM_MAX_LAT,
    UTM_MAX_NORTHING, UTM_MIN_EASTING, UTM_MIN_LAT, UTM_MIN_NORTHING, UTM_SCALE_FACTOR,
    UTM_SOUTH_FALSE_NORTHING, WGS84_A, WGS84_CODE, WGS84_F,
)
from geogrids.coordinates import GeodeticCoordinate, Hemisphere, MapCoordinate, UTMCoordinate
from geogrids.ellipsoids import Ellipsoid, validate_ellipsoid
from geogrids.errors import RangeError
from geogrids.transverse_mercator import TransverseMercator
from geogrids.utils.functions import ensure_finite

_ZONE_COUNT = 60


class ZoneException(NamedTuple):
    """
    A region, in whole degrees (inclusive), whose points are assigned a zone
    other than the one their longitude implies
    """
    lat_min: int
    lat_max: int
    lon_min: int
    lon_max: int
    zone: int

    def contains(self, lat_degrees: int, lon_degrees: int) -> bool:
        return (
            self.lat_min <= lat_degrees <= self.lat_max
            and self.lon_min <= lon_degrees <= self.lon_max
        )


# Southern Norway and Svalbard; evaluated in order, the last match wins
ZONE_EXCEPTIONS: Tuple[ZoneException, ...] = (
    ZoneException(56, 63, 0, 2, 31),
    ZoneException(56, 63, 3, 11, 32),
    ZoneException(72, 90, 0, 8, 31),
    ZoneException(72, 90, 9, 20, 33),
    ZoneException(72, 90, 21, 32, 35),
    ZoneException(72, 90, 33, 41, 37),
)


def central_meridian(zone: int) -> float:
    """
    The central meridian of a UTM zone.

    Args:
        zone:
            The UTM zone, 1 through 60

    Returns:
        (float) the central meridian in radians, within (0, 2pi); zones 1
        through 30 are measured eastward past pi rather than negated

    Raises:
        RangeError: if the zone is not within 1 through 60
    """
    if not 1 <= zone <= _ZONE_COUNT:
        raise RangeError('zone')

    if zone >= 31:
        return (6 * zone - 183) * math.pi / 180
    return (6 * zone + 177) * math.pi / 180


def natural_zone(longitude: float) -> int:
    """
    The UTM zone a longitude falls in, ignoring the Norway/Svalbard exceptions.

    Args:
        longitude:
            Longitude in radians, within [-pi, 2pi]

    Returns:
        (int) the zone, 1 through 60
    """
    if longitude < 0:
        longitude += TWO_PI

    degrees = (longitude + 1.0e-10) * 180.0 / math.pi
    if longitude < math.pi:
        zone = int(31 + degrees / 6.0)
    else:
        zone = int(degrees / 6.0 - 29)

    if zone > _ZONE_COUNT:
        zone = 1
    return zone


def _override_zone(zone: int, override: int) -> int:
    """Accepts an override within one zone of the computed zone, wrapping 60 to 1"""
    if (zone == 1 and override == 60) or (zone == 60 and override == 1):
        return override
    if zone - 1 <= override <= zone + 1:
        return override
    raise RangeError('zone', 'zone override is more than one zone from the computed zone')


class UTM:
    """
    Converts between geodetic coordinates and UTM coordinates (zone,
    hemisphere, easting, northing).

    Args:
        semi_major_axis: (Default WGS84)
            Semi-major axis of the ellipsoid, in meters

        flattening: (Default WGS84)
            Flattening of the ellipsoid; its inverse must lie within [250, 350]

        ellipsoid_code: (Default 'WE')
            Two-letter code of the ellipsoid, selects the series coefficients

        zone_override: (Default 0)
            A zone to prefer over the computed one when within one zone of it;
            0 disables the override
    """

    @validate_call
    def __init__(
        self,
        semi_major_axis: float = WGS84_A,
        flattening: float = WGS84_F,
        ellipsoid_code: str = WGS84_CODE,
        zone_override: int = 0,
    ):
        validate_ellipsoid(semi_major_axis, flattening)
        if not 0 <= zone_override <= _ZONE_COUNT:
            raise RangeError('zone_override')

        self._semi_major_axis = semi_major_axis
        self._flattening = flattening
        self._ellipsoid_code = ellipsoid_code
        self._zone_override = zone_override

        self._zones = tuple(
            TransverseMercator(
                semi_major_axis,
                flattening,
                central_meridian(zone),
                0.0,
                UTM_FALSE_EASTING,
                0.0,
                UTM_SCALE_FACTOR,
                ellipsoid_code,
            )
            for zone in range(1, _ZONE_COUNT + 1)
        )

    @classmethod
    def from_ellipsoid(cls, ellipsoid: Ellipsoid, zone_override: int = 0) -> 'UTM':
        """Creates a UTM converter for a registered Ellipsoid"""
        return cls(
            ellipsoid.semi_major_axis,
            ellipsoid.flattening,
            ellipsoid.code,
            zone_override,
        )

    def __repr__(self):
        return f'<UTM(ellipsoid={self._ellipsoid_code}, zone_override={self._zone_override})>'

    @property
    def semi_major_axis(self) -> float:
        return self._semi_major_axis

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def ellipsoid_code(self) -> str:
        return self._ellipsoid_code

    @property
    def zone_override(self) -> int:
        return self._zone_override

    def projection(self, zone: int) -> TransverseMercator:
        """The Transverse Mercator projection backing a zone"""
        if not 1 <= zone <= _ZONE_COUNT:
            raise RangeError('zone')
        return self._zones[zone - 1]

    def convert_from_geodetic(
        self,
        coordinate: GeodeticCoordinate,
        zone_override: int = 0
    ) -> UTMCoordinate:
        """
        Converts a geodetic coordinate to a UTM coordinate.

        The zone is taken from the longitude, then replaced by the call's
        zone_override, or failing that the converter's own override, as long
        as it lies within one zone of the computed zone. Without any override,
        the southern Norway and Svalbard exceptions apply.

        Args:
            coordinate:
                The GeodeticCoordinate to convert; latitude within
                [-80.5, 84.5) degrees and longitude within [-180, 360] degrees,
                each with a tolerance of about one meter

            zone_override: (Default 0)
                A zone to prefer for this call only; 0 defers to the
                converter's own override

        Returns:
            UTMCoordinate

        Raises:
            RangeError: if the coordinate lies outside the UTM domain or an
                override is not adjacent to the computed zone
        """
        latitude, longitude = coordinate.latitude, coordinate.longitude
        ensure_finite(latitude, longitude)

        if latitude < UTM_MIN_LAT - EPSILON_RADIANS or latitude >= UTM_MAX_LAT + EPSILON_RADIANS:
            raise RangeError('latitude')
        if longitude < -math.pi - EPSILON_RADIANS or longitude > TWO_PI + EPSILON_RADIANS:
            raise RangeError('longitude')
        if not 0 <= zone_override <= _ZONE_COUNT:
            raise RangeError('zone_override')

        if -1.0e-9 < latitude < 0:
            latitude = 0.0

        if longitude < 0:
            longitude += TWO_PI

        zone = natural_zone(longitude)

        if zone_override:
            zone = _override_zone(zone, zone_override)
        elif self._zone_override:
            zone = _override_zone(zone, self._zone_override)
        else:
            lat_degrees = int(math.degrees(latitude))
            lon_degrees = int(math.degrees(longitude))
            for exception in ZONE_EXCEPTIONS:
                if exception.contains(lat_degrees, lon_degrees):
                    zone = exception.zone

        if latitude < 0:
            hemisphere = Hemisphere.SOUTH
            false_northing = UTM_SOUTH_FALSE_NORTHING
        else:
            hemisphere = Hemisphere.NORTH
            false_northing = 0.0

        projected = self._zones[zone - 1].convert_from_geodetic(
            GeodeticCoordinate(latitude, longitude)
        )
        easting = projected.easting
        northing = projected.northing + false_northing

        if not UTM_MIN_EASTING <= easting <= UTM_MAX_EASTING:
            raise RangeError('easting')
        if not UTM_MIN_NORTHING <= northing <= UTM_MAX_NORTHING:
            raise RangeError('northing')

        return UTMCoordinate(zone, hemisphere, easting, northing)

    def convert_to_geodetic(self, coordinate: UTMCoordinate) -> GeodeticCoordinate:
        """
        Converts a UTM coordinate to a geodetic coordinate.

        Args:
            coordinate:
                The UTMCoordinate to convert; easting within [100000, 900000]
                and northing within [0, 10000000]

        Returns:
            GeodeticCoordinate

        Raises:
            RangeError: if a component is out of range or the resulting
                latitude lies outside the UTM domain
        """
        zone, hemisphere, easting, northing = coordinate

        if not 1 <= zone <= _ZONE_COUNT:
            raise RangeError('zone')
        hemisphere = Hemisphere.parse(hemisphere)
        if not UTM_MIN_EASTING <= easting <= UTM_MAX_EASTING:
            raise RangeError('easting')
        if not UTM_MIN_NORTHING <= northing <= UTM_MAX_NORTHING:
            raise RangeError('northing')

        false_northing = UTM_SOUTH_FALSE_NORTHING if hemisphere is Hemisphere.SOUTH else 0.0

        geodetic = self._zones[int(zone) - 1].convert_to_geodetic(
            MapCoordinate(easting, northing - false_northing)
        )

        if (
            geodetic.latitude < UTM_MIN_LAT - EPSILON_RADIANS
            or geodetic.latitude >= UTM_MAX_LAT + EPSILON_RADIANS
        ):
            raise RangeError('latitude', 'resulting latitude out of range')

        return geodetic
