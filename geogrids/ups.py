"""
Universal Polar Stereographic grid, covering the regions poleward of UTM
"""

__all__ = ['UPS']

import math

from pydantic import validate_call

from geogrids._const import (
    EPSILON_RADIANS, TWO_PI, UPS_FALSE_EASTING, UPS_FALSE_NORTHING, UPS_MAX_EAST_NORTH,
    UPS_MAX_LAT, UPS_MAX_SOUTH_LAT, UPS_MIN_EAST_NORTH, UPS_MIN_NORTH_LAT, UPS_SCALE_FACTOR,
    WGS84_A, WGS84_F,
)
from geogrids.coordinates import GeodeticCoordinate, Hemisphere, MapCoordinate, UPSCoordinate
from geogrids.ellipsoids import Ellipsoid, validate_ellipsoid
from geogrids.errors import RangeError
from geogrids.polar_stereographic import PolarStereographic
from geogrids.utils.functions import ensure_finite


def _in_polar_band(latitude: float) -> bool:
    if latitude < 0:
        return latitude < UPS_MAX_SOUTH_LAT + EPSILON_RADIANS
    return latitude >= UPS_MIN_NORTH_LAT - EPSILON_RADIANS


class UPS:
    """
    Converts between geodetic coordinates and UPS coordinates (hemisphere,
    easting, northing).

    Args:
        semi_major_axis: (Default WGS84)
            Semi-major axis of the ellipsoid, in meters

        flattening: (Default WGS84)
            Flattening of the ellipsoid; its inverse must lie within [250, 350]
    """

    @validate_call
    def __init__(self, semi_major_axis: float = WGS84_A, flattening: float = WGS84_F):
        validate_ellipsoid(semi_major_axis, flattening)

        self._semi_major_axis = semi_major_axis
        self._flattening = flattening
        self._aspects = {
            hemisphere: PolarStereographic.from_scale_factor(
                semi_major_axis,
                flattening,
                0.0,
                UPS_SCALE_FACTOR,
                hemisphere,
                UPS_FALSE_EASTING,
                UPS_FALSE_NORTHING,
            )
            for hemisphere in Hemisphere
        }

    @classmethod
    def from_ellipsoid(cls, ellipsoid: Ellipsoid) -> 'UPS':
        """Creates a UPS converter for a registered Ellipsoid"""
        return cls(ellipsoid.semi_major_axis, ellipsoid.flattening)

    def __repr__(self):
        return f'<UPS(semi_major_axis={self._semi_major_axis}, flattening={self._flattening})>'

    @property
    def semi_major_axis(self) -> float:
        return self._semi_major_axis

    @property
    def flattening(self) -> float:
        return self._flattening

    def projection(self, hemisphere: Hemisphere) -> PolarStereographic:
        """The Polar Stereographic aspect backing a hemisphere"""
        return self._aspects[Hemisphere.parse(hemisphere)]

    def convert_from_geodetic(self, coordinate: GeodeticCoordinate) -> UPSCoordinate:
        """
        Converts a geodetic coordinate to a UPS coordinate.

        Args:
            coordinate:
                The GeodeticCoordinate to convert; latitude north of 83.5
                degrees or south of -79.5 degrees (each with a tolerance of
                about one meter), longitude within [-180, 360] degrees

        Returns:
            UPSCoordinate

        Raises:
            RangeError: if the coordinate lies outside the UPS domain
        """
        latitude, longitude = coordinate.latitude, coordinate.longitude
        ensure_finite(latitude, longitude)

        if not -UPS_MAX_LAT <= latitude <= UPS_MAX_LAT:
            raise RangeError('latitude')
        if not _in_polar_band(latitude):
            raise RangeError('latitude')
        if not -math.pi <= longitude <= TWO_PI:
            raise RangeError('longitude')

        hemisphere = Hemisphere.SOUTH if latitude < 0 else Hemisphere.NORTH
        projected = self._aspects[hemisphere].convert_from_geodetic(coordinate)

        return UPSCoordinate(hemisphere, projected.easting, projected.northing)

    def convert_to_geodetic(self, coordinate: UPSCoordinate) -> GeodeticCoordinate:
        """
        Converts a UPS coordinate to a geodetic coordinate.

        Args:
            coordinate:
                The UPSCoordinate to convert; easting and northing within
                [0, 4000000]

        Returns:
            GeodeticCoordinate

        Raises:
            RangeError: if a component is out of range or the resulting
                latitude lies outside the UPS domain
        """
        hemisphere, easting, northing = coordinate

        hemisphere = Hemisphere.parse(hemisphere)
        if not UPS_MIN_EAST_NORTH <= easting <= UPS_MAX_EAST_NORTH:
            raise RangeError('easting')
        if not UPS_MIN_EAST_NORTH <= northing <= UPS_MAX_EAST_NORTH:
            raise RangeError('northing')

        geodetic = self._aspects[hemisphere].convert_to_geodetic(
            MapCoordinate(easting, northing)
        )

        if not _in_polar_band(geodetic.latitude):
            raise RangeError('latitude', 'resulting latitude out of range')

        return geodetic
