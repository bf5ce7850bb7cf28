"""
Polar Stereographic projection between the ellipsoid and the plane tangent
(or secant) to one of the poles.
"""

__all__ = ['PolarStereographic']

import math
from typing import Union

from pydantic import validate_call

from geogrids._const import (
    HALF_PI, PS_DELTA_SCALE, PS_LATITUDE_ITERATIONS, PS_LATITUDE_TOLERANCE,
    PS_MAX_SCALE_FACTOR, PS_MIN_SCALE_FACTOR, PS_POLE_TOLERANCE,
    PS_STANDARD_PARALLEL_ITERATIONS, PS_STANDARD_PARALLEL_TOLERANCE, TWO_PI,
)
from geogrids.coordinates import GeodeticCoordinate, Hemisphere, MapCoordinate
from geogrids.ellipsoids import validate_ellipsoid
from geogrids.errors import ConvergenceError, RangeError
from geogrids.utils.functions import ensure_finite, wrap_longitude


def _k90(eccentricity: float) -> float:
    one_plus_es = 1.0 + eccentricity
    one_minus_es = 1.0 - eccentricity
    return math.sqrt(math.pow(one_plus_es, one_plus_es) * math.pow(one_minus_es, one_minus_es))


def _check_central_meridian(central_meridian: float) -> None:
    if not -math.pi <= central_meridian <= TWO_PI:
        raise RangeError('central_meridian', 'Origin Longitude out of range')


class PolarStereographic:
    """
    Converts between geodetic coordinates and Polar Stereographic coordinates
    (easting and northing) for one polar aspect.

    The default constructor takes the standard parallel (latitude of true
    scale); the sign of the standard parallel selects the aspect. Use
    PolarStereographic.from_scale_factor() to define the projection by its
    scale factor at the pole instead.

    Args:
        semi_major_axis:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid; its inverse must lie within [250, 350]

        central_meridian:
            Longitude pointing down the grid's northing axis, in radians,
            within [-pi, 2pi]

        standard_parallel:
            Latitude of true scale, in radians, within [-pi/2, pi/2]

        false_easting: (Default 0)
            Easting assigned to the pole, in meters

        false_northing: (Default 0)
            Northing assigned to the pole, in meters
    """

    @validate_call
    def __init__(
        self,
        semi_major_axis: float,
        flattening: float,
        central_meridian: float,
        standard_parallel: float,
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        validate_ellipsoid(semi_major_axis, flattening)
        if not -HALF_PI <= standard_parallel <= HALF_PI:
            raise RangeError('standard_parallel', 'Origin Latitude out of range')
        _check_central_meridian(central_meridian)

        self._configure(
            semi_major_axis, flattening, central_meridian, standard_parallel,
            false_easting, false_northing
        )

        slat = math.sin(abs(standard_parallel))
        one_plus_es = 1.0 + self._es
        one_minus_es = 1.0 - self._es
        self._scale_factor = ((1 + slat) / 2) * (
            self._k90 / math.sqrt(
                math.pow(1.0 + self._es * slat, one_plus_es)
                * math.pow(1.0 - self._es * slat, one_minus_es)
            )
        )

    @classmethod
    @validate_call
    def from_scale_factor(
        cls,
        semi_major_axis: float,
        flattening: float,
        central_meridian: float,
        scale_factor: float,
        hemisphere: Union[Hemisphere, str],
        false_easting: float = 0.,
        false_northing: float = 0.,
    ):
        """
        Creates a Polar Stereographic projection from its scale factor at the pole.

        The standard parallel with the requested scale is found by fixed-point
        iteration on its sine.

        Args:
            semi_major_axis:
                Semi-major axis of the ellipsoid, in meters

            flattening:
                Flattening of the ellipsoid; its inverse must lie within [250, 350]

            central_meridian:
                Longitude pointing down the grid's northing axis, in radians,
                within [-pi, 2pi]

            scale_factor:
                Scale factor at the pole, within [0.1, 3.0]

            hemisphere:
                The polar aspect, Hemisphere.NORTH or Hemisphere.SOUTH

            false_easting: (Default 0)
                Easting assigned to the pole, in meters

            false_northing: (Default 0)
                Northing assigned to the pole, in meters

        Returns:
            PolarStereographic

        Raises:
            RangeError: if a parameter is out of range
            ConvergenceError: if no standard parallel produces the scale factor
        """
        validate_ellipsoid(semi_major_axis, flattening)
        if not PS_MIN_SCALE_FACTOR <= scale_factor <= PS_MAX_SCALE_FACTOR:
            raise RangeError('scale_factor', 'Scale factor out of range')
        _check_central_meridian(central_meridian)
        hemisphere = Hemisphere.parse(hemisphere)

        es = math.sqrt(2 * flattening - flattening * flattening)
        one_plus_es = 1.0 + es
        one_minus_es = 1.0 - es
        k90 = _k90(es)

        sk = 0.0
        sk_plus_1 = -1 + 2 * scale_factor
        count = PS_STANDARD_PARALLEL_ITERATIONS
        while abs(sk_plus_1 - sk) > PS_STANDARD_PARALLEL_TOLERANCE and count != 0:
            sk = sk_plus_1
            if es * abs(sk) >= 1.0:
                raise ConvergenceError('origin latitude error')

            sk_plus_1 = ((2 * scale_factor * math.sqrt(
                math.pow(1.0 + es * sk, one_plus_es) * math.pow(1.0 - es * sk, one_minus_es)
            )) / k90) - 1
            count -= 1

        if count == 0:
            raise ConvergenceError('origin latitude error')

        if not -1.0 <= sk_plus_1 <= 1.0:
            raise ConvergenceError('origin latitude error')

        standard_parallel = math.asin(sk_plus_1)
        if hemisphere is Hemisphere.SOUTH:
            standard_parallel *= -1.0

        projection = cls.__new__(cls)
        projection._configure(
            semi_major_axis, flattening, central_meridian, standard_parallel,
            false_easting, false_northing
        )
        projection._scale_factor = scale_factor
        return projection

    def _configure(
        self,
        semi_major_axis: float,
        flattening: float,
        central_meridian: float,
        standard_parallel: float,
        false_easting: float,
        false_northing: float,
    ) -> None:
        """Derives the projection constants shared by both constructors"""
        self._semi_major_axis = semi_major_axis
        self._flattening = flattening
        self._two_a = 2.0 * semi_major_axis

        if central_meridian > math.pi:
            central_meridian -= TWO_PI

        # The southern aspect is computed as a mirrored northern one
        if standard_parallel < 0:
            self._hemisphere = Hemisphere.SOUTH
            self._standard_parallel = -standard_parallel
            self._central_meridian = -central_meridian
        else:
            self._hemisphere = Hemisphere.NORTH
            self._standard_parallel = standard_parallel
            self._central_meridian = central_meridian

        self._false_easting = false_easting
        self._false_northing = false_northing

        self._es = math.sqrt(2 * flattening - flattening * flattening)
        self._es_over_two = self._es / 2.0
        self._k90 = _k90(self._es)

        self._a_mc = semi_major_axis
        self._tc = 1.0
        self._polar_origin = abs(abs(self._standard_parallel) - HALF_PI) <= PS_POLE_TOLERANCE
        if not self._polar_origin:
            sinolat = math.sin(self._standard_parallel)
            essin = self._es * sinolat
            pow_es = self._pow(essin)
            cosolat = math.cos(self._standard_parallel)
            mc = cosolat / math.sqrt(1.0 - essin * essin)
            self._a_mc = semi_major_axis * mc
            self._tc = math.tan(math.pi / 4 - self._standard_parallel / 2.0) / pow_es

        # Bound the inversion by the projected equator, plus a margin
        self._delta_easting = self._delta_northing = math.inf
        equator = self.convert_from_geodetic(GeodeticCoordinate(0., central_meridian))
        delta = abs(equator.northing - false_northing) * PS_DELTA_SCALE
        self._delta_northing = delta
        self._delta_easting = delta

    def __repr__(self):
        return (
            f'<PolarStereographic(hemisphere={self._hemisphere.value}, '
            f'standard_parallel={math.degrees(self.standard_parallel)}, '
            f'scale_factor={self._scale_factor})>'
        )

    @property
    def semi_major_axis(self) -> float:
        return self._semi_major_axis

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def hemisphere(self) -> Hemisphere:
        return self._hemisphere

    @property
    def standard_parallel(self) -> float:
        """The signed latitude of true scale, in radians"""
        if self._hemisphere is Hemisphere.SOUTH:
            return -self._standard_parallel
        return self._standard_parallel

    @property
    def central_meridian(self) -> float:
        if self._hemisphere is Hemisphere.SOUTH:
            return -self._central_meridian
        return self._central_meridian

    @property
    def false_easting(self) -> float:
        return self._false_easting

    @property
    def false_northing(self) -> float:
        return self._false_northing

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    @property
    def delta_easting(self) -> float:
        """Largest easting deviation from the false easting accepted on inversion"""
        return self._delta_easting

    @property
    def delta_northing(self) -> float:
        """Largest northing deviation from the false northing accepted on inversion"""
        return self._delta_northing

    def _pow(self, es_sin: float) -> float:
        return math.pow((1.0 - es_sin) / (1.0 + es_sin), self._es_over_two)

    def convert_from_geodetic(self, coordinate: GeodeticCoordinate) -> MapCoordinate:
        """
        Converts a geodetic coordinate to Polar Stereographic easting/northing.

        Args:
            coordinate:
                The GeodeticCoordinate to project; it must lie in the same
                hemisphere as the projection's aspect

        Returns:
            MapCoordinate

        Raises:
            RangeError: if the latitude or longitude is out of range, or the
                point lies in the opposite hemisphere
        """
        latitude, longitude = coordinate.latitude, coordinate.longitude
        ensure_finite(latitude, longitude)
        south = self._hemisphere is Hemisphere.SOUTH

        if not -HALF_PI <= latitude <= HALF_PI:
            raise RangeError('latitude')
        if (latitude < 0 and not south) or (latitude > 0 and south):
            raise RangeError(
                'latitude', 'latitude and Origin Latitude in different hemispheres'
            )
        if not -math.pi <= longitude <= TWO_PI:
            raise RangeError('longitude')

        if abs(abs(latitude) - HALF_PI) < PS_POLE_TOLERANCE:
            return MapCoordinate(self._false_easting, self._false_northing)

        if south:
            longitude *= -1.0
            latitude *= -1.0

        dlam = wrap_longitude(longitude - self._central_meridian)
        slat = math.sin(latitude)
        essin = self._es * slat
        pow_es = self._pow(essin)
        t = math.tan(math.pi / 4 - latitude / 2.0) / pow_es

        if not self._polar_origin:
            rho = self._a_mc * t / self._tc
        else:
            rho = self._two_a * t / self._k90

        if south:
            easting = -(rho * math.sin(dlam) - self._false_easting)
            northing = rho * math.cos(dlam) + self._false_northing
        else:
            easting = rho * math.sin(dlam) + self._false_easting
            northing = -rho * math.cos(dlam) + self._false_northing

        return MapCoordinate(easting, northing)

    def convert_to_geodetic(self, coordinate: MapCoordinate) -> GeodeticCoordinate:
        """
        Converts Polar Stereographic easting/northing to a geodetic coordinate.

        Args:
            coordinate:
                The MapCoordinate to invert

        Returns:
            GeodeticCoordinate

        Raises:
            RangeError: if the point lies outside the projection area
        """
        easting, northing = coordinate

        if not (
            self._false_easting - self._delta_easting
            <= easting
            <= self._false_easting + self._delta_easting
        ):
            raise RangeError('easting')
        if not (
            self._false_northing - self._delta_northing
            <= northing
            <= self._false_northing + self._delta_northing
        ):
            raise RangeError('northing')

        dy = northing - self._false_northing
        dx = easting - self._false_easting

        # Radius of the point about the false origin
        rho = math.sqrt(dx * dx + dy * dy)
        delta_radius = math.sqrt(
            self._delta_easting * self._delta_easting
            + self._delta_northing * self._delta_northing
        )
        if rho > delta_radius:
            raise RangeError('coordinate', 'Point is outside of projection area')

        if dy == 0.0 and dx == 0.0:
            latitude = HALF_PI
            longitude = self._central_meridian
        else:
            if self._hemisphere is Hemisphere.SOUTH:
                dy *= -1.0
                dx *= -1.0

            if not self._polar_origin:
                t = rho * self._tc / self._a_mc
            else:
                t = rho * self._k90 / self._two_a

            phi = HALF_PI - 2.0 * math.atan(t)
            temp_phi = 0.0
            for _ in range(PS_LATITUDE_ITERATIONS):
                if abs(phi - temp_phi) <= PS_LATITUDE_TOLERANCE:
                    break
                temp_phi = phi
                pow_es = self._pow(self._es * math.sin(phi))
                phi = HALF_PI - 2.0 * math.atan(t * pow_es)

            latitude = phi
            longitude = self._central_meridian + math.atan2(dx, -dy)

            if longitude > math.pi:
                longitude -= TWO_PI
            elif longitude < -math.pi:
                longitude += TWO_PI

            # Force distorted values back to the canonical range
            latitude = max(-HALF_PI, min(HALF_PI, latitude))
            longitude = max(-math.pi, min(math.pi, longitude))

        if self._hemisphere is Hemisphere.SOUTH:
            latitude *= -1.0
            longitude *= -1.0

        return GeodeticCoordinate(latitude, longitude)
