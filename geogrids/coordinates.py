"""
Representations of points on the ellipsoid and on the projected grids
"""

__all__ = [
    'GeodeticCoordinate', 'Hemisphere', 'MapCoordinate', 'UPSCoordinate', 'UTMCoordinate',
]

from enum import Enum
import math
from typing import NamedTuple, Tuple, Union

from geogrids.errors import RangeError


class Hemisphere(str, Enum):
    """The hemisphere of a UTM or UPS coordinate"""
    NORTH = 'N'
    SOUTH = 'S'

    @classmethod
    def parse(cls, value: Union['Hemisphere', str]) -> 'Hemisphere':
        """
        Coerces a Hemisphere or its letter value ('N'/'S') into a Hemisphere.

        Raises:
            geogrids.errors.RangeError: if the value is not a hemisphere
        """
        if isinstance(value, Hemisphere):
            return value

        try:
            return cls(value)
        except ValueError as err:
            raise RangeError('hemisphere') from err


class MapCoordinate(NamedTuple):
    """An easting/northing pair, in meters, on a projection plane"""
    easting: float
    northing: float


class UTMCoordinate(NamedTuple):
    """A Universal Transverse Mercator coordinate"""
    zone: int
    hemisphere: Hemisphere
    easting: float
    northing: float


class UPSCoordinate(NamedTuple):
    """A Universal Polar Stereographic coordinate"""
    hemisphere: Hemisphere
    easting: float
    northing: float


class GeodeticCoordinate:
    """
    Representation of a point on the ellipsoid (i.e., a lat/lon pair), in radians.

    Values are stored exactly as given; the converters decide how far outside
    [-pi/2, pi/2] x (-pi, pi] they will accept and normalize internally.
    """

    __slots__ = ('latitude', 'longitude')

    def __init__(self, latitude: float, longitude: float):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return (
            f'<GeodeticCoordinate({self.latitude_degrees:.7f}, '
            f'{self.longitude_degrees:.7f})>'
        )

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> 'GeodeticCoordinate':
        """Creates a GeodeticCoordinate from a latitude/longitude pair in degrees"""
        return cls(math.radians(latitude), math.radians(longitude))

    @property
    def latitude_degrees(self) -> float:
        return math.degrees(self.latitude)

    @property
    def longitude_degrees(self) -> float:
        return math.degrees(self.longitude)

    def distance(self, other: 'GeodeticCoordinate') -> float:
        """
        The great-circle angle between two points on the unit sphere.

        Args:
            other:
                A second GeodeticCoordinate

        Returns:
            (float) the central angle in radians, in [0, pi]
        """
        d_lat = other.latitude - self.latitude
        d_lon = other.longitude - self.longitude
        var1 = (math.sin(d_lat / 2) ** 2) + math.cos(self.latitude) * math.cos(other.latitude) * (
            math.sin(d_lon / 2) ** 2
        )
        return 2 * math.asin(math.sqrt(min(1.0, var1)))

    def to_float(self, degrees: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a (latitude, longitude) tuple.

        Args:
            degrees: (bool)
                (Default False) If True, the values are returned in degrees
                rather than radians

        Returns:
            Tuple of (latitude, longitude)
        """
        if degrees:
            return self.latitude_degrees, self.longitude_degrees

        return self.latitude, self.longitude
