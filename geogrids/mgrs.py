"""
Military Grid Reference System strings, layered over the UTM and UPS grids.

An MGRS string is a zone number (absent for the polar regions), a latitude
band letter, two letters naming a 100km square, and an even run of digits
giving the easting and northing within that square, e.g. "31NAA6602100000".
"""

__all__ = [
    'GridValues', 'LATITUDE_BANDS', 'LatitudeBand', 'MGRS', 'MGRSComponents',
    'UPSConstant', 'UPS_CONSTANTS', 'ZONE_EXTENSIONS', 'ZoneExtension',
    'break_mgrs_string', 'grid_values', 'latitude_band_letter',
]

import math
import re
from string import ascii_uppercase
from typing import Dict, List, NamedTuple, Tuple

from pydantic import validate_call

from geogrids._const import (
    EPSILON_RADIANS, HALF_PI, MGRS_MAX_NON_POLAR_LAT, MGRS_MAX_PRECISION,
    MGRS_MIN_NON_POLAR_LAT, MGRS_ROUNDING_EPSILON, MGRS_ROW_PERIOD, MGRS_SQUARE_SIZE,
    MGRS_TRUNCATION_EPSILON, TWO_PI, UPS_FALSE_EASTING, UPS_MAX_EAST_NORTH,
    UPS_MIN_EAST_NORTH, UTM_MAX_EASTING, UTM_MAX_NORTHING, UTM_MIN_EASTING,
    UTM_MIN_NORTHING, WGS84_A, WGS84_CODE, WGS84_F,
)
from geogrids.coordinates import GeodeticCoordinate, Hemisphere, UPSCoordinate, UTMCoordinate
from geogrids.ellipsoids import Ellipsoid, validate_ellipsoid
from geogrids.errors import MGRSConsistencyError, MGRSFormatError, RangeError
from geogrids.ups import UPS
from geogrids.utils.functions import ensure_finite
from geogrids.utm import UTM

_A, _C, _D, _H, _I, _J, _L, _N, _O, _U, _V, _X = (
    ascii_uppercase.index(letter) for letter in 'ACDHIJLNOUVX'
)

_LAT_8 = 8.0 * (math.pi / 180.0)
_LAT_72 = 72.0 * (math.pi / 180.0)
_LAT_80 = 80.0 * (math.pi / 180.0)
_LAT_80_5 = 80.5 * (math.pi / 180.0)
_LAT_84_5 = 84.5 * (math.pi / 180.0)
_ZONE_WIDTH = 6.0 * (math.pi / 180.0)

# Ellipsoids whose grids follow the older "AL" lettering pattern
_AL_PATTERN_ELLIPSOIDS = ('CC', 'CD', 'BR', 'BN')

# Letters never used as the second letter of a polar square
_UPS_EXCLUDED_COLUMNS = 'DEMNVW'


class LatitudeBand(NamedTuple):
    """
    An 8 degree latitude band of the UTM region. Latitudes are in degrees;
    northings are the smallest northing in the band and the multiple of the
    2,000,000m row period the band's rows start from.
    """
    letter: str
    min_northing: float
    north: float
    south: float
    northing_offset: float


LATITUDE_BANDS: Tuple[LatitudeBand, ...] = (
    LatitudeBand('C', 1100000.0, -72.0, -80.5, 0.0),
    LatitudeBand('D', 2000000.0, -64.0, -72.0, 2000000.0),
    LatitudeBand('E', 2800000.0, -56.0, -64.0, 2000000.0),
    LatitudeBand('F', 3700000.0, -48.0, -56.0, 2000000.0),
    LatitudeBand('G', 4600000.0, -40.0, -48.0, 4000000.0),
    LatitudeBand('H', 5500000.0, -32.0, -40.0, 4000000.0),
    LatitudeBand('J', 6400000.0, -24.0, -32.0, 6000000.0),
    LatitudeBand('K', 7300000.0, -16.0, -24.0, 6000000.0),
    LatitudeBand('L', 8200000.0, -8.0, -16.0, 8000000.0),
    LatitudeBand('M', 9100000.0, 0.0, -8.0, 8000000.0),
    LatitudeBand('N', 0.0, 8.0, 0.0, 0.0),
    LatitudeBand('P', 800000.0, 16.0, 8.0, 0.0),
    LatitudeBand('Q', 1700000.0, 24.0, 16.0, 0.0),
    LatitudeBand('R', 2600000.0, 32.0, 24.0, 2000000.0),
    LatitudeBand('S', 3500000.0, 40.0, 32.0, 2000000.0),
    LatitudeBand('T', 4400000.0, 48.0, 40.0, 4000000.0),
    LatitudeBand('U', 5300000.0, 56.0, 48.0, 4000000.0),
    LatitudeBand('V', 6200000.0, 64.0, 56.0, 6000000.0),
    LatitudeBand('W', 7000000.0, 72.0, 64.0, 6000000.0),
    LatitudeBand('X', 7900000.0, 84.5, 72.0, 6000000.0),
)

_BANDS: Dict[str, LatitudeBand] = {band.letter: band for band in LATITUDE_BANDS}


class UPSConstant(NamedTuple):
    """Lettering of one quarter of a polar grid, keyed by its band letter"""
    letter: str
    ltr2_low: str
    ltr2_high: str
    ltr3_high: str
    false_easting: float
    false_northing: float


UPS_CONSTANTS: Tuple[UPSConstant, ...] = (
    UPSConstant('A', 'J', 'Z', 'Z', 800000.0, 800000.0),
    UPSConstant('B', 'A', 'R', 'Z', 2000000.0, 800000.0),
    UPSConstant('Y', 'J', 'Z', 'P', 800000.0, 1300000.0),
    UPSConstant('Z', 'A', 'J', 'P', 2000000.0, 1300000.0),
)

_UPS_CONSTANTS: Dict[str, UPSConstant] = {constant.letter: constant for constant in UPS_CONSTANTS}


class ZoneExtension(NamedTuple):
    """
    Points of a band/zone pair, in the western (easting < 500,000m) or eastern
    half of the zone, that belong to a widened neighbouring zone
    """
    band: str
    zone: int
    eastern: bool
    override: int

    def applies(self, band: str, zone: int, easting: float) -> bool:
        return (
            self.band == band
            and self.zone == zone
            and (easting >= 500000.0) == self.eastern
        )


ZONE_EXTENSIONS: Tuple[ZoneExtension, ...] = (
    ZoneExtension('V', 31, True, 32),
    ZoneExtension('X', 32, False, 31),
    ZoneExtension('X', 32, True, 33),
    ZoneExtension('X', 34, False, 33),
    ZoneExtension('X', 34, True, 35),
    ZoneExtension('X', 36, False, 35),
    ZoneExtension('X', 36, True, 37),
)


class GridValues(NamedTuple):
    """Second letter range of a zone's 100km squares and its row letter offset"""
    ltr2_low: str
    ltr2_high: str
    pattern_offset: float


class MGRSComponents(NamedTuple):
    """
    The fields of an MGRS string. Zone 0 denotes a polar (UPS) reference;
    easting and northing are offsets within the 100km square, in meters.
    """
    zone: int
    letters: str
    easting: float
    northing: float
    precision: int


_MGRS_PATTERN = re.compile(r'(?P<zone>\d*)(?P<letters>[A-Za-z]*)(?P<digits>\d*)')


def _index(letter: str) -> int:
    return ascii_uppercase.index(letter)


def _divisor(precision: int) -> float:
    """Size in meters of the last digit at a given precision"""
    return 10.0 ** (MGRS_MAX_PRECISION - precision)


def _truncate(value: float, divisor: float) -> float:
    return float(int((value + MGRS_TRUNCATION_EPSILON) / divisor)) * divisor


def _check_precision(precision: int) -> None:
    if not 0 <= precision <= MGRS_MAX_PRECISION:
        raise RangeError('precision')


def _in_non_polar_region(latitude: float) -> bool:
    return (
        MGRS_MIN_NON_POLAR_LAT - EPSILON_RADIANS
        <= latitude
        < MGRS_MAX_NON_POLAR_LAT + EPSILON_RADIANS
    )


def _in_latitude_band(letter: int, latitude: float, border: float) -> bool:
    band = _BANDS[ascii_uppercase[letter]]
    north = band.north * math.pi / 180
    south = band.south * math.pi / 180
    return south - border <= latitude <= north + border


def latitude_band_letter(latitude: float) -> str:
    """
    The latitude band letter of a UTM region latitude.

    Args:
        latitude:
            Latitude in radians, within (-80.5, 84.5) degrees

    Returns:
        (str) the band letter, 'C' through 'X' (omitting 'I' and 'O')

    Raises:
        RangeError: if the latitude lies outside the lettered bands
    """
    if _LAT_72 <= latitude < _LAT_84_5:
        return 'X'

    if -_LAT_80_5 < latitude < _LAT_72:
        band = int(((latitude + _LAT_80) / _LAT_8) + 1.0e-12)
        return LATITUDE_BANDS[max(band, 0)].letter

    raise RangeError('latitude')


def grid_values(zone: int, ellipsoid_code: str = WGS84_CODE) -> GridValues:
    """
    The second letter range and row offset of a zone's 100km squares.

    Zones cycle through six lettering sets. The row offset depends on whether
    the ellipsoid uses the standard "AA" pattern or the older "AL" pattern
    (Clarke 1866, Clarke 1880, Bessel 1841 and Bessel 1841 Namibia).

    Args:
        zone:
            The UTM zone, 1 through 60

        ellipsoid_code: (Default 'WE')
            Two-letter code of the ellipsoid

    Returns:
        GridValues
    """
    set_number = zone % 6 or 6

    if set_number in (1, 4):
        ltr2_low, ltr2_high = 'A', 'H'
    elif set_number in (2, 5):
        ltr2_low, ltr2_high = 'J', 'R'
    else:
        ltr2_low, ltr2_high = 'S', 'Z'

    if ellipsoid_code.upper() in _AL_PATTERN_ELLIPSOIDS:
        pattern_offset = 1500000.0 if set_number % 2 == 0 else 1000000.0
    else:
        pattern_offset = 500000.0 if set_number % 2 == 0 else 0.0

    return GridValues(ltr2_low, ltr2_high, pattern_offset)


def break_mgrs_string(mgrs_string: str) -> MGRSComponents:
    """
    Splits an MGRS string into its zone, letters and in-square offsets.

    Whitespace anywhere in the string is ignored and letters may be lower
    case. The digit run is split evenly into easting and northing, each
    scaled to meters by the precision it implies.

    Args:
        mgrs_string:
            The MGRS string, e.g. "16SGC3855124838"

    Returns:
        MGRSComponents

    Raises:
        MGRSFormatError: if the string is empty, holds characters other than
            letters and digits, or has the wrong number of zone digits,
            letters or trailing digits
        RangeError: if the zone is not within 1 through 60
    """
    compact = ''.join(mgrs_string.split())
    if not compact:
        raise MGRSFormatError('empty MGRS string')

    for char in compact:
        if not (char.isascii() and char.isalnum()):
            raise MGRSFormatError(f'invalid character {char!r}')

    match = _MGRS_PATTERN.fullmatch(compact)
    if match is None:
        raise MGRSFormatError('unexpected characters after the easting/northing digits')

    zone_digits, letters, digits = match.group('zone', 'letters', 'digits')

    if len(zone_digits) > 2:
        raise MGRSFormatError('too many zone digits')
    zone = int(zone_digits) if zone_digits else 0
    if zone_digits and not 1 <= zone <= 60:
        raise RangeError('zone')

    if len(letters) != 3:
        raise MGRSFormatError('wrong number of letters')
    letters = letters.upper()
    for position, letter in enumerate(letters):
        if letter in 'IO':
            raise MGRSFormatError(f'invalid letter {position}: {letter}')

    if len(digits) > 2 * MGRS_MAX_PRECISION or len(digits) % 2:
        raise MGRSFormatError('wrong number of digits')

    precision = len(digits) // 2
    easting = northing = 0.0
    if precision:
        multiplier = _divisor(precision)
        easting = float(int(digits[:precision])) * multiplier
        northing = float(int(digits[precision:])) * multiplier

    return MGRSComponents(zone, letters, easting, northing, precision)


def _make_mgrs_string(
    zone: int,
    letters: List[int],
    easting: float,
    northing: float,
    precision: int
) -> str:
    """Assembles an MGRS string; zone 0 is omitted"""
    parts = [f'{zone:02d}'] if zone else []

    for letter in letters:
        if not 0 <= letter < len(ascii_uppercase):
            raise MGRSFormatError('invalid letters')
        parts.append(ascii_uppercase[letter])

    divisor = _divisor(precision)
    for value in (easting, northing):
        value = math.fmod(value, MGRS_SQUARE_SIZE)
        if value >= 99999.5:
            value = 99999.0
        if precision:
            parts.append(f'{int((value + MGRS_ROUNDING_EPSILON) / divisor):0{precision}d}')

    return ''.join(parts)


class MGRS:
    """
    Converts between geodetic, UTM or UPS coordinates and MGRS strings.

    Points within [-80, 84) degrees of latitude are referenced through UTM,
    the rest through UPS.

    Args:
        semi_major_axis: (Default WGS84)
            Semi-major axis of the ellipsoid, in meters

        flattening: (Default WGS84)
            Flattening of the ellipsoid; its inverse must lie within [250, 350]

        ellipsoid_code: (Default 'WE')
            Two-letter code of the ellipsoid, selects the lettering pattern
    """

    @validate_call
    def __init__(
        self,
        semi_major_axis: float = WGS84_A,
        flattening: float = WGS84_F,
        ellipsoid_code: str = WGS84_CODE,
    ):
        validate_ellipsoid(semi_major_axis, flattening)

        self._semi_major_axis = semi_major_axis
        self._flattening = flattening
        self._ellipsoid_code = ellipsoid_code
        self._ups = UPS(semi_major_axis, flattening)
        self._utm = UTM(semi_major_axis, flattening, ellipsoid_code, 0)

    @classmethod
    def from_ellipsoid(cls, ellipsoid: Ellipsoid) -> 'MGRS':
        """Creates an MGRS converter for a registered Ellipsoid"""
        return cls(ellipsoid.semi_major_axis, ellipsoid.flattening, ellipsoid.code)

    def __repr__(self):
        return f'<MGRS(ellipsoid={self._ellipsoid_code})>'

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
    def utm(self) -> UTM:
        return self._utm

    @property
    def ups(self) -> UPS:
        return self._ups

    def convert_from_geodetic(self, coordinate: GeodeticCoordinate, precision: int = 5) -> str:
        """
        Converts a geodetic coordinate to an MGRS string.

        Args:
            coordinate:
                The GeodeticCoordinate to convert

            precision: (Default 5)
                Number of digits for each of easting and northing, 0 (100km)
                through 5 (1m)

        Returns:
            (str) the MGRS string

        Raises:
            RangeError: if the coordinate or precision is out of range
        """
        latitude, longitude = coordinate.latitude, coordinate.longitude
        ensure_finite(latitude, longitude)

        if not -HALF_PI <= latitude <= HALF_PI:
            raise RangeError('latitude')
        if longitude < -math.pi - EPSILON_RADIANS or longitude > TWO_PI + EPSILON_RADIANS:
            raise RangeError('longitude')
        _check_precision(precision)

        if _in_non_polar_region(latitude):
            utm_coordinate = self._utm.convert_from_geodetic(coordinate)
            return self._from_utm(utm_coordinate, longitude, latitude, precision)

        ups_coordinate = self._ups.convert_from_geodetic(coordinate)
        return self._from_ups(ups_coordinate, precision)

    def convert_from_utm(self, coordinate: UTMCoordinate, precision: int = 5) -> str:
        """
        Converts a UTM coordinate to an MGRS string.

        Points beyond the non-polar region are re-expressed through UPS.

        Args:
            coordinate:
                The UTMCoordinate to convert

            precision: (Default 5)
                Number of digits for each of easting and northing, 0 through 5

        Returns:
            (str) the MGRS string

        Raises:
            RangeError: if a component or the precision is out of range
        """
        zone, hemisphere, easting, northing = coordinate

        if not 1 <= zone <= 60:
            raise RangeError('zone')
        hemisphere = Hemisphere.parse(hemisphere)
        if not UTM_MIN_EASTING <= easting <= UTM_MAX_EASTING:
            raise RangeError('easting')
        if not UTM_MIN_NORTHING <= northing <= UTM_MAX_NORTHING:
            raise RangeError('northing')
        _check_precision(precision)

        coordinate = UTMCoordinate(zone, hemisphere, easting, northing)
        geodetic = self._utm.convert_to_geodetic(coordinate)

        if _in_non_polar_region(geodetic.latitude):
            return self._from_utm(coordinate, geodetic.longitude, geodetic.latitude, precision)

        ups_coordinate = self._ups.convert_from_geodetic(geodetic)
        return self._from_ups(ups_coordinate, precision)

    def convert_from_ups(self, coordinate: UPSCoordinate, precision: int = 5) -> str:
        """
        Converts a UPS coordinate to an MGRS string.

        Points within the non-polar region are re-expressed through UTM.

        Args:
            coordinate:
                The UPSCoordinate to convert

            precision: (Default 5)
                Number of digits for each of easting and northing, 0 through 5

        Returns:
            (str) the MGRS string

        Raises:
            RangeError: if a component or the precision is out of range
        """
        hemisphere, easting, northing = coordinate

        hemisphere = Hemisphere.parse(hemisphere)
        if not UPS_MIN_EAST_NORTH <= easting <= UPS_MAX_EAST_NORTH:
            raise RangeError('easting')
        if not UPS_MIN_EAST_NORTH <= northing <= UPS_MAX_EAST_NORTH:
            raise RangeError('northing')
        _check_precision(precision)

        coordinate = UPSCoordinate(hemisphere, easting, northing)
        geodetic = self._ups.convert_to_geodetic(coordinate)

        if _in_non_polar_region(geodetic.latitude):
            utm_coordinate = self._utm.convert_from_geodetic(geodetic)
            return self._from_utm(
                utm_coordinate, geodetic.longitude, geodetic.latitude, precision
            )

        return self._from_ups(coordinate, precision)

    def convert_to_geodetic(self, mgrs_string: str) -> GeodeticCoordinate:
        """
        Converts an MGRS string to a geodetic coordinate.

        The result is the south-west corner of the square the string names
        at its precision.

        Args:
            mgrs_string:
                The MGRS string, e.g. "16SGC3855124838"

        Returns:
            GeodeticCoordinate

        Raises:
            MGRSFormatError: if the string is malformed
            MGRSConsistencyError: if the point lies outside its latitude band
            RangeError: if the decoded coordinate is out of range
        """
        components = break_mgrs_string(mgrs_string)

        if components.zone:
            _, geodetic = self._to_utm(components)
            return geodetic

        return self._ups.convert_to_geodetic(self._to_ups(components))

    def convert_to_utm(self, mgrs_string: str) -> UTMCoordinate:
        """
        Converts an MGRS string to a UTM coordinate.

        Polar strings are converted through their geodetic coordinate, so
        only those lying within the UTM domain succeed.

        Raises:
            MGRSFormatError: if the string is malformed
            MGRSConsistencyError: if the point lies outside its latitude band
            RangeError: if the point has no UTM coordinate
        """
        components = break_mgrs_string(mgrs_string)

        if components.zone:
            utm_coordinate, _ = self._to_utm(components)
            return utm_coordinate

        geodetic = self._ups.convert_to_geodetic(self._to_ups(components))
        return self._utm.convert_from_geodetic(geodetic)

    def convert_to_ups(self, mgrs_string: str) -> UPSCoordinate:
        """
        Converts an MGRS string to a UPS coordinate.

        Zoned strings are converted through their geodetic coordinate, so
        only those lying within the UPS domain succeed.

        Raises:
            MGRSFormatError: if the string is malformed
            MGRSConsistencyError: if the point lies outside its latitude band
            RangeError: if the point has no UPS coordinate
        """
        components = break_mgrs_string(mgrs_string)

        if components.zone:
            _, geodetic = self._to_utm(components)
            return self._ups.convert_from_geodetic(geodetic)

        return self._to_ups(components)

    def _from_ups(self, coordinate: UPSCoordinate, precision: int) -> str:
        hemisphere, easting, northing = coordinate

        divisor = _divisor(precision)
        easting = _truncate(easting, divisor)
        northing = _truncate(northing, divisor)

        if hemisphere is Hemisphere.NORTH:
            band = 'Z' if easting >= UPS_FALSE_EASTING else 'Y'
        else:
            band = 'B' if easting >= UPS_FALSE_EASTING else 'A'
        constant = _UPS_CONSTANTS[band]

        letter3 = int((northing - constant.false_northing) / MGRS_SQUARE_SIZE)
        if letter3 > _H:
            letter3 += 1
        if letter3 > _N:
            letter3 += 1

        letter2 = _index(constant.ltr2_low) + int(
            (easting - constant.false_easting) / MGRS_SQUARE_SIZE
        )
        if easting < UPS_FALSE_EASTING:
            if letter2 > _L:
                letter2 += 3
            if letter2 > _U:
                letter2 += 2
        else:
            if letter2 > _C:
                letter2 += 2
            if letter2 > _H:
                letter2 += 1
            if letter2 > _L:
                letter2 += 3

        return _make_mgrs_string(0, [_index(band), letter2, letter3], easting, northing, precision)

    def _from_utm(
        self,
        coordinate: UTMCoordinate,
        longitude: float,
        latitude: float,
        precision: int
    ) -> str:
        zone, _, easting, northing = coordinate
        band = latitude_band_letter(latitude)
        geodetic = GeodeticCoordinate(latitude, longitude)

        # Points are lettered in their natural zone, not an overridden one
        pad = MGRS_TRUNCATION_EPSILON / WGS84_A
        if longitude < math.pi:
            natural_zone = int(31 + ((longitude + pad) / _ZONE_WIDTH))
        else:
            natural_zone = int(((longitude + pad) / _ZONE_WIDTH) - 29)
        if natural_zone > 60:
            natural_zone = 1

        if zone != natural_zone:
            zone, _, easting, northing = self._utm.convert_from_geodetic(
                geodetic, zone_override=natural_zone
            )

        for extension in ZONE_EXTENSIONS:
            if extension.applies(band, zone, easting):
                zone, _, easting, northing = self._utm.convert_from_geodetic(
                    geodetic, zone_override=extension.override
                )
                break

        divisor = _divisor(precision)
        easting = _truncate(easting, divisor)
        northing = _truncate(northing, divisor)

        if latitude <= 0.0 and northing == 1.0e7:
            northing = 0.0

        ltr2_low, _, pattern_offset = grid_values(zone, self._ellipsoid_code)
        low = _index(ltr2_low)

        grid_northing = northing % MGRS_ROW_PERIOD + pattern_offset
        if grid_northing >= MGRS_ROW_PERIOD:
            grid_northing -= MGRS_ROW_PERIOD

        letter3 = int(grid_northing / MGRS_SQUARE_SIZE)
        if letter3 > _H:
            letter3 += 1
        if letter3 > _N:
            letter3 += 1

        letter2 = low + int(easting / MGRS_SQUARE_SIZE) - 1
        if low == _J and letter2 > _N:
            letter2 += 1

        return _make_mgrs_string(
            zone, [_index(band), letter2, letter3], easting, northing, precision
        )

    def _to_utm(self, components: MGRSComponents) -> Tuple[UTMCoordinate, GeodeticCoordinate]:
        """Rebuilds the UTM coordinate of a zoned string and checks its band"""
        zone, letters, easting, northing, precision = components
        band, letter2, letter3 = (_index(letter) for letter in letters)

        if band == _X and zone in (32, 34, 36):
            raise MGRSFormatError(f'band X is not used in zone {zone}')
        if band == _V and zone == 31 and letter2 > _D:
            raise MGRSFormatError('invalid 100km square for zone 31V')

        hemisphere = Hemisphere.SOUTH if band < _N else Hemisphere.NORTH

        ltr2_low, ltr2_high, pattern_offset = grid_values(zone, self._ellipsoid_code)
        low = _index(ltr2_low)
        if not low <= letter2 <= _index(ltr2_high) or letter3 > _V:
            raise MGRSFormatError(f'invalid 100km square letters for zone {zone}')

        grid_easting = float(letter2 - low + 1) * MGRS_SQUARE_SIZE
        if low == _J and letter2 > _O:
            grid_easting -= MGRS_SQUARE_SIZE

        row_northing = float(letter3) * MGRS_SQUARE_SIZE
        if letter3 > _O:
            row_northing -= MGRS_SQUARE_SIZE
        if letter3 > _I:
            row_northing -= MGRS_SQUARE_SIZE
        if row_northing >= MGRS_ROW_PERIOD:
            row_northing -= MGRS_ROW_PERIOD

        latitude_band = _BANDS.get(letters[0])
        if latitude_band is None:
            raise MGRSFormatError(f'invalid latitude band letter {letters[0]}')

        grid_northing = row_northing - pattern_offset
        if grid_northing < 0:
            grid_northing += MGRS_ROW_PERIOD
        grid_northing += latitude_band.northing_offset
        if grid_northing < latitude_band.min_northing:
            grid_northing += MGRS_ROW_PERIOD

        utm_coordinate = UTMCoordinate(
            zone, hemisphere, grid_easting + easting, grid_northing + northing
        )
        geodetic = self._utm.convert_to_geodetic(utm_coordinate)

        # Allow a point one final digit beyond its band
        border = (math.pi / 180) / (MGRS_SQUARE_SIZE / _divisor(precision))
        if not _in_latitude_band(band, geodetic.latitude, border):
            raise MGRSConsistencyError(
                f'{components.letters[0]} latitude band does not contain {geodetic!r}'
            )

        return utm_coordinate, geodetic

    def _to_ups(self, components: MGRSComponents) -> UPSCoordinate:
        """Rebuilds the UPS coordinate of a polar string"""
        letters, easting, northing = components.letters, components.easting, components.northing

        constant = _UPS_CONSTANTS.get(letters[0])
        if constant is None:
            raise MGRSFormatError(f'invalid polar band letter {letters[0]}')
        hemisphere = Hemisphere.NORTH if letters[0] in 'YZ' else Hemisphere.SOUTH

        low = _index(constant.ltr2_low)
        letter2 = _index(letters[1])
        letter3 = _index(letters[2])
        if (
            not low <= letter2 <= _index(constant.ltr2_high)
            or letters[1] in _UPS_EXCLUDED_COLUMNS
            or letter3 > _index(constant.ltr3_high)
        ):
            raise MGRSFormatError(f'invalid 100km square letters for band {letters[0]}')

        grid_northing = float(letter3) * MGRS_SQUARE_SIZE + constant.false_northing
        if letter3 > _I:
            grid_northing -= MGRS_SQUARE_SIZE
        if letter3 > _O:
            grid_northing -= MGRS_SQUARE_SIZE

        grid_easting = float(letter2 - low) * MGRS_SQUARE_SIZE + constant.false_easting
        if low != _A:
            if letter2 > _L:
                grid_easting -= 300000.0
            if letter2 > _U:
                grid_easting -= 200000.0
        else:
            if letter2 > _C:
                grid_easting -= 200000.0
            if letter2 > _I:
                grid_easting -= MGRS_SQUARE_SIZE
            if letter2 > _L:
                grid_easting -= 300000.0

        return UPSCoordinate(hemisphere, grid_easting + easting, grid_northing + northing)
