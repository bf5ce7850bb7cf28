"""
Reference ellipsoids, keyed by their two-letter codes
"""

__all__ = ['ELLIPSOIDS', 'Ellipsoid', 'WGS84', 'get_ellipsoid', 'validate_ellipsoid']

import math
from typing import Dict, NamedTuple

from geogrids._const import MAX_INV_FLATTENING, MIN_INV_FLATTENING, WGS84_A, WGS84_CODE, WGS84_F
from geogrids.errors import RangeError, UnknownEllipsoidError


class Ellipsoid(NamedTuple):
    """A reference ellipsoid, defined by its semi-major axis and flattening"""
    semi_major_axis: float
    flattening: float
    code: str
    name: str = ''

    @property
    def inverse_flattening(self) -> float:
        return 1 / self.flattening


def _from_inverse(code: str, name: str, semi_major_axis: float, inv_flattening: float):
    return Ellipsoid(semi_major_axis, 1 / inv_flattening, code, name)


WGS84 = Ellipsoid(WGS84_A, WGS84_F, WGS84_CODE, 'World Geodetic System 1984')

ELLIPSOIDS: Dict[str, Ellipsoid] = {
    x.code: x for x in (
        _from_inverse('AA', 'Airy 1830', 6377563.396, 299.3249646),
        _from_inverse('AM', 'Modified Airy', 6377340.189, 299.3249646),
        _from_inverse('AN', 'Australian National', 6378160.0, 298.25),
        _from_inverse('BN', 'Bessel 1841 (Namibia)', 6377483.865, 299.1528128),
        _from_inverse('BR', 'Bessel 1841', 6377397.155, 299.1528128),
        _from_inverse('CC', 'Clarke 1866', 6378206.4, 294.9786982),
        _from_inverse('CD', 'Clarke 1880', 6378249.145, 293.465),
        _from_inverse('CG', 'Clarke 1880 (IGN)', 6378249.2, 293.466021294),
        _from_inverse('EA', 'Everest 1830', 6377276.345, 300.8017),
        _from_inverse('EB', 'Everest (Sabah & Sarawak)', 6377298.556, 300.8017),
        _from_inverse('EC', 'Everest 1956', 6377301.243, 300.8017),
        _from_inverse('ED', 'Everest 1969', 6377295.664, 300.8017),
        _from_inverse('EE', 'Everest 1948', 6377304.063, 300.8017),
        _from_inverse('EF', 'Everest (Pakistan)', 6377309.613, 300.8017),
        _from_inverse('FA', 'Modified Fischer 1960', 6378155.0, 298.3),
        _from_inverse('HE', 'Helmert 1906', 6378200.0, 298.3),
        _from_inverse('HO', 'Hough 1960', 6378270.0, 297.0),
        _from_inverse('ID', 'Indonesian 1974', 6378160.0, 298.247),
        _from_inverse('IN', 'International 1924', 6378388.0, 297.0),
        _from_inverse('KA', 'Krassovsky 1940', 6378245.0, 298.3),
        _from_inverse('RF', 'Geodetic Reference System 1980', 6378137.0, 298.257222101),
        _from_inverse('SA', 'South American 1969', 6378160.0, 298.25),
        _from_inverse('WD', 'World Geodetic System 1972', 6378135.0, 298.26),
        _from_inverse('WO', 'War Office', 6378300.58, 296.0),
        WGS84,
    )
}


def get_ellipsoid(code: str) -> Ellipsoid:
    """
    Looks up a registered ellipsoid by its two-letter code (case-insensitive).

    Args:
        code:
            The ellipsoid code, e.g. 'WE' for WGS84

    Returns:
        Ellipsoid

    Raises:
        UnknownEllipsoidError: if the code is not registered
    """
    try:
        return ELLIPSOIDS[code.upper()]
    except (AttributeError, KeyError) as err:
        raise UnknownEllipsoidError(code) from err


def validate_ellipsoid(semi_major_axis: float, flattening: float) -> None:
    """
    Checks the ellipsoid parameters accepted by the polar and grid systems.

    Raises:
        RangeError: if the semi-major axis is not positive or the inverse
            flattening lies outside [250, 350]
    """
    if not semi_major_axis > 0.0:
        raise RangeError('semi_major_axis', 'Semi-major axis must be greater than zero')

    inv_flattening = 1 / flattening if flattening else math.inf
    if inv_flattening < MIN_INV_FLATTENING or inv_flattening > MAX_INV_FLATTENING:
        raise RangeError('flattening', 'Inverse flattening must be between 250 and 350')
