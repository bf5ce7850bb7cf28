import math

import pytest
from pytest import approx

from geogrids import GeodeticCoordinate, Hemisphere, RangeError, UTMCoordinate


def test_geodetic_coordinate_init():
    c = GeodeticCoordinate(0.5, -1.)
    assert c.latitude == 0.5
    assert c.longitude == -1.

    c = GeodeticCoordinate(1, 0)
    assert isinstance(c.latitude, float)

    c = GeodeticCoordinate.from_degrees(45., -90.)
    assert c.latitude == approx(math.pi / 4)
    assert c.longitude == approx(-math.pi / 2)
    assert c.latitude_degrees == approx(45.)
    assert c.longitude_degrees == approx(-90.)


def test_geodetic_coordinate_eq():
    assert GeodeticCoordinate(0.1, 0.2) == GeodeticCoordinate(0.1, 0.2)
    assert GeodeticCoordinate(0.1, 0.2) != GeodeticCoordinate(0.2, 0.1)
    assert GeodeticCoordinate(0.1, 0.2) != (0.1, 0.2)


def test_geodetic_coordinate_hash():
    coords = [
        GeodeticCoordinate(0., 0.),
        GeodeticCoordinate(0., 0.),
        GeodeticCoordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert GeodeticCoordinate(1., 1.) in set(coords)


def test_geodetic_coordinate_repr():
    assert repr(GeodeticCoordinate.from_degrees(1., 2.)) == '<GeodeticCoordinate(1.0000000, 2.0000000)>'


def test_geodetic_coordinate_to_float():
    c = GeodeticCoordinate.from_degrees(10., 20.)
    assert c.to_float() == (c.latitude, c.longitude)
    assert c.to_float(degrees=True) == approx((10., 20.))


def test_geodetic_coordinate_distance():
    c1 = GeodeticCoordinate.from_degrees(0., 0.)
    assert c1.distance(c1) == 0.
    assert c1.distance(GeodeticCoordinate.from_degrees(0., 90.)) == approx(math.pi / 2)
    assert c1.distance(GeodeticCoordinate.from_degrees(90., 0.)) == approx(math.pi / 2)
    assert c1.distance(GeodeticCoordinate.from_degrees(0., 180.)) == approx(math.pi)

    # A full revolution of longitude is the same point
    assert c1.distance(GeodeticCoordinate.from_degrees(0., 360.)) == approx(0., abs=1e-12)


def test_hemisphere_parse():
    assert Hemisphere.parse('N') is Hemisphere.NORTH
    assert Hemisphere.parse('S') is Hemisphere.SOUTH
    assert Hemisphere.parse(Hemisphere.SOUTH) is Hemisphere.SOUTH

    with pytest.raises(RangeError) as err:
        Hemisphere.parse('E')
    assert err.value.parameter == 'hemisphere'


def test_utm_coordinate_fields():
    c = UTMCoordinate(31, Hemisphere.NORTH, 166021.44, 0.)
    assert c.zone == 31
    assert c.hemisphere == 'N'
    zone, hemisphere, easting, northing = c
    assert (zone, easting, northing) == (31, 166021.44, 0.)
