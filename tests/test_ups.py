import math

import pytest
from pytest import approx

from geogrids import (
    ELLIPSOIDS, GeodeticCoordinate, Hemisphere, RangeError, UPS, UPSCoordinate
)
from tests.functions import assert_within_meters, degree_grid


@pytest.fixture(scope='module')
def ups():
    return UPS()


def test_package_import():
    import geogrids

    ups = geogrids.UPS()
    assert ups.projection(geogrids.Hemisphere.SOUTH).scale_factor == 0.994
    assert geogrids.default_mgrs().ups.semi_major_axis == geogrids.WGS84.semi_major_axis


def test_ups_init():
    ups = UPS()
    north = ups.projection(Hemisphere.NORTH)
    assert north.hemisphere is Hemisphere.NORTH
    assert north.scale_factor == 0.994
    assert (north.false_easting, north.false_northing) == (2000000., 2000000.)
    assert ups.projection('S').hemisphere is Hemisphere.SOUTH

    ups = UPS.from_ellipsoid(ELLIPSOIDS['IN'])
    assert ups.semi_major_axis == 6378388.0
    assert ups.flattening == approx(1 / 297.)

    with pytest.raises(RangeError):
        UPS(semi_major_axis=0.)


def test_convert_from_geodetic(ups):
    assert ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(90., 0.)) == UPSCoordinate(
        Hemisphere.NORTH, 2000000., 2000000.
    )
    assert ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(-90., 0.)) == UPSCoordinate(
        Hemisphere.SOUTH, 2000000., 2000000.
    )

    result = ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(85., 0.))
    assert result.hemisphere is Hemisphere.NORTH
    assert result.easting == approx(2000000.)
    assert result.northing < 2000000.

    result = ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(-85., 0.))
    assert result.hemisphere is Hemisphere.SOUTH
    assert result.easting == approx(2000000.)
    assert result.northing > 2000000.

    # Band limits, within tolerance
    ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(83.5, 0.))
    ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(-79.5, 0.))


def test_convert_from_geodetic_errors(ups):
    for lat in (83., 0., -79., 91., -91.):
        with pytest.raises(RangeError) as err:
            ups.convert_from_geodetic(GeodeticCoordinate.from_degrees(lat, 0.))
        assert err.value.parameter == 'latitude'

    with pytest.raises(RangeError) as err:
        ups.convert_from_geodetic(GeodeticCoordinate(math.radians(85.), 2 * math.pi + 0.1))
    assert err.value.parameter == 'longitude'

    with pytest.raises(RangeError) as err:
        ups.convert_from_geodetic(GeodeticCoordinate(math.radians(85.), -math.pi - 1e-9))
    assert err.value.parameter == 'longitude'

    with pytest.raises(RangeError):
        ups.convert_from_geodetic(GeodeticCoordinate(float('inf'), 0.))


def test_convert_to_geodetic(ups):
    pole = ups.convert_to_geodetic(UPSCoordinate(Hemisphere.NORTH, 2000000., 2000000.))
    assert pole.latitude == approx(math.pi / 2)

    pole = ups.convert_to_geodetic(UPSCoordinate('S', 2000000., 2000000.))
    assert pole.latitude == approx(-math.pi / 2)


def test_convert_to_geodetic_errors(ups):
    cases = [
        (UPSCoordinate('Q', 2000000., 2000000.), 'hemisphere'),
        (UPSCoordinate('N', -1., 2000000.), 'easting'),
        (UPSCoordinate('N', 4000001., 2000000.), 'easting'),
        (UPSCoordinate('S', 2000000., 4000001.), 'northing'),
        (UPSCoordinate('N', 0., 0.), 'latitude'),
    ]
    for coordinate, parameter in cases:
        with pytest.raises(RangeError) as err:
            ups.convert_to_geodetic(coordinate)
        assert err.value.parameter == parameter


def test_round_trip(ups):
    for lat_range in ((84., 90.), (-90., -80.)):
        for point in degree_grid(1., 15., lat_range=lat_range, lon_range=(-180., 345.)):
            result = ups.convert_to_geodetic(ups.convert_from_geodetic(point))
            assert_within_meters(result, point, 0.001)
