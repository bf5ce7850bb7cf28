import math

import pytest
from pytest import approx

from geogrids import (
    WGS84, ConvergenceError, GeodeticCoordinate, Hemisphere, MapCoordinate,
    PolarStereographic, RangeError
)
from tests.functions import assert_geodetic_equal

A, F = WGS84.semi_major_axis, WGS84.flattening


def test_standard_parallel_init():
    ps = PolarStereographic(A, F, 0., math.radians(-71.))
    assert ps.hemisphere is Hemisphere.SOUTH
    assert ps.standard_parallel == approx(math.radians(-71.))
    assert ps.central_meridian == 0.
    assert ps.false_easting == 0.
    assert ps.false_northing == 0.
    assert 0.9 < ps.scale_factor < 1.

    ps = PolarStereographic(A, F, 4., math.radians(70.), 10., 20.)
    assert ps.hemisphere is Hemisphere.NORTH
    assert ps.central_meridian == approx(4. - 2 * math.pi)
    assert (ps.false_easting, ps.false_northing) == (10., 20.)

    # True scale at the pole
    ps = PolarStereographic(A, F, 0., math.pi / 2)
    assert ps.scale_factor == approx(1.)


def test_standard_parallel_init_validation():
    with pytest.raises(RangeError) as err:
        PolarStereographic(-1., F, 0., 1.)
    assert err.value.parameter == 'semi_major_axis'

    with pytest.raises(RangeError) as err:
        PolarStereographic(A, 1 / 400., 0., 1.)
    assert err.value.parameter == 'flattening'

    with pytest.raises(RangeError) as err:
        PolarStereographic(A, F, 0., 2.)
    assert err.value.parameter == 'standard_parallel'

    with pytest.raises(RangeError) as err:
        PolarStereographic(A, F, -4., 1.)
    assert err.value.parameter == 'central_meridian'


def test_from_scale_factor():
    ps = PolarStereographic.from_scale_factor(A, F, 0., 1., Hemisphere.NORTH)
    assert ps.standard_parallel == approx(math.pi / 2)
    assert ps.scale_factor == 1.
    assert ps.hemisphere is Hemisphere.NORTH

    # Accepts the hemisphere letter
    ps = PolarStereographic.from_scale_factor(A, F, 0., 0.994, 'S', 2000000., 2000000.)
    assert ps.hemisphere is Hemisphere.SOUTH
    assert math.degrees(ps.standard_parallel) == approx(-81.1145179, abs=1e-6)
    assert ps.scale_factor == 0.994


def test_from_scale_factor_matches_standard_parallel():
    by_parallel = PolarStereographic(A, F, 0., math.radians(-71.))
    by_scale = PolarStereographic.from_scale_factor(
        A, F, 0., by_parallel.scale_factor, Hemisphere.SOUTH
    )
    assert by_scale.standard_parallel == approx(math.radians(-71.), abs=1e-9)

    point = GeodeticCoordinate.from_degrees(-75., 30.)
    p1 = by_parallel.convert_from_geodetic(point)
    p2 = by_scale.convert_from_geodetic(point)
    assert p1.easting == approx(p2.easting, abs=1e-4)
    assert p1.northing == approx(p2.northing, abs=1e-4)


def test_from_scale_factor_validation():
    with pytest.raises(RangeError) as err:
        PolarStereographic.from_scale_factor(A, F, 0., 0.05, Hemisphere.NORTH)
    assert err.value.parameter == 'scale_factor'

    with pytest.raises(RangeError) as err:
        PolarStereographic.from_scale_factor(A, F, 7., 1., Hemisphere.NORTH)
    assert err.value.parameter == 'central_meridian'

    with pytest.raises(RangeError) as err:
        PolarStereographic.from_scale_factor(A, F, 0., 1., 'X')
    assert err.value.parameter == 'hemisphere'

    # No latitude has this scale
    with pytest.raises(ConvergenceError):
        PolarStereographic.from_scale_factor(A, F, 0., 3., Hemisphere.NORTH)


def test_delta_envelope():
    ps = PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.NORTH, 2000000., 2000000.)
    equator = ps.convert_from_geodetic(GeodeticCoordinate(0., 0.))
    assert ps.delta_northing == approx(abs(equator.northing - 2000000.) * 1.01)
    assert ps.delta_easting == ps.delta_northing


def test_convert_from_geodetic_north():
    ps = PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.NORTH, 2000000., 2000000.)

    assert ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(90., 45.)) == MapCoordinate(
        2000000., 2000000.
    )

    # The central meridian points down the grid
    result = ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(85., 0.))
    assert result.easting == approx(2000000.)
    assert result.northing < 2000000.

    result = ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(85., 90.))
    assert result.easting > 2000000.
    assert result.northing == approx(2000000.)

    with pytest.raises(RangeError) as err:
        ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(-10., 0.))
    assert err.value.parameter == 'latitude'

    with pytest.raises(RangeError) as err:
        ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(91., 0.))
    assert err.value.parameter == 'latitude'

    with pytest.raises(RangeError) as err:
        ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(85., -181.))
    assert err.value.parameter == 'longitude'


def test_convert_from_geodetic_south():
    ps = PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.SOUTH, 2000000., 2000000.)

    assert ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(-90., 0.)) == MapCoordinate(
        2000000., 2000000.
    )

    # The central meridian points up the grid
    result = ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(-85., 0.))
    assert result.easting == approx(2000000.)
    assert result.northing > 2000000.

    result = ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(-85., 90.))
    assert result.easting > 2000000.

    with pytest.raises(RangeError):
        ps.convert_from_geodetic(GeodeticCoordinate.from_degrees(10., 0.))


def test_convert_to_geodetic():
    north = PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.NORTH, 2000000., 2000000.)
    south = PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.SOUTH, 2000000., 2000000.)

    pole = north.convert_to_geodetic(MapCoordinate(2000000., 2000000.))
    assert pole.latitude == approx(math.pi / 2)
    assert pole.longitude == 0.

    pole = south.convert_to_geodetic(MapCoordinate(2000000., 2000000.))
    assert pole.latitude == approx(-math.pi / 2)

    with pytest.raises(RangeError) as err:
        north.convert_to_geodetic(MapCoordinate(2000000. + north.delta_easting + 1., 2000000.))
    assert err.value.parameter == 'easting'

    with pytest.raises(RangeError) as err:
        north.convert_to_geodetic(MapCoordinate(2000000., 2000000. - north.delta_northing - 1.))
    assert err.value.parameter == 'northing'


def test_round_trip():
    projections = [
        PolarStereographic.from_scale_factor(A, F, 0., 0.994, Hemisphere.NORTH, 2000000., 2000000.),
        PolarStereographic(A, F, math.radians(-45.), math.radians(70.)),
    ]
    for ps in projections:
        for lat in range(60, 90, 5):
            for lon in range(-150, 180, 30):
                point = GeodeticCoordinate.from_degrees(lat, lon)
                assert_geodetic_equal(
                    ps.convert_to_geodetic(ps.convert_from_geodetic(point)), point, abs_tol=1e-7
                )

    south = PolarStereographic(A, F, 0., math.radians(-71.))
    for lat in range(-85, -55, 5):
        for lon in range(-150, 180, 30):
            point = GeodeticCoordinate.from_degrees(lat, lon)
            assert_geodetic_equal(
                south.convert_to_geodetic(south.convert_from_geodetic(point)), point, abs_tol=1e-7
            )
