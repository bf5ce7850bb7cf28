import pytest
from pytest import approx

from geogrids import ELLIPSOIDS, WGS84, RangeError, UnknownEllipsoidError, get_ellipsoid
from geogrids.ellipsoids import validate_ellipsoid


def test_wgs84():
    assert WGS84.semi_major_axis == 6378137.0
    assert WGS84.inverse_flattening == approx(298.257223563)
    assert WGS84.code == 'WE'
    assert ELLIPSOIDS['WE'] is WGS84


def test_registry_codes():
    assert all(code == ellipsoid.code for code, ellipsoid in ELLIPSOIDS.items())
    assert len(ELLIPSOIDS) == 25
    assert ELLIPSOIDS['IN'].semi_major_axis == 6378388.0
    assert ELLIPSOIDS['CC'].inverse_flattening == approx(294.9786982)


def test_get_ellipsoid():
    assert get_ellipsoid('WE') is WGS84
    assert get_ellipsoid('we') is WGS84
    assert get_ellipsoid('BR').name == 'Bessel 1841'

    with pytest.raises(UnknownEllipsoidError):
        get_ellipsoid('ZZ')

    with pytest.raises(RangeError):
        get_ellipsoid(None)


def test_validate_ellipsoid():
    for ellipsoid in ELLIPSOIDS.values():
        validate_ellipsoid(ellipsoid.semi_major_axis, ellipsoid.flattening)

    with pytest.raises(RangeError) as err:
        validate_ellipsoid(0., WGS84.flattening)
    assert err.value.parameter == 'semi_major_axis'

    with pytest.raises(RangeError) as err:
        validate_ellipsoid(float('nan'), WGS84.flattening)
    assert err.value.parameter == 'semi_major_axis'

    with pytest.raises(RangeError) as err:
        validate_ellipsoid(WGS84.semi_major_axis, 1 / 200)
    assert err.value.parameter == 'flattening'

    with pytest.raises(RangeError):
        validate_ellipsoid(WGS84.semi_major_axis, 1 / 351)

    with pytest.raises(RangeError):
        validate_ellipsoid(WGS84.semi_major_axis, 0.)
