from geogrids import (
    GeodeticCoordinate, MGRS, UPS, UTM, default_mgrs, default_ups, default_utm
)


def test_default_converters():
    assert isinstance(default_utm(), UTM)
    assert isinstance(default_ups(), UPS)
    assert isinstance(default_mgrs(), MGRS)

    assert default_utm() is default_utm()
    assert default_ups() is default_ups()
    assert default_mgrs() is default_mgrs()

    assert default_utm().ellipsoid_code == 'WE'
    assert default_mgrs().ellipsoid_code == 'WE'


def test_default_mgrs():
    origin = GeodeticCoordinate.from_degrees(0., 0.)
    assert default_mgrs().convert_from_geodetic(origin) == '31NAA6602100000'
