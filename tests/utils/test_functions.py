import math

import pytest
from pytest import approx

from geogrids.errors import RangeError
from geogrids.utils.functions import *


def test_atanh():
    assert atanh(0.) == 0.
    assert atanh(0.5) == approx(math.atanh(0.5))
    assert atanh(-0.9) == approx(math.atanh(-0.9))


def test_wrap_longitude():
    assert wrap_longitude(0.) == 0.
    assert wrap_longitude(math.pi) == math.pi
    assert wrap_longitude(-math.pi) == -math.pi
    assert wrap_longitude(math.pi + 0.5) == approx(-math.pi + 0.5)
    assert wrap_longitude(-math.pi - 0.5) == approx(math.pi - 0.5)
    assert wrap_longitude(1.5 * math.pi) == approx(-0.5 * math.pi)


def test_ensure_finite():
    ensure_finite(0., 0.)

    with pytest.raises(RangeError) as err:
        ensure_finite(float('nan'), 0.)
    assert err.value.parameter == 'latitude'

    with pytest.raises(RangeError) as err:
        ensure_finite(0., float('-inf'))
    assert err.value.parameter == 'longitude'
