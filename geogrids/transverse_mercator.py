"""
Transverse Mercator projection between the ellipsoid and the plane of a single zone.

Geodetic latitude is taken to conformal latitude, projected with the spherical
transverse Mercator formulae, then carried onto the ellipsoidal plane with a
trigonometric/hyperbolic series in multiples of 2U and 2V (Krueger's n-series).
The series coefficients depend only on the shape of the ellipsoid: well-known
ellipsoids use tabulated values and any other ellipsoid derives them from
Helmert's n.
"""

__all__ = ['TransverseMercator', 'generate_coefficients']

import math
from typing import Dict, Tuple

import numpy as np
from pydantic import validate_call

from geogrids._const import (
    HALF_PI, TM_DELTA_EASTING, TM_DELTA_NORTHING, TM_LATITUDE_ITERATIONS,
    TM_LATITUDE_TOLERANCE, TM_MAX_DELTA_LONGITUDE, TM_MAX_SCALE_FACTOR,
    TM_MIN_INV_FLATTENING, TM_MIN_SCALE_FACTOR, TM_SERIES_TERMS,
    TM_TESTED_INV_FLATTENING, TWO_PI,
)
from geogrids.coordinates import GeodeticCoordinate, MapCoordinate
from geogrids.errors import RangeError
from geogrids.utils.functions import atanh, ensure_finite, wrap_longitude
from geogrids.utils.logging import warn_once

_COEFFICIENT_COUNT = 8


def _frozen(values: Tuple[float, ...]) -> np.ndarray:
    """Pads a coefficient tuple to the full series length as a read-only array"""
    arr = np.zeros(_COEFFICIENT_COUNT)
    arr[:len(values)] = values
    arr.flags.writeable = False
    return arr


# (ellipsoid codes, a2..a12, b2..b12); a14, a16, b14 and b16 are zero
_COEFFICIENT_TABLE = (
    (
        ('AA', 'AM'),
        (8.3474517669594013740e-04, 7.554352936725572895e-07, 1.18487391005135489e-09,
         2.3946872955703565e-12, 5.610633978440270e-15, 1.44858956458553e-17),
        (-8.3474551646761162264e-04, -5.863630361809676570e-08, -1.65562038746920803e-10,
         -2.1340335537652749e-13, -3.720760760132477e-16, -7.08304328877781e-19),
    ),
    (
        ('EA', 'EB', 'EC', 'ED', 'EE'),
        (8.3064943111192510534e-04, 7.480375027595025021e-07, 1.16750772278215999e-09,
         2.3479972304395461e-12, 5.474212231879573e-15, 1.40642257446745e-17),
        (-8.3064976590443772201e-04, -5.805953517555717859e-08, -1.63133251663416522e-10,
         -2.0923797199593389e-13, -3.630200927775259e-16, -6.87666654919219e-19),
    ),
    (
        ('BN', 'BR'),
        (8.3522527226849818552e-04, 7.563048340614894422e-07, 1.18692075307408346e-09,
         2.4002054791393298e-12, 5.626801597980756e-15, 1.45360057224474e-17),
        (-8.3522561262703079182e-04, -5.870409978661008580e-08, -1.65848307463131468e-10,
         -2.1389565927064571e-13, -3.731493368666479e-16, -7.10756898071999e-19),
    ),
    (
        ('KA', 'HE', 'FA'),
        (8.3761175713442343106e-04, 7.606346200814720197e-07, 1.19713032035541037e-09,
         2.4277772986483520e-12, 5.707722772225013e-15, 1.47872454335773e-17),
        (-8.3761210042019176501e-04, -5.904169154078546237e-08, -1.67276212891429215e-10,
         -2.1635549847939549e-13, -3.785212121016612e-16, -7.23053625983667e-19),
    ),
    (
        ('WD',),
        (8.3772481044362217923e-04, 7.608400388863560936e-07, 1.19761541904924067e-09,
         2.4290893081322466e-12, 5.711579173743133e-15, 1.47992364667635e-17),
        (-8.3772515386847544554e-04, -5.905770828762463028e-08, -1.67344058948464124e-10,
         -2.1647255130188214e-13, -3.787772179729998e-16, -7.23640523525528e-19),
    ),
    (
        ('WE',),
        (8.3773182062446983032e-04, 7.608527773572489156e-07, 1.19764550324249210e-09,
         2.4291706803973131e-12, 5.711818369154105e-15, 1.47999802705262e-17),
        (-8.3773216405794867707e-04, -5.905870152220365181e-08, -1.67348266534382493e-10,
         -2.1647981104903862e-13, -3.787930968839601e-16, -7.23676928796690e-19),
    ),
    (
        ('RF',),
        (8.3773182472855134012e-04, 7.608527848149655006e-07, 1.19764552085530681e-09,
         2.4291707280369697e-12, 5.711818509192422e-15, 1.47999807059922e-17),
        (-8.3773216816203523672e-04, -5.905870210369121594e-08, -1.67348268997717031e-10,
         -2.1647981529928124e-13, -3.787931061803592e-16, -7.23676950110361e-19),
    ),
    (
        ('SA', 'AN'),
        (8.3775209887947194075e-04, 7.608896263599627157e-07, 1.19773253021831769e-09,
         2.4294060763606098e-12, 5.712510331613028e-15, 1.48021320370432e-17),
        (-8.3775244233790270051e-04, -5.906157468586898015e-08, -1.67360438158764851e-10,
         -2.1650081225048788e-13, -3.788390325953455e-16, -7.23782246429908e-19),
    ),
    (
        ('ID',),
        (8.3776052087969078729e-04, 7.609049308144604484e-07, 1.19776867565343872e-09,
         2.4295038464530901e-12, 5.712797738386076e-15, 1.48030257891140e-17),
        (-8.3776086434848497443e-04, -5.906276799395007586e-08, -1.67365493472742884e-10,
         -2.1650953495573773e-13, -3.788581120060625e-16, -7.23825990889693e-19),
    ),
    (
        ('IN', 'HO'),
        (8.4127599100356448089e-04, 7.673066923431950296e-07, 1.21291995794281190e-09,
         2.4705731165688123e-12, 5.833780550286833e-15, 1.51800420867708e-17),
        (-8.4127633881644851945e-04, -5.956193574768780571e-08, -1.69484573979154433e-10,
         -2.2017363465021880e-13, -3.868896221495780e-16, -7.42279219864412e-19),
    ),
    (
        ('WO',),
        (8.4411652150600103279e-04, 7.724989750172583427e-07, 1.22525529789972041e-09,
         2.5041361775549209e-12, 5.933026083631383e-15, 1.54904908794521e-17),
        (-8.4411687285559594196e-04, -5.996681687064322548e-08, -1.71209836918814857e-10,
         -2.2316811233502163e-13, -3.934782433323038e-16, -7.57474665717687e-19),
    ),
    (
        ('CC',),
        (8.4703742793654652315e-04, 7.778564517658115212e-07, 1.23802665917879731e-09,
         2.5390045684252928e-12, 6.036484469753319e-15, 1.58152259295850e-17),
        (-8.4703778294785813001e-04, -6.038459874600183555e-08, -1.72996106059227725e-10,
         -2.2627911073545072e-13, -4.003466873888566e-16, -7.73369749524777e-19),
    ),
    (
        ('CG',),
        (8.5140099460764136776e-04, 7.858945456038187774e-07, 1.25727085106103462e-09,
         2.5917718627340128e-12, 6.193726879043722e-15, 1.63109098395549e-17),
        (-8.5140135513650084564e-04, -6.101145475063033499e-08, -1.75687742410879760e-10,
         -2.3098718484594067e-13, -4.107860472919190e-16, -7.97633133452512e-19),
    ),
    (
        ('CD',),
        (8.5140395445291970541e-04, 7.859000119464140978e-07, 1.25728397182445579e-09,
         2.5918079321459932e-12, 6.193834639108787e-15, 1.63112504092335e-17),
        (-8.5140431498554106268e-04, -6.101188106187092184e-08, -1.75689577596504470e-10,
         -2.3099040312610703e-13, -4.107932016207395e-16, -7.97649804397335e-19),
    ),
)

_TABULATED_COEFFICIENTS: Dict[str, Tuple[np.ndarray, np.ndarray]] = {
    code: (_frozen(a_coeff), _frozen(b_coeff))
    for codes, a_coeff, b_coeff in _COEFFICIENT_TABLE
    for code in codes
}

# Rational coefficients of n^1..n^8 for each of a2..a16 and b2..b16, as
# (numerator, denominator, power), summed from the highest power down
_A_POLYNOMIALS = (
    ((-18975107.0, 50803200.0, 8), (72161.0, 387072.0, 7), (7891.0, 37800.0, 6),
     (-127.0, 288.0, 5), (41.0, 180.0, 4), (5.0, 16.0, 3), (-2.0, 3.0, 2), (1.0, 2.0, 1)),
    ((148003883.0, 174182400.0, 8), (13769.0, 28800.0, 7), (-1983433.0, 1935360.0, 6),
     (281.0, 630.0, 5), (557.0, 1440.0, 4), (-3.0, 5.0, 3), (13.0, 48.0, 2)),
    ((79682431.0, 79833600.0, 8), (-67102379.0, 29030400.0, 7), (167603.0, 181440.0, 6),
     (15061.0, 26880.0, 5), (-103.0, 140.0, 4), (61.0, 240.0, 3)),
    ((-40176129013.0, 7664025600.0, 8), (97445.0, 49896.0, 7), (6601661.0, 7257600.0, 6),
     (-179.0, 168.0, 5), (49561.0, 161280.0, 4)),
    ((2605413599.0, 622702080.0, 8), (14644087.0, 9123840.0, 7), (-3418889.0, 1995840.0, 6),
     (34729.0, 80640.0, 5)),
    ((175214326799.0, 58118860800.0, 8), (-30705481.0, 10378368.0, 7),
     (212378941.0, 319334400.0, 6)),
    ((-16759934899.0, 3113510400.0, 8), (1522256789.0, 1383782400.0, 7)),
    ((1424729850961.0, 743921418240.0, 8),),
)

_B_POLYNOMIALS = (
    ((-7944359.0, 67737600.0, 8), (5406467.0, 38707200.0, 7), (-96199.0, 604800.0, 6),
     (81.0, 512.0, 5), (1.0, 360.0, 4), (-37.0, 96.0, 3), (2.0, 3.0, 2), (-1.0, 2.0, 1)),
    ((-24749483.0, 348364800.0, 8), (-51841.0, 1209600.0, 7), (1118711.0, 3870720.0, 6),
     (-46.0, 105.0, 5), (437.0, 1440.0, 4), (-1.0, 15.0, 3), (-1.0, 48.0, 2)),
    ((6457463.0, 17740800.0, 8), (-9261899.0, 58060800.0, 7), (-5569.0, 90720.0, 6),
     (209.0, 4480.0, 5), (37.0, 840.0, 4), (-17.0, 480.0, 3)),
    ((-324154477.0, 7664025600.0, 8), (-466511.0, 2494800.0, 7), (830251.0, 7257600.0, 6),
     (11.0, 504.0, 5), (-4397.0, 161280.0, 4)),
    ((-22894433.0, 124540416.0, 8), (8005831.0, 63866880.0, 7), (108847.0, 3991680.0, 6),
     (-4583.0, 161280.0, 5)),
    ((2204645983.0, 12915302400.0, 8), (16363163.0, 518918400.0, 7),
     (-20648693.0, 638668800.0, 6)),
    ((497323811.0, 12454041600.0, 8), (-219941297.0, 5535129600.0, 7)),
    ((-191773887257.0, 3719607091200.0, 8),),
)


def _evaluate_polynomials(polynomials, powers) -> np.ndarray:
    out = np.zeros(_COEFFICIENT_COUNT)
    for idx, terms in enumerate(polynomials):
        coeff = 0.0
        for numerator, denominator, power in terms:
            coeff += numerator * powers[power] / denominator
        out[idx] = coeff
    out.flags.writeable = False
    return out


def generate_coefficients(
    inv_flattening: float,
    ellipsoid_code: str = ''
) -> Tuple[float, np.ndarray, np.ndarray, float]:
    """
    Generates the coefficients of the Transverse Mercator series.

    omega is the rectifying latitude and chi the conformal latitude; the A
    coefficients give omega as a trig series in chi and the B coefficients give
    chi as a trig series in omega, for k = 2, 4, ..., 16. These depend only on
    the shape of the ellipsoid, not its size.

    Args:
        inv_flattening:
            The inverse (reciprocal) flattening of the ellipsoid

        ellipsoid_code: (Optional)
            A two-letter ellipsoid code. Registered codes use tabulated
            coefficients; any other code computes them from Helmert's n.

    Returns:
        Helmert's n, the A coefficients, the B coefficients, and the ratio of the
        meridional isoperimetric radius to the semi-major axis (R4/a)
    """
    n1 = 1.0 / (2 * inv_flattening - 1.0)

    # powers[k] == n ** k, built by repeated multiplication
    powers = [1.0, n1]
    for _ in range(9):
        powers.append(powers[-1] * n1)

    if ellipsoid_code in _TABULATED_COEFFICIENTS:
        a_coeff, b_coeff = _TABULATED_COEFFICIENTS[ellipsoid_code]
    else:
        a_coeff = _evaluate_polynomials(_A_POLYNOMIALS, powers)
        b_coeff = _evaluate_polynomials(_B_POLYNOMIALS, powers)

    coeff = 0.0
    coeff += 49 * powers[10] / 65536.0
    coeff += 25 * powers[8] / 16384.0
    coeff += powers[6] / 256.0
    coeff += powers[4] / 64.0
    coeff += powers[2] / 4
    coeff += 1
    r4oa = coeff / (1 + n1)

    return n1, a_coeff, b_coeff, r4oa


def _hyperbolic_series(two_x: float) -> Tuple[np.ndarray, np.ndarray]:
    """cosh(2kX) and sinh(2kX) for k = 1..8, by double-angle recurrence"""
    c2kx, s2kx = np.empty(_COEFFICIENT_COUNT), np.empty(_COEFFICIENT_COUNT)
    c2kx[0] = math.cosh(two_x)
    s2kx[0] = math.sinh(two_x)
    c2kx[1] = 2.0 * c2kx[0] * c2kx[0] - 1.0
    s2kx[1] = 2.0 * c2kx[0] * s2kx[0]
    c2kx[2] = c2kx[0] * c2kx[1] + s2kx[0] * s2kx[1]
    s2kx[2] = c2kx[1] * s2kx[0] + c2kx[0] * s2kx[1]
    c2kx[3] = 2.0 * c2kx[1] * c2kx[1] - 1.0
    s2kx[3] = 2.0 * c2kx[1] * s2kx[1]
    c2kx[4] = c2kx[0] * c2kx[3] + s2kx[0] * s2kx[3]
    s2kx[4] = c2kx[3] * s2kx[0] + c2kx[0] * s2kx[3]
    c2kx[5] = 2.0 * c2kx[2] * c2kx[2] - 1.0
    s2kx[5] = 2.0 * c2kx[2] * s2kx[2]
    c2kx[6] = c2kx[0] * c2kx[5] + s2kx[0] * s2kx[5]
    s2kx[6] = c2kx[5] * s2kx[0] + c2kx[0] * s2kx[5]
    c2kx[7] = 2.0 * c2kx[3] * c2kx[3] - 1.0
    s2kx[7] = 2.0 * c2kx[3] * s2kx[3]
    return c2kx, s2kx


def _trig_series(two_y: float) -> Tuple[np.ndarray, np.ndarray]:
    """cos(2kY) and sin(2kY) for k = 1..8, by double-angle recurrence"""
    c2ky, s2ky = np.empty(_COEFFICIENT_COUNT), np.empty(_COEFFICIENT_COUNT)
    c2ky[0] = math.cos(two_y)
    s2ky[0] = math.sin(two_y)
    c2ky[1] = 2.0 * c2ky[0] * c2ky[0] - 1.0
    s2ky[1] = 2.0 * c2ky[0] * s2ky[0]
    c2ky[2] = c2ky[1] * c2ky[0] - s2ky[1] * s2ky[0]
    s2ky[2] = c2ky[1] * s2ky[0] + c2ky[0] * s2ky[1]
    c2ky[3] = 2.0 * c2ky[1] * c2ky[1] - 1.0
    s2ky[3] = 2.0 * c2ky[1] * s2ky[1]
    c2ky[4] = c2ky[3] * c2ky[0] - s2ky[3] * s2ky[0]
    s2ky[4] = c2ky[3] * s2ky[0] + c2ky[0] * s2ky[3]
    c2ky[5] = 2.0 * c2ky[2] * c2ky[2] - 1.0
    s2ky[5] = 2.0 * c2ky[2] * s2ky[2]
    c2ky[6] = c2ky[5] * c2ky[0] - s2ky[5] * s2ky[0]
    s2ky[6] = c2ky[5] * s2ky[0] + c2ky[0] * s2ky[5]
    c2ky[7] = 2.0 * c2ky[3] * c2ky[3] - 1.0
    s2ky[7] = 2.0 * c2ky[3] * s2ky[3]
    return c2ky, s2ky


def _geodetic_latitude(sin_chi: float, eccentricity: float) -> float:
    """Inverts conformal latitude (given by its sine) to geodetic latitude"""
    s_old = 1.0e99
    s = sin_chi
    one_plus_sin_chi = 1.0 + sin_chi
    one_minus_sin_chi = 1.0 - sin_chi

    for _ in range(TM_LATITUDE_ITERATIONS):
        p = math.exp(eccentricity * atanh(eccentricity * s))
        p_sq = p * p
        s = (one_plus_sin_chi * p_sq - one_minus_sin_chi) / (
            one_plus_sin_chi * p_sq + one_minus_sin_chi
        )

        if abs(s - s_old) < TM_LATITUDE_TOLERANCE:
            break
        s_old = s

    return math.asin(s)


class TransverseMercator:
    """
    Converts between geodetic coordinates and Transverse Mercator coordinates
    (easting and northing) for a single central meridian.

    Args:
        semi_major_axis:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid; its inverse must be at least 150

        central_meridian:
            Longitude of the projection origin, in radians, within [-pi, 2pi]

        origin_latitude:
            Latitude of the projection origin, in radians, within [-pi/2, pi/2]

        false_easting:
            Easting assigned to the origin, in meters

        false_northing:
            Northing assigned to the origin, in meters

        scale_factor:
            Scale factor along the central meridian, within [0.1, 10.0]

        ellipsoid_code:
            Two-letter ellipsoid code; selects tabulated series coefficients
            for registered ellipsoids
    """

    @validate_call
    def __init__(
        self,
        semi_major_axis: float,
        flattening: float,
        central_meridian: float,
        origin_latitude: float,
        false_easting: float,
        false_northing: float,
        scale_factor: float,
        ellipsoid_code: str,
    ):
        inv_flattening = 1.0 / flattening if flattening else math.inf

        if not ellipsoid_code:
            raise RangeError('ellipsoid_code', 'missing ellipsoid code')
        if not semi_major_axis > 0.0:
            raise RangeError('semi_major_axis', 'Semi-major axis must be greater than zero')
        if not inv_flattening >= TM_MIN_INV_FLATTENING:
            raise RangeError('flattening', 'inverse ellipsoid flattening out of range')
        if not -HALF_PI <= origin_latitude <= HALF_PI:
            raise RangeError('origin_latitude')
        if not -math.pi <= central_meridian <= TWO_PI:
            raise RangeError('central_meridian')
        if not TM_MIN_SCALE_FACTOR <= scale_factor <= TM_MAX_SCALE_FACTOR:
            raise RangeError('scale_factor')

        if not TM_TESTED_INV_FLATTENING[0] <= inv_flattening <= TM_TESTED_INV_FLATTENING[1]:
            warn_once(
                'Eccentricity is outside the range in which Transverse Mercator accuracy '
                'has been tested. (this warning will not repeat)'
            )

        if central_meridian > math.pi:
            central_meridian -= TWO_PI

        self._semi_major_axis = semi_major_axis
        self._flattening = flattening
        self._ellipsoid_code = ellipsoid_code
        self._central_meridian = central_meridian
        self._origin_latitude = origin_latitude
        self._false_easting = false_easting
        self._false_northing = false_northing
        self._scale_factor = scale_factor

        self._eccentricity = math.sqrt(2 * flattening - flattening * flattening)

        _, self._a_coeff, self._b_coeff, r4oa = generate_coefficients(
            inv_flattening, ellipsoid_code
        )
        self._k0r4 = r4oa * scale_factor * semi_major_axis
        self._k0r4inv = 1.0 / self._k0r4

        # The origin may move from (0, 0); its own projection is removed from
        # every result and restored before every inversion
        self._origin_easting, self._origin_northing = self._project(
            origin_latitude, central_meridian
        )

    def __repr__(self):
        return (
            f'<TransverseMercator(central_meridian={math.degrees(self._central_meridian)}, '
            f'scale_factor={self._scale_factor}, ellipsoid={self._ellipsoid_code})>'
        )

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
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def central_meridian(self) -> float:
        return self._central_meridian

    @property
    def origin_latitude(self) -> float:
        return self._origin_latitude

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
    def coefficients(self) -> Tuple[np.ndarray, np.ndarray]:
        """The (A, B) series coefficients in use"""
        return self._a_coeff, self._b_coeff

    @staticmethod
    def _check_envelope(latitude: float, delta_lon: float) -> None:
        """
        Rejects points too far from the central meridian, where the series
        no longer converges. Points near either pole, or near the meridian
        opposite the central one, are accepted.
        """
        delta_lon = wrap_longitude(delta_lon)

        test_angle = min(
            abs(delta_lon),
            abs(delta_lon - math.pi),
            abs(delta_lon + math.pi),
            HALF_PI - latitude,
            HALF_PI + latitude,
        )
        if test_angle > TM_MAX_DELTA_LONGITUDE:
            raise RangeError('longitude')

    def _project(self, latitude: float, longitude: float) -> Tuple[float, float]:
        """Ellipsoid to plane, without false easting/northing"""
        lam = wrap_longitude(longitude - self._central_meridian)
        self._check_envelope(latitude, lam)

        cos_lam = math.cos(lam)
        sin_lam = math.sin(lam)
        cos_phi = math.cos(latitude)
        sin_phi = math.sin(latitude)

        # Geodetic latitude to conformal latitude; only its sine and cosine are needed
        p = math.exp(self._eccentricity * atanh(self._eccentricity * sin_phi))
        part1 = (1 + sin_phi) / p
        part2 = (1 - sin_phi) * p
        denom = part1 + part2
        cos_chi = 2 * cos_phi / denom
        sin_chi = (part1 - part2) / denom

        # Sphere to first plane
        u = atanh(cos_chi * sin_lam)
        v = math.atan2(sin_chi, cos_chi * cos_lam)

        c2ku, s2ku = _hyperbolic_series(2.0 * u)
        c2kv, s2kv = _trig_series(2.0 * v)

        # First plane to second plane
        x_star = 0.0
        y_star = 0.0
        for k in range(TM_SERIES_TERMS - 1, -1, -1):
            x_star += self._a_coeff[k] * s2ku[k] * c2kv[k]
            y_star += self._a_coeff[k] * c2ku[k] * s2kv[k]

        x_star += u
        y_star += v

        return float(self._k0r4 * x_star), float(self._k0r4 * y_star)

    def _unproject(self, easting: float, northing: float) -> Tuple[float, float]:
        """Plane to ellipsoid, without false easting/northing"""
        x_star = self._k0r4inv * easting
        y_star = self._k0r4inv * northing

        c2kx, s2kx = _hyperbolic_series(2.0 * x_star)
        c2ky, s2ky = _trig_series(2.0 * y_star)

        # Second plane (x*, y*) to first plane (u, v)
        u = 0.0
        v = 0.0
        for k in range(TM_SERIES_TERMS - 1, -1, -1):
            u += self._b_coeff[k] * s2kx[k] * c2ky[k]
            v += self._b_coeff[k] * c2kx[k] * s2ky[k]

        u = float(u + x_star)
        v = float(v + y_star)

        # First plane to sphere
        cosh_u = math.cosh(u)
        sinh_u = math.sinh(u)
        cos_v = math.cos(v)
        sin_v = math.sin(v)

        if abs(cos_v) < 10E-12 and abs(cosh_u) < 10E-12:
            lam = 0.0
        else:
            lam = math.atan2(sinh_u, cos_v)

        latitude = _geodetic_latitude(sin_v / cosh_u, self._eccentricity)
        return latitude, self._central_meridian + lam

    def convert_from_geodetic(self, coordinate: GeodeticCoordinate) -> MapCoordinate:
        """
        Converts a geodetic coordinate to Transverse Mercator easting/northing.

        Args:
            coordinate:
                The GeodeticCoordinate to project

        Returns:
            MapCoordinate

        Raises:
            RangeError: if the latitude is outside [-pi/2, pi/2] or the point
                lies more than 70 degrees from the central meridian
        """
        latitude, longitude = coordinate.latitude, coordinate.longitude
        ensure_finite(latitude, longitude)
        if not -HALF_PI <= latitude <= HALF_PI:
            raise RangeError('latitude')

        easting, northing = self._project(latitude, wrap_longitude(longitude))

        return MapCoordinate(
            easting + (self._false_easting - self._origin_easting),
            northing + (self._false_northing - self._origin_northing),
        )

    def convert_to_geodetic(self, coordinate: MapCoordinate) -> GeodeticCoordinate:
        """
        Converts Transverse Mercator easting/northing to a geodetic coordinate.

        Args:
            coordinate:
                The MapCoordinate to invert

        Returns:
            GeodeticCoordinate

        Raises:
            RangeError: if the easting or northing lies outside the projection's
                envelope, or the result lies beyond either pole
        """
        easting, northing = coordinate

        if not (
            self._false_easting - TM_DELTA_EASTING
            <= easting
            <= self._false_easting + TM_DELTA_EASTING
        ):
            raise RangeError('easting')

        if not (
            self._false_northing - TM_DELTA_NORTHING
            <= northing
            <= self._false_northing + TM_DELTA_NORTHING
        ):
            raise RangeError('northing')

        easting -= self._false_easting - self._origin_easting
        northing -= self._false_northing - self._origin_northing

        latitude, longitude = self._unproject(easting, northing)

        if longitude > math.pi:
            longitude -= TWO_PI
        if longitude <= -math.pi:
            longitude += TWO_PI

        if abs(latitude) > HALF_PI:
            raise RangeError('northing')

        return GeodeticCoordinate(latitude, longitude)
