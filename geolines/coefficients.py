"""
Truncated series coefficients for geodesic calculations.

The integer banks below hold, for every series, the numerators of each polynomial in
the expansion parameter followed by its common denominator. The A3, C3 and C4 banks are
polynomials in the third flattening n and are evaluated once per ellipsoid; the A1, A2,
C1, C1' and C2 banks are polynomials in eps (or eps^2) and are evaluated per geodesic.
"""

__all__ = [
    'a1m1f', 'a2m1f', 'a3_coeffs', 'a3f', 'c1f', 'c1pf', 'c2f', 'c3_coeffs', 'c3f',
    'c4_coeffs', 'c4f',
]

from typing import List, Sequence

from geolines._const import GEODESIC_ORDER, NA3, NC3, NC4
from geolines.geomath import polyval

_A1M1_COEFF = (1, 4, 64, 0, 256)

_A2M1_COEFF = (-11, -28, -192, 0, 256)

_A3_COEFF = (
    -3, 128,
    -2, -3, 64,
    -1, -3, -1, 16,
    3, -1, -2, 8,
    1, -1, 2,
    1, 1,
)

_C1_COEFF = (
    -1, 6, -16, 32,
    -9, 64, -128, 2048,
    9, -16, 768,
    3, -5, 512,
    -7, 1280,
    -7, 2048,
)

_C1P_COEFF = (
    205, -432, 768, 1536,
    4005, -4736, 3840, 12288,
    -225, 116, 384,
    -7173, 2695, 7680,
    3467, 7680,
    38081, 61440,
)

_C2_COEFF = (
    1, 2, 16, 32,
    35, 64, 384, 2048,
    15, 80, 768,
    7, 35, 512,
    63, 1280,
    77, 2048,
)

_C3_COEFF = (
    3, 128,
    2, 5, 128,
    -1, 3, 3, 64,
    -1, 0, 1, 8,
    -1, 1, 4,
    5, 256,
    1, 3, 128,
    -3, -2, 3, 64,
    1, -3, 2, 32,
    7, 512,
    -10, 9, 384,
    5, -9, 5, 192,
    7, 512,
    -14, 7, 512,
    21, 2560,
)

_C4_COEFF = (
    97, 15015,
    1088, 156, 45045,
    -224, -4784, 1573, 45045,
    -10656, 14144, -4576, -858, 45045,
    64, 624, -4576, 6864, -3003, 15015,
    100, 208, 572, 3432, -12012, 30030, 45045,
    1, 9009,
    -2944, 468, 135135,
    5792, 1040, -1287, 135135,
    5952, -11648, 9152, -2574, 135135,
    -64, -624, 4576, -6864, 3003, 135135,
    8, 10725,
    1856, -936, 225225,
    -8448, 4992, -1144, 225225,
    -1440, 4160, -4576, 1716, 225225,
    -136, 63063,
    1024, -208, 105105,
    3584, -3328, 1144, 315315,
    -128, 135135,
    -2560, 832, 405405,
    128, 99099,
)


def a1m1f(eps: float) -> float:
    """The scale factor A1 - 1 of the distance integral I1"""
    m = GEODESIC_ORDER // 2
    t = polyval(m, _A1M1_COEFF, 0, eps ** 2) / _A1M1_COEFF[m + 1]
    return (t + eps) / (1 - eps)


def a2m1f(eps: float) -> float:
    """The scale factor A2 - 1 of the reduced length integral I2"""
    m = GEODESIC_ORDER // 2
    t = polyval(m, _A2M1_COEFF, 0, eps ** 2) / _A2M1_COEFF[m + 1]
    return (t - eps) / (1 + eps)


def _sine_series(coeff: Sequence[int], eps: float) -> List[float]:
    """Evaluate one of the C1, C1' or C2 banks; index 0 of the result is unused"""
    c = [0.0] * (GEODESIC_ORDER + 1)
    eps2 = eps ** 2
    d = eps
    o = 0
    for l in range(1, GEODESIC_ORDER + 1):
        m = (GEODESIC_ORDER - l) // 2
        c[l] = d * polyval(m, coeff, o, eps2) / coeff[o + m + 1]
        o += m + 2
        d *= eps
    return c


def c1f(eps: float) -> List[float]:
    """Coefficients of the distance integral I1"""
    return _sine_series(_C1_COEFF, eps)


def c1pf(eps: float) -> List[float]:
    """Coefficients of the reverted series, giving sigma in terms of tau"""
    return _sine_series(_C1P_COEFF, eps)


def c2f(eps: float) -> List[float]:
    """Coefficients of the reduced length integral I2"""
    return _sine_series(_C2_COEFF, eps)


def a3_coeffs(n: float) -> List[float]:
    """
    Reduce the A3 bank to polynomials in eps for an ellipsoid.

    Args:
        n:
            The third flattening of the ellipsoid

    Returns:
        A list of NA3 coefficients, highest order first
    """
    a3x = [0.0] * NA3
    o = 0
    for k, j in enumerate(range(NA3 - 1, -1, -1)):
        m = min(NA3 - j - 1, j)
        a3x[k] = polyval(m, _A3_COEFF, o, n) / _A3_COEFF[o + m + 1]
        o += m + 2
    return a3x


def a3f(eps: float, a3x: Sequence[float]) -> float:
    """Evaluate the longitude integral scale A3"""
    return polyval(NA3 - 1, a3x, 0, eps)


def c3_coeffs(n: float) -> List[float]:
    """
    Reduce the C3 bank to polynomials in eps for an ellipsoid.

    Args:
        n:
            The third flattening of the ellipsoid

    Returns:
        A flat list of NC3 * (NC3 - 1) / 2 coefficients
    """
    c3x = []
    o = 0
    for l in range(1, NC3):
        for j in range(NC3 - 1, l - 1, -1):
            m = min(NC3 - j - 1, j)
            c3x.append(polyval(m, _C3_COEFF, o, n) / _C3_COEFF[o + m + 1])
            o += m + 2
    return c3x


def c3f(eps: float, c3x: Sequence[float]) -> List[float]:
    """Coefficients of the longitude integral I3; index 0 of the result is unused"""
    c = [0.0] * NC3
    mult = 1.0
    o = 0
    for l in range(1, NC3):
        m = NC3 - l - 1
        mult *= eps
        c[l] = mult * polyval(m, c3x, o, eps)
        o += m + 1
    return c


def c4_coeffs(n: float) -> List[float]:
    """
    Reduce the C4 bank to polynomials in eps for an ellipsoid.

    Args:
        n:
            The third flattening of the ellipsoid

    Returns:
        A flat list of NC4 * (NC4 + 1) / 2 coefficients
    """
    c4x = []
    o = 0
    for l in range(NC4):
        for j in range(NC4 - 1, l - 1, -1):
            m = NC4 - j - 1
            c4x.append(polyval(m, _C4_COEFF, o, n) / _C4_COEFF[o + m + 1])
            o += m + 2
    return c4x


def c4f(eps: float, c4x: Sequence[float]) -> List[float]:
    """Coefficients of the area integral I4"""
    c = [0.0] * NC4
    mult = 1.0
    o = 0
    for l in range(NC4):
        m = NC4 - l - 1
        c[l] = mult * polyval(m, c4x, o, eps)
        o += m + 1
        mult *= eps
    return c
