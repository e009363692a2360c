"""
Numeric primitives used by the geodesic calculations. All angles are in degrees unless
the function name says otherwise.
"""

__all__ = [
    'ang_diff', 'ang_normalize', 'ang_round', 'astroid', 'atan2d', 'cbrt', 'eatanhe',
    'lat_fix', 'norm', 'norm_degrees', 'polyval', 'sin_cos_series', 'sincosd', 'smod',
    'sum_exact', 'umod',
]

import math
from typing import Sequence, Tuple

_NORM_MODES = ('euclidean', 'symmetric', 'inverted')


def cbrt(x: float) -> float:
    """Real cube root of x"""
    y = math.pow(abs(x), 1 / 3.0)
    return y if x > 0 else (-y if x < 0 else x)


def norm(x: float, y: float) -> Tuple[float, float]:
    """
    Scale the 2-vector (x, y) to unit length.

    Returns:
        (x, y) divided by hypot(x, y)
    """
    r = math.hypot(x, y)
    return x / r, y / r


def sum_exact(u: float, v: float) -> Tuple[float, float]:
    """
    Error free transformation of a sum. Returns s, t such that s = round(u + v) and
    s + t = u + v exactly.
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    return s, t


def polyval(n: int, p: Sequence[float], s: int, x: float) -> float:
    """
    Evaluate a polynomial of degree n with Horner's method.

    Args:
        n:
            The degree of the polynomial; a negative value evaluates to 0

        p:
            Coefficients, highest order first

        s:
            Offset of the leading coefficient within p

        x:
            The value at which the polynomial is evaluated

    Returns:
        float
    """
    y = float(0 if n < 0 else p[s])
    while n > 0:
        n -= 1
        s += 1
        y = y * x + p[s]
    return y


def ang_round(x: float) -> float:
    """
    Round tiny angles so that 1/16 - (1/16 - x) is exact. Values smaller than 1/16
    are rounded to multiples of 2^-57.
    """
    z = 1 / 16.0
    y = abs(x)
    if y < z:
        y = z - (z - y)
    if x == 0:
        return 0.0
    return -y if x < 0 else y


def smod(x: float, base: float) -> float:
    """
    Symmetric remainder of x modulo base.

    The result lies in [-base/2, base/2) for a positive base and in (base/2, -base/2]
    for a negative one. A base of 0 leaves x unchanged and non-finite input gives nan.
    """
    if base == 0:
        return x
    if not math.isfinite(x) or not math.isfinite(base):
        return math.nan
    half = abs(base) / 2
    r = math.fmod(x, abs(base))
    if base > 0:
        if r < -half:
            r += base
        elif r >= half:
            r -= base
    else:
        if r <= -half:
            r -= base
        elif r > half:
            r += base
    return r


def umod(x: float, base: float) -> float:
    """
    Euclidean remainder of x modulo base, in [0, |base|). A base of 0 leaves x
    unchanged and non-finite input gives nan.
    """
    if base == 0:
        return x
    if not math.isfinite(x) or not math.isfinite(base):
        return math.nan
    r = math.fmod(x, abs(base))
    if r < 0:
        r += abs(base)
    # Rounding of a tiny negative remainder can land exactly on the base
    return 0.0 if r == abs(base) else r


def norm_degrees(x: float, mode: str = 'symmetric') -> float:
    """
    Reduce an angle in degrees.

    Args:
        x:
            The angle, in degrees

        mode:
            'euclidean' for [0, 360), 'symmetric' for [-180, 180) or
            'inverted' for (-180, 180]

    Returns:
        float
    """
    if mode not in _NORM_MODES:
        raise ValueError(f"Unknown mode '{mode}'. Options: {list(_NORM_MODES)}")

    if mode == 'euclidean':
        return umod(x, 360.0)
    if mode == 'symmetric':
        return smod(x, 360.0)
    return smod(x, -360.0)


def ang_normalize(x: float) -> float:
    """Reduce an angle in degrees to (-180, 180]"""
    return smod(x, -360.0)


def lat_fix(x: float) -> float:
    """Replace latitudes outside [-90, 90] with nan"""
    return math.nan if abs(x) > 90 else x


def ang_diff(x: float, y: float) -> Tuple[float, float]:
    """
    Compute y - x reduced to [-180, 180] along with the error of the difference.

    Returns:
        (d, e) such that d + e equals the exact difference
    """
    d, t = sum_exact(ang_normalize(-x), ang_normalize(y))
    d = ang_normalize(d)
    if d == 180 and t > 0:
        return sum_exact(-180.0, t)
    return sum_exact(d, t)


def sincosd(x: float) -> Tuple[float, float]:
    """
    Sine and cosine of an angle in degrees, exact at multiples of 90 degrees.

    Non-finite input produces (nan, nan).
    """
    if not math.isfinite(x):
        return math.nan, math.nan

    r = math.fmod(x, 360.0)
    q = int(round(r / 90))
    r -= 90 * q
    r = math.radians(r)
    s = math.sin(r)
    c = math.cos(r)
    q = q % 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s

    # Only sin(-0.0) keeps its sign
    return (x, c) if x == 0 else (0.0 + s, 0.0 + c)


def atan2d(y: float, x: float) -> float:
    """
    Two argument arc tangent in degrees, in (-180, 180].

    The arguments are reduced so that the underlying atan2 sees |y| <= |x| and x >= 0.
    """
    if abs(y) > abs(x):
        q = 2
        x, y = y, x
    else:
        q = 0
    if x < 0:
        q += 1
        x = -x
    ang = math.degrees(math.atan2(y, x))
    if q == 1:
        ang = (180 if y >= 0 else -180) - ang
    elif q == 2:
        ang = 90 - ang
    elif q == 3:
        ang = -90 + ang
    return ang


def eatanhe(x: float, es: float) -> float:
    """es * atanh(es * x) for es > 0, -es * atan(es * x) otherwise"""
    if es > 0:
        y = es * x
        # atanh is +/-inf at +/-1 and undefined beyond
        if abs(y) < 1:
            return es * math.atanh(y)
        return es * math.copysign(math.inf, y) if abs(y) == 1 else math.nan
    return -es * math.atan(es * x)


def astroid(x: float, y: float) -> float:
    """
    Solve k^4 + 2 k^3 - (x^2 + y^2 - 1) k^2 - 2 y^2 k - y^2 = 0 for the positive root k.

    Returns 0 on the degenerate branch where q = 0 and r <= 0.
    """
    p = x ** 2
    q = y ** 2
    r = (p + q - 1) / 6
    if not (q == 0 and r <= 0):
        s = p * q / 4
        r2 = r ** 2
        r3 = r * r2
        disc = s * (s + 2 * r3)
        u = r
        if disc >= 0:
            t3 = s + r3
            # Pick the sign of the root so that no cancellation occurs
            t3 += -math.sqrt(disc) if t3 < 0 else math.sqrt(disc)
            t = cbrt(t3)
            u += t + (r2 / t if t != 0 else 0)
        else:
            ang = math.atan2(math.sqrt(-disc), -(s + r3))
            u += 2 * r * math.cos(ang / 3)
        v = math.sqrt(u ** 2 + q)
        uv = q / (v - u) if u < 0 else u + v
        w = (uv - q) / (2 * v)
        k = uv / (math.sqrt(uv + w ** 2) + w)
    else:
        k = 0
    return k


def sin_cos_series(sinp: bool, sinx: float, cosx: float, c: Sequence[float]) -> float:
    """
    Clenshaw summation of a trigonometric series.

    Args:
        sinp:
            Sum sin(2 k x) terms when True, cos((2 k + 1) x) terms otherwise

        sinx:
            sin(x)

        cosx:
            cos(x)

        c:
            Series coefficients; c[0] is unused for the sine series

    Returns:
        float
    """
    k = len(c)
    n = k - (1 if sinp else 0)
    ar = 2 * (cosx - sinx) * (cosx + sinx)
    y1 = 0.0
    if n & 1:
        k -= 1
        y0 = c[k]
    else:
        y0 = 0.0
    n = n // 2
    while n:
        n -= 1
        k -= 1
        y1 = ar * y0 - y1 + c[k]
        k -= 1
        y0 = ar * y1 - y0 + c[k]
    return 2 * sinx * cosx * y0 if sinp else cosx * (y0 - y1)
