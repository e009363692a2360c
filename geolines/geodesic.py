"""
Solutions of the direct and inverse geodesic problems on an ellipsoid of revolution,
following C. F. F. Karney, "Algorithms for geodesics", J. Geodesy 87, 43-55 (2013).
"""

__all__ = ['Geodesic']

import math
from typing import Tuple

from geolines import geomath
from geolines._const import (
    FLATTENING_WARN_THRESHOLD, GEODESIC_ORDER, MAXIT1, MAXIT2, TINY, TOL0, TOL1, TOL2,
    TOLB, WGS84_A, WGS84_INV_F, XTHRESH
)
from geolines.caps import Caps, outputs, union
from geolines.coefficients import (
    a1m1f, a2m1f, a3_coeffs, a3f, c1f, c2f, c3_coeffs, c3f, c4_coeffs, c4f
)
from geolines.ellipsoid import Ellipsoid
from geolines.geodesicline import GeodesicLine
from geolines.results import GeodesicResult
from geolines.utils.logging import LOGGER, warn_once


class _Bracket:
    """
    Search state of the inverse solution: the interval [alp1a, alp1b] known to contain
    the azimuth at the first point, and whether the last step was a Newton step that
    came close to convergence (tripn) or a bisection that collapsed the interval (tripb).
    """

    __slots__ = ('salp1a', 'calp1a', 'salp1b', 'calp1b', 'tripn', 'tripb')

    def __init__(self):
        self.salp1a, self.calp1a = TINY, 1.0
        self.salp1b, self.calp1b = TINY, -1.0
        self.tripn = False
        self.tripb = False

    def converged(self, v: float) -> bool:
        return self.tripb or abs(v) < (8 if self.tripn else 1) * TOL0 or math.isnan(v)

    def update(self, v: float, salp1: float, calp1: float, numit: int):
        """Shrink the bracket using the sign of the longitude error v"""
        if v > 0 and (numit > MAXIT1 or calp1 / salp1 > self.calp1b / self.salp1b):
            self.salp1b, self.calp1b = salp1, calp1
        elif v < 0 and (numit > MAXIT1 or calp1 / salp1 < self.calp1a / self.salp1a):
            self.salp1a, self.calp1a = salp1, calp1

    def bisect(self) -> Tuple[float, float]:
        salp1, calp1 = geomath.norm(
            (self.salp1a + self.salp1b) / 2, (self.calp1a + self.calp1b) / 2
        )
        self.tripn = False
        self.tripb = (
            abs(self.salp1a - salp1) + (self.calp1a - calp1) < TOLB
            or abs(salp1 - self.salp1b) + (calp1 - self.calp1b) < TOLB
        )
        return salp1, calp1


class Geodesic:
    """
    Geodesic calculations on an ellipsoid of revolution.

    Args:
        a:
            The equatorial radius, in meters

        f:
            The flattening. 0 is a sphere, negative values a prolate ellipsoid.

    The order 6 series used here are accurate to round off for |f| < 0.01; larger
    flattenings are accepted but lose accuracy.
    """

    __slots__ = ('ellipsoid', 'c2', 'tol2', 'tolb', 'xthresh', 'etol2', 'a3x', 'c3x', 'c4x')

    def __init__(self, a: float, f: float):
        self._init_ellipsoid(Ellipsoid.from_flattening(a, f))

    def __setattr__(self, key, value):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def _init_ellipsoid(self, ellipsoid: Ellipsoid):
        f = ellipsoid.f
        e1sq = ellipsoid.e1sq

        if abs(f) > FLATTENING_WARN_THRESHOLD:
            warn_once(
                f'Flattening {f} exceeds {FLATTENING_WARN_THRESHOLD}; geodesic results '
                'will be less accurate than round off.'
            )

        # Authalic radius squared, used for the area
        c2 = (
            ellipsoid.a ** 2
            + ellipsoid.b ** 2
            * (1 if e1sq == 0 else geomath.eatanhe(1, math.copysign(1, f) * math.sqrt(abs(e1sq))) / e1sq)
        ) / 2
        # The short line threshold scales as sqrt(f) so that the two checks agree for
        # small f
        etol2 = 0.1 * TOL2 / math.sqrt(max(abs(f), 0.001) * min(1.0, 1 - f / 2) / 2)

        values = {
            'ellipsoid': ellipsoid,
            'c2': c2,
            'tol2': TOL2,
            'tolb': TOLB,
            'xthresh': XTHRESH,
            'etol2': etol2,
            'a3x': tuple(a3_coeffs(ellipsoid.n)),
            'c3x': tuple(c3_coeffs(ellipsoid.n)),
            'c4x': tuple(c4_coeffs(ellipsoid.n)),
        }
        for key, value in values.items():
            object.__setattr__(self, key, value)

    @classmethod
    def from_ellipsoid(cls, ellipsoid: Ellipsoid) -> 'Geodesic':
        """Create a Geodesic on an existing Ellipsoid"""
        geod = cls.__new__(cls)
        geod._init_ellipsoid(ellipsoid)
        return geod

    @classmethod
    def from_model(cls, name: str) -> 'Geodesic':
        """
        Create a Geodesic on one of the named ellipsoid models.

        Args:
            name:
                The model name, e.g. 'WGS84' or 'GRS80'

        Returns:
            Geodesic
        """
        return cls.from_ellipsoid(Ellipsoid.from_model(name))

    def __eq__(self, other):
        if not isinstance(other, Geodesic):
            return False

        return self.ellipsoid == other.ellipsoid

    def __hash__(self):
        return hash(self.ellipsoid)

    def __repr__(self):
        return f'<Geodesic(a={self.a}, f={self.f})>'

    @property
    def a(self) -> float:
        """The equatorial radius, in meters"""
        return self.ellipsoid.a

    @property
    def f(self) -> float:
        """The flattening"""
        return self.ellipsoid.f

    @property
    def area(self) -> float:
        """The total surface area of the ellipsoid, in square meters"""
        return 4 * math.pi * self.c2

    def _lengths(
        self,
        eps: float,
        sig12: float,
        ssig1: float,
        csig1: float,
        dn1: float,
        ssig2: float,
        csig2: float,
        dn2: float,
        cbet1: float,
        cbet2: float,
        outmask: int,
    ) -> Tuple[float, float, float, float, float]:
        """
        Distance, reduced length and geodesic scales on the auxiliary sphere, in units
        of the polar semi-axis.

        Returns:
            (s12b, m12b, m0, M12, M21); anything not requested by outmask is nan
        """
        outmask = outputs(outmask)
        s12b = m12b = m0 = M12 = M21 = math.nan
        A1 = A2 = m0x = J12 = 0.0
        C1a = C2a = [0.0] * (GEODESIC_ORDER + 1)

        if outmask & (Caps.DISTANCE | Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
            A1 = a1m1f(eps)
            C1a = c1f(eps)
            if outmask & (Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
                A2 = a2m1f(eps)
                C2a = c2f(eps)
                m0x = A1 - A2
                A2 = 1 + A2
            A1 = 1 + A1

        if outmask & Caps.DISTANCE:
            B1 = (geomath.sin_cos_series(True, ssig2, csig2, C1a)
                  - geomath.sin_cos_series(True, ssig1, csig1, C1a))
            # Missing a factor of b
            s12b = A1 * (sig12 + B1)
            if outmask & (Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
                B2 = (geomath.sin_cos_series(True, ssig2, csig2, C2a)
                      - geomath.sin_cos_series(True, ssig1, csig1, C2a))
                J12 = m0x * sig12 + (A1 * B1 - A2 * B2)
        elif outmask & (Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
            # Assume here that GEODESIC_ORDER for C1 and C2 are the same
            C2a = [A1 * c1 - A2 * c2 for c1, c2 in zip(C1a, C2a)]
            J12 = m0x * sig12 + (geomath.sin_cos_series(True, ssig2, csig2, C2a)
                                 - geomath.sin_cos_series(True, ssig1, csig1, C2a))

        if outmask & Caps.REDUCEDLENGTH:
            m0 = m0x
            # Missing a factor of b
            m12b = dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2) - csig1 * csig2 * J12

        if outmask & Caps.GEODESICSCALE:
            csig12 = csig1 * csig2 + ssig1 * ssig2
            t = self.ellipsoid.e2sq * (cbet1 - cbet2) * (cbet1 + cbet2) / (dn1 + dn2)
            M12 = csig12 + (t * ssig2 - csig2 * J12) * ssig1 / dn1
            M21 = csig12 - (t * ssig1 - csig1 * J12) * ssig2 / dn2

        return s12b, m12b, m0, M12, M21

    def _inverse_start(
        self,
        sbet1: float,
        cbet1: float,
        dn1: float,
        sbet2: float,
        cbet2: float,
        dn2: float,
        lam12: float,
        slam12: float,
        clam12: float,
    ) -> Tuple[float, float, float, float, float, float]:
        """
        Starting guess for the azimuth at point 1.

        Returns:
            (sig12, salp1, calp1, salp2, calp2, dnm). sig12 is non-negative only when
            the short line approximation is accurate enough to be the final answer;
            salp2, calp2 and dnm are only meaningful in that case.
        """
        ellipsoid = self.ellipsoid
        f, n = ellipsoid.f, ellipsoid.n
        sig12 = -1.0
        salp2 = calp2 = dnm = math.nan

        # bet12 = bet2 - bet1 in [0, pi); bet12a = bet2 + bet1 in (-pi, 0]
        sbet12 = sbet2 * cbet1 - cbet2 * sbet1
        cbet12 = cbet2 * cbet1 + sbet2 * sbet1
        sbet12a = sbet2 * cbet1 + cbet2 * sbet1

        shortline = cbet12 >= 0 and sbet12 < 0.5 and cbet2 * lam12 < 0.5
        if shortline:
            sbetm2 = (sbet1 + sbet2) ** 2
            # sin((bet1 + bet2) / 2)^2
            sbetm2 /= sbetm2 + (cbet1 + cbet2) ** 2
            dnm = math.sqrt(1 + ellipsoid.e2sq * sbetm2)
            omg12 = lam12 / (ellipsoid.q * dnm)
            somg12, comg12 = math.sin(omg12), math.cos(omg12)
        else:
            somg12, comg12 = slam12, clam12

        salp1 = cbet2 * somg12
        if comg12 >= 0:
            calp1 = sbet12 + cbet2 * sbet1 * somg12 ** 2 / (1 + comg12)
        else:
            calp1 = sbet12a - cbet2 * sbet1 * somg12 ** 2 / (1 - comg12)

        ssig12 = math.hypot(salp1, calp1)
        csig12 = sbet1 * sbet2 + cbet1 * cbet2 * comg12

        if shortline and ssig12 < self.etol2:
            # Really short lines
            salp2 = cbet1 * somg12
            calp2 = sbet12 - cbet1 * sbet2 * (
                somg12 ** 2 / (1 + comg12) if comg12 >= 0 else 1 - comg12
            )
            salp2, calp2 = geomath.norm(salp2, calp2)
            # Set return value
            sig12 = math.atan2(ssig12, csig12)
        elif abs(n) > 0.1 or csig12 >= 0 or not ssig12 < 6 * abs(n) * math.pi * cbet1 ** 2:
            # Nothing to do, zeroth order spherical approximation is OK
            pass
        else:
            # Scale lam12 and bet2 to x, y coordinate system where antipodal point is at
            # origin and singular point is at y = 0, x = -1
            lam12x = math.atan2(-slam12, -clam12)
            if f >= 0:
                # x = dlong, y = dlat
                k2 = sbet1 ** 2 * ellipsoid.e2sq
                eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
                lamscale = f * cbet1 * a3f(eps, self.a3x) * math.pi
                betscale = lamscale * cbet1
                x = lam12x / lamscale
                y = sbet12a / betscale
            else:
                # x = dlat, y = dlong
                cbet12a = cbet2 * cbet1 - sbet2 * sbet1
                bet12a = math.atan2(sbet12a, cbet12a)
                # In the case of lon12 = 180, this repeats a calculation made in the
                # inverse solution
                _, m12b, m0, _, _ = self._lengths(
                    n, math.pi + bet12a, sbet1, -cbet1, dn1, sbet2, cbet2, dn2,
                    cbet1, cbet2, Caps.REDUCEDLENGTH,
                )
                x = -1 + m12b / (cbet1 * cbet2 * m0 * math.pi)
                betscale = sbet12a / x if x < -0.01 else -f * cbet1 ** 2 * math.pi
                lamscale = betscale / cbet1
                y = lam12x / lamscale

            if y > -TOL1 and x > -1 - self.xthresh:
                if f >= 0:
                    salp1 = min(1.0, -x)
                    calp1 = -math.sqrt(1 - salp1 ** 2)
                else:
                    calp1 = max(0.0 if x > -TOL1 else -1.0, x)
                    salp1 = math.sqrt(1 - calp1 ** 2)
            else:
                # Estimate alp1 by solving the astroid problem
                k = geomath.astroid(x, y)
                omg12a = lamscale * (-x * k / (1 + k) if f >= 0 else -y * (1 + k) / k)
                somg12, comg12 = math.sin(omg12a), -math.cos(omg12a)
                # Update spherical estimate of alp1 using omg12 instead of lam12
                salp1 = cbet2 * somg12
                calp1 = sbet12a - cbet2 * sbet1 * somg12 ** 2 / (1 - comg12)

        if salp1 > 0 or math.isnan(salp1):
            salp1, calp1 = geomath.norm(salp1, calp1)
        else:
            salp1, calp1 = 1.0, 0.0

        return sig12, salp1, calp1, salp2, calp2, dnm

    def _lambda12(
        self,
        sbet1: float,
        cbet1: float,
        dn1: float,
        sbet2: float,
        cbet2: float,
        dn2: float,
        salp1: float,
        calp1: float,
        slam120: float,
        clam120: float,
        diffp: bool,
    ) -> Tuple[float, ...]:
        """
        The longitude difference, less the target, reached by a geodesic leaving point 1
        with azimuth alp1, and optionally its derivative with respect to alp1.

        Returns:
            (lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps, domg12, dlam12)
        """
        ellipsoid = self.ellipsoid
        if sbet1 == 0 and calp1 == 0:
            # Break degeneracy of equatorial line
            calp1 = -TINY

        # sin(alp1) * cos(bet1) = sin(alp0)
        salp0 = salp1 * cbet1
        calp0 = math.hypot(calp1, salp1 * sbet1)

        # tan(bet1) = tan(sig1) * cos(alp1); tan(omg1) = sin(alp0) * tan(sig1)
        ssig1 = sbet1
        somg1 = salp0 * sbet1
        csig1 = comg1 = calp1 * cbet1
        ssig1, csig1 = geomath.norm(ssig1, csig1)

        # Enforce symmetries in the case abs(bet2) = -bet1
        salp2 = salp0 / cbet2 if cbet2 != cbet1 else salp1
        # calp2 = sqrt(1 - sq(salp2)) = sqrt(sq(calp0) - sq(sbet2)) / cbet2
        if cbet2 != cbet1 or abs(sbet2) != -sbet1:
            calp2 = math.sqrt(
                (calp1 * cbet1) ** 2
                + ((cbet2 - cbet1) * (cbet1 + cbet2) if cbet1 < -sbet1
                   else (sbet1 - sbet2) * (sbet1 + sbet2))
            ) / cbet2
        else:
            calp2 = abs(calp1)

        ssig2 = sbet2
        somg2 = salp0 * sbet2
        csig2 = comg2 = calp2 * cbet2
        ssig2, csig2 = geomath.norm(ssig2, csig2)

        # sig12 = sig2 - sig1, limit to [0, pi]
        sig12 = math.atan2(max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2)
        # omg12 = omg2 - omg1, limit to [0, pi]
        somg12 = max(0.0, comg1 * somg2 - somg1 * comg2)
        comg12 = comg1 * comg2 + somg1 * somg2
        # eta = omg12 - lam120
        eta = math.atan2(somg12 * clam120 - comg12 * slam120, comg12 * clam120 + somg12 * slam120)

        k2 = calp0 ** 2 * ellipsoid.e2sq
        eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
        C3a = c3f(eps, self.c3x)
        B312 = (geomath.sin_cos_series(True, ssig2, csig2, C3a)
                - geomath.sin_cos_series(True, ssig1, csig1, C3a))
        domg12 = -ellipsoid.f * a3f(eps, self.a3x) * salp0 * (sig12 + B312)
        lam12 = eta + domg12

        if diffp:
            if calp2 == 0:
                dlam12 = -2 * ellipsoid.q * dn1 / sbet1
            else:
                _, dlam12, _, _, _ = self._lengths(
                    eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2, cbet1, cbet2,
                    Caps.REDUCEDLENGTH,
                )
                dlam12 *= ellipsoid.q / (calp2 * cbet2)
        else:
            dlam12 = math.nan

        return lam12, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps, domg12, dlam12

    def _gen_inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float, outmask: int
    ) -> Tuple[float, ...]:
        """
        General solution of the inverse problem.

        Returns:
            (a12, s12, salp1, calp1, salp2, calp2, m12, M12, M21, S12)
        """
        ellipsoid = self.ellipsoid
        a, b, f, q = ellipsoid.a, ellipsoid.b, ellipsoid.f, ellipsoid.q
        a12 = s12 = m12 = M12 = M21 = S12 = math.nan
        outmask = outputs(outmask)

        # Compute longitude difference accurately, reducing it to [0, 180] and keeping
        # track of its sign
        lon12, lon12s = geomath.ang_diff(lon1, lon2)
        lonsign = 1.0 if lon12 >= 0 else -1.0
        lon12 = lonsign * geomath.ang_round(lon12)
        lon12s = geomath.ang_round((180 - lon12) - lonsign * lon12s)
        lam12 = math.radians(lon12)
        if lon12 > 90:
            slam12, clam12 = geomath.sincosd(lon12s)
            clam12 = -clam12
        else:
            slam12, clam12 = geomath.sincosd(lon12)

        lat1 = geomath.ang_round(geomath.lat_fix(lat1))
        lat2 = geomath.ang_round(geomath.lat_fix(lat2))

        # Swap points so that the point with the larger latitude magnitude is point 1,
        # then make lat1 <= 0
        swapp = -1.0 if abs(lat1) < abs(lat2) else 1.0
        if swapp < 0:
            lonsign *= -1
            lat2, lat1 = lat1, lat2
        latsign = 1.0 if lat1 < 0 else -1.0
        lat1 *= latsign
        lat2 *= latsign

        sbet1, cbet1 = geomath.sincosd(lat1)
        sbet1 *= q
        sbet1, cbet1 = geomath.norm(sbet1, cbet1)
        cbet1 = max(TINY, cbet1)

        sbet2, cbet2 = geomath.sincosd(lat2)
        sbet2 *= q
        sbet2, cbet2 = geomath.norm(sbet2, cbet2)
        cbet2 = max(TINY, cbet2)

        # If cbet1 < -sbet1 then cbet2 - cbet1 is a sensitive measure of |bet1| - |bet2|;
        # otherwise use sbet1 + sbet2
        if cbet1 < -sbet1:
            if cbet2 == cbet1:
                sbet2 = sbet1 if sbet2 < 0 else -sbet1
        elif abs(sbet2) == -sbet1:
            cbet2 = cbet1

        dn1 = math.sqrt(1 + ellipsoid.e2sq * sbet1 ** 2)
        dn2 = math.sqrt(1 + ellipsoid.e2sq * sbet2 ** 2)

        salp1 = calp1 = salp2 = calp2 = 0.0
        ssig1 = csig1 = ssig2 = csig2 = 0.0
        s12x = m12x = 0.0
        somg12, comg12, omg12 = 2.0, 0.0, 0.0
        eps = 0.0

        meridian = lat1 == -90 or slam12 == 0
        if meridian:
            # Endpoint is on a single full meridian; the geodesic follows it. Head to
            # the target longitude.
            calp1, salp1 = clam12, slam12
            # At the target we're heading north
            calp2, salp2 = 1.0, 0.0

            # tan(bet) = tan(sig) * cos(alp)
            ssig1, csig1 = sbet1, calp1 * cbet1
            ssig2, csig2 = sbet2, calp2 * cbet2

            # sig12 = sig2 - sig1
            sig12 = math.atan2(
                max(0.0, csig1 * ssig2 - ssig1 * csig2), csig1 * csig2 + ssig1 * ssig2
            )
            s12x, m12x, _, M12, M21 = self._lengths(
                ellipsoid.n, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2, cbet1, cbet2,
                outmask | Caps.DISTANCE | Caps.REDUCEDLENGTH,
            )
            # Past the conjugate point a meridian is no longer the shortest path, so fall
            # through to the general case
            if sig12 < 1 or m12x >= 0:
                if sig12 < 3 * TINY:
                    # Prevent negative s12 or m12 for short lines
                    sig12 = m12x = s12x = 0.0
                m12x *= b
                s12x *= b
                a12 = math.degrees(sig12)
            else:
                meridian = False

        if not meridian and sbet1 == 0 and (f <= 0 or lon12s >= f * 180):
            # Geodesic runs along the equator
            calp1 = calp2 = 0.0
            salp1 = salp2 = 1.0
            s12x = a * lam12
            sig12 = omg12 = lam12 / q
            m12x = b * math.sin(sig12)
            if outmask & Caps.GEODESICSCALE:
                M12 = M21 = math.cos(sig12)
            a12 = lon12 / q

        elif not meridian:
            sig12, salp1, calp1, salp2, calp2, dnm = self._inverse_start(
                sbet1, cbet1, dn1, sbet2, cbet2, dn2, lam12, slam12, clam12
            )

            if sig12 >= 0:
                # Short lines: the starting guess is accurate enough
                s12x = sig12 * b * dnm
                m12x = dnm ** 2 * b * math.sin(sig12 / dnm)
                if outmask & Caps.GEODESICSCALE:
                    M12 = M21 = math.cos(sig12 / dnm)
                a12 = math.degrees(sig12)
                omg12 = lam12 / (q * dnm)
            else:
                # Newton's method, falling back to bisection on the bracket
                bracket = _Bracket()
                domg12 = 0.0
                for numit in range(MAXIT2):
                    (v, salp2, calp2, sig12, ssig1, csig1, ssig2, csig2, eps, domg12,
                     dv) = self._lambda12(
                        sbet1, cbet1, dn1, sbet2, cbet2, dn2, salp1, calp1, slam12, clam12,
                        numit < MAXIT1,
                    )
                    if bracket.converged(v):
                        break

                    bracket.update(v, salp1, calp1, numit)
                    if numit < MAXIT1 and dv > 0:
                        dalp1 = -v / dv
                        sdalp1, cdalp1 = math.sin(dalp1), math.cos(dalp1)
                        nsalp1 = salp1 * cdalp1 + calp1 * sdalp1
                        if nsalp1 > 0 and abs(dalp1) < math.pi:
                            calp1 = calp1 * cdalp1 - salp1 * sdalp1
                            salp1 = nsalp1
                            salp1, calp1 = geomath.norm(salp1, calp1)
                            # In some regimes the Newton step stalls just short of
                            # TOL0; accept 8 * TOL0 on the next pass
                            bracket.tripn = abs(v) <= 16 * TOL0
                            continue

                    # Either dv was not positive or the Newton step left the bracket
                    salp1, calp1 = bracket.bisect()
                else:
                    LOGGER.debug(
                        'Inverse solution did not converge in %d iterations '
                        '(lat1=%s, lat2=%s, lon12=%s); using best estimate',
                        MAXIT2, lat1, lat2, lon12,
                    )

                lengthmask = outmask | (
                    Caps.DISTANCE
                    if outmask & (Caps.REDUCEDLENGTH | Caps.GEODESICSCALE)
                    else Caps.EMPTY
                )
                s12x, m12x, _, M12, M21 = self._lengths(
                    eps, sig12, ssig1, csig1, dn1, ssig2, csig2, dn2, cbet1, cbet2, lengthmask
                )
                m12x *= b
                s12x *= b
                a12 = math.degrees(sig12)
                if outmask & Caps.AREA:
                    # omg12 = lam12 - domg12
                    sdomg12, cdomg12 = math.sin(domg12), math.cos(domg12)
                    somg12 = slam12 * cdomg12 - clam12 * sdomg12
                    comg12 = clam12 * cdomg12 + slam12 * sdomg12

        if outmask & Caps.DISTANCE:
            # Convert -0 to 0
            s12 = 0.0 + s12x

        if outmask & Caps.REDUCEDLENGTH:
            m12 = 0.0 + m12x

        if outmask & Caps.AREA:
            # From Lambda12: sin(alp1) * cos(bet1) = sin(alp0)
            salp0 = salp1 * cbet1
            calp0 = math.hypot(calp1, salp1 * sbet1)
            if calp0 != 0 and salp0 != 0:
                # From Lambda12: tan(bet) = tan(sig) * cos(alp)
                ssig1, csig1 = geomath.norm(sbet1, calp1 * cbet1)
                ssig2, csig2 = geomath.norm(sbet2, calp2 * cbet2)
                k2 = calp0 ** 2 * ellipsoid.e2sq
                eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)
                # Multiplier = a^2 * e^2 * cos(alpha0) * sin(alpha0)
                A4 = a ** 2 * calp0 * salp0 * ellipsoid.e1sq
                C4a = c4f(eps, self.c4x)
                B41 = geomath.sin_cos_series(False, ssig1, csig1, C4a)
                B42 = geomath.sin_cos_series(False, ssig2, csig2, C4a)
                S12 = A4 * (B42 - B41)
            else:
                # Avoid problems with indeterminate sig1, sig2 on equator
                S12 = 0.0

            if not meridian and somg12 > 1:
                somg12, comg12 = math.sin(omg12), math.cos(omg12)

            if not meridian and comg12 > -math.sqrt(0.5) and sbet2 - sbet1 < 1.75:
                # Use tan(Gamma / 2) = tan(omg12 / 2) * (tan(bet1 / 2) + tan(bet2 / 2))
                #   / (1 + tan(bet1 / 2) * tan(bet2 / 2))
                # with tan(x / 2) = sin(x) / (1 + cos(x))
                domg12 = 1 + comg12
                dbet1 = 1 + cbet1
                dbet2 = 1 + cbet2
                alp12 = 2 * math.atan2(
                    somg12 * (sbet1 * dbet2 + sbet2 * dbet1),
                    domg12 * (sbet1 * sbet2 + dbet1 * dbet2),
                )
            else:
                # alp12 = alp2 - alp1, used in atan2 so no need to normalize
                salp12 = salp2 * calp1 - calp2 * salp1
                calp12 = calp2 * calp1 + salp2 * salp1
                # The right thing appears to happen if alp1 = +/-180 and alp2 = 0, viz
                # salp12 = -0 and alp12 = -180. However this depends on the sign being
                # attached to 0 correctly.
                if salp12 == 0 and calp12 < 0:
                    salp12 = TINY * calp1
                    calp12 = -1.0
                alp12 = math.atan2(salp12, calp12)

            S12 += self.c2 * alp12
            S12 *= swapp * lonsign * latsign
            # Convert -0 to 0
            S12 += 0.0

        # Convert calp, salp to azimuth accounting for lonsign, swapp, latsign
        if swapp < 0:
            salp2, salp1 = salp1, salp2
            calp2, calp1 = calp1, calp2
            if outmask & Caps.GEODESICSCALE:
                M21, M12 = M12, M21

        salp1 *= swapp * lonsign
        calp1 *= swapp * latsign
        salp2 *= swapp * lonsign
        calp2 *= swapp * latsign

        return a12, s12, salp1, calp1, salp2, calp2, m12, M12, M21, S12

    def _gen_inverse_azi(
        self, lat1: float, lon1: float, lat2: float, lon2: float, outmask: int
    ) -> Tuple[float, ...]:
        """
        The inverse solution with the azimuths in degrees.

        Returns:
            (a12, s12, azi1, azi2, m12, M12, M21, S12)
        """
        outmask = outputs(outmask)
        azi1 = azi2 = math.nan
        a12, s12, salp1, calp1, salp2, calp2, m12, M12, M21, S12 = self._gen_inverse(
            lat1, lon1, lat2, lon2, outmask
        )
        if outmask & Caps.AZIMUTH:
            azi1 = geomath.atan2d(salp1, calp1)
            azi2 = geomath.atan2d(salp2, calp2)

        return a12, s12, azi1, azi2, m12, M12, M21, S12

    def _gen_direct(
        self, lat1: float, lon1: float, azi1: float, arcmode: bool, s12_a12: float,
        outmask: int,
    ) -> Tuple[float, ...]:
        """
        General solution of the direct problem.

        Returns:
            (a12, lat2, lon2, azi2, s12, m12, M12, M21, S12)
        """
        # Automatically supply DISTANCE_IN if necessary
        if not arcmode:
            outmask |= Caps.DISTANCE_IN

        line = GeodesicLine(self, lat1, lon1, azi1, outmask)
        return line._gen_position(arcmode, s12_a12, outmask)

    def inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float, outmask: int = Caps.STANDARD
    ) -> GeodesicResult:
        """
        Solve the inverse geodesic problem: the shortest path between two points.

        Args:
            lat1, lon1:
                The first point, in degrees. lat1 should be in [-90, 90].

            lat2, lon2:
                The second point, in degrees. lat2 should be in [-90, 90].

            outmask:
                The outputs to compute (default Caps.STANDARD). With Caps.LONG_UNROLL the
                reported lon2 is lon1 plus the longitude difference travelled, rather
                than a value reduced to (-180, 180].

        Returns:
            GeodesicResult
        """
        a12, s12, azi1, azi2, m12, M12, M21, S12 = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2, outmask
        )
        outmask = outputs(outmask)
        if outmask & Caps.LONG_UNROLL:
            lon12, e = geomath.ang_diff(lon1, lon2)
            lon2 = (lon1 + lon12) + e
        else:
            lon1 = geomath.ang_normalize(lon1)
            lon2 = geomath.ang_normalize(lon2)

        fields = {
            'lat1': geomath.lat_fix(lat1), 'lon1': lon1,
            'lat2': geomath.lat_fix(lat2), 'lon2': lon2,
            'a12': a12,
        }
        if outmask & Caps.DISTANCE:
            fields['s12'] = s12
        if outmask & Caps.AZIMUTH:
            fields['azi1'] = azi1
            fields['azi2'] = azi2
        if outmask & Caps.REDUCEDLENGTH:
            fields['m12'] = m12
        if outmask & Caps.GEODESICSCALE:
            fields['M12'] = M12
            fields['M21'] = M21
        if outmask & Caps.AREA:
            fields['S12'] = S12

        return GeodesicResult(**fields)

    def direct(
        self, lat1: float, lon1: float, azi1: float, s12: float, outmask: int = Caps.STANDARD
    ) -> GeodesicResult:
        """
        Solve the direct geodesic problem: where a geodesic ends after a given distance.

        Args:
            lat1, lon1:
                The first point, in degrees. lat1 should be in [-90, 90].

            azi1:
                The azimuth at the first point, in degrees

            s12:
                The distance to travel, in meters. May be negative.

            outmask:
                The outputs to compute (default Caps.STANDARD). Caps.LONG_UNROLL tracks
                the longitude continuously around the ellipsoid.

        Returns:
            GeodesicResult
        """
        line = GeodesicLine(self, lat1, lon1, azi1, outmask | Caps.DISTANCE_IN)
        return line.position(s12, outmask)

    def arc_direct(
        self, lat1: float, lon1: float, azi1: float, a12: float, outmask: int = Caps.STANDARD
    ) -> GeodesicResult:
        """
        Solve the direct geodesic problem with the length given as an arc length on the
        auxiliary sphere, in degrees.
        """
        line = GeodesicLine(self, lat1, lon1, azi1, outmask)
        return line.arc_position(a12, outmask)

    def line(
        self, lat1: float, lon1: float, azi1: float,
        caps: int = Caps.STANDARD | Caps.DISTANCE_IN,
    ) -> GeodesicLine:
        """
        Create a GeodesicLine from a point and an azimuth.

        Args:
            lat1, lon1:
                The first point, in degrees

            azi1:
                The azimuth at the first point, in degrees

            caps:
                The capabilities the line should support

        Returns:
            GeodesicLine
        """
        return GeodesicLine(self, lat1, lon1, azi1, caps)

    def direct_line(
        self, lat1: float, lon1: float, azi1: float, s12: float,
        caps: int = Caps.STANDARD | Caps.DISTANCE_IN,
    ) -> GeodesicLine:
        """A GeodesicLine with its reference point 3 at distance s12 (meters)"""
        line = GeodesicLine(self, lat1, lon1, azi1, caps | Caps.DISTANCE_IN)
        return line.set_distance(s12)

    def arc_direct_line(
        self, lat1: float, lon1: float, azi1: float, a12: float,
        caps: int = Caps.STANDARD | Caps.DISTANCE_IN,
    ) -> GeodesicLine:
        """A GeodesicLine with its reference point 3 at arc length a12 (degrees)"""
        line = GeodesicLine(self, lat1, lon1, azi1, caps)
        return line.set_arc(a12)

    def inverse_line(
        self, lat1: float, lon1: float, lat2: float, lon2: float,
        caps: int = Caps.STANDARD | Caps.DISTANCE_IN,
    ) -> GeodesicLine:
        """
        A GeodesicLine through two points, with reference point 3 at the second point.

        Args:
            lat1, lon1:
                The first point, in degrees

            lat2, lon2:
                The second point, in degrees

            caps:
                The capabilities the line should support

        Returns:
            GeodesicLine
        """
        a12, _, salp1, calp1, _, _, _, _, _, _ = self._gen_inverse(
            lat1, lon1, lat2, lon2, Caps.EMPTY
        )
        azi1 = geomath.atan2d(salp1, calp1)
        if caps & outputs(Caps.DISTANCE_IN):
            # A distance can only be stored for point 3 when the line can compute one
            caps |= Caps.DISTANCE

        line = GeodesicLine(self, lat1, lon1, azi1, caps, salp1, calp1)
        return line.set_arc(a12)

    def direct_lat_lon(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2)"""
        _, lat2, lon2, _, _, _, _, _, _ = self._gen_direct(
            lat1, lon1, azi1, False, s12, union(Caps.LATITUDE, Caps.LONGITUDE)
        )
        return lat2, lon2

    def direct_lat_lon_azi(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2, azi2)"""
        _, lat2, lon2, azi2, _, _, _, _, _ = self._gen_direct(
            lat1, lon1, azi1, False, s12, union(Caps.LATITUDE, Caps.LONGITUDE, Caps.AZIMUTH)
        )
        return lat2, lon2, azi2

    def direct_reduced_length(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2, azi2, m12)"""
        _, lat2, lon2, azi2, _, m12, _, _, _ = self._gen_direct(
            lat1, lon1, azi1, False, s12,
            union(Caps.LATITUDE, Caps.LONGITUDE, Caps.AZIMUTH, Caps.REDUCEDLENGTH),
        )
        return lat2, lon2, azi2, m12

    def direct_scales(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2, azi2, M12, M21)"""
        _, lat2, lon2, azi2, _, _, M12, M21, _ = self._gen_direct(
            lat1, lon1, azi1, False, s12,
            union(Caps.LATITUDE, Caps.LONGITUDE, Caps.AZIMUTH, Caps.GEODESICSCALE),
        )
        return lat2, lon2, azi2, M12, M21

    def direct_reduced_length_scales(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2, azi2, m12, M12, M21)"""
        _, lat2, lon2, azi2, _, m12, M12, M21, _ = self._gen_direct(
            lat1, lon1, azi1, False, s12,
            union(Caps.LATITUDE, Caps.LONGITUDE, Caps.AZIMUTH, Caps.REDUCEDLENGTH,
                  Caps.GEODESICSCALE),
        )
        return lat2, lon2, azi2, m12, M12, M21

    def direct_all(self, lat1: float, lon1: float, azi1: float, s12: float):
        """Direct problem returning (lat2, lon2, azi2, m12, M12, M21, S12, a12)"""
        a12, lat2, lon2, azi2, _, m12, M12, M21, S12 = self._gen_direct(
            lat1, lon1, azi1, False, s12,
            union(Caps.LATITUDE, Caps.LONGITUDE, Caps.AZIMUTH, Caps.REDUCEDLENGTH,
                  Caps.GEODESICSCALE, Caps.AREA),
        )
        return lat2, lon2, azi2, m12, M12, M21, S12, a12

    def inverse_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Inverse problem returning only the distance s12, in meters"""
        _, s12, _, _, _, _, _, _ = self._gen_inverse_azi(lat1, lon1, lat2, lon2, Caps.DISTANCE)
        return s12

    def inverse_distance_arc(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (s12, a12)"""
        a12, s12, _, _, _, _, _, _ = self._gen_inverse_azi(lat1, lon1, lat2, lon2, Caps.DISTANCE)
        return s12, a12

    def inverse_azimuths(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (azi1, azi2, a12)"""
        a12, _, azi1, azi2, _, _, _, _ = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2, Caps.AZIMUTH
        )
        return azi1, azi2, a12

    def inverse_standard(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (s12, azi1, azi2, a12)"""
        a12, s12, azi1, azi2, _, _, _, _ = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2, union(Caps.DISTANCE, Caps.AZIMUTH)
        )
        return s12, azi1, azi2, a12

    def inverse_reduced_length(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (s12, azi1, azi2, m12, a12)"""
        a12, s12, azi1, azi2, m12, _, _, _ = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2, union(Caps.DISTANCE, Caps.AZIMUTH, Caps.REDUCEDLENGTH)
        )
        return s12, azi1, azi2, m12, a12

    def inverse_scales(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (s12, azi1, azi2, M12, M21, a12)"""
        a12, s12, azi1, azi2, _, M12, M21, _ = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2, union(Caps.DISTANCE, Caps.AZIMUTH, Caps.GEODESICSCALE)
        )
        return s12, azi1, azi2, M12, M21, a12

    def inverse_reduced_length_scales(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ):
        """Inverse problem returning (s12, azi1, azi2, m12, M12, M21, a12)"""
        a12, s12, azi1, azi2, m12, M12, M21, _ = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2,
            union(Caps.DISTANCE, Caps.AZIMUTH, Caps.REDUCEDLENGTH, Caps.GEODESICSCALE),
        )
        return s12, azi1, azi2, m12, M12, M21, a12

    def inverse_all(self, lat1: float, lon1: float, lat2: float, lon2: float):
        """Inverse problem returning (s12, azi1, azi2, m12, M12, M21, S12, a12)"""
        a12, s12, azi1, azi2, m12, M12, M21, S12 = self._gen_inverse_azi(
            lat1, lon1, lat2, lon2,
            union(Caps.DISTANCE, Caps.AZIMUTH, Caps.REDUCEDLENGTH, Caps.GEODESICSCALE,
                  Caps.AREA),
        )
        return s12, azi1, azi2, m12, M12, M21, S12, a12


Geodesic.WGS84 = Geodesic.from_ellipsoid(Ellipsoid(WGS84_A, WGS84_INV_F))
