"""
A geodesic line: a geodesic with a fixed starting point and azimuth, from which any
number of points can be computed cheaply.
"""

__all__ = ['GeodesicLine']

import copy
import math
from typing import TYPE_CHECKING, Tuple

import numpy as np

from geolines import geomath
from geolines._const import TINY
from geolines.caps import Caps, outputs
from geolines.coefficients import a1m1f, a2m1f, a3f, c1f, c1pf, c2f, c3f, c4f
from geolines.results import GeodesicResult

if TYPE_CHECKING:  # pragma: no cover
    from geolines.geodesic import Geodesic


class GeodesicLine:
    """
    Points along a geodesic, given its first point and the azimuth there.

    Only the series required by `caps` are precomputed; a query for an output whose
    capability was not requested returns nan for that output. A line built without
    Caps.DISTANCE_IN can only be queried by arc length.

    Args:
        geod:
            The Geodesic (ellipsoid) the line lives on

        lat1:
            Latitude of the first point, in degrees

        lon1:
            Longitude of the first point, in degrees

        azi1:
            Azimuth at the first point, in degrees

        caps:
            The capabilities to precompute (default STANDARD | DISTANCE_IN)

        salp1, calp1:
            Sine and cosine of azi1, if they are already known
    """

    def __init__(
        self,
        geod: 'Geodesic',
        lat1: float,
        lon1: float,
        azi1: float,
        caps: int = Caps.STANDARD | Caps.DISTANCE_IN,
        salp1: float = math.nan,
        calp1: float = math.nan,
    ):
        ellipsoid = geod.ellipsoid
        self._a = ellipsoid.a
        self._f = ellipsoid.f
        self._b = ellipsoid.b
        self._c2 = geod.c2
        self._f1 = ellipsoid.q
        self._caps = caps | Caps.LATITUDE | Caps.AZIMUTH | Caps.LONG_UNROLL

        self._lat1 = geomath.lat_fix(lat1)
        self._lon1 = lon1
        if math.isnan(salp1) or math.isnan(calp1):
            self._azi1 = geomath.ang_normalize(azi1)
            self._salp1, self._calp1 = geomath.sincosd(geomath.ang_round(self._azi1))
        else:
            self._azi1 = azi1
            self._salp1, self._calp1 = salp1, calp1

        sbet1, cbet1 = geomath.sincosd(geomath.ang_round(self._lat1))
        sbet1 *= self._f1
        sbet1, cbet1 = geomath.norm(sbet1, cbet1)
        cbet1 = max(TINY, cbet1)
        self._dn1 = math.sqrt(1 + ellipsoid.e2sq * sbet1 ** 2)

        # Evaluate alp0 from sin(alp1) * cos(bet1) = sin(alp0)
        self._salp0 = self._salp1 * cbet1
        self._calp0 = math.hypot(self._calp1, self._salp1 * sbet1)

        # sig1 is the arc length from the northward equator crossing to point 1;
        # omg1 is the same quantity on the auxiliary sphere
        self._ssig1 = sbet1
        self._somg1 = self._salp0 * sbet1
        self._csig1 = cbet1 * self._calp1 if sbet1 != 0 or self._calp1 != 0 else 1
        self._comg1 = self._csig1
        self._ssig1, self._csig1 = geomath.norm(self._ssig1, self._csig1)

        self._k2 = self._calp0 ** 2 * ellipsoid.e2sq
        eps = self._k2 / (2 * (1 + math.sqrt(1 + self._k2)) + self._k2)

        self._A1m1 = self._B11 = self._stau1 = self._ctau1 = 0.0
        self._C1a = [0.0] * 7
        if self._caps & Caps.CAP_C1:
            self._A1m1 = a1m1f(eps)
            self._C1a = c1f(eps)
            self._B11 = geomath.sin_cos_series(True, self._ssig1, self._csig1, self._C1a)
            s, c = math.sin(self._B11), math.cos(self._B11)
            # tau1 = sig1 + B11
            self._stau1 = self._ssig1 * c + self._csig1 * s
            self._ctau1 = self._csig1 * c - self._ssig1 * s

        self._C1pa = [0.0] * 7
        if self._caps & Caps.CAP_C1p:
            self._C1pa = c1pf(eps)

        self._A2m1 = self._B21 = 0.0
        self._C2a = [0.0] * 7
        if self._caps & Caps.CAP_C2:
            self._A2m1 = a2m1f(eps)
            self._C2a = c2f(eps)
            self._B21 = geomath.sin_cos_series(True, self._ssig1, self._csig1, self._C2a)

        self._A3c = self._B31 = 0.0
        self._C3a = [0.0] * 6
        if self._caps & Caps.CAP_C3:
            self._C3a = c3f(eps, geod.c3x)
            self._A3c = -self._f * self._salp0 * a3f(eps, geod.a3x)
            self._B31 = geomath.sin_cos_series(True, self._ssig1, self._csig1, self._C3a)

        self._A4 = self._B41 = 0.0
        self._C4a = [0.0] * 6
        if self._caps & Caps.CAP_C4:
            self._C4a = c4f(eps, geod.c4x)
            # Multiplier = a^2 * e^2 * cos(alpha0) * sin(alpha0)
            self._A4 = self._a ** 2 * self._calp0 * self._salp0 * ellipsoid.e1sq
            self._B41 = geomath.sin_cos_series(False, self._ssig1, self._csig1, self._C4a)

        self._s13 = math.nan
        self._a13 = math.nan

    def __repr__(self):
        return f'<GeodesicLine({self._lat1}, {self._lon1}, azi1={self._azi1})>'

    @property
    def lat1(self) -> float:
        """Latitude of the first point, in degrees"""
        return self._lat1

    @property
    def lon1(self) -> float:
        """Longitude of the first point, in degrees"""
        return self._lon1

    @property
    def azi1(self) -> float:
        """Azimuth at the first point, in degrees"""
        return self._azi1

    @property
    def caps(self) -> int:
        """The capabilities of the line"""
        return self._caps

    @property
    def s13(self) -> float:
        """Distance to the reference point 3, in meters (nan if unset)"""
        return self._s13

    @property
    def a13(self) -> float:
        """Arc length to the reference point 3, in degrees (nan if unset)"""
        return self._a13

    def _gen_position(
        self, arcmode: bool, s12_a12: float, outmask: int
    ) -> Tuple[float, float, float, float, float, float, float, float, float]:
        """
        Compute a point along the line.

        Args:
            arcmode:
                Interpret s12_a12 as an arc length in degrees rather than a distance

            s12_a12:
                The distance (meters) or arc length (degrees) from the first point

            outmask:
                The outputs to compute; restricted to the capabilities of the line

        Returns:
            (a12, lat2, lon2, azi2, s12, m12, M12, M21, S12)
        """
        a12 = lat2 = lon2 = azi2 = s12 = m12 = M12 = M21 = S12 = math.nan
        outmask = outputs(outmask & self._caps)
        if not (arcmode or self._caps & outputs(Caps.DISTANCE_IN)):
            return a12, lat2, lon2, azi2, s12, m12, M12, M21, S12

        B12 = AB1 = 0.0
        if arcmode:
            sig12 = math.radians(s12_a12)
            ssig12, csig12 = geomath.sincosd(s12_a12)
        else:
            # Linearize the distance to tau12, then correct with the reverted series
            tau12 = s12_a12 / (self._b * (1 + self._A1m1))
            tau12 = tau12 if math.isfinite(tau12) else math.nan
            s, c = math.sin(tau12), math.cos(tau12)
            B12 = -geomath.sin_cos_series(
                True,
                self._stau1 * c + self._ctau1 * s,
                self._ctau1 * c - self._stau1 * s,
                self._C1pa,
            )
            sig12 = tau12 - (B12 - self._B11)
            ssig12, csig12 = math.sin(sig12), math.cos(sig12)
            if abs(self._f) > 0.01 and math.isfinite(sig12):
                # One Newton step on the distance equation for large flattening
                ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
                csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
                B12 = geomath.sin_cos_series(True, ssig2, csig2, self._C1a)
                serr = (1 + self._A1m1) * (sig12 + (B12 - self._B11)) - s12_a12 / self._b
                sig12 = sig12 - serr / math.sqrt(1 + self._k2 * ssig2 ** 2)
                ssig12, csig12 = math.sin(sig12), math.cos(sig12)

        # sig2 = sig1 + sig12
        ssig2 = self._ssig1 * csig12 + self._csig1 * ssig12
        csig2 = self._csig1 * csig12 - self._ssig1 * ssig12
        dn2 = math.sqrt(1 + self._k2 * ssig2 ** 2)
        if outmask & (Caps.DISTANCE | Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
            if arcmode or abs(self._f) > 0.01:
                B12 = geomath.sin_cos_series(True, ssig2, csig2, self._C1a)
            AB1 = (1 + self._A1m1) * (B12 - self._B11)

        # sin(bet2) = cos(alp0) * sin(sig2)
        sbet2 = self._calp0 * ssig2
        cbet2 = math.hypot(self._salp0, self._calp0 * csig2)
        if cbet2 == 0:
            # Break the degeneracy at a pole
            cbet2 = csig2 = TINY
        salp2 = self._salp0
        calp2 = self._calp0 * csig2

        if outmask & Caps.DISTANCE:
            s12 = self._b * ((1 + self._A1m1) * sig12 + AB1) if arcmode else s12_a12

        if outmask & Caps.LONGITUDE:
            somg2 = self._salp0 * ssig2
            comg2 = csig2
            E = math.copysign(1, self._salp0)
            if outmask & Caps.LONG_UNROLL:
                omg12 = E * (
                    sig12
                    - (math.atan2(ssig2, csig2) - math.atan2(self._ssig1, self._csig1))
                    + (math.atan2(E * somg2, comg2) - math.atan2(E * self._somg1, self._comg1))
                )
            else:
                omg12 = math.atan2(
                    somg2 * self._comg1 - comg2 * self._somg1,
                    comg2 * self._comg1 + somg2 * self._somg1,
                )
            lam12 = omg12 + self._A3c * (
                sig12 + (geomath.sin_cos_series(True, ssig2, csig2, self._C3a) - self._B31)
            )
            lon12 = math.degrees(lam12)
            if outmask & Caps.LONG_UNROLL:
                lon2 = self._lon1 + lon12
            else:
                lon2 = geomath.ang_normalize(self._lon1 + lon12)

        if outmask & Caps.LATITUDE:
            lat2 = geomath.atan2d(sbet2, self._f1 * cbet2)

        if outmask & Caps.AZIMUTH:
            azi2 = geomath.atan2d(salp2, calp2)

        if outmask & (Caps.REDUCEDLENGTH | Caps.GEODESICSCALE):
            B22 = geomath.sin_cos_series(True, ssig2, csig2, self._C2a)
            AB2 = (1 + self._A2m1) * (B22 - self._B21)
            J12 = (self._A1m1 - self._A2m1) * sig12 + (AB1 - AB2)
            if outmask & Caps.REDUCEDLENGTH:
                # Parenthesized products cancel exactly for coincident points
                m12 = self._b * (
                    (dn2 * (self._csig1 * ssig2) - self._dn1 * (self._ssig1 * csig2))
                    - self._csig1 * csig2 * J12
                )
            if outmask & Caps.GEODESICSCALE:
                t = self._k2 * (ssig2 - self._ssig1) * (ssig2 + self._ssig1) / (self._dn1 + dn2)
                M12 = csig12 + (t * ssig2 - csig2 * J12) * self._ssig1 / self._dn1
                M21 = csig12 - (t * self._ssig1 - self._csig1 * J12) * ssig2 / dn2

        if outmask & Caps.AREA:
            B42 = geomath.sin_cos_series(False, ssig2, csig2, self._C4a)
            if self._calp0 == 0 or self._salp0 == 0:
                # alp12 = alp2 - alp1, used in atan2 so no need to normalize
                salp12 = salp2 * self._calp1 - calp2 * self._salp1
                calp12 = calp2 * self._calp1 + salp2 * self._salp1
            else:
                # tan(alp) = tan(alp0) * sec(sig), combined with the half angle formula
                salp12 = self._calp0 * self._salp0 * (
                    self._csig1 * (1 - csig12) + ssig12 * self._ssig1
                    if csig12 <= 0 else
                    ssig12 * (self._csig1 * ssig12 / (1 + csig12) + self._ssig1)
                )
                calp12 = self._salp0 ** 2 + self._calp0 ** 2 * self._csig1 * csig2
            S12 = self._c2 * math.atan2(salp12, calp12) + self._A4 * (B42 - self._B41)

        a12 = s12_a12 if arcmode else math.degrees(sig12)
        return a12, lat2, lon2, azi2, s12, m12, M12, M21, S12

    def _position_result(self, arcmode: bool, s12_a12: float, outmask: int) -> GeodesicResult:
        a12, lat2, lon2, azi2, s12, m12, M12, M21, S12 = self._gen_position(
            arcmode, s12_a12, outmask
        )
        outmask = outputs(outmask)
        fields = {
            'lat1': self._lat1,
            'lon1': self._lon1 if outmask & Caps.LONG_UNROLL else geomath.ang_normalize(self._lon1),
            'azi1': self._azi1,
            'a12': a12,
        }
        if not arcmode:
            # A line without DISTANCE_IN cannot place a point by distance
            fields['s12'] = s12_a12 if self._caps & outputs(Caps.DISTANCE_IN) else math.nan
        elif outmask & Caps.DISTANCE:
            fields['s12'] = s12
        if outmask & Caps.LATITUDE:
            fields['lat2'] = lat2
        if outmask & Caps.LONGITUDE:
            fields['lon2'] = lon2
        if outmask & Caps.AZIMUTH:
            fields['azi2'] = azi2
        if outmask & Caps.REDUCEDLENGTH:
            fields['m12'] = m12
        if outmask & Caps.GEODESICSCALE:
            fields['M12'] = M12
            fields['M21'] = M21
        if outmask & Caps.AREA:
            fields['S12'] = S12

        return GeodesicResult(**fields)

    def position(self, s12: float, outmask: int = Caps.STANDARD) -> GeodesicResult:
        """
        Find the point at a given distance along the line.

        Args:
            s12:
                Distance from the first point, in meters. May be negative.

            outmask:
                The outputs to compute (default Caps.STANDARD). Add Caps.LONG_UNROLL to
                track the longitude continuously instead of reducing it to (-180, 180].

        Returns:
            GeodesicResult
        """
        return self._position_result(False, s12, outmask)

    def arc_position(self, a12: float, outmask: int = Caps.STANDARD) -> GeodesicResult:
        """
        Find the point at a given arc length along the line.

        Args:
            a12:
                Arc length from the first point, in degrees. May be negative.

            outmask:
                The outputs to compute (default Caps.STANDARD)

        Returns:
            GeodesicResult
        """
        return self._position_result(True, a12, outmask)

    def set_distance(self, s13: float) -> 'GeodesicLine':
        """
        Create a copy of the line with reference point 3 at distance s13.

        Args:
            s13:
                Distance from the first point, in meters

        Returns:
            GeodesicLine
        """
        line = copy.copy(self)
        line._s13 = s13
        line._a13 = line._gen_position(False, s13, Caps.EMPTY)[0]
        return line

    def set_arc(self, a13: float) -> 'GeodesicLine':
        """
        Create a copy of the line with reference point 3 at arc length a13.

        Args:
            a13:
                Arc length from the first point, in degrees

        Returns:
            GeodesicLine
        """
        line = copy.copy(self)
        line._a13 = a13
        line._s13 = line._gen_position(True, a13, Caps.DISTANCE)[4]
        return line

    def waypoints(self, count: int, outmask: int = Caps.LATITUDE | Caps.LONGITUDE) -> np.ndarray:
        """
        Sample evenly spaced points between the first point and reference point 3.

        Args:
            count:
                The number of points, including both ends. Must be at least 2.

            outmask:
                Caps.LONG_UNROLL may be added to unroll the longitudes

        Returns:
            numpy array of shape (count, 2) holding (lat, lon) rows
        """
        if count < 2:
            raise ValueError('At least 2 waypoints are required.')

        if math.isnan(self._s13):
            raise ValueError(
                'The line has no reference distance; use set_distance() or set_arc() first.'
            )

        outmask = outputs(outmask | Caps.LATITUDE | Caps.LONGITUDE)
        points = np.empty((count, 2))
        for idx, distance in enumerate(np.linspace(0.0, self._s13, count)):
            _, lat2, lon2, *_ = self._gen_position(False, float(distance), outmask)
            points[idx] = (lat2, lon2)

        return points
