"""
Representation of an ellipsoid of revolution
"""

__all__ = ['ELLIPSOID_MODELS', 'Ellipsoid']

import math
from typing import Dict, Tuple

from geolines._const import WGS84_A, WGS84_INV_F

# Named models as (equatorial radius in meters, inverse flattening)
ELLIPSOID_MODELS: Dict[str, Tuple[float, float]] = {
    'WGS84': (WGS84_A, WGS84_INV_F),
    'GRS80': (6378137.0, 298.257222101),
    'WGS72': (6378135.0, 298.26),
    'SPHERE': (6371008.8, math.inf),
}


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _acos(x: float) -> float:
    return math.acos(x) if -1 <= x <= 1 else math.nan


def _div(x: float, y: float) -> float:
    """x / y with IEEE semantics for a zero divisor"""
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


class Ellipsoid:
    """
    An ellipsoid of revolution, described by its equatorial radius and inverse flattening.

    A positive flattening is an oblate ellipsoid, a negative one a prolate ellipsoid and an
    infinite inverse flattening a sphere. All derived quantities are computed once on
    construction; the instance cannot be modified afterwards.

    Args:
        a:
            The equatorial radius (semi-major axis), in meters

        inv_f:
            The inverse of the flattening. A zero or negative radius, or an inverse
            flattening of 1, is accepted; the derived quantities are then inf or nan.
    """

    __slots__ = (
        'a', 'inv_f', 'f', 'm', 'n', 'b', 'c', 'p', 'q',
        'e1sq', 'e2sq', 'e3sq', 'e0', 'e1', 'e2', 'e3', 'e4',
    )

    def __init__(self, a: float, inv_f: float):
        a, inv_f = float(a), float(inv_f)
        f = _div(1.0, inv_f)
        b = a * (1 - f)
        values = {
            'a': a,
            'inv_f': inv_f,
            'f': f,
            'm': _div(f, 1 - f),
            'n': _div(f, 2 - f),
            'b': b,
            'c': _div(a * a, b),
            'p': a * a - b * b,
            'q': 1 - f,
            'e1sq': f * (2 - f),
            'e2sq': _div(a * a - b * b, b * b),
            'e3sq': _div(a * a - b * b, a * a + b * b),
        }
        values['e0'] = _sqrt(values['p'])
        values['e1'] = _sqrt(values['e1sq'])
        values['e2'] = _sqrt(values['e2sq'])
        values['e3'] = _sqrt(values['e3sq'])
        values['e4'] = _acos(values['q'])

        for key, value in values.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.inv_f == other.inv_f

    def __hash__(self):
        return hash((self.a, self.inv_f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, inv_f={self.inv_f})>'

    @classmethod
    def from_flattening(cls, a: float, f: float) -> 'Ellipsoid':
        """
        Create an Ellipsoid from its flattening rather than the inverse flattening.

        Args:
            a:
                The equatorial radius, in meters

            f:
                The flattening; 0 creates a sphere

        Returns:
            Ellipsoid
        """
        return cls(a, math.inf if f == 0 else 1 / f)

    @classmethod
    def from_model(cls, name: str) -> 'Ellipsoid':
        """
        Create an Ellipsoid from one of the named models in ELLIPSOID_MODELS.

        Args:
            name:
                The model name, case insensitive (e.g. 'WGS84')

        Returns:
            Ellipsoid
        """
        key = name.upper()
        if key not in ELLIPSOID_MODELS:
            raise ValueError(
                f"Unknown ellipsoid model '{name}'. Options: {list(ELLIPSOID_MODELS.keys())}"
            )

        return cls(*ELLIPSOID_MODELS[key])

    def flattening(self, index: int) -> float:
        """
        The first (1), second (2) or third (3) flattening.

        Args:
            index:
                1, 2 or 3

        Returns:
            float
        """
        if index == 1:
            return self.f
        if index == 2:
            return self.m
        if index == 3:
            return self.n

        raise ValueError(f'invalid index {index}: flattening index must be 1, 2 or 3')

    def eccentricity(self, index: int) -> float:
        """
        The linear eccentricity (0), the first, second or third eccentricity (1, 2, 3)
        or the angular eccentricity in radians (4).
        """
        values = (self.e0, self.e1, self.e2, self.e3, self.e4)
        if index not in range(len(values)):
            raise ValueError(f'invalid index {index}: eccentricity index must be 0, 1, 2, 3 or 4')

        return values[index]

    def eccentricity_square(self, index: int) -> float:
        """a^2 - b^2 (0), or the square of the first, second or third eccentricity"""
        values = (self.p, self.e1sq, self.e2sq, self.e3sq)
        if index not in range(len(values)):
            raise ValueError(
                f'invalid index {index}: eccentricity square index must be 0, 1, 2 or 3'
            )

        return values[index]


Ellipsoid.WGS84 = Ellipsoid(WGS84_A, WGS84_INV_F)
