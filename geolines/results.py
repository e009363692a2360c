"""
Result container for direct and inverse geodesic calculations
"""

__all__ = ['GeodesicResult']

import math
from typing import Dict, Optional


class GeodesicResult:
    """
    The quantities produced by a geodesic calculation. Anything that was not requested
    through the capability mask is nan.

    Attributes:
        lat1, lon1, azi1:
            The first point and the azimuth at the first point, in degrees

        lat2, lon2, azi2:
            The second point and the (forward) azimuth at the second point, in degrees

        s12:
            The distance between the points, in meters

        a12:
            The arc length on the auxiliary sphere, in degrees

        m12:
            The reduced length, in meters

        M12, M21:
            The geodesic scales of point 2 relative to point 1 and vice versa

        S12:
            The area between the geodesic and the equator, in square meters
    """

    _FIELDS = ('lat1', 'lon1', 'azi1', 'lat2', 'lon2', 'azi2', 's12', 'a12',
               'm12', 'M12', 'M21', 'S12')

    __slots__ = _FIELDS + ('_populated', )

    def __init__(self, **kwargs: Optional[float]):
        self._populated = tuple(key for key in self._FIELDS if kwargs.get(key) is not None)
        for key in self._FIELDS:
            value = kwargs.pop(key, None)
            setattr(self, key, math.nan if value is None else float(value))

        if kwargs:
            raise TypeError(f'Unexpected result fields: {list(kwargs.keys())}')

    def __eq__(self, other):
        if not isinstance(other, GeodesicResult):
            return False

        return all(
            getattr(self, key) == getattr(other, key)
            or (math.isnan(getattr(self, key)) and math.isnan(getattr(other, key)))
            for key in self._FIELDS
        )

    def __repr__(self):
        populated = ', '.join(f'{key}={value}' for key, value in self.to_dict().items())
        return f'<GeodesicResult({populated})>'

    def to_dict(self) -> Dict[str, float]:
        """
        The computed fields of the result as a dictionary, keyed the same way as the
        attributes. Fields that were not requested are left out; requested fields keep
        their value even when it is nan.

        Returns:
            dict
        """
        return {key: getattr(self, key) for key in self._populated}
