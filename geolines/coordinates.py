"""
A longitude/latitude pair used by the coordinate-level geodesic functions
"""

__all__ = ['Coordinate']

import math
from typing import Tuple, Union

from geolines import geomath


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lon/lat pair).

    Longitudes are wrapped into [-180, 180); latitudes outside [-90, 90] and
    non-finite longitudes are rejected.
    """

    __slots__ = ('longitude', 'latitude')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        lon, lat = float(longitude), float(latitude)
        if not -90 <= lat <= 90:
            raise ValueError(f'Latitude {lat} is outside of [-90, 90]')

        if not math.isfinite(lon):
            raise ValueError(f'Longitude {lon} is not a finite number')

        # Longitudes are bounded to [-180, 180)
        self.longitude = geomath.smod(lon, 360.0)
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        The coordinate as a tuple of floats.

        Args:
            reverse:
                If True, return (latitude, longitude) instead of (longitude, latitude)

        Returns:
            tuple
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude
