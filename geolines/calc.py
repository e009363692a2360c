"""
Coordinate-based geodesic calculations on a configurable default ellipsoid.
"""

__all__ = [
    'geodesic_bearing', 'geodesic_destination', 'geodesic_distance', 'geodesic_waypoints',
    'get_default_geodesic', 'set_default_ellipsoid',
]

import math
from typing import List, Union

from geolines import geomath
from geolines.caps import Caps
from geolines.coordinates import Coordinate
from geolines.ellipsoid import Ellipsoid
from geolines.geodesic import Geodesic


# The geodesic used by every function in this module (default WGS84)
_DEFAULT_GEODESIC = Geodesic.WGS84


def set_default_ellipsoid(ellipsoid: Union[str, Ellipsoid]):
    """
    Set the ellipsoid used by the coordinate functions in this module.

    Args:
        ellipsoid:
            An Ellipsoid, or the name of one of the models in ELLIPSOID_MODELS
            (e.g. 'WGS84', 'GRS80', 'SPHERE')
    """
    global _DEFAULT_GEODESIC

    if isinstance(ellipsoid, str):
        ellipsoid = Ellipsoid.from_model(ellipsoid)
    elif not isinstance(ellipsoid, Ellipsoid):
        raise ValueError(
            f'Expected an Ellipsoid or a model name, got {type(ellipsoid).__name__}'
        )

    _DEFAULT_GEODESIC = Geodesic.from_ellipsoid(ellipsoid)


def get_default_geodesic() -> Geodesic:
    """The Geodesic currently used by the coordinate functions in this module"""
    return _DEFAULT_GEODESIC


def geodesic_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    The length of the shortest path between two coordinates, in meters.

    Args:
        coord1:
            The first coordinate

        coord2:
            The second coordinate

    Returns:
        float
    """
    return _DEFAULT_GEODESIC.inverse_distance(
        coord1.latitude, coord1.longitude, coord2.latitude, coord2.longitude
    )


def geodesic_bearing(start: Coordinate, end: Coordinate) -> float:
    """The initial bearing of the shortest path from start to end, in [0, 360) degrees"""
    azi1, _, _ = _DEFAULT_GEODESIC.inverse_azimuths(
        start.latitude, start.longitude, end.latitude, end.longitude
    )
    return geomath.norm_degrees(azi1, 'euclidean')


def geodesic_destination(start: Coordinate, bearing_degrees: float, distance: float) -> Coordinate:
    """
    The coordinate reached by travelling along a geodesic.

    Args:
        start:
            The starting coordinate

        bearing_degrees:
            The initial bearing, in degrees clockwise from north

        distance:
            The distance to travel, in meters

    Returns:
        Coordinate

    Raises:
        ValueError:
            If the bearing or distance is not finite
    """
    if not (math.isfinite(bearing_degrees) and math.isfinite(distance)):
        raise ValueError(
            f'Bearing and distance must be finite, got {bearing_degrees} and {distance}'
        )

    lat2, lon2 = _DEFAULT_GEODESIC.direct_lat_lon(
        start.latitude, start.longitude, bearing_degrees, distance
    )
    return Coordinate(lon2, lat2)


def geodesic_waypoints(start: Coordinate, end: Coordinate, count: int) -> List[Coordinate]:
    """
    Evenly spaced coordinates along the shortest path between two coordinates, including
    both ends.

    Args:
        start:
            The first coordinate

        end:
            The last coordinate

        count:
            The number of coordinates to return; must be at least 2

    Returns:
        list of Coordinate
    """
    line = _DEFAULT_GEODESIC.inverse_line(
        start.latitude, start.longitude, end.latitude, end.longitude,
        Caps.LATITUDE | Caps.LONGITUDE | Caps.DISTANCE_IN,
    )
    return [Coordinate(lon, lat) for lat, lon in line.waypoints(count)]
