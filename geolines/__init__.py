from geolines._version import __version__  # noqa: F401
from geolines.utils.logging import LOGGER
from geolines.caps import Caps
from geolines.coordinates import Coordinate
from geolines.ellipsoid import ELLIPSOID_MODELS, Ellipsoid
from geolines.geodesic import Geodesic
from geolines.geodesicline import GeodesicLine
from geolines.results import GeodesicResult

__all__ = [
    'Caps',
    'Coordinate',
    'ELLIPSOID_MODELS',
    'Ellipsoid',
    'Geodesic',
    'GeodesicLine',
    'GeodesicResult',
    'LOGGER',
]
