from geoutm._version import __version__  # noqa: F401
from geoutm.utils.logging import LOGGER
from geoutm._types import LatLon, UtmCoordinate, UtmProjection
from geoutm.ellipsoid import Ellipsoid, WGS84
from geoutm.errors import (
    EastingOutOfRangeError, NorthingOutOfRangeError, OutOfRangeError,
    ZoneLetterOutOfRangeError, ZoneNumberOutOfRangeError
)
from geoutm.inverse import to_latlon
from geoutm.projection import (
    from_latlon, meridian_convergence, to_utm, to_utm_no_zone, to_utm_radians
)
from geoutm.zones import (
    central_longitude, format_zone, parse_zone, zone_letter_of, zone_number_of
)

__all__ = [
    'EastingOutOfRangeError',
    'Ellipsoid',
    'LatLon',
    'NorthingOutOfRangeError',
    'OutOfRangeError',
    'UtmCoordinate',
    'UtmProjection',
    'WGS84',
    'ZoneLetterOutOfRangeError',
    'ZoneNumberOutOfRangeError',
    'central_longitude',
    'format_zone',
    'from_latlon',
    'meridian_convergence',
    'parse_zone',
    'to_latlon',
    'to_utm',
    'to_utm_no_zone',
    'to_utm_radians',
    'zone_letter_of',
    'zone_number_of',
    'LOGGER',
]
