"""Result types returned by the UTM conversions"""

__all__ = ['LatLon', 'UtmCoordinate', 'UtmProjection']

from typing import NamedTuple, Optional


class LatLon(NamedTuple):
    """A geographic coordinate, in degrees"""
    latitude: float
    longitude: float


class UtmProjection(NamedTuple):
    """
    A projected point within an explicitly chosen zone. Northing carries no false
    northing, so it is negative south of the equator. Convergence is in radians.
    """
    northing: float
    easting: float
    convergence: float


class UtmCoordinate(NamedTuple):
    """A fully qualified UTM position, with false northing applied in the south"""
    easting: float
    northing: float
    zone_number: int
    zone_letter: Optional[str]
    convergence: float
