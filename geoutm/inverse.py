"""
Inverse Transverse Mercator projection of UTM coordinates back to lat/lon
"""

__all__ = ['to_latlon']

import math

from geoutm._const import FALSE_EASTING, FALSE_NORTHING_SOUTH, K0
from geoutm._types import LatLon
from geoutm.ellipsoid import WGS84
from geoutm.errors import (
    EastingOutOfRangeError, NorthingOutOfRangeError,
    ZoneLetterOutOfRangeError, ZoneNumberOutOfRangeError
)
from geoutm.projection import footprint_latitude, rectifying_radius
from geoutm.zones import central_longitude, is_northern


def _validate(easting: float, northing: float, zone_number: int, zone_letter: str) -> None:
    """Raises on the first out-of-range input, checked in argument order"""
    if not 100_000 <= easting < 1_000_000:
        raise EastingOutOfRangeError(easting)

    if not 0 <= northing <= 10_000_000:
        raise NorthingOutOfRangeError(northing)

    if not 1 <= zone_number <= 60:
        raise ZoneNumberOutOfRangeError(zone_number)

    if not 'C' <= zone_letter <= 'X':
        raise ZoneLetterOutOfRangeError(zone_letter)


def to_latlon(easting: float, northing: float, zone_number: int, zone_letter: str) -> LatLon:
    """
    Convert a UTM coordinate to a lat/lon pair.

    Args:
        easting:
            The easting, in meters, including the 500,000 m false easting

        northing:
            The northing, in meters. Southern hemisphere northings must include the
            10,000,000 m false northing.

        zone_number:
            The UTM zone number, 1 through 60

        zone_letter:
            The upper-case latitude band letter, C through X. Letters N and above
            denote the northern hemisphere.

    Raises:
        EastingOutOfRangeError, NorthingOutOfRangeError, ZoneNumberOutOfRangeError,
        ZoneLetterOutOfRangeError; only the first violation is reported.

    Returns:
        LatLon of (latitude, longitude), in degrees
    """
    _validate(easting, northing, zone_number, zone_letter)

    ellipsoid = WGS84
    e2 = ellipsoid.e2
    ep2 = ellipsoid.ep2

    x = easting - FALSE_EASTING
    y = northing
    if not is_northern(zone_letter):
        y -= FALSE_NORTHING_SOUTH

    mu = y / K0 / rectifying_radius(ellipsoid)
    p_rad = footprint_latitude(mu, ellipsoid.e1, extended=True)

    p_sin = math.sin(p_rad)
    p_cos = math.cos(p_rad)
    p_tan = math.tan(p_rad)
    p_tan2 = p_tan * p_tan
    p_tan4 = p_tan2 * p_tan2

    ep_sin = 1 - e2 * p_sin * p_sin
    n = ellipsoid.a / math.sqrt(ep_sin)
    r = (1 - e2) / ep_sin

    c = ep2 * p_cos * p_cos
    c2 = c * c

    d = x / (n * K0)
    d2 = d * d
    d3 = d2 * d
    d4 = d3 * d
    d5 = d4 * d
    d6 = d5 * d

    latitude = p_rad - (p_tan / r) * (
        d2 / 2
        - d4 / 24 * (5 + 3 * p_tan2 + 10 * c - 4 * c2 - 9 * ep2)
        + d6 / 720 * (61 + 90 * p_tan2 + 298 * c + 45 * p_tan4 - 252 * ep2 - 3 * c2)
    )

    longitude = (
        d
        - d3 / 6 * (1 + 2 * p_tan2 + c)
        + d5 / 120 * (5 - 2 * c + 28 * p_tan2 - 3 * c2 + 8 * ep2 + 24 * p_tan4)
    ) / p_cos

    return LatLon(
        math.degrees(latitude),
        math.degrees(longitude) + central_longitude(zone_number)
    )
