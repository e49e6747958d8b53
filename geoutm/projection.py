"""
Forward Transverse Mercator projection of lat/lon coordinates onto the UTM grid, along
with the meridian convergence of projected points.

Formulas follow the classic series expansions (Snyder, "Map Projections - A Working
Manual", USGS 1987, pp. 60-64). Accuracy is within a few meters inside the 6 degree
zone and degrades with distance from the central meridian; nothing is rejected.
"""

__all__ = [
    'footprint_latitude', 'from_latlon', 'meridian_convergence', 'meridional_arc',
    'rectifying_radius', 'to_utm', 'to_utm_no_zone', 'to_utm_radians',
]

import math

from geoutm._const import (
    FALSE_EASTING, FALSE_NORTHING_SOUTH, K0, MAX_LATITUDE, MIN_LATITUDE
)
from geoutm._types import UtmCoordinate, UtmProjection
from geoutm.ellipsoid import Ellipsoid, WGS84
from geoutm.utils.logging import warn_once
from geoutm.zones import central_longitude, zone_letter_of, zone_number_of


def _m1(e2: float) -> float:
    return 1 - e2 / 4 - 3 * e2 * e2 / 64 - 5 * e2 * e2 * e2 / 256


def rectifying_radius(ellipsoid: Ellipsoid = WGS84) -> float:
    """Meridional arc length per radian of rectifying latitude, in meters"""
    return ellipsoid.a * _m1(ellipsoid.e2)


def meridional_arc(latitude: float, ellipsoid: Ellipsoid = WGS84) -> float:
    """
    The distance along the meridian from the equator to a latitude.

    Args:
        latitude:
            The latitude, in radians

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        (float) the arc length, in meters
    """
    e2 = ellipsoid.e2
    m1 = _m1(e2)
    m2 = 3 * e2 / 8 + 3 * e2 * e2 / 32 + 45 * e2 * e2 * e2 / 1024
    m3 = 15 * e2 * e2 / 256 + 45 * e2 * e2 * e2 / 1024
    m4 = 35 * e2 * e2 * e2 / 3072

    return ellipsoid.a * (
        m1 * latitude
        - m2 * math.sin(2 * latitude)
        + m3 * math.sin(4 * latitude)
        - m4 * math.sin(6 * latitude)
    )


def footprint_latitude(mu: float, e1: float, extended: bool = False) -> float:
    """
    Recover the latitude whose meridional arc corresponds to the rectifying angle `mu`.

    Args:
        mu:
            The rectifying latitude, in radians

        e1:
            The ellipsoid's e1 parameter

        extended:
            (Default False) If True, carry the series to fifth order in e1

    Returns:
        (float) the footprint latitude, in radians
    """
    e1_2 = e1 * e1
    e1_3 = e1_2 * e1
    e1_4 = e1_3 * e1

    p2 = 3 * e1 / 2 - 27 * e1_3 / 32
    p3 = 21 * e1_2 / 16 - 55 * e1_4 / 32
    p4 = 151 * e1_3 / 96
    p5 = 1097 * e1_4 / 512
    if extended:
        e1_5 = e1_4 * e1
        p2 += 269 * e1_5 / 512
        p4 -= 417 * e1_5 / 128

    return (
        mu
        + p2 * math.sin(2 * mu)
        + p3 * math.sin(4 * mu)
        + p4 * math.sin(6 * mu)
        + p5 * math.sin(8 * mu)
    )


def meridian_convergence(northing: float, easting: float, ellipsoid: Ellipsoid = WGS84) -> float:
    """
    Calculate the angle between grid north and true north at a projected point.

    Args:
        northing:
            The northing, in meters, without false northing

        easting:
            The easting, in meters, including the 500,000 m false easting

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        (float) the convergence, in radians
    """
    e2 = ellipsoid.e2
    mu = northing / K0 / rectifying_radius(ellipsoid)
    foot_lat = footprint_latitude(mu, ellipsoid.e1)

    sin_lat = math.sin(foot_lat)
    tan_lat = math.tan(foot_lat)
    ep = (easting - FALSE_EASTING) / K0
    n = ellipsoid.a / math.sqrt(1 - e2 * sin_lat * sin_lat)
    m = ellipsoid.a * (1 - e2) / (1 - e2 * sin_lat * sin_lat) ** 1.5

    ratio = n / m
    conv1 = -(ep / n) * tan_lat
    conv2 = (tan_lat * (ep / n) ** 3 / 3) * (-2 * ratio * ratio + 3 * ratio + tan_lat * tan_lat)
    return conv1 + conv2


def to_utm_radians(latitude: float, longitude: float, zone_number: int) -> UtmProjection:
    """
    Project a lat/lon pair (in radians) into the given UTM zone.

    The northing carries no false northing; points south of the equator produce
    negative northings.

    Args:
        latitude:
            The latitude, in radians

        longitude:
            The longitude, in radians

        zone_number:
            The UTM zone to project into

    Returns:
        UtmProjection of (northing, easting, convergence)
    """
    if not MIN_LATITUDE <= math.degrees(latitude) <= MAX_LATITUDE:
        warn_once(
            'UTM is not defined outside of latitudes 80S to 84N; projected values '
            'will be inaccurate. (this warning will not repeat)'
        )

    ellipsoid = WGS84
    e2 = ellipsoid.e2
    ep2 = ellipsoid.ep2
    long_origin = central_longitude(zone_number) * math.pi / 180

    sin_lat = math.sin(latitude)
    cos_lat = math.cos(latitude)
    tan_lat = math.tan(latitude)

    n = ellipsoid.a / math.sqrt(1 - e2 * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = ep2 * cos_lat * cos_lat
    a = cos_lat * (longitude - long_origin)
    a2 = a * a
    a3 = a2 * a
    a4 = a3 * a
    a5 = a4 * a
    a6 = a5 * a

    m = meridional_arc(latitude, ellipsoid)

    easting = K0 * n * (
        a
        + a3 / 6 * (1 - t + c)
        + a5 / 120 * (5 - 18 * t + t * t + 72 * c - 58 * ep2)
    ) + FALSE_EASTING

    northing = K0 * (m + n * tan_lat * (
        a2 / 2
        + a4 / 24 * (5 - t + 9 * c + 4 * c * c)
        + a6 / 720 * (61 - 58 * t + t * t + 600 * c - 330 * ep2)
    ))

    return UtmProjection(northing, easting, meridian_convergence(northing, easting, ellipsoid))


def to_utm(latitude: float, longitude: float, zone_number: int) -> UtmProjection:
    """
    Project a lat/lon pair (in degrees) into the given UTM zone.

    Convenience wrapper around to_utm_radians that just converts degrees to radians.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

        zone_number:
            The UTM zone to project into

    Returns:
        UtmProjection of (northing, easting, convergence)
    """
    return to_utm_radians(latitude * math.pi / 180, longitude * math.pi / 180, zone_number)


def to_utm_no_zone(latitude: float, longitude: float) -> UtmProjection:
    """Project a lat/lon pair (in degrees) into the zone it falls within"""
    return to_utm(latitude, longitude, zone_number_of(latitude, longitude))


def from_latlon(latitude: float, longitude: float) -> UtmCoordinate:
    """
    Convert a lat/lon pair (in degrees) to a fully qualified UTM coordinate. Unlike
    to_utm, southern hemisphere northings include the 10,000,000 m false northing, so
    the result can be passed straight back into to_latlon.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

    Returns:
        UtmCoordinate; the zone letter is None outside of latitudes [-80, 84]
    """
    zone_number = zone_number_of(latitude, longitude)
    northing, easting, convergence = to_utm(latitude, longitude, zone_number)
    if latitude < 0:
        northing += FALSE_NORTHING_SOUTH

    return UtmCoordinate(
        easting, northing, zone_number, zone_letter_of(latitude), convergence
    )
