"""
Resolution of UTM zone numbers and latitude band letters
"""

__all__ = [
    'central_longitude', 'format_zone', 'is_northern', 'parse_zone',
    'zone_letter_of', 'zone_number_of',
]

import math
import re
from typing import Optional, Tuple

from geoutm._const import MAX_LATITUDE, MIN_LATITUDE, ZONE_LETTERS

_ZONE_PATTERN = re.compile(r'^\s*(\d{1,2})\s*([A-Za-z])\s*$')


def zone_number_of(latitude: float, longitude: float) -> int:
    """
    Determine the UTM zone number of a lat/lon pair. Zones are 6 degrees wide, apart from
    the widened zones over southwest Norway and Svalbard.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

    Returns:
        (int) the zone number
    """
    # Southwest Norway
    if 56 <= latitude < 64 and 3 <= longitude < 12:
        return 32

    # Svalbard
    if 72 <= latitude <= 84 and longitude >= 0:
        if longitude < 9:
            return 31
        if longitude < 21:
            return 33
        if longitude < 33:
            return 35
        if longitude < 42:
            return 37

    return int(math.floor((longitude + 180) / 6)) + 1


def zone_letter_of(latitude: float) -> Optional[str]:
    """
    Determine the UTM latitude band letter of a latitude.

    Args:
        latitude:
            The latitude, in degrees

    Returns:
        The band letter, or None if the latitude lies outside [-80, 84]
    """
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        return None

    return ZONE_LETTERS[int(math.floor((latitude - MIN_LATITUDE) / 8))]


def central_longitude(zone_number: int) -> int:
    """The longitude of a zone's central meridian, in degrees"""
    return zone_number * 6 - 183


def is_northern(zone_letter: str) -> bool:
    """True if the band letter lies in the northern hemisphere"""
    return zone_letter >= 'N'


def format_zone(zone_number: int, zone_letter: str) -> str:
    """Formats a zone as its compact designator, e.g. '33U'"""
    return f'{zone_number}{zone_letter.upper()}'


def parse_zone(zone: str) -> Tuple[int, str]:
    """
    Splits a compact zone designator (e.g. '33U' or '6v') into its number and letter.
    The letter is upper-cased; neither part is range checked.

    Args:
        zone:
            The zone designator

    Returns:
        (zone number, zone letter)
    """
    match = _ZONE_PATTERN.match(zone)
    if match is None:
        raise ValueError(f'Invalid UTM zone designator: {zone!r}')

    return int(match.group(1)), match.group(2).upper()
