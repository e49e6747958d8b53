"""
Exceptions raised when UTM input falls outside the projectable range
"""

__all__ = [
    'OutOfRangeError', 'EastingOutOfRangeError', 'NorthingOutOfRangeError',
    'ZoneNumberOutOfRangeError', 'ZoneLetterOutOfRangeError',
]

from typing import Any


class OutOfRangeError(ValueError):
    """Base class for a UTM input value outside of its valid range"""

    field = 'value'
    valid_range = ''

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'{self.field} out of range (must be {self.valid_range}): {value!r}')


class EastingOutOfRangeError(OutOfRangeError):
    field = 'easting'
    valid_range = 'between 100,000 m and 999,999 m'


class NorthingOutOfRangeError(OutOfRangeError):
    field = 'northing'
    valid_range = 'between 0 m and 10,000,000 m'


class ZoneNumberOutOfRangeError(OutOfRangeError):
    field = 'zone number'
    valid_range = 'between 1 and 60'


class ZoneLetterOutOfRangeError(OutOfRangeError):
    field = 'zone letter'
    valid_range = 'between C and X'
