import pytest

from geoutm.errors import *
from geoutm.inverse import to_latlon

from tests.functions import assert_latlon_equal


def test_to_latlon_reference():
    assert_latlon_equal(
        to_latlon(313784, 5427057, 60, 'G'),
        (-41.28646, 174.77624),
        abs_tol=3e-5
    )


def test_to_latlon_known_points():
    # New York
    assert_latlon_equal(to_latlon(583960, 4507523, 18, 'T'), (40.71435, -74.00597), abs_tol=3e-5)

    # Cape Town
    assert_latlon_equal(to_latlon(261878, 6243186, 34, 'H'), (-33.92487, 18.42406), abs_tol=3e-5)

    # Aachen
    assert_latlon_equal(to_latlon(294409, 5628898, 32, 'U'), (50.77535, 6.08389), abs_tol=3e-5)


def test_to_latlon_named_fields():
    result = to_latlon(500_000, 0, 31, 'N')
    assert result.latitude == result[0] == 0.
    assert result.longitude == result[1] == 3.


def test_to_latlon_hemisphere():
    # The same northing resolves to opposite hemispheres depending on the band letter
    north = to_latlon(500_000, 5_000_000, 33, 'N')
    south = to_latlon(500_000, 5_000_000, 33, 'M')
    assert north.latitude > 0
    assert south.latitude < 0
    assert north.longitude == south.longitude == 15.

    # Southern band letters all subtract the false northing
    for letter in 'CDEFGHJKLM':
        assert to_latlon(500_000, 5_000_000, 33, letter) == south


def test_to_latlon_validation_order():
    # Every field is invalid; easting is checked first
    with pytest.raises(EastingOutOfRangeError):
        to_latlon(50, -1, 61, 'y')

    with pytest.raises(NorthingOutOfRangeError):
        to_latlon(500_000, -1, 61, 'y')

    with pytest.raises(ZoneNumberOutOfRangeError):
        to_latlon(500_000, 5_000_000, 61, 'y')


def test_to_latlon_easting_out_of_range():
    for easting in (50, 99_999.999, 1_000_000, 1_500_000):
        with pytest.raises(EastingOutOfRangeError) as exc:
            to_latlon(easting, 5_000_000, 30, 'U')
        assert exc.value.value == easting

    # Bounds
    to_latlon(100_000, 5_000_000, 30, 'U')
    to_latlon(999_999.999, 5_000_000, 30, 'U')


def test_to_latlon_northing_out_of_range():
    for northing in (-1, -0.001, 10_000_000.001, 12_000_000):
        with pytest.raises(NorthingOutOfRangeError):
            to_latlon(500_000, northing, 30, 'U')

    # Bounds
    to_latlon(500_000, 0, 30, 'U')
    to_latlon(500_000, 10_000_000, 30, 'C')


def test_to_latlon_zone_number_out_of_range():
    for zone_number in (-1, 0, 61, 100):
        with pytest.raises(ZoneNumberOutOfRangeError):
            to_latlon(500_000, 5_000_000, zone_number, 'U')

    # Bounds
    to_latlon(500_000, 5_000_000, 1, 'U')
    to_latlon(500_000, 5_000_000, 60, 'U')


def test_to_latlon_zone_letter_out_of_range():
    for zone_letter in ('A', 'B', 'Y', 'Z', 'y', 'c'):
        with pytest.raises(ZoneLetterOutOfRangeError):
            to_latlon(500_000, 5_000_000, 30, zone_letter)

    # Bounds
    to_latlon(500_000, 5_000_000, 30, 'C')
    to_latlon(500_000, 5_000_000, 30, 'X')


def test_out_of_range_errors():
    for error in (
        EastingOutOfRangeError, NorthingOutOfRangeError,
        ZoneNumberOutOfRangeError, ZoneLetterOutOfRangeError
    ):
        assert issubclass(error, OutOfRangeError)
        assert issubclass(error, ValueError)

    with pytest.raises(ValueError, match='zone letter out of range'):
        to_latlon(500_000, 5_000_000, 30, 'Z')

    err = NorthingOutOfRangeError(-1)
    assert err.value == -1
    assert str(err) == 'northing out of range (must be between 0 m and 10,000,000 m): -1'
