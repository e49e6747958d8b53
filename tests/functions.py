from pytest import approx

from geoutm import LatLon


def assert_latlon_equal(actual: LatLon, expected: LatLon, abs_tol=1e-4):
    """
    Asserts that two lat/lon pairs are equal within a specified absolute tolerance.

    Args:
        actual: The computed LatLon
        expected: The expected LatLon, or a (latitude, longitude) tuple
        abs_tol: The absolute tolerance, in degrees.
                 Default is 1e-4 (approx 11m at the equator).
    """
    try:
        assert actual[0] == approx(expected[0], abs=abs_tol)
        assert actual[1] == approx(expected[1], abs=abs_tol)
    except AssertionError as e:
        print(actual)
        print(expected)
        raise e
