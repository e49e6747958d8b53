"""
Reference ellipsoid used by the UTM projections
"""

__all__ = ['Ellipsoid', 'WGS84']

import math

from geoutm._const import WGS84_A, WGS84_F


class Ellipsoid:
    """
    An immutable reference ellipsoid, described by its semi-major axis and flattening.

    Derived shape parameters are recomputed on every access rather than stored, so the
    two defining parameters are the only state an Ellipsoid carries.

    Args:
        a:
            The semi-major axis, in meters

        f:
            The flattening (dimensionless)
    """

    __slots__ = ('_a', '_f')

    def __init__(self, a: float, f: float):
        object.__setattr__(self, '_a', float(a))
        object.__setattr__(self, '_f', float(f))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, f={self.f})>'

    @property
    def a(self) -> float:
        """Semi-major axis (meters)"""
        return self._a

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self._f - self._f * self._f

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        e2 = self.e2
        return e2 / (1 - e2)

    @property
    def e1(self) -> float:
        """The e1 parameter of the footprint latitude series"""
        root = math.sqrt(1 - self.e2)
        return (1 - root) / (1 + root)


WGS84 = Ellipsoid(WGS84_A, WGS84_F)
