"""Concrete point type and point coercion.

`Point` is the package's own point value. It is only one possible point
representation: every algorithm accepts any object with ``x`` / ``y``.
"""
from dataclasses import dataclass, replace
from typing import Any, Generic, Optional, Tuple, TypeVar

import numpy as np

from crsgeom.config import DEFAULT_EPSILON
from crsgeom.crs import PLANAR, Crs, Geodetic, Projected, crs_of
from crsgeom.errors import CrsMismatch, DegenerateGeometry
from crsgeom.traits import as_float, is_point_like

C = TypeVar('C', bound=Crs)


@dataclass(frozen=True)
class Point(Generic[C]):
    """Immutable 2d/3d point tagged with a CRS.

    Coordinates keep the numeric type they were given (so ``numpy.float32``
    stays single precision) after being checked for finiteness. For a
    `Geodetic` CRS ``x`` is longitude and ``y`` latitude, in degrees.
    """

    x: Any
    y: Any
    z: Optional[Any] = None
    crs: Crs = PLANAR

    def __post_init__(self):
        if not isinstance(self.crs, Crs):
            raise TypeError(f'crs must be a Crs, got {type(self.crs).__name__}')
        as_float(self.x)
        as_float(self.y)
        if self.z is not None:
            as_float(self.z)

    @classmethod
    def planar(cls, x, y, z=None) -> 'Point':
        return cls(x, y, z, PLANAR)

    @classmethod
    def geodetic(cls, lon, lat, z=None, code: Optional[str] = None) -> 'Point':
        crs = Geodetic(code) if code else Geodetic()
        return cls(lon, lat, z, crs)

    @classmethod
    def projected(cls, x, y, code: str, z=None) -> 'Point':
        return cls(x, y, z, Projected(code))

    @property
    def lon(self):
        return self.x

    @property
    def lat(self):
        return self.y

    @property
    def is_3d(self) -> bool:
        return self.z is not None

    def coords(self) -> Tuple[float, ...]:
        if self.z is None:
            return (float(self.x), float(self.y))
        return (float(self.x), float(self.y), float(self.z))

    def with_crs(self, crs: Crs) -> 'Point':
        return replace(self, crs=crs)

    def almost_equals(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        return points_almost_equal(self, other, epsilon)


def points_almost_equal(a: Any, b: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Coordinate-wise comparison within ``epsilon``; CRS tags must match."""
    if crs_of(a) != crs_of(b):
        return False
    za = getattr(a, 'z', None)
    zb = getattr(b, 'z', None)
    if (za is None) != (zb is None):
        return False
    va = [float(a.x), float(a.y)] + ([] if za is None else [float(za)])
    vb = [float(b.x), float(b.y)] + ([] if zb is None else [float(zb)])
    return bool(np.all(np.abs(np.asarray(va) - np.asarray(vb)) <= epsilon))


def make_point(obj: Any, crs: Crs = PLANAR) -> Any:
    """Coerce ``obj`` into a point in ``crs``.

    - tuples, lists and 1-d numpy arrays of length 2 or 3 become a `Point`
    - objects already exposing ``x``/``y`` are validated and kept as given;
      a ``crs`` attribute on them must equal ``crs``
    """
    if is_point_like(obj):
        own = crs_of(obj)
        if own is not None and own != crs:
            raise CrsMismatch(own, crs, 'point construction')
        as_float(obj.x)
        as_float(obj.y)
        z = getattr(obj, 'z', None)
        if z is not None:
            as_float(z)
        return obj
    if isinstance(obj, (str, bytes)):
        raise TypeError(f'cannot build a point from {obj!r}')
    try:
        values = list(obj)
    except TypeError as e:
        raise TypeError(f'cannot build a point from {type(obj).__name__}') from e
    if len(values) not in (2, 3):
        raise DegenerateGeometry(f'point needs 2 or 3 coordinates, got {len(values)}')
    return Point(*values, crs=crs)
