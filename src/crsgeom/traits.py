"""Capability protocols.

Algorithms are written against these structural contracts, never against a
concrete class, so a caller's own coordinate type participates without
conversion as long as it exposes ``x`` and ``y``:

    class MyFix:
        def __init__(self, lon, lat):
            self.x, self.y = lon, lat

    length(LineString([MyFix(0, 0), MyFix(0, 90)], crs=WGS84))

Scalars only need to convert with ``float()`` (int, float, numpy floats of
any width, Decimal all qualify).
"""
from typing import Any, Iterator, Optional, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from crsgeom.errors import NonFiniteCoordinate


@runtime_checkable
class SupportsPoint2d(Protocol):
    x: Any
    y: Any


@runtime_checkable
class SupportsPoint3d(SupportsPoint2d, Protocol):
    z: Any


@runtime_checkable
class SupportsCrs(Protocol):
    crs: Any


@runtime_checkable
class SupportsContour(Protocol):
    is_closed: bool

    def iter_points(self) -> Iterator[SupportsPoint2d]:
        ...


@runtime_checkable
class SupportsPolygon(Protocol):
    exterior: SupportsContour
    holes: Sequence[SupportsContour]


def as_float(value: Any) -> float:
    """Convert a real-number-like scalar to a finite float.

    Raises `NonFiniteCoordinate` for NaN / inf and for values that are not
    numbers at all.
    """
    if isinstance(value, (str, bytes)):
        raise NonFiniteCoordinate(f'coordinate {value!r} is not a real number')
    try:
        out = float(value)
    except (TypeError, ValueError) as e:
        raise NonFiniteCoordinate(f'coordinate {value!r} is not a real number') from e
    if not np.isfinite(out):
        raise NonFiniteCoordinate(f'coordinate {value!r} is not finite')
    return out


def is_point_like(obj: Any) -> bool:
    return hasattr(obj, 'x') and hasattr(obj, 'y')


def coords_of(point: Any) -> Tuple[float, float]:
    """(x, y) of a point-capable object as plain floats."""
    return float(point.x), float(point.y)


def elevation_of(point: Any) -> Optional[float]:
    z = getattr(point, 'z', None)
    return None if z is None else float(z)
