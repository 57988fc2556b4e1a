"""Open and closed contours.

A `LineString` is an open contour (polyline). A `Ring` is a closed contour:
the edge from the last point back to the first is part of it even though
the first point is not repeated in storage.

Both are immutable. Accessors return fresh generators, so iterating a
contour never consumes it.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

import numpy as np

from crsgeom.config import DEFAULT_EPSILON
from crsgeom.crs import Crs, common_crs
from crsgeom.errors import DegenerateGeometry
from crsgeom.point import make_point, points_almost_equal
from crsgeom.segment import Segment
from crsgeom.traits import coords_of
from crsgeom.utils import coords_array


def _normalize(points: Sequence[Any], crs: Optional[Crs]) -> Tuple[Tuple[Any, ...], Crs]:
    if isinstance(points, np.ndarray):
        points = [tuple(row) for row in points]
    points = list(points)
    if crs is None:
        crs = common_crs(*points, operation='contour construction')
    return tuple(make_point(p, crs) for p in points), crs


@dataclass(frozen=True)
class Contour:
    """Shared behaviour of `LineString` and `Ring`. Use one of those."""

    points: Tuple[Any, ...]
    crs: Optional[Crs] = None

    is_closed = False

    def __post_init__(self):
        points, crs = _normalize(self.points, self.crs)
        object.__setattr__(self, 'points', self._prepare(points))
        object.__setattr__(self, 'crs', crs)

    def _prepare(self, points):
        return points

    def __len__(self):
        return len(self.points)

    def iter_points(self) -> Iterator[Any]:
        return iter(self.points)

    def iter_points_closing(self) -> Iterator[Any]:
        """Points in order; a closed contour repeats its first point at the end."""
        yield from self.points
        if self.is_closed and self.points:
            yield self.points[0]

    def iter_segments(self) -> Iterator[Segment]:
        prev = None
        for p in self.iter_points_closing():
            if prev is not None:
                yield Segment(prev, p)
            prev = p

    def coords_array(self) -> np.ndarray:
        return coords_array(self.points)

    def reversed(self):
        return type(self)(tuple(reversed(self.points)), self.crs)

    def map_points(self, fn: Callable[[Any], Any], crs: Optional[Crs] = None):
        return type(self)(tuple(fn(p) for p in self.points), crs if crs is not None else self.crs)

    def with_crs(self, crs: Crs):
        return self.map_points(lambda p: p.with_crs(crs) if hasattr(p, 'with_crs') else p, crs)

    def almost_equals(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        if type(other) is not type(self) or other.crs != self.crs:
            return False
        if len(other.points) != len(self.points):
            return False
        return all(points_almost_equal(a, b, epsilon) for a, b in zip(self.points, other.points))


@dataclass(frozen=True, eq=True)
class LineString(Contour):
    """Open contour with at least two points."""

    def _prepare(self, points):
        if len(points) < 2:
            raise DegenerateGeometry(f'LineString needs at least 2 points, got {len(points)}')
        return points


@dataclass(frozen=True, eq=True)
class Ring(Contour):
    """Closed contour with at least three distinct points.

    A trailing point equal to the first (the GeoJSON / shapely convention)
    is dropped; closure is implicit.
    """

    is_closed = True

    def _prepare(self, points):
        if len(points) > 1 and coords_of(points[0]) == coords_of(points[-1]):
            points = points[:-1]
        distinct = {coords_of(p) for p in points}
        if len(distinct) < 3:
            raise DegenerateGeometry(f'Ring needs at least 3 distinct points, got {len(distinct)}')
        return points
