"""Line segments and the flat-space primitives built on them.

The module-level functions work on plain ``(x, y)`` float tuples so the
geodetic code paths can feed them unwrapped longitudes without building
points. `Segment` wraps two point-capable objects for callers.
"""
import math
from dataclasses import dataclass
from typing import Any, Tuple

from crsgeom.config import BOUNDARY_TOLERANCE
from crsgeom.traits import coords_of

XY = Tuple[float, float]


def cross(o: XY, a: XY, b: XY) -> float:
    """z of (a - o) x (b - o). Positive when o->a->b turns counter-clockwise."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _scaled_tolerance(a: XY, b: XY, c: XY, tol: float) -> float:
    scale = max(abs(a[0]), abs(a[1]), abs(b[0]), abs(b[1]), abs(c[0]), abs(c[1]), 1.0)
    # cross(a, b, c) is |ab| times the distance of c from the line a-b
    return tol * scale * math.hypot(b[0] - a[0], b[1] - a[1])


def _within_box(a: XY, b: XY, p: XY) -> bool:
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def point_on_segment(a: XY, b: XY, p: XY, tol: float = BOUNDARY_TOLERANCE) -> bool:
    """True when ``p`` lies on the closed segment a-b.

    ``tol`` is a distance relative to the coordinate magnitude so it behaves
    the same for metre-scale projected values and degree-scale values.
    """
    if abs(cross(a, b, p)) > _scaled_tolerance(a, b, p, tol):
        return False
    return _within_box(a, b, p)


def segments_intersect(a: XY, b: XY, c: XY, d: XY) -> bool:
    """Exact orientation test for closed segments a-b and c-d.

    Touching endpoints and collinear overlaps count as intersecting.
    """
    d1 = cross(c, d, a)
    d2 = cross(c, d, b)
    d3 = cross(a, b, c)
    d4 = cross(a, b, d)
    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True
    if d1 == 0 and _within_box(c, d, a):
        return True
    if d2 == 0 and _within_box(c, d, b):
        return True
    if d3 == 0 and _within_box(a, b, c):
        return True
    if d4 == 0 and _within_box(a, b, d):
        return True
    return False


def project_on_segment(a: XY, b: XY, p: XY) -> Tuple[XY, float]:
    """Closest point to ``p`` on segment a-b and its squared distance.

    A zero-length segment degrades to its start point.
    """
    vx = b[0] - a[0]
    vy = b[1] - a[1]
    denom = vx * vx + vy * vy
    if denom == 0.0:
        t = 0.0
    else:
        t = ((p[0] - a[0]) * vx + (p[1] - a[1]) * vy) / denom
        t = min(1.0, max(0.0, t))
    cx = a[0] + t * vx
    cy = a[1] + t * vy
    return (cx, cy), (p[0] - cx) ** 2 + (p[1] - cy) ** 2


@dataclass(frozen=True)
class Segment:
    """Two consecutive contour points."""

    start: Any
    end: Any

    def __iter__(self):
        yield self.start
        yield self.end

    def xy(self) -> Tuple[XY, XY]:
        return coords_of(self.start), coords_of(self.end)

    def distance_to_point_sq(self, point: Any) -> float:
        a, b = self.xy()
        return project_on_segment(a, b, coords_of(point))[1]

    def closest_xy(self, point: Any) -> XY:
        a, b = self.xy()
        return project_on_segment(a, b, coords_of(point))[0]

    def contains_point(self, point: Any, tol: float = BOUNDARY_TOLERANCE) -> bool:
        a, b = self.xy()
        return point_on_segment(a, b, coords_of(point), tol)

    def intersects(self, other: 'Segment') -> bool:
        a, b = self.xy()
        c, d = other.xy()
        return segments_intersect(a, b, c, d)
