"""Closest point queries.

For a contour the answer is the minimum over the per-segment projections;
when two segments give exactly the same distance the one met first in
contour order wins. Geodetic contours are projected in a local
equirectangular frame centred on the query point (longitude scaled by the
cosine of its latitude), which is accurate for short segments; the
returned distance is the haversine distance to the projected point.
"""
import math
from typing import Any, Optional, Tuple

import numpy as np

from crsgeom.angle_utils import unwrap_longitudes, wrap_deg
from crsgeom.contour import Contour
from crsgeom.crs import Crs, common_crs
from crsgeom.errors import EmptyGeometry
from crsgeom.geometry import decompose
from crsgeom.measure import distance, haversine
from crsgeom.point import Point
from crsgeom.segment import project_on_segment
from crsgeom.traits import coords_of
from crsgeom.utils import coords_array


class _Frame:
    """Flat working frame for one query point."""

    def __init__(self, point: Any, crs: Crs):
        self.crs = crs
        self.px, self.py = coords_of(point)
        self.kx = math.cos(math.radians(self.py)) if crs.is_geodetic else 1.0
        # at the poles every longitude is the same place
        if self.kx < 1e-12:
            self.kx = 1e-12

    def to_flat(self, xy: np.ndarray) -> np.ndarray:
        out = xy.copy()
        if self.crs.is_geodetic:
            out[:, 0] = unwrap_longitudes(out[:, 0], reference=self.px)
        out[:, 0] = (out[:, 0] - self.px) * self.kx
        out[:, 1] = out[:, 1] - self.py
        return out

    def from_flat(self, fx: float, fy: float) -> Tuple[float, float]:
        x = fx / self.kx + self.px
        if self.crs.is_geodetic:
            x = float(wrap_deg(x))
        return x, fy + self.py

    def distance_to(self, x: float, y: float) -> float:
        if self.crs.is_geodetic:
            return float(haversine(self.px, self.py, x, y))
        return math.hypot(x - self.px, y - self.py)


def _best_on_contour(contour: Contour, frame: _Frame):
    flat = frame.to_flat(coords_array(contour.iter_points_closing()))
    best = None
    for i in range(flat.shape[0] - 1):
        (cx, cy), d2 = project_on_segment(tuple(flat[i]), tuple(flat[i + 1]), (0.0, 0.0))
        if best is None or d2 < best[0]:
            best = (d2, cx, cy, i)
    if best is None and flat.shape[0] == 1:
        best = (float(flat[0, 0] ** 2 + flat[0, 1] ** 2), float(flat[0, 0]), float(flat[0, 1]), 0)
    return best


def closest_point_on_contour(contour: Contour, point: Any) -> Tuple[Point, float, int]:
    """Closest point on ``contour`` to ``point``, its distance and segment index.

    Rings include their closing segment (index ``len(ring) - 1``).
    """
    crs = common_crs(contour, point, operation='closest_point')
    frame = _Frame(point, crs)
    best = _best_on_contour(contour, frame)
    if best is None:
        raise EmptyGeometry('contour has no points')
    _, fx, fy, idx = best
    x, y = frame.from_flat(fx, fy)
    return Point(x, y, crs=crs), frame.distance_to(x, y), idx


def closest_point(geom: Any, point: Any) -> Tuple[Any, float]:
    """Closest point of ``geom`` to ``point`` and the distance to it.

    Candidates are visited in storage order (points, then lines, then
    polygon rings, exterior before holes) and only a strictly smaller
    distance replaces the current best. For polygons the answer lies on
    the boundary even when ``point`` is inside.
    """
    crs = common_crs(geom, point, operation='closest_point')
    points, lines, polygons = decompose(geom)
    frame = _Frame(point, crs)
    best: Optional[Tuple[float, Any]] = None

    for p in points:
        d = distance(p, point)
        if best is None or d < best[0]:
            best = (d, p)

    contours = list(lines)
    for poly in polygons:
        contours.extend(poly.iter_contours())
    for contour in contours:
        found = _best_on_contour(contour, frame)
        if found is None:
            continue
        _, fx, fy, _ = found
        x, y = frame.from_flat(fx, fy)
        d = frame.distance_to(x, y)
        if best is None or d < best[0]:
            best = (d, Point(x, y, crs=crs))

    if best is None:
        raise EmptyGeometry(f'cannot find a closest point in an empty {type(geom).__name__}')
    return best[1], best[0]
