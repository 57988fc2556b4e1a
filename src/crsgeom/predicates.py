"""
predicates.py

Point location and intersection tests.

- `locate_point(geom, point)` -> `Location` (INSIDE / OUTSIDE / BOUNDARY)
- `contains_point(geom, point)` -> bool, INSIDE only
- `intersects(a, b)` -> bool, also the overlap test (touching counts)

Geodetic inputs are handled in longitude/latitude space with longitudes
unwrapped around a common reference, so contours crossing the antimeridian
are treated as continuous. Polygons are assumed simple; self-intersecting
rings give an even-odd answer rather than an error.
"""
from enum import Enum
from typing import Any, List, Optional, Tuple

import numpy as np

from crsgeom.angle_utils import unwrap_longitudes
from crsgeom.contour import Contour
from crsgeom.crs import Crs, common_crs
from crsgeom.errors import UnsupportedVariant
from crsgeom.geometry import decompose, iter_points
from crsgeom.segment import point_on_segment, segments_intersect
from crsgeom.traits import coords_of
from crsgeom.utils import coords_array


class Location(Enum):
    INSIDE = 'inside'
    OUTSIDE = 'outside'
    BOUNDARY = 'boundary'


def _flat_xy(contour: Contour, crs: Crs, ref_lon: Optional[float]) -> np.ndarray:
    """Closing coordinates of ``contour``; geodetic longitudes unwrapped near ``ref_lon``."""
    xy = coords_array(contour.iter_points_closing())
    if crs.is_geodetic and xy.shape[0]:
        xy[:, 0] = unwrap_longitudes(xy[:, 0], reference=ref_lon)
    return xy


def _flat_point(point: Any, crs: Crs, ref_lon: Optional[float]) -> Tuple[float, float]:
    x, y = coords_of(point)
    if crs.is_geodetic and ref_lon is not None:
        x = float(unwrap_longitudes([x], reference=ref_lon)[0])
    return x, y


def _on_ring(xy: np.ndarray, p) -> bool:
    for i in range(xy.shape[0] - 1):
        if point_on_segment(tuple(xy[i]), tuple(xy[i + 1]), p):
            return True
    return False


def _crossing_parity(xy: np.ndarray, p) -> bool:
    """Even-odd ray cast towards +x. True when the crossing count is odd."""
    px, py = p
    inside = False
    for i in range(xy.shape[0] - 1):
        xi, yi = xy[i]
        xj, yj = xy[i + 1]
        if (yi > py) != (yj > py):
            x_cross = xi + (py - yi) * (xj - xi) / (yj - yi)
            if px < x_cross:
                inside = not inside
    return inside


def _locate_in_polygon(poly, p, crs: Crs, ref_lon: Optional[float]) -> Location:
    rings = [_flat_xy(r, crs, ref_lon) for r in poly.iter_contours()]
    if any(_on_ring(xy, p) for xy in rings):
        return Location.BOUNDARY
    inside = False
    for xy in rings:
        if _crossing_parity(xy, p):
            inside = not inside
    return Location.INSIDE if inside else Location.OUTSIDE


def locate_point(geom: Any, point: Any) -> Location:
    """Classify ``point`` against the areal parts of ``geom``.

    The exterior ring's parity is XOR'd with each hole's, so a point in a
    hole is OUTSIDE and a point on any ring edge (including a hole's) is
    BOUNDARY. For multi-polygons the first non-OUTSIDE answer wins.
    Raises `UnsupportedVariant` when ``geom`` has no polygons.
    """
    crs = common_crs(geom, point, operation='locate_point')
    _, _, polygons = decompose(geom)
    if not polygons:
        raise UnsupportedVariant(f'{type(geom).__name__} has no area to locate a point in')
    ref_lon = float(point.x) if crs.is_geodetic else None
    p = _flat_point(point, crs, ref_lon)
    for poly in polygons:
        loc = _locate_in_polygon(poly, p, crs, ref_lon)
        if loc is not Location.OUTSIDE:
            return loc
    return Location.OUTSIDE


def contains_point(geom: Any, point: Any) -> bool:
    return locate_point(geom, point) is Location.INSIDE


class _FlatParts:
    """Points, edge chains and polygons of one geometry in flat coordinates."""

    def __init__(self, geom: Any, crs: Crs, ref_lon: Optional[float]):
        points, lines, polygons = decompose(geom)
        self.points = [_flat_point(p, crs, ref_lon) for p in points]
        self.chains: List[np.ndarray] = [_flat_xy(line, crs, ref_lon) for line in lines]
        self.polygons = polygons
        for poly in polygons:
            self.chains.extend(_flat_xy(r, crs, ref_lon) for r in poly.iter_contours())
        self.crs = crs
        self.ref_lon = ref_lon

    def all_xy(self) -> np.ndarray:
        parts = [np.asarray(self.points, dtype=float).reshape(-1, 2)] + self.chains
        return np.vstack(parts)

    def vertices(self):
        """One representative vertex per component, for containment checks."""
        out = list(self.points)
        out.extend(tuple(c[0]) for c in self.chains if c.shape[0])
        return out

    def touches_point(self, p) -> bool:
        if any(p == q for q in self.points):
            return True
        if any(_on_ring(c, p) for c in self.chains):
            return True
        for poly in self.polygons:
            if _locate_in_polygon(poly, p, self.crs, self.ref_lon) is not Location.OUTSIDE:
                return True
        return False


def _boxes_disjoint(a: np.ndarray, b: np.ndarray) -> bool:
    amin, amax = a.min(axis=0), a.max(axis=0)
    bmin, bmax = b.min(axis=0), b.max(axis=0)
    return bool(np.any(amin > bmax) or np.any(bmin > amax))


def _chains_cross(a_chains, b_chains) -> bool:
    for ca in a_chains:
        for cb in b_chains:
            if _boxes_disjoint(ca, cb):
                continue
            for i in range(ca.shape[0] - 1):
                a0, a1 = tuple(ca[i]), tuple(ca[i + 1])
                for j in range(cb.shape[0] - 1):
                    if segments_intersect(a0, a1, tuple(cb[j]), tuple(cb[j + 1])):
                        return True
    return False


def intersects(a: Any, b: Any) -> bool:
    """True when ``a`` and ``b`` share at least one point.

    Steps: bounding-rectangle rejection, exact segment intersection between
    every pair of edges, then containment of a vertex of one geometry in
    the other (catches a polygon entirely inside another, or a point inside
    a polygon). Empty geometries intersect nothing.

    This is also the overlap test: polygons whose areas overlap intersect,
    and so do polygons that only touch along an edge or at a vertex.
    """
    crs = common_crs(a, b, operation='intersects')
    ref_lon = None
    if crs.is_geodetic:
        first = next(iter_points(a), None)
        ref_lon = float(first.x) if first is not None else 0.0
    pa = _FlatParts(a, crs, ref_lon)
    pb = _FlatParts(b, crs, ref_lon)
    xa, xb = pa.all_xy(), pb.all_xy()
    if xa.shape[0] == 0 or xb.shape[0] == 0:
        return False
    if _boxes_disjoint(xa, xb):
        return False
    if _chains_cross(pa.chains, pb.chains):
        return True
    if any(pb.touches_point(v) for v in pa.vertices()):
        return True
    return any(pa.touches_point(v) for v in pb.vertices())
