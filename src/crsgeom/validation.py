"""Opt-in, best-effort topology checks.

Construction never runs these: a polygon with crossing edges or a hole
outside its exterior is still a valid value, and the area / containment
algorithms simply give an undefined (but non-fatal) answer for it. Call
`validate_polygon` when input comes from an untrusted source.
"""
import logging
from typing import Any, List, Tuple

from crsgeom.contour import Contour
from crsgeom.errors import DegenerateGeometry
from crsgeom.geometry import Polygon, decompose
from crsgeom.predicates import Location, _flat_xy, _locate_in_polygon
from crsgeom.segment import segments_intersect

logger = logging.getLogger(__name__)


def find_self_intersections(contour: Contour) -> List[Tuple[int, int]]:
    """Index pairs of non-adjacent segments that touch or cross.

    Adjacent segments share a vertex by construction and are skipped; for
    a ring the closing segment is adjacent to the first one.
    """
    crs = contour.crs
    ref = float(contour.points[0].x) if crs.is_geodetic else None
    xy = _flat_xy(contour, crs, ref)
    n = xy.shape[0] - 1
    hits = []
    for i in range(n):
        a0, a1 = tuple(xy[i]), tuple(xy[i + 1])
        for j in range(i + 2, n):
            if contour.is_closed and i == 0 and j == n - 1:
                continue
            if segments_intersect(a0, a1, tuple(xy[j]), tuple(xy[j + 1])):
                hits.append((i, j))
    return hits


def is_simple(contour: Contour) -> bool:
    return not find_self_intersections(contour)


def holes_inside(polygon: Polygon) -> bool:
    """True when every hole vertex is inside the exterior and no hole edge crosses it."""
    shell = Polygon(polygon.exterior)
    crs = polygon.crs
    ref = float(polygon.exterior.points[0].x) if crs.is_geodetic else None
    for hole in polygon.holes:
        for p in _flat_xy(hole, crs, ref)[:-1]:
            if _locate_in_polygon(shell, tuple(p), crs, ref) is Location.OUTSIDE:
                return False
        if find_ring_crossings(hole, polygon.exterior):
            return False
    return True


def find_ring_crossings(a: Contour, b: Contour) -> List[Tuple[int, int]]:
    crs = a.crs
    ref = float(a.points[0].x) if crs.is_geodetic else None
    xa = _flat_xy(a, crs, ref)
    xb = _flat_xy(b, crs, ref)
    hits = []
    for i in range(xa.shape[0] - 1):
        for j in range(xb.shape[0] - 1):
            if segments_intersect(tuple(xa[i]), tuple(xa[i + 1]), tuple(xb[j]), tuple(xb[j + 1])):
                hits.append((i, j))
    return hits


def validate_polygon(polygon: Polygon, strict: bool = False) -> List[str]:
    """Return human-readable problems found in ``polygon``.

    With ``strict=True`` the first problem is raised as `DegenerateGeometry`
    instead.
    """
    problems = []
    for idx, ring in enumerate(polygon.iter_contours()):
        label = 'exterior' if idx == 0 else f'hole {idx - 1}'
        crossings = find_self_intersections(ring)
        if crossings:
            problems.append(f'{label} self-intersects at segments {crossings[:5]}')
    if polygon.holes and not holes_inside(polygon):
        problems.append('a hole is not nested inside the exterior')
    for i, h1 in enumerate(polygon.holes):
        for j in range(i + 1, len(polygon.holes)):
            if find_ring_crossings(h1, polygon.holes[j]):
                problems.append(f'holes {i} and {j} cross')
    if problems:
        logger.debug('polygon validation found %d problem(s): %s', len(problems), problems)
        if strict:
            raise DegenerateGeometry(problems[0])
    return problems


def validate(geom: Any, strict: bool = False) -> List[str]:
    """`validate_polygon` over every polygon of ``geom`` (plus simplicity of lines)."""
    _, lines, polygons = decompose(geom)
    problems = []
    for k, line in enumerate(lines):
        if not is_simple(line):
            problems.append(f'line {k} self-intersects')
    for k, poly in enumerate(polygons):
        problems.extend(f'polygon {k}: {msg}' for msg in validate_polygon(poly))
    if problems and strict:
        raise DegenerateGeometry(problems[0])
    return problems
