"""Random geometry generation for tests and fuzzing.

Every function takes a ``numpy.random.Generator``. When none is given one
is created with `numpy.random.default_rng`, which seeds itself from OS
entropy; pass a seed to `make_rng` for reproducible output.

Polygons are star-shaped around their centre, so rings are always simple
and holes always lie inside the exterior.
"""
import math
from typing import Optional

import numpy as np

from crsgeom.config import RANDOM_DEFAULTS
from crsgeom.contour import LineString, Ring
from crsgeom.crs import PLANAR, Crs
from crsgeom.geometry import GeometryCollection, MultiLineString, MultiPoint, MultiPolygon, Polygon
from crsgeom.point import Point

KINDS = ('Point', 'MultiPoint', 'LineString', 'MultiLineString', 'Polygon', 'MultiPolygon', 'GeometryCollection')


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def _extent(crs: Crs):
    if crs.is_geodetic:
        return RANDOM_DEFAULTS['geodetic_extent']
    return RANDOM_DEFAULTS['planar_extent']


def random_point(rng: Optional[np.random.Generator] = None, crs: Crs = PLANAR) -> Point:
    rng = rng if rng is not None else make_rng()
    x0, y0, x1, y1 = _extent(crs)
    return Point(float(rng.uniform(x0, x1)), float(rng.uniform(y0, y1)), crs=crs)


def random_line(rng: Optional[np.random.Generator] = None, crs: Crs = PLANAR, n_points: Optional[int] = None) -> LineString:
    rng = rng if rng is not None else make_rng()
    n = n_points if n_points is not None else int(rng.integers(2, RANDOM_DEFAULTS['max_points'] + 1))
    return LineString(tuple(random_point(rng, crs) for _ in range(max(2, n))), crs)


def _star_ring(rng, cx, cy, radius, n, crs, clockwise=False) -> Ring:
    step = 2.0 * math.pi / n
    # jitter stays under half a step so angles stay sorted and gaps stay below 1.5 steps
    angles = (np.arange(n) + rng.uniform(-0.25, 0.25, n)) * step
    radii = rng.uniform(0.6 * radius, radius, n)
    xs = cx + radii * np.cos(angles)
    ys = cy + radii * np.sin(angles)
    pts = [Point(float(x), float(y), crs=crs) for x, y in zip(xs, ys)]
    if clockwise:
        pts.reverse()
    return Ring(tuple(pts), crs)


def random_polygon(rng: Optional[np.random.Generator] = None, crs: Crs = PLANAR,
                   n_points: Optional[int] = None, n_holes: Optional[int] = None) -> Polygon:
    """Counter-clockwise star-shaped exterior with clockwise holes inside it."""
    rng = rng if rng is not None else make_rng()
    x0, y0, x1, y1 = _extent(crs)
    radius = float(rng.uniform(0.01, 0.1)) * min(x1 - x0, y1 - y0)
    cx = float(rng.uniform(x0 + radius, x1 - radius))
    cy = float(rng.uniform(y0 + radius, y1 - radius))
    n = n_points if n_points is not None else int(rng.integers(3, RANDOM_DEFAULTS['max_points'] + 1))
    k = n_holes if n_holes is not None else int(rng.integers(0, RANDOM_DEFAULTS['max_holes'] + 1))
    # with 8+ vertices the exterior always contains the disk of radius 0.4 * radius
    n = max(8, n) if k else max(3, n)
    exterior = _star_ring(rng, cx, cy, radius, n, crs)
    holes = []
    for i in range(k):
        theta = 2.0 * math.pi * i / max(1, k)
        hx = cx + 0.3 * radius * math.cos(theta) if k > 1 else cx
        hy = cy + 0.3 * radius * math.sin(theta) if k > 1 else cy
        holes.append(_star_ring(rng, hx, hy, 0.1 * radius, int(rng.integers(3, 7)), crs, clockwise=True))
    return Polygon(exterior, tuple(holes), crs)


def random_geometry(rng: Optional[np.random.Generator] = None, crs: Crs = PLANAR,
                    kind: Optional[str] = None, depth: int = 0):
    """Random variant of ``kind`` (chosen at random when omitted)."""
    rng = rng if rng is not None else make_rng()
    if kind is None:
        choices = KINDS if depth < 2 else KINDS[:-1]
        kind = str(rng.choice(choices))
    members = int(rng.integers(1, RANDOM_DEFAULTS['max_members'] + 1))
    if kind == 'Point':
        return random_point(rng, crs)
    if kind == 'MultiPoint':
        return MultiPoint(tuple(random_point(rng, crs) for _ in range(members)), crs)
    if kind == 'LineString':
        return random_line(rng, crs)
    if kind == 'MultiLineString':
        return MultiLineString(tuple(random_line(rng, crs) for _ in range(members)), crs)
    if kind == 'Polygon':
        return random_polygon(rng, crs)
    if kind == 'MultiPolygon':
        return MultiPolygon(tuple(random_polygon(rng, crs) for _ in range(members)), crs)
    if kind == 'GeometryCollection':
        return GeometryCollection(tuple(random_geometry(rng, crs, depth=depth + 1) for _ in range(members)), crs)
    raise ValueError(f'unknown geometry kind {kind!r}')
