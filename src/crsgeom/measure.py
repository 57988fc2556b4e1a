"""
measure.py

Distance, length and area, dispatched on the CRS tag:

- Planar / Projected : Pythagorean distance, shoelace signed area
- Geodetic           : haversine great-circle distance and spherical-excess
                       signed area on a sphere of `EARTH_MEAN_RADIUS_M`;
                       longitude steps are wrapped at +/-180 degrees

Sign convention for areas: positive means counter-clockwise.

Public functions:
- `distance(a, b)`
- `length(geom, method='haversine')`
- `signed_area(geom)` / `area(geom)`
- `winding(contour)`
"""
from enum import Enum
import math
from typing import Any

import numpy as np

from crsgeom.angle_utils import unwrap_longitudes
from crsgeom.config import EARTH_MEAN_RADIUS_M, GEODESIC_ELLIPSOID
from crsgeom.contour import Contour, Ring
from crsgeom.crs import Crs, common_crs
from crsgeom.geometry import Polygon, decompose, geometry_crs
from crsgeom.traits import coords_of
from crsgeom.utils import coords_array


class Winding(Enum):
    CLOCKWISE = 'clockwise'
    COUNTER_CLOCKWISE = 'counter_clockwise'


def haversine(lon1, lat1, lon2, lat2, radius: float = EARTH_MEAN_RADIUS_M):
    """Great-circle distance in metres between lon/lat degree pairs.

    Accepts scalars or numpy arrays (broadcast); returns same-shaped output.
    """
    lon1, lat1, lon2, lat2 = (np.radians(np.asarray(v, dtype=float)) for v in (lon1, lat1, lon2, lat2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    # rounding can push h a hair above 1 for antipodal points
    h = np.clip(h, 0.0, 1.0)
    return 2.0 * radius * np.arcsin(np.sqrt(h))


def distance(a: Any, b: Any) -> float:
    """Distance between two points in the same CRS.

    Operands are put in a canonical order first so ``distance(a, b)`` and
    ``distance(b, a)`` run the identical float operations.
    """
    crs = common_crs(a, b, operation='distance')
    pa, pb = coords_of(a), coords_of(b)
    if pb < pa:
        pa, pb = pb, pa
    if crs.is_geodetic:
        return float(haversine(pa[0], pa[1], pb[0], pb[1]))
    return math.hypot(pb[0] - pa[0], pb[1] - pa[1])


def _closing_xy(contour: Contour) -> np.ndarray:
    return coords_array(contour.iter_points_closing())


def _geodesic_length(xy: np.ndarray) -> float:
    from pyproj import Geod

    geod = Geod(ellps=GEODESIC_ELLIPSOID)
    return float(geod.line_length(xy[:, 0], xy[:, 1]))


def contour_length(contour: Contour, crs: Crs = None, method: str = 'haversine') -> float:
    """Sum of consecutive-point distances; rings include the closing edge."""
    crs = crs if crs is not None else geometry_crs(contour)
    xy = _closing_xy(contour)
    if xy.shape[0] < 2:
        return 0.0
    if crs.is_geodetic:
        if method == 'geodesic':
            return _geodesic_length(xy)
        if method != 'haversine':
            raise ValueError(f"unknown length method {method!r}; use 'haversine' or 'geodesic'")
        return float(np.sum(haversine(xy[:-1, 0], xy[:-1, 1], xy[1:, 0], xy[1:, 1])))
    if method not in ('haversine', 'geodesic'):
        raise ValueError(f"unknown length method {method!r}; use 'haversine' or 'geodesic'")
    d = np.diff(xy, axis=0)
    return float(np.sum(np.hypot(d[:, 0], d[:, 1])))


def length(geom: Any, method: str = 'haversine') -> float:
    """Length of every contour in ``geom``.

    Points contribute 0, polygons contribute the perimeter of the exterior
    and of every hole. ``method='geodesic'`` switches geodetic contours to
    ellipsoidal distances via `pyproj.Geod`; flat CRSs ignore it.
    """
    crs = geometry_crs(geom)
    _, lines, polygons = decompose(geom)
    total = 0.0
    for line in lines:
        total += contour_length(line, crs, method)
    for poly in polygons:
        for ring in poly.iter_contours():
            total += contour_length(ring, crs, method)
    return total


def ring_signed_area(ring: Contour, crs: Crs = None) -> float:
    """Signed area enclosed by a closed contour (positive counter-clockwise).

    Geodetic rings use the spherical-excess approximation
    ``R^2 / 2 * sum((lon2 - lon1) * (2 + sin(lat1) + sin(lat2)))`` over
    unwrapped longitudes, so rings crossing the antimeridian are measured
    across it rather than around the globe.
    """
    crs = crs if crs is not None else geometry_crs(ring)
    xy = _closing_xy(ring)
    if xy.shape[0] < 3:
        return 0.0
    if crs.is_geodetic:
        lons = np.radians(unwrap_longitudes(xy[:, 0]))
        lats = np.radians(xy[:, 1])
        terms = (lons[1:] - lons[:-1]) * (2.0 + np.sin(lats[:-1]) + np.sin(lats[1:]))
        return float(-np.sum(terms) * EARTH_MEAN_RADIUS_M ** 2 / 2.0)
    x = xy[:, 0]
    y = xy[:, 1]
    return float(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]) / 2.0)


def _polygon_signed_area(poly: Polygon, crs: Crs) -> float:
    outer = ring_signed_area(poly.exterior, crs)
    magnitude = abs(outer) - sum(abs(ring_signed_area(h, crs)) for h in poly.holes)
    return math.copysign(magnitude, outer) if outer != 0.0 else 0.0


def signed_area(geom: Any) -> float:
    """Signed area of ``geom``.

    A polygon's magnitude is its exterior area minus its hole areas (holes
    are assumed to lie inside the exterior; when they do not the result is
    wrong but no error is raised). Its sign is the exterior's winding, so
    reversing the exterior negates the result. Multi-geometries and
    collections sum their polygons; points and lines have no area.
    """
    crs = geometry_crs(geom)
    if isinstance(geom, Ring):
        return ring_signed_area(geom, crs)
    _, _, polygons = decompose(geom)
    return float(sum(_polygon_signed_area(p, crs) for p in polygons))


def area(geom: Any) -> float:
    """Unsigned area: exterior minus holes, summed over every polygon."""
    crs = geometry_crs(geom)
    if isinstance(geom, Ring):
        return abs(ring_signed_area(geom, crs))
    _, _, polygons = decompose(geom)
    return float(sum(abs(_polygon_signed_area(p, crs)) for p in polygons))


def winding(contour: Contour) -> Winding:
    """Winding direction of a closed contour; zero area counts as clockwise."""
    if ring_signed_area(contour) <= 0.0:
        return Winding.CLOCKWISE
    return Winding.COUNTER_CLOCKWISE
