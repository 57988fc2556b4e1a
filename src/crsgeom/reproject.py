"""
reproject.py

Reprojection engine: rewrites every point of a geometry from its CRS into a
target CRS through an injected transform provider, keeping the variant
shape, contour order, hole order and point counts exactly as they were.

The engine is all-or-nothing. All coordinates are gathered into two numpy
arrays, checked against the source domain, transformed in one provider
call and checked for finiteness before a single output point is built; any
failure raises `ProjectionOutOfDomain` and nothing is returned.

Elevations (``z``) are carried through unchanged; only x/y are transformed.

Providers must be safe to call from several threads at once for
independent requests. The engine itself never starts threads; callers may
reproject independent geometries in parallel.
"""
import logging
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

import numpy as np

from crsgeom.config import GEODETIC_LAT_RANGE, GEODETIC_LON_RANGE
from crsgeom.crs import Crs
from crsgeom.errors import DegenerateGeometry, ProjectionOutOfDomain
from crsgeom.geometry import geometry_crs, geometry_with_crs, iter_points, map_geometry_points
from crsgeom.point import Point
from crsgeom.utils import safe_log_exception

logger = logging.getLogger(__name__)

TransformFn = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


class TransformProvider(Protocol):
    """External geodetic math: transforms coordinate arrays between CRSs."""

    def transform(self, xs: np.ndarray, ys: np.ndarray, source: Crs, target: Crs) -> Tuple[np.ndarray, np.ndarray]:
        ...


class FunctionTransformProvider:
    """Provider backed by plain callables keyed on (source, target).

    Useful for custom math and for tests:

        provider = FunctionTransformProvider({
            (PLANAR_A, PLANAR_B): lambda xs, ys: (xs + 10, ys),
            (PLANAR_B, PLANAR_A): lambda xs, ys: (xs - 10, ys),
        })

    ``domains`` optionally maps a source CRS to an inclusive
    ``(x_min, y_min, x_max, y_max)`` box; inputs outside it are rejected.
    The callables must be pure for the provider to be thread safe.
    """

    def __init__(self, transforms: Dict[Tuple[Crs, Crs], TransformFn],
                 domains: Optional[Dict[Crs, Tuple[float, float, float, float]]] = None):
        self._transforms = dict(transforms)
        self._domains = dict(domains or {})

    def transform(self, xs, ys, source: Crs, target: Crs):
        fn = self._transforms.get((source, target))
        if fn is None:
            raise ProjectionOutOfDomain(f'no transform registered for {source!r} -> {target!r}')
        box = self._domains.get(source)
        if box is not None:
            x_min, y_min, x_max, y_max = box
            bad = (xs < x_min) | (xs > x_max) | (ys < y_min) | (ys > y_max)
            if np.any(bad):
                i = int(np.argmax(bad))
                raise ProjectionOutOfDomain(f'({xs[i]}, {ys[i]}) is outside the domain of {source!r}')
        return fn(xs, ys)


def check_source_domain(xs: np.ndarray, ys: np.ndarray, source: Crs) -> None:
    """Reject coordinates no provider could accept for ``source``."""
    if source.kind == 'planar':
        raise ProjectionOutOfDomain('Planar coordinates have no geodetic reference and cannot be reprojected')
    if source.is_geodetic:
        lon_lo, lon_hi = GEODETIC_LON_RANGE
        lat_lo, lat_hi = GEODETIC_LAT_RANGE
        bad = (xs < lon_lo) | (xs > lon_hi) | (ys < lat_lo) | (ys > lat_hi)
        if np.any(bad):
            i = int(np.argmax(bad))
            raise ProjectionOutOfDomain(
                f'lon/lat ({xs[i]}, {ys[i]}) at point {i} is outside '
                f'[{lon_lo}, {lon_hi}] x [{lat_lo}, {lat_hi}]')


def transform_arrays(xs: np.ndarray, ys: np.ndarray, source: Crs, target: Crs,
                     provider: TransformProvider) -> Tuple[np.ndarray, np.ndarray]:
    """Domain-checked, finiteness-checked provider call on coordinate arrays."""
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    check_source_domain(xs, ys, source)
    if target.kind == 'planar':
        raise ProjectionOutOfDomain('cannot reproject into a Planar CRS')
    try:
        out_x, out_y = provider.transform(xs, ys, source, target)
    except ProjectionOutOfDomain:
        raise
    except (ValueError, ArithmeticError, RuntimeError) as e:
        safe_log_exception('transform provider failed', e, source=source, target=target, n=xs.size)
        raise ProjectionOutOfDomain(f'transform {source!r} -> {target!r} failed: {e}') from e
    out_x = np.asarray(out_x, dtype=float).reshape(-1)
    out_y = np.asarray(out_y, dtype=float).reshape(-1)
    if out_x.shape != xs.shape or out_y.shape != ys.shape:
        raise ProjectionOutOfDomain(
            f'provider returned {out_x.size}/{out_y.size} values for {xs.size} points')
    finite = np.isfinite(out_x) & np.isfinite(out_y)
    if not np.all(finite):
        i = int(np.argmin(finite))
        raise ProjectionOutOfDomain(
            f'({xs[i]}, {ys[i]}) has no finite image in {target!r}')
    return out_x, out_y


def reproject(geom: Any, target: Crs, provider: TransformProvider, source: Optional[Crs] = None) -> Any:
    """New geometry, structurally identical to ``geom``, expressed in ``target``.

    ``source`` defaults to the CRS carried by ``geom``. Reprojecting into
    the same CRS returns ``geom`` itself.
    """
    source = source if source is not None else geometry_crs(geom)
    if source == target:
        return geom
    points = list(iter_points(geom))
    if not points:
        return geometry_with_crs(geom, target)
    xs = np.fromiter((float(p.x) for p in points), dtype=float, count=len(points))
    ys = np.fromiter((float(p.y) for p in points), dtype=float, count=len(points))
    logger.debug('reprojecting %d points %r -> %r', len(points), source, target)
    out_x, out_y = transform_arrays(xs, ys, source, target, provider)

    coords = iter(zip(out_x.tolist(), out_y.tolist()))

    def rewrite(p):
        x, y = next(coords)
        return Point(x, y, getattr(p, 'z', None), target)

    try:
        out = map_geometry_points(geom, rewrite, target)
    except DegenerateGeometry as e:
        raise ProjectionOutOfDomain(f'{source!r} -> {target!r} collapses a contour: {e}') from e
    # a ring drops a vertex that lands on its first one
    n_out = sum(1 for _ in iter_points(out))
    if n_out != len(points):
        raise ProjectionOutOfDomain(
            f'{source!r} -> {target!r} merged ring vertices: {len(points)} points in, {n_out} out')
    return out


def reproject_point(point: Any, target: Crs, provider: TransformProvider, source: Optional[Crs] = None) -> Point:
    return reproject(point, target, provider, source)
