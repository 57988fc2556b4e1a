"""shapely adapter.

shapely geometries carry no CRS: `from_shapely` takes the CRS to assume
and `to_shapely` drops it. shapely is imported lazily so the core package
never needs it.

`LinearRing` (a ring that is not a polygon), empty geometries and
geometries mixing 2d and 3d members raise `UnsupportedVariant`.
"""
import logging
from typing import Any

from crsgeom.contour import LineString
from crsgeom.crs import PLANAR, Crs
from crsgeom.errors import UnsupportedVariant
from crsgeom.geometry import (
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
    geometry_kind,
)
from crsgeom.point import Point
from crsgeom.traits import is_point_like

logger = logging.getLogger(__name__)


def _check_dimension(geom) -> None:
    if geom.geom_type in ('GeometryCollection', 'MultiPoint', 'MultiLineString', 'MultiPolygon'):
        members = list(geom.geoms)
        if len({g.has_z for g in members}) > 1:
            raise UnsupportedVariant(f'{geom.geom_type} mixes 2d and 3d members')
        for g in members:
            _check_dimension(g)


def _coords(seq):
    return tuple(tuple(c) for c in seq)


def _convert(geom, crs: Crs):
    gtype = geom.geom_type
    if geom.is_empty:
        raise UnsupportedVariant(f'empty {gtype} cannot be represented')
    if gtype == 'Point':
        return Point(*geom.coords[0], crs=crs)
    if gtype == 'LineString':
        return LineString(_coords(geom.coords), crs)
    if gtype == 'Polygon':
        return Polygon(_coords(geom.exterior.coords), tuple(_coords(r.coords) for r in geom.interiors), crs)
    if gtype == 'MultiPoint':
        return MultiPoint(tuple(Point(*g.coords[0], crs=crs) for g in geom.geoms), crs)
    if gtype == 'MultiLineString':
        return MultiLineString(tuple(_convert(g, crs) for g in geom.geoms), crs)
    if gtype == 'MultiPolygon':
        return MultiPolygon(tuple(_convert(g, crs) for g in geom.geoms), crs)
    if gtype == 'GeometryCollection':
        return GeometryCollection(tuple(_convert(g, crs) for g in geom.geoms), crs)
    raise UnsupportedVariant(f'shapely {gtype} has no equivalent variant')


def from_shapely(geom: Any, crs: Crs = PLANAR):
    """Convert a shapely geometry, assuming its coordinates are in ``crs``."""
    _check_dimension(geom)
    out = _convert(geom, crs)
    logger.debug('converted shapely %s assuming %r', geom.geom_type, crs)
    return out


def _xy(p):
    z = getattr(p, 'z', None)
    if z is None:
        return (float(p.x), float(p.y))
    return (float(p.x), float(p.y), float(z))


def to_shapely(geom: Any):
    """shapely equivalent of ``geom``; the CRS tag is dropped."""
    from shapely import geometry as sg

    kind = geometry_kind(geom)
    if is_point_like(geom):
        return sg.Point(_xy(geom))
    if kind == 'MultiPoint':
        return sg.MultiPoint([_xy(p) for p in geom.points])
    if kind == 'LineString':
        return sg.LineString([_xy(p) for p in geom.points])
    if kind == 'MultiLineString':
        return sg.MultiLineString([[_xy(p) for p in line.points] for line in geom.lines])
    if kind == 'Polygon':
        return sg.Polygon([_xy(p) for p in geom.exterior.points],
                          [[_xy(p) for p in h.points] for h in geom.holes])
    if kind == 'MultiPolygon':
        return sg.MultiPolygon([to_shapely(p) for p in geom.polygons])
    if kind == 'GeometryCollection':
        return sg.GeometryCollection([to_shapely(g) for g in geom.geometries])
    raise UnsupportedVariant(f'{kind} has no shapely equivalent')
