"""Structural (de)serialization to plain JSON-compatible dicts.

Field names are stable and part of the public format:

    Point              {"type", "crs", "coordinates": [x, y(, z)]}
    LineString         {"type", "crs", "points": [[x, y], ...]}
    Polygon            {"type", "crs", "exterior": [[x, y], ...], "holes": [[[x, y], ...], ...]}
    MultiPoint         {"type", "crs", "points": [...]}
    MultiLineString    {"type", "crs", "lines": [[...], ...]}
    MultiPolygon       {"type", "crs", "polygons": [{"exterior", "holes"}, ...]}
    GeometryCollection {"type", "crs", "geometries": [<geometry dict>, ...]}

    crs                {"kind": "planar" | "geodetic" | "projected", "code": str | null}

Rings are stored as held in memory, without the closing point. Point,
contour and hole order are preserved exactly.
"""
from typing import Any, Dict, List, Mapping, Optional

from crsgeom.contour import LineString
from crsgeom.crs import PLANAR, Crs, Geodetic, Projected, crs_of
from crsgeom.errors import UnsupportedVariant
from crsgeom.geometry import (
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
    geometry_crs,
    geometry_kind,
)
from crsgeom.point import Point


def crs_to_dict(crs: Crs) -> Dict[str, Any]:
    return {'kind': crs.kind, 'code': crs.code}


def crs_from_dict(data: Mapping) -> Crs:
    kind = data.get('kind')
    if kind == 'planar':
        return PLANAR
    if kind == 'geodetic':
        return Geodetic(data['code']) if data.get('code') else Geodetic()
    if kind == 'projected':
        return Projected(data['code'])
    raise UnsupportedVariant(f'unknown CRS kind {kind!r}')


def _pos(p) -> List[float]:
    z = getattr(p, 'z', None)
    return [float(p.x), float(p.y)] if z is None else [float(p.x), float(p.y), float(z)]


def _points(contour) -> List[List[float]]:
    return [_pos(p) for p in contour.points]


def _polygon_body(poly: Polygon) -> Dict[str, Any]:
    return {'exterior': _points(poly.exterior), 'holes': [_points(h) for h in poly.holes]}


def to_dict(geom: Any, default_crs: Optional[Crs] = None) -> Dict[str, Any]:
    """Serialize ``geom``. Members without a CRS tag take ``default_crs``."""
    kind = geometry_kind(geom)
    crs = crs_of(geom, default_crs) if default_crs is not None else geometry_crs(geom)
    out: Dict[str, Any] = {'type': kind, 'crs': crs_to_dict(crs)}
    if kind == 'Point':
        out['coordinates'] = _pos(geom)
    elif kind == 'LineString':
        out['points'] = _points(geom)
    elif kind == 'Polygon':
        out.update(_polygon_body(geom))
    elif kind == 'MultiPoint':
        out['points'] = [_pos(p) for p in geom.points]
    elif kind == 'MultiLineString':
        out['lines'] = [_points(line) for line in geom.lines]
    elif kind == 'MultiPolygon':
        out['polygons'] = [_polygon_body(p) for p in geom.polygons]
    elif kind == 'GeometryCollection':
        out['geometries'] = [to_dict(g, crs) for g in geom.geometries]
    else:
        raise UnsupportedVariant(f'{kind} is not a serializable geometry')
    return out


def _tuples(rows) -> tuple:
    return tuple(tuple(r) for r in rows)


def from_dict(data: Mapping) -> Any:
    kind = data.get('type')
    crs = crs_from_dict(data.get('crs', {'kind': 'planar'}))
    if kind == 'Point':
        return Point(*data['coordinates'], crs=crs)
    if kind == 'LineString':
        return LineString(_tuples(data['points']), crs)
    if kind == 'Polygon':
        return Polygon(_tuples(data['exterior']), tuple(_tuples(h) for h in data.get('holes', [])), crs)
    if kind == 'MultiPoint':
        return MultiPoint(_tuples(data['points']), crs)
    if kind == 'MultiLineString':
        return MultiLineString(tuple(LineString(_tuples(line), crs) for line in data['lines']), crs)
    if kind == 'MultiPolygon':
        return MultiPolygon(tuple(
            Polygon(_tuples(p['exterior']), tuple(_tuples(h) for h in p.get('holes', [])), crs)
            for p in data['polygons']), crs)
    if kind == 'GeometryCollection':
        return GeometryCollection(tuple(from_dict(g) for g in data['geometries']), crs)
    raise UnsupportedVariant(f'unknown geometry type {kind!r}')
