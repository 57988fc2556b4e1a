"""GeoJSON adapter.

GeoJSON geometries carry no CRS, so `from_geojson` takes the CRS to assume
(WGS84 unless told otherwise) and `to_geojson` drops it. Rings come in
closed (first position repeated) and are written back closed.

Input that this model cannot hold losslessly raises `UnsupportedVariant`:
mixed 2d/3d positions, positions with more than three values, an empty
Point, LineString or Polygon, Features collections and unknown types.
Empty Multi* geometries are accepted.
"""
import json
import logging
from typing import Any, Dict, List, Mapping

from crsgeom.contour import LineString
from crsgeom.crs import WGS84, Crs
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

_NESTING = {
    'Point': 0,
    'MultiPoint': 1,
    'LineString': 1,
    'MultiLineString': 2,
    'Polygon': 2,
    'MultiPolygon': 3,
}


def _as_mapping(obj: Any) -> Mapping:
    if isinstance(obj, (str, bytes)):
        obj = json.loads(obj)
    elif hasattr(obj, '__geo_interface__'):
        obj = obj.__geo_interface__
    if not isinstance(obj, Mapping):
        raise UnsupportedVariant(f'expected a GeoJSON object, got {type(obj).__name__}')
    return obj


def _positions(coords: Any, depth: int):
    """Yield every position of a coordinates array nested ``depth`` levels."""
    if depth == 0:
        yield coords
        return
    if not isinstance(coords, (list, tuple)):
        raise UnsupportedVariant(f'malformed coordinates: {coords!r}')
    for item in coords:
        yield from _positions(item, depth - 1)


def _dimension(obj: Mapping) -> int:
    """Single position width (2 or 3) used by a geometry and all its members."""
    gtype = obj.get('type')
    if gtype == 'GeometryCollection':
        dims = {_dimension(_as_mapping(g)) for g in obj.get('geometries', [])}
    elif gtype in _NESTING:
        coords = obj.get('coordinates')
        if isinstance(coords, (list, tuple)) and len(coords) == 0 and gtype.startswith('Multi'):
            return 2
        if coords is None or (isinstance(coords, (list, tuple)) and len(coords) == 0):
            raise UnsupportedVariant(f'empty {gtype} cannot be represented')
        dims = set()
        for pos in _positions(coords, _NESTING[gtype]):
            if not isinstance(pos, (list, tuple)) or len(pos) not in (2, 3):
                raise UnsupportedVariant(f'{gtype} position {pos!r} must have 2 or 3 values')
            dims.add(len(pos))
    else:
        raise UnsupportedVariant(f'unsupported GeoJSON type {gtype!r}')
    if len(dims) > 1:
        raise UnsupportedVariant(f'{gtype} mixes 2d and 3d positions')
    return dims.pop() if dims else 2


def _build(obj: Mapping, crs: Crs):
    gtype = obj['type']
    coords = obj.get('coordinates')
    if gtype == 'Point':
        return Point(*coords, crs=crs)
    if gtype == 'MultiPoint':
        return MultiPoint(tuple(tuple(p) for p in coords), crs)
    if gtype == 'LineString':
        return LineString(tuple(tuple(p) for p in coords), crs)
    if gtype == 'MultiLineString':
        return MultiLineString(tuple(LineString(tuple(tuple(p) for p in line), crs) for line in coords), crs)
    if gtype == 'Polygon':
        return _polygon(coords, crs)
    if gtype == 'MultiPolygon':
        return MultiPolygon(tuple(_polygon(rings, crs) for rings in coords), crs)
    return GeometryCollection(tuple(_build(_as_mapping(g), crs) for g in obj.get('geometries', [])), crs)


def _polygon(rings: List, crs: Crs) -> Polygon:
    if not rings:
        raise UnsupportedVariant('Polygon without rings cannot be represented')
    shell = tuple(tuple(p) for p in rings[0])
    holes = tuple(tuple(tuple(p) for p in r) for r in rings[1:])
    return Polygon(shell, holes, crs)


def from_geojson(obj: Any, crs: Crs = WGS84):
    """Build a geometry from a GeoJSON mapping, JSON text or ``__geo_interface__``.

    A ``Feature`` is unwrapped to its geometry; its properties are ignored.
    """
    data = _as_mapping(obj)
    if data.get('type') == 'Feature':
        geometry = data.get('geometry')
        if geometry is None:
            raise UnsupportedVariant('Feature has no geometry')
        data = _as_mapping(geometry)
    _dimension(data)
    geom = _build(data, crs)
    logger.debug('converted GeoJSON %s assuming %r', data['type'], crs)
    return geom


def _position(p: Any) -> List[float]:
    z = getattr(p, 'z', None)
    out = [float(p.x), float(p.y)]
    if z is not None:
        out.append(float(z))
    return out


def _ring(ring) -> List[List[float]]:
    coords = [_position(p) for p in ring.iter_points_closing()]
    return coords


def to_geojson(geom: Any) -> Dict[str, Any]:
    """GeoJSON geometry mapping for ``geom``; the CRS tag is dropped."""
    kind = geometry_kind(geom)
    if is_point_like(geom):
        return {'type': 'Point', 'coordinates': _position(geom)}
    if kind == 'MultiPoint':
        return {'type': kind, 'coordinates': [_position(p) for p in geom.points]}
    if kind == 'LineString':
        return {'type': kind, 'coordinates': [_position(p) for p in geom.points]}
    if kind == 'MultiLineString':
        return {'type': kind, 'coordinates': [[_position(p) for p in line.points] for line in geom.lines]}
    if kind == 'Polygon':
        return {'type': kind, 'coordinates': [_ring(r) for r in geom.iter_contours()]}
    if kind == 'MultiPolygon':
        return {'type': kind, 'coordinates': [[_ring(r) for r in poly.iter_contours()] for poly in geom.polygons]}
    if kind == 'GeometryCollection':
        return {'type': kind, 'geometries': [to_geojson(g) for g in geom.geometries]}
    raise UnsupportedVariant(f'{kind} has no GeoJSON geometry type')


def dumps(geom: Any, **kwargs) -> str:
    return json.dumps(to_geojson(geom), **kwargs)
