"""Geometry variants.

The closed set of shapes the algorithms understand:

    Point | MultiPoint | LineString | MultiLineString
          | Polygon | MultiPolygon | GeometryCollection

Every variant is an immutable value carrying one CRS tag shared by all of
its points. Members may be any point-capable objects; raw coordinate
tuples are wrapped into `Point`. Constructors accept ``crs=None`` and infer
the tag from the members (Planar when nothing carries one).

Hole nesting and ring simplicity are not checked here; see
`crsgeom.validation` for opt-in checks.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from crsgeom.config import DEFAULT_EPSILON
from crsgeom.contour import Contour, LineString, Ring
from crsgeom.crs import PLANAR, Crs, common_crs, crs_of
from crsgeom.errors import CrsMismatch, UnsupportedVariant
from crsgeom.point import Point, make_point, points_almost_equal
from crsgeom.traits import is_point_like


def _as_ring(obj: Any, crs: Optional[Crs]) -> Ring:
    if isinstance(obj, Ring):
        if crs is not None and obj.crs != crs:
            raise CrsMismatch(obj.crs, crs, 'polygon construction')
        return obj
    if isinstance(obj, Contour):
        return Ring(obj.points, crs if crs is not None else obj.crs)
    return Ring(obj, crs)


@dataclass(frozen=True)
class Polygon:
    """Exterior ring plus zero or more hole rings."""

    exterior: Ring
    holes: Tuple[Ring, ...] = ()
    crs: Optional[Crs] = None

    def __post_init__(self):
        exterior = _as_ring(self.exterior, self.crs)
        crs = exterior.crs
        holes = tuple(_as_ring(h, crs) for h in self.holes)
        object.__setattr__(self, 'exterior', exterior)
        object.__setattr__(self, 'holes', holes)
        object.__setattr__(self, 'crs', crs)

    def iter_contours(self) -> Iterator[Ring]:
        yield self.exterior
        yield from self.holes

    def iter_points(self) -> Iterator[Any]:
        for ring in self.iter_contours():
            yield from ring.iter_points()

    def reversed(self) -> 'Polygon':
        """Same polygon with every ring traversed in the opposite direction."""
        return Polygon(self.exterior.reversed(), tuple(h.reversed() for h in self.holes), self.crs)

    def map_points(self, fn: Callable[[Any], Any], crs: Optional[Crs] = None) -> 'Polygon':
        crs = crs if crs is not None else self.crs
        return Polygon(self.exterior.map_points(fn, crs),
                       tuple(h.map_points(fn, crs) for h in self.holes), crs)

    def with_crs(self, crs: Crs) -> 'Polygon':
        return Polygon(self.exterior.with_crs(crs), tuple(h.with_crs(crs) for h in self.holes), crs)

    def almost_equals(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        if not isinstance(other, Polygon) or len(other.holes) != len(self.holes):
            return False
        return all(a.almost_equals(b, epsilon) for a, b in zip(self.iter_contours(), other.iter_contours()))


class _Collection:
    """Behaviour shared by the multi-variants and `GeometryCollection`.

    Subclasses name their member field in ``_field`` and coerce each raw
    member in ``_coerce``.
    """

    _field = 'members'

    def __post_init__(self):
        raw = list(getattr(self, self._field))
        crs = self.crs
        if crs is None:
            crs = common_crs(*raw, operation=f'{type(self).__name__} construction')
        members = tuple(self._coerce(m, crs) for m in raw)
        for m in members:
            own = crs_of(m)
            if own is not None and own != crs:
                raise CrsMismatch(crs, own, f'{type(self).__name__} construction')
        object.__setattr__(self, self._field, members)
        object.__setattr__(self, 'crs', crs)

    def _coerce(self, obj, crs):
        raise NotImplementedError

    @property
    def members(self) -> Tuple[Any, ...]:
        return getattr(self, self._field)

    def __len__(self):
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def is_empty(self) -> bool:
        return len(self.members) == 0

    def iter_points(self) -> Iterator[Any]:
        for m in self.members:
            yield from iter_points(m)

    def map_points(self, fn: Callable[[Any], Any], crs: Optional[Crs] = None):
        crs = crs if crs is not None else self.crs
        return type(self)(tuple(map_geometry_points(m, fn, crs) for m in self.members), crs)

    def with_crs(self, crs: Crs):
        return type(self)(tuple(geometry_with_crs(m, crs) for m in self.members), crs)

    def almost_equals(self, other: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
        if type(other) is not type(self) or other.crs != self.crs:
            return False
        if len(other.members) != len(self.members):
            return False
        return all(almost_equals(a, b, epsilon) for a, b in zip(self.members, other.members))


@dataclass(frozen=True)
class MultiPoint(_Collection):
    points: Tuple[Any, ...] = ()
    crs: Optional[Crs] = None

    _field = 'points'

    def _coerce(self, obj, crs):
        return make_point(obj, crs)


@dataclass(frozen=True)
class MultiLineString(_Collection):
    lines: Tuple[LineString, ...] = ()
    crs: Optional[Crs] = None

    _field = 'lines'

    def _coerce(self, obj, crs):
        if isinstance(obj, LineString):
            return obj
        return LineString(obj, crs)

    def iter_contours(self) -> Iterator[LineString]:
        return iter(self.lines)


@dataclass(frozen=True)
class MultiPolygon(_Collection):
    polygons: Tuple[Polygon, ...] = ()
    crs: Optional[Crs] = None

    _field = 'polygons'

    def _coerce(self, obj, crs):
        if isinstance(obj, Polygon):
            return obj
        rings = list(obj)
        if not rings:
            raise UnsupportedVariant('MultiPolygon member has no rings')
        return Polygon(rings[0], tuple(rings[1:]), crs)

    def iter_contours(self) -> Iterator[Ring]:
        for poly in self.polygons:
            yield from poly.iter_contours()


@dataclass(frozen=True)
class GeometryCollection(_Collection):
    geometries: Tuple[Any, ...] = ()
    crs: Optional[Crs] = None

    _field = 'geometries'

    def _coerce(self, obj, crs):
        if isinstance(obj, GEOMETRY_TYPES) or is_point_like(obj):
            return obj
        raise UnsupportedVariant(f'{type(obj).__name__} is not a geometry variant')


Geometry = Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection]
GEOMETRY_TYPES = (Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection)


def geometry_kind(geom: Any) -> str:
    """Variant name of ``geom``; foreign point-capable objects are 'Point'."""
    for cls in GEOMETRY_TYPES:
        if isinstance(geom, cls):
            return cls.__name__
    if isinstance(geom, Ring):
        return 'Ring'
    if is_point_like(geom):
        return 'Point'
    raise UnsupportedVariant(f'{type(geom).__name__} is not a geometry variant')


def iter_points(geom: Any) -> Iterator[Any]:
    """Every point of ``geom`` in storage order (rings are not re-closed)."""
    if is_point_like(geom):
        yield geom
    elif hasattr(geom, 'iter_points'):
        yield from geom.iter_points()
    else:
        raise UnsupportedVariant(f'{type(geom).__name__} is not a geometry variant')


def decompose(geom: Any):
    """Split ``geom`` into flat lists of (points, open contours, polygons).

    Nested collections are flattened. A bare `Ring` counts as a polygon
    without holes.
    """
    points, lines, polygons = [], [], []

    def visit(g):
        if is_point_like(g):
            points.append(g)
        elif isinstance(g, MultiPoint):
            points.extend(g.points)
        elif isinstance(g, LineString):
            lines.append(g)
        elif isinstance(g, MultiLineString):
            lines.extend(g.lines)
        elif isinstance(g, Ring):
            polygons.append(Polygon(g))
        elif isinstance(g, Polygon):
            polygons.append(g)
        elif isinstance(g, MultiPolygon):
            polygons.extend(g.polygons)
        elif isinstance(g, GeometryCollection):
            for m in g.geometries:
                visit(m)
        else:
            raise UnsupportedVariant(f'{type(g).__name__} is not a geometry variant')

    visit(geom)
    return points, lines, polygons


def geometry_crs(geom: Any) -> Crs:
    return crs_of(geom, PLANAR)


def map_geometry_points(geom: Any, fn: Callable[[Any], Any], crs: Optional[Crs] = None) -> Any:
    """Rebuild ``geom`` with ``fn`` applied to every point, keeping structure."""
    if is_point_like(geom):
        return fn(geom)
    return geom.map_points(fn, crs)


def geometry_with_crs(geom: Any, crs: Crs) -> Any:
    if isinstance(geom, Point):
        return geom.with_crs(crs)
    if is_point_like(geom):
        return geom
    return geom.with_crs(crs)


def almost_equals(a: Any, b: Any, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Structural equality with coordinates compared within ``epsilon``."""
    if is_point_like(a) or is_point_like(b):
        return is_point_like(a) and is_point_like(b) and points_almost_equal(a, b, epsilon)
    if type(a) is not type(b):
        return False
    return a.almost_equals(b, epsilon)
