"""Coordinate-system-aware geometry types and algorithms.

Geometries are immutable values tagged with a CRS (Planar, Geodetic or
Projected). Algorithms accept any object exposing ``x``/``y`` and pick
their formulas from the tag; mixing tags raises `CrsMismatch`.

Optional adapters (GeoJSON, shapely, pyproj) live in `crsgeom.adapters`
and are never imported from here.
"""
from crsgeom.bounds import BoundingRectangle, bounding_rectangle
from crsgeom.closest import closest_point, closest_point_on_contour
from crsgeom.contour import LineString, Ring
from crsgeom.crs import PLANAR, WEB_MERCATOR, WGS84, Crs, Geodetic, Planar, Projected, crs_from_code
from crsgeom.errors import (
    CrsMismatch,
    DegenerateGeometry,
    EmptyGeometry,
    GeometryError,
    NonFiniteCoordinate,
    ProjectionOutOfDomain,
    UnsupportedVariant,
)
from crsgeom.geometry import (
    Geometry,
    GeometryCollection,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
    almost_equals,
    iter_points,
)
from crsgeom.measure import Winding, area, distance, length, signed_area, winding
from crsgeom.point import Point
from crsgeom.predicates import Location, contains_point, intersects, locate_point
from crsgeom.reproject import FunctionTransformProvider, TransformProvider, reproject

__version__ = '0.1.0'

__all__ = [
    'BoundingRectangle', 'bounding_rectangle',
    'closest_point', 'closest_point_on_contour',
    'LineString', 'Ring',
    'PLANAR', 'WEB_MERCATOR', 'WGS84', 'Crs', 'Geodetic', 'Planar', 'Projected', 'crs_from_code',
    'CrsMismatch', 'DegenerateGeometry', 'EmptyGeometry', 'GeometryError', 'NonFiniteCoordinate',
    'ProjectionOutOfDomain', 'UnsupportedVariant',
    'Geometry', 'GeometryCollection', 'MultiLineString', 'MultiPoint', 'MultiPolygon', 'Polygon',
    'almost_equals', 'iter_points',
    'Winding', 'area', 'distance', 'length', 'signed_area', 'winding',
    'Point',
    'Location', 'contains_point', 'intersects', 'locate_point',
    'FunctionTransformProvider', 'TransformProvider', 'reproject',
]
