import math

import pytest

from crsgeom import (
    WGS84,
    CrsMismatch,
    EmptyGeometry,
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    Ring,
    closest_point,
    closest_point_on_contour,
    distance,
)


@pytest.mark.parametrize('query, expected', [
    ((0.0, 0.0), 0.0),
    ((0.5, 0.0), 0.0),
    ((0.5, 0.5), 0.0),
    ((0.0, 1.0), math.sqrt(0.5)),
    ((2.0, 2.0), math.sqrt(2.0)),
    ((-2.0, -2.0), math.sqrt(8.0)),
])
def test_distance_to_closed_contour(query, expected):
    ring = Ring([(0, 0), (1, 1), (1, 0)])
    _, d, _ = closest_point_on_contour(ring, Point(*query))
    assert d == pytest.approx(expected)


def test_closing_segment_index():
    ring = Ring([(0, 0), (1, 1), (1, 0)])
    p, d, idx = closest_point_on_contour(ring, Point(0.5, -1.0))
    assert idx == 2
    assert p.almost_equals(Point(0.5, 0.0))
    assert d == pytest.approx(1.0)


def test_tie_goes_to_first_segment():
    line = LineString([(0, 0), (2, 0), (2, 2)])
    p, d, idx = closest_point_on_contour(line, Point(1, 1))
    assert idx == 0
    assert p.almost_equals(Point(1, 0))
    assert d == pytest.approx(1.0)


def test_closest_point_on_polygon_boundary(square):
    p, d = closest_point(square, Point(1.0, 1.5))
    assert p.almost_equals(Point(1.0, 2.0))
    assert d == pytest.approx(0.5)


def test_closest_point_prefers_earlier_candidate():
    mp = MultiPoint([(0, 1), (0, -1)])
    p, d = closest_point(mp, Point(0, 0))
    assert p == Point(0, 1)
    assert d == 1.0


def test_closest_point_mixed_collection():
    gc = GeometryCollection([Point(10, 10), LineString([(0, 0), (4, 0)])])
    p, d = closest_point(gc, Point(2, 3))
    assert p.almost_equals(Point(2, 0))
    assert d == pytest.approx(3.0)


def test_closest_point_geodetic_matches_haversine():
    line = LineString([(0.0, 0.0), (0.0, 1.0)], crs=WGS84)
    query = Point.geodetic(0.01, 0.5)
    p, d = closest_point(line, query)
    assert p.crs == WGS84
    assert p.x == pytest.approx(0.0, abs=1e-9)
    assert p.y == pytest.approx(0.5, abs=1e-6)
    assert d == pytest.approx(distance(p, query), rel=1e-12)


def test_closest_point_errors(square):
    with pytest.raises(EmptyGeometry):
        closest_point(GeometryCollection([]), Point(0, 0))
    with pytest.raises(CrsMismatch):
        closest_point(square, Point.geodetic(0, 0))


def test_closest_point_across_antimeridian_is_wrapped():
    line = LineString([(179.5, 0.0), (179.9, 0.0)], crs=WGS84)
    query = Point.geodetic(-179.9, 0.1)
    p, d = closest_point(line, query)
    assert -180.0 <= p.x < 180.0
    assert p.x == pytest.approx(179.9, abs=1e-9)
    assert p.y == pytest.approx(0.0, abs=1e-9)
    assert d == pytest.approx(distance(Point.geodetic(179.9, 0.0), query), rel=1e-9)
