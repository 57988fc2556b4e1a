import pytest

from crsgeom import (
    WEB_MERCATOR,
    WGS84,
    CrsMismatch,
    GeometryCollection,
    LineString,
    Location,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnsupportedVariant,
    contains_point,
    intersects,
    locate_point,
)


def test_square_locations(square):
    assert locate_point(square, Point(1, 1)) is Location.INSIDE
    assert locate_point(square, Point(2, 2)) is Location.BOUNDARY
    assert locate_point(square, Point(1, 0)) is Location.BOUNDARY
    assert locate_point(square, Point(3, 3)) is Location.OUTSIDE
    assert contains_point(square, Point(1, 1))
    assert not contains_point(square, Point(2, 2))


def test_hole_is_outside(square_with_hole):
    assert locate_point(square_with_hole, Point(5, 5)) is Location.OUTSIDE
    assert locate_point(square_with_hole, Point(4, 5)) is Location.BOUNDARY
    assert locate_point(square_with_hole, Point(2, 2)) is Location.INSIDE


def test_multipolygon_first_hit_wins(square):
    far = Polygon([(10, 10), (12, 10), (12, 12), (10, 12)])
    mp = MultiPolygon([square, far])
    assert locate_point(mp, Point(11, 11)) is Location.INSIDE
    assert locate_point(mp, Point(5, 5)) is Location.OUTSIDE


def test_locate_needs_area():
    with pytest.raises(UnsupportedVariant):
        locate_point(LineString([(0, 0), (1, 1)]), Point(0, 0))


def test_locate_crs_mismatch(square):
    with pytest.raises(CrsMismatch):
        locate_point(square, Point.geodetic(1, 1))


def test_geodetic_point_in_antimeridian_cell(antimeridian_cell):
    assert locate_point(antimeridian_cell, Point.geodetic(180.0, 0.5)) is Location.INSIDE
    assert locate_point(antimeridian_cell, Point.geodetic(-180.0, 0.5)) is Location.INSIDE
    assert locate_point(antimeridian_cell, Point.geodetic(0.0, 0.5)) is Location.OUTSIDE


def test_intersects_polygons(square):
    overlapping = Polygon([(1, 1), (3, 1), (3, 3), (1, 3)])
    far = Polygon([(10, 10), (12, 10), (12, 12)])
    inner = Polygon([(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)])
    assert intersects(square, overlapping)
    assert intersects(overlapping, square)
    assert not intersects(square, far)
    assert intersects(square, inner)
    assert intersects(inner, square)


def test_intersects_lines_and_points(square):
    crossing = LineString([(-1, 1), (3, 1)])
    near_miss = LineString([(1.5, 3), (3, 1.5)])
    touching = LineString([(2, 2), (4, 4)])
    assert intersects(square, crossing)
    assert not intersects(square, near_miss)
    assert intersects(square, touching)
    assert intersects(square, Point(1, 1))
    assert not intersects(square, Point(3, 3))
    assert intersects(Point(1, 1), Point(1, 1))
    assert not intersects(Point(1, 1), MultiPoint([(1, 2), (3, 4)]))


def test_intersects_hole_does_not_count(square_with_hole):
    in_hole = Polygon([(4.5, 4.5), (5.5, 4.5), (5.5, 5.5)])
    assert not intersects(square_with_hole, in_hole)


def test_intersects_empty_and_mismatch(square):
    assert not intersects(square, GeometryCollection([]))
    with pytest.raises(CrsMismatch):
        intersects(square, Point.geodetic(0, 0))


def test_intersects_across_antimeridian(antimeridian_cell):
    line = LineString([(178.0, 0.5), (-178.0, 0.5)], crs=WGS84)
    assert intersects(antimeridian_cell, line)
    assert not intersects(antimeridian_cell, LineString([(10.0, 0.5), (11.0, 0.5)], crs=WGS84))


def _diamond(cx, cy, d, crs):
    return Polygon([(cx + d, cy), (cx, cy + d), (cx - d, cy), (cx, cy - d)], crs=crs)


def test_small_polygon_at_web_mercator_scale():
    c = 1.0e7
    poly = _diamond(c, c, 2.0, WEB_MERCATOR)
    assert locate_point(poly, Point(c, c, crs=WEB_MERCATOR)) is Location.INSIDE
    assert locate_point(poly, Point(c + 2.0, c, crs=WEB_MERCATOR)) is Location.BOUNDARY
    assert locate_point(poly, Point(c + 1.0, c + 1.0, crs=WEB_MERCATOR)) is Location.BOUNDARY
    assert locate_point(poly, Point(c + 3.0, c, crs=WEB_MERCATOR)) is Location.OUTSIDE


def test_small_geodetic_polygon_centre_is_inside():
    poly = _diamond(170.0, 10.0, 1.0e-4, WGS84)
    assert locate_point(poly, Point.geodetic(170.0, 10.0)) is Location.INSIDE
    assert locate_point(poly, Point.geodetic(170.0, 10.0 + 1.0e-4)) is Location.BOUNDARY


def test_nested_small_polygons_at_web_mercator_scale():
    c = 1.0e7
    outer = _diamond(c, c, 2.0, WEB_MERCATOR)
    inner = _diamond(c, c, 0.5, WEB_MERCATOR)
    assert intersects(outer, inner)
    assert intersects(outer, Point(c, c, crs=WEB_MERCATOR))
    assert not intersects(outer, Point(c + 2.5, c, crs=WEB_MERCATOR))


def test_intersects_covers_overlap_and_touch(square):
    overlapping = Polygon([(1, 1), (3, 1), (3, 3), (1, 3)])
    edge_neighbour = Polygon([(2, 0), (4, 0), (4, 2), (2, 2)])
    corner_neighbour = Polygon([(2, 2), (4, 2), (4, 4), (2, 4)])
    assert intersects(square, overlapping)
    assert intersects(square, edge_neighbour)
    assert intersects(square, corner_neighbour)
    assert not intersects(square, Polygon([(2.5, 0), (4, 0), (4, 2)]))
