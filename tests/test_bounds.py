import pytest

from crsgeom import (
    PLANAR,
    WGS84,
    BoundingRectangle,
    CrsMismatch,
    EmptyGeometry,
    GeometryCollection,
    MultiPoint,
    Point,
    bounding_rectangle,
    iter_points,
)


def test_square_bounds(square):
    box = bounding_rectangle(square)
    assert box.as_tuple() == (0.0, 0.0, 2.0, 2.0)
    assert box.crs == PLANAR
    assert box.width == 2.0 and box.height == 2.0
    assert box.center == (1.0, 1.0)
    assert all(box.contains(p) for p in iter_points(square))


def test_point_bounds_are_degenerate():
    box = bounding_rectangle(Point.geodetic(3.0, 4.0))
    assert box.as_tuple() == (3.0, 4.0, 3.0, 4.0)
    assert box.crs == WGS84
    assert box.contains(Point.geodetic(3.0, 4.0))


def test_empty_bounds_raise():
    with pytest.raises(EmptyGeometry):
        bounding_rectangle(MultiPoint([]))
    with pytest.raises(EmptyGeometry):
        bounding_rectangle(GeometryCollection([]))


def test_intersects_and_merge():
    a = BoundingRectangle(0, 0, 2, 2)
    b = BoundingRectangle(2, 2, 3, 3)
    c = BoundingRectangle(5, 5, 6, 6)
    assert a.intersects(b)
    assert not a.intersects(c)
    assert a.merge(c).as_tuple() == (0, 0, 6, 6)


def test_bounds_crs_checked():
    a = BoundingRectangle(0, 0, 2, 2)
    with pytest.raises(CrsMismatch):
        a.contains(Point.geodetic(1, 1))
    with pytest.raises(CrsMismatch):
        a.merge(BoundingRectangle(0, 0, 1, 1, WGS84))
