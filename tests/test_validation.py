import pytest

from crsgeom import DegenerateGeometry, GeometryCollection, LineString, Polygon, Ring
from crsgeom.validation import (
    find_ring_crossings,
    find_self_intersections,
    holes_inside,
    is_simple,
    validate,
    validate_polygon,
)

BOW_TIE = [(0, 0), (2, 2), (2, 0), (0, 2)]


def test_self_intersections(square):
    assert is_simple(square.exterior)
    assert find_self_intersections(Ring(BOW_TIE)) == [(0, 2)]
    assert not is_simple(LineString([(0, 0), (2, 2), (2, 0), (0, 2)]))
    assert is_simple(LineString([(0, 0), (1, 0), (1, 1)]))


def test_holes_inside(square):
    ok = Polygon(square.exterior, [[(0.5, 0.5), (1, 0.5), (1, 1)]])
    outside = Polygon(square.exterior, [[(5, 5), (6, 5), (6, 6)]])
    straddling = Polygon(square.exterior, [[(1, 1), (3, 1), (3, 1.5)]])
    assert holes_inside(ok)
    assert not holes_inside(outside)
    assert not holes_inside(straddling)
    assert validate_polygon(ok) == []


def test_ring_crossings(square):
    other = Ring([(1, 1), (3, 1), (3, 3), (1, 3)])
    assert find_ring_crossings(square.exterior, other)
    assert not find_ring_crossings(square.exterior, Ring([(5, 5), (6, 5), (6, 6)]))


def test_validate_reports_and_strict(square):
    bad = Polygon(BOW_TIE, [[(5, 5), (6, 5), (6, 6)]])
    problems = validate_polygon(bad)
    assert len(problems) == 2
    assert problems[0].startswith('exterior self-intersects')
    with pytest.raises(DegenerateGeometry):
        validate_polygon(bad, strict=True)


def test_validate_geometry(square):
    gc = GeometryCollection([square, LineString([(0, 0), (2, 2), (2, 0), (0, 2)])])
    problems = validate(gc)
    assert problems == ['line 0 self-intersects']
    with pytest.raises(DegenerateGeometry):
        validate(gc, strict=True)
    assert validate(square) == []
