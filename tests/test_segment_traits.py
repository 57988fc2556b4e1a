from decimal import Decimal

import numpy as np
import pytest

from crsgeom import LineString, NonFiniteCoordinate, Point, Polygon, Ring
from crsgeom.segment import Segment, cross, point_on_segment, project_on_segment, segments_intersect
from crsgeom.traits import (
    SupportsContour,
    SupportsCrs,
    SupportsPoint2d,
    SupportsPoint3d,
    SupportsPolygon,
    as_float,
    elevation_of,
)


def test_cross_sign():
    assert cross((0, 0), (1, 0), (0, 1)) > 0
    assert cross((0, 0), (0, 1), (1, 0)) < 0
    assert cross((0, 0), (1, 1), (2, 2)) == 0


def test_segments_intersect_cases():
    assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))
    assert segments_intersect((0, 0), (1, 0), (1, 0), (2, 5))      # shared endpoint
    assert segments_intersect((0, 0), (2, 0), (1, 0), (3, 0))      # collinear overlap
    assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))  # collinear, apart
    assert not segments_intersect((0, 0), (1, 1), (0, 1), (0.4, 0.6))


def test_point_on_segment_scales_with_magnitude():
    a, b = (6.0e6, 1.0e6), (6.2e6, 1.2e6)
    mid = (6.1e6, 1.1e6)
    assert point_on_segment(a, b, mid)
    assert not point_on_segment(a, b, (6.1e6, 1.1e6 + 1.0))


def test_project_on_segment():
    (cx, cy), d2 = project_on_segment((0, 0), (2, 0), (1, 3))
    assert (cx, cy) == (1.0, 0.0) and d2 == 9.0
    (cx, cy), d2 = project_on_segment((1, 1), (1, 1), (4, 5))
    assert (cx, cy) == (1, 1) and d2 == 25


def test_segment_helpers():
    seg = Segment(Point(0, 0), Point(2, 0))
    assert seg.distance_to_point_sq(Point(5, 4)) == 25.0
    assert seg.closest_xy(Point(1, -1)) == (1.0, 0.0)
    assert seg.contains_point(Point(1, 0))
    assert seg.intersects(Segment(Point(1, -1), Point(1, 1)))
    assert list(seg) == [Point(0, 0), Point(2, 0)]


def test_protocols_are_structural():
    assert isinstance(Point(0, 0), SupportsPoint2d)
    assert isinstance(Point(0, 0, 1), SupportsPoint3d)
    assert isinstance(Point(0, 0), SupportsCrs)
    assert isinstance(LineString([(0, 0), (1, 1)]), SupportsContour)
    assert isinstance(Polygon(Ring([(0, 0), (1, 0), (1, 1)])), SupportsPolygon)
    assert not isinstance((0, 0), SupportsPoint2d)


def test_as_float_accepts_number_likes():
    assert as_float(Decimal('1.5')) == 1.5
    assert as_float(np.float16(2.0)) == 2.0
    assert as_float(3) == 3.0
    with pytest.raises(NonFiniteCoordinate):
        as_float(object())
    assert elevation_of(Point(0, 0)) is None
    assert elevation_of(Point(0, 0, 4)) == 4.0
