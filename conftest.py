import pytest

from crsgeom import PLANAR, WGS84, LineString, Polygon


@pytest.fixture
def square():
    """Planar 2x2 square, clockwise, closing edge implicit."""
    return Polygon([(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0)], crs=PLANAR)


@pytest.fixture
def square_with_hole():
    """Counter-clockwise 10x10 square with a clockwise 2x2 hole."""
    exterior = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    hole = [(4.0, 4.0), (4.0, 6.0), (6.0, 6.0), (6.0, 4.0)]
    return Polygon(exterior, [hole], crs=PLANAR)


@pytest.fixture
def meridian_quarter():
    return LineString([(0.0, 0.0), (0.0, 90.0)], crs=WGS84)


@pytest.fixture
def antimeridian_cell():
    """1 x 2 degree geodetic cell straddling 180 degrees, counter-clockwise."""
    return Polygon([(179.0, 0.0), (-179.0, 0.0), (-179.0, 1.0), (179.0, 1.0)], crs=WGS84)
