"""Bounding rectangles.

`bounding_rectangle(geom)` computes the `BoundingRectangle` of a geometry.
The rectangle is in the same CRS as its source and always contains every
source point.
"""
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from crsgeom.crs import PLANAR, Crs, common_crs
from crsgeom.errors import EmptyGeometry
from crsgeom.geometry import geometry_crs, iter_points
from crsgeom.utils import coords_array


@dataclass(frozen=True)
class BoundingRectangle:
    x_min: float
    y_min: float
    x_max: float
    y_max: float
    crs: Crs = PLANAR

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    def contains(self, point: Any) -> bool:
        """Closed-interval test; a point on the edge is contained."""
        common_crs(self, point, operation='BoundingRectangle.contains')
        x, y = float(point.x), float(point.y)
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def intersects(self, other: 'BoundingRectangle') -> bool:
        """True when the rectangles share at least one point (touching counts)."""
        common_crs(self, other, operation='BoundingRectangle.intersects')
        return not (other.x_min > self.x_max or other.x_max < self.x_min
                    or other.y_min > self.y_max or other.y_max < self.y_min)

    def merge(self, other: 'BoundingRectangle') -> 'BoundingRectangle':
        crs = common_crs(self, other, operation='BoundingRectangle.merge')
        return BoundingRectangle(min(self.x_min, other.x_min), min(self.y_min, other.y_min),
                                 max(self.x_max, other.x_max), max(self.y_max, other.y_max), crs)


def bounding_rectangle(geom: Any) -> BoundingRectangle:
    """Single pass min/max over every point of ``geom``.

    Raises `EmptyGeometry` for an empty multi-geometry or collection.
    """
    xy = coords_array(iter_points(geom))
    if xy.shape[0] == 0:
        raise EmptyGeometry(f'cannot bound an empty {type(geom).__name__}')
    mins = np.min(xy, axis=0)
    maxs = np.max(xy, axis=0)
    return BoundingRectangle(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]),
                             geometry_crs(geom))
