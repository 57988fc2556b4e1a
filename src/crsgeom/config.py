# -*- coding: utf-8 -*-

"""
crsgeom/config.py

Central numeric constants for the geometry algorithms. Keeping tolerances,
earth radii and domain limits in one place keeps the planar, geodetic and
projected code paths consistent with each other.

Contents:
---------
1. EARTH:
   - Sphere radius used by the haversine / spherical-excess formulas.
   - Ellipsoid name handed to `pyproj.Geod` for the optional geodesic path.

2. TOLERANCES:
   - Default epsilon for `almost_equals` comparisons.
   - Boundary tolerance used by point-in-polygon and segment tests.

3. GEODETIC DOMAIN:
   - Valid longitude / latitude ranges checked before reprojection.
   - Default code given to a `Geodetic` CRS.

4. RANDOM_DEFAULTS:
   - Extents and sizes used by `crsgeom.random_geometry` when the caller
     does not override them.

Usage:
------
    from crsgeom.config import EARTH_MEAN_RADIUS_M, DEFAULT_EPSILON
"""
import math

# ───────────────────────────────────────────────────────────────────────────────
# 1) EARTH
# ───────────────────────────────────────────────────────────────────────────────
EARTH_MEAN_RADIUS_M = 6371008.8          # IUGG mean radius R1 (m)
EARTH_CIRCUMFERENCE_M = 2.0 * math.pi * EARTH_MEAN_RADIUS_M
GEODESIC_ELLIPSOID = 'WGS84'             # passed to pyproj.Geod(ellps=...)

# ───────────────────────────────────────────────────────────────────────────────
# 2) TOLERANCES
# ───────────────────────────────────────────────────────────────────────────────
DEFAULT_EPSILON = 1e-9
BOUNDARY_TOLERANCE = 1e-12               # cross-product slack for "on segment"

# ───────────────────────────────────────────────────────────────────────────────
# 3) GEODETIC DOMAIN (degrees)
# ───────────────────────────────────────────────────────────────────────────────
GEODETIC_LON_RANGE = (-180.0, 180.0)
GEODETIC_LAT_RANGE = (-90.0, 90.0)
DEFAULT_GEODETIC_CODE = 'EPSG:4326'

# ───────────────────────────────────────────────────────────────────────────────
# 4) RANDOM GEOMETRY DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
RANDOM_DEFAULTS = {
    'planar_extent': (-1000.0, -1000.0, 1000.0, 1000.0),   # minx, miny, maxx, maxy
    'geodetic_extent': (-179.0, -80.0, 179.0, 80.0),
    'max_points': 16,
    'max_holes': 2,
    'max_members': 4,
}
