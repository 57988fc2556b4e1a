"""Small utilities for longitude wrapping.

Keep these numpy-only so the geodetic formulas can import them without
pulling optional geospatial dependencies.
"""
import numpy as np


def wrap_deg(x: float) -> float:
    """Wrap degrees to [-180, 180).

    Accepts scalars or numpy arrays; returns same-shaped output.
    """
    x_arr = np.asarray(x)
    return (x_arr + 180.0) % 360.0 - 180.0


def lon_delta_deg(lon_from, lon_to) -> np.ndarray:
    """Shortest signed longitude step from ``lon_from`` to ``lon_to`` in degrees.

    A step crossing the antimeridian (e.g. 179 -> -179) is +2, not -358.
    """
    return wrap_deg(np.asarray(lon_to, dtype=float) - np.asarray(lon_from, dtype=float))


def unwrap_longitudes(lons, reference=None) -> np.ndarray:
    """Make a longitude sequence continuous across the antimeridian.

    Each value is replaced by the previous value plus the wrapped step, so
    a ring around 180 degrees becomes e.g. [179, 181, 181, 179] instead of
    jumping to -179. When ``reference`` is given the first value is first
    moved to within 180 degrees of it.
    """
    lons = np.asarray(lons, dtype=float)
    if lons.size == 0:
        return lons.copy()
    out = np.empty_like(lons)
    first = lons[0]
    if reference is not None:
        first = float(reference) + float(lon_delta_deg(reference, first))
    out[0] = first
    if lons.size > 1:
        steps = lon_delta_deg(lons[:-1], lons[1:])
        out[1:] = first + np.cumsum(steps)
    return out
