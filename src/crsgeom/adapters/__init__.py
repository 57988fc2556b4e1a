"""Optional boundary adapters.

Each adapter depends on one optional library and is imported explicitly:

    from crsgeom.adapters.geojson import from_geojson, to_geojson
    from crsgeom.adapters.shapely_adapter import from_shapely, to_shapely    # shapely
    from crsgeom.adapters.pyproj_provider import PyprojTransformProvider     # pyproj

Nothing in the core package imports this subpackage.
"""
import importlib.util
from typing import Dict

_REQUIREMENTS = {
    'geojson': None,
    'shapely': 'shapely',
    'pyproj': 'pyproj',
}


def available_adapters() -> Dict[str, bool]:
    """Which adapters can be used with the libraries currently installed."""
    out = {}
    for name, module in _REQUIREMENTS.items():
        out[name] = module is None or importlib.util.find_spec(module) is not None
    return out
