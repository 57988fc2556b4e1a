"""pyproj-backed transform provider.

`pyproj.Transformer` objects are not safe to share between threads, so the
provider keeps one cache of transformers per thread, keyed on the
(source code, target code) pair. Axis order is always x/y (longitude,
latitude for geographic CRSs), matching `Point`.
"""
import logging
import threading

import numpy as np

from crsgeom.crs import Crs
from crsgeom.errors import ProjectionOutOfDomain

logger = logging.getLogger(__name__)


class PyprojTransformProvider:
    """Transform provider using PROJ through pyproj."""

    def __init__(self):
        self._local = threading.local()

    def _transformer(self, source: Crs, target: Crs):
        from pyproj import CRS, Transformer

        cache = getattr(self._local, 'cache', None)
        if cache is None:
            cache = {}
            self._local.cache = cache
        key = (source.code, target.code)
        tr = cache.get(key)
        if tr is None:
            if source.code is None or target.code is None:
                raise ProjectionOutOfDomain(f'{source!r} -> {target!r}: both CRSs need an authority code')
            logger.debug('building transformer %s -> %s', source.code, target.code)
            tr = Transformer.from_crs(
                CRS.from_user_input(source.code),
                CRS.from_user_input(target.code),
                always_xy=True  # lon, lat order
            )
            cache[key] = tr
        return tr

    def transform(self, xs, ys, source: Crs, target: Crs):
        from pyproj.exceptions import CRSError, ProjError

        try:
            tr = self._transformer(source, target)
        except CRSError as e:
            raise ProjectionOutOfDomain(f'unknown CRS in {source!r} -> {target!r}: {e}') from e
        try:
            out_x, out_y = tr.transform(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float), errcheck=True)
        except ProjError as e:
            raise ProjectionOutOfDomain(f'{source.code} -> {target.code}: {e}') from e
        return np.asarray(out_x, dtype=float), np.asarray(out_y, dtype=float)
