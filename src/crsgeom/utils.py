"""
utils.py

Small shared helpers: a robust exception logger and coordinate array
coercion. Keep implementations small and testable.

The public helpers:
- `safe_log_exception(msg, exc, **ctx)` : logs exceptions robustly
- `coords_array(points)` : (N, 2) float array from point-capable objects
"""

from typing import Any, Iterable
import sys
import logging
import numpy as np

logger = logging.getLogger(__name__)


def safe_log_exception(msg: str, exc: Exception, **ctx: Any) -> None:
    """Log an exception robustly.

    Attempts to call `logger.exception`. If logging fails for any reason,
    falls back to writing a compact message to `sys.stderr`.
    """
    try:
        if ctx:
            ctx_s = ' | '.join(f"{k}={v!r}" for k, v in ctx.items())
            logger.exception('%s | %s | %s', msg, exc, ctx_s)
        else:
            logger.exception('%s | %s', msg, exc)
    except Exception:
        try:
            sys.stderr.write(f'LOGGING FAILURE: {msg} {exc}\n')
        except Exception:
            # stderr itself is gone; nothing left to report to
            pass


def coords_array(points: Iterable[Any]) -> np.ndarray:
    """Return an (N, 2) float64 array of the x/y of ``points``.

    ``points`` may hold any objects exposing ``x`` and ``y``. An empty
    input yields shape (0, 2).
    """
    rows = [(float(p.x), float(p.y)) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=float)
    return np.asarray(rows, dtype=float)
