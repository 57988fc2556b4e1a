"""Coordinate reference system tags.

A CRS tag travels with every point and geometry. The three kinds decide
which distance and area formulas the algorithms use:

- `Planar`    : abstract flat plane, Euclidean formulas
- `Geodetic`  : longitude/latitude in degrees, great-circle formulas
- `Projected` : flat projection of geodetic coordinates; planar formulas,
                but keeps its code (e.g. "EPSG:3857") for the transform
                provider

Operations taking more than one operand call `common_crs` at their boundary
so two coordinate spaces are never mixed silently.
"""
from dataclasses import dataclass
from typing import Any, Optional

from crsgeom.config import DEFAULT_GEODETIC_CODE
from crsgeom.errors import CrsMismatch


class Crs:
    """Base of the three CRS tags. Not instantiated directly."""

    kind = 'abstract'
    code: Optional[str] = None

    @property
    def is_geodetic(self) -> bool:
        return self.kind == 'geodetic'

    @property
    def is_flat(self) -> bool:
        """True for Planar and Projected, which share the Euclidean formulas."""
        return self.kind in ('planar', 'projected')


@dataclass(frozen=True)
class Planar(Crs):
    kind = 'planar'

    def __repr__(self):
        return 'Planar()'


@dataclass(frozen=True)
class Geodetic(Crs):
    code: str = DEFAULT_GEODETIC_CODE
    kind = 'geodetic'


@dataclass(frozen=True)
class Projected(Crs):
    code: str
    kind = 'projected'

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code:
            raise ValueError(f'Projected CRS needs a non-empty code, got {self.code!r}')


PLANAR = Planar()
WGS84 = Geodetic()
WEB_MERCATOR = Projected('EPSG:3857')

_GEODETIC_CODES = {'EPSG:4326', 'EPSG:4269', 'EPSG:4267', 'EPSG:4258', 'OGC:CRS84'}


def crs_from_code(code: Optional[str]) -> Crs:
    """Build a tag from an authority code. ``None`` means Planar.

    Only a small set of well-known geographic codes map to `Geodetic`;
    anything else is treated as `Projected`.
    """
    if code is None:
        return PLANAR
    norm = str(code).strip().upper()
    if norm in _GEODETIC_CODES:
        return Geodetic(norm)
    return Projected(norm)


def crs_of(obj: Any, default: Optional[Crs] = None) -> Optional[Crs]:
    """Return the CRS tag carried by ``obj`` or ``default`` when it has none."""
    crs = getattr(obj, 'crs', None)
    if crs is None:
        return default
    if not isinstance(crs, Crs):
        raise TypeError(f'{type(obj).__name__}.crs must be a Crs, got {type(crs).__name__}')
    return crs


def common_crs(*objs: Any, operation: str = 'operation', default: Crs = PLANAR) -> Crs:
    """Return the single CRS shared by ``objs``.

    Objects without a tag are compatible with anything. Raises `CrsMismatch`
    when two tagged objects disagree.
    """
    found = None
    for obj in objs:
        crs = crs_of(obj)
        if crs is None:
            continue
        if found is None:
            found = crs
        elif crs != found:
            raise CrsMismatch(found, crs, operation)
    return found if found is not None else default
