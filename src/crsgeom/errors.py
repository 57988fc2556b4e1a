"""Exception types raised by crsgeom.

Every error is recoverable and reported to the caller; nothing in the
package retries or swallows them.

- `GeometryError`          : base class
- `EmptyGeometry`          : an algorithm needing >= 1 point got none
- `DegenerateGeometry`     : invalid contour at construction time
- `NonFiniteCoordinate`    : NaN / inf passed to a constructor
- `ProjectionOutOfDomain`  : reprojection input outside the transform domain
- `UnsupportedVariant`     : adapter input that cannot be represented
- `CrsMismatch`            : operands tagged with different CRSs
"""


class GeometryError(Exception):
    """Base class for all crsgeom errors."""


class EmptyGeometry(GeometryError, ValueError):
    pass


class DegenerateGeometry(GeometryError, ValueError):
    pass


class NonFiniteCoordinate(DegenerateGeometry):
    pass


class ProjectionOutOfDomain(GeometryError):
    """Raised when any coordinate cannot be transformed.

    Reprojection is all-or-nothing, so this always means no output was
    produced.
    """


class UnsupportedVariant(GeometryError, TypeError):
    pass


class CrsMismatch(GeometryError, TypeError):
    def __init__(self, left, right, operation: str = 'operation'):
        self.left = left
        self.right = right
        super().__init__(f'{operation}: cannot mix {left!r} and {right!r}')
