"""
The rigid symmetries of the grid: rotations and reflections that fix the origin.

Transforms are stored as 3x3 homogeneous integer matrices acting on column vectors `(x, y, 1)`.
None of the eight symmetries has a translation part, but `apply` honours one if present.
Remember that the y axis points downwards, so a counter-clockwise quarter turn on screen
sends `(0, 1)` to `(1, 0)`.
"""

import logging
import typing
import numpy as np
from polyomino_symmetries.utils.coords import Point
from polyomino_symmetries.utils.shapes import Shape, normalize

logger = logging.getLogger(__name__)

class RigidTransform:
    def __init__(self, matrix: typing.Any, *, name: str | None = None):
        matrix = np.array(matrix, dtype=np.int64)

        assert matrix.shape == (3, 3), "Transforms are 3x3 homogeneous matrices"
        assert (matrix[2] == [0, 0, 1]).all(), "The last row of a homogeneous matrix must be [0, 0, 1]"

        matrix.flags.writeable = False
        self.matrix = matrix
        self.name = name

    @staticmethod
    def from_linear(a: int, b: int, c: int, d: int, *, name: str | None = None) -> "RigidTransform":
        """
        Builds the transform `(x, y) -> (a*x + b*y, c*x + d*y)`.
        """
        return RigidTransform([
            [a, b, 0],
            [c, d, 0],
            [0, 0, 1],
        ], name=name)

    def apply(self, point: Point | tuple[int, int]) -> Point:
        point = Point.of(point)
        x, y, _ = self.matrix @ np.array([point.x, point.y, 1], dtype=np.int64)
        return Point(int(x), int(y))

    def inverse(self) -> "RigidTransform":
        """
        The inverse of an origin-fixing rotation or reflection is its transpose.
        """
        assert not self.matrix[:2, 2].any(), "Only linear transforms can be inverted"
        return RigidTransform(self.matrix.T, name=f"{self.name}^-1" if self.name else None)

    def __mul__(self, other: "RigidTransform") -> "RigidTransform":
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return compose(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self) -> int:
        return hash(self.matrix.tobytes())

    def __repr__(self) -> str:
        if self.name is not None:
            return f"RigidTransform({self.name})"
        return f"RigidTransform({self.matrix[:2, :2].tolist()})"

def compose(first: RigidTransform, then: RigidTransform) -> RigidTransform:
    """
    Returns the transform that applies `first` and then `then`.
    As matrices this is the product `then @ first`.
    """
    return RigidTransform(then.matrix @ first.matrix)

def apply_to_shape(transform: RigidTransform, shape: Shape) -> Shape:
    """
    Maps every filled cell of the shape through the transform.
    The result is re-normalized, since the transform usually moves the shape away from the origin.
    """
    return normalize(transform.apply(cell) for cell in shape)

IDENTITY = RigidTransform.from_linear(1, 0, 0, 1, name="identity")

# Reflection over the y axis, i.e. `x -> -x`.
MIRROR_HORIZONTAL = RigidTransform.from_linear(-1, 0, 0, 1, name="mirror_horizontal")

# Reflection over the x axis, i.e. `y -> -y`.
MIRROR_VERTICAL = RigidTransform.from_linear(1, 0, 0, -1, name="mirror_vertical")

# Reflection over the line y = -x.
MIRROR_DIAGONAL = RigidTransform.from_linear(0, -1, -1, 0, name="mirror_diagonal")

# Reflection over the line y = x.
MIRROR_ANTIDIAGONAL = RigidTransform.from_linear(0, 1, 1, 0, name="mirror_antidiagonal")

ROTATE_90 = RigidTransform.from_linear(0, 1, -1, 0, name="rotate90")
ROTATE_180 = RigidTransform.from_linear(-1, 0, 0, -1, name="rotate180")
ROTATE_270 = RigidTransform.from_linear(0, -1, 1, 0, name="rotate270")

"""
The eight symmetries of the square (the dihedral group of order 8).
"""
RIGID_SYMMETRIES: tuple[RigidTransform, ...] = (
    IDENTITY,
    MIRROR_HORIZONTAL,
    MIRROR_VERTICAL,
    MIRROR_DIAGONAL,
    MIRROR_ANTIDIAGONAL,
    ROTATE_90,
    ROTATE_180,
    ROTATE_270,
)

def canonical_transform(transform: RigidTransform) -> RigidTransform:
    """
    Returns the named member of `RIGID_SYMMETRIES` equal to the given transform.
    """
    for symmetry in RIGID_SYMMETRIES:
        if symmetry == transform:
            return symmetry
    raise ValueError(f"Not one of the rigid symmetries: {transform!r}")
