"""
Integer points and displacements on the grid.

The y axis points downwards, so row `i` of a printed grid has `y == i`.
"""

from dataclasses import dataclass

@dataclass(frozen=True, order=True)
class Displacement:
    x: int
    y: int

    @staticmethod
    def zero() -> "Displacement":
        return Displacement(0, 0)

    def __add__(self, other: "Displacement") -> "Displacement":
        if not isinstance(other, Displacement):
            return NotImplemented
        return Displacement(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Displacement") -> "Displacement":
        if not isinstance(other, Displacement):
            return NotImplemented
        return Displacement(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Displacement":
        return Displacement(-self.x, -self.y)

@dataclass(frozen=True, order=True)
class Point:
    """
    A cell position. Points are ordered by `x` first, then `y`.
    """
    x: int
    y: int

    @staticmethod
    def origin() -> "Point":
        return Point(0, 0)

    @staticmethod
    def of(value: "Point | tuple[int, int]") -> "Point":
        """
        Accepts either a `Point` or a plain `(x, y)` pair.
        """
        return value if isinstance(value, Point) else Point(*value)

    def __add__(self, other: Displacement) -> "Point":
        if not isinstance(other, Displacement):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        # Point - Point is the displacement between them, Point - Displacement moves the point.
        if isinstance(other, Point):
            return Displacement(self.x - other.x, self.y - other.y)
        if isinstance(other, Displacement):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented
