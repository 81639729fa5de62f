import enum
import typing
from functools import cached_property
from polyomino_symmetries.utils.coords import Displacement, Point

class Tile(enum.Enum):
    FILLED = "#"
    EMPTY = "."

    def __bool__(self) -> bool:
        return self is Tile.FILLED

Marker = Tile | bool

class Shape:
    """
    A finite set of filled cells, anywhere on the grid.

    Shapes are stored translation-normalized: the cells are shifted so the smallest `x` and the
    smallest `y` are both 0, then sorted by `(x, y)` with duplicates removed. Two shapes are equal
    iff they have the same normalized cells, so translations are indistinguishable but rotations
    and reflections (generally) are not.

    Construct shapes with `Shape.from_coords`, `Shape.from_grid` or `Shape.empty`. Calling
    `Shape(coords)` directly is the same as `normalize(coords)`.
    """

    def __init__(self, coords: typing.Iterable[Point | tuple[int, int]] = ()):
        points = [Point.of(coord) for coord in coords]
        if not points:
            self._cells: tuple[Point, ...] = ()
            return

        min_x = min(point.x for point in points)
        min_y = min(point.y for point in points)
        shift = Displacement(-min_x, -min_y)

        self._cells = tuple(sorted({point + shift for point in points}))

    @staticmethod
    def empty() -> "Shape":
        return Shape()

    @staticmethod
    def from_coords(coords: typing.Iterable[Point | tuple[int, int]]) -> "Shape":
        """
        Alias for `normalize`.
        """
        return normalize(coords)

    @staticmethod
    def from_grid(rows: typing.Sequence[typing.Sequence[Marker]]) -> "Shape":
        """
        Builds a shape from a rectangular grid of markers. Row `i`, column `j` is the cell
        `Point(x=j, y=i)`; a marker is filled if it is `Tile.FILLED` or `True`.
        """

        width = len(rows[0]) if len(rows) > 0 else 0
        assert all(len(row) == width for row in rows), "All rows must have the same width"

        return normalize(
            Point(j, i)
            for i, row in enumerate(rows)
            for j, marker in enumerate(row)
            if marker
        )

    @property
    def cells(self) -> tuple[Point, ...]:
        return self._cells

    def __iter__(self) -> typing.Iterator[Point]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    @cached_property
    def _cell_set(self) -> frozenset[Point]:
        return frozenset(self._cells)

    def contains(self, point: Point | tuple[int, int]) -> bool:
        return Point.of(point) in self._cell_set

    def __contains__(self, point: object) -> bool:
        if isinstance(point, tuple) and len(point) == 2:
            return self.contains(point)
        return isinstance(point, Point) and self.contains(point)

    def __getitem__(self, point: Point | tuple[int, int]) -> Tile:
        return Tile.FILLED if self.contains(point) else Tile.EMPTY

    @cached_property
    def width(self) -> int:
        return max((cell.x for cell in self._cells), default=-1) + 1

    @cached_property
    def height(self) -> int:
        return max((cell.y for cell in self._cells), default=-1) + 1

    def rows(self) -> list[list[Tile]]:
        """
        The bounding box of the shape as rows of tiles, so that `Shape.from_grid(shape.rows()) == shape`.
        """
        return [
            [self[Point(j, i)] for j in range(self.width)]
            for i in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._cells == other._cells

    def __lt__(self, other: "Shape") -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._cells < other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Shape.from_coords({[(cell.x, cell.y) for cell in self._cells]})"

def normalize(coords: typing.Iterable[Point | tuple[int, int]]) -> Shape:
    """
    Returns the canonical `Shape` occupying the given cells.

    Any finite list of coordinates is accepted, in any order and with repeats. The empty list
    gives the empty shape.
    """
    return Shape(coords)
