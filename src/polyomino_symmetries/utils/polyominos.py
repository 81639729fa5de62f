import logging
from polyomino_symmetries.utils.coords import Point
from polyomino_symmetries.utils.shapes import Shape
from polyomino_symmetries.utils.transforms import RIGID_SYMMETRIES, RigidTransform, apply_to_shape

logger = logging.getLogger(__name__)

def orientations(representative: Shape) -> set[Shape]:
    """
    Returns every distinct shape obtainable by rotating and reflecting `representative`.

    The size of the result always divides 8: it is 8 for a fully asymmetric shape, 4 for a shape with
    a single axis of symmetry (or only half-turn symmetry), 2 for shapes such as the straight line,
    and 1 for shapes with every symmetry of the square.
    """
    result = {apply_to_shape(transform, representative) for transform in RIGID_SYMMETRIES}
    logger.debug("%d cell shape has %d orientations", len(representative), len(result))
    return result

def stabilizer(shape: Shape) -> list[RigidTransform]:
    """
    Returns the rigid symmetries that map the shape onto itself.
    By the orbit-stabilizer theorem, `len(stabilizer(s)) * len(orientations(s)) == 8`.
    """
    result = [
        transform
        for transform in RIGID_SYMMETRIES
        if apply_to_shape(transform, shape) == shape
    ]
    logger.debug("%r is fixed by %s", shape, [transform.name for transform in result])
    return result

def _pentominos() -> dict[str, Shape]:
    # (row, column) pairs, so each layout reads the same way it prints.
    base = {
        "F": ((0, 1), (0, 2), (1, 0), (1, 1), (2, 1)),
        "I": ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
        "L": ((0, 0), (1, 0), (2, 0), (3, 0), (3, 1)),
        "N": ((0, 0), (0, 1), (1, 1), (1, 2), (1, 3)),
        "P": ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0)),
        "T": ((0, 0), (0, 1), (0, 2), (1, 1), (2, 1)),
        "U": ((0, 0), (0, 2), (1, 0), (1, 1), (1, 2)),
        "V": ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
        "W": ((0, 0), (1, 0), (1, 1), (2, 1), (2, 2)),
        "X": ((0, 1), (1, 0), (1, 1), (1, 2), (2, 1)),
        "Y": ((0, 0), (0, 1), (0, 2), (0, 3), (1, 2)),
        "Z": ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2)),
    }

    return {
        name: Shape.from_coords(Point(j, i) for i, j in cells)
        for name, cells in base.items()
    }

"""
A dictionary mapping pentomino names to one representative shape of that pentomino.
"""
PENTOMINOS = _pentominos()

"""
A dictionary mapping pentomino names to a sorted list of all of the orientations of that pentomino.
"""
PENTOMINO_ORIENTATIONS = { name: sorted(orientations(shape)) for name, shape in PENTOMINOS.items() }
