import logging
import typing
import rich
from polyomino_symmetries.utils.polyominos import PENTOMINO_ORIENTATIONS, PENTOMINOS, stabilizer
from polyomino_symmetries.utils.shapes import Shape, Tile

logger = logging.getLogger(__name__)

PENTOMINO_COLORS = {
    "F": "red",
    "I": "green",
    "L": "yellow",
    "N": "blue",
    "P": "magenta",
    "T": "cyan",
    "U": "slate_blue1",
    "V": "cyan2",
    "W": "medium_purple1",
    "X": "honeydew2",
    "Y": "magenta3",
    "Z": "dark_orange3"
}

def render(shape: Shape, color: str | None = None) -> list[str]:
    """
    Renders a shape as lines of text, one character per cell (`#` filled, `.` empty).
    If a color is given, filled cells are wrapped in `rich` markup.
    """

    def cell(tile: Tile) -> str:
        if tile is Tile.FILLED and color is not None:
            return f"[{color}]{tile.value}[/{color}]"
        return tile.value

    return ["".join(cell(tile) for tile in row) for row in shape.rows()]

def describe(name: str) -> None:
    shapes = PENTOMINO_ORIENTATIONS[name]
    color = PENTOMINO_COLORS[name]
    symmetries = [transform.name for transform in stabilizer(PENTOMINOS[name])]

    logger.debug("%s has %d orientations and is fixed by %s", name, len(shapes), ", ".join(symmetries))

    rich.print("================================")
    plural = "" if len(shapes) == 1 else "s"
    rich.print(f" [bold {color}]{name}[/bold {color}] has {len(shapes)} distinct orientation{plural}")
    for i, shape in enumerate(shapes):
        rich.print(f"{i + 1}.")
        for line in render(shape, color):
            rich.print(line)

def main(names: typing.Sequence[str] = ()):
    for name in names or PENTOMINOS.keys():
        describe(name)

if __name__ == "__main__":
    main()
