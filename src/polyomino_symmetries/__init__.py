import argparse
import logging
from rich.console import Console
from rich.logging import RichHandler

from polyomino_symmetries.describe_pentominoes import main as describe_pentominoes_main
from polyomino_symmetries.utils.polyominos import PENTOMINOS

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyomino-symmetries",
        description="Enumerate the distinct orientations of polyomino pieces",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command")

    describe = commands.add_parser(
        "describe-pentominoes",
        help="Print every distinct orientation of the given pentominos (all of them by default)",
    )
    describe.add_argument("names", nargs="*", metavar="NAME", help="Pentomino letters, e.g. F X")
    describe.add_argument(
        "--verbose", "-v", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging"
    )

    return parser

def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True))],
    )
    # Applies even when the root logger was already configured.
    logging.getLogger(__name__).setLevel(logging.DEBUG if args.verbose else logging.INFO)

    match args.command:
        case "describe-pentominoes":
            names = [name.upper() for name in args.names]
            unknown = [name for name in names if name not in PENTOMINOS]
            if unknown:
                parser.error(
                    f"unknown pentomino(s): {', '.join(unknown)} "
                    f"(choose from {', '.join(PENTOMINOS.keys())})"
                )
            describe_pentominoes_main(names)
        case _:
            parser.print_help()


if __name__ == "__main__":
    main()
