import argparse
import logging
import sys
from typing import Tuple

from maze_errors import InvalidGeometry, ImageWriteFailure
from maze import CELL_SIZE, generate_image
from visualizer import Visualizer

__version__ = "0.1.0"

DEFAULT_GEOMETRY = "100x100"

logger = logging.getLogger(__name__)


def parse_geometry(geometry: str) -> Tuple[int, int]:
    """Parse WIDTHxHEIGHT into two positive integers."""
    parts = geometry.split('x')
    if len(parts) != 2:
        raise InvalidGeometry(geometry)
    if not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidGeometry(geometry)
    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise InvalidGeometry(geometry)
    return width, height


def _geometry_arg(value: str) -> Tuple[int, int]:
    try:
        return parse_geometry(value)
    except InvalidGeometry as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='maze-background', description='Maze background generator.')
    parser.add_argument('file', metavar='FILE', help='Output image; the format follows the extension')
    parser.add_argument('-g', '--geometry', type=_geometry_arg, default=DEFAULT_GEOMETRY,
                        metavar='WIDTHxHEIGHT', help=f'Geometry of the image to generate (default: {DEFAULT_GEOMETRY})')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible output (default: random)')
    parser.add_argument('--show', action='store_true', help='Display the maze after saving it')
    parser.add_argument('--animate', action='store_true', help='Replay the growth of the maze')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    width, height = args.geometry
    try:
        maze = generate_image(args.file, width, height, CELL_SIZE, seed=args.seed)
    except ImageWriteFailure as e:
        logger.error("%s", e)
        return 1
    logger.info("Wrote %dx%d maze to %s", width, height, args.file)

    if args.show:
        maze.visualize()
    if args.animate:
        Visualizer(maze).animate()
    return 0


if __name__ == "__main__":
    sys.exit(main())
