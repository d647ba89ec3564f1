import logging
import random
from enum import Enum, IntEnum
from typing import List, NamedTuple, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from raster import Surface, PATH_COLOR, WALL_COLOR

logger = logging.getLogger(__name__)

CELL_SIZE = 4


class Coord(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


class CellKind(IntEnum):
    UNDEFINED = 0
    WALL = 1
    PATH = 2


KIND_COLORS = {
    CellKind.PATH: PATH_COLOR,
    CellKind.WALL: WALL_COLOR,
}


class RandomSource:
    """Uniform sampling of frontier indices and directions."""

    def __init__(self, seed: int = None):
        self._rng = random.Random(seed)

    def uniform_index(self, n: int) -> int:
        return self._rng.randrange(n)

    def uniform_direction(self) -> Direction:
        return self._rng.choice(DIRECTIONS)


def pop_random(frontier: List[Coord], rng) -> Coord:
    """Swap-remove a uniformly chosen element. Order is not preserved."""
    i = rng.uniform_index(len(frontier))
    frontier[i], frontier[-1] = frontier[-1], frontier[i]
    return frontier.pop()


class Maze:
    def __init__(self, width: int, height: int, cell_size: int = CELL_SIZE,
                 seed: int = None, rng=None):
        """
        Maze generator over a width x height pixel surface.
        Each cell covers a cell_size x cell_size block; pixels on the right and
        bottom edges that don't make up a whole cell are painted as wall.
        rng, when given, replaces the seeded RandomSource.
        """
        if cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {cell_size}")

        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.grid_width = width // cell_size
        self.grid_height = height // cell_size

        self.rng = rng if rng is not None else RandomSource(seed)
        self.surface = Surface(width, height)
        self.cells = np.full((self.grid_height, self.grid_width), CellKind.UNDEFINED, dtype=np.uint8)

        self.frontier: List[Coord] = []
        # Cells in the order they became path, and the (wall, cell) pairs carved
        self.history: List[Coord] = []
        self.passages: List[Tuple[Coord, Coord]] = []
        self.iterations = 0

        self._draw_boundary()

    def _draw_boundary(self):
        if self.width > self.grid_width * self.cell_size:
            self.surface.fill_columns(self.grid_width * self.cell_size, WALL_COLOR)
        if self.height > self.grid_height * self.cell_size:
            self.surface.fill_rows(self.grid_height * self.cell_size, WALL_COLOR)

    def in_bounds(self, c: Coord) -> bool:
        return 0 <= c.x < self.grid_width and 0 <= c.y < self.grid_height

    def cell_kind(self, c: Coord) -> CellKind:
        if not self.in_bounds(c):
            return CellKind.UNDEFINED
        return CellKind(int(self.cells[c.y, c.x]))

    def paint_cell(self, c: Coord, kind: CellKind):
        """Set the state of an in-bounds cell and fill its block with the matching color."""
        self.cells[c.y, c.x] = kind
        self.surface.fill_block(c.x * self.cell_size, c.y * self.cell_size,
                                self.cell_size, KIND_COLORS[kind])

    def neighbor(self, c: Coord, direction: Direction) -> Optional[Coord]:
        dx, dy = direction.value
        n = Coord(c.x + dx, c.y + dy)
        if not self.in_bounds(n):
            return None
        return n

    def _mark_path(self, c: Coord):
        self.paint_cell(c, CellKind.PATH)
        self.history.append(c)

    def add_walls_around(self, c: Coord):
        """Turn the undefined neighbors of c into walls and push them on the frontier."""
        for d in DIRECTIONS:
            w = self.neighbor(c, d)
            if w is not None and self.cell_kind(w) is CellKind.UNDEFINED:
                self.paint_cell(w, CellKind.WALL)
                self.frontier.append(w)

    def randomized_prim(self) -> Surface:
        """
        Grow the maze from (0, 0) with a randomized version of Prim's algorithm.

        Start with the start cell as path and its neighbors as frontier walls.
        While the frontier isn't empty, take a random wall and a random
        direction. If the cell in that direction isn't in the maze yet, its
        undefined neighbors join the frontier and both it and the wall become
        path. Otherwise the wall is dropped and stays a wall.

        Edges near the start have a lower effective weight than in classical
        Prim's, which gives long corridors radiating from the origin.
        """
        if self.grid_width == 0 or self.grid_height == 0:
            logger.debug("Empty %dx%d grid, nothing to generate", self.grid_width, self.grid_height)
            return self.surface

        logger.debug("Generating %dx%d cell maze (cell size %d)",
                     self.grid_width, self.grid_height, self.cell_size)

        start = Coord(0, 0)
        self._mark_path(start)
        self.add_walls_around(start)

        while self.frontier:
            wall = pop_random(self.frontier, self.rng)
            self.iterations += 1

            cell = self.neighbor(wall, self.rng.uniform_direction())
            if cell is None:
                continue
            if self.cell_kind(cell) is CellKind.UNDEFINED:
                self.add_walls_around(cell)
                self._mark_path(cell)
                self._mark_path(wall)
                self.passages.append((wall, cell))

        logger.debug("Done after %d iterations, %d path cells",
                     self.iterations, len(self.history))
        return self.surface

    def save(self, path):
        self.surface.save(path)

    def visualize(self, save_path: str = None):
        """Show the rendered maze."""
        plt.figure(figsize=(10, 10))
        plt.imshow(self.surface.pixels, interpolation='nearest')
        plt.grid(False)
        plt.axis('off')
        plt.title(f"Prim's Maze ({self.grid_width}x{self.grid_height})")

        if save_path:
            plt.savefig(save_path, bbox_inches='tight', dpi=300)
        plt.show()


def generate_image(path, width: int, height: int, cell_size: int = CELL_SIZE, seed: int = None) -> Maze:
    maze = Maze(width, height, cell_size, seed=seed)
    maze.randomized_prim()
    maze.save(path)
    return maze
