import numpy as np
from PIL import Image
from typing import Tuple

from maze_errors import ImageWriteFailure

Color = Tuple[int, int, int]

# Solarized base3 / base02
PATH_COLOR: Color = (253, 246, 227)
WALL_COLOR: Color = (7, 54, 66)
BLANK_COLOR: Color = (0, 0, 0)


class Surface:
    def __init__(self, width: int, height: int):
        """
        RGB raster of width x height pixels, initialized to black.
        Pixels are stored row-major as a (height, width, 3) uint8 array.
        """
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    def put_pixel(self, x: int, y: int, color: Color):
        self.pixels[y, x] = color

    def fill_block(self, x: int, y: int, size: int, color: Color):
        """Fill the size x size square whose top-left pixel is (x, y)."""
        self.pixels[y:y + size, x:x + size] = color

    def fill_columns(self, start: int, color: Color):
        self.pixels[:, start:] = color

    def fill_rows(self, start: int, color: Color):
        self.pixels[start:, :] = color

    def save(self, path):
        """Encode the surface in the format implied by the file extension."""
        try:
            Image.fromarray(self.pixels).save(path)
        except (OSError, ValueError, KeyError) as e:
            raise ImageWriteFailure(path, e) from e
