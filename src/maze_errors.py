class MazeError(Exception):
    """Base class for errors raised by the maze generator."""


class InvalidGeometry(MazeError, ValueError):
    """Geometry string is not of the form WIDTHxHEIGHT with positive integers."""

    def __init__(self, geometry: str):
        super().__init__(f"invalid geometry: {geometry!r} (expected WIDTHxHEIGHT, e.g. 100x100)")
        self.geometry = geometry


class ImageWriteFailure(MazeError, OSError):
    """The raster could not be encoded or written to disk."""

    def __init__(self, path, reason):
        super().__init__(f"could not write image to {path}: {reason}")
        self.path = path
