"""Lazy enumeration of rectangular tile ranges."""
from typing import Iterator

from .tile import Tile


class TileIterator:
    """Iterate over all tiles of a rectangle at one zoom level.

    Tiles are produced row by row: every column of row ``min_y``, then every
    column of the next row, up to and including ``max_y``. The iterator is
    single pass; once exhausted it stays exhausted.

    Parameters
    ----------
    zoom : int
        Zoom level of the produced tiles.
    min_x, min_y : int
        First column and row (inclusive).
    max_x, max_y : int
        Last column and row (inclusive).
    """

    def __init__(self, zoom: int, min_x: int, min_y: int, max_x: int, max_y: int):
        self.zoom = zoom
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y
        self.x = min_x
        self.y = min_y
        self.done = min_x > max_x or min_y > max_y

    @classmethod
    def from_ranges(cls, zoom: int, xs: range, ys: range) -> "TileIterator":
        """Build the iterator from two unit-step ``range`` objects."""
        if xs.step != 1 or ys.step != 1:
            raise ValueError("Tile ranges must have a step of 1")
        return cls(zoom, xs.start, ys.start, xs.stop - 1, ys.stop - 1)

    def __iter__(self):
        return self

    def __next__(self) -> Tile:
        if self.done:
            raise StopIteration

        tile = Tile(self.zoom, self.x, self.y)

        self.x += 1
        if self.x > self.max_x:
            self.x = self.min_x
            self.y += 1
            if self.y > self.max_y:
                self.done = True

        return tile

    def pyramid(self) -> Iterator[Tile]:
        """Yield every remaining tile followed by its ancestors up to zoom 0.

        A tile shared by several chains is only yielded the first time it is
        met.
        """
        seen = set()
        for base in self:
            tile = base
            while tile is not None:
                if tile not in seen:
                    seen.add(tile)
                    yield tile
                tile = tile.parent()

    def __repr__(self):
        return (f"TileIterator(zoom={self.zoom}, x={self.min_x}..{self.max_x}, "
                f"y={self.min_y}..{self.max_y})")
