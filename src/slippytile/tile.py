"""Quad-tree tiles over the Web Mercator square.

A tile is identified by ``(zoom, x, y)`` in the XYZ convention: column ``x``
grows eastwards and row ``y`` grows southwards from the north-west corner.
Coordinates are trusted, nothing here checks that ``x`` and ``y`` fall inside
``[0, 2**zoom)``.
"""
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .bbox import BBox
from .constants import TILE_SIZE, WEB_MERCATOR_EXTENT
from .errors import TileParseError

ZOOM_BITS = 8
COORD_BITS = 32


def _interleave(v: int) -> int:
    """Spread the low 32 bits of ``v`` onto the even bit positions."""
    result = 0
    for i in range(COORD_BITS):
        result |= ((v >> i) & 1) << (i << 1)
    return result


def _parse_uint(text: str, bits: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(text)
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class Tile:
    """A single cell of the zoom ``zoom`` tile grid.

    Parameters
    ----------
    zoom : int
        Quad-tree depth, the grid has ``2**zoom`` cells per axis.
    x : int
        Column, counted from the west edge.
    y : int
        Row, counted from the north edge.
    """

    zoom: int
    x: int
    y: int

    def reversed_y(self) -> int:
        """Row index flipped between XYZ (north-up) and TMS (south-up)."""
        return (1 << self.zoom) - 1 - self.y

    def bounds(self, tile_size: int = TILE_SIZE) -> BBox:
        """Project the tile to Web Mercator meters.

        Parameters
        ----------
        tile_size : int, optional
            Tile edge length in pixels, by default 256.

        Returns
        -------
        BBox
            The footprint of the tile.
        """
        tile_size = float(tile_size)

        total_pixels = tile_size * 2.0 ** self.zoom
        pixel_size = (2.0 * WEB_MERCATOR_EXTENT) / total_pixels

        # math.fma needs Python 3.13, plain multiply-add is used instead
        min_x = self.x * tile_size * pixel_size - WEB_MERCATOR_EXTENT
        max_y = WEB_MERCATOR_EXTENT - self.y * tile_size * pixel_size

        max_x = min_x + tile_size * pixel_size
        min_y = max_y - tile_size * pixel_size

        return BBox(min_x, min_y, max_x, max_y)

    def parent(self) -> Optional["Tile"]:
        """The tile one zoom level up, or None for the zoom 0 tile."""
        if self.zoom == 0:
            return None
        return Tile(self.zoom - 1, self.x >> 1, self.y >> 1)

    def ancestor(self, rel_level: int) -> Optional["Tile"]:
        """The tile ``rel_level`` zoom levels up.

        Returns None when ``rel_level`` exceeds the zoom of this tile.
        """
        tile = self
        for _ in range(rel_level):
            if tile is None:
                break
            tile = tile.parent()
        return tile

    def descendants(self, rel_level: int) -> List["Tile"]:
        """All tiles ``rel_level`` zoom levels down, ``4**rel_level`` of them."""
        tiles = [self]
        for _ in range(rel_level):
            tiles = [child for tile in tiles for child in tile.children()]
        return tiles

    def sector_in_ancestor(self, rel_level: int) -> Tuple[int, int]:
        """Column and row of this tile inside its ``rel_level`` ancestor."""
        mask = (1 << rel_level) - 1
        return (self.x & mask, self.y & mask)

    def children(self) -> Tuple["Tile", "Tile", "Tile", "Tile"]:
        """The four tiles one level down.

        Ordered top-left, top-right, bottom-left, bottom-right, so the index
        of a child is ``sx + 2 * sy`` for its sector ``(sx, sy)``.
        """
        zoom = self.zoom + 1
        x = self.x << 1
        y = self.y << 1
        return (
            Tile(zoom, x, y),
            Tile(zoom, x + 1, y),
            Tile(zoom, x, y + 1),
            Tile(zoom, x + 1, y + 1),
        )

    def children_buffered(self, buffer: int) -> Iterator["Tile"]:
        """Yield the children together with ``buffer`` rings of neighbours.

        The block is ``2 * (buffer + 1)`` tiles wide and high, centered on the
        four children and wrapped around the edges of the child grid. Tiles
        are yielded column by column.
        """
        zoom = self.zoom + 1
        x = self.x << 1
        y = self.y << 1
        size = 1 << zoom
        span = 2 * (buffer + 1)

        for dx in range(span):
            for dy in range(span):
                yield Tile(
                    zoom,
                    (x + dx - buffer) % size,
                    (y + dy - buffer) % size,
                )

    def morton_code(self) -> int:
        """Z-order key of ``(x, y)``, x on the even bits and y on the odd."""
        return _interleave(self.x) | (_interleave(self.y) << 1)

    @staticmethod
    def sort_by_zorder(tiles: List["Tile"]) -> None:
        """Sort ``tiles`` in place along the Z-order curve.

        The zoom level is not part of the key, mixed-zoom lists are ordered
        by their raw ``x`` and ``y`` bits only.
        """
        tiles.sort(key=Tile.morton_code)

    def __str__(self):
        return f"{self.zoom}/{self.x}/{self.y}"

    @classmethod
    def parse(cls, text: str) -> "Tile":
        """Parse a tile from ``"zoom/x/y"``.

        Raises
        ------
        TileParseError
            If the text is not three slash-separated non-negative integers.
        """
        parts = text.split("/")
        if len(parts) != 3:
            raise TileParseError(text)
        try:
            zoom = _parse_uint(parts[0], ZOOM_BITS)
            x = _parse_uint(parts[1], COORD_BITS)
            y = _parse_uint(parts[2], COORD_BITS)
        except ValueError:
            raise TileParseError(text) from None
        return cls(zoom, x, y)

    from_str = parse


def mercator_to_tile_coords(x: float, y: float, zoom: int) -> Tuple[int, int]:
    """Column and row of the zoom ``zoom`` tile containing a Mercator point.

    Parameters
    ----------
    x, y : float
        Web Mercator coordinates in meters.
    zoom : int
        Zoom level.

    Returns
    -------
    tuple of int
        ``(tile_x, tile_y)``, row 0 being the northernmost row.
        Points west or north of the grid clamp to column or row 0.
    """
    scale = float(1 << zoom)
    extent = WEB_MERCATOR_EXTENT
    tile_x = max(0, math.floor((x + extent) / (2.0 * extent) * scale))
    tile_y = max(0, math.floor((1.0 - (y + extent) / (2.0 * extent)) * scale))
    return (tile_x, tile_y)
