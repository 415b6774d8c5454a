"""Geometry of XYZ and TMS slippy map tiles on the Web Mercator grid.

This package provides tile coordinate conversions, tile hierarchy
navigation and lazy enumeration of tile ranges and pyramids.
"""

from . import config
from .bbox import BBox
from .constants import EARTH_RADIUS, TILE_SIZE, WEB_MERCATOR_EXTENT
from .errors import (BBoxFieldCountError, BBoxNumberError, BBoxParseError,
                     SlippyTileError, TileParseError)
from .tile import Tile, mercator_to_tile_coords
from .tile_iterator import TileIterator
from .utils import bbox_covered_tiles, lonlat_to_webmercator

__all__ = [
    "BBox",
    "BBoxFieldCountError",
    "BBoxNumberError",
    "BBoxParseError",
    "EARTH_RADIUS",
    "SlippyTileError",
    "TILE_SIZE",
    "Tile",
    "TileIterator",
    "TileParseError",
    "WEB_MERCATOR_EXTENT",
    "bbox_covered_tiles",
    "config",
    "lonlat_to_webmercator",
    "mercator_to_tile_coords",
]
