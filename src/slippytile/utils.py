"""Projection helpers composing boxes, tiles and tile ranges."""
import math
from typing import Tuple

import numpy as np
from pyproj import Transformer

from .bbox import BBox
from .constants import WEB_MERCATOR_EXTENT
from .tile_iterator import TileIterator

VERBOSE = False


def vprint(text):
    if VERBOSE:
        print(text)


# Web Mercator transformer (lon/lat to x/y meters)
_transformer_to_webmerc = Transformer.from_crs(
    "EPSG:4326", "EPSG:3857", always_xy=True
)


def lonlat_to_webmercator(lons, lats) -> Tuple[np.ndarray, np.ndarray]:
    """Transform longitude/latitude values to Web Mercator coordinates.

    Parameters
    ----------
    lons : float or numpy.ndarray
        Longitude values in degrees.
    lats : float or numpy.ndarray
        Latitude values in degrees.

    Returns
    -------
    tuple of numpy.ndarray
        (x, y) coordinates in Web Mercator meters.
    """
    lons = np.asarray(lons, dtype=np.float64)
    lats = np.asarray(lats, dtype=np.float64)
    x, y = _transformer_to_webmerc.transform(lons, lats)
    return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)


def bbox_covered_tiles(bbox: BBox, zoom: int) -> TileIterator:
    """Return all tiles covering a Web Mercator bounding box.

    Parameters
    ----------
    bbox : BBox
        Area of interest in Web Mercator meters.
    zoom : int
        Zoom level of the returned tiles.

    Returns
    -------
    TileIterator
        Lazy iterator over the smallest tile rectangle covering ``bbox``.
        The first column and row clamp at 0 for boxes reaching past the
        west or north edge.
    """
    tile_size_meters = (WEB_MERCATOR_EXTENT * 2.0) / float(1 << zoom)

    min_tile_x = max(0, math.floor((bbox.min_x + WEB_MERCATOR_EXTENT) / tile_size_meters))
    max_tile_x = math.ceil((bbox.max_x + WEB_MERCATOR_EXTENT) / tile_size_meters) - 1
    min_tile_y = max(0, math.floor((WEB_MERCATOR_EXTENT - bbox.max_y) / tile_size_meters))
    max_tile_y = math.ceil((WEB_MERCATOR_EXTENT - bbox.min_y) / tile_size_meters) - 1

    vprint(f"Zoom {zoom}: x {min_tile_x}..{max_tile_x}, y {min_tile_y}..{max_tile_y}")
    return TileIterator(zoom, min_tile_x, min_tile_y, max_tile_x, max_tile_y)
