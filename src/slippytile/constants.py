"""Physical and projection constants for spherical Web Mercator.

Attributes
----------
EARTH_RADIUS : float
    Equatorial radius of the Earth in meters (WGS 84).
WEB_MERCATOR_EXTENT : float
    Half width (and half height) of the Web Mercator square in meters.
TILE_SIZE : int
    Default edge length of a tile in pixels.
"""
import math

EARTH_RADIUS = 6378137.0
WEB_MERCATOR_EXTENT = math.pi * EARTH_RADIUS
TILE_SIZE = 256
