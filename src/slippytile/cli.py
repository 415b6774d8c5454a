"""Command-line interface for slippytile.

Thin wrapper around the library for inspecting tiles and tile ranges from a
shell, built on Typer.
"""
from typing import Optional

import typer

from . import config, utils
from .bbox import BBox
from .errors import BBoxParseError, TileParseError
from .tile import Tile, mercator_to_tile_coords
from .utils import bbox_covered_tiles, lonlat_to_webmercator

app = typer.Typer(no_args_is_help=True)


def _tile_arg(text: str) -> Tile:
    try:
        return Tile.parse(text)
    except TileParseError as err:
        raise typer.BadParameter(f"{err}: {text!r}, expected ZOOM/X/Y")


def _bbox_arg(text: str) -> BBox:
    try:
        return BBox.parse(text)
    except BBoxParseError as err:
        raise typer.BadParameter(f"{err}: {text!r}, expected MIN_X,MIN_Y,MAX_X,MAX_Y")


@app.callback()
def main(
    env: str = typer.Option("DEFAULT", help="Settings environment to use."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print diagnostics."),
):
    """Slippy map tile geometry: bounds, covering tiles and pyramids
    on the Web Mercator grid."""
    if env != "DEFAULT":
        config.change_env(env)
    utils.VERBOSE = verbose or bool(config.get("verbose"))
    utils.vprint(f"Environment: {env}")


@app.command()
def bounds(
    tile: str = typer.Argument(..., help="Tile as ZOOM/X/Y."),
    tile_size: Optional[int] = typer.Option(None, help="Tile size in pixels."),
):
    """Print the Web Mercator bounding box of a tile."""
    tile = _tile_arg(tile)
    if tile_size is None:
        tile_size = int(config.get("tile_size"))
    typer.echo(str(tile.bounds(tile_size)))


@app.command()
def covered(
    bbox: str = typer.Argument(..., help="Box as MIN_X,MIN_Y,MAX_X,MAX_Y in meters."),
    zoom: Optional[int] = typer.Option(None, help="Zoom level."),
    pyramid: bool = typer.Option(False, help="Include all ancestor tiles."),
):
    """Print the tiles covering a Web Mercator bounding box."""
    bbox = _bbox_arg(bbox)
    if zoom is None:
        zoom = int(config.get("zoom"))
    tiles = bbox_covered_tiles(bbox, zoom)
    for tile in (tiles.pyramid() if pyramid else tiles):
        typer.echo(str(tile))


@app.command()
def children(
    tile: str = typer.Argument(..., help="Tile as ZOOM/X/Y."),
    buffer: int = typer.Option(0, min=0, help="Rings of neighbouring tiles to add."),
):
    """Print the children of a tile, optionally with a buffer."""
    tile = _tile_arg(tile)
    if buffer:
        tiles = tile.children_buffered(buffer)
    else:
        tiles = tile.children()
    for child in tiles:
        typer.echo(str(child))


@app.command()
def parent(
    tile: str = typer.Argument(..., help="Tile as ZOOM/X/Y."),
    levels: int = typer.Option(1, min=0, help="Number of zoom levels to go up."),
):
    """Print the ancestor of a tile."""
    ancestor = _tile_arg(tile).ancestor(levels)
    if ancestor is None:
        typer.echo(f"{tile} has no ancestor {levels} levels up", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(ancestor))


@app.command("tile")
def lonlat_tile(
    lon: float = typer.Argument(..., help="Longitude in degrees."),
    lat: float = typer.Argument(..., help="Latitude in degrees."),
    zoom: Optional[int] = typer.Option(None, help="Zoom level."),
):
    """Print the tile containing a longitude/latitude point."""
    if zoom is None:
        zoom = int(config.get("zoom"))
    x, y = lonlat_to_webmercator(lon, lat)
    utils.vprint(f"Web Mercator: {float(x)}, {float(y)}")
    tile_x, tile_y = mercator_to_tile_coords(float(x), float(y), zoom)
    typer.echo(str(Tile(zoom, tile_x, tile_y)))
