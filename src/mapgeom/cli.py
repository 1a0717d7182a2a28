"""Command-line interface for mapgeom.

Prints background and circle geometry as GeoJSON features, ready to be
dropped into a map layer.
"""
import json
from typing import Optional

import typer

from . import config, geojson, utils
from .background import InvalidBoundingBoxError, get_background
from .circle import get_circle

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main():
    """Map geometry helpers: background slices and circles as GeoJSON."""


def _setup(env, verbose):
    if env != "DEFAULT":
        config.change_env(env)
    utils.VERBOSE = verbose
    utils.vprint(f"Environment: {env}")


def _emit(obj, output):
    if output is None:
        typer.echo(json.dumps(obj))
    else:
        geojson.write(output, obj)
        utils.vprint(f"Wrote {output}")


@app.command()
def background(
    north: float = typer.Argument(..., help="Northern latitude."),
    east: float = typer.Argument(..., help="Eastern longitude."),
    south: float = typer.Argument(..., help="Southern latitude."),
    west: float = typer.Argument(..., help="Western longitude."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="GeoJSON file to write."),
    env: str = typer.Option("DEFAULT", help="Settings environment."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Background slices covering a bounding box."""
    _setup(env, verbose)
    try:
        multi_polygon = get_background(north, east, south, west)
    except InvalidBoundingBoxError as err:
        raise typer.BadParameter(str(err)) from err
    _emit(geojson.feature(multi_polygon, north=north, east=east,
                          south=south, west=west,
                          slices=len(multi_polygon)), output)


@app.command()
def circle(
    longitude: float = typer.Argument(..., help="Center longitude."),
    latitude: float = typer.Argument(..., help="Center latitude."),
    radius: float = typer.Argument(..., help="Radius in degrees."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="GeoJSON file to write."),
    env: str = typer.Option("DEFAULT", help="Settings environment."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Circle of a given angular radius around a point."""
    _setup(env, verbose)
    try:
        multi_polygon = get_circle(longitude, latitude, radius)
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err
    _emit(geojson.feature(multi_polygon, longitude=longitude,
                          latitude=latitude, radius=radius), output)


if __name__ == "__main__":
    app()
