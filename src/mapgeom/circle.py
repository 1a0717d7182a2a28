"""Circular areas around a geographic point."""
import math

import numpy as np
from pyproj import Geod

from .config import settings

CIRCLE_PRECISION_DEGREES = 6
EARTH_RADIUS = 6371008.8


def get_circle(longitude: float, latitude: float, radius: float, *,
               precision: float = None):
    """Return the coordinates of a circle around a geographic point.

    Parameters
    ----------
    longitude : float
        Center longitude in degrees.
    latitude : float
        Center latitude in degrees.
    radius : float
        Angular radius in degrees.
    precision : float, optional
        Azimuth step between ring points in degrees. If None, uses settings
        ``circle_precision`` or 6 degrees.

    Returns
    -------
    list
        A multipolygon holding one polygon with one closed ring of
        ``[longitude, latitude]`` points.

    Raises
    ------
    ValueError
        If the radius is negative.
    """
    if radius < 0:
        raise ValueError(f"Circle radius must be non-negative, got {radius}")
    precision = precision if precision is not None else settings.get(
        "circle_precision", CIRCLE_PRECISION_DEGREES)
    earth_radius = settings.get("circle_earth_radius", EARTH_RADIUS)

    geod = Geod(a=earth_radius, b=earth_radius)
    azimuths = np.arange(0, 360, precision, dtype=float)
    distance = math.radians(radius) * earth_radius
    lons, lats, _ = geod.fwd(
        np.full(azimuths.shape, longitude, dtype=float),
        np.full(azimuths.shape, latitude, dtype=float),
        azimuths,
        np.full(azimuths.shape, distance, dtype=float),
    )
    ring = np.column_stack([lons, lats]).tolist()
    ring.append(list(ring[0]))
    return [[ring]]
