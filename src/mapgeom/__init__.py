"""Geometry helpers for map rendering.

Conversions between planar ``[x, y]`` and geographic point structures, and
synthesis of circle and background areas in longitude/latitude degrees.
"""

from . import config
from .coords import (
    GeoPoint,
    GeoPolygon,
    point_to_geo,
    multi_point_to_geo,
    multi_geo_to_point,
    multi_line_to_geo,
    multi_geo_line_to_multi_line,
    multi_polygon_to_geo,
    multi_geo_polygon_to_multi_polygon,
)
from .background import InvalidBoundingBoxError, get_background
from .circle import get_circle

__all__ = [
    "GeoPoint",
    "GeoPolygon",
    "InvalidBoundingBoxError",
    "point_to_geo",
    "multi_point_to_geo",
    "multi_geo_to_point",
    "multi_line_to_geo",
    "multi_geo_line_to_multi_line",
    "multi_polygon_to_geo",
    "multi_geo_polygon_to_multi_polygon",
    "get_circle",
    "get_background",
]
