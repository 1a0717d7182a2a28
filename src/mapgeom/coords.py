"""Conversion between planar and geographic coordinate structures.

Planar points are ``[x, y]`` sequences where x is longitude and y is
latitude in degrees. Geographic points are :class:`GeoPoint` records.
The conversions are pure relabelings: nothing is projected, clipped,
reordered or deduplicated, and nested structure is kept as is.

Polygons carry at most two rings. Slot 0 is the surface and slot 1 is the
hole; an absent ring is ``None`` and keeps its slot, so a hole without a
surface stays in slot 1.
"""
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence


@dataclass(frozen=True)
class GeoPoint:
    """A location in degrees."""

    longitude: float
    latitude: float


class GeoPolygon(NamedTuple):
    """Surface and optional hole of a geographic polygon."""

    surface: Optional[List[GeoPoint]] = None
    hole: Optional[List[GeoPoint]] = None


def _ring(polygon: Sequence, index: int):
    if index < len(polygon):
        return polygon[index]
    return None


def point_to_geo(point: Sequence[float]) -> GeoPoint:
    """Convert an X/Y point into a geo-point."""
    return GeoPoint(longitude=point[0], latitude=point[1])


def multi_point_to_geo(points: Sequence[Sequence[float]]) -> List[GeoPoint]:
    """Convert a sequence of X/Y points into geo-points."""
    return [point_to_geo(point) for point in points]


def multi_geo_to_point(geo_points: Sequence[GeoPoint]) -> List[List[float]]:
    """Convert a sequence of geo-points into X/Y points."""
    return [[geo_point.longitude, geo_point.latitude] for geo_point in geo_points]


def multi_line_to_geo(multi_line):
    """Convert a multiline in X/Y coordinates into a geo-multiline.

    Parameters
    ----------
    multi_line : sequence of sequence of [x, y]
        Source multiline. Every line is a separate stroke.

    Returns
    -------
    list of list of GeoPoint
        One geo-line per source line, in the same order.
    """
    return [multi_point_to_geo(line) for line in multi_line]


def multi_geo_line_to_multi_line(multi_geo_line):
    """Convert a geo-multiline into a multiline in X/Y coordinates.

    Parameters
    ----------
    multi_geo_line : sequence of sequence of GeoPoint
        Source geo-multiline.

    Returns
    -------
    list of list of [x, y]
        One line per source segment, in the same order.
    """
    multi_line = []
    for segment in multi_geo_line:
        line = []
        for geo_point in segment:
            line.append([geo_point.longitude, geo_point.latitude])
        multi_line.append(line)
    return multi_line


def multi_polygon_to_geo(multi_polygon) -> List[GeoPolygon]:
    """Convert a multipolygon in X/Y coordinates into a geo-multipolygon.

    Parameters
    ----------
    multi_polygon : sequence of polygons
        Each polygon is ``[surface]`` or ``[surface, hole]``, where either
        ring may be ``None`` to mark it absent.

    Returns
    -------
    list of GeoPolygon
        One entry per source polygon. Absent rings stay ``None``.
    """
    multi_geo_polygon = []
    for polygon in multi_polygon:
        surface = _ring(polygon, 0)
        hole = _ring(polygon, 1)
        multi_geo_polygon.append(GeoPolygon(
            surface=multi_point_to_geo(surface) if surface is not None else None,
            hole=multi_point_to_geo(hole) if hole is not None else None,
        ))
    return multi_geo_polygon


def multi_geo_polygon_to_multi_polygon(multi_geo_polygon):
    """Convert a geo-multipolygon into a multipolygon in X/Y coordinates.

    Parameters
    ----------
    multi_geo_polygon : sequence of GeoPolygon
        Source polygons. Plain two-item sequences are accepted as well.

    Returns
    -------
    list of list
        ``[surface]`` when only a surface exists, ``[surface, hole]`` when
        both exist, ``[None, hole]`` for a hole without surface and ``[]``
        when neither ring is present.
    """
    multi_polygon = []
    for geo_polygon in multi_geo_polygon:
        surface = _ring(geo_polygon, 0)
        hole = _ring(geo_polygon, 1)
        polygon = []
        if surface is not None or hole is not None:
            polygon.append(multi_geo_to_point(surface) if surface is not None else None)
        if hole is not None:
            polygon.append(multi_geo_to_point(hole))
        multi_polygon.append(polygon)
    return multi_polygon
