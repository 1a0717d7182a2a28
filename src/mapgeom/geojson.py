"""GeoJSON export of planar multipolygons and multilines.

Background slices and circles are traced clockwise. On export, rings are
reoriented to the RFC 7946 winding: exteriors counter-clockwise, holes
clockwise.
"""
import json
import pathlib


def _closed(ring):
    ring = [list(point) for point in ring]
    if ring and ring[0] != ring[-1]:
        ring.append(list(ring[0]))
    return ring


def _signed_area(ring):
    """Shoelace area, positive for counter-clockwise rings."""
    return sum(x0 * y1 - x1 * y0
               for (x0, y0), (x1, y1) in zip(ring, ring[1:])) / 2


def _oriented(ring, counter_clockwise):
    area = _signed_area(ring)
    if area and (area > 0) != counter_clockwise:
        ring.reverse()
    return ring


def multipolygon_geometry(multi_polygon):
    """Create a GeoJSON MultiPolygon geometry.

    Absent rings (``None``) are dropped since GeoJSON polygons have no
    empty slots, and open rings are closed. The first ring kept for a
    polygon is its exterior.
    """
    coordinates = []
    for polygon in multi_polygon:
        rings = [_closed(ring) for ring in polygon if ring is not None]
        rings = [_oriented(ring, i == 0) for i, ring in enumerate(rings)]
        if rings:
            coordinates.append(rings)
    return {"type": "MultiPolygon", "coordinates": coordinates}


def multiline_geometry(multi_line):
    """Create a GeoJSON MultiLineString geometry."""
    return {
        "type": "MultiLineString",
        "coordinates": [[list(point) for point in line] for line in multi_line],
    }


def feature(geometry, **properties):
    """Wrap a geometry (or a planar multipolygon) in a GeoJSON Feature."""
    if not isinstance(geometry, dict):
        geometry = multipolygon_geometry(geometry)
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": geometry,
    }


def feature_collection(features):
    return {
        "type": "FeatureCollection",
        "features": list(features),
    }


def write(path, obj):
    """Save a GeoJSON object to file.

    Parameters
    ----------
    path : str or pathlib.Path
        Output file. Parent directories are created when missing.
    obj : dict
        GeoJSON geometry, feature or feature collection.
    """
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(obj, f, indent=2)
