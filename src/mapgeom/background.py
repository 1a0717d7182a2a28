"""Background polygons covering a geographic bounding box.

Map projections misbehave at the poles and at the antimeridian, and a
single polygon wider than about 90 degrees of longitude cannot be drawn
reliably by some of them. The background of a bounding box is therefore
cut into a row of equal-width slices, each traced as one ring of
``[longitude, latitude]`` points, with boundary extremes pulled inward by
a small epsilon.

Edges of constant latitude are traced at a fixed longitude step so they
bend smoothly once projected. Meridian edges use the coarser latitude step.
"""
import math

from .config import settings
from .utils import vprint

BOUNDARY_EPSILON = 0.0001
MAX_SLICE_DEGREES = 90
EDGE_STEP_DEGREES = 5


class InvalidBoundingBoxError(ValueError):
    pass


def _nudge(north, east, south, west, epsilon):
    if west == -180:
        west = -180 + epsilon
    if south == -90:
        south = -90 + epsilon
    if north == 90:
        north = 90 - epsilon
    if east == 180:
        east = 180 - epsilon
    return north, east, south, west


def _trace_slice(ln, rn, step_lat, north, south, edge_step):
    """Trace one slice between longitudes ln and rn as top, right, bottom and left edges."""
    surface = []

    ll = ln
    while ll <= rn:
        surface.append([ll, north])
        ll = ll + edge_step

    lt = north
    while lt >= south:
        surface.append([rn, lt])
        lt = lt - step_lat

    ll = rn
    while ll >= ln:
        surface.append([ll, south])
        ll = ll - edge_step

    lt = south
    while lt <= north:
        surface.append([ln, lt])
        lt = lt + step_lat

    return surface


def get_background(north: float, east: float, south: float, west: float, *,
                   edge_step: float = None, max_slice: float = None,
                   epsilon: float = None):
    """Return a multipolygon covering the area between the given extremes.

    Parameters
    ----------
    north : float
        Northern latitude in degrees.
    east : float
        Eastern longitude in degrees.
    south : float
        Southern latitude in degrees.
    west : float
        Western longitude in degrees.
    edge_step : float, optional
        Longitude step along the top and bottom edges. If None, uses
        settings ``edge_step`` or 5 degrees.
    max_slice : float, optional
        Maximum slice width and latitude tracing step. If None, uses
        settings ``max_slice_degrees`` or 90 degrees.
    epsilon : float, optional
        Inward nudge applied to extremes lying exactly on a pole or on the
        antimeridian. If None, uses settings ``boundary_epsilon``.

    Returns
    -------
    list
        One ``[surface]`` polygon per slice, ordered west to east.

    Raises
    ------
    InvalidBoundingBoxError
        If an extreme is not finite or the box has no positive extent.
    ValueError
        If ``edge_step`` or ``max_slice`` is not positive.
    """
    edge_step = edge_step if edge_step is not None else settings.get("edge_step", EDGE_STEP_DEGREES)
    max_slice = max_slice if max_slice is not None else settings.get("max_slice_degrees", MAX_SLICE_DEGREES)
    epsilon = epsilon if epsilon is not None else settings.get("boundary_epsilon", BOUNDARY_EPSILON)

    if edge_step <= 0 or max_slice <= 0:
        raise ValueError(
            f"Tracing steps must be positive, got edge_step={edge_step} max_slice={max_slice}")

    if not all(math.isfinite(v) for v in (north, east, south, west)):
        raise InvalidBoundingBoxError(
            f"Non-finite bounding box: N={north} E={east} S={south} W={west}")

    north, east, south, west = _nudge(north, east, south, west, epsilon)

    if east - west <= 0 or north - south <= 0:
        raise InvalidBoundingBoxError(
            f"Bounding box has no extent: N={north} E={east} S={south} W={west}")

    slices = math.ceil((east - west) / max_slice)
    step_long = min(max_slice, (east - west) / slices)
    step_lat = (north - south) / math.ceil((north - south) / max_slice)
    vprint(f"Background steps: {step_long} deg longitude, {step_lat} deg latitude")

    # Slice edges come from the index, the last one is pinned to east
    multi_polygon = []
    for i in range(slices):
        ln = west + i * step_long
        rn = east if i == slices - 1 else west + (i + 1) * step_long
        multi_polygon.append([_trace_slice(ln, rn, step_lat, north, south, edge_step)])

    vprint(f"Background split into {len(multi_polygon)} slices")
    return multi_polygon
