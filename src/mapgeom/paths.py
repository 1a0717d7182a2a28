"""Matplotlib path export.

Renderers built on matplotlib take a single compound
:class:`matplotlib.path.Path`. Every ring becomes its own MOVETO ...
CLOSEPOLY run so slices and holes stay separate subpaths.
"""
import numpy as np
from matplotlib.path import Path


def multipolygon_to_path(multi_polygon) -> Path:
    """Build a compound path from a planar multipolygon.

    Parameters
    ----------
    multi_polygon : sequence of polygons
        Polygons as returned by ``get_background`` or ``get_circle``.
        Absent (``None``) and empty rings are skipped.

    Returns
    -------
    matplotlib.path.Path
        Path with one closed subpath per ring.
    """
    vertices = []
    codes = []
    for polygon in multi_polygon:
        for ring in polygon:
            if not ring:
                continue
            vertices.extend(ring)
            # CLOSEPOLY ignores its vertex, repeat the first one
            vertices.append(ring[0])
            codes.append(Path.MOVETO)
            codes.extend([Path.LINETO] * (len(ring) - 1))
            codes.append(Path.CLOSEPOLY)

    if not vertices:
        return Path(np.empty((0, 2)), [])
    return Path(np.asarray(vertices, dtype=float), codes)
