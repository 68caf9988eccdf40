"""
Ring Accumulator

Signed area and centroid of a closed ring via the shoelace formula, computed
in coordinates translated to the ring's first vertex. Summing products of
absolute coordinates loses most of the significant digits when the ring sits
far from the origin (1e8, 1e15) relative to its own extent; translated
products stay proportional to the ring's size.
"""

import logging

import numpy as np

from ..core.errors import EmptyGeometryError
from ..core.geometry import CentroidArea, Point

logger = logging.getLogger(__name__)


def vertex_average(coords: np.ndarray) -> Point:
    """
    Unweighted mean of a set of coordinates.

    Parameters
    ----------
    coords : np.ndarray
        Coordinates of shape (N, 2).

    Returns
    -------
    Point
        Arithmetic mean of the coordinates.
    """
    if len(coords) == 0:
        raise EmptyGeometryError("Cannot average an empty coordinate set")

    mean = coords.mean(axis=0)
    return Point(mean[0], mean[1])


def _effective_length(coords: np.ndarray) -> int:
    """Number of vertices once a repeated closing vertex is dropped."""
    n = len(coords)
    if n > 1 and coords[0, 0] == coords[n - 1, 0] and coords[0, 1] == coords[n - 1, 1]:
        return n - 1
    return n


def _distinct_average(coords: np.ndarray, n: int, ref_x: float, ref_y: float) -> Point:
    """
    Mean of the distinct vertices among the first n, in the translated frame.

    Only reached for zero-area rings. Deduplication holds an O(n) copy of the
    translated vertices, unlike the running sums of the regular path.
    """
    mean = np.unique(coords[:n] - (ref_x, ref_y), axis=0).mean(axis=0)
    return Point(mean[0] + ref_x, mean[1] + ref_y)


def ring_centroid_area(coords: np.ndarray) -> CentroidArea:
    """
    Compute the signed area and centroid of a ring.

    The vertex sequence is treated as cyclic, so an explicit closing vertex
    and an implicit one give identical results. Counter-clockwise rings have
    positive area, clockwise rings negative area. Self-intersecting rings are
    not detected.

    Parameters
    ----------
    coords : np.ndarray
        Ring vertices of shape (N, 2).

    Returns
    -------
    CentroidArea
        Centroid and signed area. Rings with fewer than three effective
        vertices or zero signed area return a vertex average and area 0.
    """
    n = _effective_length(coords)
    if n == 0:
        raise EmptyGeometryError("Cannot measure an empty ring")

    if n < 3:
        logger.debug("Ring has %d effective vertices, averaging vertices", n)
        return CentroidArea(vertex_average(coords[:n]), 0.0)

    ref_x = coords[0, 0]
    ref_y = coords[0, 1]

    area_sum = 0.0
    cx_sum = 0.0
    cy_sum = 0.0
    for i in range(n):
        j = (i + 1) % n
        xi = coords[i, 0] - ref_x
        yi = coords[i, 1] - ref_y
        xj = coords[j, 0] - ref_x
        yj = coords[j, 1] - ref_y

        cross = xi * yj - xj * yi
        area_sum += cross
        cx_sum += (xi + xj) * cross
        cy_sum += (yi + yj) * cross

    if area_sum == 0:
        logger.debug("Ring of %d vertices has zero area, averaging distinct vertices", n)
        return CentroidArea(_distinct_average(coords, n, ref_x, ref_y), 0.0)

    centroid = Point(
        cx_sum / (3 * area_sum) + ref_x,
        cy_sum / (3 * area_sum) + ref_y,
    )
    return CentroidArea(centroid, float(area_sum / 2))
