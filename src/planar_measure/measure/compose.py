"""
Composition rules.

Combine per-ring or per-member results into one centroid and area:
- Polygons: outer ring minus holes, holes always carry negative weight
- Multi-geometries: area-weighted average, count-weighted when nothing
  has area
- Bounds: direct midpoint/extent formula
"""

import logging
from typing import Iterable

from ..core.errors import EmptyGeometryError
from ..core.geometry import Bound, CentroidArea, Point, Polygon
from .ring import ring_centroid_area

logger = logging.getLogger(__name__)


def polygon_centroid_area(polygon: Polygon) -> CentroidArea:
    """
    Compute the centroid and area of a polygon with holes.

    Each hole's area magnitude is subtracted from the outer ring's area
    magnitude, and its centroid moment from the outer moment, whatever
    the winding of either ring. Holes without vertices are skipped.

    Parameters
    ----------
    polygon : Polygon
        Outer ring and holes.

    Returns
    -------
    CentroidArea
        Area-weighted centroid and the (non-negative) remaining area. When
        the holes cancel the whole outer area, the outer ring's centroid is
        returned with area 0.
    """
    outer_centroid, outer_area = ring_centroid_area(polygon.exterior.coords)
    outer_area = abs(outer_area)

    hole_area = 0.0
    hole_moment_x = 0.0
    hole_moment_y = 0.0
    for hole in polygon.holes:
        # An empty hole has no weight
        if len(hole) == 0:
            continue
        centroid, area = ring_centroid_area(hole.coords)
        area = abs(area)
        hole_area += area
        hole_moment_x += centroid.x * area
        hole_moment_y += centroid.y * area

    total_area = outer_area - hole_area
    if total_area == 0:
        logger.debug("Polygon has zero area after %d holes, using outer centroid",
                     len(polygon.holes))
        return CentroidArea(outer_centroid, 0.0)

    centroid = Point(
        (outer_centroid.x * outer_area - hole_moment_x) / total_area,
        (outer_centroid.y * outer_area - hole_moment_y) / total_area,
    )
    return CentroidArea(centroid, total_area)


def multi_centroid_area(results: Iterable[CentroidArea]) -> CentroidArea:
    """
    Combine the measurements of the members of a multi-geometry.

    Members are weighted by the magnitude of their area. If no member has
    any area, every member centroid counts once instead.

    Parameters
    ----------
    results : iterable of CentroidArea
        One measurement per member.

    Returns
    -------
    CentroidArea
        Combined centroid and total area.
    """
    count = 0
    total_area = 0.0
    moment_x = 0.0
    moment_y = 0.0
    sum_x = 0.0
    sum_y = 0.0
    for centroid, area in results:
        weight = abs(area)
        count += 1
        total_area += weight
        moment_x += centroid.x * weight
        moment_y += centroid.y * weight
        sum_x += centroid.x
        sum_y += centroid.y

    if count == 0:
        raise EmptyGeometryError("Cannot measure an empty multi-geometry")

    if total_area == 0:
        logger.debug("No area among %d members, averaging member centroids", count)
        return CentroidArea(Point(sum_x / count, sum_y / count), 0.0)

    return CentroidArea(Point(moment_x / total_area, moment_y / total_area), total_area)


def bound_centroid_area(bound: Bound) -> CentroidArea:
    """Midpoint and width * height of a bound; exact for degenerate bounds."""
    centroid = Point(
        (bound.min.x + bound.max.x) / 2,
        (bound.min.y + bound.max.y) / 2,
    )
    return CentroidArea(centroid, bound.width * bound.height)
