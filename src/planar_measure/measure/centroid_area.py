"""
Shape dispatcher.

Routes each supported geometry variant to its centroid/area rule. Shapely
geometries are converted to the native variants first. Anything outside the
supported set is rejected rather than measured with a guessed formula.
"""

from shapely.geometry.base import BaseGeometry

from ..core.errors import UnsupportedGeometryError
from ..core.geometry import (
    Bound,
    CentroidArea,
    Collection,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
    as_coords,
    from_shapely,
)
from .compose import bound_centroid_area, multi_centroid_area, polygon_centroid_area
from .ring import ring_centroid_area, vertex_average


def centroid_area(geometry: Geometry) -> CentroidArea:
    """
    Compute the centroid and area of a planar geometry.

    Parameters
    ----------
    geometry : Geometry or shapely BaseGeometry
        Point, MultiPoint, LineString, MultiLineString, Ring, Polygon,
        MultiPolygon, Collection or Bound.

    Returns
    -------
    CentroidArea
        Centroid and area. Rings keep the sign of their winding; points
        and lines have area 0.

    Raises
    ------
    UnsupportedGeometryError
        If the geometry is not a supported variant.
    EmptyGeometryError
        If the geometry has nothing to average.
    """
    if isinstance(geometry, BaseGeometry):
        geometry = from_shapely(geometry)

    if isinstance(geometry, Point):
        return CentroidArea(geometry, 0.0)
    if isinstance(geometry, (MultiPoint, LineString)):
        return CentroidArea(vertex_average(geometry.coords), 0.0)
    if isinstance(geometry, MultiLineString):
        coords = as_coords([xy for line in geometry.lines for xy in line.coords])
        return CentroidArea(vertex_average(coords), 0.0)
    if isinstance(geometry, Ring):
        return ring_centroid_area(geometry.coords)
    if isinstance(geometry, Polygon):
        return polygon_centroid_area(geometry)
    if isinstance(geometry, MultiPolygon):
        return multi_centroid_area(polygon_centroid_area(p) for p in geometry.polygons)
    if isinstance(geometry, Collection):
        return multi_centroid_area(centroid_area(g) for g in geometry.geometries)
    if isinstance(geometry, Bound):
        return bound_centroid_area(geometry)

    raise UnsupportedGeometryError(geometry)


def area(geometry: Geometry) -> float:
    """Area of a planar geometry, see centroid_area."""
    return centroid_area(geometry).area


def centroid(geometry: Geometry) -> Point:
    """Centroid of a planar geometry, see centroid_area."""
    return centroid_area(geometry).centroid
