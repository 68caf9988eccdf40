"""
Planar Measure - centroid and area of planar geometries.

This package computes the centroid (center of mass of a uniform lamina)
and the signed area of shapes in flat Cartesian coordinates:
- Points, point collections and open paths (zero area)
- Closed rings, with area sign following winding order
- Polygons with holes, multi-polygons and mixed collections
- Axis-aligned bounds

Ring sums are taken relative to the ring's first vertex, so results stay
accurate for coordinates far from the origin.

Main Functions
--------------
centroid_area : Centroid and area of any supported geometry
area : Area only
centroid : Centroid only
from_shapely : Convert a Shapely geometry to a native variant

Example
-------
>>> from planar_measure import Ring, centroid_area

>>> square = Ring([(0, 0), (1, 0), (1, 1), (0, 1)])
>>> centroid, area = centroid_area(square)
>>> tuple(centroid), area
((0.5, 0.5), 1.0)
"""

import logging

from .core.errors import CentroidAreaError, UnsupportedGeometryError, EmptyGeometryError
from .core.geometry import (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Ring,
    Polygon,
    MultiPolygon,
    Collection,
    Bound,
    Geometry,
    CentroidArea,
    as_coords,
    from_shapely,
)
from .measure.centroid_area import centroid_area, area, centroid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Measurement
    'centroid_area',
    'area',
    'centroid',
    # Geometry variants
    'Point',
    'MultiPoint',
    'LineString',
    'MultiLineString',
    'Ring',
    'Polygon',
    'MultiPolygon',
    'Collection',
    'Bound',
    'Geometry',
    'CentroidArea',
    'as_coords',
    'from_shapely',
    # Errors
    'CentroidAreaError',
    'UnsupportedGeometryError',
    'EmptyGeometryError',
]
