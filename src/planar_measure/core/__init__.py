"""
Core geometry types and errors.
"""

from .errors import (
    CentroidAreaError,
    UnsupportedGeometryError,
    EmptyGeometryError,
)
from .geometry import (
    EPS,
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

__all__ = [
    'CentroidAreaError',
    'UnsupportedGeometryError',
    'EmptyGeometryError',
    'EPS',
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
]
