"""
Planar geometry variants measured by this package.

Contains:
- Immutable shape variants (Point, MultiPoint, LineString, MultiLineString,
  Ring, Polygon, MultiPolygon, Collection, Bound)
- The CentroidArea result pair
- Coordinate coercion
- Shapely/native conversions
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple, Union

import numpy as np
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString as ShapelyLineString,
    MultiLineString as ShapelyMultiLineString,
    MultiPoint as ShapelyMultiPoint,
    MultiPolygon as ShapelyMultiPolygon,
    Point as ShapelyPoint,
    Polygon as ShapelyPolygon,
)
from shapely.geometry.base import BaseGeometry

from .errors import EmptyGeometryError, UnsupportedGeometryError


# Numerical tolerance for floating point comparisons
EPS = 1e-10


def as_coords(values) -> np.ndarray:
    """
    Coerce an array-like of (x, y) pairs to a read-only float64 array.

    Parameters
    ----------
    values : array_like
        Sequence of coordinate pairs, shape (N, 2). An empty sequence is
        accepted and yields shape (0, 2).

    Returns
    -------
    np.ndarray
        Read-only copy of shape (N, 2).
    """
    coords = np.array(values, dtype=np.float64)
    if coords.size == 0:
        coords = coords.reshape(0, 2)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected coordinates of shape (N, 2), got {coords.shape}")
    coords.flags.writeable = False
    return coords


@dataclass(frozen=True)
class Point:
    """A single coordinate. Centroid is itself, area is zero."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True, eq=False)
class MultiPoint:
    """
    Ordered collection of points, duplicates allowed.

    Attributes
    ----------
    coords : np.ndarray
        Point coordinates of shape (N, 2).
    """

    coords: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, 'coords', as_coords(self.coords))

    def __len__(self) -> int:
        return len(self.coords)


@dataclass(frozen=True, eq=False)
class LineString:
    """Open path through its vertices. Has no area."""

    coords: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, 'coords', as_coords(self.coords))

    def __len__(self) -> int:
        return len(self.coords)


@dataclass(frozen=True, eq=False)
class MultiLineString:
    lines: Tuple[LineString, ...]

    def __post_init__(self):
        lines = tuple(
            line if isinstance(line, LineString) else LineString(line)
            for line in self.lines
        )
        object.__setattr__(self, 'lines', lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True, eq=False)
class Ring:
    """
    Closed polygonal boundary.

    The last vertex may repeat the first (explicit closure) or be omitted
    (implicit closure); both measure identically. Counter-clockwise rings
    have positive area, clockwise rings negative area.

    Attributes
    ----------
    coords : np.ndarray
        Ring vertices of shape (N, 2).
    """

    coords: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, 'coords', as_coords(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def reversed(self) -> 'Ring':
        """Return the same ring traversed in the opposite direction."""
        return Ring(self.coords[::-1])


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Outer ring plus zero or more holes.

    Winding of the holes is not required to oppose the outer ring.

    Attributes
    ----------
    exterior : Ring
        Outer boundary.
    holes : tuple of Ring
        Interior boundaries.
    """

    exterior: Ring
    holes: Tuple[Ring, ...] = ()

    def __post_init__(self):
        exterior = self.exterior if isinstance(self.exterior, Ring) else Ring(self.exterior)
        holes = tuple(hole if isinstance(hole, Ring) else Ring(hole) for hole in self.holes)
        object.__setattr__(self, 'exterior', exterior)
        object.__setattr__(self, 'holes', holes)

    @property
    def rings(self) -> Tuple[Ring, ...]:
        return (self.exterior,) + self.holes


@dataclass(frozen=True, eq=False)
class MultiPolygon:
    polygons: Tuple[Polygon, ...]

    def __post_init__(self):
        polygons = tuple(
            polygon if isinstance(polygon, Polygon) else Polygon(polygon[0], tuple(polygon[1:]))
            for polygon in self.polygons
        )
        object.__setattr__(self, 'polygons', polygons)

    def __len__(self) -> int:
        return len(self.polygons)


@dataclass(frozen=True, eq=False)
class Collection:
    """Heterogeneous sequence of geometries, nested collections allowed."""

    geometries: Tuple['Geometry', ...]

    def __post_init__(self):
        object.__setattr__(self, 'geometries', tuple(self.geometries))

    def __len__(self) -> int:
        return len(self.geometries)


@dataclass(frozen=True)
class Bound:
    """
    Axis-aligned rectangle.

    Zero width or height is allowed; ``min`` must not exceed ``max`` in
    either component.
    """

    min: Point
    max: Point

    def __post_init__(self):
        lo = self.min if isinstance(self.min, Point) else Point(*self.min)
        hi = self.max if isinstance(self.max, Point) else Point(*self.max)
        if lo.x > hi.x or lo.y > hi.y:
            raise ValueError(f"Bound min {tuple(lo)} exceeds max {tuple(hi)}")
        object.__setattr__(self, 'min', lo)
        object.__setattr__(self, 'max', hi)

    @classmethod
    def from_coords(cls, coords) -> 'Bound':
        """Smallest bound containing every coordinate."""
        coords = as_coords(coords)
        if len(coords) == 0:
            raise EmptyGeometryError("Cannot bound an empty coordinate set")
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return cls(Point(lo[0], lo[1]), Point(hi[0], hi[1]))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


Geometry = Union[
    Point, MultiPoint, LineString, MultiLineString, Ring,
    Polygon, MultiPolygon, Collection, Bound,
]


class CentroidArea(NamedTuple):
    """Centroid and area of a geometry."""

    centroid: Point
    area: float


def _shapely_coords(geom) -> np.ndarray:
    # Drop any z values
    return np.asarray(geom.coords, dtype=np.float64)[:, :2]


def from_shapely(geom: BaseGeometry) -> Geometry:
    """
    Convert a Shapely geometry to the matching native variant.

    Parameters
    ----------
    geom : BaseGeometry
        Any Shapely Point, MultiPoint, LineString, LinearRing, Polygon,
        MultiLineString, MultiPolygon or GeometryCollection.

    Returns
    -------
    Geometry
        Native variant with the same coordinates. Z values are dropped.
        Polygon rings keep the closing vertex Shapely adds, which does not
        change their measurement.
    """
    if not isinstance(geom, BaseGeometry):
        raise UnsupportedGeometryError(geom)
    if geom.is_empty:
        raise EmptyGeometryError(f"Empty {geom.geom_type} has no centroid")

    if isinstance(geom, ShapelyPoint):
        return Point(geom.x, geom.y)
    if isinstance(geom, ShapelyMultiPoint):
        return MultiPoint([(p.x, p.y) for p in geom.geoms])
    # LinearRing subclasses LineString, so it must be checked first
    if isinstance(geom, LinearRing):
        return Ring(_shapely_coords(geom))
    if isinstance(geom, ShapelyLineString):
        return LineString(_shapely_coords(geom))
    if isinstance(geom, ShapelyPolygon):
        return Polygon(
            Ring(_shapely_coords(geom.exterior)),
            tuple(Ring(_shapely_coords(interior)) for interior in geom.interiors),
        )
    if isinstance(geom, ShapelyMultiLineString):
        return MultiLineString([LineString(_shapely_coords(line)) for line in geom.geoms])
    if isinstance(geom, ShapelyMultiPolygon):
        return MultiPolygon([from_shapely(polygon) for polygon in geom.geoms if not polygon.is_empty])
    if isinstance(geom, GeometryCollection):
        return Collection([from_shapely(member) for member in geom.geoms if not member.is_empty])

    raise UnsupportedGeometryError(geom)
