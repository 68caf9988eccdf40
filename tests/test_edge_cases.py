"""
Edge case tests for centroid and area computation.

Tests cover:
1. Shapes far from the origin relative to their size
2. Self-intersecting rings (measured, not rejected)
3. Degenerate shapes and their fallbacks
4. Debug logging of fallbacks
5. Concurrent use on independent inputs
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from shapely.geometry import Polygon as ShapelyPolygon

from planar_measure.core.geometry import EPS
from planar_measure import (
    Bound,
    Collection,
    LineString,
    Point,
    Polygon,
    Ring,
    centroid_area,
)


def naive_shoelace_area(coords):
    """Shoelace area summed on absolute coordinates, for comparison."""
    coords = np.asarray(coords, dtype=float)
    x = coords[:, 0]
    y = coords[:, 1]
    return 0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)


class TestFarFromOrigin:
    """Small shapes with very large absolute coordinates."""

    def test_small_square_at_1e15(self):
        """Unit-scale square offset by 1e15 keeps its exact area."""
        coords = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float) + 1e15
        c, a = centroid_area(Ring(coords))
        assert a == 1.0
        assert c == Point(1e15 + 0.5, 1e15 + 0.5)

    def test_beats_naive_sum(self):
        """Summing absolute products loses the area entirely at this offset."""
        coords = np.array([[0, 0], [3, 0], [3, 2], [0, 2]], dtype=float) + [4e15, -4e15]
        _, a = centroid_area(Ring(coords))
        assert a == 6.0
        assert naive_shoelace_area(coords) != 6.0

    def test_polygon_with_hole_far_away(self):
        """Hole composition stays accurate when both rings are offset."""
        offset = np.array([1e8, 1e8])
        outer = np.array([(0, 0), (4, 0), (4, 3), (0, 3)], dtype=float) + offset
        hole = np.array([(2, 1), (3, 1), (3, 2), (2, 2)], dtype=float) + offset

        c, a = centroid_area(Polygon(Ring(outer), (Ring(hole),)))
        assert a == 11
        assert c.x == pytest.approx(21.5 / 11.0 + 1e8, abs=1e-7)
        assert c.y == pytest.approx(1.5 + 1e8, abs=1e-7)

    def test_tiny_shape(self):
        """Very small rings are not flushed to zero."""
        coords = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float) * 1e-100
        c, a = centroid_area(Ring(coords))
        assert a == pytest.approx(1e-200, rel=1e-12)
        assert c.x == pytest.approx(0.5e-100, rel=1e-12)


class TestSelfIntersecting:
    """Self-intersecting rings are measured by the shoelace sum as given."""

    def test_bowtie_cancels(self):
        """Two equal lobes of opposite winding sum to zero area."""
        c, a = centroid_area(Ring([(0, 0), (2, 2), (2, 0), (0, 2)]))
        assert a == 0.0
        assert c == Point(1, 1)

    def test_unequal_bowtie(self):
        """Unequal lobes give the difference of their signed areas."""
        ring = [(0, 0), (2, 2), (2, 0), (0, 4)]
        _, a = centroid_area(Ring(ring))
        assert a == pytest.approx(naive_shoelace_area(ring), abs=EPS)


class TestDegenerate:
    """Degenerate input returns fallbacks, not errors."""

    def test_collinear_ring(self):
        c, a = centroid_area(Ring([(0, 0), (1, 1), (3, 3)]))
        assert a == 0.0
        assert np.isfinite(c.x) and np.isfinite(c.y)
        assert c == Point(4 / 3, 4 / 3)

    def test_all_same_vertex(self):
        c, a = centroid_area(Ring([(2, 5), (2, 5), (2, 5), (2, 5)]))
        assert a == 0.0
        assert c == Point(2, 5)

    def test_polygon_with_collinear_outer(self):
        c, a = centroid_area(Polygon(Ring([(0, 0), (1, 0), (2, 0)])))
        assert a == 0.0
        assert c == Point(1, 0)

    def test_single_vertex_line(self):
        c, a = centroid_area(LineString([(7, 8)]))
        assert a == 0.0
        assert c == Point(7, 8)

    def test_collection_of_degenerate_bounds(self):
        collection = Collection([Bound(Point(0, 0), Point(0, 0)), Bound(Point(2, 2), Point(2, 2))])
        c, a = centroid_area(collection)
        assert a == 0.0
        assert c == Point(1, 1)


class TestLogging:
    """Fallbacks are reported at debug level."""

    def test_zero_area_ring_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="planar_measure"):
            centroid_area(Ring([(0, 0), (1, 0), (2, 0)]))
        assert any("zero area" in record.getMessage() for record in caplog.records)

    def test_short_ring_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="planar_measure"):
            centroid_area(Ring([(0, 0), (1, 0)]))
        assert any("effective vertices" in record.getMessage() for record in caplog.records)

    def test_regular_ring_silent(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="planar_measure"):
            centroid_area(Ring([(0, 0), (1, 0), (1, 1)]))
        assert not caplog.records


class TestConcurrency:
    """Independent inputs can be measured from many threads."""

    def test_thread_pool(self):
        np.random.seed(42)
        shapes = []
        for _ in range(50):
            angles = np.sort(np.random.uniform(0, 2 * np.pi, 12))
            radii = np.random.uniform(1, 3, 12)
            center = np.random.uniform(-1e6, 1e6, 2)
            coords = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)]) + center
            shapes.append(coords)

        expected = [centroid_area(Ring(coords)) for coords in shapes]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda coords: centroid_area(Ring(coords)), shapes))

        assert results == expected

    def test_star_shapes_match_shapely(self):
        """Random star-shaped rings agree with Shapely."""
        np.random.seed(7)
        for _ in range(20):
            angles = np.sort(np.random.uniform(0, 2 * np.pi, 9))
            radii = np.random.uniform(1, 3, 9)
            coords = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
            expected = ShapelyPolygon(coords)

            c, a = centroid_area(Ring(coords))
            assert a == pytest.approx(expected.area, rel=1e-9)
            assert c.x == pytest.approx(expected.centroid.x, abs=1e-9)
            assert c.y == pytest.approx(expected.centroid.y, abs=1e-9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
