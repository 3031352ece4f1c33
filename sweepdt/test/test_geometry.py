# tests/test_geometry.py

import unittest

import numpy as np

from sweepdt.primitives.vertex import Vertex
from sweepdt.primitives.triangle import Triangle
from sweepdt.primitives.geometry import (
    DegenerateTriangleError, bounding_box, super_triangle, circumcircle,
    circumcircles_batch, orientation
)


class TestBoundingBox(unittest.TestCase):

    def test_extent(self):
        pts = [(1.0, 5.0), (-2.0, 3.0), (4.0, -1.0)]
        self.assertEqual(bounding_box(pts), (-2.0, -1.0, 4.0, 5.0))

    def test_accepts_vertices_and_arrays(self):
        self.assertEqual(bounding_box([Vertex(0, 0), Vertex(2, 1)]), (0.0, 0.0, 2.0, 1.0))
        self.assertEqual(bounding_box(np.array([[0.0, 0.0], [2.0, 1.0]])), (0.0, 0.0, 2.0, 1.0))

    def test_empty(self):
        with self.assertRaises(ValueError):
            bounding_box([])


class TestSuperTriangle(unittest.TestCase):

    def test_corners(self):
        st = super_triangle([(0.0, 0.0), (2.0, 1.0)])
        self.assertEqual(st, [(-39.0, -1.5), (1.0, 40.5), (41.0, -1.5)])

    def test_scale_is_configurable(self):
        st = super_triangle([(0.0, 0.0), (2.0, 1.0)], scale=2)
        self.assertEqual(st, [(-3.0, -1.5), (1.0, 4.5), (5.0, -1.5)])

    def test_strictly_encloses_points(self):
        rng = np.random.default_rng(3)
        pts = rng.random((50, 2)) * [300.0, 20.0] - 100.0
        a, b, c = super_triangle(pts)
        # a, b, c 为顺时针，内部点在每条边的右侧
        for p in pts:
            self.assertLess(orientation(a, b, p), 0)
            self.assertLess(orientation(b, c, p), 0)
            self.assertLess(orientation(c, a, p), 0)


class TestCircumcircle(unittest.TestCase):

    def assertOnCircle(self, pts, t):
        for idx in t.indices:
            x, y = pts[idx]
            d2 = (x - t.x) ** 2 + (y - t.y) ** 2
            self.assertLessEqual(abs(d2 - t.r), 1e-9 * max(1.0, t.r))

    def test_general_position(self):
        pts = [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0)]
        t = circumcircle(pts, 0, 1, 2)
        self.assertAlmostEqual(t.x, 0.0)
        self.assertAlmostEqual(t.y, 0.0)
        self.assertAlmostEqual(t.r, 1.0)
        self.assertEqual(t.indices, (0, 1, 2))

    def test_first_edge_horizontal(self):
        pts = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
        t = circumcircle(pts, 0, 1, 2)
        self.assertAlmostEqual(t.x, 2.0)
        self.assertAlmostEqual(t.y, 2.0)
        self.assertAlmostEqual(t.r, 8.0)

    def test_second_edge_horizontal(self):
        pts = [(0.0, 4.0), (0.0, 0.0), (4.0, 0.0)]
        t = circumcircle(pts, 0, 1, 2)
        self.assertAlmostEqual(t.x, 2.0)
        self.assertAlmostEqual(t.y, 2.0)
        self.assertAlmostEqual(t.r, 8.0)

    def test_radius_is_squared(self):
        pts = [(0.0, 0.0), (6.0, 0.0), (3.0, 3.0)]
        t = circumcircle(pts, 0, 1, 2)
        self.assertAlmostEqual(t.r, 9.0)

    def test_random_triangles_are_on_circle(self):
        rng = np.random.default_rng(11)
        pts = rng.random((30, 2)) * 100
        for s in range(0, 30, 3):
            self.assertOnCircle(pts, circumcircle(pts, s, s + 1, s + 2))

    def test_horizontal_colinear_fails(self):
        pts = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
        with self.assertRaises(DegenerateTriangleError):
            circumcircle(pts, 0, 1, 2)

    def test_within_epsilon_counts_as_aligned(self):
        pts = [(0.0, 0.0), (1.0, 1e-7), (2.0, -1e-7)]
        with self.assertRaises(DegenerateTriangleError):
            circumcircle(pts, 0, 1, 2)
        # 容差放小以后可以算
        circumcircle(pts, 0, 1, 2, epsilon=1e-9)

    def test_parallel_bisectors_fail(self):
        pts = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]
        with self.assertRaises(DegenerateTriangleError):
            circumcircle(pts, 0, 1, 2)

    def test_error_is_value_error(self):
        self.assertTrue(issubclass(DegenerateTriangleError, ValueError))


class TestCircumcirclesBatch(unittest.TestCase):

    def test_matches_circumcircle(self):
        pts = np.array([(1, 0), (0, 1), (-1, 0), (0, 0), (6, 0), (3, 3)], dtype=float)
        centers, r2 = circumcircles_batch(pts, [0, 1, 2, 3, 4, 5])
        self.assertEqual(centers.shape, (2, 2))
        np.testing.assert_allclose(centers, [[0.0, 0.0], [3.0, 0.0]], atol=1e-12)
        np.testing.assert_allclose(r2, [1.0, 9.0])
        t = circumcircle(pts, 3, 4, 5)
        self.assertAlmostEqual(r2[1], t.r)

    def test_small_triangle_far_from_origin(self):
        pts = np.array([(1, 0), (0, 1), (-1, 0)], dtype=float) * 1e-3 + 1e6
        centers, r2 = circumcircles_batch(pts, [[0, 1, 2]])
        np.testing.assert_allclose(centers[0], [1e6, 1e6], rtol=0, atol=1e-8)
        np.testing.assert_allclose(r2, [1e-6], rtol=1e-5)

    def test_colinear_is_nan(self):
        centers, r2 = circumcircles_batch([(0, 0), (1, 1), (2, 2)], [0, 1, 2])
        self.assertTrue(np.isnan(r2[0]))
        self.assertTrue(np.isnan(centers[0]).all())

    def test_bad_index_length(self):
        with self.assertRaises(ValueError):
            circumcircles_batch([(0, 0), (1, 0), (0, 1)], [0, 1, 2, 0])


class TestPrimitives(unittest.TestCase):

    def test_triangle_is_immutable(self):
        t = Triangle(0, 1, 2, 0.5, 0.5, 0.5)
        with self.assertRaises(AttributeError):
            t.r = 1.0
        self.assertFalse(t.touches_super(3))
        self.assertTrue(t.touches_super(2))

    def test_vertex(self):
        v = Vertex(0.5, 0.3)
        self.assertEqual(v, Vertex(0.5, 0.3))
        self.assertEqual(tuple(v), (0.5, 0.3))
        self.assertEqual(v[1], 0.3)
        with self.assertRaises(AttributeError):
            v.x = 1.0

    def test_orientation(self):
        self.assertGreater(orientation((0, 0), (1, 0), (0, 1)), 0)
        self.assertLess(orientation((0, 0), (0, 1), (1, 0)), 0)
        self.assertEqual(orientation((0, 0), (1, 1), (2, 2)), 0)


if __name__ == "__main__":
    unittest.main()
