# spatial/test/test_point_distribution.py

import unittest

import numpy as np

from spatial.PointDistribution import (generate_clustered_points, generate_grid_points,
                                       generate_uniform_points)


class TestPointDistribution(unittest.TestCase):

    def test_uniform_in_range_and_seeded(self):
        xs, ys = generate_uniform_points(100, x_range=(0, 1), y_range=(5, 6), seed=1)
        self.assertEqual(xs.shape, (100,))
        self.assertTrue(np.all((xs >= 0) & (xs <= 1)))
        self.assertTrue(np.all((ys >= 5) & (ys <= 6)))

        xs2, ys2 = generate_uniform_points(100, x_range=(0, 1), y_range=(5, 6), seed=1)
        np.testing.assert_array_equal(xs, xs2)
        np.testing.assert_array_equal(ys, ys2)

    def test_clustered_clipped(self):
        xs, ys = generate_clustered_points(300, 3, x_range=(5, 15), y_range=(0, 7.5),
                                           std_dev=2.0, seed=3)
        self.assertEqual(len(xs), 300)
        self.assertTrue(np.all((xs >= 5) & (xs <= 15)))
        self.assertTrue(np.all((ys >= 0) & (ys <= 7.5)))

    def test_grid_has_duplicates(self):
        xs, ys = generate_grid_points(100, step=3, seed=2)
        self.assertLessEqual(len(set(xs.tolist())), 3)
        self.assertLessEqual(len(set(zip(xs.tolist(), ys.tolist()))), 9)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            generate_uniform_points(-1)
        with self.assertRaises(ValueError):
            generate_clustered_points(10, 0)
        with self.assertRaises(ValueError):
            generate_grid_points(-5)

    def test_zero_points(self):
        xs, ys = generate_uniform_points(0)
        self.assertEqual(len(xs), 0)
        self.assertEqual(len(ys), 0)


if __name__ == "__main__":
    unittest.main()
