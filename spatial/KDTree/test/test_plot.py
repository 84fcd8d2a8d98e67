# spatial/KDTree/test/test_plot.py

import unittest

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from spatial.KDTree.kdtree import KDTree2D
from spatial.KDTree.plot import draw_kdtree
from spatial.PointDistribution import generate_uniform_points


class TestDrawKDTree(unittest.TestCase):

    def tearDown(self):
        plt.close("all")

    def test_draws_one_segment_per_internal_node(self):
        xs, ys = generate_uniform_points(50, seed=0)
        tree = KDTree2D.build(xs, ys, 4)
        neighbors = tree.k_nearest(50.0, 50.0, 5)

        ax = draw_kdtree(tree, query=(50.0, 50.0), neighbors=neighbors, show=False)

        internal = sum(1 for n in tree.iter_nodes() if not n.is_leaf())
        # split segments + all points + neighbours + query
        self.assertEqual(len(ax.lines), internal + 3)
        self.assertIn("n=50", ax.get_title())

    def test_existing_axes_and_empty_tree(self):
        fig, ax = plt.subplots()
        tree = KDTree2D.build([], [])

        self.assertIs(draw_kdtree(tree, ax=ax, show=False), ax)
        self.assertEqual(len(ax.lines), 0)


if __name__ == "__main__":
    unittest.main()
