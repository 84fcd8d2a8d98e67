import heapq
import warnings
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from spatial.KDTree.errors import InvalidArgument, InvalidInput
from spatial.KDTree.partition import Partitioner

DEFAULT_MAX_DEPTH = 10


class KDNode:
    """
    One node of the 2D tree.

    ids   : tuple of point ids. Internal nodes hold exactly one id (the split
            marker), a leaf at the depth cutoff may hold a whole batch.
    depth : split axis is depth % 2 (0 -> x, 1 -> y)
    """
    __slots__ = ("ids", "depth", "left", "right")

    def __init__(self, ids: Tuple[int, ...], depth: int):
        self.ids = ids
        self.depth = depth
        self.left: Optional["KDNode"] = None
        self.right: Optional["KDNode"] = None

    @property
    def axis(self) -> int:
        return self.depth % 2

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        flag = 'leaf' if self.is_leaf() else 'internal'
        return f"<KDNode ids={list(self.ids)} depth={self.depth} {flag}>"


class KDTree2D:
    """
    Static 2D k-d tree over the points (xs[i], ys[i]).

    The coordinate arrays are copied and frozen, nodes only store point ids.
    Use ``KDTree2D.build`` (or the module level ``build``) to construct one.
    """

    def __init__(self, xs: np.ndarray, ys: np.ndarray, max_depth: int, root: Optional[KDNode]):
        self.xs = xs
        self.ys = ys
        self.max_depth = max_depth
        self._root = root
        # list copies for the query loop, never mutated
        self._coords = (xs.tolist(), ys.tolist())

    # ----------------------------------------------------------
    # Construction
    # ----------------------------------------------------------
    @classmethod
    def build(cls, xs: Optional[Sequence[float]], ys: Optional[Sequence[float]],
              max_depth: int = DEFAULT_MAX_DEPTH) -> "KDTree2D":
        """
        Build a balanced tree by recursive median partitioning.

        Raises InvalidInput if xs / ys is None, not one-dimensional, of
        different length or contains NaN, or if max_depth < 1.
        """
        if xs is None or ys is None:
            raise InvalidInput("coordinate arrays must not be None")
        xs = np.array(xs, dtype=float)
        ys = np.array(ys, dtype=float)
        if xs.ndim != 1 or ys.ndim != 1:
            raise InvalidInput(f"coordinate arrays must be 1-D, got shapes {xs.shape} and {ys.shape}")
        if len(xs) != len(ys):
            raise InvalidInput(f"coordinate arrays differ in length: {len(xs)} != {len(ys)}")
        if np.isnan(xs).any() or np.isnan(ys).any():
            raise InvalidInput("coordinates must not contain NaN")
        if max_depth < 1:
            raise InvalidInput(f"max_depth must be >= 1, got {max_depth}")
        xs.setflags(write=False)
        ys.setflags(write=False)

        partitioner = Partitioner(xs, ys)
        indices = list(range(len(xs)))

        def build_rec(start: int, end: int, depth: int) -> Optional[KDNode]:
            if start > end:
                return None

            # depth cutoff: the remaining points become one unsplit leaf
            if depth >= max_depth - 1:
                return KDNode(tuple(indices[start:end + 1]), depth)

            # 1) median on this depth's axis
            mid = (start + end) // 2
            partitioner.select(indices, start, end, mid, depth % 2)

            # 2) only the element at mid is kept, ties go to the children by position
            node = KDNode((indices[mid],), depth)
            node.left = build_rec(start, mid - 1, depth + 1)
            node.right = build_rec(mid + 1, end, depth + 1)
            return node

        root = build_rec(0, len(indices) - 1, 0)
        return cls(xs, ys, max_depth, root)

    # ----------------------------------------------------------
    # k nearest neighbours
    # ----------------------------------------------------------
    def k_nearest(self, x: float, y: float, k: int) -> List[int]:
        """
        Return the ids of the k points closest to (x, y), nearest first.

        k <= 0 raises InvalidArgument. A k larger than the point count is
        clamped (with a RuntimeWarning) and every point is returned.
        Equal distances come back in no particular order.
        """
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise InvalidArgument(f"k must be an integer, got {k!r}")
        if k <= 0:
            raise InvalidArgument(f"k must be positive, got {k}")
        n = len(self)
        if k > n:
            warnings.warn(f"k={k} exceeds the point count {n}; returning all points.",
                          RuntimeWarning, stacklevel=2)
            k = n
        if k == 0:
            return []

        qx, qy = float(x), float(y)
        q = (qx, qy)
        coords = self._coords
        # max-heap of (-dist2, id), capacity k; local to this call
        heap: List[Tuple[float, int]] = []

        def offer(i: int) -> None:
            dx = coords[0][i] - qx
            dy = coords[1][i] - qy
            d2 = dx * dx + dy * dy
            if len(heap) < k:
                heapq.heappush(heap, (-d2, i))
            elif d2 < -heap[0][0]:
                heapq.heapreplace(heap, (-d2, i))

        def search(node: Optional[KDNode]) -> None:
            if node is None:
                return
            for i in node.ids:
                offer(i)
            if node.is_leaf():
                return

            axis = node.axis
            split = coords[axis][node.ids[0]]
            diff = q[axis] - split
            if diff < 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            search(near)
            # the far side can only help if the split line is within the current k-th best
            if len(heap) == k and diff * diff > -heap[0][0]:
                return
            search(far)

        search(self._root)

        result = []
        while heap:
            result.append(heapq.heappop(heap)[1])
        result.reverse()
        return result

    # ----------------------------------------------------------
    # Inspection
    # ----------------------------------------------------------
    @property
    def root(self) -> Optional[KDNode]:
        return self._root

    def __len__(self):
        return len(self.xs)

    def point(self, i: int) -> Tuple[float, float]:
        return float(self.xs[i]), float(self.ys[i])

    def iter_nodes(self) -> Iterator[KDNode]:
        """Preorder walk over all nodes."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def height(self) -> int:
        """Number of levels, 0 for an empty tree."""
        def h(node):
            if node is None:
                return 0
            return 1 + max(h(node.left), h(node.right))
        return h(self._root)

    def __repr__(self):
        return f"KDTree2D(n={len(self)}, max_depth={self.max_depth}, height={self.height()})"


def build(xs: Optional[Sequence[float]], ys: Optional[Sequence[float]],
          max_depth: int = DEFAULT_MAX_DEPTH) -> KDTree2D:
    return KDTree2D.build(xs, ys, max_depth)
