from typing import List, MutableSequence, Sequence, Tuple

import numpy as np

X_AXIS = 0
Y_AXIS = 1


class Partitioner:
    """
    In-place quickselect over a list of point ids.

    The ids are rearranged, the coordinates are only read. ``axis`` picks
    which coordinate is compared: 0 -> x, 1 -> y.
    """

    def __init__(self, xs: Sequence[float], ys: Sequence[float]):
        # plain lists, indexing a numpy array element by element is slow
        self._coords: Tuple[List[float], List[float]] = (
            np.asarray(xs, dtype=float).tolist(),
            np.asarray(ys, dtype=float).tolist(),
        )

    def select(self, ids: MutableSequence[int], lo: int, hi: int, k: int, axis: int) -> Tuple[int, int]:
        """
        Quickselect with three-way partitioning.

        参数
        ----
        ids : list[int]
            point ids, ids[lo..hi] is rearranged in place
        lo, hi : int
            inclusive bounds, lo <= hi
        k : int
            target rank (a position in [lo, hi])
        axis : int
            0 compares x, 1 compares y

        返回
        ----
        (left, right) : (int, int)
            inclusive range of positions whose value equals the k-th smallest
            value; lo <= left <= k <= right <= hi. Everything before ``left``
            is strictly smaller, everything after ``right`` strictly larger.
        """
        start, end = lo, hi
        while start <= end:
            left, right = self.three_way_partition(ids, start, end, axis)
            if left <= k <= right:
                return left, right
            if k < left:
                end = left - 1
            else:
                start = right + 1
        return start, start

    def three_way_partition(self, ids: MutableSequence[int], lo: int, hi: int, axis: int) -> Tuple[int, int]:
        """
        Dutch-flag partition of ids[lo..hi] into < pivot, == pivot, > pivot.
        Returns the inclusive range [lt, gt] of the == zone.
        """
        coord = self._coords[axis]
        mid = (lo + hi) // 2
        pivot_pos = self.median_of_three(ids, lo, mid, hi, axis)
        pivot = coord[ids[pivot_pos]]

        # lt: first position of the == zone
        # gt: last position before the > zone
        # i : scan cursor
        lt, i, gt = lo, lo, hi
        while i <= gt:
            v = coord[ids[i]]
            if v < pivot:
                ids[lt], ids[i] = ids[i], ids[lt]
                lt += 1
                i += 1
            elif v > pivot:
                ids[i], ids[gt] = ids[gt], ids[i]
                gt -= 1
            else:
                i += 1
        return lt, gt

    def median_of_three(self, ids: Sequence[int], a: int, b: int, c: int, axis: int) -> int:
        """
        Return whichever of the positions a, b, c holds the median value.

        e.g. ids = [0..6], xs = [8, 1, 5, 3, 7, 2, 4], a=0, b=3, c=6
        -> values 8, 3, 4 -> returns c (6).
        """
        coord = self._coords[axis]
        va, vb, vc = coord[ids[a]], coord[ids[b]], coord[ids[c]]
        if va < vb:
            if vb < vc:
                return b      # va < vb < vc
            if va < vc:
                return c      # va < vc <= vb
            return a          # vc <= va < vb
        if va < vc:
            return a          # vb <= va < vc
        if vb < vc:
            return c          # vb < vc <= va
        return b              # vc <= vb <= va
