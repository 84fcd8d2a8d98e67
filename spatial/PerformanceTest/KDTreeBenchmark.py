import math
import time

import numpy as np
import pandas as pd
from scipy.spatial import cKDTree

from spatial.KDTree.kdtree import KDTree2D
from spatial.PointDistribution import generate_uniform_points


def benchmark_kdtree(ns, k=8, queries=100, max_depth=None, seed=42,
                     csv_filename="kdtree_benchmark_results.csv"):
    """
    Time KDTree2D build / k_nearest against scipy's cKDTree for every n in ns.

    Every query is cross-checked: both trees must report the same k smallest
    distances, otherwise RuntimeError. max_depth=None uses ceil(log2(n+1)) + 1,
    i.e. enough levels for one point per node.
    """
    results = []
    rng = np.random.default_rng(seed)

    for n in ns:
        if n < 1:
            raise ValueError(f"benchmark sizes must be >= 1, got {n}")
        xs, ys = generate_uniform_points(n, seed=seed)
        qs = rng.uniform(0.0, 100.0, size=(queries, 2))
        depth = max_depth if max_depth is not None else math.ceil(math.log2(n + 1)) + 1
        k_eff = min(k, n)

        # 1) build
        start = time.perf_counter()
        tree = KDTree2D.build(xs, ys, depth)
        build_s = time.perf_counter() - start

        start = time.perf_counter()
        ref = cKDTree(np.column_stack((xs, ys)))
        ref_build_s = time.perf_counter() - start

        # 2) query
        start = time.perf_counter()
        found = [tree.k_nearest(qx, qy, k_eff) for qx, qy in qs]
        query_s = time.perf_counter() - start

        start = time.perf_counter()
        ref_d, _ = ref.query(qs, k=k_eff)
        ref_query_s = time.perf_counter() - start
        ref_d = np.asarray(ref_d).reshape(len(qs), k_eff)

        # 3) same distances as the reference
        for (qx, qy), ids, expected in zip(qs, found, ref_d):
            got = np.hypot(xs[ids] - qx, ys[ids] - qy)
            if not np.allclose(got, expected):
                raise RuntimeError(f"k_nearest mismatch at n={n}, query=({qx}, {qy})")

        print(f"n={n}: build {build_s:.6f}s (cKDTree {ref_build_s:.6f}s), "
              f"{queries} queries {query_s:.6f}s (cKDTree {ref_query_s:.6f}s)")
        results.append({
            "n": n,
            "max_depth": depth,
            "height": tree.height(),
            "build_s": build_s,
            "query_s": query_s,
            "ckdtree_build_s": ref_build_s,
            "ckdtree_query_s": ref_query_s,
        })

    df = pd.DataFrame(results)
    if csv_filename:
        df.to_csv(csv_filename, index=False)
        print(f"Benchmark results saved to {csv_filename}")
    return df


if __name__ == "__main__":
    ns = [100, 1000, 5000, 10000, 50000, 100000, 300000]
    benchmark_kdtree(ns)
