import numpy as np


def generate_uniform_points(n, x_range=(0.0, 100.0), y_range=(0.0, 100.0), seed=None):
    """
    在矩形 x_range × y_range 内均匀生成 n 个点。

    返回
    ----
    (xs, ys) : 两个长度为 n 的 numpy 数组
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    rng = np.random.default_rng(seed)
    xs = rng.uniform(x_range[0], x_range[1], size=n)
    ys = rng.uniform(y_range[0], y_range[1], size=n)
    return xs, ys


def generate_clustered_points(n, k,
                              x_range=(5.0, 15.0),
                              y_range=(0.0, 7.5),
                              std_dev=0.5,
                              seed=None):
    """
    Generate n points around k random cluster centres (normal noise,
    clipped to the rectangle).

    参数
    ----
    n : int
        总共生成的点数
    k : int
        簇数
    std_dev : float
        每个簇的标准差
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    rng = np.random.default_rng(seed)

    # 1) cluster centres
    cx = rng.uniform(x_range[0], x_range[1], size=k)
    cy = rng.uniform(y_range[0], y_range[1], size=k)

    # 2) cluster of each point
    labels = rng.integers(0, k, size=n)

    # 3) noise around the centre, clipped to the range
    xs = np.clip(cx[labels] + rng.normal(0.0, std_dev, size=n), x_range[0], x_range[1])
    ys = np.clip(cy[labels] + rng.normal(0.0, std_dev, size=n), y_range[0], y_range[1])
    return xs, ys


def generate_grid_points(n, step=4, seed=None):
    """
    n points drawn from a small integer lattice {0..step-1}², so most
    coordinates repeat many times. Useful for duplicate handling.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    rng = np.random.default_rng(seed)
    xs = rng.integers(0, step, size=n).astype(float)
    ys = rng.integers(0, step, size=n).astype(float)
    return xs, ys


# === 使用示例 ===
if __name__ == "__main__":
    import matplotlib.pyplot as plt

    xs, ys = generate_clustered_points(500, 4, std_dev=0.8, seed=42)
    plt.figure(figsize=(6, 4))
    plt.scatter(xs, ys, s=15, alpha=0.6)
    plt.title("4 clusters, n=500")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.tight_layout()
    plt.show()
