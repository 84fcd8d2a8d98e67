import matplotlib.pyplot as plt

from spatial.KDTree.kdtree import KDTree2D


def draw_kdtree(tree: KDTree2D, query=None, neighbors=None, ax=None, show=True):
    """
    利用 matplotlib 绘制 k-d 树的划分：所有点、每个内部节点的分割线
    (裁剪到该节点的单元格内)，以及可选的查询点和它的近邻。

    query     : (x, y) or None
    neighbors : ids returned by k_nearest, highlighted in red
    Returns the Axes.
    """
    if ax is None:
        plt.figure()
        ax = plt.gca()

    if len(tree) == 0:
        if show:
            plt.show()
        return ax

    xs, ys = tree.xs, tree.ys
    min_x, max_x = float(xs.min()), float(xs.max())
    min_y, max_y = float(ys.min()), float(ys.max())
    pad = max(max_x - min_x, max_y - min_y, 1.0) * 0.05
    bounds = (min_x - pad, max_x + pad, min_y - pad, max_y + pad)

    def draw_node(node, x0, x1, y0, y1):
        if node is None or node.is_leaf():
            return
        px, py = tree.point(node.ids[0])
        if node.axis == 0:
            ax.plot([px, px], [y0, y1], 'b-', lw=1)
            draw_node(node.left, x0, px, y0, y1)
            draw_node(node.right, px, x1, y0, y1)
        else:
            ax.plot([x0, x1], [py, py], 'g-', lw=1)
            draw_node(node.left, x0, x1, y0, py)
            draw_node(node.right, x0, x1, py, y1)

    draw_node(tree.root, *bounds)

    ax.plot(xs, ys, 'ko', ms=3)
    if neighbors:
        ax.plot([xs[i] for i in neighbors], [ys[i] for i in neighbors], 'ro', ms=6)
    if query is not None:
        ax.plot(query[0], query[1], 'm*', ms=12)

    ax.set_xlim(bounds[0], bounds[1])
    ax.set_ylim(bounds[2], bounds[3])
    ax.set_aspect('equal')
    ax.set_title(f"KDTree2D n={len(tree)} height={tree.height()}")
    if show:
        plt.show()
    return ax
