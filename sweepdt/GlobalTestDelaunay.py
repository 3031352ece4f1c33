import numpy as np
from scipy.spatial import ConvexHull

from sweepdt.config import EPSILON
from sweepdt.primitives.geometry import circumcircles_batch, orientation


def GlobalTestDelaunay(vertices, triangles, epsilon=EPSILON, verbose=True):
    """
    全局空圆检查：任一三角形的外接圆内（扣除容差）都不能有其他输入点。

    vertices : (x, y) 序列
    triangles : calc_delaunay_triangulation 的扁平下标列表
    """
    pts = np.asarray([(v[0], v[1]) for v in vertices], dtype=float)
    tris = np.asarray(triangles, dtype=int).reshape(-1, 3)
    if len(tris) == 0:
        return True

    centers, r2 = circumcircles_batch(pts, tris)
    for t, (center, radius2) in enumerate(zip(centers, r2)):
        d2 = ((pts - center) ** 2).sum(axis=1)
        d2[tris[t]] = np.inf
        inside = np.nonzero(d2 < radius2 - epsilon)[0]
        if len(inside):
            if verbose:
                A, B, C = tris[t]
                print("Triangle:", A, "", B, "", C, "are INCLUDE a Point:",
                      inside[0], radius2 - d2[inside[0]])
            return False
    return True


def hull_point_count(vertices):
    """凸包顶点数（共线的边界点不计入）"""
    pts = np.asarray([(v[0], v[1]) for v in vertices], dtype=float)
    return len(ConvexHull(pts).vertices)


def expected_triangle_count(vertices):
    """一般位置点集的三角形个数：t = 2n - 2 - h"""
    n = len(vertices)
    return 2 * n - 2 - hull_point_count(vertices)


def triangle_area_sum(vertices, triangles):
    total = 0.0
    for a, b, c in np.asarray(triangles, dtype=int).reshape(-1, 3):
        total += abs(orientation(vertices[a], vertices[b], vertices[c])) / 2.0
    return total
